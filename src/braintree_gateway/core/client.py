"""
Resource operations against the Braintree gateway.

Each operation encodes its request, sends it, and branches on the status
code: the expected status decodes into a record, anything else becomes an
:class:`~braintree_gateway.core.errors.ApiError`.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, Optional, Tuple, Type, TypeVar, Union
from urllib.parse import quote
from xml.etree.ElementTree import Element

import requests

from .codec import decode, encode
from .config import GatewayConfig
from .credentials import Credentials, Environment
from .errors import ApiError, MalformedDocument, TestOperationInProduction
from .records import (
    ClientToken,
    ClientTokenRequest,
    Customer,
    ErrorResponse,
    RefundRequest,
    Subscription,
    SubscriptionRequest,
    Transaction,
    TransactionRequest,
)
from .response import read_document
from .transport import Transport

__all__ = [
    "BraintreeGateway",
    "ClientTokenGateway",
    "CustomerGateway",
    "SubscriptionGateway",
    "TestingGateway",
    "TransactionGateway",
]

R = TypeVar("R")

_CREATED = (HTTPStatus.CREATED,)
_OK = (HTTPStatus.OK,)


def _api_error(response: requests.Response, document: Optional[Element]) -> ApiError:
    if document is None:
        # 401/403/404 frequently come back without a body.
        message = response.reason or f"HTTP {response.status_code}"
        return ApiError(message, raw=None, status_code=response.status_code)
    error = decode(document, ErrorResponse)
    return ApiError(error.message, raw=document, status_code=response.status_code)


class BraintreeGateway:
    """
    Handle to the Braintree API for a single merchant.
    """

    def __init__(
        self,
        credentials: Credentials,
        *,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        verify: Union[bool, str] = True,
    ) -> None:
        self.credentials = credentials
        self.transport = Transport(
            credentials,
            session=session,
            timeout=timeout,
            verify=verify,
        )

    @classmethod
    def from_config(
        cls,
        config: GatewayConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> "BraintreeGateway":
        return cls(
            config.credentials(),
            session=session,
            timeout=config.timeout_seconds,
            verify=config.verify,
        )

    @property
    def client_token(self) -> "ClientTokenGateway":
        return ClientTokenGateway(self)

    @property
    def customer(self) -> "CustomerGateway":
        return CustomerGateway(self)

    @property
    def transaction(self) -> "TransactionGateway":
        return TransactionGateway(self)

    @property
    def subscription(self) -> "SubscriptionGateway":
        return SubscriptionGateway(self)

    @property
    def testing(self) -> "TestingGateway":
        return TestingGateway(self)

    def call(
        self,
        method: str,
        path: str,
        request: Optional[Any],
        success: Tuple[int, ...],
        record_type: Type[R],
    ) -> R:
        """
        Send ``request`` and decode the answer into ``record_type``.
        """
        body = encode(request).encode("utf-8") if request is not None else None
        response = self.transport.execute(method, path, body)
        document = read_document(response)

        if response.status_code in success:
            if document is None:
                raise MalformedDocument(f"{method} {path} returned an empty body")
            return decode(document, record_type)

        error = _api_error(response, document)
        logging.warning(
            "Gateway rejected %s %s with %s: %s",
            method,
            path,
            response.status_code,
            error.message,
        )
        raise error


class _Resource:
    def __init__(self, gateway: BraintreeGateway) -> None:
        self.gateway = gateway


def _transaction_path(transaction_id: str, action: Optional[str] = None) -> str:
    # urljoin would resolve these as dot segments and leave transactions/.
    if transaction_id in ("", ".", ".."):
        raise ValueError(f"Invalid transaction id: {transaction_id!r}")
    path = f"transactions/{quote(transaction_id, safe='')}"
    return f"{path}/{action}" if action else path


class ClientTokenGateway(_Resource):
    def generate(self, request: Optional[ClientTokenRequest] = None) -> ClientToken:
        """
        Generate a client token for a client SDK.

        Without ``request`` a default version 2 token is generated.
        """
        return self.gateway.call(
            "POST",
            "client_token",
            request or ClientTokenRequest(),
            _CREATED,
            ClientToken,
        )


class CustomerGateway(_Resource):
    def create(self, customer: Customer) -> Customer:
        return self.gateway.call("POST", "customers", customer, _CREATED, Customer)


class TransactionGateway(_Resource):
    def create(self, request: TransactionRequest) -> Transaction:
        """
        Create a transaction.

        The transaction is only captured if ``options.submit_for_settlement``
        is set, or if :meth:`submit_for_settlement` is called with its id
        later on.
        """
        return self.gateway.call("POST", "transactions", request, _CREATED, Transaction)

    def submit_for_settlement(self, transaction_id: str) -> Transaction:
        """Submit an authorized transaction for settlement."""
        return self.gateway.call(
            "PUT",
            _transaction_path(transaction_id, "submit_for_settlement"),
            None,
            _OK,
            Transaction,
        )

    def void(self, transaction_id: str) -> Transaction:
        """
        Cancel a transaction that is still authorized or submitted for
        settlement.
        """
        return self.gateway.call(
            "PUT", _transaction_path(transaction_id, "void"), None, _OK, Transaction
        )

    def refund(self, transaction_id: str, amount: Optional[str] = None) -> Transaction:
        """
        Refund a settled or settling transaction, creating a credit.

        ``amount`` refunds part of the original transaction.
        """
        request = RefundRequest(amount=amount) if amount is not None else None
        return self.gateway.call(
            "POST",
            _transaction_path(transaction_id, "refund"),
            request,
            _CREATED + _OK,
            Transaction,
        )

    def find(self, transaction_id: str) -> Transaction:
        return self.gateway.call("GET", _transaction_path(transaction_id), None, _OK, Transaction)


class SubscriptionGateway(_Resource):
    def create(self, request: SubscriptionRequest) -> Subscription:
        return self.gateway.call("POST", "subscriptions", request, _CREATED, Subscription)


class TestingGateway(_Resource):
    """
    Sandbox-only helpers for forcing transactions through settlement states.
    """

    def _set_status(self, transaction_id: str, status: str) -> Transaction:
        if self.gateway.credentials.environment is Environment.PRODUCTION:
            raise TestOperationInProduction()
        return self.gateway.call(
            "PUT", _transaction_path(transaction_id, status), None, _OK, Transaction
        )

    def settle(self, transaction_id: str) -> Transaction:
        return self._set_status(transaction_id, "settle")

    def settlement_confirm(self, transaction_id: str) -> Transaction:
        return self._set_status(transaction_id, "settlement_confirm")

    def settlement_decline(self, transaction_id: str) -> Transaction:
        return self._set_status(transaction_id, "settlement_decline")

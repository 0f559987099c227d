"""
Tests for the resource operations exposed by BraintreeGateway.

These tests verify:
1. Each operation uses the right verb, path and body
2. The designated success status decodes into a record
3. Any other status raises ApiError with the extracted message
4. Sandbox-only operations never reach the network in production
"""

import logging

import pytest

from braintree_gateway import (
    ApiError,
    BraintreeGateway,
    ClientTokenRequest,
    CreditCard,
    Customer,
    GatewayConfig,
    Environment,
    MalformedDocument,
    MissingField,
    SubscriptionRequest,
    TransactionOptions,
    TransactionRequest,
    UnsupportedEncoding,
)
from braintree_gateway.core import errors

from conftest import ERROR_XML, TRANSACTION_XML, gzip_response, make_response

BASE = "https://sandbox.braintreegateway.com/merchants/merchant_1/"


def sent(session):
    args, kwargs = session.request.call_args
    return args[0], args[1], kwargs["data"]


# =============================================================================
# Transactions
# =============================================================================

class TestTransactionCreate:
    def test_created_returns_transaction(self, gateway, session):
        session.request.return_value = make_response(201, TRANSACTION_XML)

        transaction = gateway.transaction.create(
            TransactionRequest(
                amount="10.00",
                credit_card=CreditCard(number="4111111111111111", expiration_date="10/20"),
                options=TransactionOptions(submit_for_settlement=True),
            )
        )

        assert transaction.id == "txn_123"
        assert transaction.status == "submitted_for_settlement"
        method, url, body = sent(session)
        assert (method, url) == ("POST", BASE + "transactions")
        assert body == (
            b"<transaction><amount>10.00</amount><credit-card>"
            b"<number>4111111111111111</number><expiration-date>10/20</expiration-date>"
            b"</credit-card><options>"
            b'<submit-for-settlement type="boolean">true</submit-for-settlement>'
            b"</options></transaction>"
        )

    def test_gzip_success_body(self, gateway, session):
        session.request.return_value = gzip_response(201, TRANSACTION_XML)

        assert gateway.transaction.create(TransactionRequest(amount="1.00")).id == "txn_123"

    def test_validation_error(self, gateway, session):
        session.request.return_value = make_response(422, ERROR_XML)

        with pytest.raises(ApiError) as exc_info:
            gateway.transaction.create(TransactionRequest())

        error = exc_info.value
        assert error.message == "Amount is required."
        assert error.status_code == 422
        assert error.raw.tag == "api-error-response"
        assert error.raw.findtext("errors/transaction/errors/error/code") == "81502"

    def test_ok_is_not_success_for_create(self, gateway, session):
        session.request.return_value = make_response(200, ERROR_XML)

        with pytest.raises(ApiError):
            gateway.transaction.create(TransactionRequest(amount="1.00"))

    def test_unauthorized_without_body(self, gateway, session):
        session.request.return_value = make_response(401, b"", reason="Unauthorized")

        with pytest.raises(ApiError) as exc_info:
            gateway.transaction.create(TransactionRequest(amount="1.00"))

        assert exc_info.value.message == "Unauthorized"
        assert exc_info.value.raw is None
        assert exc_info.value.status_code == 401

    def test_error_body_without_message(self, gateway, session):
        session.request.return_value = make_response(500, b"<api-error-response/>")

        with pytest.raises(MissingField):
            gateway.transaction.create(TransactionRequest(amount="1.00"))

    def test_unsupported_encoding(self, gateway, session):
        session.request.return_value = make_response(
            201, b"\x1b\x00", headers={"Content-Encoding": "br"}
        )

        with pytest.raises(UnsupportedEncoding):
            gateway.transaction.create(TransactionRequest(amount="1.00"))

    def test_empty_success_body(self, gateway, session):
        session.request.return_value = make_response(201, b"")

        with pytest.raises(MalformedDocument):
            gateway.transaction.create(TransactionRequest(amount="1.00"))

    def test_rejection_is_logged(self, gateway, session, caplog):
        session.request.return_value = make_response(422, ERROR_XML)

        with caplog.at_level(logging.WARNING):
            with pytest.raises(ApiError):
                gateway.transaction.create(TransactionRequest())

        assert "Amount is required." in caplog.text


class TestTransactionLifecycle:
    @pytest.mark.parametrize(
        "operation,method,path",
        [
            ("submit_for_settlement", "PUT", "transactions/txn_123/submit_for_settlement"),
            ("void", "PUT", "transactions/txn_123/void"),
            ("find", "GET", "transactions/txn_123"),
        ],
    )
    def test_status_operations(self, gateway, session, operation, method, path):
        session.request.return_value = make_response(200, TRANSACTION_XML)

        transaction = getattr(gateway.transaction, operation)("txn_123")

        assert transaction.id == "txn_123"
        assert sent(session) == (method, BASE + path, None)

    def test_created_is_not_success_for_void(self, gateway, session):
        session.request.return_value = make_response(201, ERROR_XML)

        with pytest.raises(ApiError):
            gateway.transaction.void("txn_123")

    def test_not_found(self, gateway, session):
        session.request.return_value = make_response(404, b"", reason="Not Found")

        with pytest.raises(ApiError, match="Not Found"):
            gateway.transaction.find("missing")

    def test_identifier_is_quoted(self, gateway, session):
        session.request.return_value = make_response(200, TRANSACTION_XML)

        gateway.transaction.void("../customers/x")

        assert sent(session)[1] == BASE + "transactions/..%2Fcustomers%2Fx/void"

    @pytest.mark.parametrize("transaction_id", ["", ".", ".."])
    @pytest.mark.parametrize(
        "operation", ["submit_for_settlement", "void", "refund", "find"]
    )
    def test_dot_segment_identifiers_are_rejected(
        self, gateway, session, operation, transaction_id
    ):
        with pytest.raises(ValueError, match="Invalid transaction id"):
            getattr(gateway.transaction, operation)(transaction_id)

        session.request.assert_not_called()

    def test_dot_segment_identifiers_are_rejected_in_sandbox_helpers(self, gateway, session):
        with pytest.raises(ValueError):
            gateway.testing.settle("..")

        session.request.assert_not_called()

    @pytest.mark.parametrize("status", [200, 201])
    def test_full_refund(self, gateway, session, status):
        session.request.return_value = make_response(status, TRANSACTION_XML)

        gateway.transaction.refund("txn_123")

        assert sent(session) == ("POST", BASE + "transactions/txn_123/refund", None)

    def test_partial_refund(self, gateway, session):
        session.request.return_value = make_response(201, TRANSACTION_XML)

        gateway.transaction.refund("txn_123", amount="2.50")

        assert sent(session)[2] == b"<transaction><amount>2.50</amount></transaction>"


# =============================================================================
# Client Tokens, Customers, Subscriptions
# =============================================================================

class TestClientToken:
    def test_default_request(self, gateway, session):
        session.request.return_value = make_response(
            201, b"<client-token><value>eyJ2ZXJzaW9uIjoyfQ==</value></client-token>"
        )

        token = gateway.client_token.generate()

        assert token.value == "eyJ2ZXJzaW9uIjoyfQ=="
        assert sent(session) == (
            "POST",
            BASE + "client_token",
            b'<client-token><version type="integer">2</version></client-token>',
        )

    def test_customer_scoped_request(self, gateway, session):
        session.request.return_value = make_response(
            201, b"<client-token><value>abc</value></client-token>"
        )

        gateway.client_token.generate(ClientTokenRequest(customer_id="cust_1"))

        assert b"<customer-id>cust_1</customer-id>" in sent(session)[2]


class TestCustomer:
    def test_create(self, gateway, session):
        session.request.return_value = make_response(
            201,
            b"<customer><id>cust_1</id><first-name>Jane</first-name>"
            b'<credit-cards type="array"><credit-card><token>tok_1</token></credit-card>'
            b"</credit-cards><custom-fields><tier>gold</tier></custom-fields></customer>",
        )

        customer = gateway.customer.create(
            Customer(
                first_name="Jane",
                credit_card=CreditCard(number="4111111111111111", expiration_date="10/20"),
                custom_fields={"tier": "gold"},
            )
        )

        assert customer.id == "cust_1"
        assert customer.credit_card.token == "tok_1"
        assert customer.custom_fields == {"tier": "gold"}
        method, url, body = sent(session)
        assert (method, url) == ("POST", BASE + "customers")
        assert b"<credit_card><number>4111111111111111</number>" in body
        assert b"<custom_fields><tier>gold</tier></custom_fields>" in body


class TestSubscription:
    def test_create(self, gateway, session):
        session.request.return_value = make_response(
            201,
            b"<subscription><id>sub_1</id><status>Active</status>"
            b"<plan-id>monthly</plan-id></subscription>",
        )

        subscription = gateway.subscription.create(
            SubscriptionRequest(plan_id="monthly", payment_method_token="tok_1")
        )

        assert subscription.id == "sub_1"
        assert subscription.status == "Active"
        assert sent(session)[:2] == ("POST", BASE + "subscriptions")


# =============================================================================
# Sandbox Testing Operations
# =============================================================================

class TestTestingGateway:
    @pytest.mark.parametrize("operation", ["settle", "settlement_confirm", "settlement_decline"])
    def test_sandbox(self, gateway, session, operation):
        session.request.return_value = make_response(200, TRANSACTION_XML)

        getattr(gateway.testing, operation)("txn_123")

        assert sent(session) == ("PUT", BASE + f"transactions/txn_123/{operation}", None)

    @pytest.mark.parametrize("operation", ["settle", "settlement_confirm", "settlement_decline"])
    def test_production_never_calls_out(self, production_credentials, session, operation):
        gateway = BraintreeGateway(production_credentials, session=session)

        with pytest.raises(errors.TestOperationInProduction):
            getattr(gateway.testing, operation)("txn_123")

        session.request.assert_not_called()


class TestFromConfig:
    def test_config_is_applied(self, session):
        config = GatewayConfig(
            environment=Environment.PRODUCTION,
            merchant_id="m_9",
            public_key="pub",
            private_key="priv",
            timeout_seconds=30.0,
        )

        gateway = BraintreeGateway.from_config(config, session=session)

        assert gateway.credentials.environment is Environment.PRODUCTION
        assert gateway.transport.merchant_url == "https://www.braintreegateway.com/merchants/m_9/"
        assert gateway.transport.timeout == 30.0
        assert gateway.transport.verify is True

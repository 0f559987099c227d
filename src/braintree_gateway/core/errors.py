"""
Exceptions raised by the Braintree gateway client.
"""

from __future__ import annotations

from typing import Optional
from xml.etree.ElementTree import Element

__all__ = [
    "ApiError",
    "DecodeError",
    "GatewayError",
    "MalformedDocument",
    "MissingField",
    "SetupError",
    "TestOperationInProduction",
    "TransportError",
    "UnsupportedEncoding",
]


class GatewayError(Exception):
    """
    Base class for every error surfaced by the gateway client.
    """

    def __init__(self, message: str, code: str = "GATEWAY_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class ApiError(GatewayError):
    """
    Braintree's servers reported an error with the request.

    This usually means the authorization was wrong, a required field was
    missing, or a validation step failed. ``raw`` holds the parsed response
    body for closer inspection.
    """

    def __init__(
        self,
        message: str,
        raw: Optional[Element] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message=message, code="API_ERROR")
        self.raw = raw
        self.status_code = status_code


class TransportError(GatewayError):
    """Raised when the HTTP exchange itself failed (DNS, TLS, reset)."""

    def __init__(self, message: str):
        super().__init__(message=message, code="TRANSPORT_ERROR")


class TestOperationInProduction(GatewayError):
    """A sandbox-only operation was attempted against production."""

    def __init__(self):
        super().__init__(
            message="Test operations are not allowed in the production environment",
            code="TEST_OPERATION_IN_PRODUCTION",
        )


class SetupError(GatewayError):
    """Raised when the client could not be set up."""

    def __init__(self, message: str):
        super().__init__(message=message, code="SETUP_ERROR")


class DecodeError(GatewayError):
    """Base class for response bodies that do not match the expected schema."""


class MalformedDocument(DecodeError):
    def __init__(self, message: str):
        super().__init__(message=message, code="MALFORMED_DOCUMENT")


class MissingField(DecodeError):
    def __init__(self, tag: str):
        super().__init__(
            message=f"Required element <{tag}> is missing from the response",
            code="MISSING_FIELD",
        )
        self.tag = tag


class UnsupportedEncoding(DecodeError):
    def __init__(self, encoding: str):
        super().__init__(
            message=f"Unsupported content encoding: {encoding}",
            code="UNSUPPORTED_ENCODING",
        )
        self.encoding = encoding

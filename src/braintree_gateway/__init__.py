"""
Public facade for the Braintree gateway client package.

The module re-exports the most useful pieces for integrators so they can
``from braintree_gateway import ...`` without navigating the package.
"""

from .api import create_gateway, generate_client_token
from .core import (
    Address,
    ApiError,
    ApiKey,
    BraintreeGateway,
    ClientToken,
    ClientTokenOptions,
    ClientTokenRequest,
    ConfigError,
    Credentials,
    CreditCard,
    Customer,
    DecodeError,
    Descriptor,
    Environment,
    GatewayConfig,
    GatewayError,
    GatewayParameters,
    MalformedDocument,
    MissingField,
    SetupError,
    Subscription,
    SubscriptionOptions,
    SubscriptionRequest,
    TestOperationInProduction,
    Transaction,
    TransactionOptions,
    TransactionRequest,
    TransportError,
    UnsupportedEncoding,
    __version__,
    load_gateway_config,
)

__all__ = (
    "Address",
    "ApiError",
    "ApiKey",
    "BraintreeGateway",
    "ClientToken",
    "ClientTokenOptions",
    "ClientTokenRequest",
    "ConfigError",
    "Credentials",
    "CreditCard",
    "Customer",
    "DecodeError",
    "Descriptor",
    "Environment",
    "GatewayConfig",
    "GatewayError",
    "GatewayParameters",
    "MalformedDocument",
    "MissingField",
    "SetupError",
    "Subscription",
    "SubscriptionOptions",
    "SubscriptionRequest",
    "TestOperationInProduction",
    "Transaction",
    "TransactionOptions",
    "TransactionRequest",
    "TransportError",
    "UnsupportedEncoding",
    "__version__",
    "create_gateway",
    "generate_client_token",
    "load_gateway_config",
)

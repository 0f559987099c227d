"""
Core primitives that implement the gateway request/response cycle.
"""

from .client import (
    BraintreeGateway,
    ClientTokenGateway,
    CustomerGateway,
    SubscriptionGateway,
    TestingGateway,
    TransactionGateway,
)
from .codec import decode, encode, parse
from .config import (
    ConfigError,
    GatewayConfig,
    GatewayParameters,
    load_gateway_config,
)
from .credentials import ApiKey, Credentials, Environment
from .errors import (
    ApiError,
    DecodeError,
    GatewayError,
    MalformedDocument,
    MissingField,
    SetupError,
    TestOperationInProduction,
    TransportError,
    UnsupportedEncoding,
)
from .records import (
    Address,
    ClientToken,
    ClientTokenOptions,
    ClientTokenRequest,
    CreditCard,
    Customer,
    Descriptor,
    Subscription,
    SubscriptionOptions,
    SubscriptionRequest,
    Transaction,
    TransactionOptions,
    TransactionRequest,
)
from .transport import Transport
from .version import __version__

__all__ = [
    "Address",
    "ApiError",
    "ApiKey",
    "BraintreeGateway",
    "ClientToken",
    "ClientTokenGateway",
    "ClientTokenOptions",
    "ClientTokenRequest",
    "ConfigError",
    "Credentials",
    "CreditCard",
    "Customer",
    "CustomerGateway",
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
    "SubscriptionGateway",
    "SubscriptionOptions",
    "SubscriptionRequest",
    "TestOperationInProduction",
    "TestingGateway",
    "Transaction",
    "TransactionGateway",
    "TransactionOptions",
    "TransactionRequest",
    "Transport",
    "TransportError",
    "UnsupportedEncoding",
    "__version__",
    "decode",
    "encode",
    "load_gateway_config",
    "parse",
]

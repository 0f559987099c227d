"""
Merchant identity and authorization material.
"""

from __future__ import annotations

import base64
import enum
from dataclasses import dataclass, field
from typing import Protocol

__all__ = [
    "ApiKey",
    "Credentials",
    "Environment",
]


class Environment(enum.Enum):
    SANDBOX = "sandbox"
    PRODUCTION = "production"

    @property
    def base_url(self) -> str:
        if self is Environment.PRODUCTION:
            return "https://www.braintreegateway.com"
        return "https://sandbox.braintreegateway.com"

    @classmethod
    def parse(cls, value: "Environment | str") -> "Environment":
        if isinstance(value, Environment):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError as exc:
            raise ValueError(
                f"Unknown environment '{value}', expected 'sandbox' or 'production'"
            ) from exc


class Credentials(Protocol):
    """
    Anything able to identify a merchant to the gateway.
    """

    @property
    def environment(self) -> Environment: ...

    @property
    def merchant_id(self) -> str: ...

    @property
    def authorization_header(self) -> str: ...


@dataclass(frozen=True)
class ApiKey:
    """
    Public/private key pair for a single merchant.

    The Basic authorization header is derived once at construction and
    reused for every request.
    """

    environment: Environment
    merchant_id: str
    public_key: str
    private_key: str = field(repr=False)
    authorization_header: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "environment", Environment.parse(self.environment))
        token = base64.b64encode(
            f"{self.public_key}:{self.private_key}".encode("utf-8")
        ).decode("ascii")
        object.__setattr__(self, "authorization_header", f"Basic {token}")

"""
Public, high-level helpers for interacting with the Braintree gateway.
"""

from __future__ import annotations

from typing import Mapping, Optional, Union

import requests

from .core.client import BraintreeGateway
from .core.config import (
    ConfigError,
    GatewayConfig,
    GatewayParameters,
    load_gateway_config,
)
from .core.credentials import ApiKey, Environment
from .core.records import ClientToken, ClientTokenRequest

__all__ = [
    "ApiKey",
    "BraintreeGateway",
    "ConfigError",
    "Environment",
    "GatewayConfig",
    "GatewayParameters",
    "create_gateway",
    "generate_client_token",
    "load_gateway_config",
]


def _resolve_config(
    *,
    config: Optional[GatewayConfig],
    env_file: Optional[str],
    overrides: Optional[Mapping[str, str]],
    base: Optional[Mapping[str, str]],
    parameters: Optional[GatewayParameters],
    environment: Optional[Union[Environment, str]],
    merchant_id: Optional[str],
    public_key: Optional[str],
    private_key: Optional[str],
    timeout_seconds: Optional[Union[float, int, str]],
    ca_bundle: Optional[str],
) -> GatewayConfig:
    if config is not None:
        extras = (
            overrides,
            base,
            parameters,
            environment,
            merchant_id,
            public_key,
            private_key,
            timeout_seconds,
            ca_bundle,
        )
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built GatewayConfig or individual parameters, not both."
            )
        return config
    return load_gateway_config(
        env_file=env_file,
        overrides=overrides,
        base=base,
        parameters=parameters,
        environment=environment,
        merchant_id=merchant_id,
        public_key=public_key,
        private_key=private_key,
        timeout_seconds=timeout_seconds,
        ca_bundle=ca_bundle,
    )


def create_gateway(
    *,
    config: Optional[GatewayConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[GatewayParameters] = None,
    environment: Optional[Union[Environment, str]] = None,
    merchant_id: Optional[str] = None,
    public_key: Optional[str] = None,
    private_key: Optional[str] = None,
    timeout_seconds: Optional[Union[float, int, str]] = None,
    ca_bundle: Optional[str] = None,
) -> BraintreeGateway:
    """
    Construct a :class:`BraintreeGateway`.

    Callers can either supply a ready-made :class:`GatewayConfig` or let the
    helper assemble one from environment data.
    """
    cfg = _resolve_config(
        config=config,
        env_file=env_file,
        overrides=overrides,
        base=base,
        parameters=parameters,
        environment=environment,
        merchant_id=merchant_id,
        public_key=public_key,
        private_key=private_key,
        timeout_seconds=timeout_seconds,
        ca_bundle=ca_bundle,
    )
    return BraintreeGateway.from_config(cfg, session=session)


def generate_client_token(
    request: Optional[ClientTokenRequest] = None,
    *,
    config: Optional[GatewayConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
) -> ClientToken:
    """
    One-shot helper that builds a gateway and generates a client token.
    """
    gateway = create_gateway(config=config, session=session, env_file=env_file)
    return gateway.client_token.generate(request)

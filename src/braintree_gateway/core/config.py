"""
Configuration objects and helpers for the Braintree gateway client.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from .credentials import ApiKey, Environment

__all__ = [
    "ConfigError",
    "GatewayConfig",
    "GatewayParameters",
    "load_gateway_config",
]

_PARAMETER_TO_ENV_KEY = {
    "environment": "BRAINTREE_ENVIRONMENT",
    "merchant_id": "BRAINTREE_MERCHANT_ID",
    "public_key": "BRAINTREE_PUBLIC_KEY",
    "private_key": "BRAINTREE_PRIVATE_KEY",
    "timeout_seconds": "BRAINTREE_TIMEOUT_SECONDS",
    "ca_bundle": "BRAINTREE_CA_BUNDLE",
}


def _stringify(value: Any) -> str:
    if isinstance(value, Environment):
        return value.value
    return str(value)


@dataclass(frozen=True)
class GatewayParameters:
    """
    Explicit parameter bundle for constructing :class:`GatewayConfig`.

    Callers can either instantiate this helper or pass the individual keyword
    arguments directly to :func:`load_gateway_config`.
    """

    environment: Optional[Union[Environment, str]] = None
    merchant_id: Optional[str] = None
    public_key: Optional[str] = None
    private_key: Optional[str] = field(default=None, repr=False)
    timeout_seconds: Optional[Union[float, int, str]] = None
    ca_bundle: Optional[str] = None

    def as_overrides(self) -> Dict[str, str]:
        overrides: Dict[str, str] = {}
        for field_name, env_key in _PARAMETER_TO_ENV_KEY.items():
            value = getattr(self, field_name)
            if value is None:
                continue
            overrides[env_key] = _stringify(value)
        return overrides


def _collect_parameter_overrides(
    parameters: Optional[GatewayParameters],
    explicit: Mapping[str, Any],
) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    if parameters is not None:
        overrides.update(parameters.as_overrides())

    for key, value in explicit.items():
        if value is None:
            continue
        try:
            env_key = _PARAMETER_TO_ENV_KEY[key]
        except KeyError as exc:  # pragma: no cover
            raise TypeError(f"Unknown gateway parameter '{key}'") from exc
        overrides[env_key] = _stringify(value)
    return overrides


_KNOWN_KEYS = frozenset(_PARAMETER_TO_ENV_KEY.values())


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def _read_env_file(path: Path) -> Dict[str, str]:
    """
    Collect ``BRAINTREE_*`` assignments from a .env file.

    A missing file yields nothing. Lines may carry an ``export`` prefix and
    quoted values; anything that is not a known key is skipped.
    """
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except FileNotFoundError:
        return {}

    values: Dict[str, str] = {}
    for raw_line in lines:
        line = raw_line.strip()
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        key, sep, value = line.partition("=")
        key = key.strip()
        if sep and key in _KNOWN_KEYS:
            values[key] = _unquote(value.strip())
    return values


def _layer_sources(
    env_file: Optional[str],
    base: Optional[Mapping[str, str]],
    overrides: Mapping[str, str],
) -> Dict[str, str]:
    # Precedence: overrides, then base (os.environ by default), then the file.
    source = os.environ if base is None else base
    merged = {key: source[key] for key in _KNOWN_KEYS if key in source}
    if env_file is not None:
        for key, value in _read_env_file(Path(env_file)).items():
            merged.setdefault(key, value)
    merged.update((key, value) for key, value in overrides.items() if key in _KNOWN_KEYS)
    return merged


class ConfigError(Exception):
    """Raised when the supplied configuration is invalid."""


def _require(values: Mapping[str, str], key: str) -> str:
    value = (values.get(key) or "").strip()
    if not value:
        raise ConfigError(f"{key} must be provided")
    return value


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ConfigError(
            f"BRAINTREE_TIMEOUT_SECONDS must be a number, got '{raw}'"
        ) from exc
    if timeout <= 0:
        raise ConfigError("BRAINTREE_TIMEOUT_SECONDS must be greater than zero")
    return timeout


@dataclass(frozen=True)
class GatewayConfig:
    environment: Environment
    merchant_id: str
    public_key: str
    private_key: str = field(repr=False)
    timeout_seconds: Optional[float] = None
    ca_bundle: Optional[str] = None

    @property
    def verify(self) -> Union[bool, str]:
        return self.ca_bundle if self.ca_bundle else True

    def credentials(self) -> ApiKey:
        return ApiKey(
            environment=self.environment,
            merchant_id=self.merchant_id,
            public_key=self.public_key,
            private_key=self.private_key,
        )

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "GatewayConfig":
        try:
            environment = Environment.parse(values.get("BRAINTREE_ENVIRONMENT") or "sandbox")
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc

        ca_bundle = (values.get("BRAINTREE_CA_BUNDLE") or "").strip() or None

        return cls(
            environment=environment,
            merchant_id=_require(values, "BRAINTREE_MERCHANT_ID"),
            public_key=_require(values, "BRAINTREE_PUBLIC_KEY"),
            private_key=_require(values, "BRAINTREE_PRIVATE_KEY"),
            timeout_seconds=_parse_timeout(values.get("BRAINTREE_TIMEOUT_SECONDS")),
            ca_bundle=ca_bundle,
        )

    @classmethod
    def from_env(
        cls,
        *,
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
    ) -> "GatewayConfig":
        parameter_overrides = _collect_parameter_overrides(
            parameters,
            {
                "environment": environment,
                "merchant_id": merchant_id,
                "public_key": public_key,
                "private_key": private_key,
                "timeout_seconds": timeout_seconds,
                "ca_bundle": ca_bundle,
            },
        )
        merged_overrides = dict(overrides or {})
        merged_overrides.update(parameter_overrides)

        return cls.from_mapping(_layer_sources(env_file, base, merged_overrides))


def load_gateway_config(
    *,
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
) -> GatewayConfig:
    """
    Convenience wrapper that mirrors :meth:`GatewayConfig.from_env`.

    The configuration can be provided entirely through environment variables,
    a ``.env`` file, direct keyword arguments, or any combination of the three.
    """
    return GatewayConfig.from_env(
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

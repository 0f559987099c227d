"""
Minimal script that uses the public API to charge a sandbox card.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Tuple

from braintree_gateway import (
    ConfigError,
    CreditCard,
    GatewayError,
    TransactionOptions,
    TransactionRequest,
    create_gateway,
    load_gateway_config,
)


def _override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def _build_overrides(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for key, value in pairs:
        overrides[key] = value
    return overrides


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a transaction using the gateway API")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing BRAINTREE_* settings",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    parser.add_argument(
        "--amount",
        default="10.00",
        help="Amount to charge (default: 10.00)",
    )
    parser.add_argument(
        "--card-number",
        default="4111111111111111",
        help="Card number to charge (default: the sandbox Visa test card)",
    )
    parser.add_argument(
        "--expiration-date",
        default="10/30",
        help="Card expiration date as MM/YY",
    )
    parser.add_argument(
        "--authorize-only",
        action="store_true",
        help="Authorize the card without submitting the transaction for settlement",
    )
    parser.add_argument(
        "--settle",
        action="store_true",
        help="Force the transaction to settled afterwards (sandbox only)",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    overrides = _build_overrides(args.set or ())

    try:
        config = load_gateway_config(env_file=args.env_file, overrides=overrides)
    except (ConfigError, ValueError) as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    gateway = create_gateway(config=config)
    logging.info("Charging %s against the %s environment", args.amount, config.environment.value)

    request = TransactionRequest(
        amount=args.amount,
        type="sale",
        credit_card=CreditCard(
            number=args.card_number,
            expiration_date=args.expiration_date,
        ),
        options=TransactionOptions(submit_for_settlement=not args.authorize_only),
    )

    try:
        transaction = gateway.transaction.create(request)
    except GatewayError as exc:
        logging.error("Transaction failed: %s", exc.message)
        return 1

    logging.info("Created transaction %s with status %s", transaction.id, transaction.status)

    if not args.settle:
        return 0

    try:
        settled = gateway.testing.settle(transaction.id)
    except GatewayError as exc:
        logging.error("Settlement failed: %s", exc.message)
        return 1

    logging.info("Transaction %s is now %s", settled.id, settled.status)
    return 0


if __name__ == "__main__":
    sys.exit(main())

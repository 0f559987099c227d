"""
Records exchanged with the Braintree gateway.

Every field defaults to ``None``, meaning "not supplied" on requests and
"not present" on responses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, Optional

from .codec import BOOLEAN, INTEGER, MAPPING, RECORD, xml_field

__all__ = [
    "Address",
    "ClientToken",
    "ClientTokenOptions",
    "ClientTokenRequest",
    "CreditCard",
    "Customer",
    "Descriptor",
    "ErrorResponse",
    "RefundRequest",
    "Subscription",
    "SubscriptionOptions",
    "SubscriptionRequest",
    "Transaction",
    "TransactionOptions",
    "TransactionRequest",
]


@dataclass
class Address:
    xml_name: ClassVar[str] = "address"

    company: Optional[str] = xml_field("company")
    country_code_alpha2: Optional[str] = xml_field("country-code-alpha2")
    country_code_alpha3: Optional[str] = xml_field("country-code-alpha3")
    country_code_numeric: Optional[str] = xml_field("country-code-numeric")
    country_name: Optional[str] = xml_field("country-name")
    extended_address: Optional[str] = xml_field("extended-address")
    first_name: Optional[str] = xml_field("first-name")
    last_name: Optional[str] = xml_field("last-name")
    locality: Optional[str] = xml_field("locality")
    postal_code: Optional[str] = xml_field("postal-code")
    region: Optional[str] = xml_field("region")
    street_address: Optional[str] = xml_field("street-address")


@dataclass
class CreditCard:
    """
    Raw credit card data.

    Prefer a payment method nonce where possible: handling card numbers
    directly puts the integration in scope for PCI SAQ D.
    """

    xml_name: ClassVar[str] = "credit-card"

    number: Optional[str] = xml_field("number")
    expiration_date: Optional[str] = xml_field("expiration-date")
    expiration_month: Optional[str] = xml_field("expiration-month")
    expiration_year: Optional[str] = xml_field("expiration-year")
    cardholder_name: Optional[str] = xml_field("cardholder-name")
    cvv: Optional[str] = xml_field("cvv")
    customer_id: Optional[str] = xml_field("customer-id")
    token: Optional[str] = xml_field("token")
    bin: Optional[str] = xml_field("bin")
    last_4: Optional[str] = xml_field("last-4")
    card_type: Optional[str] = xml_field("card-type")
    default: Optional[bool] = xml_field("default", kind=BOOLEAN)
    expired: Optional[bool] = xml_field("expired", kind=BOOLEAN)
    billing_address: Optional[Address] = xml_field(
        "billing-address", kind=RECORD, record=Address
    )


@dataclass
class Customer:
    xml_name: ClassVar[str] = "customer"

    company: Optional[str] = xml_field("company")
    email: Optional[str] = xml_field("email")
    fax: Optional[str] = xml_field("fax")
    first_name: Optional[str] = xml_field("first-name")
    id: Optional[str] = xml_field("id")
    last_name: Optional[str] = xml_field("last-name")
    payment_method_nonce: Optional[str] = xml_field(
        "payment_method_nonce", aliases=("payment-method-nonce",)
    )
    phone: Optional[str] = xml_field("phone")
    website: Optional[str] = xml_field("website")
    # Sent as <credit_card>, returned inside a <credit-cards> collection.
    credit_card: Optional[CreditCard] = xml_field(
        "credit_card",
        kind=RECORD,
        record=CreditCard,
        aliases=("credit-card", "credit-cards/credit-card"),
    )
    # Custom fields must be configured in the Control Panel before use;
    # keys and values are limited to 255 characters.
    custom_fields: Optional[Dict[str, str]] = xml_field(
        "custom_fields", kind=MAPPING, aliases=("custom-fields",)
    )


@dataclass
class Descriptor:
    xml_name: ClassVar[str] = "descriptor"

    name: Optional[str] = xml_field("name")
    phone: Optional[str] = xml_field("phone")
    url: Optional[str] = xml_field("url")


@dataclass
class ClientTokenOptions:
    xml_name: ClassVar[str] = "options"

    fail_on_duplicate_payment_method: Optional[bool] = xml_field(
        "fail-on-duplicate-payment-method", kind=BOOLEAN
    )
    make_default: Optional[bool] = xml_field("make-default", kind=BOOLEAN)
    verify_card: Optional[bool] = xml_field("verify-card", kind=BOOLEAN)


@dataclass
class ClientTokenRequest:
    """
    A request for a new client token.

    ``customer_id`` only matters to the Drop-in UI, where it is used to show
    the customer's saved payment methods. ``version`` defaults to 2, which is
    what most client SDKs expect.
    """

    xml_name: ClassVar[str] = "client-token"

    customer_id: Optional[str] = xml_field("customer-id")
    merchant_account_id: Optional[str] = xml_field("merchant-account-id")
    options: Optional[ClientTokenOptions] = xml_field(
        "options", kind=RECORD, record=ClientTokenOptions
    )
    version: Optional[int] = xml_field("version", kind=INTEGER, default=2)


@dataclass
class ClientToken:
    xml_name: ClassVar[str] = "client-token"

    value: Optional[str] = xml_field("value", required=True)


@dataclass
class TransactionOptions:
    xml_name: ClassVar[str] = "options"

    submit_for_settlement: Optional[bool] = xml_field("submit-for-settlement", kind=BOOLEAN)
    store_in_vault: Optional[bool] = xml_field("store-in-vault", kind=BOOLEAN)
    store_in_vault_on_success: Optional[bool] = xml_field(
        "store-in-vault-on-success", kind=BOOLEAN
    )
    add_billing_address_to_payment_method: Optional[bool] = xml_field(
        "add-billing-address-to-payment-method", kind=BOOLEAN
    )
    store_shipping_address_in_vault: Optional[bool] = xml_field(
        "store-shipping-address-in-vault", kind=BOOLEAN
    )
    hold_in_escrow: Optional[bool] = xml_field("hold-in-escrow", kind=BOOLEAN)


@dataclass
class TransactionRequest:
    """
    A new transaction.

    At a minimum an amount and some form of payment method are needed. The
    money only moves once the transaction is submitted for settlement, either
    with ``options.submit_for_settlement`` or a later call to
    ``submit_for_settlement``.
    """

    xml_name: ClassVar[str] = "transaction"

    amount: Optional[str] = xml_field("amount")
    type: Optional[str] = xml_field("type")
    order_id: Optional[str] = xml_field("order-id")
    customer_id: Optional[str] = xml_field("customer-id")
    merchant_account_id: Optional[str] = xml_field("merchant-account-id")
    payment_method_nonce: Optional[str] = xml_field("payment-method-nonce")
    payment_method_token: Optional[str] = xml_field("payment-method-token")
    credit_card: Optional[CreditCard] = xml_field("credit-card", kind=RECORD, record=CreditCard)
    customer: Optional[Customer] = xml_field("customer", kind=RECORD, record=Customer)
    billing: Optional[Address] = xml_field("billing", kind=RECORD, record=Address)
    shipping: Optional[Address] = xml_field("shipping", kind=RECORD, record=Address)
    descriptor: Optional[Descriptor] = xml_field("descriptor", kind=RECORD, record=Descriptor)
    custom_fields: Optional[Dict[str, str]] = xml_field("custom-fields", kind=MAPPING)
    options: Optional[TransactionOptions] = xml_field(
        "options", kind=RECORD, record=TransactionOptions
    )


@dataclass
class RefundRequest:
    xml_name: ClassVar[str] = "transaction"

    amount: Optional[str] = xml_field("amount")
    order_id: Optional[str] = xml_field("order-id")


@dataclass
class Transaction:
    xml_name: ClassVar[str] = "transaction"

    id: Optional[str] = xml_field("id", required=True)
    status: Optional[str] = xml_field("status")
    type: Optional[str] = xml_field("type")
    amount: Optional[str] = xml_field("amount")
    currency_iso_code: Optional[str] = xml_field("currency-iso-code")
    order_id: Optional[str] = xml_field("order-id")
    merchant_account_id: Optional[str] = xml_field("merchant-account-id")
    created_at: Optional[str] = xml_field("created-at")
    updated_at: Optional[str] = xml_field("updated-at")
    processor_authorization_code: Optional[str] = xml_field("processor-authorization-code")
    processor_response_code: Optional[str] = xml_field("processor-response-code")
    processor_response_text: Optional[str] = xml_field("processor-response-text")
    refunded_transaction_id: Optional[str] = xml_field("refunded-transaction-id")
    subscription_id: Optional[str] = xml_field("subscription-id")
    plan_id: Optional[str] = xml_field("plan-id")
    credit_card: Optional[CreditCard] = xml_field("credit-card", kind=RECORD, record=CreditCard)
    customer: Optional[Customer] = xml_field("customer", kind=RECORD, record=Customer)
    billing: Optional[Address] = xml_field("billing", kind=RECORD, record=Address)
    shipping: Optional[Address] = xml_field("shipping", kind=RECORD, record=Address)
    descriptor: Optional[Descriptor] = xml_field("descriptor", kind=RECORD, record=Descriptor)
    custom_fields: Optional[Dict[str, str]] = xml_field("custom-fields", kind=MAPPING)


@dataclass
class SubscriptionOptions:
    xml_name: ClassVar[str] = "options"

    start_immediately: Optional[bool] = xml_field("start-immediately", kind=BOOLEAN)
    do_not_inherit_add_ons_or_discounts: Optional[bool] = xml_field(
        "do-not-inherit-add-ons-or-discounts", kind=BOOLEAN
    )


@dataclass
class SubscriptionRequest:
    xml_name: ClassVar[str] = "subscription"

    id: Optional[str] = xml_field("id")
    plan_id: Optional[str] = xml_field("plan-id")
    payment_method_token: Optional[str] = xml_field("payment-method-token")
    payment_method_nonce: Optional[str] = xml_field("payment-method-nonce")
    price: Optional[str] = xml_field("price")
    merchant_account_id: Optional[str] = xml_field("merchant-account-id")
    number_of_billing_cycles: Optional[int] = xml_field("number-of-billing-cycles", kind=INTEGER)
    never_expires: Optional[bool] = xml_field("never-expires", kind=BOOLEAN)
    trial_period: Optional[bool] = xml_field("trial-period", kind=BOOLEAN)
    options: Optional[SubscriptionOptions] = xml_field(
        "options", kind=RECORD, record=SubscriptionOptions
    )


@dataclass
class Subscription:
    xml_name: ClassVar[str] = "subscription"

    id: Optional[str] = xml_field("id", required=True)
    status: Optional[str] = xml_field("status")
    plan_id: Optional[str] = xml_field("plan-id")
    price: Optional[str] = xml_field("price")
    balance: Optional[str] = xml_field("balance")
    payment_method_token: Optional[str] = xml_field("payment-method-token")
    merchant_account_id: Optional[str] = xml_field("merchant-account-id")
    current_billing_cycle: Optional[int] = xml_field("current-billing-cycle", kind=INTEGER)
    number_of_billing_cycles: Optional[int] = xml_field("number-of-billing-cycles", kind=INTEGER)
    billing_day_of_month: Optional[int] = xml_field("billing-day-of-month", kind=INTEGER)
    next_billing_date: Optional[str] = xml_field("next-billing-date")
    never_expires: Optional[bool] = xml_field("never-expires", kind=BOOLEAN)
    trial_period: Optional[bool] = xml_field("trial-period", kind=BOOLEAN)


@dataclass
class ErrorResponse:
    xml_name: ClassVar[str] = "api-error-response"

    message: Optional[str] = xml_field("message", required=True)

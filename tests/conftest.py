"""
Shared fixtures for the gateway client tests.

Provides:
- Canned ``requests.Response`` objects with in-memory bodies
- A mock ``requests.Session`` so no test touches the network
- Sandbox and production credentials
"""

import gzip
import io
from typing import Dict, Optional
from unittest.mock import MagicMock

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from braintree_gateway import ApiKey, BraintreeGateway, Environment


# =============================================================================
# Response Builders
# =============================================================================

def make_response(
    status_code: int,
    body: bytes = b"",
    headers: Optional[Dict[str, str]] = None,
    reason: Optional[str] = None,
) -> requests.Response:
    """Build a response whose raw stream still holds the wire bytes."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.headers = CaseInsensitiveDict(headers or {})
    response.raw = io.BytesIO(body)
    return response


def gzip_response(status_code: int, body: bytes) -> requests.Response:
    return make_response(
        status_code,
        gzip.compress(body),
        headers={"Content-Encoding": "gzip"},
    )


TRANSACTION_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<transaction>
  <id>txn_123</id>
  <status>submitted_for_settlement</status>
  <type>sale</type>
  <amount>10.00</amount>
  <currency-iso-code>USD</currency-iso-code>
  <order-id nil="true"/>
  <credit-card>
    <token nil="true"/>
    <bin>411111</bin>
    <last-4>1111</last-4>
    <card-type>Visa</card-type>
    <expiration-month>10</expiration-month>
    <expiration-year>2020</expiration-year>
    <customer-id nil="true"/>
    <cardholder-name nil="true"/>
  </credit-card>
  <custom-fields/>
</transaction>
"""

ERROR_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<api-error-response>
  <errors>
    <transaction>
      <errors type="array">
        <error>
          <code>81502</code>
          <attribute type="symbol">amount</attribute>
          <message>Amount is required.</message>
        </error>
      </errors>
    </transaction>
  </errors>
  <message>Amount is required.</message>
</api-error-response>
"""


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def session() -> MagicMock:
    return MagicMock(spec=requests.Session)


@pytest.fixture
def sandbox_credentials() -> ApiKey:
    return ApiKey(
        environment=Environment.SANDBOX,
        merchant_id="merchant_1",
        public_key="public_1",
        private_key="private_1",
    )


@pytest.fixture
def production_credentials() -> ApiKey:
    return ApiKey(
        environment=Environment.PRODUCTION,
        merchant_id="merchant_1",
        public_key="public_1",
        private_key="private_1",
    )


@pytest.fixture
def gateway(sandbox_credentials: ApiKey, session: MagicMock) -> BraintreeGateway:
    return BraintreeGateway(sandbox_credentials, session=session)

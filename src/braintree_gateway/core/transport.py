"""
Authenticated HTTPS transport for the merchant-scoped gateway API.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, Optional, Union
from urllib.parse import quote, urljoin

import requests

from .credentials import Credentials
from .errors import SetupError, TransportError
from .version import __version__

__all__ = [
    "API_VERSION",
    "XML_MIME_TYPE",
    "Transport",
]

API_VERSION = 4
XML_MIME_TYPE = "application/xml"


class Transport:
    """
    Issues requests against ``<environment>/merchants/<merchant_id>/``.

    Responses are requested with ``stream=True`` so the body is still in its
    wire encoding when it reaches :mod:`braintree_gateway.core.response`.
    """

    def __init__(
        self,
        credentials: Credentials,
        *,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        verify: Union[bool, str] = True,
    ) -> None:
        if not credentials.merchant_id:
            raise SetupError("A merchant id is required to build the merchant URL")
        if isinstance(verify, str) and not os.path.exists(verify):
            raise SetupError(f"CA bundle not found at {verify}")

        self.credentials = credentials
        self.session = session or requests.Session()
        self.timeout = timeout
        self.verify = verify
        self.merchant_url = "{}/merchants/{}/".format(
            credentials.environment.base_url,
            quote(credentials.merchant_id, safe=""),
        )
        self.user_agent = f"Braintree Python {__version__}"

    def url_for(self, path: str) -> str:
        return urljoin(self.merchant_url, path)

    def _headers(self, body: Optional[bytes]) -> Dict[str, str]:
        headers = {
            "Content-Type": XML_MIME_TYPE,
            "Accept": XML_MIME_TYPE,
            "Accept-Encoding": "gzip",
            "User-Agent": self.user_agent,
            "Authorization": self.credentials.authorization_header,
            "X-ApiVersion": str(API_VERSION),
        }
        if body is not None:
            headers["Content-Length"] = str(len(body))
        return headers

    def execute(
        self,
        method: str,
        path: str,
        body: Optional[bytes] = None,
    ) -> requests.Response:
        url = self.url_for(path)
        logging.info("Sending %s request to %s", method, url)
        try:
            return self.session.request(
                method,
                url,
                data=body,
                headers=self._headers(body),
                stream=True,
                timeout=self.timeout,
                verify=self.verify,
            )
        except requests.RequestException as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc

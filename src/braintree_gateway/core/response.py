"""
Turns a raw gateway response into an XML document.
"""

from __future__ import annotations

import gzip
import zlib
from typing import IO, Optional
from xml.etree.ElementTree import Element

import requests
from urllib3.exceptions import HTTPError as Urllib3HTTPError

from .codec import parse
from .errors import MalformedDocument, TransportError, UnsupportedEncoding

__all__ = [
    "normalize",
    "read_body",
    "read_document",
]

_GZIP_ENCODINGS = ("gzip", "x-gzip")


def normalize(response: requests.Response) -> IO[bytes]:
    """
    Return the body stream with any content encoding undone.

    Unknown encodings are rejected rather than handed to the parser as
    garbage.
    """
    encoding = (response.headers.get("Content-Encoding") or "").strip().lower()
    if not encoding or encoding == "identity":
        return response.raw
    if encoding in _GZIP_ENCODINGS:
        return gzip.GzipFile(fileobj=response.raw, mode="rb")
    raise UnsupportedEncoding(encoding)


def read_body(response: requests.Response) -> bytes:
    """
    Read the whole decoded body and release the connection.
    """
    try:
        stream = normalize(response)
        return stream.read()
    except Urllib3HTTPError as exc:
        raise TransportError(f"Connection failed while reading the response: {exc}") from exc
    except (OSError, EOFError, zlib.error) as exc:
        raise MalformedDocument(f"Response body could not be decompressed: {exc}") from exc
    finally:
        response.close()


def read_document(response: requests.Response) -> Optional[Element]:
    """
    Parse the response body, or return ``None`` when it is empty.
    """
    body = read_body(response)
    if not body.strip():
        return None
    return parse(body)

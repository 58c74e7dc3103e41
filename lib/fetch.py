#!/usr/bin/env python3

"""Address list retrieval from the allowlist providers"""

import logging
from typing import List

import requests
from pydantic import ValidationError

from lib.errors import DecodeError, NetworkError
from lib.models import ProviderResponse

logger = logging.getLogger(__name__)


def _get(url: str) -> bytes:
    """GET the url and return the full body.

    Raises NetworkError on transport failures and non-2xx responses.
    """
    logger.debug(f"GET {url}")
    try:
        with requests.get(url) as response:
            response.raise_for_status()
            return response.content
    except requests.RequestException as e:
        raise NetworkError(str(e)) from e


def fetch_structured_ips(url: str) -> List[str]:
    """Fetch a JSON document with `addresses` and `addresses_v6` arrays.

    Returns:
        IPv4 entries followed by IPv6 entries, in provider order
    """
    body = _get(url)
    try:
        data = ProviderResponse.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(f"invalid response from {url}: {e}") from e
    ips = data.all_addresses()
    logger.debug(f"Got {len(ips)} addresses from {url}")
    return ips


def fetch_plain_ips(url: str) -> List[str]:
    """Fetch a newline-delimited plain-text list.

    A trailing newline yields a trailing empty entry, which is left for the
    renderer to skip. A single trailing carriage return is stripped from each
    entry so CRLF bodies do not leak into the rendered rules.
    """
    body = _get(url)
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"invalid response from {url}: {e}") from e
    ips = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
    logger.debug(f"Got {len(ips)} lines from {url}")
    return ips

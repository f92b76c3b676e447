from __future__ import annotations

"""
Network Communication Infrastructure.

Fetches a published structure document over HTTP so the browser model
can be pointed at a served media folder instead of a local file.
"""

import logging
from typing import Any

import requests

from mediatree.domain.constants import APP_VERSION

logger = logging.getLogger(__name__)

USER_AGENT = f"MediaTree-Client/{APP_VERSION}"
DEFAULT_TIMEOUT = 10


def is_remote_source(source: str) -> bool:
    """Check whether a document source is an HTTP(S) URL."""
    return source.lower().startswith(("http://", "https://"))


def fetch_json_document(url: str, timeout: float = DEFAULT_TIMEOUT) -> Any:
    """
    Download and decode a JSON document.

    Args:
        url: Absolute HTTP(S) URL of the document.
        timeout: Seconds to wait for the server.

    Returns:
        Any: The decoded JSON payload.

    Raises:
        requests.exceptions.RequestException: On transport or HTTP status errors.
        ValueError: If the body is not valid JSON.
    """
    headers = {"User-Agent": USER_AGENT, "Accept": "application/json"}
    logger.debug(f"Network: Fetching structure document from {url}")

    response = requests.get(url, headers=headers, timeout=timeout)
    response.raise_for_status()
    payload = response.json()

    size_kb = len(response.content) / 1024
    logger.debug(f"Network: Document received ({size_kb:.1f} KB).")
    return payload

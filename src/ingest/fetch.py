"""Time-bounded source download.

This module retrieves one CSV source over HTTP GET with ``requests``.
The response is always closed, including when the caller's parse fails.
"""

from __future__ import annotations

import io
from contextlib import contextmanager
from typing import BinaryIO, Iterator

import requests

from core.errors import FetchError, FetchTimeoutError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)
_USER_AGENT = "epicurve/0.1"


@contextmanager
def open_source(url: str, timeout_s: float) -> Iterator[BinaryIO]:
    """Fetch a source URL and expose its body as a byte stream.

    Args:
        url: Fully-resolved source URL.
        timeout_s: Connect and read timeout in seconds.

    Yields:
        Binary stream over the response body.

    Raises:
        FetchTimeoutError: If the server did not answer in time.
        FetchError: For transport errors or non-success status codes.
    """
    try:
        response = requests.get(
            url,
            timeout=timeout_s,
            headers={"User-Agent": _USER_AGENT},
            stream=True,
        )
    except requests.Timeout as error:
        raise FetchTimeoutError(
            f"Timed out after {timeout_s}s retrieving {url}. "
            "Raise EPICURVE_FETCH_TIMEOUT or retry later."
        ) from error
    except requests.RequestException as error:
        raise FetchError(f"Could not retrieve data file {url}: {error}") from error
    try:
        if response.status_code != 200:
            raise FetchError(f"HTTP {response.status_code} {response.reason} retrieving {url}")
        body = _read_body(response, url, timeout_s)
        _LOGGER.info("fetch_completed", url=url, size_bytes=len(body))
        stream = io.BytesIO(body)
        try:
            yield stream
        finally:
            stream.close()
    finally:
        response.close()


def _read_body(response: requests.Response, url: str, timeout_s: float) -> bytes:
    try:
        return response.content or b""
    except requests.Timeout as error:
        raise FetchTimeoutError(f"Timed out after {timeout_s}s reading {url}.") from error
    except requests.RequestException as error:
        raise FetchError(f"Connection dropped while reading {url}: {error}") from error

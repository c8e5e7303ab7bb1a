"""HTTP transport for the HanLP RESTful service.

Processing flow:
    1. Build headers from effective options (`build_headers`).
    2. Send one blocking `requests` call.
    3. Convert status >= 400 into `HTTPError` (`check_response`).
    4. Return the response body as bytes.

Retry behavior:
    No retry loop is implemented. Each HTTP call is attempted once; timeout is
    whatever `ClientOptions.timeout` hands to `requests`.

Error handling strategy:
    - `requests.exceptions.RequestException` (DNS, TLS, connection, timeout)
      propagates unchanged.
    - HTTP status >= 400 raises `HTTPError` carrying code and body text.

Security considerations:
    The `Authorization` header is never logged.
"""

import logging

import requests

from hanlp_client.client.options import ClientOptions
from hanlp_client.errors import HTTPError

logger = logging.getLogger(__name__)


def build_headers(options: ClientOptions) -> dict:
    """Return request headers, adding Basic auth when a credential is set."""
    headers = {
        "Accept": "application/json",
        "Content-Type": "application/json;charset=utf-8",
    }
    if options.auth:
        headers["Authorization"] = f"Basic {options.auth}"
    return headers


def check_response(response: requests.Response) -> bytes:
    """Return the body of a successful response.

    Raises:
        HTTPError: If `response.status_code >= 400`.
    """
    if response.status_code >= 400:
        raise HTTPError(response.status_code, response.text)
    return response.content


def post_json(url: str, body: dict, options: ClientOptions) -> bytes:
    """POST a JSON body and return the raw response bytes.

    Args:
        url: Absolute endpoint URL.
        body: JSON-serializable request body.
        options: Effective options (headers, timeout).
    """
    logger.debug("POST %s", url)
    response = requests.post(
        url,
        json=body,
        headers=build_headers(options),
        timeout=options.timeout,
    )
    logger.debug("POST %s -> %s", url, response.status_code)
    return check_response(response)


def get(url: str, options: ClientOptions) -> bytes:
    """GET an endpoint and return the raw response bytes."""
    logger.debug("GET %s", url)
    response = requests.get(url, headers=build_headers(options), timeout=options.timeout)
    logger.debug("GET %s -> %s", url, response.status_code)
    return check_response(response)

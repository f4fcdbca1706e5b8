"""Provides one-call HTTP helpers built on `requests`.

Each helper sends exactly one request and returns either the response
body, the decoded JSON payload, or the response headers. Any status other
than 200 OK is treated as a failure and raises `HTTPStatusError`;
transport failures propagate as `requests.RequestException`. There is no
retry logic here. Wrap a call in `attempt` to make it recoverable::

    body, ok = attempt(lambda: get_body(url))

or use `catch` for a ``(value, error)`` pair, which `must` unwraps::

    body, err = catch(get_body, url)
    body = must(*catch(get_body, url))
"""

import json
import logging
from typing import Any, Mapping, Optional, Union

import requests

from .. import __version__
from ..core.exceptions import HTTPStatusError

# Initialize a logger for this module.
logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30  # Seconds.
DEFAULT_USER_AGENT = f"pysugar/{__version__}"
JSON_CONTENT_TYPE = "application/json"

Body = Optional[Union[str, bytes]]
Headers = Optional[Mapping[str, str]]


def _request(
    method: str,
    url: str,
    body: Body = None,
    content_type: Optional[str] = None,
    headers: Headers = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Response:
    """Sends a single request and checks for a 200 OK response.

    Args:
        method (str): The HTTP method.
        url (str): The target URL.
        body (Body): The raw request body, if any.
        content_type (Optional[str]): Sent as the Content-Type header when
            given.
        headers (Headers): Extra request headers.
        timeout (float): The request timeout in seconds.

    Returns:
        requests.Response: The successful response.

    Raises:
        HTTPStatusError: If the status code is not 200.
        requests.RequestException: If the request itself fails.
    """
    request_headers = {"User-Agent": DEFAULT_USER_AGENT}
    if headers:
        request_headers.update(headers)
    if content_type:
        request_headers["Content-Type"] = content_type

    logger.info(f"{method} {url}")
    response = requests.request(method, url, data=body, headers=request_headers, timeout=timeout)
    if response.status_code != requests.codes.ok:
        logger.warning(f"{method} {url} returned status {response.status_code}")
        response.close()
        raise HTTPStatusError(response.status_code, url)
    return response


def _encode(payload: Any) -> Optional[bytes]:
    if payload is None:
        return None
    return json.dumps(payload).encode("utf-8")


def _decode(response: requests.Response) -> Any:
    """Decodes a JSON response body.

    Raises:
        ValueError: If the body is not valid JSON.
    """
    try:
        return response.json()
    except ValueError as e:
        raise ValueError(f"invalid JSON response from {response.url}: {e}") from e


# GET requests

def get_body(url: str, headers: Headers = None, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Sends a GET request and returns the response body as text."""
    return _request("GET", url, headers=headers, timeout=timeout).text


def get_json(url: str, headers: Headers = None, timeout: float = DEFAULT_TIMEOUT) -> Any:
    """Sends a GET request and returns the decoded JSON response.

    Raises:
        HTTPStatusError: If the status code is not 200.
        ValueError: If the response body is not valid JSON.
    """
    request_headers = {"Accept": JSON_CONTENT_TYPE}
    if headers:
        request_headers.update(headers)
    return _decode(_request("GET", url, headers=request_headers, timeout=timeout))


def get_header(url: str, headers: Headers = None, timeout: float = DEFAULT_TIMEOUT) -> Mapping[str, str]:
    """Sends a GET request and returns the response headers.

    The returned mapping is case-insensitive. The body is not read.
    """
    response = _request("GET", url, headers=headers, timeout=timeout)
    response.close()
    return response.headers


# POST requests

def post_body(
    url: str,
    body: Body = None,
    content_type: Optional[str] = None,
    headers: Headers = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """Sends a POST request with a raw body and returns the response text."""
    return _request("POST", url, body, content_type, headers, timeout).text


def post_json(url: str, payload: Any = None, headers: Headers = None, timeout: float = DEFAULT_TIMEOUT) -> Any:
    """Sends `payload` as JSON in a POST request and decodes the JSON reply.

    Raises:
        TypeError: If `payload` cannot be serialized to JSON.
        HTTPStatusError: If the status code is not 200.
        ValueError: If the response body is not valid JSON.
    """
    response = _request("POST", url, _encode(payload), JSON_CONTENT_TYPE, headers, timeout)
    return _decode(response)


def post_header(
    url: str,
    body: Body = None,
    content_type: Optional[str] = None,
    headers: Headers = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Mapping[str, str]:
    """Sends a POST request and returns the response headers."""
    response = _request("POST", url, body, content_type, headers, timeout)
    response.close()
    return response.headers


# PUT requests

def put_body(
    url: str,
    body: Body = None,
    content_type: Optional[str] = None,
    headers: Headers = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """Sends a PUT request with a raw body and returns the response text."""
    return _request("PUT", url, body, content_type, headers, timeout).text


def put_json(url: str, payload: Any = None, headers: Headers = None, timeout: float = DEFAULT_TIMEOUT) -> Any:
    """Sends `payload` as JSON in a PUT request and decodes the JSON reply."""
    response = _request("PUT", url, _encode(payload), JSON_CONTENT_TYPE, headers, timeout)
    return _decode(response)


def put_header(
    url: str,
    body: Body = None,
    content_type: Optional[str] = None,
    headers: Headers = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Mapping[str, str]:
    """Sends a PUT request and returns the response headers."""
    response = _request("PUT", url, body, content_type, headers, timeout)
    response.close()
    return response.headers


# DELETE requests

def delete_body(
    url: str,
    body: Body = None,
    content_type: Optional[str] = None,
    headers: Headers = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """Sends a DELETE request and returns the response text."""
    return _request("DELETE", url, body, content_type, headers, timeout).text


def delete_json(url: str, payload: Any = None, headers: Headers = None, timeout: float = DEFAULT_TIMEOUT) -> Any:
    """Sends a DELETE request with an optional JSON payload and decodes the reply."""
    response = _request("DELETE", url, _encode(payload), JSON_CONTENT_TYPE, headers, timeout)
    return _decode(response)


def delete_header(
    url: str,
    body: Body = None,
    content_type: Optional[str] = None,
    headers: Headers = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Mapping[str, str]:
    """Sends a DELETE request and returns the response headers."""
    response = _request("DELETE", url, body, content_type, headers, timeout)
    response.close()
    return response.headers

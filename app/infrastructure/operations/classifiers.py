"""Error classifiers for HTTP client exceptions.

Converts ``requests`` exceptions and non-2xx responses into standardized
OperationResult objects so every integration reports failures the same way.

Usage:
    from infrastructure.operations.classifiers import classify_http_error

    try:
        response = session.post(url, json=payload, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        return classify_http_error(exc)
"""

from typing import Optional

import requests

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

# Upstream bodies are echoed into error messages; keep them short
_MAX_BODY_CHARS = 300


def _response_body(response: Optional[requests.Response]) -> str:
    if response is None:
        return ""
    try:
        body = response.text or ""
    except (UnicodeDecodeError, requests.RequestException):
        return ""
    return body[:_MAX_BODY_CHARS]


def classify_http_error(exc: Exception) -> OperationResult:
    """Classify an HTTP client exception into an OperationResult.

    Status Code Mapping:
    - Timeout: TRANSIENT_ERROR (TIMEOUT)
    - Connection failures: TRANSIENT_ERROR (CONNECTION_ERROR)
    - 429: TRANSIENT_ERROR with retry_after
    - 401/403: UNAUTHORIZED
    - 404: NOT_FOUND
    - 5xx: TRANSIENT_ERROR
    - Other 4xx: PERMANENT_ERROR
    - Anything else: PERMANENT_ERROR

    Args:
        exc: Exception raised while calling the remote service

    Returns:
        OperationResult with appropriate status, message and error_code
    """
    if isinstance(exc, requests.Timeout):
        return OperationResult.transient_error(
            f"Request timed out: {exc}", error_code="TIMEOUT"
        )

    if isinstance(exc, requests.ConnectionError):
        return OperationResult.transient_error(
            f"Connection error: {exc}", error_code="CONNECTION_ERROR"
        )

    if not isinstance(exc, requests.HTTPError):
        return OperationResult.permanent_error(
            f"HTTP client error: {type(exc).__name__}: {exc}",
            error_code="UNKNOWN_ERROR",
        )

    response = exc.response
    status_code = response.status_code if response is not None else None
    body = _response_body(response)

    if status_code == 429:
        retry_after = 60
        header_value = response.headers.get("retry-after") if response is not None else None
        if header_value:
            try:
                retry_after = int(header_value)
            except (ValueError, TypeError):
                pass
        return OperationResult.error(
            OperationStatus.TRANSIENT_ERROR,
            f"Upstream rate limited: {body}",
            error_code="RATE_LIMITED",
            retry_after=retry_after,
        )

    if status_code in (401, 403):
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED,
            f"Upstream rejected credentials ({status_code}): {body}",
            error_code="UNAUTHORIZED",
        )

    if status_code == 404:
        return OperationResult.error(
            OperationStatus.NOT_FOUND,
            f"Upstream resource not found: {body}",
            error_code="NOT_FOUND",
        )

    if status_code and 500 <= status_code < 600:
        return OperationResult.transient_error(
            f"Upstream server error ({status_code}): {body}",
            error_code="SERVER_ERROR",
        )

    return OperationResult.permanent_error(
        f"Upstream returned {status_code}: {body}",
        error_code="HTTP_ERROR",
    )

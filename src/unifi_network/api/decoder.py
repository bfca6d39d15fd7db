"""Response decoding for the UniFi Network API.

Turns an HTTP status and body into either a typed value or one of the
taxonomy errors. Shape problems on a successful response are DecodeError;
non-success statuses are ApiError, with the server's error envelope
attached when it can be parsed.
"""

from typing import Optional, TypeVar

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from unifi_network.logging import get_logger
from unifi_network.models import ErrorEnvelope

from .exceptions import ApiError, AuthenticationError, DecodeError

logger = get_logger(__name__)

T = TypeVar("T")

AUTH_FAILURE_STATUSES = (401, 403)


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def parse_error(status_code: int, body: bytes) -> ApiError:
    """Build the ApiError for a non-success response.

    Args:
        status_code: HTTP status of the response.
        body: Raw response body.

    Returns:
        ApiError (AuthenticationError for 401/403) carrying the envelope's
        code and message unchanged, or only the status if the body is not
        a recognisable envelope.
    """
    code: Optional[str] = None
    message: Optional[str] = None

    if body.strip():
        try:
            envelope = ErrorEnvelope.model_validate_json(body)
        except PydanticValidationError:
            logger.debug("error_envelope_unparseable", status_code=status_code)
        else:
            code = envelope.code or envelope.status_name
            message = envelope.message

    error_cls = AuthenticationError if status_code in AUTH_FAILURE_STATUSES else ApiError
    return error_cls(status_code=status_code, code=code, server_message=message)


def decode(status_code: int, body: bytes, adapter: Optional[TypeAdapter[T]]) -> Optional[T]:
    """Decode a response body into the expected type.

    Args:
        status_code: HTTP status of the response.
        body: Raw response body.
        adapter: Adapter for the expected type, or None when the operation
            returns no data (the body of a success is then ignored).

    Returns:
        The validated value, or None when adapter is None.

    Raises:
        ApiError: Non-success status.
        DecodeError: Success status but the body is empty, not JSON, or does
            not match the expected shape.
    """
    if not is_success(status_code):
        raise parse_error(status_code, body)

    if adapter is None:
        return None

    if not body.strip():
        raise DecodeError(
            message="Empty response body where data was expected",
            status_code=status_code,
        )

    try:
        return adapter.validate_json(body)
    except PydanticValidationError as e:
        raise DecodeError(
            message="Response did not match the expected shape",
            status_code=status_code,
            detail=str(e),
        ) from e


def decode_response(response: httpx.Response, adapter: Optional[TypeAdapter[T]]) -> Optional[T]:
    """Decode an httpx response; see decode()."""
    return decode(response.status_code, response.content, adapter)

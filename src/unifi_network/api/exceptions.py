"""Custom exceptions for UniFi Network API operations.

All exceptions inherit from UnifiAPIError for consistent error handling.
Every failure a client call can produce is one of four kinds:

- TransportError: the controller could not be reached at all
- ApiError: the controller answered with a non-success status
- DecodeError: the controller answered 2xx with a body of the wrong shape
- ValidationError: the caller's input was rejected before any request
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Discriminator shared by every client exception."""

    TRANSPORT = "transport"
    API = "api"
    DECODE = "decode"
    VALIDATION = "validation"


class UnifiAPIError(Exception):
    """Base exception for all UniFi Network API errors.

    Attributes:
        message: Human-readable error message.
        hint: Optional troubleshooting hint for non-experts.
        exit_code: Suggested exit code for CLI applications.
        kind: Which class of failure this is.
    """

    exit_code: int = 1
    kind: ErrorKind

    def __init__(
        self,
        message: str,
        hint: Optional[str] = None,
        exit_code: Optional[int] = None,
    ) -> None:
        self.message = message
        self.hint = hint
        if exit_code is not None:
            self.exit_code = exit_code
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional hint."""
        if self.hint:
            return f"{self.message}\n\nHint: {self.hint}"
        return self.message


class TransportError(UnifiAPIError):
    """Cannot reach the UniFi Network application.

    This typically occurs when:
    - Incorrect hostname/IP address or DNS failure
    - Network connectivity issues or a firewall blocking the connection
    - TLS handshake failure (self-signed certificate with verify_ssl enabled)
    - The request exceeded the configured timeout
    """

    exit_code: int = 2
    kind = ErrorKind.TRANSPORT

    def __init__(
        self,
        message: str = "Cannot connect to UniFi Network application",
        hint: Optional[str] = None,
    ) -> None:
        if hint is None:
            hint = (
                "Is the controller reachable from this host? For consoles with "
                "self-signed certificates, disable SSL verification."
            )
        super().__init__(message=message, hint=hint, exit_code=2)


class ApiError(UnifiAPIError):
    """The API answered with a non-success HTTP status.

    Attributes:
        status_code: HTTP status returned by the server.
        code: Error code from the server's error envelope, if any.
        server_message: Error message from the server's error envelope, if any.
    """

    exit_code: int = 1
    kind = ErrorKind.API

    def __init__(
        self,
        status_code: int,
        code: Optional[str] = None,
        server_message: Optional[str] = None,
        hint: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.code = code
        self.server_message = server_message

        message = f"API error: {status_code}"
        if code:
            message = f"{message} {code}"
        if server_message:
            message = f"{message} - {server_message}"
        super().__init__(message=message, hint=hint)


class AuthenticationError(ApiError):
    """The API rejected the API key (401 or 403).

    This typically occurs when:
    - The key was revoked or mistyped
    - The key belongs to a different console
    """

    exit_code: int = 3

    def __init__(
        self,
        status_code: int,
        code: Optional[str] = None,
        server_message: Optional[str] = None,
        hint: Optional[str] = None,
    ) -> None:
        if hint is None:
            hint = (
                "Create an API key in UniFi Network > Settings > Control Plane > "
                "Integrations and pass it unchanged."
            )
        super().__init__(
            status_code=status_code,
            code=code,
            server_message=server_message,
            hint=hint,
        )


class DecodeError(UnifiAPIError):
    """A successful response did not match the expected shape.

    Usually means the client and the Network application versions disagree
    about a resource's fields.

    Attributes:
        status_code: HTTP status of the undecodable response.
        detail: Parser/validator output describing the mismatch.
    """

    exit_code: int = 1
    kind = ErrorKind.DECODE

    def __init__(
        self,
        message: str = "Unexpected response from UniFi Network API",
        status_code: Optional[int] = None,
        detail: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(
            message=message,
            hint="Check that the Network application version is supported.",
        )


class ValidationError(UnifiAPIError):
    """Caller input or configuration was rejected before any request.

    Attributes:
        field: Name of the offending argument or setting, if known.
    """

    exit_code: int = 1
    kind = ErrorKind.VALIDATION

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        hint: Optional[str] = None,
    ) -> None:
        self.field = field
        super().__init__(message=message, hint=hint)

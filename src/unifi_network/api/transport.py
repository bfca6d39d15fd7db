"""HTTP transport for the UniFi Network integration API.

Wraps an httpx.Client configured with the base URL, TLS verification
policy, timeout and API key authentication, and maps every network-level
failure to TransportError.
"""

from typing import Any, Dict, Optional

import httpx

from unifi_network.config.settings import ClientConfig
from unifi_network.logging import get_logger

from .auth import ApiKeyAuth
from .exceptions import TransportError
from .request import ApiRequest

logger = get_logger(__name__)


class Transport:
    """Sends ApiRequests and returns raw httpx responses.

    Attributes:
        base_url: Prefix for every request path.
        verify_ssl: Whether TLS certificates are verified.
    """

    def __init__(
        self,
        config: ClientConfig,
        http_transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """Initialize the transport.

        Args:
            config: Validated client configuration.
            http_transport: Optional httpx transport to send through instead
                of the network (used by tests and custom network stacks).
        """
        self.base_url = config.base_url
        self.verify_ssl = config.verify_ssl
        self._client = httpx.Client(
            base_url=config.base_url,
            auth=ApiKeyAuth(config.api_key),
            verify=config.verify_ssl,
            timeout=config.timeout,
            headers={"Accept": "application/json"},
            transport=http_transport,
        )

    def send(self, request: ApiRequest) -> httpx.Response:
        """Send one request.

        Args:
            request: The request to send.

        Returns:
            The response, whatever its status code.

        Raises:
            TransportError: DNS, connection, TLS, protocol or timeout failure.
        """
        logger.debug(
            "request_sent",
            method=request.method,
            path=request.path,
            params=request.params or None,
        )

        kwargs: Dict[str, Any] = {}
        if request.params:
            kwargs["params"] = request.params
        if request.json is not None:
            kwargs["json"] = request.json

        try:
            response = self._client.request(request.method, request.path, **kwargs)
        except httpx.TimeoutException as e:
            raise TransportError(
                message=f"Request to {request.path} timed out: {e}",
                hint="Increase the timeout or check that the controller is responsive.",
            ) from e
        except httpx.RequestError as e:
            raise TransportError(
                message=f"Request to {request.path} failed: {e}",
            ) from e

        logger.debug(
            "response_received",
            method=request.method,
            path=request.path,
            status_code=response.status_code,
        )
        return response

    def close(self) -> None:
        """Close the underlying HTTP client and release connections."""
        self._client.close()

    def __enter__(self) -> "Transport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

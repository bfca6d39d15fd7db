"""UniFi Network API client.

The UnifiClient provides a high-level interface to the UniFi Network
integration API: one method per operation, typed return values, and
transparent pagination for list endpoints.

Features:
- Builder-style construction validated up front (UnifiClientBuilder)
- API key authentication, no session or login round trip
- Identifiers validated locally before any request is sent
- List methods that return complete lists, plus lazy iter_* variants

Example usage:
    from unifi_network.api import UnifiClientBuilder

    client = (
        UnifiClientBuilder("https://192.168.1.1/proxy/network/integration")
        .api_key("your-api-key")
        .verify_ssl(False)
        .build()
    )

    with client:
        for site in client.list_sites():
            print(site.id, site.name)
"""

from typing import Any, Dict, List, Optional, Union
from uuid import UUID

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from unifi_network.config.settings import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_TIMEOUT,
    MAX_PAGE_SIZE,
    ClientConfig,
    UnifiSettings,
)
from unifi_network.logging import get_logger
from unifi_network.models import (
    ApplicationInfo,
    Device,
    DeviceDetails,
    DeviceStatistics,
    NetworkClient,
    Page,
    Site,
)

from .decoder import decode_response
from .endpoints import V1_ENDPOINTS, Endpoints
from .exceptions import ValidationError
from .pagination import Paginator
from .request import ApiRequest, build_request
from .transport import Transport

logger = get_logger(__name__)

Identifier = Union[UUID, str]

SITE_PAGE: TypeAdapter[Page[Site]] = TypeAdapter(Page[Site])
DEVICE_PAGE: TypeAdapter[Page[Device]] = TypeAdapter(Page[Device])
CLIENT_PAGE: TypeAdapter[Page[NetworkClient]] = TypeAdapter(Page[NetworkClient])
DEVICE_DETAILS = TypeAdapter(DeviceDetails)
DEVICE_STATISTICS = TypeAdapter(DeviceStatistics)
APPLICATION_INFO = TypeAdapter(ApplicationInfo)

RESTART_ACTION = {"action": "RESTART"}


def parse_identifier(value: Any, name: str) -> UUID:
    """Parse a resource identifier into a UUID.

    Args:
        value: UUID instance or its string form.
        name: Argument name, used in the error message.

    Raises:
        ValidationError: value is not a UUID.
    """
    if isinstance(value, UUID):
        return value
    if isinstance(value, str):
        try:
            return UUID(value.strip())
        except ValueError:
            pass
    raise ValidationError(
        message=f"{name} is not a valid UUID: {value!r}",
        field=name,
        hint="Identifiers are UUIDs as returned by list_sites() and list_devices().",
    )


def validate_page_size(page_size: int) -> int:
    """Check a page size is within what the API accepts.

    Raises:
        ValidationError: page_size is not an int in 1..MAX_PAGE_SIZE.
    """
    if isinstance(page_size, bool) or not isinstance(page_size, int):
        raise ValidationError(
            message=f"page_size must be an integer, got {page_size!r}",
            field="page_size",
        )
    if not 1 <= page_size <= MAX_PAGE_SIZE:
        raise ValidationError(
            message=f"page_size must be between 1 and {MAX_PAGE_SIZE}, got {page_size}",
            field="page_size",
        )
    return page_size


def _config_error(error: PydanticValidationError) -> ValidationError:
    """Convert a pydantic error on ClientConfig into the client's ValidationError."""
    first = error.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ())) or None
    message = first.get("msg", "Invalid configuration")
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    return ValidationError(
        message=f"Invalid client configuration: {field}: {message}",
        field=field,
    )


class UnifiClient:
    """Client for the UniFi Network integration API.

    Holds only immutable configuration and an HTTP connection pool, so one
    instance may be shared between threads.

    Attributes:
        config: The validated ClientConfig.
        endpoints: Endpoint templates used for each operation.
        page_size: Default number of items requested per page.

    Example:
        # As context manager (recommended)
        with UnifiClient(config) as client:
            devices = client.list_devices(site_id)

        # Manual lifecycle management
        client = UnifiClient(config)
        try:
            info = client.get_application_info()
        finally:
            client.close()
    """

    def __init__(
        self,
        config: ClientConfig,
        page_size: int = DEFAULT_PAGE_SIZE,
        http_transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Validated client configuration.
            page_size: Default page size for list operations.
            http_transport: Optional httpx transport to send requests through.

        Raises:
            ValidationError: page_size out of range.
        """
        self.config = config
        self.endpoints: Endpoints = V1_ENDPOINTS
        self.page_size = validate_page_size(page_size)
        self._transport = Transport(config, http_transport=http_transport)

        logger.debug(
            "client_created",
            base_url=config.base_url,
            verify_ssl=config.verify_ssl,
            page_size=self.page_size,
        )

    @classmethod
    def from_settings(
        cls,
        settings: UnifiSettings,
        http_transport: Optional[httpx.BaseTransport] = None,
    ) -> "UnifiClient":
        """Create a client from loaded UnifiSettings."""
        return cls(
            settings.to_client_config(),
            page_size=settings.page_size,
            http_transport=http_transport,
        )

    # Sites

    def iter_sites(
        self,
        filter: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> Paginator[Site]:
        """Lazily iterate over all sites.

        Args:
            filter: Optional server-side filter expression.
            page_size: Items per page (defaults to the client's page size).

        Returns:
            Restartable iterable of Site; pages are fetched as it is consumed.

        Raises:
            ValidationError: page_size out of range.
        """
        request = build_request("GET", self.endpoints.sites, query={"filter": filter})
        return self._paginate(request, SITE_PAGE, page_size)

    def list_sites(
        self,
        filter: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> List[Site]:
        """Get every site visible to the API key.

        Args:
            filter: Optional server-side filter expression.
            page_size: Items per page (defaults to the client's page size).

        Returns:
            All sites in server order.

        Raises:
            TransportError: Controller unreachable.
            ApiError: Non-success response.
            DecodeError: Unexpected response shape.
            ValidationError: page_size out of range.

        Example:
            >>> for site in client.list_sites():
            ...     print(f"{site.id}: {site.name}")
        """
        sites = self.iter_sites(filter=filter, page_size=page_size).collect()
        logger.debug("sites_retrieved", count=len(sites))
        return sites

    def get_sites_page(
        self,
        offset: int = 0,
        limit: Optional[int] = None,
        filter: Optional[str] = None,
    ) -> Page[Site]:
        """Get a single page of sites with explicit offset and limit."""
        request = build_request("GET", self.endpoints.sites, query={"filter": filter})
        return self._get_page(request, SITE_PAGE, offset, limit)

    # Devices

    def iter_devices(
        self,
        site_id: Identifier,
        page_size: Optional[int] = None,
    ) -> Paginator[Device]:
        """Lazily iterate over the adopted devices of a site.

        Raises:
            ValidationError: site_id is not a UUID or page_size out of range.
        """
        request = build_request(
            "GET",
            self.endpoints.devices,
            {"site_id": parse_identifier(site_id, "site_id")},
        )
        return self._paginate(request, DEVICE_PAGE, page_size)

    def list_devices(
        self,
        site_id: Identifier,
        page_size: Optional[int] = None,
    ) -> List[Device]:
        """Get every adopted device of a site.

        Args:
            site_id: Site UUID (or its string form).
            page_size: Items per page (defaults to the client's page size).

        Returns:
            All devices in server order.

        Raises:
            TransportError: Controller unreachable.
            ApiError: Non-success response.
            DecodeError: Unexpected response shape.
            ValidationError: site_id is not a UUID or page_size out of range.
        """
        devices = self.iter_devices(site_id, page_size=page_size).collect()
        logger.debug("devices_retrieved", count=len(devices), site_id=str(site_id))
        return devices

    def get_devices_page(
        self,
        site_id: Identifier,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> Page[Device]:
        """Get a single page of a site's devices."""
        request = build_request(
            "GET",
            self.endpoints.devices,
            {"site_id": parse_identifier(site_id, "site_id")},
        )
        return self._get_page(request, DEVICE_PAGE, offset, limit)

    def get_device(self, site_id: Identifier, device_id: Identifier) -> DeviceDetails:
        """Get full details of one device.

        Args:
            site_id: Site UUID (or its string form).
            device_id: Device UUID (or its string form).

        Returns:
            DeviceDetails for the device.

        Raises:
            TransportError: Controller unreachable.
            ApiError: Non-success response (e.g. 404 for an unknown device).
            DecodeError: Unexpected response shape.
            ValidationError: An identifier is not a UUID.
        """
        request = build_request(
            "GET", self.endpoints.device, self._device_path(site_id, device_id)
        )
        return self._call(request, DEVICE_DETAILS)

    def get_device_statistics(
        self,
        site_id: Identifier,
        device_id: Identifier,
    ) -> DeviceStatistics:
        """Get the latest statistics snapshot of one device.

        Raises:
            TransportError: Controller unreachable.
            ApiError: Non-success response.
            DecodeError: Unexpected response shape.
            ValidationError: An identifier is not a UUID.
        """
        request = build_request(
            "GET",
            self.endpoints.device_statistics,
            self._device_path(site_id, device_id),
        )
        return self._call(request, DEVICE_STATISTICS)

    def restart_device(self, site_id: Identifier, device_id: Identifier) -> None:
        """Ask a device to restart.

        Both identifiers are validated before anything is sent; a malformed
        identifier never reaches the controller.

        Raises:
            TransportError: Controller unreachable.
            ApiError: Non-success response.
            ValidationError: An identifier is not a UUID.
        """
        request = build_request(
            "POST",
            self.endpoints.device_actions,
            self._device_path(site_id, device_id),
            json=RESTART_ACTION,
        )
        self._call(request, None)
        logger.info("device_restart_requested", site_id=str(site_id), device_id=str(device_id))

    # Clients

    def iter_clients(
        self,
        site_id: Identifier,
        page_size: Optional[int] = None,
    ) -> Paginator[NetworkClient]:
        """Lazily iterate over the connected clients of a site.

        Raises:
            ValidationError: site_id is not a UUID or page_size out of range.
        """
        request = build_request(
            "GET",
            self.endpoints.clients,
            {"site_id": parse_identifier(site_id, "site_id")},
        )
        return self._paginate(request, CLIENT_PAGE, page_size)

    def list_clients(
        self,
        site_id: Identifier,
        page_size: Optional[int] = None,
    ) -> List[NetworkClient]:
        """Get every connected client of a site.

        Returns:
            WiredClient, WirelessClient, VpnClient and TeleportClient records
            in server order.

        Raises:
            TransportError: Controller unreachable.
            ApiError: Non-success response.
            DecodeError: Unexpected response shape (including unknown client types).
            ValidationError: site_id is not a UUID or page_size out of range.
        """
        clients = self.iter_clients(site_id, page_size=page_size).collect()
        logger.debug("clients_retrieved", count=len(clients), site_id=str(site_id))
        return clients

    def get_clients_page(
        self,
        site_id: Identifier,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> Page[NetworkClient]:
        """Get a single page of a site's clients."""
        request = build_request(
            "GET",
            self.endpoints.clients,
            {"site_id": parse_identifier(site_id, "site_id")},
        )
        return self._get_page(request, CLIENT_PAGE, offset, limit)

    # Application

    def get_application_info(self) -> ApplicationInfo:
        """Get Network application metadata (version).

        Raises:
            TransportError: Controller unreachable.
            ApiError: Non-success response.
            DecodeError: Unexpected response shape.
        """
        request = build_request("GET", self.endpoints.info)
        return self._call(request, APPLICATION_INFO)

    # Internals

    def _device_path(self, site_id: Identifier, device_id: Identifier) -> Dict[str, UUID]:
        return {
            "site_id": parse_identifier(site_id, "site_id"),
            "device_id": parse_identifier(device_id, "device_id"),
        }

    def _call(self, request: ApiRequest, adapter: Optional[TypeAdapter[Any]]) -> Any:
        """Send one request and decode its response."""
        return decode_response(self._transport.send(request), adapter)

    def _paginate(
        self,
        request: ApiRequest,
        adapter: TypeAdapter[Page[Any]],
        page_size: Optional[int],
    ) -> Paginator[Any]:
        size = self.page_size if page_size is None else validate_page_size(page_size)
        return Paginator(self._transport.send, request, adapter, page_size=size)

    def _get_page(
        self,
        request: ApiRequest,
        adapter: TypeAdapter[Page[Any]],
        offset: int,
        limit: Optional[int],
    ) -> Page[Any]:
        if isinstance(offset, bool) or not isinstance(offset, int) or offset < 0:
            raise ValidationError(
                message=f"offset must be a non-negative integer, got {offset!r}",
                field="offset",
            )
        size = self.page_size if limit is None else validate_page_size(limit)
        return self._call(request.with_query(offset=offset, limit=size), adapter)

    def close(self) -> None:
        """Close the HTTP connection pool."""
        self._transport.close()

    def __enter__(self) -> "UnifiClient":
        return self

    def __exit__(
        self,
        exc_type: Any,
        exc_val: Any,
        exc_tb: Any,
    ) -> None:
        self.close()


class UnifiClientBuilder:
    """Fluent builder for UnifiClient.

    Configuration is validated once, in build(); an invalid base URL or an
    empty API key raises ValidationError before any network activity.

    Example:
        >>> client = (
        ...     UnifiClientBuilder("https://192.168.1.1/proxy/network/integration")
        ...     .api_key("your-api-key")
        ...     .verify_ssl(False)
        ...     .build()
        ... )
    """

    def __init__(self, base_url: str) -> None:
        self._base_url = base_url
        self._api_key: Optional[str] = None
        self._verify_ssl = True
        self._timeout = DEFAULT_TIMEOUT
        self._page_size = DEFAULT_PAGE_SIZE
        self._http_transport: Optional[httpx.BaseTransport] = None

    def api_key(self, api_key: str) -> "UnifiClientBuilder":
        self._api_key = api_key
        return self

    def verify_ssl(self, verify: bool) -> "UnifiClientBuilder":
        self._verify_ssl = verify
        return self

    def timeout(self, seconds: float) -> "UnifiClientBuilder":
        self._timeout = seconds
        return self

    def page_size(self, page_size: int) -> "UnifiClientBuilder":
        self._page_size = page_size
        return self

    def http_transport(self, transport: httpx.BaseTransport) -> "UnifiClientBuilder":
        """Send requests through a custom httpx transport (e.g. httpx.MockTransport)."""
        self._http_transport = transport
        return self

    def build_config(self) -> ClientConfig:
        """Validate the collected settings into a ClientConfig.

        Raises:
            ValidationError: Missing or empty API key, malformed base URL,
                or non-positive timeout.
        """
        if self._api_key is None:
            raise ValidationError(
                message="API key is required",
                field="api_key",
                hint="Call .api_key(...) before .build().",
            )
        try:
            return ClientConfig(
                base_url=self._base_url,
                api_key=self._api_key,
                verify_ssl=self._verify_ssl,
                timeout=self._timeout,
            )
        except PydanticValidationError as e:
            raise _config_error(e) from e

    def build(self) -> UnifiClient:
        """Build the client.

        Raises:
            ValidationError: Invalid configuration or page size.
        """
        return UnifiClient(
            self.build_config(),
            page_size=self._page_size,
            http_transport=self._http_transport,
        )

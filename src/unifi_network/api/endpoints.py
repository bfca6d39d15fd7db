"""API endpoint definitions for the UniFi Network integration API.

Paths are relative to the configured base URL, which already includes the
console-specific prefix (e.g. /proxy/network/integration on UniFi OS).
Placeholders in braces are filled in by build_request().
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Endpoints:
    """Collection of API endpoint templates.

    Attributes:
        info: Application info endpoint (GET)
        sites: Sites list endpoint (GET, paginated)
        devices: Devices of a site (GET, paginated)
        device: Single device details (GET)
        device_statistics: Latest statistics of a device (GET)
        device_actions: Device action endpoint (POST)
        clients: Connected clients of a site (GET, paginated)
    """

    info: str
    sites: str
    devices: str
    device: str
    device_statistics: str
    device_actions: str
    clients: str


V1_ENDPOINTS = Endpoints(
    info="/v1/info",
    sites="/v1/sites",
    devices="/v1/sites/{site_id}/devices",
    device="/v1/sites/{site_id}/devices/{device_id}",
    device_statistics="/v1/sites/{site_id}/devices/{device_id}/statistics/latest",
    device_actions="/v1/sites/{site_id}/devices/{device_id}/actions",
    clients="/v1/sites/{site_id}/clients",
)

"""Data models for UniFi Network API responses."""

from .client import (
    BaseClient,
    NetworkClient,
    TeleportClient,
    VpnClient,
    WiredClient,
    WirelessClient,
)
from .common import ApiModel, ApplicationInfo, ErrorEnvelope, Page
from .device import (
    AccessPointFeature,
    Device,
    DeviceDetails,
    DeviceFeatures,
    DeviceInterfaces,
    DeviceUplink,
    EthernetPort,
    SwitchFeature,
    WirelessRadio,
)
from .enums import (
    ClientType,
    ConnectorType,
    DeviceState,
    FrequencyBand,
    PortState,
    WlanStandard,
)
from .site import Site
from .statistics import (
    DeviceStatistics,
    InterfaceStatistics,
    RadioStatistics,
    UplinkStatistics,
)

__all__ = [
    "AccessPointFeature",
    "ApiModel",
    "ApplicationInfo",
    "BaseClient",
    "ClientType",
    "ConnectorType",
    "Device",
    "DeviceDetails",
    "DeviceFeatures",
    "DeviceInterfaces",
    "DeviceState",
    "DeviceStatistics",
    "DeviceUplink",
    "ErrorEnvelope",
    "EthernetPort",
    "FrequencyBand",
    "InterfaceStatistics",
    "NetworkClient",
    "Page",
    "PortState",
    "RadioStatistics",
    "Site",
    "SwitchFeature",
    "TeleportClient",
    "UplinkStatistics",
    "VpnClient",
    "WiredClient",
    "WirelessClient",
    "WlanStandard",
]

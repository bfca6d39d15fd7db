"""Device models: list overview, full details and physical interfaces."""

from datetime import datetime
from typing import Annotated, List, Optional
from uuid import UUID

from pydantic import BeforeValidator, Field

from .common import ApiModel
from .enums import (
    ConnectorType,
    DeviceState,
    FrequencyBand,
    PortState,
    WlanStandard,
    coerce_frequency_band,
)

Band = Annotated[FrequencyBand, BeforeValidator(coerce_frequency_band)]


class Device(ApiModel):
    """Device as returned by the device list endpoint."""

    id: UUID
    name: str
    model: str
    mac_address: str
    ip_address: str
    state: DeviceState
    features: List[str]
    interfaces: List[str]


class EthernetPort(ApiModel):
    """Overview of one ethernet port."""

    idx: int
    state: PortState
    connector: ConnectorType
    max_speed_mbps: int
    speed_mbps: int


class WirelessRadio(ApiModel):
    """Overview of one radio on an access point."""

    wlan_standard: Optional[WlanStandard] = None
    frequency_ghz: Optional[Band] = Field(default=None, alias="frequencyGHz")
    channel_width_mhz: Optional[int] = Field(default=None, alias="channelWidthMHz")
    channel: Optional[int] = None


class DeviceInterfaces(ApiModel):
    """Physical interfaces of a device."""

    ports: List[EthernetPort] = Field(default_factory=list)
    radios: List[WirelessRadio] = Field(default_factory=list)


class DeviceUplink(ApiModel):
    """The device this device is uplinked to."""

    device_id: UUID


class SwitchFeature(ApiModel):
    pass


class AccessPointFeature(ApiModel):
    pass


class DeviceFeatures(ApiModel):
    """Feature blocks present on a device; absent features are None."""

    switching: Optional[SwitchFeature] = None
    access_point: Optional[AccessPointFeature] = None


class DeviceDetails(ApiModel):
    """Full device record returned by the single-device endpoint."""

    id: UUID
    name: str
    model: str
    supported: bool
    mac_address: str
    ip_address: str
    state: DeviceState
    firmware_version: str
    firmware_updatable: bool
    adopted_at: Optional[datetime] = None
    provisioned_at: Optional[datetime] = None
    configuration_id: str
    uplink: Optional[DeviceUplink] = None
    features: Optional[DeviceFeatures] = None
    interfaces: Optional[DeviceInterfaces] = None

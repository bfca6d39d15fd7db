"""Latest device statistics."""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .common import ApiModel
from .device import Band


class UplinkStatistics(ApiModel):
    tx_rate_bps: int
    rx_rate_bps: int


class RadioStatistics(ApiModel):
    frequency_ghz: Optional[Band] = Field(default=None, alias="frequencyGHz")
    tx_retries_pct: Optional[float] = None


class InterfaceStatistics(ApiModel):
    radios: List[RadioStatistics] = Field(default_factory=list)


class DeviceStatistics(ApiModel):
    """Most recent statistics snapshot for a device.

    Load averages and utilization are only reported by devices with an
    operating system that exposes them, so they are optional.
    """

    uptime_sec: int = Field(ge=0)
    last_heartbeat_at: datetime
    next_heartbeat_at: datetime
    load_average_1min: Optional[float] = Field(default=None, alias="loadAverage1Min")
    load_average_5min: Optional[float] = Field(default=None, alias="loadAverage5Min")
    load_average_15min: Optional[float] = Field(default=None, alias="loadAverage15Min")
    cpu_utilization_pct: Optional[float] = None
    memory_utilization_pct: Optional[float] = None
    uplink: Optional[UplinkStatistics] = None
    interfaces: Optional[InterfaceStatistics] = None

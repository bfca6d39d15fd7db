"""Shared enumerations for the UniFi Network models."""

from enum import Enum
from typing import Any


class DeviceState(str, Enum):
    """Adoption/connection state of an adopted device."""

    ONLINE = "ONLINE"
    OFFLINE = "OFFLINE"
    PENDING_ADOPTION = "PENDING_ADOPTION"
    UPDATING = "UPDATING"
    GETTING_READY = "GETTING_READY"
    ADOPTING = "ADOPTING"
    DELETING = "DELETING"
    CONNECTION_INTERRUPTED = "CONNECTION_INTERRUPTED"
    ISOLATED = "ISOLATED"


class PortState(str, Enum):
    """Link state of an ethernet port."""

    UP = "UP"
    DOWN = "DOWN"
    UNKNOWN = "UNKNOWN"


class ConnectorType(str, Enum):
    """Physical connector of an ethernet port."""

    RJ45 = "RJ45"
    SFP = "SFP"
    SFPPLUS = "SFPPLUS"
    SFP28 = "SFP28"
    QSFP28 = "QSFP28"


class WlanStandard(str, Enum):
    """IEEE 802.11 standard a radio operates on."""

    IEEE_802_11A = "802.11a"
    IEEE_802_11B = "802.11b"
    IEEE_802_11G = "802.11g"
    IEEE_802_11N = "802.11n"
    IEEE_802_11AC = "802.11ac"
    IEEE_802_11AX = "802.11ax"
    IEEE_802_11BE = "802.11be"


class FrequencyBand(str, Enum):
    """Radio frequency band in GHz."""

    BAND_2_4_GHZ = "2.4"
    BAND_5_GHZ = "5"
    BAND_6_GHZ = "6"
    BAND_60_GHZ = "60"


class ClientType(str, Enum):
    """How a client is connected to the network."""

    WIRED = "WIRED"
    WIRELESS = "WIRELESS"
    VPN = "VPN"
    TELEPORT = "TELEPORT"


def coerce_frequency_band(value: Any) -> Any:
    """Normalize a band sent as a JSON number (5, 5.0, 2.4) to its string form.

    Values that are not numbers are returned unchanged so enum validation
    reports them.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return value

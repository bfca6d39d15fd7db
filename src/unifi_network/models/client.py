"""Network client models (wired, wireless, VPN and Teleport clients).

The client list endpoint returns a mix of record shapes tagged by ``type``;
NetworkClient is the discriminated union that decodes any of them.
"""

from datetime import datetime
from typing import Annotated, Literal, Optional, Union
from uuid import UUID

from pydantic import Field

from .common import ApiModel
from .enums import ClientType


class BaseClient(ApiModel):
    """Fields shared by every connected client.

    Subclasses narrow ``type`` to the single wire value they decode.
    """

    type: ClientType
    id: UUID
    name: Optional[str] = None
    connected_at: datetime
    ip_address: Optional[str] = None

    @property
    def client_type(self) -> ClientType:
        return ClientType(self.type)


class WiredClient(BaseClient):
    type: Literal["WIRED"]
    mac_address: str
    uplink_device_id: UUID


class WirelessClient(BaseClient):
    type: Literal["WIRELESS"]
    mac_address: str
    uplink_device_id: UUID


class VpnClient(BaseClient):
    type: Literal["VPN"]


class TeleportClient(BaseClient):
    type: Literal["TELEPORT"]


NetworkClient = Annotated[
    Union[WiredClient, WirelessClient, VpnClient, TeleportClient],
    Field(discriminator="type"),
]

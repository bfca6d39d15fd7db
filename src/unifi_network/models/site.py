"""Site model."""

from typing import Optional
from uuid import UUID

from .common import ApiModel


class Site(ApiModel):
    """A site managed by the Network application."""

    id: UUID
    name: Optional[str] = None
    internal_reference: Optional[str] = None

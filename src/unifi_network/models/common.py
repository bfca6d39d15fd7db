"""Base model, pagination envelope and small shared response models."""

from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class ApiModel(BaseModel):
    """Immutable model mapped to the API's camelCase JSON.

    Unknown fields are ignored so newer Network releases that add fields
    still decode. Missing required fields are validation errors.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )


class Page(ApiModel, Generic[T]):
    """One page of a paginated list response.

    The integration API wraps every list in
    ``{"offset", "limit", "count", "totalCount", "data"}``. Some endpoints
    also report an explicit "more available" flag.
    """

    offset: Optional[int] = Field(default=None, ge=0)
    limit: Optional[int] = Field(default=None, ge=0)
    count: Optional[int] = Field(default=None, ge=0)
    total_count: Optional[int] = Field(default=None, ge=0)
    data: List[T]
    has_more: Optional[bool] = Field(
        default=None,
        validation_alias=AliasChoices("hasMore", "hasNext", "has_more", "has_next"),
    )


class ApplicationInfo(ApiModel):
    """Network application metadata returned by ``/v1/info``."""

    application_version: str


class ErrorEnvelope(ApiModel):
    """Error payload returned with non-success statuses.

    Both ``{"code", "message"}`` and the Network application's own
    ``{"statusCode", "statusName", "code", "message"}`` forms decode here.
    """

    code: Optional[str] = None
    message: Optional[str] = None
    status_code: Optional[int] = None
    status_name: Optional[str] = None

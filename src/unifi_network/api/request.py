"""Request construction for UniFi Network API calls.

An ApiRequest is an immutable description of one HTTP call: method,
resolved path, query parameters and optional JSON body. It carries no
authentication or base URL; those are added by the transport.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from string import Formatter
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote

QueryValue = Any


def _encode_query_value(value: QueryValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _clean_query(query: Optional[Mapping[str, QueryValue]]) -> Dict[str, str]:
    """Drop unset parameters and encode the rest as strings."""
    if not query:
        return {}
    return {
        name: _encode_query_value(value)
        for name, value in query.items()
        if value is not None
    }


@dataclass(frozen=True)
class ApiRequest:
    """A fully resolved API request.

    Attributes:
        method: HTTP method (GET, POST, ...).
        path: Path relative to the base URL, placeholders already substituted.
        params: Query parameters; unset parameters are never present.
        json: Optional JSON body.
    """

    method: str
    path: str
    params: Dict[str, str] = field(default_factory=dict)
    json: Optional[Any] = None

    def with_query(self, **query: QueryValue) -> "ApiRequest":
        """Return a copy with extra query parameters merged in.

        Parameters given as None remove any existing value of that name.
        """
        params = dict(self.params)
        for name, value in query.items():
            if value is None:
                params.pop(name, None)
            else:
                params[name] = _encode_query_value(value)
        return replace(self, params=params)


def build_request(
    method: str,
    template: str,
    path_params: Optional[Mapping[str, Any]] = None,
    query: Optional[Mapping[str, QueryValue]] = None,
    json: Optional[Any] = None,
) -> ApiRequest:
    """Build an ApiRequest from an endpoint template.

    Args:
        method: HTTP method.
        template: Endpoint template such as "/v1/sites/{site_id}/devices".
        path_params: Values for the template placeholders; each is
            percent-encoded as a single path segment.
        query: Query parameters. None values are omitted entirely.
        json: Optional JSON body.

    Returns:
        The resolved ApiRequest.

    Raises:
        KeyError: A template placeholder has no value.

    Example:
        >>> build_request("GET", "/v1/sites/{site_id}/clients", {"site_id": "abc"}).path
        '/v1/sites/abc/clients'
    """
    values = path_params or {}
    placeholders = {name for _, name, _, _ in Formatter().parse(template) if name}
    missing = placeholders - set(values)
    if missing:
        raise KeyError(f"Missing path parameters for {template}: {sorted(missing)}")

    path = template.format(
        **{name: quote(str(values[name]), safe="") for name in placeholders}
    )
    return ApiRequest(
        method=method.upper(),
        path=path,
        params=_clean_query(query),
        json=json,
    )

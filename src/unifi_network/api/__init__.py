"""UniFi Network API client module.

This module provides the UnifiClient facade and its builder, along with the
request pipeline it is composed of: endpoint templates, request building,
API key authentication, the HTTP transport, response decoding, pagination,
and the exception taxonomy.
"""

from unifi_network.api.auth import API_KEY_HEADER, ApiKeyAuth
from unifi_network.api.client import (
    UnifiClient,
    UnifiClientBuilder,
    parse_identifier,
)
from unifi_network.api.decoder import decode, decode_response, parse_error
from unifi_network.api.endpoints import V1_ENDPOINTS, Endpoints
from unifi_network.api.exceptions import (
    ApiError,
    AuthenticationError,
    DecodeError,
    ErrorKind,
    TransportError,
    UnifiAPIError,
    ValidationError,
)
from unifi_network.api.pagination import PageCursor, Paginator, has_more
from unifi_network.api.request import ApiRequest, build_request
from unifi_network.api.transport import Transport

__all__ = [
    # Client
    "UnifiClient",
    "UnifiClientBuilder",
    "parse_identifier",
    # Exceptions
    "ApiError",
    "AuthenticationError",
    "DecodeError",
    "ErrorKind",
    "TransportError",
    "UnifiAPIError",
    "ValidationError",
    # Pipeline
    "API_KEY_HEADER",
    "ApiKeyAuth",
    "ApiRequest",
    "Endpoints",
    "PageCursor",
    "Paginator",
    "Transport",
    "V1_ENDPOINTS",
    "build_request",
    "decode",
    "decode_response",
    "has_more",
    "parse_error",
]

"""API key authentication for the UniFi Network integration API.

The integration API authenticates every request with a static key sent in
the X-API-KEY header; there is no login or session to manage.
"""

from typing import Generator

import httpx

API_KEY_HEADER = "X-API-KEY"


class ApiKeyAuth(httpx.Auth):
    """httpx authentication flow that attaches the API key header.

    Example:
        >>> client = httpx.Client(auth=ApiKeyAuth("my-key"))
    """

    def __init__(self, api_key: str) -> None:
        self._api_key = api_key

    def auth_flow(
        self, request: httpx.Request
    ) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers[API_KEY_HEADER] = self._api_key
        yield request

    def __repr__(self) -> str:
        return f"{type(self).__name__}(api_key='***')"

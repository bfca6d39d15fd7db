"""Offset/limit pagination over UniFi Network list endpoints.

A Paginator is a lazy, restartable iterable: every iteration starts at the
first page and fetches further pages one at a time, only when the consumer
asks for more items. Pages are requested strictly in sequence since each
cursor depends on the previous response.

Traversal stops at the first empty page, or when the server indicates no
more data. The "more data" decision uses, in order:

1. the explicit hasMore/hasNext flag when the server sends one
2. offset + count < totalCount when totalCount is present
3. a full page (len(data) >= limit) when neither is present
"""

from dataclasses import dataclass
from typing import Callable, Dict, Generic, Iterator, List, Optional, TypeVar

import httpx
from pydantic import TypeAdapter

from unifi_network.config.settings import DEFAULT_PAGE_SIZE
from unifi_network.logging import get_logger
from unifi_network.models import Page

from .decoder import decode_response
from .request import ApiRequest

logger = get_logger(__name__)

T = TypeVar("T")

Sender = Callable[[ApiRequest], httpx.Response]


def has_more(page: Page[T], cursor: "PageCursor") -> bool:
    """Whether the server has data beyond this page.

    Args:
        page: The page just decoded.
        cursor: The cursor the page was requested with.
    """
    if page.has_more is not None:
        return page.has_more

    if page.total_count is not None:
        start = page.offset if page.offset is not None else cursor.offset
        return start + len(page.data) < page.total_count

    limit = page.limit or cursor.limit
    return len(page.data) >= limit


@dataclass(frozen=True)
class PageCursor:
    """Position of the next page to request.

    Attributes:
        offset: Index of the first item to return.
        limit: Maximum number of items per page.
    """

    offset: int = 0
    limit: int = DEFAULT_PAGE_SIZE

    def as_query(self) -> Dict[str, int]:
        return {"offset": self.offset, "limit": self.limit}

    def advance(self, page: Page[T]) -> Optional["PageCursor"]:
        """Cursor for the page after this one, or None when traversal is done."""
        if not page.data:
            return None
        if not has_more(page, self):
            return None
        return PageCursor(offset=self.offset + len(page.data), limit=self.limit)


class Paginator(Generic[T]):
    """Iterates every item of a paginated endpoint.

    Example:
        >>> paginator = Paginator(transport.send, request, SITE_PAGE)
        >>> for site in paginator:
        ...     print(site.name)

    Errors from any page fetch propagate out of the iteration; items from
    earlier pages have already been yielded by then.
    """

    def __init__(
        self,
        send: Sender,
        request: ApiRequest,
        adapter: TypeAdapter[Page[T]],
        page_size: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> None:
        """Initialize the paginator.

        Args:
            send: Function that sends an ApiRequest and returns the response.
            request: Request template; offset/limit are merged in per page.
            adapter: Adapter that validates one page of the endpoint.
            page_size: Items requested per page.
            offset: Offset of the first page.
        """
        self._send = send
        self._request = request
        self._adapter = adapter
        self._start = PageCursor(offset=offset, limit=page_size)

    def pages(self) -> Iterator[Page[T]]:
        """Yield each page in server order until traversal stops."""
        cursor: Optional[PageCursor] = self._start
        page_number = 0

        while cursor is not None:
            request = self._request.with_query(**cursor.as_query())
            page = decode_response(self._send(request), self._adapter)
            assert page is not None  # adapter is always set

            page_number += 1
            logger.debug(
                "page_fetched",
                path=request.path,
                page=page_number,
                offset=cursor.offset,
                count=len(page.data),
                total_count=page.total_count,
            )

            yield page
            cursor = cursor.advance(page)

        logger.debug("pagination_complete", path=self._request.path, pages=page_number)

    def __iter__(self) -> Iterator[T]:
        for page in self.pages():
            yield from page.data

    def collect(self) -> List[T]:
        """Fetch every page and return all items as a list."""
        return list(self)

"""Utility functions used for pagination.

A paginated response implements ``Pagination``. The helpers below drive the
walk over a list endpoint: send the current request, yield the page, and when
the page reports more data, derive the next request from that page alone.
Pages are fetched strictly one after another.
"""

import logging
from abc import ABC, abstractmethod
from typing import (
    Any,
    AsyncIterator,
    Awaitable,
    Callable,
    Iterator,
    List,
    Optional,
    TypeVar,
    Union,
)

import httpx

logger = logging.getLogger(__name__)


class Pagination(ABC):
    """A response page that allows pagination."""

    @abstractmethod
    def has_more_pages(self) -> bool:
        """Returns true if the response has more pages."""
        pass

    @abstractmethod
    def next_page(self, request: httpx.Request) -> httpx.Request:
        """Build the request for the next page from the one that produced this page.

        Only meaningful when ``has_more_pages()`` is true.

        Raises:
            PaginationError: if the continuation cursor is missing or unusable
        """
        pass

    @abstractmethod
    def items(self) -> List[Any]:
        """Get the items from a page, in server order."""
        pass

    def next_page_token(self) -> Optional[str]:
        """Returns the raw continuation cursor, if the envelope carries one."""
        return None

    def stops_when_stalled(self) -> bool:
        """Whether the walk ends on an empty page or a cursor that did not advance.

        Checked only after ``next_page`` has built the following request, so a
        malformed cursor still raises.
        """
        return False


P = TypeVar("P", bound=Pagination)


def replace_url(request: httpx.Request, url: Union[httpx.URL, str]) -> httpx.Request:
    """Copy ``request`` with a different URL, keeping method, headers and body."""
    return httpx.Request(
        request.method,
        url,
        headers=request.headers,
        content=request.read(),
        extensions=request.extensions,
    )


def _next_request(
    page: Pagination, request: httpx.Request, previous_token: Optional[str]
) -> Optional[httpx.Request]:
    """Return the request for the page after ``page``, or None when the walk is over."""
    if not page.has_more_pages():
        return None
    next_request = page.next_page(request)
    if page.stops_when_stalled():
        if not page.items():
            logger.warning("Page reports more results but is empty, stopping pagination")
            return None
        token = page.next_page_token()
        if token is not None and token == previous_token:
            logger.warning(f"Continuation cursor did not advance ({token}), stopping pagination")
            return None
    logger.debug(f"Fetching next page: {next_request.url}")
    return next_request


def iter_pages(fetch: Callable[[httpx.Request], P], request: httpx.Request) -> Iterator[P]:
    """Yield every page of a listing, starting with ``request``.

    Errors raised by ``fetch`` or by ``next_page`` end the walk.
    """
    previous_token = None
    while request is not None:
        page = fetch(request)
        yield page
        request = _next_request(page, request, previous_token)
        previous_token = page.next_page_token()


def iter_items(fetch: Callable[[httpx.Request], P], request: httpx.Request) -> Iterator[Any]:
    for page in iter_pages(fetch, request):
        yield from page.items()


async def aiter_pages(
    fetch: Callable[[httpx.Request], Awaitable[P]], request: httpx.Request
) -> AsyncIterator[P]:
    """Asynchronous counterpart of ``iter_pages``."""
    previous_token = None
    while request is not None:
        page = await fetch(request)
        yield page
        request = _next_request(page, request, previous_token)
        previous_token = page.next_page_token()


async def aiter_items(
    fetch: Callable[[httpx.Request], Awaitable[P]], request: httpx.Request
) -> AsyncIterator[Any]:
    async for page in aiter_pages(fetch, request):
        for item in page.items():
            yield item

"""Paginated response envelopes."""

from typing import Generic, List, Optional, TypeVar

import httpx
from pydantic import Field

from ..errors import PaginationError
from ..paginate import Pagination, replace_url
from .base import ApiModel

T = TypeVar("T")


class NestedPage(ApiModel):
    next: Optional[str] = Field(
        None,
        description="The query to get to the next page, in the format <BASE_URL>?<new_params>",
    )


class LinkPage(ApiModel, Pagination, Generic[T]):
    """A page whose envelope links to the next page by URL.

    The request for the next page keeps its own scheme, host and path and takes
    the query parameters of the link.
    """

    page: NestedPage = Field(default_factory=NestedPage)
    data: List[T] = Field(default_factory=list)

    def has_more_pages(self) -> bool:
        return bool(self.page.next)

    def next_page_token(self) -> Optional[str]:
        return self.page.next

    def next_page(self, request: httpx.Request) -> httpx.Request:
        if not self.page.next:
            raise PaginationError("Page has no link to a next page")
        try:
            link = httpx.URL(self.page.next)
        except httpx.InvalidURL as e:
            raise PaginationError(f"Invalid next page link `{self.page.next}`: {e}") from e
        if not link.query:
            raise PaginationError(f"Next page link `{self.page.next}` has no query parameters")
        return replace_url(request, request.url.copy_with(query=link.query))

    def items(self) -> List[T]:
        return list(self.data)


class NextPage(ApiModel):
    after: str
    link: Optional[str] = None


class ForwardPaging(ApiModel):
    next: Optional[NextPage] = None


class CursorPage(ApiModel, Pagination, Generic[T]):
    """A page whose envelope carries an ``after`` cursor for the next page."""

    results: List[T] = Field(default_factory=list)
    paging: Optional[ForwardPaging] = None

    def has_more_pages(self) -> bool:
        return self.paging is not None and self.paging.next is not None

    def stops_when_stalled(self) -> bool:
        return True

    def next_page_token(self) -> Optional[str]:
        if self.paging is None or self.paging.next is None:
            return None
        return self.paging.next.after

    def next_page(self, request: httpx.Request) -> httpx.Request:
        after = self.next_page_token()
        if after is None or not after.strip():
            raise PaginationError("Page has no cursor for a next page")
        return replace_url(request, request.url.copy_set_param("after", after))

    def items(self) -> List[T]:
        return list(self.results)

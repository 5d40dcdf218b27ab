"""Pagination, scalar types and errors shared by generated clients."""

from .errors import (
    ApiError,
    Base64DecodeError,
    CommunicationError,
    InvalidRequestError,
    PaginationError,
    PhoneNumberParseError,
    SerdeError,
    ServerError,
)
from .models import ApiModel, CursorPage, LinkPage
from .paginate import (
    Pagination,
    aiter_items,
    aiter_pages,
    iter_items,
    iter_pages,
)
from .scalars import Base64Data, PhoneNumber

__all__ = [
    "ApiError",
    "Base64DecodeError",
    "CommunicationError",
    "InvalidRequestError",
    "PaginationError",
    "PhoneNumberParseError",
    "SerdeError",
    "ServerError",
    "ApiModel",
    "CursorPage",
    "LinkPage",
    "Pagination",
    "aiter_items",
    "aiter_pages",
    "iter_items",
    "iter_pages",
    "Base64Data",
    "PhoneNumber",
]

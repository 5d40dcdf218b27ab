"""Async HTTP client shared by generated API methods."""

import logging
from functools import lru_cache
from typing import Any, AsyncIterator, Dict, Optional, Type, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from . import __version__
from .config import config
from .core.errors import (
    CommunicationError,
    InvalidRequestError,
    SerdeError,
    ServerError,
)
from .core.paginate import Pagination, aiter_items

logger = logging.getLogger(__name__)

R = TypeVar("R")
P = TypeVar("P", bound=Pagination)


@lru_cache(maxsize=None)
def type_adapter(response_type: Any) -> TypeAdapter:
    """Return the validator for ``response_type``, built once per type."""
    return TypeAdapter(response_type)


class Client:
    """Thin async wrapper that authenticates, sends and decodes API requests.

    Every request carries the bearer token. Success bodies are validated into
    the requested type; everything else is raised as an ``ApiError``.
    """

    def __init__(
        self,
        token: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.token = token
        self.base_url = config.get_base_url(base_url)
        self.timeout = config.get_timeout(timeout)
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=self.timeout)

    @classmethod
    def new_from_env(cls, **kwargs) -> "Client":
        """Create a client from APIKIT_TOKEN and APIKIT_BASE_URL.

        Raises:
            InvalidRequestError: if no token is configured
        """
        token = config.get_token()
        if token is None:
            raise InvalidRequestError("APIKIT_TOKEN is not set")
        return cls(token, **kwargs)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http.aclose()

    def build_request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
    ) -> httpx.Request:
        """Build an authenticated request for ``path`` relative to the base URL."""
        query = {k: v for k, v in (params or {}).items() if v is not None}
        return self._http.build_request(
            method,
            f"{self.base_url}/{path.lstrip('/')}",
            params=query,
            json=json,
            headers={
                "Authorization": f"Bearer {self.token}",
                "User-Agent": f"apikit/{__version__}",
            },
        )

    async def send(
        self, request: httpx.Request, response_type: Optional[Type[R]]
    ) -> Optional[R]:
        """Send ``request`` and decode the response body into ``response_type``.

        Raises:
            CommunicationError: if the request could not be delivered
            SerdeError: if a success body does not match ``response_type``
            ServerError: if the response status is not a success
        """
        logger.debug(f"{request.method} {request.url}")
        try:
            response = await self._http.send(request)
        except httpx.HTTPError as e:
            raise CommunicationError(f"Communication Error: {e}") from e

        text = response.text
        if not response.is_success:
            raise ServerError(response.status_code, text)

        if response_type is None:
            return None
        try:
            return type_adapter(response_type).validate_json(text)
        except ValidationError as e:
            raise SerdeError(f"Serde Error: {e}", response.status_code, text) from e

    async def request(
        self,
        method: str,
        path: str,
        response_type: Type[R],
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
    ) -> R:
        return await self.send(
            self.build_request(method, path, params=params, json=json), response_type
        )

    async def stream(
        self,
        path: str,
        page_type: Type[P],
        params: Optional[Dict[str, Any]] = None,
    ) -> AsyncIterator[Any]:
        """Iterate over every item of a paginated list endpoint."""

        async def fetch(request: httpx.Request) -> P:
            return await self.send(request, page_type)

        async for item in aiter_items(fetch, self.build_request("GET", path, params=params)):
            yield item

"""
HTTP transport for the request scaffold.

Any coroutine returning the response body as a string can feed a repository;
this one is a thin layer over ``httpx.AsyncClient``.
"""

import logging
import re
from collections.abc import Mapping
from typing import Any, Literal

import httpx

from core.models.network import RequestType
from core.serialization import encode_body

logger = logging.getLogger(__name__)

HOSTNAME_REGEX = re.compile(r"[\w.-]+")

type Method = RequestType | Literal["GET", "POST", "PUT", "DELETE"]


class APIClient:
    """Async API client for communication with the server."""

    def __init__(
        self,
        base_url: str = "",
        auth_token: str | None = None,
        *,
        user_agent: str = "basemvi client",
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize a new instance of the APIClient class.

        Args:
            base_url: Prefix for relative URLs (absolute URLs are used as-is)
            auth_token: Authentication token
            user_agent: Value of the User-Agent header
            timeout: Seconds before giving up, None for no timeout
            transport: Custom httpx transport
        """
        self.client = httpx.AsyncClient(
            base_url=base_url,
            headers={"User-Agent": user_agent},
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )
        self.auth_token = auth_token

    def set_auth_token(self, token: str | None) -> None:
        self.auth_token = token

    async def perform_request(
        self,
        url: str,
        method: Method,
        body: Any = None,
        query: Mapping[str, Any] | None = None,
    ) -> str:
        """
        Do a request and return the raw response body.

        Args:
            url: Request URL
            method: HTTP method (GET, POST, PUT, DELETE)
            body: Sent as JSON in the request body, ignored for GET
            query: Parameters appended to the URL

        Returns:
            Response body, or an empty string when the URL cannot be used
        """
        request_type = RequestType(method)

        target = self._resolve_url(url)
        if target is None:
            return ""

        headers: dict[str, str] = {}
        if self.auth_token:
            headers["Authorization"] = f"Bearer {self.auth_token}"

        content: str | None = None
        if request_type is not RequestType.GET:
            content = encode_body(body)
            headers["Content-Type"] = "application/json"

        params = {key: str(value) for key, value in (query or {}).items()}

        response = await self.client.request(
            request_type.value,
            target,
            content=content,
            params=params,
            headers=headers,
        )
        logger.debug(f"{request_type.value} {response.url} -> {response.status_code}")
        return response.text

    def _resolve_url(self, url: str) -> httpx.URL | None:
        """
        Build the absolute URL a request goes to.

        Relative URLs are appended to the base URL the same way httpx does it.

        Returns:
            The URL, or None (with a warning) when it has no http(s) scheme or a
            usable host
        """
        try:
            target = httpx.URL(url)
            base_url = self.client.base_url
            if target.is_relative_url and base_url.scheme:
                target = base_url.copy_with(raw_path=base_url.raw_path + target.raw_path.lstrip(b"/"))
        except httpx.InvalidURL as e:
            logger.warning(f"Invalid URL {url!r}: {e}")
            return None

        # IPv6 hosts were already checked by httpx; anything else that got
        # percent-encoded is not a hostname
        host = target.host
        if target.scheme not in ("http", "https") or not (
            ":" in host or HOSTNAME_REGEX.fullmatch(host)
        ):
            logger.warning(f"Invalid URL {url!r}")
            return None
        return target

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "APIClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

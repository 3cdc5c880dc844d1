from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from . import __version__
from .errors import GuildedAPIError, GuildedDecodeError, InvalidTokenError
from .util import is_valid_header_value

logger = logging.getLogger(__name__)


class GuildedAPI:
    """
    Shared HTTP transport.

    One instance owns one ``httpx.AsyncClient`` (and its connection pool) and is
    handed to every request builder. Each ``request`` call is one HTTP exchange:
    no retries, no rate-limit handling.
    """

    def __init__(
        self,
        *,
        token: str,
        api_base: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        authorization = f"Bearer {token}"
        if not is_valid_header_value(authorization):
            raise InvalidTokenError("Token contains characters that are not allowed in an HTTP header.")
        self._api_base = api_base.rstrip("/")
        client_kwargs: dict[str, Any] = {
            "headers": {
                "Authorization": authorization,
                "Content-Type": "application/json",
                "User-Agent": f"guilded-client/{__version__}",
            },
            "transport": transport,
        }
        if timeout is not None:
            client_kwargs["timeout"] = httpx.Timeout(timeout)
        self._http = httpx.AsyncClient(**client_kwargs)

    @property
    def api_base(self) -> str:
        return self._api_base

    def url(self, path: str) -> str:
        return f"{self._api_base}{path}"

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any]] = None,
        json: Optional[dict[str, Any]] = None,
    ) -> Any:
        url = self.url(path)
        logger.debug("%s %s params=%s", method, url, params)
        try:
            resp = await self._http.request(method, url, params=params, json=json)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise GuildedAPIError(status_code=None, message=f"{method} {path} failed: {exc}") from exc

        if not (200 <= resp.status_code < 300):
            try:
                err = resp.json()
            except ValueError:
                err = {"message": resp.text}
            logger.warning("%s %s returned %s", method, path, resp.status_code)
            raise GuildedAPIError(status_code=resp.status_code, message="Guilded API error", detail=err)

        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            raise GuildedDecodeError(f"{method} {path} returned a non-JSON body", payload=resp.text) from exc

    async def aclose(self) -> None:
        await self._http.aclose()

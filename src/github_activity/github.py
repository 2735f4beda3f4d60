"""GitHub API client - async, single request per call."""


from typing import Any, Optional
from urllib.parse import quote
import logging
import re

import httpx

from .config import DEFAULT_API_URL, DEFAULT_TIMEOUT
from .exceptions import InvalidUsername, MalformedResponse
from .models import GITHUB_LOGIN_PATTERN, EventFeedResponse, decode_feed

_logger = logging.getLogger(__name__)

_LOGIN_RE = re.compile(GITHUB_LOGIN_PATTERN)


class GitHubClient:
    def __init__(
        self,
        token: str = "",
        api_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        # unauthenticated requests are the default; GitHub rate-limits them harder
        if token:
            self._headers["Authorization"] = f"Bearer {token}"
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def _get(self, path: str) -> httpx.Response:
        async with httpx.AsyncClient(
            headers=self._headers,
            timeout=self._timeout,
            transport=self._transport,
        ) as client:
            _logger.debug("GET %s%s", self._api_url, path)
            return await client.get(f"{self._api_url}{path}")

    async def get_user_events(self, username: str) -> EventFeedResponse:
        """Fetch a user's public events, newest first."""
        if not _LOGIN_RE.fullmatch(username):
            raise InvalidUsername(f"Not a GitHub login: {username!r}")
        resp = await self._get(f"/users/{quote(username, safe='')}/events")
        body: Any = None
        if resp.status_code == 200:
            try:
                body = resp.json()
            except ValueError as e:
                raise MalformedResponse(f"Event feed for {username} is not valid JSON") from e
        return decode_feed(body, resp.status_code)

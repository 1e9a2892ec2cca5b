"""HTTP client for the walk activities endpoint."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from constants import DEFAULT_GET_WALKS_URL, REQUEST_TIMEOUT_SEC, SETTING
from models import ActivityListResponse


logger = logging.getLogger(__name__)


class ActivityServiceError(Exception):
    """Base class for walk fetch failures."""


class ActivityConfigError(ActivityServiceError):
    pass


class ActivityHTTPError(ActivityServiceError):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"HTTP error: {status_code}")
        self.status_code = status_code


class ActivityResponseError(ActivityServiceError):
    pass


class ActivityFetchError(ActivityServiceError):
    pass


class ActivityService:
    """
    Fetches walks for a user.

    The endpoint URL can be overridden at runtime through the settings table
    (`get_walks_url`). An `httpx.AsyncClient` may be injected; otherwise one
    is created per request.
    """

    def __init__(
        self,
        db=None,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout_sec: float = REQUEST_TIMEOUT_SEC,
    ) -> None:
        self.db = db
        self._base_url = base_url
        self._client = client
        self.timeout_sec = timeout_sec

    @property
    def get_walks_url(self) -> str:
        if self._base_url:
            return self._base_url
        if self.db is not None:
            override = self.db.get_setting(SETTING.GET_WALKS_URL)
            if override:
                return override
        return DEFAULT_GET_WALKS_URL

    async def get_walks(
        self,
        user_id: str,
        limit: int = 20,
        next_token: Optional[str] = None,
        include_route_urls: bool = True,
    ) -> ActivityListResponse:
        url = self.get_walks_url
        if not url:
            raise ActivityConfigError("GetWalks URL not configured")

        params = {
            'userId': user_id,
            'limit': str(limit),
            'includeRouteUrls': 'true' if include_route_urls else 'false',
        }
        if next_token:
            params['nextToken'] = next_token

        logger.info("Fetching walk activities for user %s (limit %s)", user_id, limit)

        if self._client is not None:
            response = await self._client.get(url, params=params)
        else:
            async with httpx.AsyncClient(timeout=self.timeout_sec) as client:
                response = await client.get(url, params=params)

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ActivityHTTPError(response.status_code) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise ActivityResponseError(f"Invalid response from server: {e}") from e

        if not isinstance(payload, dict):
            raise ActivityResponseError("Invalid response from server: expected an object")

        result = ActivityListResponse.from_dict(payload)
        if not result.success:
            raise ActivityFetchError(f"Fetch failed: {result.error or 'Unknown error'}")

        count = len(result.data.activities) if result.data else 0
        has_more = result.data.has_more if result.data else False
        logger.info("Fetched %d walk activities (has more: %s)", count, has_more)
        return result

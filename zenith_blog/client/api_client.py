# zenith_blog/client/api_client.py
"""
Thin async client for the /api/posts endpoints.

Every method unwraps the `data` member of the response envelope and raises
httpx.HTTPStatusError for any non-2xx status, so callers only have to tell
success from failure.
"""
import logging
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)


class PostsClient:
    def __init__(
        self,
        base_url: str = "",
        http: Optional[httpx.AsyncClient] = None,
    ):
        # Pass `http` to share a client (or an ASGI transport in tests)
        self.http: httpx.AsyncClient = http or httpx.AsyncClient(base_url=base_url)

    async def _call(self, method: str, url: str, json: Any = None) -> dict:
        response = await self.http.request(method, url, json=json)
        if response.is_error:
            logger.warning(f"{method} {url} -> HTTP {response.status_code}")
        response.raise_for_status()
        return response.json()

    async def list_posts(self) -> list[dict]:
        return (await self._call("GET", "/api/posts"))["data"]

    async def get_post(self, post_id: str) -> dict:
        return (await self._call("GET", f"/api/posts/{post_id}"))["data"]

    async def create_post(
        self, title: str, content: str, category: str | None = None
    ) -> dict:
        body = {"title": title, "content": content}
        if category is not None:
            body["category"] = category
        return (await self._call("POST", "/api/posts", json=body))["data"]

    async def update_post(self, post_id: str, **changes: str) -> dict:
        return (await self._call("PATCH", f"/api/posts/{post_id}", json=changes))[
            "data"
        ]

    async def delete_post(self, post_id: str) -> str:
        return (await self._call("DELETE", f"/api/posts/{post_id}"))["message"]

    async def aclose(self) -> None:
        await self.http.aclose()

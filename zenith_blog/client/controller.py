# zenith_blog/client/controller.py
"""
Client-side orchestration for the post grid.

State lives in one ViewState; every handler mutates it, persists the
preference subset when that changed, and callers re-render with
`render(controller.state)`. Failures never propagate out of a handler, they
become error toasts.
"""
import logging
from typing import NamedTuple

import httpx

from zenith_blog.client.api_client import PostsClient
from zenith_blog.client.prefs import PreferenceStore
from zenith_blog.client.render import Page, render
from zenith_blog.client.view_state import SORT_DIRECTIONS, SORT_KEYS, ViewState
from zenith_blog.perf import time_async_function
from zenith_blog.settings import Settings, load_settings

logger = logging.getLogger(__name__)


class Toast(NamedTuple):
    message: str
    kind: str = "success"  # success | error | info


class BlogController:
    def __init__(self, api: PostsClient, prefs: PreferenceStore):
        self.api: PostsClient = api
        self.prefs: PreferenceStore = prefs
        self.state: ViewState = ViewState()
        self.toasts: list[Toast] = []

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "BlogController":
        """Controller wired to ZENITH_API_BASE_URL and ZENITH_PREFS_PATH."""
        settings = settings or load_settings()
        return cls(
            PostsClient(settings.api_base_url), PreferenceStore(settings.prefs_path)
        )

    async def aclose(self) -> None:
        await self.api.aclose()

    async def __aenter__(self) -> "BlogController":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    def notify(self, message: str, kind: str = "success") -> None:
        self.toasts.append(Toast(message, kind))

    def page(self) -> Page:
        return render(self.state)

    async def start(self) -> Page:
        self.prefs.load_into(self.state)
        await self.refresh()
        return self.page()

    @time_async_function
    async def refresh(self) -> bool:
        try:
            self.state.posts = await self.api.list_posts()
        except httpx.HTTPError as e:
            logger.error(f"Loading posts failed: {e}")
            self.notify("Failed to load posts", "error")
            return False
        return True

    def search(self, query: str) -> None:
        self.state.search_query = query

    def sort(self, key: str, direction: str | None = None) -> None:
        if key in SORT_KEYS:
            self.state.sort_by = key
        if direction in SORT_DIRECTIONS:
            self.state.sort_dir = direction
        self.prefs.save(self.state)

    def toggle_sort_direction(self) -> None:
        self.state.sort_dir = "asc" if self.state.sort_dir == "desc" else "desc"

    def toggle_favorite(self, post_id: str) -> bool:
        """Returns True if the post is a favorite afterwards."""
        post = next((p for p in self.state.posts if p["id"] == post_id), None)
        title = post["title"] if post else "Post"
        if post_id in self.state.favorites:
            self.state.favorites.remove(post_id)
            self.notify(f"{title} removed from favorites", "info")
            added = False
        else:
            self.state.favorites.append(post_id)
            self.notify(f"{title} added to favorites", "success")
            added = True
        self.prefs.save(self.state)
        return added

    def toggle_theme(self) -> str:
        self.state.theme = "light" if self.state.theme == "dark" else "dark"
        self.prefs.save(self.state)
        return self.state.theme

    async def delete_post(self, post_id: str) -> bool:
        try:
            await self.api.delete_post(post_id)
        except httpx.HTTPError as e:
            logger.error(f"Deleting {post_id} failed: {e}")
            self.notify("Failed to delete post", "error")
            return False

        self.state.posts = [p for p in self.state.posts if p["id"] != post_id]
        if post_id in self.state.favorites:
            self.state.favorites.remove(post_id)
            self.prefs.save(self.state)
        self.notify("Post deleted successfully")
        return True

    async def save_post(
        self,
        title: str,
        content: str,
        category: str | None = None,
        post_id: str | None = None,
    ) -> dict | None:
        """Editor submit: creates when post_id is None, otherwise updates."""
        title, content = title.strip(), content.strip()
        if not title or not content:
            self.notify("Title and content are required", "error")
            return None

        try:
            if post_id:
                changes = {"title": title, "content": content}
                if category is not None:
                    changes["category"] = category
                saved = await self.api.update_post(post_id, **changes)
                self.notify("Post updated successfully!")
            else:
                saved = await self.api.create_post(title, content, category)
                self.notify("Post published!")
        except httpx.HTTPError as e:
            logger.error(f"Saving post failed: {e}")
            self.notify("Something went wrong. Please try again.", "error")
            return None

        others = [p for p in self.state.posts if p["id"] != saved["id"]]
        self.state.posts = [saved, *others]
        return saved

# zenith_blog/client/view_state.py
from dataclasses import dataclass, field

SORT_KEYS = ("createdAt", "updatedAt", "title", "category")
SORT_DIRECTIONS = ("asc", "desc")
THEMES = ("dark", "light")


@dataclass
class ViewState:
    """Everything the post grid is rendered from."""

    posts: list[dict] = field(default_factory=list)
    search_query: str = ""
    sort_by: str = "createdAt"
    sort_dir: str = "desc"
    favorites: list[str] = field(default_factory=list)
    theme: str = "dark"


def _matches(post: dict, query: str) -> bool:
    return query in post.get("title", "").lower() or query in post.get(
        "category", ""
    ).lower()


def _sort_value(post: dict, key: str):
    value = post.get(key, "")
    # ISO timestamps sort correctly as strings; titles should ignore case
    return value.lower() if key in ("title", "category") else value


def derive_view(state: ViewState) -> list[dict]:
    """
    Filters posts by the search query (title or category substring,
    case-insensitive), then sorts by sort_by/sort_dir. Never mutates state.
    """
    query = state.search_query.strip().lower()
    filtered = [p for p in state.posts if _matches(p, query)] if query else list(state.posts)
    key = state.sort_by if state.sort_by in SORT_KEYS else "createdAt"
    return sorted(
        filtered,
        key=lambda p: _sort_value(p, key),
        reverse=state.sort_dir == "desc",
    )


def favorite_posts(state: ViewState) -> list[dict]:
    favorites = set(state.favorites)
    return [p for p in state.posts if p["id"] in favorites]

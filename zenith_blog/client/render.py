# zenith_blog/client/render.py
from datetime import datetime
from typing import NamedTuple

from zenith_blog.client.view_state import ViewState, derive_view

EXCERPT_LENGTH = 120
WORDS_PER_MINUTE = 200


class Card(NamedTuple):
    id: str
    title: str
    category: str
    excerpt: str
    date: str
    read_time: str
    is_favorite: bool


class Page(NamedTuple):
    count_label: str
    cards: list[Card]
    theme: str


def excerpt(text: str, length: int = EXCERPT_LENGTH) -> str:
    return text[:length].strip() + "…" if len(text) > length else text


def read_time(content: str) -> str:
    words = len(content.split())
    minutes = max(1, round(words / WORDS_PER_MINUTE))
    return f"{minutes} min read"


def format_date(value: str) -> str:
    """ISO timestamp -> 'March 5, 2026'."""
    d = datetime.fromisoformat(value.replace("Z", "+00:00"))
    return f"{d:%B} {d.day}, {d.year}"


def count_label(n: int) -> str:
    return f"{n} post{'' if n == 1 else 's'}"


def render(state: ViewState) -> Page:
    favorites = set(state.favorites)
    cards = [
        Card(
            id=post["id"],
            title=post["title"],
            category=post.get("category") or "General",
            excerpt=excerpt(post["content"]),
            date=format_date(post["createdAt"]),
            read_time=read_time(post["content"]),
            is_favorite=post["id"] in favorites,
        )
        for post in derive_view(state)
    ]
    return Page(count_label=count_label(len(cards)), cards=cards, theme=state.theme)

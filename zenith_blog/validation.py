"""
Request-body checks that run before any storage call.

Each function takes the parsed body and returns only the cleaned fields that
should be written, or raises a 400.
"""
from fastapi import HTTPException

from zenith_blog.models import PostIn, PostPatch, ProductIn, StockPatch
from zenith_blog.store import DEFAULT_CATEGORY


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def validate_new_post(payload: PostIn) -> dict:
    title = _clean(payload.title)
    content = _clean(payload.content)
    if not title or not content:
        raise HTTPException(400, "Title and content are required")
    return {
        "title": title,
        "category": _clean(payload.category) or DEFAULT_CATEGORY,
        "content": content,
    }


def validate_post_changes(payload: PostPatch) -> dict:
    """Blank or absent fields are left out, so they keep their stored value."""
    changes = {}
    for field in ("title", "category", "content"):
        value = _clean(getattr(payload, field))
        if value:
            changes[field] = value
    return changes


def validate_new_product(payload: ProductIn) -> dict:
    name = _clean(payload.name)
    if not name or payload.price is None or payload.stock is None:
        raise HTTPException(400, "Name, price and stock are required")
    return {"name": name, "price": payload.price, "stock": payload.stock}


def validate_stock_change(payload: StockPatch) -> int:
    if payload.stock is None:
        raise HTTPException(400, "Stock is required")
    return payload.stock

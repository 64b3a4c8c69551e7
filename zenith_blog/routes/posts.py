# zenith_blog/routes/posts.py
import logging

from fastapi import APIRouter, HTTPException
from sqlalchemy import delete, desc, select

from zenith_blog.errors import storage_errors
from zenith_blog.models import (
    MessageEnvelope,
    PostEnvelope,
    PostIn,
    PostListEnvelope,
    PostOut,
    PostPatch,
)
from zenith_blog.store import (
    BlogPost,
    async_session,
    is_valid_object_id,
    new_object_id,
    next_update_time,
    utcnow,
)
from zenith_blog.validation import validate_new_post, validate_post_changes

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/posts", tags=["posts"])

NOT_FOUND = "Post not found"


def _require_id(post_id: str) -> str:
    # A string that can't be an id can't match a post either
    if not is_valid_object_id(post_id):
        raise HTTPException(404, NOT_FOUND)
    return post_id


@router.get("", response_model=PostListEnvelope)
async def list_posts() -> PostListEnvelope:
    """All posts, newest first."""
    async with storage_errors("Failed to fetch posts"):
        async with async_session() as session:
            query = select(BlogPost).order_by(desc(BlogPost.created_at))
            posts = (await session.execute(query)).scalars().all()
    return PostListEnvelope(data=[PostOut.model_validate(p) for p in posts])


@router.get("/{post_id}", response_model=PostEnvelope)
async def get_post(post_id: str) -> PostEnvelope:
    _require_id(post_id)
    async with storage_errors("Failed to fetch post"):
        async with async_session() as session:
            post = await session.get(BlogPost, post_id)
            if not post:
                raise HTTPException(404, NOT_FOUND)
    return PostEnvelope(data=PostOut.model_validate(post))


@router.post("", status_code=201, response_model=PostEnvelope)
async def create_post(payload: PostIn) -> PostEnvelope:
    fields = validate_new_post(payload)
    now = utcnow()
    post = BlogPost(id=new_object_id(), created_at=now, updated_at=now, **fields)

    async with storage_errors("Failed to create post"):
        async with async_session() as session:
            session.add(post)
            await session.commit()

    logger.info(f"Created post {post.id}")
    return PostEnvelope(data=PostOut.model_validate(post))


@router.patch("/{post_id}", response_model=PostEnvelope)
async def update_post(
    post_id: str, payload: PostPatch | None = None
) -> PostEnvelope:
    """
    Partial update: only supplied, non-blank fields change.
    updated_at moves forward even when nothing else does, including when the
    request has no body at all.
    """
    _require_id(post_id)
    changes = validate_post_changes(payload or PostPatch())

    async with storage_errors("Failed to update post"):
        async with async_session() as session:
            post = await session.get(BlogPost, post_id)
            if not post:
                raise HTTPException(404, NOT_FOUND)
            for field, value in changes.items():
                setattr(post, field, value)
            post.updated_at = next_update_time(post.updated_at)
            await session.commit()

    return PostEnvelope(data=PostOut.model_validate(post))


@router.delete("/{post_id}", response_model=MessageEnvelope)
async def delete_post(post_id: str) -> MessageEnvelope:
    _require_id(post_id)
    async with storage_errors("Failed to delete post"):
        async with async_session() as session:
            result = await session.execute(
                delete(BlogPost).where(BlogPost.id == post_id)
            )
            await session.commit()
            if result.rowcount == 0:
                raise HTTPException(404, NOT_FOUND)

    logger.info(f"Deleted post {post_id}")
    return MessageEnvelope(message="Post deleted successfully")

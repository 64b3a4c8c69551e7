import re
import secrets
from datetime import datetime, timedelta, timezone

from sqlalchemy import DateTime, Float, Index, Integer, String, Text
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from zenith_blog.settings import load_settings

# logging.basicConfig()
# logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)

DB_URL = load_settings().db_url
# Database setup
engine = create_async_engine(
    DB_URL,
    echo=False,
)
async_session = async_sessionmaker(engine, expire_on_commit=False)

OBJECT_ID_PATTERN = re.compile(r"^[0-9a-f]{24}$")
DEFAULT_CATEGORY = "General"


class Base(DeclarativeBase):
    pass


def new_object_id() -> str:
    """12 random bytes as 24 hex chars, the same shape as a Mongo ObjectId."""
    return secrets.token_hex(12)


def is_valid_object_id(value: str) -> bool:
    return bool(OBJECT_ID_PATTERN.match(value))


def utcnow() -> datetime:
    # Naive UTC so comparisons against SQLite values never mix aware/naive
    return datetime.now(timezone.utc).replace(tzinfo=None)


def next_update_time(previous: datetime | None) -> datetime:
    """Current time, nudged forward so it is always after `previous`."""
    now = utcnow()
    if previous is not None and now <= previous:
        return previous + timedelta(microseconds=1)
    return now


class BlogPost(Base):
    """A blog article in the "blogs" collection."""

    __tablename__ = "blogs"

    __table_args__ = (
        # Listing is always newest first
        Index("ix_blogs_created_at", "created_at"),
    )

    id: Mapped[str] = mapped_column(String(24), primary_key=True, default=new_object_id)
    title: Mapped[str] = mapped_column(String)
    category: Mapped[str] = mapped_column(String, default=DEFAULT_CATEGORY)
    content: Mapped[str] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(DateTime)
    updated_at: Mapped[datetime] = mapped_column(DateTime)


class Product(Base):
    """A shop item in the "products" collection."""

    __tablename__ = "products"

    id: Mapped[str] = mapped_column(String(24), primary_key=True, default=new_object_id)
    name: Mapped[str] = mapped_column(String)
    price: Mapped[float] = mapped_column(Float)
    stock: Mapped[int] = mapped_column(Integer, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime, index=True)


async def init_db() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

# --- Pydantic Models ---
from datetime import datetime, timezone

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_serializer


def as_utc_iso(value: datetime) -> str:
    # The store keeps naive UTC; say so on the wire
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


class PostIn(BaseModel):
    # Optional here so a missing title/content becomes our 400, not a 422
    title: str | None = None
    category: str | None = None
    content: str | None = None


class PostPatch(BaseModel):
    title: str | None = None
    category: str | None = None
    content: str | None = None


class PostOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    category: str
    content: str
    created_at: datetime = Field(
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )
    updated_at: datetime = Field(
        validation_alias=AliasChoices("updated_at", "updatedAt"),
        serialization_alias="updatedAt",
    )

    @field_serializer("created_at", "updated_at")
    def _serialize_timestamps(self, value: datetime) -> str:
        return as_utc_iso(value)


class ProductIn(BaseModel):
    name: str | None = None
    price: float | None = Field(default=None, ge=0)
    stock: int | None = Field(default=None, ge=0)


class StockPatch(BaseModel):
    stock: int | None = Field(default=None, ge=0)


class ProductOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    price: float
    stock: int
    created_at: datetime = Field(
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )

    @field_serializer("created_at")
    def _serialize_created_at(self, value: datetime) -> str:
        return as_utc_iso(value)


class PostEnvelope(BaseModel):
    success: bool = True
    data: PostOut


class PostListEnvelope(BaseModel):
    success: bool = True
    data: list[PostOut]


class ProductEnvelope(BaseModel):
    success: bool = True
    data: ProductOut


class ProductListEnvelope(BaseModel):
    success: bool = True
    data: list[ProductOut]


class MessageEnvelope(BaseModel):
    success: bool = True
    message: str

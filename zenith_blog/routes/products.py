# zenith_blog/routes/products.py
import logging

from fastapi import APIRouter, HTTPException
from sqlalchemy import delete, select

from zenith_blog.errors import storage_errors
from zenith_blog.models import (
    MessageEnvelope,
    ProductEnvelope,
    ProductIn,
    ProductListEnvelope,
    ProductOut,
    StockPatch,
)
from zenith_blog.store import (
    Product,
    async_session,
    is_valid_object_id,
    new_object_id,
    utcnow,
)
from zenith_blog.validation import validate_new_product, validate_stock_change

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/products", tags=["products"])

NOT_FOUND = "Product not found"


def _require_id(product_id: str) -> str:
    if not is_valid_object_id(product_id):
        raise HTTPException(404, NOT_FOUND)
    return product_id


@router.get("", response_model=ProductListEnvelope)
async def list_products() -> ProductListEnvelope:
    async with storage_errors("Failed to fetch products"):
        async with async_session() as session:
            query = select(Product).order_by(Product.created_at)
            products = (await session.execute(query)).scalars().all()
    return ProductListEnvelope(data=[ProductOut.model_validate(p) for p in products])


@router.get("/{product_id}", response_model=ProductEnvelope)
async def get_product(product_id: str) -> ProductEnvelope:
    _require_id(product_id)
    async with storage_errors("Failed to fetch product"):
        async with async_session() as session:
            product = await session.get(Product, product_id)
            if not product:
                raise HTTPException(404, NOT_FOUND)
    return ProductEnvelope(data=ProductOut.model_validate(product))


@router.post("", status_code=201, response_model=ProductEnvelope)
async def create_product(payload: ProductIn) -> ProductEnvelope:
    fields = validate_new_product(payload)
    product = Product(id=new_object_id(), created_at=utcnow(), **fields)

    async with storage_errors("Failed to create product"):
        async with async_session() as session:
            session.add(product)
            await session.commit()

    logger.info(f"Added product {product.id} ({product.name})")
    return ProductEnvelope(data=ProductOut.model_validate(product))


@router.patch("/{product_id}", response_model=ProductEnvelope)
async def update_stock(product_id: str, payload: StockPatch) -> ProductEnvelope:
    """Only stock can change after creation."""
    _require_id(product_id)
    stock = validate_stock_change(payload)

    async with storage_errors("Failed to update stock"):
        async with async_session() as session:
            product = await session.get(Product, product_id)
            if not product:
                raise HTTPException(404, NOT_FOUND)
            product.stock = stock
            await session.commit()

    return ProductEnvelope(data=ProductOut.model_validate(product))


@router.delete("/{product_id}", response_model=MessageEnvelope)
async def delete_product(product_id: str) -> MessageEnvelope:
    _require_id(product_id)
    async with storage_errors("Failed to delete product"):
        async with async_session() as session:
            result = await session.execute(
                delete(Product).where(Product.id == product_id)
            )
            await session.commit()
            if result.rowcount == 0:
                raise HTTPException(404, NOT_FOUND)

    return MessageEnvelope(message="Product deleted successfully")

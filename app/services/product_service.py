import logging
from typing import Any, cast

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from app.core.errors import (
    InvalidProduct,
    ProductConflict,
    ProductNotFound,
    StoreUnavailable,
)
from app.models.product import Product
from app.schemas.product import ProductWrite, validate_product

logger = logging.getLogger(__name__)

_WRITABLE_FIELDS = ("name", "quantity", "price", "description")


def parse_product(data: Any) -> ProductWrite:
    errors = validate_product(data)
    if errors:
        raise InvalidProduct([error.model_dump() for error in errors])
    return ProductWrite.model_validate(data)


def product_exists(db: Session, product_id: int) -> bool:
    count = db.execute(
        select(func.count()).select_from(Product).where(Product.id == product_id)
    ).scalar_one()
    return count > 0


def list_products(db: Session) -> list[Product]:
    try:
        products = db.execute(select(Product).order_by(Product.id)).scalars().all()
    except SQLAlchemyError as exc:
        logger.exception("Failed to list products")
        raise StoreUnavailable() from exc
    return cast(list[Product], list(products))


def get_product(db: Session, product_id: int) -> Product:
    product = db.get(Product, product_id)
    if product is None:
        raise ProductNotFound(product_id)
    return product


def create_product(db: Session, payload: ProductWrite) -> Product:
    # Ids are always assigned by the store; a client-supplied id is ignored.
    product = Product(**payload.model_dump(include=set(_WRITABLE_FIELDS)))
    db.add(product)
    db.commit()
    db.refresh(product)
    logger.info("Created product %s", product.id, extra={"product_id": product.id})
    return product


def update_product(db: Session, product_id: int, payload: ProductWrite) -> None:
    if payload.id != product_id:
        raise InvalidProduct(
            [{"field": "id", "message": f"Body id {payload.id} does not match path id {product_id}."}]
        )

    product = get_product(db, product_id)
    for field in _WRITABLE_FIELDS:
        setattr(product, field, getattr(payload, field))

    try:
        db.commit()
    except StaleDataError as exc:
        db.rollback()
        if not product_exists(db, product_id):
            raise ProductNotFound(product_id) from exc
        logger.warning(
            "Concurrent modification of product %s", product_id, extra={"product_id": product_id}
        )
        raise ProductConflict(product_id) from exc
    logger.info("Updated product %s", product_id, extra={"product_id": product_id})


def delete_product(db: Session, product_id: int) -> Product:
    product = get_product(db, product_id)
    db.delete(product)
    db.commit()
    logger.info("Deleted product %s", product_id, extra={"product_id": product_id})
    return product

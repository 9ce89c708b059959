from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, HTTPException, Path, Request, Response, status
from sqlalchemy.orm import Session

from app.core.constants import API_PREFIX, INT_MAX, INT_MIN
from app.core.errors import ProductServiceError
from app.dependencies import get_db
from app.schemas.product import ProductRead, ProductSummary
from app.services import product_service

router = APIRouter(prefix=API_PREFIX, tags=["Product"])

ProductId = Annotated[int, Path(ge=INT_MIN, le=INT_MAX)]


def _http_error(exc: ProductServiceError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=exc.detail)


@router.get("", response_model=list[ProductSummary])
def list_products(db: Session = Depends(get_db)):
    try:
        products = product_service.list_products(db)
    except ProductServiceError as exc:
        raise _http_error(exc) from exc
    return [ProductSummary.model_validate(product) for product in products]


@router.get("/{product_id}", response_model=ProductRead)
def get_product(product_id: ProductId, db: Session = Depends(get_db)):
    try:
        product = product_service.get_product(db, product_id)
    except ProductServiceError as exc:
        raise _http_error(exc) from exc
    return ProductRead.model_validate(product)


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
def create_product(
    request: Request,
    response: Response,
    payload: Any = Body(None),
    db: Session = Depends(get_db),
):
    try:
        product_in = product_service.parse_product(payload)
        product = product_service.create_product(db, product_in)
    except ProductServiceError as exc:
        raise _http_error(exc) from exc

    response.headers["Location"] = str(request.url_for("get_product", product_id=product.id))
    return ProductRead.model_validate(product)


@router.put(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def update_product(
    product_id: ProductId,
    payload: Any = Body(None),
    db: Session = Depends(get_db),
):
    try:
        product_in = product_service.parse_product(payload)
        product_service.update_product(db, product_id, product_in)
    except ProductServiceError as exc:
        raise _http_error(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{product_id}", response_model=ProductRead)
def delete_product(product_id: ProductId, db: Session = Depends(get_db)):
    try:
        product = product_service.delete_product(db, product_id)
    except ProductServiceError as exc:
        raise _http_error(exc) from exc
    return ProductRead.model_validate(product)


__all__ = ["router"]

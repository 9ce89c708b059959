from typing import Any, Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class ProductServiceError(Exception):
    """Base for failures the product service reports to callers."""

    status_code = 500

    def __init__(self, message: str, *, detail: Optional[Any] = None):
        super().__init__(message)
        self.detail = detail if detail is not None else message


class ProductNotFound(ProductServiceError):
    status_code = 404

    def __init__(self, product_id: int):
        super().__init__(f"Product {product_id} not found.")
        self.product_id = product_id


class InvalidProduct(ProductServiceError):
    status_code = 400

    def __init__(self, errors: list[dict]):
        super().__init__("Invalid product payload.", detail=errors)
        self.errors = errors


class ProductConflict(ProductServiceError):
    """Row changed under an update and still exists; not reconciled."""

    status_code = 500

    def __init__(self, product_id: int):
        super().__init__(f"Product {product_id} was modified concurrently.")
        self.product_id = product_id


class StoreUnavailable(ProductServiceError):
    status_code = 500

    def __init__(self, message: str = "Product store is unavailable."):
        super().__init__(message)


def _field_name(error: dict) -> str:
    if error.get("type") == "json_invalid":
        return "body"
    # Drop the request location ("body", "path", "query") ahead of the field name.
    parts = [str(part) for part in error.get("loc", ())[1:]]
    return ".".join(parts) or "body"


async def request_validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report undecodable bodies and bad path values as 400 field errors."""
    errors = [
        {"field": _field_name(error), "message": error.get("msg", "Invalid value.")}
        for error in exc.errors()
    ]
    return JSONResponse(status_code=InvalidProduct.status_code, content={"detail": errors})


__all__ = [
    "InvalidProduct",
    "ProductConflict",
    "ProductNotFound",
    "ProductServiceError",
    "StoreUnavailable",
    "request_validation_error_handler",
]

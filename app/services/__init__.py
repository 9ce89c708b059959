from app.services.product_service import (
    create_product,
    delete_product,
    get_product,
    list_products,
    parse_product,
    product_exists,
    update_product,
)

__all__ = [
    "create_product",
    "delete_product",
    "get_product",
    "list_products",
    "parse_product",
    "product_exists",
    "update_product",
]

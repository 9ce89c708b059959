from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError

from app.core.constants import INT_MAX, INT_MIN


class ProductWrite(BaseModel):
    """Body accepted by create and update."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[StrictInt] = Field(default=None, ge=INT_MIN, le=INT_MAX)
    name: StrictStr
    quantity: StrictInt = Field(ge=0, le=INT_MAX)
    price: StrictInt = Field(ge=0, le=INT_MAX)
    description: Optional[StrictStr] = None


class ProductRead(BaseModel):
    id: int
    name: Optional[str] = None
    quantity: int
    price: int
    description: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class ProductSummary(BaseModel):
    name: Optional[str] = None
    price: int
    quantity: int
    description: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class FieldError(BaseModel):
    field: str
    message: str


def validate_product(data: Any) -> list[FieldError]:
    """Return the field errors for a candidate product body; empty when valid."""
    if not isinstance(data, dict):
        return [FieldError(field="body", message="Request body must be a JSON object.")]
    try:
        ProductWrite.model_validate(data)
    except ValidationError as exc:
        return [
            FieldError(
                field=".".join(str(part) for part in err["loc"]) or "body",
                message=err["msg"],
            )
            for err in exc.errors()
        ]
    return []


__all__ = [
    "FieldError",
    "ProductRead",
    "ProductSummary",
    "ProductWrite",
    "validate_product",
]

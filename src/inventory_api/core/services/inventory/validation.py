"""Input models for product fields.

Request bodies arrive as loosely-typed JSON. The models below turn them into
normalized, invariant-satisfying values; ``parse_input`` converts pydantic's
ValidationError into an InvalidInputError naming the first failing field.

Integers follow pydantic's lax mode (numeric strings and integral floats pass)
except that booleans are rejected outright. Every integer is capped at the
largest value a 64-bit column holds.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Final, TypeVar

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StringConstraints,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from src.inventory_api.core.services.inventory.errors import InvalidInputError

DEFAULT_LOW_STOCK_THRESHOLD: Final = 5
MAX_STOCK_LEVEL: Final = 2**63 - 1


def _reject_bool(value: Any) -> Any:
    if isinstance(value, bool):
        raise ValueError("booleans are not integers")
    return value


ProductName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Description = Annotated[str, StringConstraints(strip_whitespace=True)]
NonNegativeQuantity = Annotated[
    int, Field(ge=0, le=MAX_STOCK_LEVEL), BeforeValidator(_reject_bool)
]
PositiveQuantity = Annotated[
    int, Field(gt=0, le=MAX_STOCK_LEVEL), BeforeValidator(_reject_bool)
]
ProductId = Annotated[
    str, StringConstraints(pattern=r"^[0-9a-fA-F]{24}$", to_lower=True)
]

_ERROR_MESSAGES: Final = {
    "name": "Invalid or missing name",
    "description": "Invalid description",
    "stock_quantity": "stock_quantity must be an integer >= 0",
    "low_stock_threshold": "Invalid low_stock_threshold",
    "quantity": "quantity must be a positive integer",
    "id": "Invalid product id",
}

_product_id_adapter = TypeAdapter(ProductId)


class _Input(BaseModel):
    model_config = ConfigDict(extra="ignore")


class ProductCreate(_Input):
    """Fields of a new product. Only an absent threshold takes the default."""

    name: ProductName
    description: Description = ""
    stock_quantity: NonNegativeQuantity
    low_stock_threshold: NonNegativeQuantity = DEFAULT_LOW_STOCK_THRESHOLD

    @field_validator("description", mode="before")
    @classmethod
    def _null_description_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class ProductUpdate(_Input):
    """A partial update: only the fields present in the input are changed.

    An explicit null threshold resets it to the default; an explicit null for
    any other field is invalid.
    """

    name: ProductName | None = None
    description: Description | None = None
    stock_quantity: NonNegativeQuantity | None = None
    low_stock_threshold: NonNegativeQuantity | None = None

    @field_validator("name", "description", "stock_quantity", mode="before")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("field may not be null")
        return value

    def changes(self) -> dict[str, Any]:
        changes = {field: getattr(self, field) for field in self.model_fields_set}
        if "low_stock_threshold" in changes and changes["low_stock_threshold"] is None:
            changes["low_stock_threshold"] = DEFAULT_LOW_STOCK_THRESHOLD
        return changes


class StockAdjustment(_Input):
    quantity: PositiveQuantity


InputModel = TypeVar("InputModel", bound=BaseModel)


def _first_error_field(exc: ValidationError) -> str:
    for error in exc.errors():
        if error["loc"]:
            return str(error["loc"][0])
    return ""


def parse_input(model: type[InputModel], data: Mapping[str, Any]) -> InputModel:
    """Validate ``data`` against ``model`` or raise InvalidInputError."""
    try:
        return model.model_validate(dict(data))
    except ValidationError as exc:
        field = _first_error_field(exc)
        raise InvalidInputError(
            field, _ERROR_MESSAGES.get(field, f"Invalid {field}")
        ) from exc


def is_valid_identifier(raw: Any) -> bool:
    """Check the 24-character hex format the persistence layer assigns."""
    try:
        _product_id_adapter.validate_python(raw, strict=True)
    except ValidationError:
        return False
    return True


def validate_identifier(raw: Any) -> str:
    """Return the canonical (lowercase) form of a product id."""
    try:
        return _product_id_adapter.validate_python(raw, strict=True)
    except ValidationError as exc:
        raise InvalidInputError("id", _ERROR_MESSAGES["id"]) from exc

"""Shape checks for data scenarios pass around.

Each validator accepts a mapping or a model instance and raises
AssertionError describing every problem pydantic found.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError

from storefront_e2e.helpers.assertions import assert_email_format


class _ProductShape(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: StrictStr = Field(min_length=1)
    price: Any


class _UserShape(BaseModel):
    model_config = ConfigDict(extra="ignore")

    email: StrictStr
    password: StrictStr


class _CartShape(BaseModel):
    model_config = ConfigDict(extra="ignore")

    items_count: StrictInt = Field(ge=0)
    total: Any


def _as_mapping(data: Mapping[str, Any] | BaseModel) -> Mapping[str, Any]:
    if isinstance(data, BaseModel):
        return data.model_dump()
    return data


def _check(model: type[BaseModel], data: Mapping[str, Any] | BaseModel, what: str) -> BaseModel:
    try:
        return model.model_validate(_as_mapping(data))
    except ValidationError as e:
        raise AssertionError(f"Invalid {what} data: {e}") from e


def validate_product_data(product: Mapping[str, Any] | BaseModel) -> None:
    """Product needs a non-empty string name and a price of any type."""
    _check(_ProductShape, product, "product")


def validate_user_data(user: Mapping[str, Any] | BaseModel) -> None:
    """User needs string email and password; the email must be well formed."""
    shape = _check(_UserShape, user, "user")
    assert_email_format(shape.email)  # type: ignore[attr-defined]


def validate_cart_data(cart: Mapping[str, Any] | BaseModel) -> None:
    """Cart needs a non-negative integer items_count and a total of any type."""
    _check(_CartShape, cart, "cart")

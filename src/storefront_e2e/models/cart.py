"""Cart snapshot models."""

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class CartItem(BaseModel):
    """One row of the cart table, as displayed."""

    model_config = ConfigDict(frozen=True)

    name: str
    price: str
    quantity: str
    total: str


class CartSummary(BaseModel):
    """Cart contents read in a single pass over the cart page."""

    model_config = ConfigDict(frozen=True)

    items_count: StrictInt = Field(ge=0)
    subtotal: StrictStr
    total: StrictStr
    items: list[CartItem] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.items_count == 0

    def names(self) -> list[str]:
        return [item.name for item in self.items]

"""Generated test input: accounts, addresses and products."""

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from storefront_e2e.config.settings import Credentials


class Address(BaseModel):
    """Synthetic postal address."""

    model_config = ConfigDict(frozen=True)

    street: str
    city: str
    state: str
    zip_code: str
    country: str


class RegistrationDetails(BaseModel):
    """Everything the registration form asks for.

    confirm_password is kept separate so scenarios can submit a mismatch.
    """

    model_config = ConfigDict(frozen=True)

    first_name: str
    last_name: str
    email: str
    telephone: str
    password: str
    confirm_password: str

    @property
    def passwords_match(self) -> bool:
        return self.password == self.confirm_password

    @property
    def credentials(self) -> Credentials:
        return Credentials(email=self.email, password=self.password)


class Product(BaseModel):
    """A product as read off a listing or detail page."""

    model_config = ConfigDict(frozen=True)

    name: StrictStr = Field(min_length=1)
    price: StrictStr


__all__ = ["Address", "Credentials", "Product", "RegistrationDetails"]

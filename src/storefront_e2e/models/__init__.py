"""Value models shared by page objects, helpers and scenarios."""

from storefront_e2e.models.cart import CartItem, CartSummary
from storefront_e2e.models.user import Address, Credentials, Product, RegistrationDetails

__all__ = [
    "Address",
    "CartItem",
    "CartSummary",
    "Credentials",
    "Product",
    "RegistrationDetails",
]

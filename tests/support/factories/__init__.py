"""
Test Data Factories

Factory-boy based factories for generating test data.
Follows the pattern: Faker + overrides.

Usage:
    from tests.support.factories import RegistrationFactory

    details = RegistrationFactory.build()  # plain dict
    details = RegistrationDetails(**RegistrationFactory.build())  # model

Pattern:
    - Factories build dicts; wrap them in the pydantic model where needed
    - Override only the fields a test is about
"""

from tests.support.factories.account_factory import (
    AddressFactory,
    CredentialsFactory,
    RegistrationFactory,
)
from tests.support.factories.cart_factory import CartItemFactory

__all__ = ["AddressFactory", "CartItemFactory", "CredentialsFactory", "RegistrationFactory"]

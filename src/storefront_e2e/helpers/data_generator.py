"""
Test Data Generator

Randomized form input for scenarios: emails, phones, passwords, names and
addresses. Values come from a Faker instance, so a generator built with a
seed produces the same sequence every run (emails also carry a millisecond
timestamp to stay unique against a live site).

Usage:
    from storefront_e2e.helpers.data_generator import DataGenerator, generate_random_email

    email = generate_random_email()          # shared default generator
    gen = DataGenerator(seed=1234)           # reproducible sequence
    details = gen.registration(confirm_password="does-not-match")
"""

from __future__ import annotations

import string
import time

from faker import Faker

from storefront_e2e.models import Address, RegistrationDetails

PASSWORD_CHARS = string.ascii_uppercase + string.ascii_lowercase + string.digits + "!@#$%^&*"
EMAIL_SUFFIX_CHARS = string.ascii_lowercase + string.digits

FIRST_NAMES = ("John", "Jane", "Mike", "Sarah", "David", "Lisa", "Tom", "Emma", "Chris", "Anna")
LAST_NAMES = ("Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis")
PRODUCT_NAMES = ("iPhone", "Samsung Galaxy", "MacBook Pro", "Dell Laptop", "iPad", "Sony Camera")

STREETS = ("Main St", "Oak Ave", "Pine Rd", "Elm St", "Maple Dr")
CITIES = ("New York", "Los Angeles", "Chicago", "Houston", "Phoenix")
STATES = ("NY", "CA", "IL", "TX", "AZ")
COUNTRIES = ("United States", "Canada", "United Kingdom", "Australia")


class DataGenerator:
    """Source of randomized test input.

    Args:
        seed: Seed for the underlying Faker instance. None gives a fresh
            random sequence.

    Attributes:
        seed: The seed in use, None when unseeded.
    """

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self.fake = Faker()
        if seed is not None:
            self.fake.seed_instance(seed)

    def email(self) -> str:
        """Unique address like ``testuser1718000000000k3x9qa@example.com``."""
        timestamp = int(time.time() * 1000)
        suffix = self.fake.lexify("??????", letters=EMAIL_SUFFIX_CHARS)
        return f"testuser{timestamp}{suffix}@example.com"

    def phone(self) -> str:
        """US-style number ``NNN-NNN-NNNN`` with non-zero area code and prefix."""
        return self.fake.numerify("%##-%##-%###")

    def password(self, length: int = 8) -> str:
        """Exactly ``length`` characters drawn from PASSWORD_CHARS."""
        if length < 0:
            raise ValueError(f"Password length must be non-negative, got {length}")
        return self.fake.pystr_format(string_format="?" * length, letters=PASSWORD_CHARS)

    def first_name(self) -> str:
        return self.fake.random_element(FIRST_NAMES)

    def last_name(self) -> str:
        return self.fake.random_element(LAST_NAMES)

    def product_name(self) -> str:
        return self.fake.random_element(PRODUCT_NAMES)

    def address(self) -> Address:
        return Address(
            street=f"{self.fake.random_int(min=1, max=9999)} {self.fake.random_element(STREETS)}",
            city=self.fake.random_element(CITIES),
            state=self.fake.random_element(STATES),
            zip_code=str(self.fake.random_int(min=10000, max=99999)),
            country=self.fake.random_element(COUNTRIES),
        )

    def registration(self, **overrides: str) -> RegistrationDetails:
        """Complete registration input; confirm_password mirrors password
        unless overridden."""
        password = overrides.pop("password") if "password" in overrides else self.password(10)
        values = {
            "first_name": self.first_name(),
            "last_name": self.last_name(),
            "email": self.email(),
            "telephone": self.phone(),
            "password": password,
            "confirm_password": password,
        }
        values.update(overrides)
        return RegistrationDetails(**values)


_default = DataGenerator()


def generate_random_email() -> str:
    return _default.email()


def generate_random_phone() -> str:
    return _default.phone()


def generate_random_password(length: int = 8) -> str:
    return _default.password(length)


def generate_random_name() -> str:
    return _default.first_name()


def generate_random_last_name() -> str:
    return _default.last_name()


def generate_random_product_name() -> str:
    return _default.product_name()


def generate_random_address() -> Address:
    return _default.address()

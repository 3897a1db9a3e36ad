"""Base factory configuration for polyfactory."""

import random
from enum import Enum
from uuid import uuid4

from polyfactory.factories.pydantic_factory import ModelFactory


def unique_email(prefix: str) -> str:
    """Generate an email no other factory call will produce."""
    return f"{prefix}-{uuid4().hex[:12]}@example.org"


def pick(domain: type[Enum]) -> str:
    """One valid value of an enumerated field."""
    return random.choice(list(domain)).value


def pick_many(domain: type[Enum]) -> list[str]:
    """A non-empty set of valid values for a multi-valued field."""
    return [member.value for member in random.sample(list(domain), k=random.randint(1, 3))]


class BaseFactory(ModelFactory):
    """Base factory for the create payloads.

    Enumerated fields are plain strings on the schemas, so factories must
    override them with valid members; random text would fail validation.
    """

    __is_base_factory__ = True

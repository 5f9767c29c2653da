"""Annotated Field Types for Pydantic Models

Wrap the rule predicates as Pydantic v2 ``AfterValidator``s so model fields
get the same checks (and the same fixed messages) as direct calls.

Usage:
    from pydantic import BaseModel
    from strvalidate.annotated import EmailStr, IntegerStr, predicate_validator

    class SignupForm(BaseModel):
        email: EmailStr
        age: IntegerStr
        nickname: Annotated[str, predicate_validator(not_empty, alphanumeric)]
"""
from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator

from .combinators import chain
from .rules import (
    Predicate, alphabetic, alphanumeric, email, empty, float_, integer, not_empty, url,
)


def predicate_validator(*predicates: Predicate) -> AfterValidator:
    """Build an AfterValidator that chains predicates and raises on the first failure."""
    def _validate(v: str) -> str:
        if (error := chain(v, *predicates)) is not None:
            raise ValueError(str(error))
        return v
    return AfterValidator(_validate)


EmailStr = Annotated[str, predicate_validator(email)]
URLStr = Annotated[str, predicate_validator(url)]
FloatStr = Annotated[str, predicate_validator(float_)]
IntegerStr = Annotated[str, predicate_validator(integer)]
AlphanumericStr = Annotated[str, predicate_validator(alphanumeric)]
AlphabeticStr = Annotated[str, predicate_validator(alphabetic)]
NonEmptyStr = Annotated[str, predicate_validator(not_empty)]
EmptyStr = Annotated[str, predicate_validator(empty)]

"""Rule Error Taxonomy

Each rule owns exactly one failure kind. Members are singletons with a fixed
message, so a failing rule always hands back the same object and callers can
branch on identity instead of comparing strings.

Codes live in the E21xx block of the validation range:
    2100 NOT_EMAIL ... 2107 EMPTY

Usage:
    from strvalidate import email, RuleError

    if email(value) is RuleError.NOT_EMAIL:
        ...
"""
from __future__ import annotations

from enum import Enum
from typing import Any


class RuleError(Enum):
    """Closed set of rule failures, one per predicate."""
    NOT_EMAIL = (2100, "email", "Expecting an e-mail.")
    NOT_URL = (2101, "url", "Expecting an URL.")
    NOT_FLOAT = (2102, "float", "Expecting a floating point number (0-9 and point).")
    NOT_INTEGER = (2103, "integer", "Expecting an integer number.")
    NOT_ALPHANUMERIC = (2104, "alphanumeric", "Expecting alphanumeric.")
    NOT_ALPHABETIC = (2105, "alphabetic", "Expecting an alphabetic string.")
    IS_EMPTY = (2106, "not_empty", "Expecting a non empty value.")
    EMPTY = (2107, "empty", "Expecting an empty value.")

    def __init__(self, code: int, constraint: str, message: str) -> None:
        self.code = code
        self.constraint = constraint
        self._message = message

    @property
    def message(self) -> str: return self._message

    def __str__(self) -> str: return self._message

    def to_dict(self) -> dict[str, Any]:
        """Serialize for API responses."""
        return {"code": self.name, "code_num": self.code, "constraint": self.constraint, "message": self._message}


class ValidationFailed(Exception):
    """Exception wrapper for one or more RuleErrors.

    Use this when calling code prefers raising over inspecting returned
    errors (e.g. inside request handlers).
    """

    def __init__(self, *errors: RuleError):
        if not errors:
            raise ValueError("ValidationFailed requires at least one RuleError")
        self.errors: tuple[RuleError, ...] = errors
        super().__init__(*errors)

    def __str__(self) -> str: return "; ".join(e.message for e in self.errors)

    @property
    def error(self) -> RuleError: return self.errors[0]

    def to_dict(self) -> dict[str, Any]:
        return {"error": {"type": "validation_error", "message": str(self),
            "errors": [e.to_dict() for e in self.errors]}}


def raise_error(error: RuleError | None) -> None:
    """Raise ValidationFailed if error is set, otherwise return.

    Usage:
        raise_error(chain(form["email"], not_empty, email))
    """
    if error is not None:
        raise ValidationFailed(error)


def raise_first(*results: RuleError | None) -> None:
    """Raise ValidationFailed for the first non-None result."""
    for result in results:
        raise_error(result)

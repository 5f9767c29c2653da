"""String Rule Predicates

Regex-backed checks for common input shapes. Every predicate takes a single
string and returns None when it conforms or the RuleError of the rule that
failed. Predicates are pure: no shared state is touched after import.

The patterns are deliberately permissive (``email("a@b")`` passes). Layer
stricter checks on top with ``chain`` when a field needs them.

Features:
- Patterns compiled once at import time
- Whole-string matching (``fullmatch``), so trailing garbage or newlines fail
- Read-only registry for lookup by rule name
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping

from .errors import RuleError

Predicate = Callable[[str], "RuleError | None"]


# ============================================================================
# Compiled Patterns
# ============================================================================

RULE_EMAIL = re.compile(r"^[a-zA-Z0-9\+\-\.]+@[a-zA-Z0-9\.\-]+$")
RULE_URL = re.compile(r"^[a-zA-Z0-9]+:\/\/.+")
RULE_FLOAT = re.compile(r"^[0-9\.]+$")
RULE_INTEGER = re.compile(r"^[0-9]+$")
RULE_ALPHANUMERIC = re.compile(r"^[a-zA-Z0-9]+$")
RULE_ALPHABETIC = re.compile(r"^[a-zA-Z]+$")


def _require_str(value: object) -> None:
    if not isinstance(value, str):
        raise TypeError(f"Expected string, got {type(value).__name__}")


@dataclass(frozen=True, slots=True)
class Rule:
    """A compiled pattern bound to the error it reports."""
    name: str
    pattern: re.Pattern[str]
    error: RuleError

    @property
    def pattern_text(self) -> str: return self.pattern.pattern

    @property
    def constraint_name(self) -> str: return f"{self.name}[{self.pattern.pattern}]"

    def __call__(self, value: str) -> RuleError | None:
        _require_str(value)
        return None if self.pattern.fullmatch(value) else self.error


# ============================================================================
# Predicates
# ============================================================================

_email = Rule("email", RULE_EMAIL, RuleError.NOT_EMAIL)
_url = Rule("url", RULE_URL, RuleError.NOT_URL)
_float = Rule("float", RULE_FLOAT, RuleError.NOT_FLOAT)
_integer = Rule("integer", RULE_INTEGER, RuleError.NOT_INTEGER)
_alphanumeric = Rule("alphanumeric", RULE_ALPHANUMERIC, RuleError.NOT_ALPHANUMERIC)
_alphabetic = Rule("alphabetic", RULE_ALPHABETIC, RuleError.NOT_ALPHABETIC)


def empty(value: str) -> RuleError | None:
    """Pass only for the empty string."""
    _require_str(value)
    return RuleError.EMPTY if value != "" else None


def not_empty(value: str) -> RuleError | None:
    """Pass for any non-empty string, whitespace included."""
    _require_str(value)
    return RuleError.IS_EMPTY if value == "" else None


def email(value: str) -> RuleError | None:
    """Loose e-mail shape: ``local@domain`` with no TLD requirement."""
    return _email(value)


def url(value: str) -> RuleError | None:
    """Any ``scheme://rest`` string."""
    return _url(value)


def float_(value: str) -> RuleError | None:
    """Digits and dots only. ``"1.2.3"`` passes; signs and exponents do not."""
    return _float(value)


def integer(value: str) -> RuleError | None:
    return _integer(value)


def alphanumeric(value: str) -> RuleError | None:
    return _alphanumeric(value)


def alphabetic(value: str) -> RuleError | None:
    return _alphabetic(value)


# ============================================================================
# Registry
# ============================================================================

RULES: Mapping[str, Predicate] = MappingProxyType({
    "empty": empty,
    "not_empty": not_empty,
    "email": email,
    "url": url,
    "float": float_,
    "integer": integer,
    "alphanumeric": alphanumeric,
    "alphabetic": alphabetic,
})


def get_rule(name: str) -> Predicate:
    """Look up a predicate by rule name."""
    try:
        return RULES[name]
    except KeyError:
        raise KeyError(f"Unknown rule '{name}'. Known rules: {', '.join(sorted(RULES))}") from None

"""String Validation Helpers

Regex-backed predicates for common input shapes plus combinators that fold
their outcomes into pass/fail or collect-all verdicts.

Key Features:
- One predicate per shape: email, URL, float, integer, alphanumeric,
  alphabetic, empty and non-empty
- Singleton RuleError per rule for identity-based branching
- chain (deferred, short-circuit), each (first), all_of (collect), any_of (alternatives)
- Optional exception flow via ValidationFailed
- Pydantic field types in ``strvalidate.annotated``

Usage:
    from strvalidate import chain, all_of, any_of, not_empty, email, empty, integer

    err = chain(form["email"], not_empty, email)

    errors = all_of(
        email(form["email"]),
        any_of(empty(form["age"]), integer(form["age"])),
    )
"""
from .errors import (
    RuleError,
    ValidationFailed,
    raise_error,
    raise_first,
)

from .rules import (
    # Patterns
    RULE_EMAIL,
    RULE_URL,
    RULE_FLOAT,
    RULE_INTEGER,
    RULE_ALPHANUMERIC,
    RULE_ALPHABETIC,
    # Types
    Rule,
    Predicate,
    # Predicates
    empty,
    not_empty,
    email,
    url,
    float_,
    integer,
    alphanumeric,
    alphabetic,
    # Registry
    RULES,
    get_rule,
)

from .combinators import (
    chain,
    each,
    all_of,
    any_of,
)

from .logging import configure_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    # Errors
    "RuleError",
    "ValidationFailed",
    "raise_error",
    "raise_first",
    # Patterns
    "RULE_EMAIL",
    "RULE_URL",
    "RULE_FLOAT",
    "RULE_INTEGER",
    "RULE_ALPHANUMERIC",
    "RULE_ALPHABETIC",
    # Types
    "Rule",
    "Predicate",
    # Predicates
    "empty",
    "not_empty",
    "email",
    "url",
    "float_",
    "integer",
    "alphanumeric",
    "alphabetic",
    "RULES",
    "get_rule",
    # Combinators
    "chain",
    "each",
    "all_of",
    "any_of",
    # Logging
    "configure_logging",
    "get_logger",
]

"""Combinators

Compose rule outcomes into a single verdict.

``chain`` takes deferred predicates and stops at the first failure. ``each``,
``all_of`` and ``any_of`` take results the caller already computed, so every
underlying check has run by the time they are called; they only decide which
failure(s) to report. Errors pass through unchanged.

Usage:
    err = chain(form["email"], not_empty, email)

    errors = all_of(
        not_empty(form["name"]),
        email(form["email"]),
        any_of(empty(form["age"]), integer(form["age"])),
    )
"""
from __future__ import annotations

from .errors import RuleError
from .logging import get_logger
from .rules import Predicate

log = get_logger("combinators")


def chain(value: str, *predicates: Predicate) -> RuleError | None:
    """Run predicates against value in order; return the first failure.

    Predicates after the first failure are not called.
    """
    for index, predicate in enumerate(predicates):
        if (error := predicate(value)) is not None:
            log.debug("chain_failed", index=index, remaining=len(predicates) - index - 1, error=str(error))
            return error
    return None


def each(*results: RuleError | None) -> RuleError | None:
    """First non-None result in order, or None."""
    for result in results:
        if result is not None:
            return result
    return None


def all_of(*results: RuleError | None) -> list[RuleError]:
    """Every non-None result, order preserved. Empty list when all passed."""
    errors = [result for result in results if result is not None]
    if errors:
        log.debug("all_of_failed", count=len(errors))
    return errors


def any_of(*results: RuleError | None) -> RuleError | None:
    """None if any result passed; otherwise the last error."""
    last: RuleError | None = None
    for result in results:
        if result is None:
            return None
        last = result
    if last is not None:
        log.debug("any_of_failed", tried=len(results), error=str(last))
    return last

"""Structural classification of terms. None of these reduce anything."""

from __future__ import annotations

from typing import TypeIs

from .ast import False_, Succ, Term, True_, Zero
from .errors import NoRuleApplies


def is_numeric(term: Term) -> TypeIs[Zero | Succ]:
    """Return ``True`` if ``term`` is ``0`` or a ``succ`` chain ending in ``0``."""

    while isinstance(term, Succ):
        term = term.operand
    return isinstance(term, Zero)


def is_bool(term: Term) -> TypeIs[True_ | False_]:
    return isinstance(term, True_ | False_)


def is_value(term: Term) -> bool:
    """Return ``True`` for booleans and numeric values.

    ``If``, ``Pred`` and ``IsZero`` are never values, whatever their operands.
    """

    return is_bool(term) or is_numeric(term)


def is_stuck(term: Term) -> bool:
    """Return ``True`` if ``term`` is a normal form that is not a value."""

    from .reduce import step

    if is_value(term):
        return False
    try:
        step(term)
    except NoRuleApplies:
        return True
    return False


__all__ = ["is_numeric", "is_bool", "is_value", "is_stuck"]

"""Abstract syntax tree nodes for the untyped arithmetic language."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import EvalConfig


@dataclass(frozen=True)
class Term:
    """Base class for all arithmetic terms.

    The behaviour lives in :mod:`arith.reduce`, :mod:`arith.predicates` and
    :mod:`arith.pretty`; the methods here only delegate. Deferred imports
    avoid cycles with those modules.
    """

    # --- Reduction ------------------------------------------------------------
    def step(self) -> Term:
        """Perform exactly one reduction step or raise ``NoRuleApplies``."""
        from .reduce import step

        return step(self)

    def evaluate(self, config: EvalConfig | None = None) -> Term:
        """Reduce to a normal form."""
        from .eval import evaluate

        return evaluate(self, config)

    # --- Classification -------------------------------------------------------
    def is_value(self) -> bool:
        from .predicates import is_value

        return is_value(self)

    def is_numeric(self) -> bool:
        from .predicates import is_numeric

        return is_numeric(self)

    # --- Display --------------------------------------------------------------
    def format(self) -> str:
        from .pretty import pretty

        return pretty(self)

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True)
class True_(Term):
    """The boolean literal ``true``."""


@dataclass(frozen=True)
class False_(Term):
    """The boolean literal ``false``."""


@dataclass(frozen=True)
class Zero(Term):
    """The numeric literal ``0``."""


@dataclass(frozen=True)
class If(Term):
    """Conditional ``if cond then then else else_``.

    Args:
        cond: Guard expected to reduce to a boolean.
        then: Result when the guard is ``true``.
        else_: Result when the guard is ``false``.
    """

    cond: Term
    then: Term
    else_: Term


@dataclass(frozen=True)
class Succ(Term):
    """Successor of ``operand``."""

    operand: Term


@dataclass(frozen=True)
class Pred(Term):
    """Predecessor of ``operand``; ``pred 0`` is ``0``."""

    operand: Term


@dataclass(frozen=True)
class IsZero(Term):
    """Zero test on ``operand``."""

    operand: Term


type AnyTerm = True_ | False_ | Zero | If | Succ | Pred | IsZero


def numeral(value: int) -> Term:
    """Return the canonical term representing the natural number ``value``."""

    if value < 0:
        raise ValueError("Numerals must be non-negative")
    term: Term = Zero()
    for _ in range(value):
        term = Succ(term)
    return term


def to_int(term: Term) -> int:
    """Return the natural number denoted by the numeric value ``term``."""

    count = 0
    while isinstance(term, Succ):
        count += 1
        term = term.operand
    if not isinstance(term, Zero):
        raise ValueError(f"Not a numeric value: {term!r}")
    return count


__all__ = [
    "AnyTerm",
    "Term",
    "True_",
    "False_",
    "Zero",
    "If",
    "Succ",
    "Pred",
    "IsZero",
    "numeral",
    "to_int",
]

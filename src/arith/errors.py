"""Failures raised while reducing arithmetic terms."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .ast import Term


class ArithError(Exception):
    """Base class for every failure raised by :mod:`arith`."""


class NoRuleApplies(ArithError):
    """No reduction rule matches ``term``.

    The same signal covers a normal form and a stuck subterm. Only
    :func:`arith.predicates.is_value` tells the two apart.
    """

    def __init__(self, term: Term) -> None:
        super().__init__(term)
        self.term = term

    def __str__(self) -> str:
        return f"No rule applies:\n  term = {self.term}"


class MalformedTermError(ArithError, TypeError):
    """A node that is not one of the term variants was found in a term."""

    def __init__(self, node: Any, where: str) -> None:
        super().__init__(node, where)
        self.node = node
        self.where = where

    def __str__(self) -> str:
        return f"Unexpected term in {self.where}: {self.node!r}"


class StepLimitExceeded(ArithError):
    def __init__(self, steps: int, term: Term) -> None:
        super().__init__(steps, term)
        self.steps = steps
        self.term = term

    def __str__(self) -> str:
        return (
            "Step limit exceeded:\n"
            f"  steps = {self.steps}\n"
            f"  term = {self.term}"
        )


__all__ = ["ArithError", "NoRuleApplies", "MalformedTermError", "StepLimitExceeded"]

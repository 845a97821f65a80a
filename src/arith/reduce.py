"""Single-step, call-by-value reduction rules."""

from __future__ import annotations

from .ast import False_, If, IsZero, Pred, Succ, Term, True_, Zero
from .errors import MalformedTermError, NoRuleApplies
from .predicates import is_numeric


def step(term: Term) -> Term:
    """Perform exactly one reduction step on ``term``.

    Raises ``NoRuleApplies`` when ``term`` is a value or stuck. Congruence
    rules step exactly one designated subterm and let its failure through
    untouched.
    """

    match term:
        case True_() | False_() | Zero():
            raise NoRuleApplies(term)

        case If(True_(), then, _):
            return then
        case If(False_(), _, else_):
            return else_
        case If(cond, then, else_):
            return If(step(cond), then, else_)

        case Succ():
            return _step_succ_chain(term)

        case Pred(Zero()):
            return Zero()
        case Pred(Succ(inner)) if is_numeric(inner):
            return inner
        case Pred(operand):
            return Pred(step(operand))

        case IsZero(Zero()):
            return True_()
        case IsZero(Succ(inner)) if is_numeric(inner):
            return False_()
        case IsZero(operand):
            return IsZero(step(operand))

    raise MalformedTermError(term, "step")


def _step_succ_chain(term: Succ) -> Term:
    """Step the innermost non-``succ`` operand of a ``succ`` chain.

    The chain is walked once, so a numeral is recognised in linear time and
    without recursion.
    """

    depth = 0
    base: Term = term
    while isinstance(base, Succ):
        depth += 1
        base = base.operand
    if isinstance(base, Zero):
        raise NoRuleApplies(term)
    reduct = step(base)
    for _ in range(depth):
        reduct = Succ(reduct)
    return reduct


def try_step(term: Term) -> Term | None:
    """Like :func:`step`, but return ``None`` when no rule applies."""

    try:
        return step(term)
    except NoRuleApplies:
        return None


__all__ = ["step", "try_step"]

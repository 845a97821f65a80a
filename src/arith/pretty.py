"""Pretty-printing for arithmetic terms."""

from __future__ import annotations

from .ast import False_, If, IsZero, Pred, Succ, Term, True_, Zero
from .errors import MalformedTermError

_PREFIXES: dict[type[Term], str] = {Succ: "succ", Pred: "pred", IsZero: "iszero"}


def pretty(term: Term) -> str:
    """Return the prefix surface syntax of ``term``, without parentheses."""

    # Unary chains such as long numerals are walked without recursing.
    prefixes: list[str] = []
    while isinstance(term, Succ | Pred | IsZero):
        prefixes.append(_PREFIXES[type(term)])
        term = term.operand

    match term:
        case True_():
            body = "true"
        case False_():
            body = "false"
        case Zero():
            body = "0"
        case If(cond, then, else_):
            body = f"if {pretty(cond)} then {pretty(then)} else {pretty(else_)}"
        case _:
            raise MalformedTermError(term, "pretty")

    return " ".join([*prefixes, body])


__all__ = ["pretty"]

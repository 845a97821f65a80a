"""Multi-step evaluation: drive single steps until a normal form."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from .ast import Term
from .config import EvalConfig, get_config
from .errors import NoRuleApplies, StepLimitExceeded
from .predicates import is_numeric, is_value
from .pretty import pretty
from .reduce import step

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Outcome:
    """A normal form together with how it was reached.

    ``is_value`` is recomputed from ``term``; a ``False`` here means the
    evaluation got stuck.
    """

    term: Term
    steps: int
    is_value: bool


@dataclass(frozen=True)
class MultiStepTerm:
    """Wraps ``origin`` to evaluate it all the way to a normal form.

    ``format``, ``is_value`` and ``is_numeric`` describe the origin term, not
    the result of :meth:`evaluate`. Render the returned term to see the
    result.
    """

    origin: Term
    config: EvalConfig | None = None

    def trace(self) -> Iterator[Term]:
        """Yield the origin and then every reduct up to the normal form.

        ``NoRuleApplies`` ends the trace successfully; any other failure
        propagates unchanged.
        """

        config = self.config or get_config()
        current = self.origin
        steps = 0
        yield current
        while True:
            try:
                reduct = step(current)
            except NoRuleApplies:
                logger.debug("Normal form after %d step(s): %s", steps, current)
                return
            if config.max_steps is not None and steps >= config.max_steps:
                logger.warning("Giving up after %d step(s) at %s", steps, current)
                raise StepLimitExceeded(steps, current)
            steps += 1
            logger.debug("Step %d: %s", steps, reduct)
            current = reduct
            yield current

    def evaluate(self) -> Term:
        """Return the normal form of the origin term."""

        current = self.origin
        for current in self.trace():
            pass
        return current

    def normal_form(self) -> Outcome:
        current = self.origin
        steps = -1
        for current in self.trace():
            steps += 1
        return Outcome(current, steps, is_value(current))

    def format(self) -> str:
        return pretty(self.origin)

    def is_value(self) -> bool:
        return is_value(self.origin)

    def is_numeric(self) -> bool:
        return is_numeric(self.origin)

    def __str__(self) -> str:
        return self.format()


def evaluate(term: Term, config: EvalConfig | None = None) -> Term:
    """Reduce ``term`` to a normal form, which may be stuck."""

    return MultiStepTerm(term, config).evaluate()


def trace(term: Term, config: EvalConfig | None = None) -> Iterator[Term]:
    return MultiStepTerm(term, config).trace()


def normal_form(term: Term, config: EvalConfig | None = None) -> Outcome:
    """Evaluate ``term`` and report the step count and whether it is a value."""

    return MultiStepTerm(term, config).normal_form()


__all__ = ["MultiStepTerm", "Outcome", "evaluate", "trace", "normal_form"]

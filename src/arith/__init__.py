"""Small-step evaluator for the untyped language of booleans and numbers."""

from .ast import (
    AnyTerm,
    False_,
    If,
    IsZero,
    Pred,
    Succ,
    Term,
    True_,
    Zero,
    numeral,
    to_int,
)
from .config import EvalConfig, get_config, set_config, setup_logging
from .errors import ArithError, MalformedTermError, NoRuleApplies, StepLimitExceeded
from .eval import MultiStepTerm, Outcome, evaluate, normal_form, trace
from .predicates import is_bool, is_numeric, is_stuck, is_value
from .pretty import pretty
from .reduce import step, try_step

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
    "EvalConfig",
    "get_config",
    "set_config",
    "setup_logging",
    "ArithError",
    "NoRuleApplies",
    "MalformedTermError",
    "StepLimitExceeded",
    "MultiStepTerm",
    "Outcome",
    "evaluate",
    "trace",
    "normal_form",
    "is_bool",
    "is_numeric",
    "is_stuck",
    "is_value",
    "pretty",
    "step",
    "try_step",
]

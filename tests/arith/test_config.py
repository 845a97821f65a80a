import logging
from collections.abc import Iterator

import pytest

from arith.ast import Pred, numeral
from arith.config import EvalConfig, get_config, set_config, setup_logging
from arith.errors import StepLimitExceeded
from arith.eval import evaluate


@pytest.fixture(autouse=True)
def restore_config() -> Iterator[None]:
    yield
    set_config(None)


def test_defaults() -> None:
    config = get_config()
    assert config.max_steps is None
    assert config.log_level == "WARNING"


def test_negative_step_limit_rejected() -> None:
    with pytest.raises(ValueError):
        EvalConfig(max_steps=-1)


def test_global_config_applies_when_none_given() -> None:
    set_config(EvalConfig(max_steps=1))
    with pytest.raises(StepLimitExceeded):
        evaluate(Pred(Pred(numeral(2))))


def test_explicit_config_wins_over_global() -> None:
    set_config(EvalConfig(max_steps=1))
    assert evaluate(Pred(Pred(numeral(2))), EvalConfig()) == numeral(0)


def test_setup_logging_uses_level_name(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    setup_logging("debug")
    set_config(EvalConfig(log_level="error"))
    setup_logging()

    assert [call["level"] for call in calls] == [logging.DEBUG, logging.ERROR]

from arith.ast import False_, If, IsZero, Pred, Succ, True_, Zero, numeral
from arith.predicates import is_bool, is_numeric, is_stuck, is_value


def test_numeric_values() -> None:
    assert is_numeric(Zero())
    assert is_numeric(numeral(4))
    assert not is_numeric(True_())
    assert not is_numeric(Succ(Pred(Zero())))
    assert not is_numeric(Succ(True_()))


def test_booleans_are_values_but_not_numeric() -> None:
    for term in (True_(), False_()):
        assert is_bool(term)
        assert is_value(term)
        assert not is_numeric(term)


def test_redexes_are_never_values() -> None:
    assert not is_value(If(True_(), Zero(), Zero()))
    assert not is_value(Pred(Zero()))
    assert not is_value(IsZero(Zero()))
    assert not is_value(Succ(IsZero(Zero())))


def test_is_numeric_does_not_reduce() -> None:
    # pred 0 would reduce to 0, but the shape is not numeric.
    assert not is_numeric(Succ(Pred(Zero())))


def test_is_stuck() -> None:
    assert is_stuck(IsZero(True_()))
    assert is_stuck(If(Zero(), True_(), False_()))
    assert is_stuck(Succ(False_()))
    assert not is_stuck(IsZero(Zero()))
    assert not is_stuck(True_())
    assert not is_stuck(numeral(2))

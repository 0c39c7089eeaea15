import pytest

from cardano_tools.errors import InvalidParametersError
from cardano_tools.validation_guards import (
    require,
    require_at_most_one,
    require_exactly_one,
    require_non_empty,
    require_same_length,
)


def test_require_raises_given_error():
    require(True, RuntimeError("unused"))
    with pytest.raises(RuntimeError, match="boom"):
        require(False, RuntimeError("boom"))


def test_require_exactly_one_returns_chosen_name():
    assert require_exactly_one(payment_path="1852H/1815H/0H/0/0", payment_script_hash=None) == "payment_path"


@pytest.mark.parametrize(
    ("first", "second"),
    [(None, None), ("", "  "), ("a", "b")],
)
def test_require_exactly_one_rejects_zero_or_many(first, second):
    with pytest.raises(InvalidParametersError, match="Exactly one of a or b must be provided"):
        require_exactly_one(a=first, b=second)


def test_require_at_most_one():
    require_at_most_one(a=None, b="x")
    with pytest.raises(InvalidParametersError):
        require_at_most_one(a="x", b="y")


def test_require_same_length():
    require_same_length([1, 2], ["a", "b"], "keys", "weights")
    with pytest.raises(InvalidParametersError, match="keys and weights must have the same length"):
        require_same_length([1, 2], ["a"], "keys", "weights")


def test_require_non_empty():
    require_non_empty(["x"], "hashes")
    with pytest.raises(InvalidParametersError, match="hashes cannot be empty"):
        require_non_empty([], "hashes")

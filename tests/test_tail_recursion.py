import pytest

from config import override_settings
from iterative import factorial_iterative, sum_iterative
from linear_recursion import factorial, sum_to
from tail_recursion import factorial_tail, sum_tail
from validation import InvalidInputError, RecursionDepthError


@pytest.mark.parametrize("n", range(0, 13))
def test_factorial_tail_matches_factorial(n):
    assert factorial_tail(n) == factorial(n)

@pytest.mark.parametrize("n", [-2, 0, 1, 10, 100, 500])
def test_sum_tail_matches_loop_and_linear_forms(n):
    assert sum_tail(n) == sum_iterative(n) == sum_to(n)

def test_factorial_tail_matches_its_loop_form():
    assert factorial_tail(20) == factorial_iterative(20) == 2432902008176640000

def test_factorial_tail_rejects_negative():
    with pytest.raises(InvalidInputError):
        factorial_tail(-5)

def test_tail_forms_are_still_depth_limited():
    with override_settings(max_depth=50):
        with pytest.raises(RecursionDepthError):
            sum_tail(51)
        assert sum_iterative(51) == 1326

import pytest

from cramer import SingularSystemError
from cramer.examples import EXAMPLES, get_example


@pytest.mark.parametrize(
    "name, expected",
    [
        ("single", [5.0]),
        ("2x2", [2.0, 1.0]),
        ("3x3", [5.0, 3.0, -2.0]),
        ("4x4", [1.0, -2.0, 3.0, 4.0]),
    ],
)
def test_examples_solve_to_known_values(name, expected):
    solution = get_example(name).solve()

    assert solution.values == pytest.approx(expected)
    assert solution.max_residual == pytest.approx(0.0, abs=1e-9)


def test_singular_example_has_no_unique_solution():
    with pytest.raises(SingularSystemError):
        get_example("singular").solve()


def test_example_lookup_is_case_insensitive():
    assert get_example(" 3X3 ").label == "Three by three"


def test_unknown_example():
    with pytest.raises(KeyError, match="Unknown example"):
        get_example("5x5")


def test_examples_return_fresh_configurations():
    first = EXAMPLES["2x2"]()
    first.matrix[0][0] = 99.0
    assert EXAMPLES["2x2"]().matrix[0][0] == 1.0

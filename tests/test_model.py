import math

import pytest

from cramer import (
    EmptyInputError,
    LinearSystem,
    ShapeMismatchError,
    SingularSystemError,
    SystemInputError,
    SystemSolution,
)
from cramer.model import residuals


def test_empty_system_fails_validation():
    with pytest.raises(EmptyInputError, match="zero rows"):
        LinearSystem([]).solve()


def test_square_matrix_is_a_shape_mismatch():
    with pytest.raises(ShapeMismatchError, match=r"N x \(N\+1\)") as excinfo:
        LinearSystem([[1.0, 2.0], [3.0, 4.0]]).validate()
    assert excinfo.value.row_index == 0
    assert excinfo.value.columns == 2


def test_ragged_row_is_a_shape_mismatch():
    with pytest.raises(ShapeMismatchError) as excinfo:
        LinearSystem([[1.0, 1.0, 3.0], [1.0, -1.0]]).validate()
    assert excinfo.value.row_index == 1


def test_input_errors_share_a_base_class():
    assert issubclass(EmptyInputError, SystemInputError)
    assert issubclass(ShapeMismatchError, SystemInputError)
    assert issubclass(SystemInputError, ValueError)


def test_solution_contains_determinants_and_residuals():
    solution = LinearSystem([[1.0, 1.0, 3.0], [1.0, -1.0, 1.0]]).solve()

    assert solution.values == [2.0, 1.0]
    assert solution.denominator == -2.0
    assert solution.numerators == [-4.0, -2.0]
    assert solution.variables == ["var1", "var2"]
    assert solution.residuals == [0.0, 0.0]
    assert solution.is_finite
    assert solution.max_residual == 0.0


def test_custom_variable_names():
    system = LinearSystem(
        [[1.0, 1.0, 1.0, 6.0], [0.0, 2.0, 5.0, -4.0], [2.0, 5.0, -1.0, 27.0]],
        variables=["x", "y"],
    )
    solution = system.solve()

    assert solution.variables == ["x", "y", "var3"]
    mapping = solution.as_mapping()
    assert mapping["x"] == pytest.approx(5.0)
    assert mapping["y"] == pytest.approx(3.0)
    assert mapping["var3"] == pytest.approx(-2.0)
    assert solution.max_residual == pytest.approx(0.0, abs=1e-9)


def test_system_copies_its_matrix():
    matrix = [[2.0, 10.0]]
    system = LinearSystem(matrix)
    matrix[0][1] = 20.0

    assert system.solve().values == [5.0]


def test_singular_system_raises_or_propagates():
    system = LinearSystem([[1.0, 2.0, 3.0], [1.0, 2.0, 3.0]])
    with pytest.raises(SingularSystemError):
        system.solve()

    solution = system.solve(singular="propagate")
    assert not solution.is_finite
    assert all(math.isnan(value) for value in solution.values)


def test_unknowns_as_dicts():
    solution = LinearSystem([[2.0, 10.0]], variables=["x"]).solve()
    rows = solution.unknowns_as_dicts()

    assert rows == [
        {
            "Variable": "x",
            "Value": 5.0,
            "Numerator Det": 10.0,
            "Denominator Det": 2.0,
            "Residual": 0.0,
        }
    ]


def test_solution_serialization():
    solution = LinearSystem([[1.0, 1.0, 3.0], [1.0, -1.0, 1.0]], label="demo").solve()
    data = solution.to_dict()

    assert data["summary"] == {"size": 2, "finite": True, "max_residual": 0.0}

    rehydrated = SystemSolution.from_dict(data)
    assert rehydrated == solution


def test_solution_from_dict_defaults_variable_names():
    solution = SystemSolution.from_dict({"values": [1.0, 2.0], "denominator": 3.0})
    assert solution.variables == ["var1", "var2"]
    assert solution.numerators == []


def test_residuals():
    system = [[1.0, 2.0, 5.0], [3.0, 4.0, 6.0]]
    assert residuals(system, [1.0, 1.0]) == [-2.0, 1.0]

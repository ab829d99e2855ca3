"""Linear system model and solution containers."""
from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from .linalg import (
    SINGULAR_RAISE,
    check_singular_policy,
    coefficient_matrix,
    cramer_determinants,
    divide_by_denominator,
    rhs_vector,
)


class SystemInputError(ValueError):
    """Raised when an augmented matrix is not a solvable N x (N+1) system."""


class EmptyInputError(SystemInputError):
    def __init__(self, message: str = "There were zero rows of numbers in your text file."):
        super().__init__(message)


class ShapeMismatchError(SystemInputError):
    def __init__(self, rows: int, columns: int, row_index: Optional[int] = None):
        message = "The provided matrix of numbers is not an N x (N+1) matrix."
        if row_index is not None:
            message += f" Row {row_index + 1} has {columns} values, expected {rows + 1}."
        super().__init__(message)
        self.rows = rows
        self.columns = columns
        self.row_index = row_index


def default_variable_names(count: int) -> List[str]:
    return [f"var{index + 1}" for index in range(count)]


@dataclass
class UnknownResult:
    index: int
    name: str
    value: float
    numerator: float

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> UnknownResult:
        return cls(**data)


@dataclass
class SystemSolution:
    """Result of solving a :class:`LinearSystem` with Cramer's Rule."""

    values: List[float]
    denominator: float
    numerators: List[float]
    variables: List[str]
    residuals: List[float] = field(default_factory=list)
    label: str = ""

    @property
    def size(self) -> int:
        return len(self.values)

    @property
    def is_finite(self) -> bool:
        return all(math.isfinite(value) for value in self.values)

    @property
    def max_residual(self) -> float:
        if not self.residuals:
            return 0.0
        return max(abs(value) for value in self.residuals)

    @property
    def unknowns(self) -> List[UnknownResult]:
        return [
            UnknownResult(index=i, name=name, value=value, numerator=numerator)
            for i, (name, value, numerator) in enumerate(zip(self.variables, self.values, self.numerators))
        ]

    def as_mapping(self) -> Dict[str, float]:
        return dict(zip(self.variables, self.values))

    def unknowns_as_dicts(self) -> List[Dict[str, Any]]:
        return [
            {
                "Variable": unknown.name,
                "Value": unknown.value,
                "Numerator Det": unknown.numerator,
                "Denominator Det": self.denominator,
                "Residual": self.residuals[unknown.index] if unknown.index < len(self.residuals) else None,
            }
            for unknown in self.unknowns
        ]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "values": list(self.values),
            "denominator": self.denominator,
            "numerators": list(self.numerators),
            "variables": list(self.variables),
            "residuals": list(self.residuals),
            "summary": {
                "size": self.size,
                "finite": self.is_finite,
                "max_residual": self.max_residual,
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> SystemSolution:
        values = [float(v) for v in data.get("values", [])]
        variables = [str(v) for v in data.get("variables", [])] or default_variable_names(len(values))
        return cls(
            values=values,
            denominator=float(data.get("denominator", 0.0)),
            numerators=[float(v) for v in data.get("numerators", [])],
            variables=variables,
            residuals=[float(v) for v in data.get("residuals", [])],
            label=str(data.get("label", "")),
        )


def residuals(system: Sequence[Sequence[float]], values: Sequence[float]) -> List[float]:
    """Return ``A @ x - b`` for each row of an augmented system."""

    coefficients = coefficient_matrix(system)
    rhs = rhs_vector(system)
    return [
        sum(a * x for a, x in zip(row, values)) - b
        for row, b in zip(coefficients, rhs)
    ]


class LinearSystem:
    """An N x N linear system held as an augmented N x (N+1) matrix.

    The matrix is copied on construction, so later changes to the caller's
    data do not affect the system.
    """

    def __init__(
        self,
        matrix: Sequence[Sequence[float]],
        variables: Optional[Sequence[str]] = None,
        label: str = "",
    ):
        self.matrix: List[List[float]] = [list(row) for row in matrix]
        self.variables: Optional[List[str]] = list(variables) if variables else None
        self.label = label

    @property
    def size(self) -> int:
        return len(self.matrix)

    @property
    def variable_names(self) -> List[str]:
        names = default_variable_names(self.size)
        if self.variables:
            names[: len(self.variables)] = self.variables[: self.size]
        return names

    def validate(self) -> None:
        """Check the N x (N+1) shape; raise a :class:`SystemInputError` subclass if violated."""

        rows = len(self.matrix)
        if rows == 0:
            raise EmptyInputError()
        for index, row in enumerate(self.matrix):
            if len(row) != rows + 1:
                raise ShapeMismatchError(rows, len(row), index)

    def solve(self, *, singular: str = SINGULAR_RAISE, tolerance: float = 0.0) -> SystemSolution:
        """Validate and solve the system.

        ``singular`` and ``tolerance`` have the same meaning as in
        :func:`cramer.linalg.solve_cramer`.
        """

        check_singular_policy(singular)
        self.validate()

        denominator, numerators = cramer_determinants(self.matrix)
        values = divide_by_denominator(denominator, numerators, singular, tolerance)

        return SystemSolution(
            values=values,
            denominator=denominator,
            numerators=numerators,
            variables=self.variable_names,
            residuals=residuals(self.matrix, values),
            label=self.label,
        )


__all__ = [
    "EmptyInputError",
    "LinearSystem",
    "ShapeMismatchError",
    "SystemInputError",
    "SystemSolution",
    "UnknownResult",
    "default_variable_names",
    "residuals",
]

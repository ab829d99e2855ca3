"""Determinant and Cramer's Rule helpers used by the solver."""
from __future__ import annotations

import math
from typing import List, Sequence


SINGULAR_RAISE = "raise"
SINGULAR_PROPAGATE = "propagate"
SINGULAR_POLICIES = (SINGULAR_RAISE, SINGULAR_PROPAGATE)


class LinearSystemError(RuntimeError):
    """Raised when the linear system cannot be solved."""


class SingularSystemError(LinearSystemError):
    """Raised when the coefficient determinant vanishes."""

    def __init__(self, determinant: float):
        super().__init__(f"Singular system: coefficient determinant is {determinant:g}")
        self.determinant = determinant


def minor(matrix: Sequence[Sequence[float]], row: int, col: int) -> List[List[float]]:
    """Return a fresh copy of ``matrix`` with ``row`` and ``col`` removed."""

    return [
        [value for k, value in enumerate(values) if k != col]
        for j, values in enumerate(matrix)
        if j != row
    ]


def determinant(matrix: Sequence[Sequence[float]]) -> float:
    """Return the determinant of a square matrix.

    Uses cofactor expansion along the first row, recursing on the minors
    until the 2x2 closed form is reached.  The cost is exponential in the
    matrix size.  ``matrix`` is assumed to be square; no shape checks are
    performed.  An empty matrix yields ``0``.
    """

    n = len(matrix)
    if n == 0:
        return 0.0
    if n == 1:
        return matrix[0][0]
    if n == 2:
        return matrix[0][0] * matrix[1][1] - matrix[1][0] * matrix[0][1]

    result = 0.0
    for i, value in enumerate(matrix[0]):
        sign = 1.0 if i % 2 == 0 else -1.0
        result += value * determinant(minor(matrix, 0, i)) * sign
    return result


def coefficient_matrix(system: Sequence[Sequence[float]]) -> List[List[float]]:
    """Return the N x N coefficient block of an augmented system."""

    return [list(row[:-1]) for row in system]


def rhs_vector(system: Sequence[Sequence[float]]) -> List[float]:
    """Return the right-hand-side column of an augmented system."""

    return [row[len(system)] for row in system]


def numerator_matrix(
    coefficients: Sequence[Sequence[float]], rhs: Sequence[float], column: int
) -> List[List[float]]:
    """Return ``coefficients`` with ``column`` replaced by ``rhs``."""

    return [
        [rhs[i] if j == column else value for j, value in enumerate(row)]
        for i, row in enumerate(coefficients)
    ]


def ieee_divide(numerator: float, denominator: float) -> float:
    # Python raises on division by zero; mirror IEEE-754 instead.
    if denominator != 0:
        return numerator / denominator
    if math.isnan(numerator) or numerator == 0:
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def is_singular(value: float, tolerance: float = 0.0) -> bool:
    return abs(value) <= tolerance


def check_singular_policy(singular: str) -> None:
    if singular not in SINGULAR_POLICIES:
        raise ValueError(f"Unknown singular policy: {singular!r}")


def divide_by_denominator(
    denominator: float,
    numerators: Sequence[float],
    singular: str = SINGULAR_RAISE,
    tolerance: float = 0.0,
) -> List[float]:
    """Return each numerator divided by the shared ``denominator``.

    Raises :class:`SingularSystemError` under the ``"raise"`` policy when
    ``abs(denominator) <= tolerance``; otherwise divides per IEEE-754.
    """

    check_singular_policy(singular)
    if singular == SINGULAR_RAISE and is_singular(denominator, tolerance):
        raise SingularSystemError(denominator)
    return [ieee_divide(value, denominator) for value in numerators]


def cramer_determinants(system: Sequence[Sequence[float]]):
    """Return ``(D, [N_0, ..., N_{n-1}])`` for an augmented system."""

    coefficients = coefficient_matrix(system)
    rhs = rhs_vector(system)
    denominator = determinant(coefficients)
    numerators = [
        determinant(numerator_matrix(coefficients, rhs, column))
        for column in range(len(system))
    ]
    return denominator, numerators


def solve_cramer(
    system: Sequence[Sequence[float]],
    *,
    singular: str = SINGULAR_RAISE,
    tolerance: float = 0.0,
) -> List[float]:
    """Solve an augmented N x (N+1) system using Cramer's Rule.

    Each unknown is the ratio of the determinant of the coefficient matrix
    with its column replaced by the right-hand side to the determinant of
    the coefficient matrix itself.  ``system`` is not mutated.

    With ``singular="raise"`` a :class:`SingularSystemError` is raised when
    ``abs(D) <= tolerance``.  With ``singular="propagate"`` the divisions
    follow IEEE-754 and the result holds ``inf``/``nan`` entries.
    """

    check_singular_policy(singular)
    if len(system) == 0:
        return []

    denominator, numerators = cramer_determinants(system)
    return divide_by_denominator(denominator, numerators, singular, tolerance)


__all__ = [
    "LinearSystemError",
    "SingularSystemError",
    "SINGULAR_POLICIES",
    "SINGULAR_PROPAGATE",
    "SINGULAR_RAISE",
    "check_singular_policy",
    "coefficient_matrix",
    "cramer_determinants",
    "determinant",
    "divide_by_denominator",
    "ieee_divide",
    "is_singular",
    "minor",
    "numerator_matrix",
    "rhs_vector",
    "solve_cramer",
]

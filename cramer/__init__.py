"""Core interfaces for the Cramer's Rule linear system solver."""

from .linalg import (
    LinearSystemError,
    SingularSystemError,
    determinant,
    minor,
    solve_cramer,
)
from .model import (
    EmptyInputError,
    LinearSystem,
    ShapeMismatchError,
    SystemInputError,
    SystemSolution,
    UnknownResult,
)
from .inputs import MatrixParseError, load_matrix_file, parse_matrix_text
from .config import SystemConfiguration, load_system_from_json

__all__ = [
    "LinearSystemError",
    "SingularSystemError",
    "determinant",
    "minor",
    "solve_cramer",
    "EmptyInputError",
    "LinearSystem",
    "ShapeMismatchError",
    "SystemInputError",
    "SystemSolution",
    "UnknownResult",
    "MatrixParseError",
    "load_matrix_file",
    "parse_matrix_text",
    "SystemConfiguration",
    "load_system_from_json",
]

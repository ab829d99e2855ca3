"""Reference system configurations."""
from __future__ import annotations

from typing import Callable, Dict

from .config import SystemConfiguration


def single_equation_example() -> SystemConfiguration:
    """Return ``2x = 10``."""

    return SystemConfiguration(matrix=[[2.0, 10.0]], label="Single equation")


def two_by_two_example() -> SystemConfiguration:
    """Return ``x + y = 3``, ``x - y = 1`` (solution ``x=2, y=1``)."""

    return SystemConfiguration(
        matrix=[
            [1.0, 1.0, 3.0],
            [1.0, -1.0, 1.0],
        ],
        label="Two by two",
        variables=["x", "y"],
    )


def three_by_three_example() -> SystemConfiguration:
    """Return the classroom 3x3 system with solution ``(5, 3, -2)``."""

    return SystemConfiguration(
        matrix=[
            [1.0, 1.0, 1.0, 6.0],
            [0.0, 2.0, 5.0, -4.0],
            [2.0, 5.0, -1.0, 27.0],
        ],
        label="Three by three",
        description="x + y + z = 6, 2y + 5z = -4, 2x + 5y - z = 27",
        variables=["x", "y", "z"],
    )


def four_by_four_example() -> SystemConfiguration:
    # Solution (1, -2, 3, 4)
    return SystemConfiguration(
        matrix=[
            [2.0, 1.0, -1.0, 3.0, 9.0],
            [1.0, -3.0, 2.0, 1.0, 17.0],
            [3.0, 2.0, 1.0, -2.0, -6.0],
            [1.0, 1.0, 1.0, 1.0, 6.0],
        ],
        label="Four by four",
    )


def singular_example() -> SystemConfiguration:
    """Return two identical equations, which have no unique solution."""

    return SystemConfiguration(
        matrix=[
            [1.0, 2.0, 3.0],
            [1.0, 2.0, 3.0],
        ],
        label="Singular",
    )


EXAMPLES: Dict[str, Callable[[], SystemConfiguration]] = {
    "single": single_equation_example,
    "2x2": two_by_two_example,
    "3x3": three_by_three_example,
    "4x4": four_by_four_example,
    "singular": singular_example,
}


def get_example(name: str) -> SystemConfiguration:
    try:
        factory = EXAMPLES[name.strip().lower()]
    except KeyError:
        raise KeyError(f"Unknown example {name!r}; choose from {', '.join(EXAMPLES)}") from None
    return factory()


__all__ = [
    "EXAMPLES",
    "four_by_four_example",
    "get_example",
    "single_equation_example",
    "singular_example",
    "three_by_three_example",
    "two_by_two_example",
]

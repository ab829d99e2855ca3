"""Serialization helpers for linear system configurations."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, IO, List, Optional, Tuple, Union

from .linalg import SINGULAR_PROPAGATE, SINGULAR_RAISE
from .model import LinearSystem, SystemSolution

_DEFAULT_SINGULAR_POLICY = SINGULAR_RAISE
_SINGULAR_POLICY_ALIASES = {
    "raise": SINGULAR_RAISE,
    "error": SINGULAR_RAISE,
    "strict": SINGULAR_RAISE,
    "propagate": SINGULAR_PROPAGATE,
    "allow": SINGULAR_PROPAGATE,
    "ieee": SINGULAR_PROPAGATE,
    "nonfinite": SINGULAR_PROPAGATE,
    "non_finite": SINGULAR_PROPAGATE,
}

_JSONSource = Union[str, Path, IO[str]]


def normalize_singular_policy(value: Any) -> str:
    """Return a canonical singular policy name.

    ``None`` selects the default.  Case, spaces and hyphens are ignored, so
    ``"Non-Finite"`` resolves to ``"propagate"``.
    """

    if value is None:
        return _DEFAULT_SINGULAR_POLICY
    normalized = str(value).strip().lower().replace(" ", "_").replace("-", "_")
    try:
        return _SINGULAR_POLICY_ALIASES[normalized]
    except KeyError:
        raise ValueError(f"Unknown singular policy: {value!r}") from None


def _to_matrix(rows: Any) -> List[List[float]]:
    if not isinstance(rows, list) or not all(isinstance(row, list) for row in rows):
        raise ValueError("'matrix' must be a list of rows, each a list of numbers")
    try:
        return [[float(value) for value in row] for row in rows]
    except (TypeError, ValueError):
        raise ValueError("'matrix' must contain only numbers") from None


def _to_names(names: Any) -> List[str]:
    if names is None:
        return []
    if not isinstance(names, list):
        raise ValueError("'variables' must be a list of names")
    return [str(name) for name in names]


def _to_tolerance(value: Any) -> float:
    if value is None:
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"'tolerance' must be a number, got {value!r}") from None


@dataclass
class SystemConfiguration:
    """Container for a linear system definition and its solve options."""

    matrix: List[List[float]]
    label: str = ""
    description: str = ""
    variables: List[str] = field(default_factory=list)
    singular_policy: str = _DEFAULT_SINGULAR_POLICY
    tolerance: float = 0.0

    def __post_init__(self):
        self.singular_policy = normalize_singular_policy(self.singular_policy)

    def build_system(self) -> LinearSystem:
        """Create a :class:`LinearSystem` for this configuration."""

        return LinearSystem(self.matrix, variables=self.variables or None, label=self.label)

    def solve(self) -> SystemSolution:
        return self.build_system().solve(singular=self.singular_policy, tolerance=self.tolerance)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representing the configuration."""

        payload: Dict[str, Any] = {
            "label": self.label,
            "description": self.description,
            "matrix": [list(row) for row in self.matrix],
            "singular_policy": self.singular_policy,
            "tolerance": self.tolerance,
        }
        if self.variables:
            payload["variables"] = list(self.variables)
        return payload

    def to_json(self, *, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SystemConfiguration":
        """Create a configuration from a dictionary."""

        return cls(
            matrix=_to_matrix(data.get("matrix", [])),
            label=str(data.get("label", "")),
            description=str(data.get("description", "")),
            variables=_to_names(data.get("variables")),
            singular_policy=data.get("singular_policy"),
            tolerance=_to_tolerance(data.get("tolerance")),
        )

    @classmethod
    def from_json(cls, source: _JSONSource) -> "SystemConfiguration":
        """Load a configuration from a JSON file path or file-like object."""

        if hasattr(source, "read"):
            data = json.load(source)  # type: ignore[arg-type]
        else:
            path = Path(source)
            with path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        if not isinstance(data, dict):
            raise ValueError("System configuration JSON must contain an object at the top level")
        return cls.from_dict(data)

    def save(self, target: Union[str, Path, IO[str]], *, indent: Optional[int] = 2) -> None:
        """Write the configuration to disk or a file-like object."""

        payload = self.to_json(indent=indent)
        if hasattr(target, "write"):
            target.write(payload)  # type: ignore[arg-type]
        else:
            Path(target).write_text(payload, encoding="utf-8")


def load_system_from_json(source: _JSONSource) -> Tuple[LinearSystem, SystemConfiguration]:
    """Load a :class:`LinearSystem` and its configuration from JSON."""

    config = SystemConfiguration.from_json(source)
    return config.build_system(), config


__all__ = [
    "SystemConfiguration",
    "load_system_from_json",
    "normalize_singular_policy",
]

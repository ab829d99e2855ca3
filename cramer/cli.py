"""
Command-Line Interface for the Cramer's Rule solver.

Usage:
    cramer [PATH] [OPTIONS]

Options:
    --example NAME      Solve a built-in example system
    --list-examples     List built-in example systems
    --allow-singular    Report inf/nan values instead of failing on D == 0
    --tolerance T       Treat |D| <= T as singular
    --json              Print the solution as JSON
    --excel PATH        Write an Excel report
    --verbose           Print detailed progress
"""

import argparse
import json
import math
import sys
from pathlib import Path
from typing import List, Optional

from .config import SystemConfiguration
from .examples import EXAMPLES, get_example
from .export import export_to_excel
from .inputs import MatrixParseError, format_matrix, load_matrix_file
from .linalg import SINGULAR_PROPAGATE, SingularSystemError
from .model import SystemInputError, SystemSolution

PROMPT = (
    "Enter the file name containing the N x (N+1) matrix representing an N x N system\n"
    "of equations: "
)


def load_configuration(path: str) -> SystemConfiguration:
    """Load a ``.json`` configuration or a comma-separated matrix file."""
    source = Path(path)
    if source.suffix.lower() == ".json":
        return SystemConfiguration.from_json(source)
    return SystemConfiguration(matrix=load_matrix_file(source), label=source.stem)


def format_solution(solution: SystemSolution) -> List[str]:
    """Render one ``name = value`` line per unknown."""
    return [f"{name} = {value:g}" for name, value in zip(solution.variables, solution.values)]


def solve_configuration(config: SystemConfiguration, verbose: bool = False) -> SystemSolution:
    system = config.build_system()
    if verbose:
        print(
            f"Solving {config.label or 'system'}: {system.size} unknown(s), policy={config.singular_policy}",
            file=sys.stderr,
        )
    solution = system.solve(singular=config.singular_policy, tolerance=config.tolerance)
    if verbose:
        print(f"  D = {solution.denominator:g}", file=sys.stderr)
        for name, numerator in zip(solution.variables, solution.numerators):
            print(f"  N[{name}] = {numerator:g}", file=sys.stderr)
        print(f"  max residual = {solution.max_residual:g}", file=sys.stderr)
    return solution


def json_safe(value):
    """Replace non-finite floats with their ``%g`` text so the output is strict JSON."""
    if isinstance(value, float) and not math.isfinite(value):
        return f"{value:g}"
    if isinstance(value, dict):
        return {key: json_safe(item) for key, item in value.items()}
    if isinstance(value, list):
        return [json_safe(item) for item in value]
    return value


def list_examples():
    """List available example systems."""
    print("\nAvailable examples:")
    print("-" * 60)
    for name, factory in EXAMPLES.items():
        config = factory()
        print(f"  {name:<10} {config.label} ({len(config.matrix)} unknown(s))")
    print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cramer",
        description="Solve an N x N linear system with Cramer's Rule",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Input files hold one equation per line, coefficients then the right-hand side,
separated by commas:

    1,1,3
    1,-1,1

Examples:
  cramer system.txt                 # Solve a matrix file
  cramer system.json --json         # Solve a JSON configuration, print JSON
  cramer --example 3x3 --verbose    # Solve a built-in example
  cramer system.txt --excel out.xlsx
        """
    )

    parser.add_argument(
        "path",
        nargs="?",
        help="Matrix text file or JSON configuration (prompted for when omitted)"
    )
    parser.add_argument(
        "--example", "-e",
        help="Solve a built-in example system"
    )
    parser.add_argument(
        "--list-examples",
        action="store_true",
        help="List built-in example systems"
    )
    parser.add_argument(
        "--allow-singular",
        action="store_true",
        help="Report non-finite values instead of failing when the determinant is zero"
    )
    parser.add_argument(
        "--tolerance", "-t",
        type=float,
        default=None,
        help="Treat a coefficient determinant with |D| <= T as singular"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the solution as JSON"
    )
    parser.add_argument(
        "--excel", "-x",
        metavar="PATH",
        help="Write an Excel report to PATH"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print detailed progress"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    if args.list_examples:
        list_examples()
        return 0

    try:
        if args.example:
            config = get_example(args.example)
        else:
            path = args.path or input(PROMPT).strip()
            config = load_configuration(path)
    except (OSError, KeyError, MatrixParseError, ValueError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if args.allow_singular:
        config.singular_policy = SINGULAR_PROPAGATE
    if args.tolerance is not None:
        config.tolerance = args.tolerance

    if not args.json:
        for line in format_matrix(config.matrix):
            print(f"  {line}")
        print()

    try:
        solution = solve_configuration(config, verbose=args.verbose)
    except SystemInputError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    except SingularSystemError as exc:
        print(
            f"ERROR: The system has no unique solution (determinant = {exc.determinant:g}).",
            file=sys.stderr,
        )
        return 1

    if args.json:
        print(json.dumps(json_safe(solution.to_dict()), indent=2, allow_nan=False))
    else:
        print("RESULT:")
        for line in format_solution(solution):
            print(f"  {line}")

    if args.excel:
        path = export_to_excel(args.excel, [(config, solution)])
        if not args.json:
            print(f"\nReport saved to: {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

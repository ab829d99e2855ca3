#!/usr/bin/env python
"""
Cramer's Rule Solver Entry Point.

Solve an N x N linear system stored as an N x (N+1) comma-separated matrix.

Usage:
    python run_solver.py system.txt            # Solve a matrix file
    python run_solver.py system.json --json    # Solve a JSON configuration
    python run_solver.py --example 3x3         # Solve a built-in example
    python run_solver.py                       # Prompt for the file name

For more options:
    python run_solver.py --help
"""

import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from cramer.cli import main

if __name__ == "__main__":
    sys.exit(main())

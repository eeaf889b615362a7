"""
Command-line entry point.

Usage:
    minesweeper [--seed N]
    python -m minesweeper [--seed N]
"""
import argparse
from typing import List, Optional

from .session import Session


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run an interactive session."""
    parser = argparse.ArgumentParser(
        description="Play Minesweeper in the terminal"
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Random seed for a reproducible mine layout",
    )
    args = parser.parse_args(argv)

    return Session(rng=args.seed).run()

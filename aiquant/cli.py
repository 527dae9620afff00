"""Command-line entry point."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Optional


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the startup banner and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="aiquant",
        description="Quantitative finance library with technical indicators.",
    )
    parser.parse_args(argv)
    print("AiQuant - Quantitative Finance Library")
    print("Project initialized successfully!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
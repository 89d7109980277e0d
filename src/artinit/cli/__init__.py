"""Command-line interface for artinit."""

from __future__ import annotations

from typing import Iterable, Optional


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Console script entry point."""
    from artinit.cli.runner import CLIRunner

    return CLIRunner().run(argv)

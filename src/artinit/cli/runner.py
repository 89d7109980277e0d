"""CLI runner orchestration.

This module handles command dispatch and execution for the artinit CLI.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from typing import Iterable, Optional

from artinit.cli.arguments import build_parser
from artinit.cli.commands.config import ConfigCommand
from artinit.cli.commands.init import InitCommand
from artinit.cli.exit_codes import EXIT_SUCCESS
from artinit.config import ServerConfigStore
from artinit.core.logging import configure_logging, get_logger

LOGGER = get_logger(__name__)


def get_version() -> str:
    """Get artinit version.

    Returns:
        Version string from package metadata or fallback.
    """
    try:
        return version("artinit")
    except PackageNotFoundError:
        # Fallback for editable installs that have not yet built metadata.
        from artinit import __version__
        return __version__


class CLIRunner:
    """Orchestrates CLI execution with subcommand dispatch."""

    def __init__(self, server_store: Optional[ServerConfigStore] = None) -> None:
        """Initialize CLIRunner with parser and commands."""
        self.parser = build_parser()
        self._version = get_version()
        self.init_cmd = InitCommand(server_store=server_store)
        self.config_cmd = ConfigCommand(server_store=server_store)

    def run(self, argv: Optional[Iterable[str]] = None) -> int:
        """Run the CLI.

        Args:
            argv: Command-line arguments (defaults to sys.argv).

        Returns:
            Exit code.
        """
        argv_list = list(argv) if argv is not None else None
        args = self.parser.parse_args(argv_list)

        # Configure logging as early as possible
        configure_logging(
            debug=args.debug,
            verbose=args.verbose,
            quiet=args.quiet,
        )

        if args.version:
            print(self._version)
            return EXIT_SUCCESS

        command = getattr(args, "command", None)

        if command == "init":
            return self.init_cmd.execute(args)
        elif command == "config":
            return self.config_cmd.execute(args)
        else:
            # No command specified - show help
            self.parser.print_help()
            return EXIT_SUCCESS

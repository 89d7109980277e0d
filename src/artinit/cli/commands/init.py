"""Init command implementation.

Initializes a project for a configured server:
1. Detects the project's build technologies
2. Creates default repositories for them on the server
3. Writes .jfrog/projects/<technology>.yaml and build.yaml
4. Prints the next steps
"""

from __future__ import annotations

import os
from argparse import Namespace
from pathlib import Path
from typing import Optional

from artinit.cli.commands import Command
from artinit.cli.exit_codes import (
    EXIT_CONFIG_ERROR,
    EXIT_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_SUCCESS,
)
from artinit.config import ServerConfigStore
from artinit.core.errors import ArtinitError, ConfigurationError
from artinit.core.logging import get_logger
from artinit.project import ProjectInitializer

LOGGER = get_logger(__name__)


class InitCommand(Command):
    """Project initialization command."""

    def __init__(self, server_store: Optional[ServerConfigStore] = None) -> None:
        self.server_store = server_store

    @property
    def name(self) -> str:
        """Command identifier."""
        return "init"

    def execute(self, args: Namespace) -> int:
        """Execute the init command.

        Args:
            args: Parsed command-line arguments.

        Returns:
            Exit code.
        """
        # Absolute but unresolved: the build name comes from the path as given
        project_root = Path(os.path.abspath(args.path))

        if not project_root.is_dir():
            print(f"Error: {project_root} is not a directory")
            return EXIT_INVALID_USAGE

        server_store = self.server_store if self.server_store is not None else ServerConfigStore()
        initializer = ProjectInitializer(
            project_root,
            getattr(args, "server_id", None),
            server_store=server_store,
        )

        try:
            result = initializer.run()
        except ConfigurationError as e:
            LOGGER.debug("Init failed on configuration", exc_info=True)
            print(f"Error: {e}")
            return EXIT_CONFIG_ERROR
        except ArtinitError as e:
            LOGGER.debug("Init failed", exc_info=True)
            print(f"Error: {e}")
            return EXIT_FAILURE

        LOGGER.info(
            f"Initialized {project_root} for '{result.server_id}' "
            f"({len(result.written_files)} files written)"
        )
        return EXIT_SUCCESS

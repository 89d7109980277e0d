"""Config command implementation.

Manages the servers artinit can initialize projects against:
- add: register a server (optionally prompting for missing values)
- show: list servers and the default
- use: change the default server
- remove: delete a server
"""

from __future__ import annotations

from argparse import Namespace
from typing import Optional

import questionary
from questionary import Style

from artinit.cli.commands import Command
from artinit.cli.exit_codes import EXIT_CONFIG_ERROR, EXIT_INVALID_USAGE, EXIT_SUCCESS
from artinit.config import ServerConfigStore, ServerDetails
from artinit.core.errors import ConfigurationError
from artinit.core.logging import get_logger

LOGGER = get_logger(__name__)

# Custom questionary style
STYLE = Style([
    ("qmark", "fg:cyan bold"),
    ("question", "bold"),
    ("answer", "fg:cyan"),
    ("pointer", "fg:cyan bold"),
    ("highlighted", "fg:cyan bold"),
    ("instruction", "fg:gray"),
])

AUTH_TOKEN = "token"
AUTH_BASIC = "basic"


class ConfigCommand(Command):
    """Server configuration command."""

    def __init__(self, server_store: Optional[ServerConfigStore] = None) -> None:
        self._server_store = server_store

    @property
    def name(self) -> str:
        """Command identifier."""
        return "config"

    @property
    def server_store(self) -> ServerConfigStore:
        if self._server_store is None:
            self._server_store = ServerConfigStore()
        return self._server_store

    def execute(self, args: Namespace) -> int:
        """Execute the config command.

        Args:
            args: Parsed command-line arguments.

        Returns:
            Exit code.
        """
        subcommand = getattr(args, "config_command", None)
        try:
            if subcommand == "add":
                return self._add(args)
            elif subcommand == "show":
                return self._show()
            elif subcommand == "use":
                self.server_store.set_default(args.server_id)
                print(f"Default server set to '{args.server_id}'")
                return EXIT_SUCCESS
            elif subcommand == "remove":
                self.server_store.remove_server(args.server_id)
                print(f"Removed server '{args.server_id}'")
                return EXIT_SUCCESS
        except ConfigurationError as e:
            print(f"Error: {e}")
            return EXIT_CONFIG_ERROR

        print("No config subcommand given. Use add, show, use or remove.")
        return EXIT_INVALID_USAGE

    def _add(self, args: Namespace) -> int:
        server_id = args.server_id
        url = args.url
        access_token = args.access_token
        user = args.user
        password = args.password

        if args.interactive:
            answers = self._prompt_server(server_id, url, access_token, user, password)
            if answers is None:
                print("\nAborted.")
                return EXIT_SUCCESS
            server_id, url, access_token, user, password = answers

        if not server_id or not url:
            print("Error: --server-id and --url are required (or use --interactive).")
            return EXIT_INVALID_USAGE

        server = ServerDetails(
            server_id=server_id,
            url=url.rstrip("/"),
            access_token=access_token or None,
            user=user or None,
            password=password or None,
        )
        self.server_store.add_server(
            server,
            make_default=args.make_default,
            overwrite=args.overwrite,
        )
        print(f"Server '{server_id}' saved to {self.server_store.path}")
        return EXIT_SUCCESS

    def _show(self) -> int:
        servers = self.server_store.list_servers()
        if not servers:
            print("No servers configured. Run 'artinit config add' to add one.")
            return EXIT_SUCCESS

        try:
            default = self.server_store.get_default_server_id()
        except ConfigurationError:
            default = None

        for server in servers:
            marker = " (default)" if server.server_id == default else ""
            auth = "token" if server.access_token else ("basic" if server.user else "none")
            print(f"  {server.server_id}{marker}")
            print(f"    URL:  {server.url}")
            print(f"    Auth: {auth}")
        return EXIT_SUCCESS

    def _prompt_server(
        self,
        server_id: Optional[str],
        url: Optional[str],
        access_token: Optional[str],
        user: Optional[str],
        password: Optional[str],
    ):
        """Prompt for the values not supplied as flags.

        Returns:
            Tuple of (server_id, url, access_token, user, password), or None
            if the user pressed Ctrl+C.
        """
        if not server_id:
            server_id = questionary.text("Server ID:", style=STYLE).ask()
            if server_id is None:
                return None

        if not url:
            url = questionary.text(
                "Artifactory URL:",
                instruction="(e.g. https://acme.jfrog.io/artifactory)",
                style=STYLE,
            ).ask()
            if url is None:
                return None

        if not access_token and not user:
            method = questionary.select(
                "Authentication method:",
                choices=[
                    questionary.Choice("Access token", value=AUTH_TOKEN),
                    questionary.Choice("Username and password", value=AUTH_BASIC),
                ],
                style=STYLE,
            ).ask()
            if method is None:
                return None

            if method == AUTH_TOKEN:
                access_token = questionary.password("Access token:", style=STYLE).ask()
                if access_token is None:
                    return None
            else:
                user = questionary.text("User:", style=STYLE).ask()
                if user is None:
                    return None
                password = questionary.password("Password:", style=STYLE).ask()
                if password is None:
                    return None

        return server_id, url, access_token, user, password

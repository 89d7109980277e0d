"""Argument parser construction for artinit CLI.

This module builds the argument parser with subcommands:
- artinit init    - Initialize a project against a server
- artinit config  - Manage configured servers
"""

from __future__ import annotations

import argparse


def _add_global_options(parser: argparse.ArgumentParser) -> None:
    """Add global options available to all commands."""
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show artinit version and exit.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (info-level) logging.",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Reduce logging output to errors only.",
    )


def _build_init_parser(subparsers: argparse._SubParsersAction) -> None:
    """Build the 'init' subcommand parser."""
    init_parser = subparsers.add_parser(
        "init",
        help="Initialize the project for the configured server.",
        description=(
            "Detect the build technologies of the project, create default "
            "repositories on the server and write .jfrog/projects configuration."
        ),
    )
    init_parser.add_argument(
        "--server-id",
        dest="server_id",
        help="Server to use (default: the configured default server).",
    )
    init_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Project directory to initialize (default: current directory).",
    )


def _build_config_parser(subparsers: argparse._SubParsersAction) -> None:
    """Build the 'config' subcommand parser."""
    config_parser = subparsers.add_parser(
        "config",
        help="Manage configured servers.",
        description="Add, list, select and remove servers.",
    )
    config_sub = config_parser.add_subparsers(dest="config_command")

    add_parser = config_sub.add_parser("add", help="Add a server.")
    add_parser.add_argument("--server-id", dest="server_id", help="Server identifier.")
    add_parser.add_argument("--url", help="Artifactory URL, e.g. https://acme.jfrog.io/artifactory.")
    add_parser.add_argument("--access-token", dest="access_token", help="Access token.")
    add_parser.add_argument("--user", help="User name (basic authentication).")
    add_parser.add_argument("--password", help="Password (basic authentication).")
    add_parser.add_argument(
        "--default",
        dest="make_default",
        action="store_true",
        help="Make this server the default.",
    )
    add_parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Replace an existing server with the same id.",
    )
    add_parser.add_argument(
        "--interactive", "-i",
        action="store_true",
        help="Prompt for values not given on the command line.",
    )

    config_sub.add_parser("show", help="List configured servers.")

    use_parser = config_sub.add_parser("use", help="Set the default server.")
    use_parser.add_argument("server_id", help="Server identifier.")

    remove_parser = config_sub.add_parser("remove", help="Remove a server.")
    remove_parser.add_argument("server_id", help="Server identifier.")


def build_parser() -> argparse.ArgumentParser:
    """Build the main argument parser with subcommands.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="artinit",
        description="artinit - initialize build projects against an Artifactory server.",
    )
    _add_global_options(parser)

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="COMMAND",
    )
    _build_init_parser(subparsers)
    _build_config_parser(subparsers)

    return parser

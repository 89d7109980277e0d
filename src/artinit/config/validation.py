"""Validation for the servers configuration file.

Warns on unknown keys (with typo suggestions) and on values of the wrong
type. Validation never raises; the store decides what is fatal.
"""

from __future__ import annotations

from dataclasses import dataclass
from difflib import get_close_matches
from typing import Any, Dict, List, Optional, Set

from artinit.core.logging import get_logger

LOGGER = get_logger(__name__)

# Valid top-level keys
VALID_TOP_LEVEL_KEYS: Set[str] = {
    "default",
    "servers",
}

# Valid keys under servers.<id>
VALID_SERVER_KEYS: Set[str] = {
    "url",
    "accessToken",
    "user",
    "password",
}


@dataclass
class ConfigValidationWarning:
    """A validation warning for configuration."""

    message: str
    source: str
    key: Optional[str] = None
    suggestion: Optional[str] = None


def validate_servers_config(
    data: Dict[str, Any],
    source: str,
) -> List[ConfigValidationWarning]:
    """Validate a servers configuration dictionary.

    Args:
        data: Parsed servers.yml content.
        source: Source file path for warning messages.

    Returns:
        List of validation warnings.
    """
    warnings: List[ConfigValidationWarning] = []

    for key in data.keys():
        if key not in VALID_TOP_LEVEL_KEYS:
            suggestion = _suggest_key(str(key), VALID_TOP_LEVEL_KEYS)
            _add(warnings, ConfigValidationWarning(
                message=f"Unknown top-level key '{key}'",
                source=source,
                key=key,
                suggestion=suggestion,
            ))

    default = data.get("default")
    if default is not None and not isinstance(default, str):
        _add(warnings, ConfigValidationWarning(
            message=f"'default' must be a string, got {type(default).__name__}",
            source=source,
            key="default",
        ))

    servers = data.get("servers")
    if servers is None:
        return warnings

    if not isinstance(servers, dict):
        _add(warnings, ConfigValidationWarning(
            message=f"'servers' must be a mapping, got {type(servers).__name__}",
            source=source,
            key="servers",
        ))
        return warnings

    for server_id, server in servers.items():
        if not isinstance(server, dict):
            _add(warnings, ConfigValidationWarning(
                message=f"'servers.{server_id}' must be a mapping, got {type(server).__name__}",
                source=source,
                key=f"servers.{server_id}",
            ))
            continue

        for key in server.keys():
            if key not in VALID_SERVER_KEYS:
                suggestion = _suggest_key(str(key), VALID_SERVER_KEYS)
                _add(warnings, ConfigValidationWarning(
                    message=f"Unknown key 'servers.{server_id}.{key}'",
                    source=source,
                    key=f"servers.{server_id}.{key}",
                    suggestion=suggestion,
                ))

        if not server.get("url"):
            _add(warnings, ConfigValidationWarning(
                message=f"Server '{server_id}' has no 'url'",
                source=source,
                key=f"servers.{server_id}.url",
            ))

    if isinstance(default, str) and default not in servers:
        _add(warnings, ConfigValidationWarning(
            message=f"Default server '{default}' is not defined under 'servers'",
            source=source,
            key="default",
            suggestion=_suggest_key(default, {str(s) for s in servers}),
        ))

    return warnings


def _add(warnings: List[ConfigValidationWarning], warning: ConfigValidationWarning) -> None:
    warnings.append(warning)
    _log_warning(warning)


def _suggest_key(invalid_key: str, valid_keys: Set[str]) -> Optional[str]:
    """Suggest a valid key for a potential typo.

    Args:
        invalid_key: The invalid key entered.
        valid_keys: Set of valid keys.

    Returns:
        Closest matching valid key, or None if no good match.
    """
    matches = get_close_matches(invalid_key, list(valid_keys), n=1, cutoff=0.6)
    return matches[0] if matches else None


def _log_warning(warning: ConfigValidationWarning) -> None:
    """Log a validation warning."""
    msg = f"{warning.message} in {warning.source}"
    if warning.suggestion:
        msg += f" (did you mean '{warning.suggestion}'?)"
    LOGGER.warning(msg)

"""Exception hierarchy for artinit.

Every failure that aborts a project initialization derives from
ArtinitError so the CLI can report it uniformly.
"""

from __future__ import annotations


class ArtinitError(Exception):
    """Base class for artinit errors."""

    pass


class ConfigurationError(ArtinitError):
    """Server configuration is missing, unreadable or invalid."""

    pass


class DetectionError(ArtinitError):
    """Technology detection could not scan the project directory."""

    pass


class ProvisioningError(ArtinitError):
    """A remote repository could not be checked or created."""

    pass


class SerializationError(ArtinitError):
    """A config record could not be encoded as YAML."""

    pass


class ConfigWriteError(ArtinitError):
    """A project config directory or file could not be written."""

    pass

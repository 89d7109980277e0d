from __future__ import annotations

from enum import Enum
from typing import Iterable


class Technology(str, Enum):
    """Build technologies artinit knows how to initialize."""

    MAVEN = "maven"
    GRADLE = "gradle"
    NPM = "npm"
    GO = "go"
    PIP = "pip"
    PIPENV = "pipenv"


class RepositoryKind(str, Enum):
    """Repository classes provisioned for each technology."""

    LOCAL = "local"
    REMOTE = "remote"
    VIRTUAL = "virtual"


def sorted_technologies(technologies: Iterable[Technology]) -> list[Technology]:
    """Return technologies in declaration order.

    Detection yields an unordered set; sorting keeps provisioning,
    written files and printed hints deterministic.
    """
    order = list(Technology)
    return sorted(technologies, key=order.index)

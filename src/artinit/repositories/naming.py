"""Default repository naming per technology."""

from __future__ import annotations

from dataclasses import dataclass

from artinit.core.models import RepositoryKind, Technology


@dataclass(frozen=True)
class RepositoryNaming:
    """Default repositories created for one technology."""

    package_type: str
    local: str
    remote: str
    remote_url: str
    virtual: str

    def name_for(self, kind: RepositoryKind) -> str:
        """Repository key for the given kind."""
        if kind == RepositoryKind.LOCAL:
            return self.local
        if kind == RepositoryKind.REMOTE:
            return self.remote
        if kind == RepositoryKind.VIRTUAL:
            return self.virtual
        raise ValueError(f"Unknown repository kind: {kind}")


MAVEN_CENTRAL_URL = "https://repo.maven.apache.org/maven2"

MAVEN_NAMING = RepositoryNaming(
    package_type="maven",
    local="default-maven-local",
    remote="default-maven-remote",
    remote_url=MAVEN_CENTRAL_URL,
    virtual="default-maven-virtual",
)

GRADLE_NAMING = RepositoryNaming(
    package_type="gradle",
    local="default-gradle-local",
    remote="default-gradle-remote",
    remote_url=MAVEN_CENTRAL_URL,
    virtual="default-gradle-virtual",
)

NPM_NAMING = RepositoryNaming(
    package_type="npm",
    local="default-npm-local",
    remote="default-npm-remote",
    remote_url="https://registry.npmjs.org",
    virtual="default-npm-virtual",
)

GO_NAMING = RepositoryNaming(
    package_type="go",
    local="default-go-local",
    remote="default-go-remote",
    remote_url="https://proxy.golang.org",
    virtual="default-go-virtual",
)

# Pip and Pipenv share the PyPI repositories
PYPI_NAMING = RepositoryNaming(
    package_type="pypi",
    local="default-pypi-local",
    remote="default-pypi-remote",
    remote_url="https://files.pythonhosted.org",
    virtual="default-pypi-virtual",
)

REPOSITORY_NAMING: dict[Technology, RepositoryNaming] = {
    Technology.MAVEN: MAVEN_NAMING,
    Technology.GRADLE: GRADLE_NAMING,
    Technology.NPM: NPM_NAMING,
    Technology.GO: GO_NAMING,
    Technology.PIP: PYPI_NAMING,
    Technology.PIPENV: PYPI_NAMING,
}


def get_repository_naming(technology: Technology) -> RepositoryNaming:
    """Look up the default repository names for a technology."""
    try:
        return REPOSITORY_NAMING[technology]
    except KeyError:
        raise ValueError(f"No default repositories defined for {technology}") from None

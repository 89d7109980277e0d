"""Summary printed after a successful init."""

from __future__ import annotations

from typing import Iterable, List

from artinit.core.models import Technology, sorted_technologies
from artinit.core.paths import PROJECT_CONFIG_DIR
from artinit.repositories.naming import PYPI_NAMING

GETTING_STARTED_URL = (
    "https://github.com/jfrog/jfrog-cli/blob/v2/guides/getting-started-with-jfrog-using-the-cli.md"
)

FEEDBACK_URL = "https://github.com/jfrog/jfrog-cli/issues"

# Build and deploy commands shown for each detected technology
BUILD_COMMANDS: dict[Technology, tuple[str, ...]] = {
    Technology.MAVEN: ("jf mvn install deploy",),
    Technology.GRADLE: ("jf gradle artifactoryP",),
    Technology.NPM: ("jf npm install", "jf npm publish"),
    Technology.GO: ("jf go build", "jf go-publish v1.0.0"),
    Technology.PIP: (
        "jf pip install",
        f"jf rt u path/to/package/file {PYPI_NAMING.local}  # Publish your pip package",
    ),
    Technology.PIPENV: (
        "jf pipenv install",
        f"jf rt u path/to/package/file {PYPI_NAMING.local}  # Publish your pipenv package",
    ),
}

PUBLISH_BUILD_INFO_COMMAND = "jf rt bp"


def format_summary(technologies: Iterable[Technology]) -> str:
    """Build the human-readable summary for the detected technologies."""
    lines: List[str] = [
        "This project is initialized!",
        f"The project config is stored inside the {PROJECT_CONFIG_DIR} directory.",
        "",
        "Audit your project for security vulnerabilities by running",
        "jf audit",
        "",
        "Scan any software package on this machine for security vulnerabilities by running",
        "jf scan path/to/dir/or/package",
        "",
        "If you're using VS Code, IntelliJ IDEA, WebStorm, PyCharm, Android Studio or GoLand",
        "1. Open the IDE",
        "2. Install the JFrog extension or plugin",
        "3. View the JFrog panel",
        "",
    ]
    lines.extend(format_build_commands(technologies))
    lines.extend([
        "Read more using this link:",
        GETTING_STARTED_URL,
        "",
        f"Have feedback? Let us know at {FEEDBACK_URL}",
    ])
    return "\n".join(lines)


def format_build_commands(technologies: Iterable[Technology]) -> List[str]:
    """Build/deploy section; empty when no technology was detected."""
    commands: List[str] = []
    for tech in sorted_technologies(technologies):
        commands.extend(BUILD_COMMANDS.get(tech, ()))

    if not commands:
        return []

    return [
        "Build the code & deploy the packages by running",
        *commands,
        "",
        "Publish the build-info to Artifactory",
        PUBLISH_BUILD_INFO_COMMAND,
        "",
    ]

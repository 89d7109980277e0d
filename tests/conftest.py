"""Shared fixtures for artinit tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from artinit.config import ServerConfigStore


@pytest.fixture
def servers_file(tmp_path: Path) -> Path:
    """A servers.yml with two servers, 'local-server' being the default."""
    path = tmp_path / "home" / "config" / "servers.yml"
    path.parent.mkdir(parents=True)
    path.write_text(yaml.safe_dump({
        "default": "local-server",
        "servers": {
            "local-server": {
                "url": "http://localhost:8082/artifactory",
                "accessToken": "abc123",
            },
            "cloud": {
                "url": "https://acme.jfrog.io/artifactory/",
                "user": "admin",
                "password": "secret",
            },
        },
    }, sort_keys=False))
    return path


@pytest.fixture
def server_store(servers_file: Path) -> ServerConfigStore:
    return ServerConfigStore(servers_file)

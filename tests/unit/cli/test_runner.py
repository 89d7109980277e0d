"""Tests for CLI runner."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from artinit.cli import main
from artinit.cli.exit_codes import (
    EXIT_CONFIG_ERROR,
    EXIT_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_SUCCESS,
)
from artinit.cli.runner import CLIRunner, get_version
from artinit.config import ServerConfigStore
from artinit.core.errors import ProvisioningError


class TestGetVersion:
    """Tests for get_version function."""

    def test_get_version_from_metadata(self) -> None:
        with patch("artinit.cli.runner.version", return_value="1.2.3"):
            assert get_version() == "1.2.3"

    def test_get_version_fallback(self) -> None:
        from importlib.metadata import PackageNotFoundError

        from artinit import __version__

        with patch(
            "artinit.cli.runner.version",
            side_effect=PackageNotFoundError("not found"),
        ):
            assert get_version() == __version__


class TestCLIRunner:
    """Tests for CLIRunner dispatch."""

    def test_help_exits_cleanly(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            CLIRunner().run(["--help"])
        assert exc_info.value.code == 0
        assert "usage:" in capsys.readouterr().out.lower()

    def test_version(self, capsys) -> None:
        assert CLIRunner().run(["--version"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.strip()

    def test_no_command_shows_help(self, capsys) -> None:
        assert CLIRunner().run([]) == EXIT_SUCCESS
        assert "init" in capsys.readouterr().out


class TestInitCommandViaRunner:
    """End-to-end init through the CLI with a mocked remote."""

    def test_init_success(self, tmp_path: Path, server_store: ServerConfigStore, capsys) -> None:
        project = tmp_path / "p" / "myapp"
        project.mkdir(parents=True)
        (project / "package.json").write_text("{}")

        with patch(
            "artinit.repositories.provisioner.RepositoryProvisioner.ensure_default_repo",
            return_value=True,
        ) as ensure:
            code = CLIRunner(server_store=server_store).run(["init", str(project)])

        assert code == EXIT_SUCCESS
        assert ensure.call_count == 3
        npm = yaml.safe_load((project / ".jfrog" / "projects" / "npm.yaml").read_text())
        assert npm["resolver"]["serverId"] == "local-server"
        assert "This project is initialized!" in capsys.readouterr().out

    def test_init_with_server_id(self, tmp_path: Path, server_store: ServerConfigStore) -> None:
        (tmp_path / "go.mod").write_text("module x\n")
        with patch(
            "artinit.repositories.provisioner.RepositoryProvisioner.ensure_default_repo",
            return_value=False,
        ) as ensure:
            code = CLIRunner(server_store=server_store).run(
                ["init", "--server-id", "cloud", str(tmp_path)]
            )

        assert code == EXIT_SUCCESS
        assert {call.args[2] for call in ensure.call_args_list} == {"cloud"}

    def test_init_without_default_server(self, tmp_path: Path, capsys) -> None:
        store = ServerConfigStore(tmp_path / "servers.yml")
        code = CLIRunner(server_store=store).run(["init", str(tmp_path)])

        assert code == EXIT_CONFIG_ERROR
        assert "No default server configured" in capsys.readouterr().out

    def test_init_provisioning_failure(
        self, tmp_path: Path, server_store: ServerConfigStore, capsys
    ) -> None:
        (tmp_path / "pom.xml").write_text("<project/>")
        with patch(
            "artinit.repositories.provisioner.RepositoryProvisioner.ensure_default_repo",
            side_effect=ProvisioningError("HTTP 500 boom"),
        ):
            code = CLIRunner(server_store=server_store).run(["init", str(tmp_path)])

        assert code == EXIT_FAILURE
        assert "Error: HTTP 500 boom" in capsys.readouterr().out
        assert not (tmp_path / ".jfrog").exists()

    def test_init_not_a_directory(self, tmp_path: Path, server_store: ServerConfigStore) -> None:
        code = CLIRunner(server_store=server_store).run(["init", str(tmp_path / "missing")])
        assert code == EXIT_INVALID_USAGE


def test_main_entry_point(capsys) -> None:
    assert main(["--version"]) == EXIT_SUCCESS


class TestInitPathHandling:
    """The build name comes from the path as given, not its symlink target."""

    def test_init_through_symlink(self, tmp_path: Path, server_store: ServerConfigStore) -> None:
        real = tmp_path / "real" / "app"
        real.mkdir(parents=True)
        (tmp_path / "work").mkdir()
        link = tmp_path / "work" / "app"
        link.symlink_to(real, target_is_directory=True)

        code = CLIRunner(server_store=server_store).run(["init", str(link)])

        assert code == EXIT_SUCCESS
        build = yaml.safe_load((real / ".jfrog" / "projects" / "build.yaml").read_text())
        assert build["name"] == "work"

    def test_init_malformed_servers_file(self, tmp_path: Path, capsys) -> None:
        servers = tmp_path / "servers.yml"
        servers.write_text("default: a\nservers: [a]\n")
        project = tmp_path / "proj"
        project.mkdir()

        code = CLIRunner(server_store=ServerConfigStore(servers)).run(["init", str(project)])

        assert code == EXIT_CONFIG_ERROR
        assert "must be a mapping" in capsys.readouterr().out

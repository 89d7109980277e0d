"""Tests for artinit.project.initializer."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
import yaml

from artinit.core.errors import ConfigurationError, DetectionError, ProvisioningError
from artinit.core.models import RepositoryKind, Technology
from artinit.detection import TechnologyDetector
from artinit.project import ProjectInitializer
from tests.fakes import FakeServerStore, RecordingProvisioner, SpyDetector


def _initializer(project: Path, server_id=None, **overrides) -> ProjectInitializer:
    kwargs = {
        "server_store": FakeServerStore(),
        "detector": TechnologyDetector(),
        "provisioner": RecordingProvisioner(),
        "output": io.StringIO(),
    }
    kwargs.update(overrides)
    return ProjectInitializer(project, server_id, **kwargs)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    path = tmp_path / "p" / "myapp"
    path.mkdir(parents=True)
    return path


class TestServerResolution:

    def test_explicit_server_id_skips_default_lookup(self, project: Path) -> None:
        store = FakeServerStore(default=None)
        result = _initializer(project, "explicit", server_store=store).run()
        assert result.server_id == "explicit"
        assert store.lookups == 0

    def test_default_server_used(self, project: Path) -> None:
        result = _initializer(project).run()
        assert result.server_id == "local-server"

    def test_no_default_server(self, project: Path) -> None:
        provisioner = RecordingProvisioner()
        initializer = _initializer(
            project, server_store=FakeServerStore(default=None), provisioner=provisioner
        )
        with pytest.raises(ConfigurationError):
            initializer.run()
        assert provisioner.calls == []
        assert not (project / ".jfrog").exists()


class TestDetectTechnologies:
    """Root scan first, recursive scan only when the root shows nothing."""

    def test_root_manifest_avoids_recursive_scan(self, project: Path) -> None:
        spy = SpyDetector(shallow=frozenset({Technology.MAVEN}))
        assert _initializer(project, detector=spy).detect_technologies() == {Technology.MAVEN}
        assert spy.calls == [(project, False)]

    def test_falls_back_to_recursive_scan(self, project: Path) -> None:
        spy = SpyDetector(recursive=frozenset({Technology.GO}))
        assert _initializer(project, detector=spy).detect_technologies() == {Technology.GO}
        assert spy.calls == [(project, False), (project, True)]

    def test_real_detector_nested_manifest(self, project: Path) -> None:
        (project / "web").mkdir()
        (project / "web" / "package.json").write_text("{}")
        assert _initializer(project).detect_technologies() == {Technology.NPM}

    def test_detection_error_propagates(self, tmp_path: Path) -> None:
        with pytest.raises(DetectionError):
            _initializer(tmp_path / "missing").run()


class TestRun:
    """Tests for the full init sequence."""

    def test_npm_end_to_end(self, project: Path) -> None:
        (project / "package.json").write_text("{}")
        provisioner = RecordingProvisioner()
        output = io.StringIO()

        result = _initializer(
            project, "local-server", provisioner=provisioner, output=output
        ).run()

        assert result.technologies == {Technology.NPM}
        assert provisioner.calls == [
            (RepositoryKind.LOCAL, Technology.NPM, "local-server"),
            (RepositoryKind.REMOTE, Technology.NPM, "local-server"),
            (RepositoryKind.VIRTUAL, Technology.NPM, "local-server"),
        ]

        projects_dir = project / ".jfrog" / "projects"
        npm = yaml.safe_load((projects_dir / "npm.yaml").read_text())
        assert npm["resolver"] == {"repo": "default-npm-virtual", "serverId": "local-server"}
        assert npm["deployer"] == {"repo": "default-npm-virtual", "serverId": "local-server"}

        build = yaml.safe_load((projects_dir / "build.yaml").read_text())
        assert build == {"version": 1, "type": "build", "name": "p"}

        assert result.written_files == [projects_dir / "npm.yaml", projects_dir / "build.yaml"]
        assert "This project is initialized!" in output.getvalue()
        assert "jf npm publish" in output.getvalue()

    def test_no_technologies_writes_only_build_config(self, project: Path) -> None:
        (project / "README.md").write_text("hello")
        provisioner = RecordingProvisioner()
        output = io.StringIO()

        result = _initializer(project, provisioner=provisioner, output=output).run()

        assert result.technologies == frozenset()
        assert provisioner.calls == []
        files = sorted(p.name for p in (project / ".jfrog" / "projects").iterdir())
        assert files == ["build.yaml"]
        assert "Build the code & deploy the packages" not in output.getvalue()

    def test_multiple_technologies(self, project: Path) -> None:
        (project / "pom.xml").write_text("<project/>")
        (project / "requirements.txt").write_text("requests\n")
        provisioner = RecordingProvisioner()

        _initializer(project, provisioner=provisioner).run()

        assert len(provisioner.calls) == 6
        assert {tech for _, tech, _ in provisioner.calls} == {Technology.MAVEN, Technology.PIP}
        maven = yaml.safe_load((project / ".jfrog" / "projects" / "maven.yaml").read_text())
        assert maven["deployer"]["releaseRepo"] == "default-maven-virtual"
        assert maven["deployer"]["snapshotRepo"] == "default-maven-virtual"
        pip = yaml.safe_load((project / ".jfrog" / "projects" / "pip.yaml").read_text())
        assert pip["resolver"]["repo"] == "default-pypi-virtual"

    def test_provisioning_failure_aborts(self, project: Path) -> None:
        (project / "go.mod").write_text("module example.com/x\n")
        error = ProvisioningError("HTTP 500")
        provisioner = RecordingProvisioner(
            fail_on=(RepositoryKind.REMOTE, Technology.GO), error=error
        )
        output = io.StringIO()

        with pytest.raises(ProvisioningError) as exc_info:
            _initializer(project, provisioner=provisioner, output=output).run()

        assert exc_info.value is error
        assert [kind for kind, _, _ in provisioner.calls] == [
            RepositoryKind.LOCAL,
            RepositoryKind.REMOTE,
        ]
        assert not (project / ".jfrog").exists()
        assert output.getvalue() == ""

    def test_rerun_produces_identical_files(self, project: Path) -> None:
        (project / "build.gradle").write_text("")
        _initializer(project).run()
        projects_dir = project / ".jfrog" / "projects"
        first = {p.name: p.read_bytes() for p in projects_dir.iterdir()}

        _initializer(project).run()
        second = {p.name: p.read_bytes() for p in projects_dir.iterdir()}

        assert first == second
        assert set(first) == {"gradle.yaml", "build.yaml"}

    def test_existing_jfrog_dir_does_not_affect_detection(self, project: Path) -> None:
        (project / "Pipfile").write_text("")
        _initializer(project).run()
        # .jfrog now exists; a second run must detect the same technologies
        result = _initializer(project).run()
        assert result.technologies == {Technology.PIPENV}

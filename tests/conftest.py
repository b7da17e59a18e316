"""Pytest configuration for gps tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from gps_cli.console import console
from gps_cli.context import GpsContext
from gps_cli.errors import GitCommandError
from gps_cli.git import Identity
from gps_cli.git import Scope
from gps_cli.paths import GpsPaths
from gps_cli.settings import GpsSettings


class FakeGitClient:
    """In-memory GitClient.

    Identity files are only visible when they also exist on disk, matching
    how the real client treats a missing file.
    """

    def __init__(
        self,
        global_identity: Identity | None = None,
        local_identity: Identity | None = None,
        identity_files: dict[Path, Identity] | None = None,
        repository_root: Path | None = None,
        remotes: dict[str, str] | None = None,
    ):
        self.identities = {
            Scope.GLOBAL: global_identity or Identity(),
            Scope.LOCAL: local_identity or Identity(),
        }
        self.identity_files = dict(identity_files or {})
        self.root = repository_root
        self.remotes = dict(remotes or {})
        self.failing_remotes: set[str] = set()
        self.writes: list[tuple] = []

    def get_identity(self, scope: Scope) -> Identity:
        return self.identities[scope]

    def set_identity(self, scope: Scope, name: str | None, email: str | None) -> None:
        current = self.identities[scope]
        self.identities[scope] = Identity(
            name=name if name is not None else current.name,
            email=email if email is not None else current.email,
        )
        self.writes.append(("identity", scope, name, email))

    def read_identity_file(self, path: Path) -> Identity:
        if not path.is_file():
            return Identity()
        return self.identity_files.get(path, Identity())

    def is_repository(self) -> bool:
        return self.root is not None

    def repository_root(self) -> Path | None:
        return self.root

    def list_remotes(self) -> list[str]:
        return list(self.remotes)

    def get_remote_url(self, name: str) -> str | None:
        return self.remotes.get(name)

    def set_remote_url(self, name: str, url: str) -> None:
        if name in self.failing_remotes:
            raise GitCommandError(["git", "remote", "set-url", name, url], 2, "error: could not lock config file")
        self.remotes[name] = url
        self.writes.append(("remote", name, url))


@pytest.fixture(autouse=True)
def _isolated_output(monkeypatch):
    """Wide console and no JSONL sink, so output is stable and nothing is written."""
    monkeypatch.setattr(console, "width", 200)
    monkeypatch.delenv("GPS_LOG_PATH", raising=False)
    monkeypatch.delenv("GPS_LOG_LEVEL", raising=False)


@pytest.fixture
def home(tmp_path) -> Path:
    path = tmp_path / "home"
    (path / ".ssh").mkdir(parents=True)
    return path


@pytest.fixture
def write_ssh_config(home):
    def _write(text: str) -> Path:
        path = home / ".ssh" / "config"
        path.write_text(text)
        return path

    return _write


@pytest.fixture
def write_identity_file(home):
    """Create ``~/.gitconfig-<suffix>`` on disk and return its path."""

    def _write(suffix: str, name: str | None = None, email: str | None = None) -> Path:
        path = home / f".gitconfig-{suffix}"
        lines = ["[user]"]
        if name is not None:
            lines.append(f"\tname = {name}")
        if email is not None:
            lines.append(f"\temail = {email}")
        path.write_text("\n".join(lines) + "\n")
        return path

    return _write


@pytest.fixture
def make_context(home, tmp_path):
    def _make(git: FakeGitClient, settings: GpsSettings | None = None) -> GpsContext:
        return GpsContext(
            cwd=tmp_path / "work",
            paths=GpsPaths(home=home),
            settings=settings or GpsSettings(),
            git=git,
        )

    return _make


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def fake_git():
    """The FakeGitClient class, for tests to build clients with."""
    return FakeGitClient

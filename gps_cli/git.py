"""Access to git configuration and remotes.

Everything gps reads from or writes to git goes through the ``GitClient``
protocol so commands can run against a fake in tests. ``SubprocessGitClient``
is the real implementation and shells out to ``git`` in a fixed directory.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Protocol

from .errors import GitCommandError

logger = logging.getLogger(__name__)


class Scope(str, Enum):
    """Where an identity change applies."""

    GLOBAL = "global"
    LOCAL = "local"

    @property
    def adverb(self) -> str:
        return "globally" if self is Scope.GLOBAL else "locally"


@dataclass(frozen=True)
class Identity:
    """A git ``user.name``/``user.email`` pair; either may be unset."""

    name: str | None = None
    email: str | None = None

    @property
    def is_complete(self) -> bool:
        return bool(self.name) and bool(self.email)


class GitClient(Protocol):
    """Operations gps needs from git."""

    def get_identity(self, scope: Scope) -> Identity: ...

    def set_identity(self, scope: Scope, name: str | None, email: str | None) -> None: ...

    def read_identity_file(self, path: Path) -> Identity: ...

    def is_repository(self) -> bool: ...

    def repository_root(self) -> Path | None: ...

    def list_remotes(self) -> list[str]: ...

    def get_remote_url(self, name: str) -> str | None: ...

    def set_remote_url(self, name: str, url: str) -> None: ...


class SubprocessGitClient:
    """``GitClient`` backed by the ``git`` executable.

    Args:
        cwd: Directory every command runs in. Local scope and remotes refer
            to the repository containing this directory.
        executable: git binary to invoke.
    """

    def __init__(self, cwd: Path, executable: str = "git"):
        self.cwd = cwd
        self.executable = executable

    def _run(self, *args: str) -> subprocess.CompletedProcess[str]:
        cmd = [self.executable, *args]
        logger.debug(f"Running: {' '.join(cmd)}")
        return subprocess.run(cmd, cwd=self.cwd, capture_output=True, text=True)

    def _query(self, *args: str) -> str | None:
        """Run a read-only command; any failure means the value is absent."""
        try:
            result = self._run(*args)
        except OSError as e:
            logger.debug(f"Could not run git {' '.join(args)}: {e}")
            return None
        if result.returncode != 0:
            return None
        value = result.stdout.strip()
        return value or None

    def _execute(self, *args: str) -> None:
        """Run a mutating command; failure raises ``GitCommandError``."""
        try:
            result = self._run(*args)
        except OSError as e:
            raise GitCommandError([self.executable, *args], -1, str(e)) from e
        if result.returncode != 0:
            raise GitCommandError([self.executable, *args], result.returncode, result.stderr)

    def get_identity(self, scope: Scope) -> Identity:
        flag = f"--{scope.value}"
        return Identity(
            name=self._query("config", flag, "--get", "user.name"),
            email=self._query("config", flag, "--get", "user.email"),
        )

    def set_identity(self, scope: Scope, name: str | None, email: str | None) -> None:
        flag = f"--{scope.value}"
        if name is not None:
            self._execute("config", flag, "user.name", name)
            logger.info(f"Set {scope.value} user.name to {name}")
        if email is not None:
            self._execute("config", flag, "user.email", email)
            logger.info(f"Set {scope.value} user.email to {email}")

    def read_identity_file(self, path: Path) -> Identity:
        if not path.is_file():
            return Identity()
        return Identity(
            name=self._query("config", f"--file={path}", "--get", "user.name"),
            email=self._query("config", f"--file={path}", "--get", "user.email"),
        )

    def is_repository(self) -> bool:
        return self._query("rev-parse", "--git-dir") is not None

    def repository_root(self) -> Path | None:
        top = self._query("rev-parse", "--show-toplevel")
        return Path(top) if top else None

    def list_remotes(self) -> list[str]:
        output = self._query("remote")
        return output.splitlines() if output else []

    def get_remote_url(self, name: str) -> str | None:
        return self._query("remote", "get-url", name)

    def set_remote_url(self, name: str, url: str) -> None:
        self._execute("remote", "set-url", name, url)
        logger.info(f"Set remote {name} url to {url}")

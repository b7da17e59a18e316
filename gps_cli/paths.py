"""Path policy and dependency wiring for the CLI.

All home-relative locations gps reads are decided here. Core modules receive
a ``GpsPaths`` through the context instead of calling ``Path.home()``.
"""

from dataclasses import dataclass
from pathlib import Path

from .context import GpsContext
from .git import SubprocessGitClient
from .settings import GpsSettings
from .settings import load_settings

IDENTITY_FILE_PREFIX = ".gitconfig-"


@dataclass(frozen=True)
class GpsPaths:
    """Files consulted when detecting profiles."""

    home: Path

    @property
    def ssh_config(self) -> Path:
        return self.home / ".ssh" / "config"

    def identity_file(self, suffix: str) -> Path:
        """``~/.gitconfig-<suffix>`` for an SSH host alias suffix."""
        return self.home / f"{IDENTITY_FILE_PREFIX}{suffix}"

    def expand(self, value: str) -> Path:
        """Expand a leading ``~`` against this home rather than the process one."""
        if value == "~":
            return self.home
        if value.startswith("~/"):
            return self.home / value[2:]
        return Path(value)

    def display(self, path: Path) -> str:
        """Render ``path`` with the home directory shortened to ``~``."""
        try:
            return f"~/{path.relative_to(self.home).as_posix()}"
        except ValueError:
            return str(path)


def create_context(
    cwd: Path | None = None,
    home: Path | None = None,
    settings: GpsSettings | None = None,
) -> GpsContext:
    """Build the context for one CLI invocation.

    Args:
        cwd: Working directory for git (defaults to the process cwd).
        home: Home directory (defaults to the user's home).
        settings: Preloaded settings (defaults to loading the settings file).
    """
    cwd = cwd or Path.cwd()
    paths = GpsPaths(home=home or Path.home())
    return GpsContext(
        cwd=cwd,
        paths=paths,
        settings=settings or load_settings(),
        git=SubprocessGitClient(cwd),
    )

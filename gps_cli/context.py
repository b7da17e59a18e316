"""Per-invocation context passed to every gps operation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from .git import GitClient
from .settings import GpsSettings

if TYPE_CHECKING:
    from .paths import GpsPaths


@dataclass
class GpsContext:
    """Working directory, file locations, settings and git access for one run."""

    cwd: Path
    paths: GpsPaths
    settings: GpsSettings
    git: GitClient

    @property
    def personal_identity_file(self) -> Path:
        return self.paths.expand(self.settings.personal_identity_file)

"""Read-only report of the identity and remotes currently in effect."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from pathlib import Path

from .context import GpsContext
from .git import Identity
from .git import Scope
from .remotes import parse_github_ssh_url


@dataclass
class RemoteStatus:
    """One configured remote and the SSH host alias embedded in its URL."""

    name: str
    url: str
    ssh_host: str | None = None


@dataclass
class RepositoryStatus:
    """Local overrides and remotes of the repository containing the cwd."""

    root: Path | None
    identity: Identity
    remotes: list[RemoteStatus] = field(default_factory=list)


@dataclass
class StatusReport:
    global_identity: Identity
    repository: RepositoryStatus | None = None


def collect_status(context: GpsContext) -> StatusReport:
    """Gather global identity and, inside a repository, its local state."""
    git = context.git
    report = StatusReport(global_identity=git.get_identity(Scope.GLOBAL))

    if not git.is_repository():
        return report

    remotes = []
    for name in git.list_remotes():
        url = git.get_remote_url(name)
        if url is None:
            continue
        parsed = parse_github_ssh_url(url)
        remotes.append(RemoteStatus(name=name, url=url, ssh_host=parsed.host if parsed else None))

    report.repository = RepositoryStatus(
        root=git.repository_root(),
        identity=git.get_identity(Scope.LOCAL),
        remotes=remotes,
    )
    return report

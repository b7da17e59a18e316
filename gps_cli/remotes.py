"""GitHub SSH remote URL parsing and host rewriting."""

from __future__ import annotations

import re
from typing import NamedTuple

# git@github.com:org/repo.git or git@github.com-alias:org/repo.git
GITHUB_SSH_URL = re.compile(r"^git@(github\.com[^:]*):(.*\.git)$")


class GitHubSshUrl(NamedTuple):
    host: str
    path: str


def parse_github_ssh_url(url: str) -> GitHubSshUrl | None:
    """Split a GitHub SSH URL into host alias and repository path."""
    match = GITHUB_SSH_URL.match(url.strip())
    if match is None:
        return None
    return GitHubSshUrl(host=match.group(1), path=match.group(2))


def rewrite_host(url: str, host: str) -> str | None:
    """Return ``url`` pointing at ``host``, or None if it is not a GitHub SSH URL.

    The repository path is kept verbatim. The result equals ``url`` when the
    host already matches.
    """
    parsed = parse_github_ssh_url(url)
    if parsed is None:
        return None
    return f"git@{host}:{parsed.path}"


def ssh_test_command(host: str) -> str:
    """Command a user can run to check which key ``host`` authenticates with."""
    return f"ssh -T git@{host}"

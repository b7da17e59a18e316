"""Apply a profile's identity and SSH host to git configuration.

A switch is a sequence of independent git writes. It is not transactional:
if a later write fails, earlier ones stay applied.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from dataclasses import field

from .context import GpsContext
from .errors import MissingArgumentError
from .errors import NotARepositoryError
from .git import Identity
from .git import Scope
from .profiles import Profile
from .profiles import ProfileResolver
from .remotes import rewrite_host

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RemoteChange:
    remote: str
    old_url: str
    new_url: str


@dataclass
class SwitchResult:
    """What a switch changed."""

    profile: Profile
    scope: Scope
    identity: Identity
    remotes_checked: bool = False
    remote_changes: list[RemoteChange] = field(default_factory=list)

    @property
    def identity_written(self) -> bool:
        return self.identity.name is not None or self.identity.email is not None

    @property
    def skipped_identity_fields(self) -> list[str]:
        """Identity keys left untouched because the profile does not know them."""
        skipped = []
        if self.identity.name is None:
            skipped.append("user.name")
        if self.identity.email is None:
            skipped.append("user.email")
        return skipped


def rewrite_remotes(context: GpsContext, ssh_host: str) -> list[RemoteChange]:
    """Point every GitHub SSH remote of the current repository at ``ssh_host``.

    Remotes that are not GitHub SSH URLs, or already use ``ssh_host``, are
    left alone. Changes already made are kept if a later one fails.
    """
    git = context.git
    changes = []
    for name in git.list_remotes():
        current = git.get_remote_url(name)
        if current is None:
            continue
        new_url = rewrite_host(current, ssh_host)
        if new_url is None or new_url == current:
            continue
        git.set_remote_url(name, new_url)
        changes.append(RemoteChange(remote=name, old_url=current, new_url=new_url))
    return changes


def switch_profile(context: GpsContext, profile_name: str | None, scope: Scope = Scope.GLOBAL) -> SwitchResult:
    """Switch git to ``profile_name`` at ``scope``.

    Raises:
        MissingArgumentError: No profile name given.
        NotARepositoryError: Local scope requested outside a repository.
        ProfileNotFoundError: No detected profile has that name.
        GitCommandError: A git write failed.
    """
    if not profile_name:
        raise MissingArgumentError("Profile name", usage="gps switch <profile_name> [local]")

    profile = ProfileResolver(context).get(profile_name)

    git = context.git
    if scope is Scope.LOCAL and not git.is_repository():
        raise NotARepositoryError(context.cwd)

    logger.info(f"Switching to profile {profile.name} {scope.adverb}")

    identity = Identity(name=profile.display_name, email=profile.email)
    git.set_identity(scope, identity.name, identity.email)

    result = SwitchResult(profile=profile, scope=scope, identity=identity)
    if scope is Scope.LOCAL:
        result.remotes_checked = True
        result.remote_changes = rewrite_remotes(context, profile.ssh_host)

    return result

"""Profile detection from git and SSH configuration.

Profiles are recomputed on every call, in a fixed order:

1. the global git identity (the work profile)
2. the personal identity file paired with the personal SSH host alias
3. every ``Host <alias_prefix><suffix>`` entry in the SSH config

Nothing read here is fatal: a missing file or unset key only means the
corresponding profile (or field) is absent.
"""

from __future__ import annotations

import logging

from ..context import GpsContext
from ..errors import ProfileNotFoundError
from ..git import Scope
from ..ssh_config import SshHostBlock
from ..ssh_config import find_host_aliases
from ..ssh_config import find_host_block
from ..ssh_config import read_ssh_config
from .schema import Profile
from .schema import ProfileSource

logger = logging.getLogger(__name__)


class ProfileResolver:
    """Detects profiles for one invocation.

    Args:
        context: Invocation context providing paths, settings and git access.
    """

    def __init__(self, context: GpsContext):
        self.context = context

    def resolve(self) -> list[Profile]:
        """Return all detected profiles in scan order."""
        blocks = read_ssh_config(self.context.paths.ssh_config)

        profiles: list[Profile] = []
        for detected in (self._work_profile(), self._personal_profile(blocks)):
            if detected is not None:
                profiles.append(detected)
        profiles.extend(self._ssh_profiles(blocks))

        logger.debug(f"Detected {len(profiles)} profile(s): {', '.join(p.name for p in profiles)}")
        return profiles

    def get(self, name: str) -> Profile:
        """Look up a profile by exact name.

        Raises:
            ProfileNotFoundError: No detected profile has that name.
        """
        profiles = self.resolve()
        for profile in profiles:
            if profile.name == name:
                return profile
        raise ProfileNotFoundError(name, [p.name for p in profiles])

    def _work_profile(self) -> Profile | None:
        settings = self.context.settings
        identity = self.context.git.get_identity(Scope.GLOBAL)
        if not identity.is_complete:
            return None
        return Profile(
            name=settings.profiles.work,
            display_name=identity.name,
            email=identity.email,
            ssh_host=settings.hosts.default,
            description="Work profile (from global git config)",
            source=ProfileSource.GLOBAL,
        )

    def _personal_profile(self, blocks: list[SshHostBlock]) -> Profile | None:
        settings = self.context.settings
        block = find_host_block(blocks, settings.hosts.personal)
        if block is None:
            return None

        config_file = self.context.personal_identity_file
        identity = self.context.git.read_identity_file(config_file)
        if not identity.is_complete:
            return None

        return Profile(
            name=settings.profiles.personal,
            display_name=identity.name,
            email=identity.email,
            ssh_host=settings.hosts.personal,
            ssh_key=block.get("IdentityFile"),
            description=f"Personal profile (from {self.context.paths.display(config_file)})",
            source=ProfileSource.PERSONAL,
            config_file=config_file,
        )

    def _ssh_profiles(self, blocks: list[SshHostBlock]) -> list[Profile]:
        hosts = self.context.settings.hosts
        paths = self.context.paths
        profiles = []

        for alias in find_host_aliases(blocks, hosts.alias_prefix):
            # Already covered by the personal profile
            if alias == hosts.personal:
                continue

            suffix = alias[len(hosts.alias_prefix) :]
            ssh_key = find_host_block(blocks, alias).get("IdentityFile")
            config_file = paths.identity_file(suffix)
            if config_file.is_file():
                identity = self.context.git.read_identity_file(config_file)
                profiles.append(
                    Profile(
                        name=suffix,
                        display_name=identity.name,
                        email=identity.email,
                        ssh_host=alias,
                        ssh_key=ssh_key,
                        description=f"Auto-detected from {paths.display(config_file)}",
                        config_file=config_file,
                    )
                )
            else:
                profiles.append(
                    Profile(
                        name=suffix,
                        ssh_host=alias,
                        ssh_key=ssh_key,
                        description="SSH host found (no matching git config)",
                    )
                )

        return profiles

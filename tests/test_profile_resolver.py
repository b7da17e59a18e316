"""
Tests for profile detection.

Covers scan order, the work/personal/SSH-derived profiles, and the rule that
missing files or keys only mean absence.
"""

import pytest

from gps_cli.errors import ProfileNotFoundError
from gps_cli.git import Identity
from gps_cli.profiles import ProfileResolver
from gps_cli.profiles import ProfileSource
from gps_cli.settings import GpsSettings
from gps_cli.settings import HostSettings
from gps_cli.settings import ProfileNames

WORK = Identity(name="Work Person", email="me@corp.example")


class TestWorkProfile:
    def test_global_identity_only_yields_single_work_profile(self, fake_git, make_context):
        context = make_context(fake_git(global_identity=WORK))

        profiles = ProfileResolver(context).resolve()

        assert len(profiles) == 1
        work = profiles[0]
        assert work.name == "work"
        assert work.display_name == "Work Person"
        assert work.email == "me@corp.example"
        assert work.ssh_host == "github.com"
        assert work.source is ProfileSource.GLOBAL
        assert work.description == "Work profile (from global git config)"

    @pytest.mark.parametrize(
        "identity",
        [Identity(), Identity(name="Only Name"), Identity(email="only@example.com")],
    )
    def test_incomplete_global_identity_yields_nothing(self, fake_git, make_context, identity):
        context = make_context(fake_git(global_identity=identity))
        assert ProfileResolver(context).resolve() == []


class TestSshProfiles:
    def test_host_with_matching_identity_file(self, fake_git, make_context, write_ssh_config, write_identity_file):
        write_ssh_config("Host github.com-acme\n  IdentityFile ~/.ssh/id_acme\n")
        config_file = write_identity_file("acme", "A", "a@x.com")
        context = make_context(fake_git(identity_files={config_file: Identity("A", "a@x.com")}))

        profiles = ProfileResolver(context).resolve()

        assert [p.name for p in profiles] == ["acme"]
        acme = profiles[0]
        assert acme.display_name == "A"
        assert acme.email == "a@x.com"
        assert acme.ssh_host == "github.com-acme"
        assert acme.config_file == config_file
        assert acme.description == "Auto-detected from ~/.gitconfig-acme"
        assert acme.ssh_key == "~/.ssh/id_acme"

    def test_host_without_identity_file_is_unknown(self, fake_git, make_context, write_ssh_config):
        write_ssh_config("Host github.com-side\n")
        context = make_context(fake_git())

        (side,) = ProfileResolver(context).resolve()

        assert side.name == "side"
        assert side.display_name is None
        assert side.email is None
        assert side.display_name_or_unknown() == "Unknown"
        assert side.description == "SSH host found (no matching git config)"

    def test_identity_file_missing_key_keeps_other_field(
        self, fake_git, make_context, write_ssh_config, write_identity_file
    ):
        write_ssh_config("Host github.com-half\n")
        config_file = write_identity_file("half", name="Half")
        context = make_context(fake_git(identity_files={config_file: Identity(name="Half")}))

        (half,) = ProfileResolver(context).resolve()

        assert half.display_name == "Half"
        assert half.email is None
        assert half.email_or_unknown() == "Unknown"

    def test_non_github_hosts_ignored(self, fake_git, make_context, write_ssh_config):
        write_ssh_config("Host gitlab.com-acme\nHost github.com\nHost github.com-*\n")
        assert ProfileResolver(make_context(fake_git())).resolve() == []

    def test_missing_ssh_config_is_not_an_error(self, fake_git, make_context):
        assert ProfileResolver(make_context(fake_git())).resolve() == []


class TestPersonalProfile:
    def test_personal_alias_with_identity_file(self, fake_git, make_context, write_ssh_config, write_identity_file):
        write_ssh_config("Host github.com-personal\n")
        config_file = write_identity_file("personal", "Me", "me@home.example")
        context = make_context(fake_git(identity_files={config_file: Identity("Me", "me@home.example")}))

        profiles = ProfileResolver(context).resolve()

        # The alias is consumed by the personal profile, not repeated as an SSH profile
        assert [p.name for p in profiles] == ["personal"]
        personal = profiles[0]
        assert personal.source is ProfileSource.PERSONAL
        assert personal.ssh_host == "github.com-personal"
        assert personal.description == "Personal profile (from ~/.gitconfig-personal)"

    def test_identity_file_without_alias_is_ignored(self, fake_git, make_context, write_identity_file):
        config_file = write_identity_file("personal", "Me", "me@home.example")
        context = make_context(fake_git(identity_files={config_file: Identity("Me", "me@home.example")}))

        assert ProfileResolver(context).resolve() == []

    def test_incomplete_identity_file_drops_profile(
        self, fake_git, make_context, write_ssh_config, write_identity_file
    ):
        write_ssh_config("Host github.com-personal\n")
        config_file = write_identity_file("personal", name="Me")
        context = make_context(fake_git(identity_files={config_file: Identity(name="Me")}))

        assert ProfileResolver(context).resolve() == []

    def test_configured_alias_and_names(self, fake_git, make_context, write_ssh_config, home):
        write_ssh_config("Host github.com-arvind\nHost github.com-acme\n")
        identity_file = home / "identities" / "home.gitconfig"
        identity_file.parent.mkdir()
        identity_file.write_text("[user]\n")
        settings = GpsSettings(
            profiles=ProfileNames(work="job", personal="me"),
            hosts=HostSettings(personal="github.com-arvind"),
            personal_identity_file="~/identities/home.gitconfig",
        )
        git = fake_git(global_identity=WORK, identity_files={identity_file: Identity("Me", "me@home.example")})

        profiles = ProfileResolver(make_context(git, settings)).resolve()

        assert [p.name for p in profiles] == ["job", "me", "acme"]
        assert profiles[1].ssh_host == "github.com-arvind"


class TestScanOrder:
    def test_work_then_personal_then_ssh_hosts(self, fake_git, make_context, write_ssh_config, write_identity_file):
        write_ssh_config("Host github.com-zeta\nHost github.com-personal\nHost github.com-alpha\n")
        personal_file = write_identity_file("personal", "Me", "me@home.example")
        git = fake_git(global_identity=WORK, identity_files={personal_file: Identity("Me", "me@home.example")})

        profiles = ProfileResolver(make_context(git)).resolve()

        assert [p.name for p in profiles] == ["work", "personal", "zeta", "alpha"]


class TestGet:
    def test_exact_match(self, fake_git, make_context, write_ssh_config):
        write_ssh_config("Host github.com-acme\nHost github.com-acme2\n")
        resolver = ProfileResolver(make_context(fake_git()))
        assert resolver.get("acme").ssh_host == "github.com-acme"

    def test_missing_profile_lists_available(self, fake_git, make_context, write_ssh_config):
        write_ssh_config("Host github.com-acme\n")
        resolver = ProfileResolver(make_context(fake_git(global_identity=WORK)))

        with pytest.raises(ProfileNotFoundError) as exc_info:
            resolver.get("acm")

        assert exc_info.value.available == ["work", "acme"]
        assert "Profile 'acm' not found" in str(exc_info.value)

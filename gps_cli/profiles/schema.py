"""Pydantic schema for detected git profiles."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel
from pydantic import Field

UNKNOWN = "Unknown"


class ProfileSource(str, Enum):
    """Where a profile was detected."""

    GLOBAL = "global"
    PERSONAL = "personal"
    SSH = "ssh"


class Profile(BaseModel):
    """A named git identity plus the SSH host alias that selects its key."""

    name: str = Field(..., description="Unique profile key")
    display_name: str | None = Field(None, description="git user.name, None when unknown")
    email: str | None = Field(None, description="git user.email, None when unknown")
    ssh_host: str = Field(default="github.com", description="SSH host alias for remotes")
    ssh_key: str | None = Field(None, description="IdentityFile declared for the SSH host alias")
    description: str = Field(default="", description="Where the profile was detected")
    source: ProfileSource = Field(default=ProfileSource.SSH, description="Detection source")
    config_file: Path | None = Field(None, description="Identity file the profile was read from")

    @property
    def has_identity(self) -> bool:
        return bool(self.display_name) and bool(self.email)

    def display_name_or_unknown(self) -> str:
        return self.display_name or UNKNOWN

    def email_or_unknown(self) -> str:
        return self.email or UNKNOWN

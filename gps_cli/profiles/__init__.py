"""Profile detection for gps.

Profiles are derived from git and SSH configuration on every invocation;
nothing is stored.
"""

from .resolver import ProfileResolver
from .schema import UNKNOWN
from .schema import Profile
from .schema import ProfileSource

__all__ = [
    "Profile",
    "ProfileResolver",
    "ProfileSource",
    "UNKNOWN",
]

"""gps - switch git identities and SSH host aliases between profiles."""

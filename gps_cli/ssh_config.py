"""Line-oriented reader for OpenSSH client configuration files.

Only the structure gps needs is recovered: each ``Host`` block with its
patterns, its options and the line it starts on. ``Match`` blocks end the
preceding ``Host`` block and are skipped. ``Include`` directives are kept as
plain options and not followed.
"""

from __future__ import annotations

import logging
import shlex
from collections.abc import Iterable
from collections.abc import Iterator
from dataclasses import dataclass
from dataclasses import field
from pathlib import Path

logger = logging.getLogger(__name__)

_WILDCARDS = frozenset("*?!")


@dataclass
class SshHostBlock:
    """A ``Host`` block from an SSH client configuration."""

    patterns: list[str]
    line: int
    options: dict[str, list[str]] = field(default_factory=dict)

    def get(self, keyword: str) -> str | None:
        """First value of an option (keywords are case-insensitive)."""
        values = self.options.get(keyword.lower())
        return values[0] if values else None


def _split_line(raw: str) -> tuple[str, str] | None:
    """Split a config line into (keyword, argument), or None for blanks/comments."""
    line = raw.strip()
    if not line or line.startswith("#"):
        return None

    # "Keyword value", "Keyword=value" and "Keyword = value" are all legal
    for index, char in enumerate(line):
        if char.isspace() or char == "=":
            keyword = line[:index]
            rest = line[index:].lstrip()
            if rest.startswith("="):
                rest = rest[1:].lstrip()
            return keyword.lower(), rest
    return line.lower(), ""


def _split_patterns(argument: str) -> list[str]:
    try:
        return shlex.split(argument, comments=True)
    except ValueError:
        # Unbalanced quotes: fall back to whitespace splitting like ssh does
        return argument.split()


def parse_ssh_config(text: str) -> list[SshHostBlock]:
    """Parse SSH config text into Host blocks, in file order."""
    blocks: list[SshHostBlock] = []
    current: SshHostBlock | None = None

    for lineno, raw in enumerate(text.splitlines(), start=1):
        parts = _split_line(raw)
        if parts is None:
            continue
        keyword, argument = parts

        if keyword == "host":
            current = SshHostBlock(patterns=_split_patterns(argument), line=lineno)
            blocks.append(current)
        elif keyword == "match":
            current = None
        elif current is not None:
            value = argument
            if len(value) >= 2 and value[0] == value[-1] == '"':
                value = value[1:-1]
            current.options.setdefault(keyword, []).append(value)

    return blocks


def read_ssh_config(path: Path) -> list[SshHostBlock]:
    """Parse the SSH config at ``path``; a missing or unreadable file is empty."""
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.debug(f"SSH config not readable at {path}: {e}")
        return []
    return parse_ssh_config(text)


def iter_host_aliases(blocks: Iterable[SshHostBlock]) -> Iterator[str]:
    """Yield every concrete (non-wildcard) host pattern in file order."""
    for block in blocks:
        for pattern in block.patterns:
            if _WILDCARDS.isdisjoint(pattern):
                yield pattern


def find_host_aliases(blocks: Iterable[SshHostBlock], prefix: str) -> list[str]:
    """Concrete host aliases starting with ``prefix`` and carrying a non-empty suffix."""
    return [alias for alias in iter_host_aliases(blocks) if alias.startswith(prefix) and len(alias) > len(prefix)]


def find_host_block(blocks: Iterable[SshHostBlock], alias: str) -> SshHostBlock | None:
    """First Host block listing ``alias`` as one of its patterns."""
    for block in blocks:
        if alias in block.patterns:
            return block
    return None


def has_host_alias(blocks: Iterable[SshHostBlock], alias: str) -> bool:
    """True when ``alias`` appears as a pattern of some Host block."""
    return find_host_block(blocks, alias) is not None

"""Directory entry - denormalized person reference."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DirectoryEntry:
    """Full name and resolved contact id of an author, changer or creator."""

    full_name: str
    resolved_id: int

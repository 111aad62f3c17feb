"""Directory resolver port - contact and user lookups."""

from typing import Protocol

from articleindex.domain.entities import DirectoryEntry


class DirectoryResolver(Protocol):
    """Port for resolving a person reference to a denormalized entry."""

    async def by_id(self, entity_id: int) -> DirectoryEntry | None: ...

"""Indexer port - public indexing contract."""

from typing import Protocol

from articleindex.application.dto.index_event import IndexEvent
from articleindex.domain.entities import ContentDocument


class Indexer(Protocol):
    """Keeps the view document index in sync with content documents."""

    async def index(self, document: ContentDocument) -> IndexEvent | None: ...

    async def remove(self, uuid: str) -> None: ...

    async def remove_by_id(self, view_id: str) -> None: ...

    async def set_unpublished(self, view_id: str) -> None: ...

    async def flush(self) -> None: ...

    async def clear(self) -> None: ...

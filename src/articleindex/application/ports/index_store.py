"""Index store port - search index persistence."""

from typing import Protocol

from articleindex.application.dto.index_batch import IndexBatch
from articleindex.application.dto.index_query import IndexQuery, SearchResult
from articleindex.domain.entities import ArticleViewDocument


class IndexStore(Protocol):
    """Port for the view document index."""

    async def find(self, view_id: str) -> ArticleViewDocument | None: ...

    async def search(
        self, query: IndexQuery, size: int, offset: int = 0
    ) -> SearchResult: ...

    async def commit(self, batch: IndexBatch) -> None: ...

    def clear_cache(self) -> None: ...

    async def refresh(self) -> None: ...

"""Application DTOs."""

from articleindex.application.dto.index_batch import (
    IndexBatch,
    StagedAction,
    StagedOperation,
)
from articleindex.application.dto.index_event import IndexEvent
from articleindex.application.dto.index_query import (
    IndexQuery,
    MatchAllQuery,
    SearchResult,
    TermQuery,
)

__all__ = [
    "IndexBatch",
    "IndexEvent",
    "IndexQuery",
    "MatchAllQuery",
    "SearchResult",
    "StagedAction",
    "StagedOperation",
    "TermQuery",
]

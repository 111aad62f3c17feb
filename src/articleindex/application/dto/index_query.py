"""Index queries and paged results."""

from collections.abc import Iterator
from dataclasses import dataclass, field

from articleindex.domain.entities import ArticleViewDocument


@dataclass(frozen=True)
class TermQuery:
    """Exact match of a view document field."""

    field: str
    value: str


@dataclass(frozen=True)
class MatchAllQuery:
    """Matches every view document."""


IndexQuery = TermQuery | MatchAllQuery


@dataclass
class SearchResult:
    """One page of view documents returned by the index store."""

    documents: list[ArticleViewDocument] = field(default_factory=list)

    def count(self) -> int:
        return len(self.documents)

    def __iter__(self) -> Iterator[ArticleViewDocument]:
        return iter(self.documents)

    def __len__(self) -> int:
        return len(self.documents)

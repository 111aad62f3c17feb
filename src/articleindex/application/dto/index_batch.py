"""Staged index operations awaiting commit."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum

from articleindex.domain.entities import ArticleViewDocument


class StagedAction(StrEnum):
    """Kind of staged write."""

    PERSIST = "persist"
    REMOVE = "remove"


@dataclass(frozen=True)
class StagedOperation:
    """One persist or remove request for a view document."""

    action: StagedAction
    document: ArticleViewDocument


@dataclass
class IndexBatch:
    """Ordered persist/remove requests; applied only by IndexStore.commit."""

    operations: list[StagedOperation] = field(default_factory=list)

    def persist(self, document: ArticleViewDocument) -> None:
        self.operations.append(StagedOperation(StagedAction.PERSIST, document))

    def remove(self, document: ArticleViewDocument) -> None:
        self.operations.append(StagedOperation(StagedAction.REMOVE, document))

    def clear(self) -> None:
        self.operations.clear()

    def __iter__(self) -> Iterator[StagedOperation]:
        return iter(self.operations)

    def __len__(self) -> int:
        return len(self.operations)

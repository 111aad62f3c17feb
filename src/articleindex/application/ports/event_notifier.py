"""Index event notifier port."""

from typing import Protocol

from articleindex.application.dto.index_event import IndexEvent


class IndexEventNotifier(Protocol):
    """Port for announcing freshly projected view documents."""

    async def notify(self, event: IndexEvent) -> None: ...

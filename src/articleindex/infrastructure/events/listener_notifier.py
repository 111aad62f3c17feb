"""Event notifier that fans index events out to registered listeners."""

from collections.abc import Awaitable, Callable

from articleindex.application.dto import IndexEvent
from articleindex.logging_setup import get_logger

logger = get_logger(__name__)

IndexListener = Callable[[IndexEvent], Awaitable[None]]


class ListenerEventNotifier:
    """Calls listeners in registration order; a failing listener does not stop the others."""

    def __init__(self, listeners: list[IndexListener] | None = None) -> None:
        self._listeners: list[IndexListener] = list(listeners or [])

    def add_listener(self, listener: IndexListener) -> None:
        self._listeners.append(listener)

    async def notify(self, event: IndexEvent) -> None:
        for listener in self._listeners:
            try:
                await listener(event)
            except Exception:
                logger.exception(
                    "Index listener %r failed for view document %s",
                    listener,
                    event.view_document.id,
                )

"""Index event delivery."""

from articleindex.infrastructure.events.listener_notifier import ListenerEventNotifier

__all__ = ["ListenerEventNotifier"]

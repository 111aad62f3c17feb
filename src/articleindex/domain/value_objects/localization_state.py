"""Localization state of a view document."""

from dataclasses import dataclass
from enum import StrEnum


class LocalizationState(StrEnum):
    """Whether a locale holds a real translation or borrows a fallback."""

    LOCALIZED = "localized"
    GHOST = "ghost"


@dataclass(frozen=True)
class LocalizationStateView:
    """Stored localization state; `locale` is the fallback locale of a ghost."""

    state: LocalizationState
    locale: str | None = None

    def __post_init__(self) -> None:
        if self.state == LocalizationState.LOCALIZED and self.locale is not None:
            raise ValueError("Localized state cannot carry a fallback locale")

    @property
    def is_ghost(self) -> bool:
        return self.state == LocalizationState.GHOST

"""Unit tests for domain value objects."""

import pytest

from articleindex.domain.exceptions import ValidationError
from articleindex.domain.value_objects import (
    LocalizationState,
    LocalizationStateView,
    view_document_id,
)


def test_view_document_id_is_deterministic() -> None:
    """Same pair, same id; different locale, different id."""
    assert view_document_id("abc", "de") == view_document_id("abc", "de") == "abc-de"
    assert view_document_id("abc", "en") != view_document_id("abc", "de")


def test_view_document_id_requires_both_parts() -> None:
    """Empty uuid or locale is rejected."""
    with pytest.raises(ValidationError):
        view_document_id("", "de")
    with pytest.raises(ValidationError):
        view_document_id("abc", "")


def test_ghost_state_keeps_fallback_locale() -> None:
    """Ghost state carries the locale its content was borrowed from."""
    state = LocalizationStateView(LocalizationState.GHOST, "en")
    assert state.is_ghost
    assert state.locale == "en"


def test_localized_state_has_no_fallback() -> None:
    """A localized state cannot name a fallback locale."""
    assert not LocalizationStateView(LocalizationState.LOCALIZED).is_ghost
    with pytest.raises(ValueError, match="fallback"):
        LocalizationStateView(LocalizationState.LOCALIZED, "en")

"""Composite view document id."""

from articleindex.domain.exceptions import ValidationError


def view_document_id(uuid: str, locale: str) -> str:
    """Return the index id for a (uuid, locale) pair.

    The id is a pure function of the pair, so indexing the same pair twice
    always targets the same view document.
    """
    if not uuid or not locale:
        raise ValidationError("View document id requires uuid and locale")
    return f"{uuid}-{locale}"

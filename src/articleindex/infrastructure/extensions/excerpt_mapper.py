"""Excerpt extension mapper."""

from typing import Any

from articleindex.domain.entities import ExcerptView


def _ids(value: Any) -> list[int]:
    """Media and category selections arrive as {"ids": [...]} or as a plain list."""
    if isinstance(value, dict):
        value = value.get("ids")
    if not value:
        return []
    return [int(v) for v in value]


class DefaultExcerptMapper:
    """Maps raw excerpt data to ExcerptView."""

    def map(self, data: dict[str, Any], locale: str) -> ExcerptView:
        return ExcerptView(
            locale=locale,
            title=data.get("title") or None,
            more=data.get("more") or None,
            description=data.get("description") or None,
            category_ids=_ids(data.get("categories")),
            tags=[str(t) for t in data.get("tags") or []],
            icon_ids=_ids(data.get("icon")),
            image_ids=_ids(data.get("images")),
        )

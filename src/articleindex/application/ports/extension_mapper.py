"""Extension mapper ports - excerpt and SEO."""

from typing import Any, Protocol

from articleindex.domain.entities import ExcerptView, SeoView


class ExcerptMapper(Protocol):
    """Maps raw excerpt extension data to its view object."""

    def map(self, data: dict[str, Any], locale: str) -> ExcerptView: ...


class SeoMapper(Protocol):
    """Maps raw SEO extension data to its view object."""

    def map(self, data: dict[str, Any]) -> SeoView: ...

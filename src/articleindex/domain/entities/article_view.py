"""Article view document - denormalized, locale-specific index entry."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from articleindex.domain.value_objects import LocalizationStateView


@dataclass
class PageView:
    """Flattened child page of an article."""

    uuid: str | None = None
    page_number: int | None = None
    title: str | None = None
    route_path: str | None = None


@dataclass
class ExcerptView:
    """Excerpt extension as stored in the index."""

    locale: str | None = None
    title: str | None = None
    more: str | None = None
    description: str | None = None
    category_ids: list[int] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    icon_ids: list[int] = field(default_factory=list)
    image_ids: list[int] = field(default_factory=list)


@dataclass
class SeoView:
    """SEO extension as stored in the index."""

    title: str | None = None
    description: str | None = None
    keywords: str | None = None
    canonical_url: str | None = None
    no_index: bool = False
    no_follow: bool = False
    hide_in_sitemap: bool = False


@dataclass
class ArticleViewDocument:
    """One article in one locale. `id` is derived from (uuid, locale)."""

    id: str | None = None
    uuid: str | None = None
    locale: str | None = None
    title: str | None = None
    route_path: str | None = None
    created: datetime | None = None
    changed: datetime | None = None
    authored: datetime | None = None
    author_full_name: str | None = None
    author_id: int | None = None
    changer_full_name: str | None = None
    changer_contact_id: int | None = None
    creator_full_name: str | None = None
    creator_contact_id: int | None = None
    type: str | None = None
    type_translation: str | None = None
    structure_type: str | None = None
    published: datetime | None = None
    published_state: bool = False
    localization_state: LocalizationStateView | None = None
    excerpt: ExcerptView | None = None
    seo: SeoView | None = None
    teaser_description: Any = None
    teaser_media_id: int | None = None
    pages: list[PageView] = field(default_factory=list)

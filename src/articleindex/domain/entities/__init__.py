"""Domain entities."""

from articleindex.domain.entities.article_view import (
    ArticleViewDocument,
    ExcerptView,
    PageView,
    SeoView,
)
from articleindex.domain.entities.content_document import ChildPage, ContentDocument
from articleindex.domain.entities.directory_entry import DirectoryEntry
from articleindex.domain.entities.structure_metadata import (
    PropertyMetadata,
    StructureMetadata,
)

__all__ = [
    "ArticleViewDocument",
    "ChildPage",
    "ContentDocument",
    "DirectoryEntry",
    "ExcerptView",
    "PageView",
    "PropertyMetadata",
    "SeoView",
    "StructureMetadata",
]

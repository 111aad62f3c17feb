"""Index event DTO."""

from dataclasses import dataclass

from articleindex.domain.entities import ArticleViewDocument, ContentDocument


@dataclass(frozen=True)
class IndexEvent:
    """Emitted after a view document was projected from a content document."""

    document: ContentDocument
    view_document: ArticleViewDocument

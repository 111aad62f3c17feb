"""Closed set of view document types."""

from enum import StrEnum


class ViewDocumentType(StrEnum):
    """Logical view document types known to the index."""

    ARTICLE = "article"
    ARTICLE_PAGE = "article_page"

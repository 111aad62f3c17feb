"""Unit tests for the view document factory."""

from dataclasses import dataclass

import pytest

from articleindex.domain.entities import ArticleViewDocument, PageView
from articleindex.domain.exceptions import UnknownViewDocumentType
from articleindex.domain.value_objects import ViewDocumentType
from articleindex.infrastructure.view_documents import DocumentFactory


@dataclass
class CustomArticleViewDocument(ArticleViewDocument):
    """Project-specific view document with an extra field."""

    rating: int | None = None


def test_create_default_documents() -> None:
    """Factory creates empty article and page documents."""
    factory = DocumentFactory()

    article = factory.create(ViewDocumentType.ARTICLE)
    page = factory.create("article_page")

    assert article == ArticleViewDocument()
    assert article.pages == []
    assert isinstance(page, PageView)


def test_create_returns_new_instances() -> None:
    factory = DocumentFactory()
    assert factory.create(ViewDocumentType.ARTICLE) is not factory.create(ViewDocumentType.ARTICLE)


def test_custom_class_replaces_default() -> None:
    """A subclass can be configured for a type."""
    factory = DocumentFactory({ViewDocumentType.ARTICLE: CustomArticleViewDocument})

    assert factory.get_class(ViewDocumentType.ARTICLE) is CustomArticleViewDocument
    assert factory.create(ViewDocumentType.ARTICLE).rating is None
    assert factory.get_class(ViewDocumentType.ARTICLE_PAGE) is PageView


def test_custom_class_must_extend_default() -> None:
    with pytest.raises(TypeError, match="ArticleViewDocument"):
        DocumentFactory({ViewDocumentType.ARTICLE: PageView})


def test_unknown_type() -> None:
    with pytest.raises(UnknownViewDocumentType, match="teaser"):
        DocumentFactory().create("teaser")

"""Pytest fixtures for articleindex tests."""

from __future__ import annotations

import copy
from datetime import UTC, datetime

import pytest

from articleindex.application.dto import (
    IndexBatch,
    IndexEvent,
    IndexQuery,
    MatchAllQuery,
    SearchResult,
    StagedAction,
    TermQuery,
)
from articleindex.application.use_cases.article_indexer import ArticleIndexer
from articleindex.domain.entities import (
    ArticleViewDocument,
    ChildPage,
    ContentDocument,
    DirectoryEntry,
    PropertyMetadata,
    StructureMetadata,
)
from articleindex.domain.value_objects import WorkflowStage
from articleindex.infrastructure.extensions import DefaultExcerptMapper, DefaultSeoMapper
from articleindex.infrastructure.metadata import StructureMetadataRegistry
from articleindex.infrastructure.translation import CatalogTranslator
from articleindex.infrastructure.view_documents import DocumentFactory


# --- Fake index store ---


class FakeIndexStore:
    """In-memory index store.

    Documents are copied on the way in and out, so staged changes only show up
    after commit, like in a real search index.
    """

    def __init__(self) -> None:
        self._by_id: dict[str, ArticleViewDocument] = {}
        self.commits: list[int] = []
        self.searches: list[tuple[IndexQuery, int, int]] = []
        self.cache_clears = 0
        self.refreshes = 0

    def add(self, document: ArticleViewDocument) -> None:
        """Helper to seed committed documents (for tests)."""
        self._by_id[document.id] = copy.deepcopy(document)

    def get(self, view_id: str) -> ArticleViewDocument | None:
        """Helper to inspect committed state without going through find()."""
        return self._by_id.get(view_id)

    def __len__(self) -> int:
        return len(self._by_id)

    async def find(self, view_id: str) -> ArticleViewDocument | None:
        document = self._by_id.get(view_id)
        return copy.deepcopy(document) if document else None

    async def search(self, query: IndexQuery, size: int, offset: int = 0) -> SearchResult:
        self.searches.append((query, size, offset))
        items = sorted(self._by_id.values(), key=lambda d: d.id)
        if isinstance(query, TermQuery):
            items = [d for d in items if getattr(d, query.field) == query.value]
        elif not isinstance(query, MatchAllQuery):
            raise TypeError(query)
        return SearchResult(documents=[copy.deepcopy(d) for d in items[offset : offset + size]])

    async def commit(self, batch: IndexBatch) -> None:
        for operation in batch:
            if operation.action == StagedAction.PERSIST:
                self._by_id[operation.document.id] = copy.deepcopy(operation.document)
            else:
                self._by_id.pop(operation.document.id, None)
        self.commits.append(len(batch))
        batch.clear()

    def clear_cache(self) -> None:
        self.cache_clears += 1

    async def refresh(self) -> None:
        self.refreshes += 1


# --- Fake collaborators ---


class FakeDirectory:
    """In-memory contact or user directory."""

    def __init__(self, entries: dict[int, DirectoryEntry] | None = None) -> None:
        self._entries = entries or {}
        self.lookups: list[int] = []

    async def by_id(self, entity_id: int) -> DirectoryEntry | None:
        self.lookups.append(entity_id)
        return self._entries.get(entity_id)


class RecordingNotifier:
    """Collects notified events."""

    def __init__(self) -> None:
        self.events: list[IndexEvent] = []

    async def notify(self, event: IndexEvent) -> None:
        self.events.append(event)


# --- Builders ---


def make_structure_metadata(
    name: str = "default",
    article_type: str | None = None,
    teaser: bool = True,
) -> StructureMetadata:
    """Structure with title, description and media properties."""
    properties = [PropertyMetadata(name="title")]
    if teaser:
        properties += [
            PropertyMetadata(
                name="description",
                type="text_editor",
                tags={"teaser.description": {}},
            ),
            PropertyMetadata(
                name="medias",
                type="media_selection",
                tags={"teaser.media": {}},
            ),
        ]
    tags = {"article.type": {"type": article_type}} if article_type else {}
    return StructureMetadata(name=name, properties=properties, tags=tags)


def make_document(**overrides: object) -> ContentDocument:
    """Published German article with two pages, excerpt and SEO data."""
    values: dict[str, object] = dict(
        uuid="123-123-123",
        locale="de",
        structure_type="default",
        title="Test article",
        route_path="/articles/test-article",
        created=datetime(2024, 1, 1, 10, 0, tzinfo=UTC),
        changed=datetime(2024, 1, 2, 10, 0, tzinfo=UTC),
        authored=datetime(2024, 1, 1, 9, 0, tzinfo=UTC),
        author=1,
        changer=2,
        creator=3,
        workflow_stage=WorkflowStage.PUBLISHED,
        published=datetime(2024, 1, 3, 10, 0, tzinfo=UTC),
        extensions_data={
            "excerpt": {"title": "Excerpt", "categories": [1, 2], "images": {"ids": [5]}},
            "seo": {"title": "SEO title", "noIndex": True},
        },
        structure={"description": "<p>Teaser</p>", "medias": {"ids": [7, 9]}},
        children=[
            ChildPage(uuid="page-2", page_number=2, page_title="Page 2", route_path="/articles/test-article/page-2"),
            ChildPage(uuid="page-3", page_number=3, page_title="Page 3", route_path="/articles/test-article/page-3"),
        ],
    )
    values.update(overrides)
    return ContentDocument(**values)


# --- Fixtures ---


@pytest.fixture
def index_store() -> FakeIndexStore:
    """Fresh in-memory index for each test."""
    return FakeIndexStore()


@pytest.fixture
def metadata_registry() -> StructureMetadataRegistry:
    registry = StructureMetadataRegistry()
    registry.register("article", make_structure_metadata())
    registry.register("article", make_structure_metadata(name="blog", article_type="blog"))
    registry.register("article", make_structure_metadata(name="simple", teaser=False))
    return registry


@pytest.fixture
def contacts() -> FakeDirectory:
    return FakeDirectory({1: DirectoryEntry(full_name="Max Mustermann", resolved_id=11)})


@pytest.fixture
def users() -> FakeDirectory:
    return FakeDirectory(
        {
            2: DirectoryEntry(full_name="Erika Musterfrau", resolved_id=22),
            3: DirectoryEntry(full_name="John Doe", resolved_id=33),
        }
    )


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def indexer_kwargs(index_store, metadata_registry, contacts, users, notifier) -> dict:
    """Constructor arguments shared by ArticleIndexer and GhostArticleIndexer."""
    return dict(
        index_store=index_store,
        view_document_factory=DocumentFactory(),
        structure_metadata_provider=metadata_registry,
        contacts=contacts,
        users=users,
        excerpt_mapper=DefaultExcerptMapper(),
        seo_mapper=DefaultSeoMapper(),
        event_notifier=notifier,
        translator=CatalogTranslator({"backend": {"article.type.blog": "Blog post"}}),
        type_configuration={"blog": "article.type.blog"},
    )


@pytest.fixture
def indexer(indexer_kwargs) -> ArticleIndexer:
    return ArticleIndexer(**indexer_kwargs)

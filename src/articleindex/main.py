"""Application entry point and composition root."""

from psycopg_pool import AsyncConnectionPool

from articleindex import __version__
from articleindex.application.ports import (
    DirectoryResolver,
    ExcerptMapper,
    IndexEventNotifier,
    Indexer,
    SeoMapper,
    StructureMetadataProvider,
    Translator,
)
from articleindex.application.use_cases.article_indexer import ArticleIndexer
from articleindex.application.use_cases.ghost_article_indexer import GhostArticleIndexer
from articleindex.config import Settings, get_settings
from articleindex.domain.value_objects import ViewDocumentType
from articleindex.infrastructure.events import ListenerEventNotifier
from articleindex.infrastructure.extensions import DefaultExcerptMapper, DefaultSeoMapper
from articleindex.infrastructure.persistence.postgres.connection import create_pool
from articleindex.infrastructure.persistence.postgres.index_store import PostgresIndexStore
from articleindex.infrastructure.view_documents import DocumentFactory
from articleindex.logging_setup import setup_logging


def main() -> None:
    """CLI entry point."""
    print(f"articleindex v{__version__}")


def create_article_indexer(
    pool: AsyncConnectionPool | None = None,
    *,
    structure_metadata_provider: StructureMetadataProvider,
    contacts: DirectoryResolver,
    users: DirectoryResolver,
    event_notifier: IndexEventNotifier | None = None,
    translator: Translator | None = None,
    excerpt_mapper: ExcerptMapper | None = None,
    seo_mapper: SeoMapper | None = None,
    document_factory: DocumentFactory | None = None,
    settings: Settings | None = None,
) -> Indexer:
    """Composition root - wire the indexer with its collaborators.

    Returns a GhostArticleIndexer when site locales are configured. Without
    an explicit pool one is created from settings; the caller opens it.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    if pool is None:
        pool = create_pool(
            settings.database_url,
            min_size=settings.pool_min_size,
            max_size=settings.pool_max_size,
        )

    document_factory = document_factory or DocumentFactory()
    index_store = PostgresIndexStore(
        pool,
        document_class=document_factory.get_class(ViewDocumentType.ARTICLE),
        table=settings.index_table,
        cache_size=settings.index_cache_size,
    )
    kwargs = dict(
        index_store=index_store,
        view_document_factory=document_factory,
        structure_metadata_provider=structure_metadata_provider,
        contacts=contacts,
        users=users,
        excerpt_mapper=excerpt_mapper or DefaultExcerptMapper(),
        seo_mapper=seo_mapper or DefaultSeoMapper(),
        event_notifier=event_notifier or ListenerEventNotifier(),
        translator=translator,
        type_configuration=settings.article_types,
        clear_page_size=settings.clear_page_size,
        remove_page_size=settings.remove_page_size,
    )
    if settings.locales:
        return GhostArticleIndexer(locales=settings.locales, **kwargs)
    return ArticleIndexer(**kwargs)

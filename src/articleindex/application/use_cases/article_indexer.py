"""Article indexer - projects content documents into the view document index."""

from articleindex.application.dto import (
    IndexBatch,
    IndexEvent,
    MatchAllQuery,
    TermQuery,
)
from articleindex.application.ports import (
    DirectoryResolver,
    ExcerptMapper,
    IndexEventNotifier,
    IndexStore,
    SeoMapper,
    StructureMetadataProvider,
    Translator,
    ViewDocumentFactory,
)
from articleindex.domain.entities import (
    ArticleViewDocument,
    ContentDocument,
    DirectoryEntry,
    StructureMetadata,
)
from articleindex.domain.entities.structure_metadata import (
    TEASER_DESCRIPTION_TAG,
    TEASER_MEDIA_TAG,
)
from articleindex.domain.exceptions import StructureMetadataNotFound
from articleindex.domain.value_objects import (
    LocalizationState,
    LocalizationStateView,
    ViewDocumentType,
    WorkflowStage,
    view_document_id,
)
from articleindex.logging_setup import get_logger

logger = get_logger(__name__)

ARTICLE_FAMILY = "article"


class ArticleIndexer:
    """Keeps locale-specific article view documents in sync with content documents.

    Writes are staged in an IndexBatch and only reach the index on flush()
    (clear() commits page by page on its own).
    """

    def __init__(
        self,
        index_store: IndexStore,
        view_document_factory: ViewDocumentFactory,
        structure_metadata_provider: StructureMetadataProvider,
        contacts: DirectoryResolver,
        users: DirectoryResolver,
        excerpt_mapper: ExcerptMapper,
        seo_mapper: SeoMapper,
        event_notifier: IndexEventNotifier,
        translator: Translator | None = None,
        type_configuration: dict[str, str] | None = None,
        clear_page_size: int = 500,
        remove_page_size: int = 1000,
    ) -> None:
        self._index_store = index_store
        self._factory = view_document_factory
        self._structure_metadata = structure_metadata_provider
        self._contacts = contacts
        self._users = users
        self._excerpt_mapper = excerpt_mapper
        self._seo_mapper = seo_mapper
        self._event_notifier = event_notifier
        self._translator = translator
        self._type_configuration = type_configuration or {}
        self._clear_page_size = clear_page_size
        self._remove_page_size = remove_page_size
        self._batch = IndexBatch()

    @property
    def staged_operations(self) -> int:
        """Number of persist/remove requests waiting for flush()."""
        return len(self._batch)

    async def index(self, document: ContentDocument) -> IndexEvent | None:
        """Project document in its own locale and stage it for persistence."""
        article = await self.project_article(document, document.locale)
        if article is None:
            return None
        return await self._stage(document, article)

    async def remove(self, uuid: str) -> None:
        """Stage removal of every locale variant of uuid."""
        query = TermQuery("uuid", uuid)
        offset = 0
        removed = 0
        while True:
            result = await self._index_store.search(
                query, size=self._remove_page_size, offset=offset
            )
            for view_document in result:
                self._batch.remove(view_document)
            removed += result.count()
            if result.count() < self._remove_page_size:
                break
            offset += self._remove_page_size
        logger.debug("Staged removal of %d view documents for %s", removed, uuid)

    async def remove_by_id(self, view_id: str) -> None:
        """Stage removal of a single view document; unknown ids are ignored."""
        article = await self._index_store.find(view_id)
        if article is None:
            logger.debug("View document %s not indexed, nothing to remove", view_id)
            return
        self._batch.remove(article)

    async def set_unpublished(self, view_id: str) -> None:
        """Clear the published fields of a view document without re-projecting it."""
        article = await self._index_store.find(view_id)
        if article is None:
            logger.debug("View document %s not indexed, nothing to unpublish", view_id)
            return

        article.published = None
        article.published_state = False
        self._batch.persist(article)

    async def flush(self) -> None:
        """Commit all staged operations as one batch."""
        if self._batch:
            logger.debug("Committing %d staged operations", len(self._batch))
        await self._index_store.commit(self._batch)

    async def clear(self) -> None:
        """Delete every view document, one committed page at a time."""
        query = MatchAllQuery()
        removed = 0
        while True:
            result = await self._index_store.search(query, size=self._clear_page_size)
            if result.count() == 0:
                break
            for view_document in result:
                self._batch.remove(view_document)
            await self._index_store.commit(self._batch)
            removed += result.count()

        self._index_store.clear_cache()
        await self._index_store.refresh()
        logger.info("Cleared %d view documents from index", removed)

    async def project_article(
        self,
        document: ContentDocument,
        locale: str,
        localization_state: LocalizationState = LocalizationState.LOCALIZED,
    ) -> ArticleViewDocument | None:
        """Create or update the view document of document in locale.

        Returns None when a ghost projection would overwrite a real translation.
        """
        article = await self._find_or_create_view_document(
            document, locale, localization_state
        )
        if article is None:
            return None

        metadata = self._structure_metadata.get(ARTICLE_FAMILY, document.structure_type)
        if metadata is None:
            raise StructureMetadataNotFound(ARTICLE_FAMILY, document.structure_type)

        article.title = document.title
        article.route_path = document.route_path
        article.changed = document.changed
        article.created = document.created
        article.authored = document.authored

        author = await self._resolve(self._contacts, document.author, "author", document)
        if author is not None:
            article.author_full_name = author.full_name
            article.author_id = author.resolved_id
        changer = await self._resolve(self._users, document.changer, "changer", document)
        if changer is not None:
            article.changer_full_name = changer.full_name
            article.changer_contact_id = changer.resolved_id
        creator = await self._resolve(self._users, document.creator, "creator", document)
        if creator is not None:
            article.creator_full_name = creator.full_name
            article.creator_contact_id = creator.resolved_id

        article_type = metadata.type_of()
        article.type = article_type
        article.type_translation = self._get_type_translation(article_type)
        article.structure_type = document.structure_type
        article.published = document.published
        article.published_state = document.workflow_stage == WorkflowStage.PUBLISHED
        article.localization_state = LocalizationStateView(
            localization_state,
            None if localization_state == LocalizationState.LOCALIZED else document.locale,
        )

        extensions = document.extensions_data
        if "excerpt" in extensions:
            article.excerpt = self._excerpt_mapper.map(extensions["excerpt"], document.locale)
        if "seo" in extensions:
            article.seo = self._seo_mapper.map(extensions["seo"])

        self._map_teaser(document, metadata, article)
        self._map_pages(document, article)

        return article

    async def _stage(self, document: ContentDocument, article: ArticleViewDocument) -> IndexEvent:
        event = IndexEvent(document=document, view_document=article)
        await self._event_notifier.notify(event)
        self._batch.persist(article)
        return event

    async def _find_or_create_view_document(
        self,
        document: ContentDocument,
        locale: str,
        localization_state: LocalizationState,
    ) -> ArticleViewDocument | None:
        view_id = view_document_id(document.uuid, locale)
        article = await self._index_store.find(view_id)

        if article is not None:
            # Ghosts only replace ghosts.
            stored = article.localization_state
            if localization_state == LocalizationState.GHOST and (
                stored is None or not stored.is_ghost
            ):
                return None
            return article

        article = self._factory.create(ViewDocumentType.ARTICLE)
        article.id = view_id
        article.uuid = document.uuid
        article.locale = locale
        return article

    async def _resolve(
        self,
        resolver: DirectoryResolver,
        entity_id: int | None,
        role: str,
        document: ContentDocument,
    ) -> DirectoryEntry | None:
        if not entity_id:
            return None
        entry = await resolver.by_id(entity_id)
        if entry is None:
            logger.debug(
                "%s %s of article %s not found in directory",
                role.capitalize(),
                entity_id,
                document.uuid,
            )
        return entry

    def _get_type_translation(self, article_type: str) -> str:
        translation_key = self._type_configuration.get(article_type)
        if translation_key is None or self._translator is None:
            return article_type[:1].upper() + article_type[1:]
        return self._translator.trans(translation_key, domain="backend")

    def _map_teaser(
        self,
        document: ContentDocument,
        metadata: StructureMetadata,
        article: ArticleViewDocument,
    ) -> None:
        if metadata.has_tag(TEASER_DESCRIPTION_TAG):
            description_property = metadata.property_for_tag(TEASER_DESCRIPTION_TAG)
            article.teaser_description = document.get_property_value(
                description_property.name
            )
        if metadata.has_tag(TEASER_MEDIA_TAG):
            media_property = metadata.property_for_tag(TEASER_MEDIA_TAG)
            media = document.get_property_value(media_property.name)
            if isinstance(media, dict) and "ids" in media:
                ids = media["ids"]
                article.teaser_media_id = ids[0] if ids else None

    def _map_pages(self, document: ContentDocument, article: ArticleViewDocument) -> None:
        pages = []
        for child in document.children:
            page = self._factory.create(ViewDocumentType.ARTICLE_PAGE)
            page.uuid = child.uuid
            page.page_number = child.page_number
            page.title = child.page_title
            page.route_path = child.route_path
            pages.append(page)
        article.pages = pages

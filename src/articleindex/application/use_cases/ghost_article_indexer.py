"""Ghost article indexer - keeps untranslated locales searchable."""

from typing import Any

from articleindex.application.dto import IndexEvent
from articleindex.application.use_cases.article_indexer import ArticleIndexer
from articleindex.domain.entities import ContentDocument
from articleindex.domain.value_objects import LocalizationState
from articleindex.logging_setup import get_logger

logger = get_logger(__name__)


class GhostArticleIndexer(ArticleIndexer):
    """Indexes an article and projects it as a ghost into every untranslated locale."""

    def __init__(self, *args: Any, locales: list[str], **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._locales = list(locales)

    async def index(self, document: ContentDocument) -> IndexEvent | None:
        event = await super().index(document)

        for locale in self._locales:
            if locale == document.locale or locale in document.available_locales:
                continue
            article = await self.project_article(document, locale, LocalizationState.GHOST)
            if article is None:
                logger.debug(
                    "Article %s already translated in %s, ghost skipped",
                    document.uuid,
                    locale,
                )
                continue
            await self._stage(document, article)

        return event

"""PostgreSQL index store - view documents as JSONB rows."""

from collections import OrderedDict
from typing import Any

from psycopg import sql
from psycopg.types.json import Jsonb
from psycopg_pool import AsyncConnectionPool
from pydantic import TypeAdapter

from articleindex.application.dto import (
    IndexBatch,
    IndexQuery,
    MatchAllQuery,
    SearchResult,
    StagedAction,
    TermQuery,
)
from articleindex.domain.entities import ArticleViewDocument
from articleindex.logging_setup import get_logger

logger = get_logger(__name__)

# fields stored in their own columns; everything else is read from the JSONB body
_COLUMN_FIELDS = frozenset({"id", "uuid", "locale"})


def _build_search_query(
    table: str, query: IndexQuery, size: int, offset: int
) -> tuple[sql.Composed, list[object]]:
    """Build SELECT for an index query. Returns (statement, params)."""
    params: list[object] = []
    if isinstance(query, TermQuery):
        if query.field in _COLUMN_FIELDS:
            where = sql.SQL(" WHERE {} = %s").format(sql.Identifier(query.field))
            params.append(query.value)
        else:
            where = sql.SQL(" WHERE body ->> %s = %s")
            params.extend([query.field, query.value])
    elif isinstance(query, MatchAllQuery):
        where = sql.SQL("")
    else:
        raise TypeError(f"Unsupported index query: {query!r}")

    statement = sql.SQL("SELECT body FROM {}{} ORDER BY id LIMIT %s OFFSET %s").format(
        sql.Identifier(table), where
    )
    params.extend([size, offset])
    return statement, params


class PostgresIndexStore:
    """Index store implementation.

    Committed bodies of recently read documents are kept in a bounded cache.
    Every read returns a freshly loaded document, so changes made by a caller
    only reach the store through commit(). The cache is emptied on each commit.
    """

    def __init__(
        self,
        pool: AsyncConnectionPool,
        document_class: type[ArticleViewDocument] = ArticleViewDocument,
        table: str = "article_view",
        cache_size: int = 1000,
    ) -> None:
        self._pool = pool
        self._table = table
        self._adapter = TypeAdapter(document_class)
        self._cache_size = cache_size
        self._bodies: OrderedDict[str, dict[str, Any]] = OrderedDict()

    def dump(self, document: ArticleViewDocument) -> dict[str, Any]:
        """JSON-compatible body of a view document."""
        return self._adapter.dump_python(document, mode="json")

    def load(self, body: dict[str, Any]) -> ArticleViewDocument:
        """View document from a stored body."""
        return self._adapter.validate_python(body)

    @property
    def cached_documents(self) -> int:
        return len(self._bodies)

    def _remember(self, view_id: str, body: dict[str, Any]) -> None:
        self._bodies[view_id] = body
        self._bodies.move_to_end(view_id)
        while len(self._bodies) > self._cache_size:
            self._bodies.popitem(last=False)

    async def find(self, view_id: str) -> ArticleViewDocument | None:
        """Get view document by id."""
        body = self._bodies.get(view_id)
        if body is None:
            q = sql.SQL("SELECT body FROM {} WHERE id = %s").format(
                sql.Identifier(self._table)
            )
            async with self._pool.connection() as conn:
                cur = await conn.execute(q, (view_id,))
                r = await cur.fetchone()
            if not r:
                return None
            body = r[0]
        self._remember(view_id, body)
        return self.load(body)

    async def search(self, query: IndexQuery, size: int, offset: int = 0) -> SearchResult:
        """Get one page of view documents matching query, ordered by id."""
        q, params = _build_search_query(self._table, query, size, offset)
        async with self._pool.connection() as conn:
            cur = await conn.execute(q, params)
            rows = await cur.fetchall()

        documents = []
        for r in rows:
            document = self.load(r[0])
            self._remember(document.id, r[0])
            documents.append(document)
        return SearchResult(documents=documents)

    async def commit(self, batch: IndexBatch) -> None:
        """Apply staged operations in one transaction and empty the batch."""
        if not batch:
            return

        upsert = sql.SQL(
            "INSERT INTO {} (id, uuid, locale, body, indexed_at) "
            "VALUES (%s, %s, %s, %s, NOW()) "
            "ON CONFLICT (id) DO UPDATE SET uuid = EXCLUDED.uuid, "
            "locale = EXCLUDED.locale, body = EXCLUDED.body, indexed_at = NOW()"
        ).format(sql.Identifier(self._table))
        delete = sql.SQL("DELETE FROM {} WHERE id = %s").format(sql.Identifier(self._table))

        try:
            async with self._pool.connection() as conn:
                async with conn.transaction():
                    for operation in batch:
                        document = operation.document
                        if operation.action == StagedAction.PERSIST:
                            await conn.execute(
                                upsert,
                                (
                                    document.id,
                                    document.uuid,
                                    document.locale,
                                    Jsonb(self.dump(document)),
                                ),
                            )
                        else:
                            await conn.execute(delete, (document.id,))
        finally:
            # cached bodies may be stale after a commit, successful or rolled back
            self._bodies.clear()

        logger.debug("Committed %d operations to %s", len(batch), self._table)
        batch.clear()

    def clear_cache(self) -> None:
        """Forget cached bodies; next lookups read from the database."""
        self._bodies.clear()

    async def refresh(self) -> None:
        """Refresh planner statistics after bulk changes.

        Committed transactions are already durable and visible to readers.
        """
        q = sql.SQL("ANALYZE {}").format(sql.Identifier(self._table))
        async with self._pool.connection() as conn:
            await conn.execute(q)

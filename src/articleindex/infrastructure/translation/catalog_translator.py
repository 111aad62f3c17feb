"""Translator backed by an in-memory catalog."""


class CatalogTranslator:
    """Looks keys up per domain; unknown keys translate to themselves."""

    def __init__(self, catalog: dict[str, dict[str, str]] | None = None) -> None:
        self._catalog = catalog or {}

    def trans(self, key: str, domain: str = "backend") -> str:
        return self._catalog.get(domain, {}).get(key, key)

"""Translation catalogs."""

from articleindex.infrastructure.translation.catalog_translator import CatalogTranslator

__all__ = ["CatalogTranslator"]

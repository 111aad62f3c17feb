"""Extension data mappers."""

from articleindex.infrastructure.extensions.excerpt_mapper import DefaultExcerptMapper
from articleindex.infrastructure.extensions.seo_mapper import DefaultSeoMapper

__all__ = ["DefaultExcerptMapper", "DefaultSeoMapper"]

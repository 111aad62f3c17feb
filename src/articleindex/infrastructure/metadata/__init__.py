"""Structure metadata lookup."""

from articleindex.infrastructure.metadata.registry import StructureMetadataRegistry

__all__ = ["StructureMetadataRegistry"]

"""Structure metadata provider port."""

from typing import Protocol

from articleindex.domain.entities import StructureMetadata


class StructureMetadataProvider(Protocol):
    """Port for template schemas."""

    def get(self, family: str, structure_type: str) -> StructureMetadata | None: ...

"""In-process registry of structure metadata, keyed by family and structure type."""

from articleindex.domain.entities import StructureMetadata


class StructureMetadataRegistry:
    """Structure metadata provider backed by registered definitions."""

    def __init__(self) -> None:
        self._by_key: dict[tuple[str, str], StructureMetadata] = {}

    def register(self, family: str, metadata: StructureMetadata) -> None:
        self._by_key[(family, metadata.name)] = metadata

    def get(self, family: str, structure_type: str) -> StructureMetadata | None:
        return self._by_key.get((family, structure_type))

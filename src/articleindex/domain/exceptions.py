"""Domain exceptions."""


class ArticleIndexError(Exception):
    """Base exception for articleindex."""

    pass


class NotFound(ArticleIndexError):
    """Requested resource was not found."""

    pass


class StructureMetadataNotFound(NotFound):
    """No structure metadata is registered for a document's structure type."""

    def __init__(self, family: str, structure_type: str | None) -> None:
        super().__init__(
            f"Structure metadata for '{family}' with type '{structure_type}' not found"
        )
        self.family = family
        self.structure_type = structure_type


class UnknownViewDocumentType(ArticleIndexError):
    """View document type is not part of the configured document set."""

    pass


class ValidationError(ArticleIndexError):
    """Validation failed for input data."""

    pass

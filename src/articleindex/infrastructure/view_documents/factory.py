"""Factory: create empty view documents by logical type."""

from articleindex.domain.entities import ArticleViewDocument, PageView
from articleindex.domain.exceptions import UnknownViewDocumentType
from articleindex.domain.value_objects import ViewDocumentType

# view document type -> document class
_DEFAULT_CLASSES: dict[ViewDocumentType, type] = {
    ViewDocumentType.ARTICLE: ArticleViewDocument,
    ViewDocumentType.ARTICLE_PAGE: PageView,
}


class DocumentFactory:
    """Creates view documents; classes can be replaced by compatible subclasses."""

    def __init__(self, classes: dict[ViewDocumentType, type] | None = None) -> None:
        self._classes = dict(_DEFAULT_CLASSES)
        for document_type, document_class in (classes or {}).items():
            default = _DEFAULT_CLASSES[ViewDocumentType(document_type)]
            if not issubclass(document_class, default):
                raise TypeError(
                    f"{document_class.__name__} must extend {default.__name__}"
                )
            self._classes[ViewDocumentType(document_type)] = document_class

    def get_class(self, document_type: ViewDocumentType | str) -> type:
        """Return document class for type. Raises UnknownViewDocumentType."""
        try:
            return self._classes[ViewDocumentType(document_type)]
        except ValueError:
            raise UnknownViewDocumentType(
                f"Unknown view document type: {document_type}"
            ) from None

    def create(self, document_type: ViewDocumentType | str) -> object:
        """Return a new empty document of the given type."""
        return self.get_class(document_type)()

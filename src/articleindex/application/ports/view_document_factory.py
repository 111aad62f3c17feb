"""View document factory port."""

from typing import Any, Protocol

from articleindex.domain.value_objects import ViewDocumentType


class ViewDocumentFactory(Protocol):
    """Creates empty view documents for a logical type."""

    def create(self, document_type: ViewDocumentType) -> Any: ...

    def get_class(self, document_type: ViewDocumentType) -> type: ...

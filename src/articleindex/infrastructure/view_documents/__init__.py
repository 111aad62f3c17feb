"""View document construction."""

from articleindex.infrastructure.view_documents.factory import DocumentFactory

__all__ = ["DocumentFactory"]

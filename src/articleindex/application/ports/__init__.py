"""Application ports - interfaces for external adapters."""

from articleindex.application.ports.directory_resolver import DirectoryResolver
from articleindex.application.ports.event_notifier import IndexEventNotifier
from articleindex.application.ports.extension_mapper import ExcerptMapper, SeoMapper
from articleindex.application.ports.index_store import IndexStore
from articleindex.application.ports.indexer import Indexer
from articleindex.application.ports.structure_metadata_provider import (
    StructureMetadataProvider,
)
from articleindex.application.ports.translator import Translator
from articleindex.application.ports.view_document_factory import ViewDocumentFactory

__all__ = [
    "DirectoryResolver",
    "ExcerptMapper",
    "IndexEventNotifier",
    "IndexStore",
    "Indexer",
    "SeoMapper",
    "StructureMetadataProvider",
    "Translator",
    "ViewDocumentFactory",
]

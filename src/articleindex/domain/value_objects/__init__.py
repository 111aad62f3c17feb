"""Domain value objects."""

from articleindex.domain.value_objects.localization_state import (
    LocalizationState,
    LocalizationStateView,
)
from articleindex.domain.value_objects.view_document_id import view_document_id
from articleindex.domain.value_objects.view_document_type import ViewDocumentType
from articleindex.domain.value_objects.workflow_stage import WorkflowStage

__all__ = [
    "LocalizationState",
    "LocalizationStateView",
    "ViewDocumentType",
    "WorkflowStage",
    "view_document_id",
]

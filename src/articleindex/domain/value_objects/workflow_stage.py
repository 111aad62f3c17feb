"""Workflow stage of a content document."""

from enum import StrEnum


class WorkflowStage(StrEnum):
    """Editing stage of a content document."""

    DRAFT = "draft"
    PUBLISHED = "published"

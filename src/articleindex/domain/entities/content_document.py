"""Content document - materialized snapshot of a source article."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from articleindex.domain.value_objects import WorkflowStage


@dataclass
class ChildPage:
    """Child page of an article."""

    uuid: str
    page_number: int
    page_title: str | None = None
    route_path: str | None = None


@dataclass
class ContentDocument:
    """Article snapshot in one locale, as handed over by the content repository."""

    uuid: str
    locale: str
    structure_type: str
    title: str | None = None
    route_path: str | None = None
    created: datetime | None = None
    changed: datetime | None = None
    authored: datetime | None = None
    author: int | None = None
    changer: int | None = None
    creator: int | None = None
    workflow_stage: WorkflowStage = WorkflowStage.DRAFT
    published: datetime | None = None
    extensions_data: dict[str, dict[str, Any]] = field(default_factory=dict)
    structure: dict[str, Any] = field(default_factory=dict)
    children: list[ChildPage] = field(default_factory=list)
    available_locales: list[str] = field(default_factory=list)

    def get_property_value(self, name: str) -> Any:
        """Value of a structure property, None when the property is unset."""
        return self.structure.get(name)

"""Structure metadata - property schema of a template."""

from dataclasses import dataclass, field
from typing import Any

ARTICLE_TYPE_TAG = "article.type"
DEFAULT_ARTICLE_TYPE = "default"
TEASER_DESCRIPTION_TAG = "teaser.description"
TEASER_MEDIA_TAG = "teaser.media"


@dataclass
class PropertyMetadata:
    """Property definition with its tags (tag name -> attributes)."""

    name: str
    type: str = "text_line"
    tags: dict[str, dict[str, Any]] = field(default_factory=dict)

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags


@dataclass
class StructureMetadata:
    """Schema of one structure type: structure-level tags and ordered properties."""

    name: str
    properties: list[PropertyMetadata] = field(default_factory=list)
    tags: dict[str, dict[str, Any]] = field(default_factory=dict)

    def has_tag(self, tag: str) -> bool:
        """True if any property carries the tag."""
        return any(prop.has_tag(tag) for prop in self.properties)

    def property_for_tag(self, tag: str) -> PropertyMetadata:
        """First property carrying the tag. Raises KeyError when none does."""
        for prop in self.properties:
            if prop.has_tag(tag):
                return prop
        raise KeyError(f"No property tagged '{tag}' in structure '{self.name}'")

    def type_of(self, default: str = DEFAULT_ARTICLE_TYPE) -> str:
        """Article type from the structure tag, or `default` when untagged."""
        tag = self.tags.get(ARTICLE_TYPE_TAG)
        if tag is None:
            return default
        return tag.get("type") or default

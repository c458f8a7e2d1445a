"""Core data models shared across the parse, map, and generate stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


@dataclass
class DecodeWarning:
    """Non-fatal record of a value that could not be structurally decoded."""

    source: str
    key: str
    raw: str
    reason: str


@dataclass
class Element:
    """One builder node parsed out of the page markup."""

    id: str
    type: str
    tag: str
    settings: Dict[str, Any] = field(default_factory=dict)
    classes: List[str] = field(default_factory=list)
    styles: Dict[str, str] = field(default_factory=dict)
    content: Optional[str] = None
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List["Element"] = field(default_factory=list)

    def walk(self):
        """Yield this element and every descendant in document order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "tag": self.tag,
            "settings": dict(self.settings),
            "classes": list(self.classes),
            "styles": dict(self.styles),
            "content": self.content,
            "attributes": dict(self.attributes),
            "children": [child.to_dict() for child in self.children],
        }


@dataclass
class ParsedPage:
    """Result of parsing one document."""

    title: str
    elements: List[Element]
    global_styles: Dict[str, str] = field(default_factory=dict)
    warnings: List[DecodeWarning] = field(default_factory=list)

    def element_count(self) -> int:
        return sum(1 for root in self.elements for _ in root.walk())


class ComponentKind(str, Enum):
    """Closed set of component kinds every stage dispatches on."""

    SECTION = "section"
    COLUMN = "column"
    HEADING = "heading"
    TEXT = "text"
    IMAGE = "image"
    BUTTON = "button"
    VIDEO = "video"
    GENERIC = "generic"

    @classmethod
    def from_type(cls, element_type: str | None) -> "ComponentKind":
        """Resolve a builder element type to its component kind.

        Exact builder types win; otherwise the first family whose name occurs
        in the type is used, and anything else is ``GENERIC``.
        """
        if not element_type:
            return cls.GENERIC
        lowered = element_type.lower()
        exact = _EXACT_KINDS.get(lowered)
        if exact is not None:
            return exact
        for needle, kind in _SUBSTRING_KINDS:
            if needle in lowered:
                return kind
        return cls.GENERIC


_EXACT_KINDS: Dict[str, ComponentKind] = {
    "section": ComponentKind.SECTION,
    "column": ComponentKind.COLUMN,
    "heading": ComponentKind.HEADING,
    "text-editor": ComponentKind.TEXT,
    "image": ComponentKind.IMAGE,
    "button": ComponentKind.BUTTON,
    "video": ComponentKind.VIDEO,
}

_SUBSTRING_KINDS = (
    ("section", ComponentKind.SECTION),
    ("column", ComponentKind.COLUMN),
    ("heading", ComponentKind.HEADING),
    ("text", ComponentKind.TEXT),
    ("image", ComponentKind.IMAGE),
    ("button", ComponentKind.BUTTON),
    ("video", ComponentKind.VIDEO),
)


@dataclass
class ComponentDescription:
    """One mapped component in the target framework's schema."""

    name: str
    label: str
    category: str
    kind: ComponentKind = ComponentKind.GENERIC
    type: str = ""
    props: Dict[str, Any] = field(default_factory=dict)
    children: List["ComponentDescription"] = field(default_factory=list)
    repeater_items: Optional[Dict[str, List[Dict[str, Any]]]] = None

    def walk(self):
        """Yield this component and every descendant, parents first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def descendants(self):
        for child in self.children:
            yield from child.walk()

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "name": self.name,
            "label": self.label,
            "category": self.category,
            "kind": self.kind.value,
            "type": self.type,
            "props": self.props,
            "children": [child.to_dict() for child in self.children],
        }
        if self.repeater_items:
            payload["repeaterItems"] = self.repeater_items
        return payload

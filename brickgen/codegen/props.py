"""Props interface and destructuring for generated components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple

from ..models import ComponentDescription, ComponentKind
from .naming import js_literal, resolve_kind

IMAGE_KEYS = ("src",)


@dataclass(frozen=True)
class PropField:
    """One declared prop: interface type plus optional destructuring default."""

    name: str
    ts_type: str
    default: Optional[str] = None

    @property
    def declaration(self) -> str:
        return f"{self.name}?: {self.ts_type};"

    @property
    def binding(self) -> str:
        if self.default is None:
            return f"{self.name},"
        return f"{self.name} = {self.default},"


BASELINE_FIELDS: Tuple[PropField, ...] = (
    PropField("backgroundColor", "types.IColor"),
    PropField("borderTop", "boolean"),
    PropField("borderBottom", "boolean"),
    PropField("paddingTop", "string"),
    PropField("paddingBottom", "string"),
)

ALIGN_TYPE = '"left" | "center" | "right"'


def kind_fields(kind: ComponentKind, component: ComponentDescription) -> List[PropField]:
    """Fields a component kind always declares, defaulted from mapped props."""
    props = component.props
    if kind is ComponentKind.HEADING:
        return [
            PropField("title", "types.TextValue"),
            PropField("tag", "string", js_literal(_str(props.get("tag"), "h2"))),
            PropField("extraBoldTitle", "boolean", _bool_literal(props.get("extraBoldTitle"))),
            PropField("textAlign", ALIGN_TYPE, js_literal(_align(props.get("textAlign")))),
        ]
    if kind is ComponentKind.TEXT:
        return [
            PropField("text", "types.TextValue"),
            PropField("textAlign", ALIGN_TYPE, js_literal(_align(props.get("textAlign")))),
        ]
    if kind is ComponentKind.IMAGE:
        return [
            PropField("imageSource", "types.IImageSource"),
            PropField("isRounded", "boolean", _bool_literal(props.get("isRounded"))),
            PropField("hasShadow", "boolean", _bool_literal(props.get("hasShadow"))),
        ]
    if kind is ComponentKind.BUTTON:
        return [
            PropField("text", "string"),
            PropField("href", "string"),
            PropField("isTargetBlank", "boolean", _bool_literal(props.get("isTargetBlank"))),
            PropField("buttonColor", "string"),
            PropField("type", '"solid" | "outline" | "link"', js_literal(button_variant(component))),
            PropField("isBigButton", "boolean", _bool_literal(props.get("isBigButton"))),
        ]
    if kind is ComponentKind.SECTION:
        fields = [
            PropField("imageSide", '"left" | "right"', '"right"'),
            PropField("bigImage", "boolean", "false"),
            PropField("mobileImageTop", "boolean", "false"),
            PropField("textAlign", ALIGN_TYPE, js_literal(_align(props.get("textAlign")))),
            PropField("verticalAlign", '"top" | "center" | "bottom"', '"center"'),
            PropField(
                "mediaType",
                '"image" | "multiple-images" | "video-file" | "video-streaming"',
                '"image"',
            ),
            PropField("buttons", "types.RepeaterItems"),
        ]
        kinds = {resolve_kind(node) for node in component.descendants()}
        if ComponentKind.HEADING in kinds:
            fields.append(PropField("title", "types.TextValue"))
        if ComponentKind.TEXT in kinds:
            fields.append(PropField("text", "types.TextValue"))
        if ComponentKind.IMAGE in kinds:
            fields.extend(
                [
                    PropField("imageSource", "types.IImageSource"),
                    PropField("isRounded", "boolean", "false"),
                    PropField("hasShadow", "boolean", "false"),
                ]
            )
        return fields
    if kind is ComponentKind.COLUMN:
        return [PropField("width", "string", js_literal(_str(props.get("width"), "full")))]
    if kind is ComponentKind.VIDEO:
        return [
            PropField("type", '"streaming" | "file"'),
            PropField("platform", '"youtube" | "vimeo"'),
            PropField("videoId", "string"),
            PropField("videoFile", "{ name?: string; url: string }"),
        ]
    return [PropField("content", "string")]


def build_prop_fields(kind: ComponentKind, component: ComponentDescription) -> List[PropField]:
    """Baseline fields, then kind fields, then any other mapped prop in mapper order."""
    fields: List[PropField] = list(BASELINE_FIELDS)
    seen = {field.name for field in fields}
    for field in kind_fields(kind, component):
        if field.name not in seen:
            fields.append(field)
            seen.add(field.name)
    for name, value in component.props.items():
        if name in seen:
            continue
        fields.append(PropField(name, infer_prop_type(value)))
        seen.add(name)
    return fields


def infer_prop_type(value: Any) -> str:
    """TypeScript type for a mapped prop, from the runtime shape of its value."""
    if value is None:
        return "any"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "any[]"
    if isinstance(value, Mapping):
        if any(key in value for key in IMAGE_KEYS):
            return "types.IImageSource"
        return "Record<string, any>"
    return "any"


def button_variant(component: ComponentDescription) -> str:
    variant = component.props.get("type")
    return variant if variant in {"solid", "outline", "link"} else "solid"


def button_color(component: ComponentDescription, default: str = "blue") -> str:
    color = component.props.get("buttonColor")
    if isinstance(color, Mapping) and color.get("value"):
        return str(color["value"])
    if isinstance(color, str) and color:
        return color
    return default


def _bool_literal(value: Any) -> str:
    return "true" if value is True else "false"


def _str(value: Any, default: str) -> str:
    return value if isinstance(value, str) and value else default


def _align(value: Any) -> str:
    return value if value in {"left", "center", "right"} else "left"


__all__ = [
    "BASELINE_FIELDS",
    "PropField",
    "build_prop_fields",
    "button_color",
    "button_variant",
    "infer_prop_type",
    "kind_fields",
]

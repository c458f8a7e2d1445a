"""Render React Bricks component source from component descriptions."""

from __future__ import annotations

import html
import re
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, MutableSet, Optional

from jinja2 import Environment, FileSystemLoader

from ..logging import get_logger
from ..mapping.content import strip_tags
from ..models import ComponentDescription, ComponentKind
from .formatter import SourceFormatter
from .imports import collect_import_groups, render_imports
from .naming import js_literal, js_single_quoted, pascal_case, resolve_kind
from .props import build_prop_fields, button_color, button_variant

FALLBACK_VIDEO_ID = "dQw4w9WgXcQ"
PLACEHOLDER_IMAGE = "photos.DESK_MAC"
_HEADING_TAG = re.compile(r"h[1-6]")
COLUMN_WIDTHS = ("1/4", "1/3", "1/2", "2/3", "3/4", "full")
BUTTON_BUCKETS = ("pink", "purple", "blue", "green", "yellow", "red", "gray")
VIDEO_PLATFORMS = ("youtube", "vimeo")

_BODY_TEMPLATES: Dict[ComponentKind, str] = {
    ComponentKind.SECTION: "bodies/section.tsx.j2",
    ComponentKind.COLUMN: "bodies/column.tsx.j2",
    ComponentKind.HEADING: "bodies/heading.tsx.j2",
    ComponentKind.TEXT: "bodies/text.tsx.j2",
    ComponentKind.IMAGE: "bodies/image.tsx.j2",
    ComponentKind.BUTTON: "bodies/button.tsx.j2",
    ComponentKind.VIDEO: "bodies/video.tsx.j2",
    ComponentKind.GENERIC: "bodies/generic.tsx.j2",
}


class CodeGenerator:
    """Turns one ``ComponentDescription`` into a TSX source file.

    Only the root component's body is rendered; the subtree contributes its
    imports and, for sections and columns, literal content previews.
    """

    def __init__(
        self,
        templates_dir: Path | None = None,
        *,
        formatter: SourceFormatter | None = None,
    ) -> None:
        self.templates_dir = templates_dir
        self.formatter = formatter or SourceFormatter()
        self._env = self._create_env(templates_dir)
        self.logger = get_logger("codegen")

    def generate(
        self,
        component: ComponentDescription,
        imports: Optional[MutableSet[str]] = None,
    ) -> str:
        """Return generated source for ``component``.

        ``imports`` is an optional accumulator of import group names; groups
        already in it are emitted too and the groups this subtree needs are
        added to it. Without one, a fresh set is used for this call only.
        """
        kind = resolve_kind(component)
        groups = collect_import_groups(component)
        if imports is None:
            imports = set()
        imports.update(groups)

        identifier = pascal_case(component.name)
        body_context = _BODY_BUILDERS[kind](component)
        body = self._env.get_template(_BODY_TEMPLATES[kind]).render(**body_context)
        schema = self._env.get_template("schema.tsx.j2").render(
            identifier=identifier,
            kind=kind.value,
            name=component.name,
            label=component.label,
            category=component.category,
            defaults=default_prop_lines(kind, component),
            column_widths=COLUMN_WIDTHS,
            button_buckets=BUTTON_BUCKETS,
        )
        source = self._env.get_template("component.tsx.j2").render(
            imports=render_imports(imports),
            identifier=identifier,
            fields=build_prop_fields(kind, component),
            body=body.rstrip("\n"),
            schema=schema.rstrip("\n"),
        )
        self.logger.debug("Generated %s as %s body", identifier, kind.value)
        return self.formatter.format(source)

    def _create_env(self, templates_dir: Path | None) -> Environment:
        directories: List[str] = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(Path(__file__).with_name("templates")))
        env = Environment(
            loader=FileSystemLoader(directories),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        env.filters["js"] = js_literal
        env.filters["js_single"] = js_single_quoted
        return env


def generate(
    component: ComponentDescription,
    imports: Optional[MutableSet[str]] = None,
) -> str:
    return CodeGenerator().generate(component, imports)


# -- literal extraction -------------------------------------------------------


def title_text(component: ComponentDescription, default: str = "Heading") -> str:
    return _rich_text(component.props.get("title")) or default


def heading_tag(component: ComponentDescription) -> str:
    tag = component.props.get("tag")
    return tag if isinstance(tag, str) and _HEADING_TAG.fullmatch(tag) else "h2"


def body_text(component: ComponentDescription, default: str = "Text content") -> str:
    return _rich_text(component.props.get("text")) or default


def image_literal(component: ComponentDescription) -> Optional[Dict[str, str]]:
    source = component.props.get("imageSource")
    if isinstance(source, Mapping) and source.get("src"):
        return {"src": str(source["src"]), "alt": str(source.get("alt") or "Image")}
    return None


def button_label(component: ComponentDescription) -> str:
    text = component.props.get("text")
    return text if isinstance(text, str) and text else "Button"


def button_href(component: ComponentDescription) -> str:
    href = component.props.get("href")
    return href if isinstance(href, str) and href else "#"


def video_source(component: ComponentDescription) -> Dict[str, str]:
    """Resolved video: a file URL, else a streaming platform and id."""
    props = component.props
    video_file = props.get("videoFile")
    if props.get("type") == "file" and isinstance(video_file, Mapping) and video_file.get("url"):
        return {"mode": "file", "url": str(video_file["url"])}
    platform = props.get("platform") if props.get("platform") in VIDEO_PLATFORMS else "youtube"
    video_id = props.get("videoId")
    if not isinstance(video_id, str) or not video_id:
        video_id = FALLBACK_VIDEO_ID
    return {"mode": "streaming", "platform": platform, "video_id": video_id}


def _rich_text(value: Any) -> str:
    if isinstance(value, Mapping):
        value = value.get("value")
    if isinstance(value, str):
        return strip_tags(value)
    return ""


def _first(component: ComponentDescription, kind: ComponentKind) -> Optional[ComponentDescription]:
    for node in component.descendants():
        if resolve_kind(node) is kind:
            return node
    return None


# -- body contexts ------------------------------------------------------------


def _section_context(component: ComponentDescription) -> Dict[str, Any]:
    heading = _first(component, ComponentKind.HEADING)
    text = _first(component, ComponentKind.TEXT)
    image = _first(component, ComponentKind.IMAGE)
    buttons = list((component.repeater_items or {}).get("buttons", []))
    if not buttons:
        button = _first(component, ComponentKind.BUTTON)
        if button is not None:
            buttons = [{"text": button_label(button), "href": button_href(button)}]

    background = component.props.get("backgroundColor")
    overlay_class = None
    if isinstance(background, Mapping) and background.get("className"):
        overlay_class = str(background["className"])

    return {
        "text_side": bool(heading or text or buttons),
        "heading": (
            {"text": title_text(heading), "tag": heading_tag(heading)}
            if heading
            else None
        ),
        "text_literal": body_text(text) if text else None,
        "buttons": [
            {
                "text": str(item.get("text") or "Button"),
                "href": str(item.get("href") or "#"),
                "classes": _button_classes(
                    str(item.get("type") or "solid"), str(item.get("buttonColor") or "blue")
                ),
            }
            for item in buttons
        ],
        "image": (image_literal(image) or {"src": None, "alt": "Image"}) if image else None,
        "background_image": "backgroundImage" in component.props,
        "overlay_class": overlay_class,
    }


def column_width(component: ComponentDescription) -> str:
    width = component.props.get("width")
    return width if width in COLUMN_WIDTHS else "full"


def _column_context(component: ComponentDescription) -> Dict[str, Any]:
    return {
        "width_class": f"md:w-{column_width(component)}",
        "width_classes": {value: f"md:w-{value}" for value in COLUMN_WIDTHS},
        "previews": _preview_lines(component.children),
    }


def _heading_context(component: ComponentDescription) -> Dict[str, Any]:
    size = component.props.get("size")
    return {
        "title_literal": title_text(component),
        "size_class": f"text-{size}" if isinstance(size, str) and size else "text-2xl",
    }


def _text_context(component: ComponentDescription) -> Dict[str, Any]:
    return {"text_literal": body_text(component)}


def _image_context(component: ComponentDescription) -> Dict[str, Any]:
    return {"image": image_literal(component), "placeholder": PLACEHOLDER_IMAGE}


def _button_context(component: ComponentDescription) -> Dict[str, Any]:
    color = button_color(component)
    return {
        "text": button_label(component),
        "href": button_href(component),
        "color": color,
        "variant": button_variant(component),
        "palette": {bucket: _button_palette(bucket) for bucket in BUTTON_BUCKETS},
    }


def _video_context(component: ComponentDescription) -> Dict[str, Any]:
    video: Dict[str, Any] = dict(video_source(component))
    if video["mode"] == "file":
        video["file"] = {"name": "video", "url": video["url"]}
    return video


def _generic_context(component: ComponentDescription) -> Dict[str, Any]:
    content = component.props.get("content")
    return {
        "placeholder": f"Generated component: {component.name} ({component.type or 'unknown type'})",
        "content": content if isinstance(content, str) and content else None,
    }


_BODY_BUILDERS: Dict[ComponentKind, Callable[[ComponentDescription], Dict[str, Any]]] = {
    ComponentKind.SECTION: _section_context,
    ComponentKind.COLUMN: _column_context,
    ComponentKind.HEADING: _heading_context,
    ComponentKind.TEXT: _text_context,
    ComponentKind.IMAGE: _image_context,
    ComponentKind.BUTTON: _button_context,
    ComponentKind.VIDEO: _video_context,
    ComponentKind.GENERIC: _generic_context,
}


def _button_palette(color: str) -> Dict[str, str]:
    return {
        "solid": f"text-white bg-{color}-500 hover:bg-{color}-600",
        "outline": f"bg-transparent text-{color}-600 border border-{color}-600 hover:bg-{color}-50",
        "link": f"text-{color}-600 hover:text-{color}-700 hover:underline",
    }


def _button_classes(variant: str, color: str) -> str:
    base = "inline-block font-bold transition-all ease-out duration-150"
    palette = _button_palette(color if color in BUTTON_BUCKETS else "blue")
    if variant == "link":
        return f"{base} p-0 {palette['link']}"
    return f"{base} px-5 py-3 rounded-md {palette.get(variant, palette['solid'])}"


# -- column previews ----------------------------------------------------------


def _preview_lines(children: List[ComponentDescription], indent: str = "") -> List[str]:
    lines: List[str] = []
    for index, child in enumerate(children, start=1):
        lines.extend(indent + line for line in _preview_child(child, index))
    return lines


def _preview_child(child: ComponentDescription, index: int) -> List[str]:
    kind = resolve_kind(child)
    if kind is ComponentKind.HEADING:
        tag = heading_tag(child)
        return [f'<{tag} className="text-2xl font-bold">{{{js_literal(title_text(child))}}}</{tag}>']
    if kind is ComponentKind.TEXT:
        return [f'<p className="leading-7">{{{js_literal(body_text(child))}}}</p>']
    if kind is ComponentKind.VIDEO:
        return _video_preview(child)
    if kind in {ComponentKind.SECTION, ComponentKind.COLUMN} and child.children:
        return [
            '<div className="flex flex-col space-y-4">',
            *_preview_lines(child.children, "  "),
            "</div>",
        ]

    markup = _preview_markup(kind, child)
    if markup:
        return [f"<div dangerouslySetInnerHTML={{ {{ __html: {js_literal(markup)} }} }} />"]
    label = (child.type or child.name).replace("*/", "")
    return [f"{{/* Child component {index} ({label}) */}}"]


def _video_preview(child: ComponentDescription) -> List[str]:
    video = video_source(child)
    if video["mode"] == "file":
        source = js_literal({"name": "video", "url": video["url"]})
        attributes = ['type="file"', f"videoFile={{{source}}}"]
    else:
        attributes = [
            'type="streaming"',
            f"platform={{{js_literal(video['platform'])}}}",
            f"videoId={{{js_literal(video['video_id'])}}}",
        ]
    return ["<Video", *(f"  {attribute}" for attribute in attributes), '  className="w-full rounded"', "/>"]


def _attr(value: str) -> str:
    return html.escape(value, quote=True)


def _preview_markup(kind: ComponentKind, child: ComponentDescription) -> Optional[str]:
    if kind is ComponentKind.IMAGE:
        image = image_literal(child)
        if image:
            return f'<img src="{_attr(image["src"])}" alt="{_attr(image["alt"])}" />'
        return None
    if kind is ComponentKind.BUTTON:
        return f'<a href="{_attr(button_href(child))}">{html.escape(button_label(child))}</a>'
    if kind is ComponentKind.GENERIC:
        content = child.props.get("content")
        return content if isinstance(content, str) and content else None
    return None


# -- default props ------------------------------------------------------------


def default_prop_lines(kind: ComponentKind, component: ComponentDescription) -> List[str]:
    """Entries of ``getDefaultProps``: mapped literals, else stock placeholders."""
    props = component.props
    entries: List[tuple[str, str]] = []

    if kind is ComponentKind.SECTION:
        lines = ["...sectionDefaults,"]
        context = _section_context(component)
        if "backgroundImage" in props:
            entries.append(("backgroundImage", js_literal(props["backgroundImage"])))
        if context["heading"]:
            entries.append(("title", js_literal(context["heading"]["text"])))
        if context["text_literal"]:
            entries.append(("text", js_literal(context["text_literal"])))
        if context["image"]:
            entries.append(("imageSource", _image_default(context["image"])))
        items = (component.repeater_items or {}).get("buttons", [])
        entries.append(("buttons", js_literal(list(items))))
        return lines + [f"{key}: {value}," for key, value in entries]

    entries.append(("backgroundColor", js_literal(props.get("backgroundColor", {"color": "white", "className": "bg-white"}))))
    entries.append(("paddingTop", js_literal(props.get("paddingTop", "normal"))))
    entries.append(("paddingBottom", js_literal(props.get("paddingBottom", "normal"))))
    for side in ("borderTop", "borderBottom"):
        if isinstance(props.get(side), bool):
            entries.append((side, js_literal(props[side])))

    if kind is ComponentKind.HEADING:
        entries.append(("title", js_literal(title_text(component))))
        entries.append(("tag", js_literal(heading_tag(component))))
        entries.append(("extraBoldTitle", js_literal(props.get("extraBoldTitle") is True)))
    elif kind is ComponentKind.TEXT:
        entries.append(("text", js_literal(body_text(component))))
        entries.append(("textAlign", js_literal(props.get("textAlign") or "left")))
    elif kind is ComponentKind.IMAGE:
        entries.append(("imageSource", _image_default(image_literal(component))))
        entries.append(("isRounded", js_literal(props.get("isRounded") is True)))
        entries.append(("hasShadow", js_literal(props.get("hasShadow") is True)))
    elif kind is ComponentKind.BUTTON:
        entries.append(("text", js_literal(button_label(component))))
        entries.append(("href", js_literal(button_href(component))))
        entries.append(("isTargetBlank", js_literal(props.get("isTargetBlank") is True)))
        entries.append(("type", js_literal(button_variant(component))))
        entries.append(("buttonColor", js_literal(button_color(component))))
        entries.append(("isBigButton", js_literal(props.get("isBigButton") is True)))
    elif kind is ComponentKind.VIDEO:
        video = video_source(component)
        entries.append(("type", js_literal(video["mode"])))
        if video["mode"] == "file":
            entries.append(("videoFile", js_literal({"name": "video", "url": video["url"]})))
        else:
            entries.append(("platform", js_literal(video["platform"])))
            entries.append(("videoId", js_literal(video["video_id"])))
    elif kind is ComponentKind.COLUMN:
        entries.append(("width", js_literal(column_width(component))))
    elif isinstance(props.get("content"), str):
        entries.append(("content", js_literal(props["content"])))

    return [f"{key}: {value}," for key, value in entries]


def _image_default(image: Optional[Mapping[str, Any]]) -> str:
    if image and image.get("src"):
        return js_literal({"src": image["src"], "alt": image.get("alt") or "Image"})
    return PLACEHOLDER_IMAGE


__all__ = [
    "CodeGenerator",
    "default_prop_lines",
    "generate",
    "video_source",
]

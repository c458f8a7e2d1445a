"""Map parsed builder elements onto React Bricks component descriptions."""

from __future__ import annotations

import re
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..logging import get_logger
from ..models import ComponentDescription, ComponentKind, Element
from . import content as markup
from . import tailwind

_logger = get_logger("mapper")

_BACKGROUND_URL = re.compile(r"url\(['\"]?(.*?)['\"]?\)")
_COLUMN_CLASS = re.compile(r"^elementor-col-(\d+(?:\.\d+)?)$")
_LEADING_INT = re.compile(r"^\s*(\d+)")

FULL_WIDTH_CLASS = "elementor-section-full-width"
BUTTON_LINK_CLASS = "elementor-button-link"
BUTTON_SOLID_CLASS = "elementor-button-solid"
BUTTON_OUTLINE_CLASS = "elementor-button-outline"
BIG_BUTTON_CLASSES = ("elementor-size-lg", "elementor-size-xl")
MAX_REPEATER_BUTTONS = 2

# Canonical short names for builder types whose raw name reads poorly.
_CANONICAL_TYPES = {"text-editor": "text"}

_CATEGORY_SUBSTRINGS = (
    ("heading", "Typography"),
    ("text", "Typography"),
    ("image", "Media"),
    ("video", "Media"),
    ("button", "Call to Action"),
    ("form", "Forms"),
)


def map_element(element: Element, parent_type: Optional[str] = None) -> ComponentDescription:
    """Map one element and its subtree.

    The result mirrors the element tree one-to-one. ``parent_type`` is accepted
    as a hint for column sizing but no current rule consults it.
    """
    kind = ComponentKind.from_type(element.type)
    base = component_base_name(element.type)
    component = ComponentDescription(
        name=f"{base}-block",
        label=component_label(base),
        category=component_category(element.type),
        kind=kind,
        type=element.type,
        props=base_props(element),
    )
    _logger.debug("Mapping %s (%s) as %s", element.id, element.type, kind.value)

    _REFINERS[kind](element, component, parent_type)

    component.children = [map_element(child, element.type) for child in element.children]

    if kind is ComponentKind.SECTION:
        buttons = _collect_button_items(component)
        if buttons:
            component.repeater_items = {"buttons": buttons}

    return component


def component_base_name(element_type: str) -> str:
    base = (element_type or "").replace("elementor-", "", 1).replace("widget-", "", 1)
    base = _CANONICAL_TYPES.get(base, base)
    return base or "widget"


def component_label(base: str) -> str:
    words = [word for word in base.split("-") if word]
    return " ".join(word[0].upper() + word[1:] for word in words) or "Widget"


def component_category(element_type: str) -> str:
    if element_type in {"section", "column"}:
        return "Layout"
    for needle, category in _CATEGORY_SUBSTRINGS:
        if needle in element_type:
            return category
    return "Other"


def calculate_column_width(size: Any) -> Optional[str]:
    number = _as_number(size)
    if number is None:
        return None
    return tailwind.map_column_width(number)


def base_props(element: Element) -> Dict[str, Any]:
    """Props every component starts with, overridden by inline styles."""
    props: Dict[str, Any] = {
        "backgroundColor": {"color": "white", "className": "bg-white"},
        "paddingTop": "normal",
        "paddingBottom": "normal",
    }

    background = style_value(element, "background-color")
    if background:
        props["backgroundColor"] = tailwind.map_background_color(background).to_prop()

    padding = style_value(element, "padding")
    if padding:
        props["padding"] = tailwind.map_padding(padding)
    else:
        for side in ("top", "bottom", "left", "right"):
            value = style_value(element, f"padding-{side}")
            if value:
                props[f"padding{side.capitalize()}"] = tailwind.map_spacing(value)

    margin = style_value(element, "margin")
    if margin:
        props["margin"] = tailwind.map_margin(margin)

    border = style_value(element, "border")
    for side in ("top", "bottom"):
        value = style_value(element, f"border-{side}") or border
        if value:
            props[f"border{side.capitalize()}"] = _has_border(value)

    text_align = style_value(element, "text-align")
    if text_align:
        props["textAlign"] = text_align

    return props


def style_value(element: Element, prop: str) -> Optional[str]:
    """Read an inline style by CSS name, accepting a camelCase key as well."""
    value = element.styles.get(prop)
    if value is None:
        value = element.styles.get(_camel(prop))
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def setting_value(element: Element, key: str) -> Any:
    """Look up a setting on the element or inside its decoded ``settings`` blob."""
    if key in element.settings:
        return element.settings[key]
    nested = element.settings.get("settings")
    if isinstance(nested, Mapping):
        return nested.get(key)
    return None


def _map_section(element: Element, component: ComponentDescription, parent_type: Optional[str]) -> None:
    structure = setting_value(element, "structure")
    if structure:
        component.props["structure"] = structure

    if FULL_WIDTH_CLASS in element.classes:
        component.props["width"] = "full"

    background_image = style_value(element, "background-image")
    if background_image and "url(" in background_image:
        match = _BACKGROUND_URL.search(background_image)
        if match and match.group(1):
            component.props["backgroundImage"] = {
                "source": {"src": match.group(1)},
                "position": style_value(element, "background-position") or "center center",
            }


def _map_column(element: Element, component: ComponentDescription, parent_type: Optional[str]) -> None:
    size = setting_value(element, "_column_size")
    if size is None:
        for cls in element.classes:
            match = _COLUMN_CLASS.match(cls)
            if match:
                size = match.group(1)
                break
    width = calculate_column_width(size) if size is not None else None
    if width:
        component.props["width"] = width


def _map_heading(element: Element, component: ComponentDescription, parent_type: Optional[str]) -> None:
    tag = element.tag if re.fullmatch(r"h[1-6]", element.tag or "") else None
    component.props["tag"] = tag or markup.find_heading_tag(element.content or "") or "h2"

    if element.content:
        component.props["title"] = {"value": markup.sanitize_html(element.content)}

    font_size = style_value(element, "font-size")
    if font_size:
        component.props["size"] = tailwind.map_font_size(font_size)

    font_weight = style_value(element, "font-weight")
    if font_weight:
        match = _LEADING_INT.match(font_weight)
        component.props["extraBoldTitle"] = font_weight == "bold" or bool(
            match and int(match.group(1)) >= 700
        )


def _map_text(element: Element, component: ComponentDescription, parent_type: Optional[str]) -> None:
    if element.content:
        component.props["text"] = {"value": markup.sanitize_html(element.content)}


def _map_image(element: Element, component: ComponentDescription, parent_type: Optional[str]) -> None:
    image_url = markup.find_image_src(element.content or "")
    if not image_url:
        image = setting_value(element, "image")
        if isinstance(image, Mapping) and image.get("url"):
            image_url = str(image["url"])

    if image_url:
        alt = setting_value(element, "alt_text")
        component.props["imageSource"] = {"src": image_url, "alt": str(alt) if alt else ""}

    image_size = setting_value(element, "image_size")
    if image_size:
        component.props["size"] = image_size

    if style_value(element, "border-radius") or any("rounded" in cls for cls in element.classes):
        component.props["isRounded"] = True
    if style_value(element, "box-shadow") or any("shadow" in cls for cls in element.classes):
        component.props["hasShadow"] = True


def _map_button(element: Element, component: ComponentDescription, parent_type: Optional[str]) -> None:
    source = element.content or ""
    text = markup.find_link_text(source)
    if text:
        component.props["text"] = text
    href = markup.find_href(source)
    if href:
        component.props["href"] = href
    if markup.opens_new_window(source):
        component.props["isTargetBlank"] = True

    if BUTTON_LINK_CLASS in element.classes:
        component.props["type"] = "link"
    elif BUTTON_SOLID_CLASS in element.classes:
        component.props["type"] = "solid"
    elif BUTTON_OUTLINE_CLASS in element.classes:
        component.props["type"] = "outline"
    else:
        component.props["type"] = "solid"

    background = style_value(element, "background-color")
    if background:
        component.props["buttonColor"] = tailwind.map_button_color(background)

    if any(cls in element.classes for cls in BIG_BUTTON_CLASSES):
        component.props["isBigButton"] = True


def _map_video(element: Element, component: ComponentDescription, parent_type: Optional[str]) -> None:
    source = element.content or ""
    platform = None
    video_id = None
    video_file = None

    if "youtube" in source:
        platform, video_id = "youtube", markup.find_youtube_id(source)
    elif "vimeo" in source:
        platform, video_id = "vimeo", markup.find_vimeo_id(source)
    elif "<video" in source or setting_value(element, "video_type") == "hosted":
        video_file = markup.find_media_file(source)
    else:
        youtube_url = setting_value(element, "youtube_url")
        vimeo_url = setting_value(element, "vimeo_url")
        if isinstance(youtube_url, str) and youtube_url:
            platform = "youtube"
            video_id = markup.find_youtube_id(youtube_url, embed_only=False)
        elif isinstance(vimeo_url, str) and vimeo_url:
            platform = "vimeo"
            video_id = markup.find_vimeo_id(vimeo_url)

    if platform and video_id:
        component.props["type"] = "streaming"
        component.props["platform"] = platform
        component.props["videoId"] = video_id
    else:
        component.props["type"] = "file"
        if video_file:
            component.props["videoFile"] = {"url": video_file}


def _map_generic(element: Element, component: ComponentDescription, parent_type: Optional[str]) -> None:
    if element.content:
        component.props["content"] = element.content


_Refiner = Callable[[Element, ComponentDescription, Optional[str]], None]

_REFINERS: Dict[ComponentKind, _Refiner] = {
    ComponentKind.SECTION: _map_section,
    ComponentKind.COLUMN: _map_column,
    ComponentKind.HEADING: _map_heading,
    ComponentKind.TEXT: _map_text,
    ComponentKind.IMAGE: _map_image,
    ComponentKind.BUTTON: _map_button,
    ComponentKind.VIDEO: _map_video,
    ComponentKind.GENERIC: _map_generic,
}


def _collect_button_items(component: ComponentDescription) -> List[Dict[str, Any]]:
    items: List[Dict[str, Any]] = []
    for node in component.descendants():
        if node.kind is not ComponentKind.BUTTON:
            continue
        item: Dict[str, Any] = {
            "type": node.props.get("type", "solid"),
            "text": node.props.get("text", "Button"),
            "href": node.props.get("href", "#"),
            "isTargetBlank": bool(node.props.get("isTargetBlank", False)),
        }
        color = node.props.get("buttonColor")
        if isinstance(color, Mapping) and color.get("value"):
            item["buttonColor"] = color["value"]
        items.append(item)
        if len(items) == MAX_REPEATER_BUTTONS:
            break
    return items


def _has_border(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in {"none", "0", "0px", "hidden"}:
        return False
    return not lowered.startswith(("none ", "0 ", "0px "))


def _camel(prop: str) -> str:
    head, *rest = prop.split("-")
    return head + "".join(part.capitalize() for part in rest)


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    if isinstance(value, Mapping):
        # Elementor sometimes stores sizes as {"unit": "%", "size": 50}.
        return _as_number(value.get("size"))
    return None


__all__ = [
    "base_props",
    "calculate_column_width",
    "component_base_name",
    "component_category",
    "component_label",
    "map_element",
    "setting_value",
    "style_value",
]

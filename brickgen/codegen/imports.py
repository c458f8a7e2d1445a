"""Import assembly for generated components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Tuple

from ..models import ComponentDescription, ComponentKind
from .naming import resolve_kind


@dataclass(frozen=True)
class ImportSpec:
    """One imported binding: a default import or a named specifier."""

    module: str
    name: str
    default: bool = False


def _named(module: str, *names: str) -> Tuple[ImportSpec, ...]:
    return tuple(ImportSpec(module, name) for name in names)


def _default(module: str, name: str) -> ImportSpec:
    return ImportSpec(module, name, default=True)


RB = "react-bricks/rsc"
COLORS = "@reactbricksui/colors"
SIDE_PROPS = "@reactbricksui/LayoutSideProps"
IMAGES = "@reactbricksui/shared/defaultImages"

# Emission order of modules in the import block.
MODULE_ORDER: Tuple[str, ...] = (
    "react",
    "classnames",
    RB,
    "@reactbricksui/shared/components/Section",
    "@reactbricksui/shared/components/Container",
    "@reactbricksui/shared/components/Video",
    SIDE_PROPS,
    COLORS,
    IMAGES,
)

IMPORT_GROUPS: Dict[str, Tuple[ImportSpec, ...]] = {
    "base": (
        _default("react", "React"),
        _default("classnames", "classNames"),
        *_named(RB, "types"),
        *_named(SIDE_PROPS, "paddingBordersSideGroup"),
    ),
    "section": (
        *_named(RB, "Link", "RichText", "Image", "Repeater"),
        _default("@reactbricksui/shared/components/Section", "Section"),
        _default("@reactbricksui/shared/components/Container", "Container"),
        *_named(SIDE_PROPS, "sectionDefaults", "backgroundSideGroup"),
        *_named(COLORS, "textColors"),
        *_named(IMAGES, "photos"),
    ),
    "richtext": (
        *_named(RB, "RichText", "Link"),
        *_named(COLORS, "textColors"),
    ),
    "image": (
        *_named(RB, "Image"),
        *_named(IMAGES, "photos"),
    ),
    "video": (
        _default("@reactbricksui/shared/components/Video", "Video"),
    ),
    "button": (
        *_named(RB, "Link"),
    ),
    "repeater": (
        *_named(RB, "Repeater"),
    ),
}

_KIND_GROUPS: Dict[ComponentKind, Tuple[str, ...]] = {
    ComponentKind.SECTION: ("section",),
    ComponentKind.COLUMN: (),
    ComponentKind.HEADING: ("richtext",),
    ComponentKind.TEXT: ("richtext",),
    ComponentKind.IMAGE: ("image",),
    ComponentKind.BUTTON: ("button",),
    ComponentKind.VIDEO: ("video",),
    ComponentKind.GENERIC: (),
}


def collect_import_groups(component: ComponentDescription) -> FrozenSet[str]:
    """Union of the import groups needed by a component and its whole subtree."""
    groups = {"base", *_KIND_GROUPS[resolve_kind(component)]}
    if component.repeater_items:
        groups.add("repeater")
    for child in component.children:
        groups |= collect_import_groups(child)
    return frozenset(groups)


def render_imports(groups: Iterable[str]) -> List[str]:
    """Merge the specs of ``groups`` into one import line per module.

    Modules follow ``MODULE_ORDER`` (unknown modules sort after it) and named
    specifiers are sorted, so the block is identical for any group order.
    """
    specs: List[ImportSpec] = []
    for group in sorted(set(groups)):
        specs.extend(IMPORT_GROUPS.get(group, ()))

    defaults: Dict[str, str] = {}
    named: Dict[str, set] = {}
    for spec in specs:
        if spec.default:
            defaults.setdefault(spec.module, spec.name)
        else:
            named.setdefault(spec.module, set()).add(spec.name)

    modules = set(defaults) | set(named)
    ordered = sorted(modules, key=_module_sort_key)

    lines: List[str] = []
    for module in ordered:
        parts: List[str] = []
        if module in defaults:
            parts.append(defaults[module])
        if module in named:
            parts.append("{ " + ", ".join(sorted(named[module])) + " }")
        lines.append(f"import {', '.join(parts)} from '{module}'")
    return lines


def _module_sort_key(module: str) -> Tuple[int, str]:
    try:
        return (MODULE_ORDER.index(module), module)
    except ValueError:
        return (len(MODULE_ORDER), module)


__all__ = [
    "IMPORT_GROUPS",
    "ImportSpec",
    "collect_import_groups",
    "render_imports",
]

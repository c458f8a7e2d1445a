"""Identifier and literal helpers for emitted TypeScript."""

from __future__ import annotations

import json
import re
from typing import Any

from ..models import ComponentDescription, ComponentKind

_NON_IDENTIFIER = re.compile(r"[^A-Za-z0-9]")


def pascal_case(name: str) -> str:
    """Turn a kebab-case component name into a TypeScript identifier.

    ``heading-block`` becomes ``HeadingBlock``. Characters that cannot appear in
    an identifier are dropped and a leading digit gets a ``Brick`` prefix.
    """
    parts = [_NON_IDENTIFIER.sub("", part) for part in name.split("-")]
    identifier = "".join(part[0].upper() + part[1:] for part in parts if part)
    if not identifier:
        return "Brick"
    if identifier[0].isdigit():
        return f"Brick{identifier}"
    return identifier


def js_literal(value: Any) -> str:
    """Render a JSON-compatible value as a TypeScript literal."""
    return json.dumps(value, ensure_ascii=False)


def js_single_quoted(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace("'", "\\'").replace("\n", "\\n")
    return f"'{escaped}'"


def resolve_kind(component: ComponentDescription) -> ComponentKind:
    """Kind of a description: its own tag, else its type, else its name."""
    if component.kind is not ComponentKind.GENERIC:
        return component.kind
    by_type = ComponentKind.from_type(component.type)
    if by_type is not ComponentKind.GENERIC:
        return by_type
    return ComponentKind.from_type(component.name.removesuffix("-block"))


__all__ = ["js_literal", "js_single_quoted", "pascal_case", "resolve_kind"]

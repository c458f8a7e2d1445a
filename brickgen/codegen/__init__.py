"""TSX source generation for React Bricks components."""

from .formatter import SourceFormatter
from .generator import CodeGenerator, generate
from .imports import IMPORT_GROUPS, ImportSpec, collect_import_groups, render_imports
from .naming import js_literal, pascal_case, resolve_kind
from .props import PropField, build_prop_fields

__all__ = [
    "CodeGenerator",
    "IMPORT_GROUPS",
    "ImportSpec",
    "PropField",
    "SourceFormatter",
    "build_prop_fields",
    "collect_import_groups",
    "generate",
    "js_literal",
    "pascal_case",
    "render_imports",
    "resolve_kind",
]

"""Schema mapping from builder elements to target component descriptions."""

from . import tailwind
from .mapper import (
    base_props,
    calculate_column_width,
    component_base_name,
    component_category,
    component_label,
    map_element,
)

__all__ = [
    "base_props",
    "calculate_column_width",
    "component_base_name",
    "component_category",
    "component_label",
    "map_element",
    "tailwind",
]

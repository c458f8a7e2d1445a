"""Convert Elementor page markup into React Bricks components."""

from .codegen.generator import CodeGenerator, generate
from .config import BrickgenConfig, ConfigError, load_config
from .converter import Converter, GeneratedComponent, element_type_label, find_element
from .mapping.mapper import map_element
from .models import ComponentDescription, ComponentKind, DecodeWarning, Element, ParsedPage
from .parsing import MarkupParser, NotFoundError, ParseError

__version__ = "0.1.0"

__all__ = [
    "BrickgenConfig",
    "CodeGenerator",
    "ComponentDescription",
    "ComponentKind",
    "ConfigError",
    "Converter",
    "DecodeWarning",
    "Element",
    "GeneratedComponent",
    "MarkupParser",
    "NotFoundError",
    "ParseError",
    "ParsedPage",
    "element_type_label",
    "find_element",
    "generate",
    "load_config",
    "map_element",
]

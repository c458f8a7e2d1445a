"""Configuration loading for brickgen (.brickgen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".brickgen.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class FetchConfig:
    """HTTP settings used when the source is a URL."""

    user_agent: str = "brickgen/0.1 (+https://github.com/brickgen/brickgen)"
    timeout: float = 30.0


@dataclass
class MarkerConfig:
    """Class and attribute conventions of the page builder."""

    root_class: str = "elementor"
    element_class: str = "elementor-element"
    section_class: str = "elementor-section"
    column_class: str = "elementor-column"
    widget_class: str = "elementor-widget"
    widget_prefix: str = "elementor-widget-"
    data_prefix: str = "data-"
    builder_name: str = "elementor"


@dataclass
class ParserConfig:
    """Which element types carry their inner markup as ``content``."""

    content_types: List[str] = field(default_factory=lambda: ["text", "heading"])


@dataclass
class OutputConfig:
    """Where generated component files are written."""

    directory: str = "components"
    extension: str = ".tsx"


@dataclass
class CodegenConfig:
    """Template overrides for the code generator."""

    templates_dir: Optional[Path] = None


@dataclass
class BrickgenConfig:
    """Represents the high-level settings defined in .brickgen.yml."""

    root: Path
    fetch: FetchConfig = field(default_factory=FetchConfig)
    markers: MarkerConfig = field(default_factory=MarkerConfig)
    parser: ParserConfig = field(default_factory=ParserConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    codegen: CodegenConfig = field(default_factory=CodegenConfig)

    @property
    def output_dir(self) -> Path:
        path = Path(self.output.directory).expanduser()
        return path if path.is_absolute() else self.root / path


def default_config(root: Path | None = None) -> BrickgenConfig:
    return BrickgenConfig(root=(root or Path.cwd()).resolve())


def load_config(config_path: Path) -> BrickgenConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return BrickgenConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    fetch = FetchConfig()
    fetch_data = _as_dict(data.get("fetch"))
    if fetch_data:
        fetch.user_agent = _as_str(fetch_data.get("user_agent")) or fetch.user_agent
        timeout = _as_float(fetch_data.get("timeout"))
        if timeout is not None and timeout > 0:
            fetch.timeout = timeout

    markers = MarkerConfig()
    marker_data = _as_dict(data.get("markers"))
    for item in fields(MarkerConfig):
        value = _as_str(marker_data.get(item.name))
        if value:
            setattr(markers, item.name, value)

    parser = ParserConfig()
    parser_data = _as_dict(data.get("parser"))
    if "content_types" in parser_data:
        parser.content_types = _as_str_list(parser_data.get("content_types"))

    output = OutputConfig()
    output_data = _as_dict(data.get("output"))
    if output_data:
        output.directory = _as_str(output_data.get("directory")) or output.directory
        extension = _as_str(output_data.get("extension"))
        if extension:
            output.extension = extension if extension.startswith(".") else f".{extension}"

    codegen = CodegenConfig()
    codegen_data = _as_dict(data.get("codegen"))
    templates_dir = _as_str(codegen_data.get("templates_dir"))
    if templates_dir:
        codegen.templates_dir = root / templates_dir

    return BrickgenConfig(
        root=root,
        fetch=fetch,
        markers=markers,
        parser=parser,
        output=output,
        codegen=codegen,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool) or value is None:
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []

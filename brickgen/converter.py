"""Pipeline orchestration for parse, map, and generate runs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from .codegen.generator import CodeGenerator
from .codegen.naming import pascal_case
from .config import BrickgenConfig, default_config
from .logging import get_logger
from .mapping.mapper import map_element
from .models import ComponentDescription, Element, ParsedPage
from .parsing.fetch import PageFetcher
from .parsing.parser import MarkupParser

_TYPE_LABELS = {
    "section": "Section",
    "column": "Column",
    "widget": "Widget",
}


@dataclass
class GeneratedComponent:
    """One generated source file, keyed by the element it came from."""

    element_id: str
    name: str
    identifier: str
    source: str

    def filename(self, extension: str = ".tsx") -> str:
        return f"{self.identifier}{extension}"


class Converter:
    """Coordinates the three conversion stages for a single page."""

    def __init__(
        self,
        config: BrickgenConfig | None = None,
        parser: MarkupParser | None = None,
        generator: CodeGenerator | None = None,
    ) -> None:
        self.config = config or default_config()
        self.parser = parser or MarkupParser(
            self.config.markers,
            self.config.parser,
            PageFetcher(self.config.fetch),
        )
        self.generator = generator or CodeGenerator(self._templates_dir())
        self.logger = get_logger("converter")

    def parse(self, source: str) -> ParsedPage:
        """Parse a URL or local HTML file into its element tree."""
        self.logger.info("Parsing %s", source)
        page = self.parser.parse_source(source)
        self._log_page(page)
        return page

    async def parse_async(self, source: str) -> ParsedPage:
        self.logger.info("Parsing %s", source)
        if source.startswith(("http://", "https://")):
            page = await self.parser.parse_url_async(source)
        else:
            page = self.parser.parse_file(Path(source).expanduser())
        self._log_page(page)
        return page

    def parse_html(self, html: str, *, source: str = "document") -> ParsedPage:
        page = self.parser.parse_html(html, source=source)
        self._log_page(page)
        return page

    def map(self, element: Element) -> ComponentDescription:
        return map_element(element)

    def generate(self, component: ComponentDescription) -> str:
        return self.generator.generate(component)

    def convert_page(
        self, page: ParsedPage, element_id: Optional[str] = None
    ) -> List[GeneratedComponent]:
        """Generate one element by id, or every top-level element in order.

        Raises ``LookupError`` when ``element_id`` is not in the tree.
        """
        if element_id is not None:
            element = find_element(page.elements, element_id)
            if element is None:
                raise LookupError(f"No element with id '{element_id}' in {page.title!r}")
            targets: Sequence[Element] = [element]
        else:
            targets = page.elements

        self.logger.info("Generating %d component(s)", len(targets))
        results: List[GeneratedComponent] = []
        for element in targets:
            component = self.map(element)
            source = self.generate(component)
            results.append(
                GeneratedComponent(
                    element_id=element.id,
                    name=component.name,
                    identifier=pascal_case(component.name),
                    source=source,
                )
            )
        return results

    def convert(self, source: str, element_id: Optional[str] = None) -> List[GeneratedComponent]:
        return self.convert_page(self.parse(source), element_id)

    def write(
        self,
        results: Iterable[GeneratedComponent],
        out_dir: Path | None = None,
    ) -> List[Path]:
        """Save each result as ``<Identifier><extension>``.

        Components sharing an identifier get a numeric suffix so none are
        overwritten within one run.
        """
        target = Path(out_dir) if out_dir is not None else self.config.output_dir
        target.mkdir(parents=True, exist_ok=True)
        extension = self.config.output.extension

        written: List[Path] = []
        used: set[str] = set()
        for result in results:
            stem = result.identifier
            counter = 2
            while stem in used:
                stem = f"{result.identifier}{counter}"
                counter += 1
            used.add(stem)
            path = target / f"{stem}{extension}"
            path.write_text(result.source, encoding="utf-8")
            self.logger.info("Wrote %s", path)
            written.append(path)
        return written

    def _templates_dir(self) -> Optional[Path]:
        templates_dir = self.config.codegen.templates_dir
        if not templates_dir:
            return None
        path = Path(templates_dir).expanduser()
        return path if path.is_absolute() else self.config.root / path

    def _log_page(self, page: ParsedPage) -> None:
        self.logger.info(
            "Parsed %r: %d top-level element(s), %d total",
            page.title,
            len(page.elements),
            page.element_count(),
        )
        if page.warnings:
            self.logger.info("%d value(s) could not be decoded", len(page.warnings))


def find_element(elements: Iterable[Element], element_id: str) -> Optional[Element]:
    """Depth-first search for an element by id."""
    for element in elements:
        if element.id == element_id:
            return element
        found = find_element(element.children, element_id)
        if found is not None:
            return found
    return None


def element_type_label(element_type: str) -> str:
    """Human readable label for an element type, e.g. ``Text Editor``."""
    if element_type in _TYPE_LABELS:
        return _TYPE_LABELS[element_type]
    words = [word for word in element_type.split("-") if word]
    return " ".join(word.capitalize() for word in words) or "Widget"


def render_tree(elements: Iterable[Element], indent: str = "  ") -> List[str]:
    """Indented ``Label #id`` lines for an element tree, e.g. ``Text Editor #t1``."""
    lines: List[str] = []

    def _visit(element: Element, depth: int) -> None:
        lines.append(f"{indent * depth}{element_type_label(element.type)} #{element.id}")
        for child in element.children:
            _visit(child, depth + 1)

    for element in elements:
        _visit(element, 0)
    return lines


__all__ = [
    "Converter",
    "GeneratedComponent",
    "element_type_label",
    "find_element",
    "render_tree",
]

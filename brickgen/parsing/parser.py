"""Extract the builder's element tree from page markup."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List, Sequence, Set

from bs4 import BeautifulSoup, Tag

from ..config import MarkerConfig, ParserConfig
from ..logging import get_logger
from ..models import DecodeWarning, Element, ParsedPage
from .errors import NotFoundError
from .fetch import PageFetcher, decode_document

_RESERVED_ATTRIBUTES = {"style", "class", "id"}
_IGNORED_WIDGET_CLASSES = {"container", "wrap"}


class MarkupParser:
    """Builds ``Element`` trees out of Elementor markup.

    A parse is all-or-nothing: the fetch, the document decode and the root
    lookup either all succeed or an error propagates and no tree is returned.
    """

    def __init__(
        self,
        markers: MarkerConfig | None = None,
        parser_config: ParserConfig | None = None,
        fetcher: PageFetcher | None = None,
    ) -> None:
        self.markers = markers or MarkerConfig()
        self.parser_config = parser_config or ParserConfig()
        self.fetcher = fetcher or PageFetcher()
        self.logger = get_logger("parser")

    def parse_url(self, url: str) -> ParsedPage:
        html = self.fetcher.fetch(url)
        return self.parse_html(html, source=url)

    async def parse_url_async(self, url: str) -> ParsedPage:
        html = await self.fetcher.fetch_async(url)
        return self.parse_html(html, source=url)

    def parse_file(self, path: Path) -> ParsedPage:
        html = decode_document(path.read_bytes(), source=str(path))
        return self.parse_html(html, source=str(path))

    def parse_source(self, source: str) -> ParsedPage:
        """Parse a URL or a local file path."""
        if source.startswith(("http://", "https://")):
            return self.parse_url(source)
        return self.parse_file(Path(source).expanduser())

    def parse_html(self, html: str, *, source: str = "document") -> ParsedPage:
        soup = BeautifulSoup(html, "html.parser")
        title = _page_title(soup)

        root = soup.select_one(f".{self.markers.root_class}")
        if root is None:
            raise NotFoundError(source, self.markers.root_class)

        state = _ParseState()
        global_styles = self._extract_global_styles(soup)
        elements = self._parse_children(root, state)

        page = ParsedPage(
            title=title,
            elements=elements,
            global_styles=global_styles,
            warnings=state.warnings,
        )
        self.logger.info(
            "Parsed %d elements (%d top-level) from %s",
            page.element_count(),
            len(elements),
            source,
        )
        return page

    def _extract_global_styles(self, soup: BeautifulSoup) -> Dict[str, str]:
        styles: Dict[str, str] = {}
        scope = soup.head or soup
        for style in scope.find_all("style"):
            text = style.get_text()
            if self.markers.builder_name in text:
                styles[f"style_{len(styles)}"] = text
        return styles

    def _parse_children(self, node: Tag, state: "_ParseState") -> List[Element]:
        return [self._parse_element(child, state) for child in self._structural_children(node)]

    def _structural_children(self, node: Tag) -> Iterator[Tag]:
        """Yield the nearest builder-element descendants, looking through wrappers."""
        for child in node.children:
            if not isinstance(child, Tag):
                continue
            if self.markers.element_class in _class_list(child):
                yield child
            else:
                yield from self._structural_children(child)

    def _parse_element(self, node: Tag, state: "_ParseState") -> Element:
        classes = _class_list(node)
        element_type = self._resolve_type(classes)
        element_id = state.claim_id(_attr_text(node.get("id")))

        settings: Dict[str, Any] = {}
        attributes: Dict[str, str] = {}
        prefix = self.markers.data_prefix
        for name, value in node.attrs.items():
            text = _attr_text(value)
            if name.startswith(prefix):
                key = name[len(prefix):]
                settings[key] = self._decode_setting(key, text, element_id, state)
            elif name not in _RESERVED_ATTRIBUTES:
                attributes[name] = text

        styles = self._parse_styles(_attr_text(node.get("style")), element_id, state)

        content = None
        if any(marker in element_type for marker in self.parser_config.content_types):
            content = node.decode_contents()

        children = self._parse_children(node, state)

        return Element(
            id=element_id,
            type=element_type,
            tag=node.name.lower(),
            settings=settings,
            classes=classes,
            styles=styles,
            content=content,
            attributes=attributes,
            children=children,
        )

    def _resolve_type(self, classes: Sequence[str]) -> str:
        markers = self.markers
        if markers.section_class in classes:
            return "section"
        if markers.column_class in classes:
            return "column"
        if markers.widget_class in classes:
            for cls in classes:
                if not cls.startswith(markers.widget_prefix):
                    continue
                name = cls[len(markers.widget_prefix):]
                if name and name not in _IGNORED_WIDGET_CLASSES:
                    return name
        return "widget"

    def _decode_setting(self, key: str, raw: str, element_id: str, state: "_ParseState") -> Any:
        try:
            return json.loads(raw)
        except ValueError as exc:
            if raw.lstrip().startswith(("{", "[")):
                state.warn(element_id, key, raw, f"invalid JSON: {exc}", self.logger)
            return raw

    def _parse_styles(self, style_attr: str, element_id: str, state: "_ParseState") -> Dict[str, str]:
        styles: Dict[str, str] = {}
        for segment in style_attr.split(";"):
            if not segment.strip():
                continue
            if ":" not in segment:
                state.warn(element_id, "style", segment.strip(), "missing ':' separator", self.logger)
                continue
            prop, value = segment.split(":", 1)
            prop = prop.strip()
            value = value.strip()
            if prop and value:
                styles[prop] = value
        return styles


class _ParseState:
    """Per-parse bookkeeping: id uniqueness and collected warnings."""

    def __init__(self) -> None:
        self.seen_ids: Set[str] = set()
        self.warnings: List[DecodeWarning] = []
        self._counter = 0

    def claim_id(self, candidate: str) -> str:
        if not candidate:
            self._counter += 1
            candidate = f"elementor-auto-{self._counter}"
        unique = candidate
        suffix = 2
        while unique in self.seen_ids:
            unique = f"{candidate}-{suffix}"
            suffix += 1
        self.seen_ids.add(unique)
        return unique

    def warn(self, source: str, key: str, raw: str, reason: str, logger) -> None:
        warning = DecodeWarning(source=source, key=key, raw=raw, reason=reason)
        self.warnings.append(warning)
        logger.debug("Kept raw value for %s[%s]: %s", source, key, reason)


def classify_classes(classes: Sequence[str], builder_name: str = "elementor") -> Dict[str, List[str]]:
    """Group class tokens into layout, animation, responsive and custom buckets."""
    result: Dict[str, List[str]] = {
        "layout": [],
        "animation": [],
        "responsive": [],
        "custom": [],
    }
    for cls in classes:
        if cls.startswith(f"{builder_name}-"):
            result["layout"].append(cls)
        elif cls.startswith("animated") or "animation" in cls:
            result["animation"].append(cls)
        elif "hidden-" in cls or "visible-" in cls:
            result["responsive"].append(cls)
        elif builder_name not in cls:
            result["custom"].append(cls)
    return result


def _page_title(soup: BeautifulSoup) -> str:
    if soup.title is not None:
        text = soup.title.get_text().strip()
        if text:
            return text
    return "Untitled Page"


def _class_list(node: Tag) -> List[str]:
    raw = node.get("class") or []
    if isinstance(raw, str):
        raw = raw.split()
    ordered: List[str] = []
    for cls in raw:
        if cls not in ordered:
            ordered.append(cls)
    return ordered


def _attr_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(str(item) for item in value)
    return str(value)


__all__ = ["MarkupParser", "classify_classes"]

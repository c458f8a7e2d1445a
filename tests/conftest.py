from __future__ import annotations

import pytest

from brickgen.config import MarkerConfig, ParserConfig
from brickgen.parsing import MarkupParser, PageFetcher

from tests._fixtures import pages

ALL_CONTENT_TYPES = ["text", "heading", "button", "image", "video"]


@pytest.fixture
def parser() -> MarkupParser:
    """A parser with stock Elementor markers and no network access."""
    return MarkupParser(fetcher=PageFetcher(fetch=_offline))


@pytest.fixture
def rich_parser() -> MarkupParser:
    """A parser that also captures button, image and video widget markup."""
    return MarkupParser(
        MarkerConfig(),
        ParserConfig(content_types=list(ALL_CONTENT_TYPES)),
        PageFetcher(fetch=_offline),
    )


@pytest.fixture
def hero_html() -> str:
    return pages.hero_page()


def _offline(url: str) -> str:
    raise AssertionError(f"unexpected fetch of {url}")

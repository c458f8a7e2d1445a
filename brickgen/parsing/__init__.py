"""Markup parsing: fetch a page and extract the builder's element tree."""

from .errors import DocumentDecodeError, FetchError, NotFoundError, ParseError
from .fetch import PageFetcher, decode_document
from .parser import MarkupParser, classify_classes

__all__ = [
    "DocumentDecodeError",
    "FetchError",
    "MarkupParser",
    "NotFoundError",
    "PageFetcher",
    "ParseError",
    "classify_classes",
    "decode_document",
]

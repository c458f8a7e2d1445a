"""Failures raised while loading and parsing builder markup."""

from __future__ import annotations

from typing import Optional


class ParseError(RuntimeError):
    """Base class for failures that abort a parse."""


class FetchError(ParseError):
    """Raised when the source document cannot be retrieved."""

    def __init__(self, url: str, reason: str, *, status: Optional[int] = None) -> None:
        self.url = url
        self.reason = reason
        self.status = status
        prefix = f"HTTP {status} " if status is not None else ""
        super().__init__(f"Failed to fetch {url}: {prefix}{reason}".rstrip())


class DocumentDecodeError(ParseError):
    """Raised when fetched bytes cannot be decoded into markup text."""


class NotFoundError(ParseError):
    """Raised when a document contains no builder root container."""

    def __init__(self, source: str, root_class: str) -> None:
        self.source = source
        self.root_class = root_class
        super().__init__(
            f"No Elementor content found in {source}: the page loaded, but it has no "
            f"'.{root_class}' container. Only pages built with Elementor can be converted."
        )


__all__ = ["DocumentDecodeError", "FetchError", "NotFoundError", "ParseError"]

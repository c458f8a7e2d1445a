"""One-shot HTTP retrieval of source documents."""

from __future__ import annotations

import asyncio
from typing import Callable, Optional
from urllib.error import HTTPError, URLError
from urllib.parse import urlparse
from urllib.request import Request, urlopen

from ..config import FetchConfig
from ..logging import get_logger
from .errors import DocumentDecodeError, FetchError

FetchFunc = Callable[[str], str]


class PageFetcher:
    """GETs a page, following redirects, and returns its decoded body text."""

    def __init__(
        self,
        config: FetchConfig | None = None,
        *,
        fetch: FetchFunc | None = None,
    ) -> None:
        self.config = config or FetchConfig()
        self._fetch = fetch or self._http_fetch
        self.logger = get_logger("fetch")

    def fetch(self, url: str) -> str:
        """Return the document body for ``url`` or raise ``FetchError``."""
        self.logger.info("Fetching %s", url)
        return self._fetch(url)

    async def fetch_async(self, url: str) -> str:
        """Await a single fetch; the blocking request runs in the default executor."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.fetch, url)

    def _http_fetch(self, url: str) -> str:
        parsed = urlparse(url)
        if parsed.scheme not in {"http", "https"} or not parsed.netloc:
            raise FetchError(url, "only absolute http(s) URLs are supported")

        request = Request(
            url,
            headers={
                "User-Agent": self.config.user_agent,
                "Accept": "text/html,application/xhtml+xml;q=0.9,*/*;q=0.8",
            },
            method="GET",
        )
        try:
            with urlopen(request, timeout=self.config.timeout) as response:  # type: ignore[arg-type]
                raw = response.read()
                charset = _response_charset(response)
        except HTTPError as exc:
            raise FetchError(url, str(exc.reason), status=exc.code) from exc
        except URLError as exc:
            raise FetchError(url, str(exc.reason)) from exc
        except (TimeoutError, OSError) as exc:
            raise FetchError(url, str(exc) or exc.__class__.__name__) from exc

        self.logger.debug("Fetched %d bytes from %s", len(raw), url)
        return decode_document(raw, charset, source=url)


def decode_document(raw: bytes, charset: Optional[str] = None, *, source: str = "document") -> str:
    """Decode raw document bytes using the declared charset, then UTF-8."""
    candidates = [charset] if charset else []
    candidates.append("utf-8")
    for encoding in candidates:
        try:
            return raw.decode(encoding)
        except LookupError:
            continue
        except UnicodeDecodeError:
            continue
    raise DocumentDecodeError(
        f"Could not decode {source} as {' or '.join(candidates)}"
    )


def _response_charset(response: object) -> Optional[str]:
    headers = getattr(response, "headers", None)
    if headers is None or not hasattr(headers, "get_content_charset"):
        return None
    return headers.get_content_charset()


__all__ = ["FetchFunc", "PageFetcher", "decode_document"]

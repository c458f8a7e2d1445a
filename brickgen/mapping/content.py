"""Pattern helpers for pulling values out of raw widget markup."""

from __future__ import annotations

import html
import re
from typing import Optional

_BUILDER_CLASS_ATTR = re.compile(r"\sclass=\"[^\"]*elementor[^\"]*\"")
_BUILDER_DATA_ATTR = re.compile(r"\sdata-elementor[^=]*=\"[^\"]*\"")
_TAG_PATTERN = re.compile(r"</?[^>]+(>|$)")
_HEADING_TAG = re.compile(r"<(h[1-6])\b", re.IGNORECASE)
_IMG_SRC = re.compile(r"<img\b[^>]*?\ssrc=[\"']([^\"']*)[\"']", re.IGNORECASE)
_TEXT_NODE = re.compile(r">([^<]+)<")
_HREF = re.compile(r"href=[\"']([^\"']*)[\"']", re.IGNORECASE)
_TARGET_BLANK = re.compile(r"target=[\"']_blank[\"']", re.IGNORECASE)
_YOUTUBE_EMBED = re.compile(r"youtube\.com/embed/([^\"&?/\s]+)")
_YOUTUBE_ANY = re.compile(r"(?:youtube\.com/(?:embed/|watch\?v=)|youtu\.be/)([^\"&?/\s]+)")
_VIMEO = re.compile(r"vimeo\.com/(?:video/)?([0-9]+)")
_MEDIA_FILE = re.compile(r"src=[\"']([^\"']*?\.(?:mp4|webm|ogg))[\"']", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")


def sanitize_html(markup: str) -> str:
    """Strip builder classes and data attributes, keeping the rest of the markup."""
    cleaned = _BUILDER_CLASS_ATTR.sub("", markup)
    cleaned = _BUILDER_DATA_ATTR.sub("", cleaned)
    return cleaned.strip()


def strip_tags(markup: str) -> str:
    """Reduce markup to its visible text with collapsed whitespace."""
    text = _TAG_PATTERN.sub(" ", markup or "")
    return _WHITESPACE.sub(" ", html.unescape(text)).strip()


def find_heading_tag(markup: str) -> Optional[str]:
    match = _HEADING_TAG.search(markup or "")
    return match.group(1).lower() if match else None


def find_image_src(markup: str) -> Optional[str]:
    match = _IMG_SRC.search(markup or "")
    return match.group(1) if match and match.group(1) else None


def find_link_text(markup: str) -> Optional[str]:
    """Return the first non-blank text node in the markup."""
    for match in _TEXT_NODE.finditer(markup or ""):
        text = _WHITESPACE.sub(" ", html.unescape(match.group(1))).strip()
        if text:
            return text
    return None


def find_href(markup: str) -> Optional[str]:
    match = _HREF.search(markup or "")
    return match.group(1) if match and match.group(1) else None


def opens_new_window(markup: str) -> bool:
    return bool(_TARGET_BLANK.search(markup or ""))


def find_youtube_id(markup: str, *, embed_only: bool = True) -> Optional[str]:
    pattern = _YOUTUBE_EMBED if embed_only else _YOUTUBE_ANY
    match = pattern.search(markup or "")
    return match.group(1) if match else None


def find_vimeo_id(markup: str) -> Optional[str]:
    match = _VIMEO.search(markup or "")
    return match.group(1) if match else None


def find_media_file(markup: str) -> Optional[str]:
    match = _MEDIA_FILE.search(markup or "")
    return match.group(1) if match else None


__all__ = [
    "find_heading_tag",
    "find_href",
    "find_image_src",
    "find_link_text",
    "find_media_file",
    "find_vimeo_id",
    "find_youtube_id",
    "opens_new_window",
    "sanitize_html",
    "strip_tags",
]

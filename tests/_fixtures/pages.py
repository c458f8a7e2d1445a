"""Helpers for assembling Elementor page markup in tests."""

from __future__ import annotations

import html
import json
from typing import Any, Iterable, Mapping, Optional


def _attrs(
    classes: Iterable[str],
    *,
    element_id: Optional[str] = None,
    style: Optional[str] = None,
    data: Optional[Mapping[str, Any]] = None,
    extra: Optional[Mapping[str, str]] = None,
) -> str:
    parts = []
    if element_id is not None:
        parts.append(f'id="{element_id}"')
    parts.append(f'class="{" ".join(classes)}"')
    for key, value in (data or {}).items():
        raw = value if isinstance(value, str) else json.dumps(value)
        parts.append(f'data-{key}="{html.escape(raw, quote=True)}"')
    for key, value in (extra or {}).items():
        parts.append(f'{key}="{html.escape(value, quote=True)}"')
    if style is not None:
        parts.append(f'style="{style}"')
    return " ".join(parts)


def widget(
    kind: str,
    inner: str = "",
    *,
    element_id: Optional[str] = None,
    classes: Iterable[str] = (),
    style: Optional[str] = None,
    data: Optional[Mapping[str, Any]] = None,
) -> str:
    """A widget node with Elementor's inner ``widget-container`` wrapper."""
    names = ["elementor-element", "elementor-widget", f"elementor-widget-{kind}", *classes]
    attrs = _attrs(names, element_id=element_id, style=style, data=data)
    return f'<div {attrs}><div class="elementor-widget-container">{inner}</div></div>'


def column(
    *children: str,
    element_id: Optional[str] = None,
    size: Optional[int] = None,
    classes: Iterable[str] = (),
    style: Optional[str] = None,
    data: Optional[Mapping[str, Any]] = None,
) -> str:
    names = ["elementor-element", "elementor-column"]
    if size is not None:
        names.append(f"elementor-col-{size}")
    names.extend(classes)
    attrs = _attrs(names, element_id=element_id, style=style, data=data)
    body = "".join(children)
    return f'<div {attrs}><div class="elementor-widget-wrap">{body}</div></div>'


def section(
    *children: str,
    element_id: Optional[str] = None,
    classes: Iterable[str] = (),
    style: Optional[str] = None,
    data: Optional[Mapping[str, Any]] = None,
) -> str:
    names = ["elementor-element", "elementor-section", *classes]
    attrs = _attrs(names, element_id=element_id, style=style, data=data)
    body = "".join(children)
    return f'<section {attrs}><div class="elementor-container">{body}</div></section>'


def page(
    *body: str,
    title: Optional[str] = "Fixture Page",
    styles: Iterable[str] = (),
    root: bool = True,
) -> str:
    """A full HTML document; ``root=False`` omits the Elementor container."""
    head = f"<title>{title}</title>" if title is not None else ""
    head += "".join(f"<style>{css}</style>" for css in styles)
    content = "".join(body)
    if root:
        content = f'<div class="elementor elementor-42">{content}</div>'
    return f"<!DOCTYPE html><html><head>{head}</head><body>{content}</body></html>"


def hero_page() -> str:
    """A two-column hero section: heading, text and button beside an image."""
    return page(
        section(
            column(
                widget(
                    "heading",
                    '<h1 class="elementor-heading-title elementor-size-default">Build faster</h1>',
                    element_id="hero-heading",
                ),
                widget(
                    "text-editor",
                    "<p>Ship <strong>pages</strong> in minutes.</p>",
                    element_id="hero-text",
                ),
                widget(
                    "button",
                    '<a class="elementor-button" href="/start">Get started</a>',
                    element_id="hero-button",
                    classes=["elementor-button-outline"],
                    style="background-color: #2040ff",
                ),
                element_id="hero-left",
                size=50,
            ),
            column(
                widget(
                    "image",
                    '<img src="https://cdn.example.com/hero.png" alt="">',
                    element_id="hero-image",
                    data={
                        "settings": {
                            "alt_text": "Dashboard",
                            "image": {"url": "https://cdn.example.com/hero.png"},
                        }
                    },
                ),
                element_id="hero-right",
                size=50,
            ),
            element_id="hero",
            classes=["elementor-section-full-width"],
            style="background-color: #ffffff; padding: 40px 20px",
            data={"settings": {"structure": "20"}},
        ),
        styles=[".elementor-42 .elementor-element { margin: 0 }", "body { color: black }"],
        title="Acme Landing",
    )


__all__ = ["column", "hero_page", "page", "section", "widget"]

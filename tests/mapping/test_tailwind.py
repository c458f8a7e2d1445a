"""Tests for brickgen.mapping.tailwind."""

from __future__ import annotations

import pytest

from brickgen.mapping import tailwind


@pytest.mark.parametrize(
    ("size", "expected"),
    [
        (0, "1/4"),
        (25, "1/4"),
        (33.33, "1/3"),
        (50, "1/2"),
        (66.66, "2/3"),
        (75, "3/4"),
        (90, "full"),
        (100, "full"),
    ],
)
def test_map_column_width_thresholds(size, expected) -> None:
    assert tailwind.map_column_width(size) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("12px", "xs"),
        ("16px", "base"),
        ("24px", "2xl"),
        ("1.5rem", "2xl"),
        ("2em", "4xl"),
        ("12pt", "base"),
        ("72px", "6xl"),
        ("120%", "base"),
        ("large", "base"),
    ],
)
def test_map_font_size_buckets(value, expected) -> None:
    assert tailwind.map_font_size(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("0", "none"),
        ("0px", "none"),
        ("1px", "px"),
        ("2px", "0.5"),
        ("10px", "3"),
        ("1rem", "4"),
        ("192px", "48"),
        ("500px", "large"),
        ("50%", "normal"),
        ("auto", "normal"),
    ],
)
def test_map_spacing_scale(value, expected) -> None:
    assert tailwind.map_spacing(value) == expected


def test_map_padding_shorthands() -> None:
    assert tailwind.map_padding("16px") == "4"
    assert tailwind.map_padding("40px 20px") == "10-y 5-x"
    assert tailwind.map_padding("8px 100px 32px 100px") == "2-t 8-b"
    assert tailwind.map_padding("1px 2px 3px") == "normal"
    assert tailwind.map_margin("40px 20px") == tailwind.map_padding("40px 20px")


@pytest.mark.parametrize(
    ("value", "color"),
    [
        ("#fff", "gray-100"),
        ("#FFFFFF", "gray-100"),
        ("#000000", "gray-900"),
        ("#ff0000", "red-500"),
        ("#00cc00", "green-500"),
        ("#0000ff", "blue-500"),
        ("#ffcc00", "yellow-500"),
        ("#cc00cc", "purple-500"),
        ("#808080", "gray-500"),
        ("#12345", "gray-500"),
        ("rgb(255, 0, 0)", "red-500"),
        ("rgba(0, 0, 255, 0.8)", "blue-500"),
        ("rgba(0, 0, 255, 0.2)", "transparent"),
        ("transparent", "transparent"),
        ("none", "transparent"),
        ("pink", "pink-500"),
        ("papayawhip", "gray-500"),
        ("", "gray-500"),
    ],
)
def test_map_color_buckets(value, color) -> None:
    assert tailwind.map_color(value).color == color


def test_color_variants_rewrite_only_the_prefix() -> None:
    assert tailwind.map_background_color("#ff0000").class_name == "bg-red-500"
    assert tailwind.map_text_color("#ff0000").class_name == "text-red-500"
    assert tailwind.map_border_color("#ff0000").class_name == "border-red-500"
    assert tailwind.map_text_color("#ff0000").color == "red-500"


def test_background_color_prop_shape() -> None:
    assert tailwind.map_background_color("white").to_prop() == {
        "color": "white",
        "className": "bg-white",
    }


@pytest.mark.parametrize(
    ("token", "bucket"),
    [
        ("pink-500", "pink"),
        ("purple-500", "purple"),
        ("blue-500", "blue"),
        ("green-500", "green"),
        ("yellow-500", "yellow"),
        ("red-500", "red"),
        ("gray-100", "gray"),
        ("transparent", "gray"),
    ],
)
def test_button_color_bucket(token, bucket) -> None:
    assert tailwind.button_color_bucket(token) == bucket


def test_map_button_color_returns_value_and_label() -> None:
    assert tailwind.map_button_color("#0000ff") == {"value": "blue", "label": "Blue"}


def test_to_pixels_units() -> None:
    assert tailwind.to_pixels("10px") == 10
    assert tailwind.to_pixels("2rem") == 32
    assert tailwind.to_pixels("3pt") == pytest.approx(3.999)
    assert tailwind.to_pixels("25%") is None
    assert tailwind.to_pixels("wide") is None

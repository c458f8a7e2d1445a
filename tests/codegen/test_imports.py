"""Tests for brickgen.codegen.imports."""

from __future__ import annotations

from brickgen.codegen.imports import collect_import_groups, render_imports
from brickgen.models import ComponentDescription, ComponentKind


def _component(kind: ComponentKind, *children: ComponentDescription, **kwargs) -> ComponentDescription:
    return ComponentDescription(
        name=f"{kind.value}-block",
        label=kind.value.title(),
        category="Other",
        kind=kind,
        type=kind.value,
        children=list(children),
        **kwargs,
    )


def test_generic_component_only_needs_base_group() -> None:
    assert collect_import_groups(_component(ComponentKind.GENERIC)) == {"base"}


def test_groups_are_collected_from_the_whole_subtree() -> None:
    tree = _component(
        ComponentKind.COLUMN,
        _component(ComponentKind.HEADING),
        _component(ComponentKind.COLUMN, _component(ComponentKind.VIDEO)),
    )

    assert collect_import_groups(tree) == {"base", "richtext", "video"}


def test_repeater_group_follows_repeater_items() -> None:
    section = _component(ComponentKind.SECTION, repeater_items={"buttons": [{"text": "Go"}]})

    assert "repeater" in collect_import_groups(section)


def test_kind_falls_back_to_type_then_name() -> None:
    by_type = ComponentDescription(name="x-block", label="X", category="Other", type="heading")
    by_name = ComponentDescription(name="image-block", label="Image", category="Media")

    assert "richtext" in collect_import_groups(by_type)
    assert "image" in collect_import_groups(by_name)


def test_render_imports_merges_one_line_per_module() -> None:
    lines = render_imports({"richtext", "base", "image"})

    assert lines == [
        "import React from 'react'",
        "import classNames from 'classnames'",
        "import { Image, Link, RichText, types } from 'react-bricks/rsc'",
        "import { paddingBordersSideGroup } from '@reactbricksui/LayoutSideProps'",
        "import { textColors } from '@reactbricksui/colors'",
        "import { photos } from '@reactbricksui/shared/defaultImages'",
    ]


def test_render_imports_is_order_independent() -> None:
    assert render_imports(["section", "base", "video"]) == render_imports(["video", "section", "base"])

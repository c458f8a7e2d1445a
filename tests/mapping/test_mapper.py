"""Tests for brickgen.mapping.mapper."""

from __future__ import annotations

from brickgen.mapping import mapper
from brickgen.mapping.mapper import map_element
from brickgen.models import ComponentKind, Element


def _element(element_type: str, **kwargs) -> Element:
    kwargs.setdefault("id", f"{element_type}-1")
    kwargs.setdefault("tag", "div")
    return Element(type=element_type, **kwargs)


def test_every_kind_has_a_refiner() -> None:
    assert set(mapper._REFINERS) == set(ComponentKind)


def test_base_fields_for_widget_types() -> None:
    component = map_element(_element("text-editor", content="<p>Hi</p>"))

    assert component.name == "text-block"
    assert component.label == "Text"
    assert component.category == "Typography"
    assert component.kind is ComponentKind.TEXT
    assert component.type == "text-editor"


def test_base_props_defaults_without_styles() -> None:
    component = map_element(_element("spacer"))

    assert component.props == {
        "backgroundColor": {"color": "white", "className": "bg-white"},
        "paddingTop": "normal",
        "paddingBottom": "normal",
    }


def test_base_props_read_inline_styles() -> None:
    element = _element(
        "spacer",
        styles={
            "background-color": "#ff0000",
            "padding-top": "8px",
            "padding-bottom": "2rem",
            "margin": "0",
            "border-top": "1px solid #000",
            "border-bottom": "none",
            "text-align": "center",
        },
    )

    props = map_element(element).props

    assert props["backgroundColor"] == {"color": "red-500", "className": "bg-red-500"}
    assert props["paddingTop"] == "2"
    assert props["paddingBottom"] == "8"
    assert props["margin"] == "none"
    assert props["borderTop"] is True
    assert props["borderBottom"] is False
    assert props["textAlign"] == "center"


def test_padding_shorthand_replaces_side_values() -> None:
    props = map_element(_element("spacer", styles={"padding": "40px 20px"})).props

    assert props["padding"] == "10-y 5-x"
    assert props["paddingTop"] == "normal"


def test_category_table() -> None:
    assert mapper.component_category("section") == "Layout"
    assert mapper.component_category("column") == "Layout"
    assert mapper.component_category("video-playlist") == "Media"
    assert mapper.component_category("call-button") == "Call to Action"
    assert mapper.component_category("form") == "Forms"
    assert mapper.component_category("icon-list") == "Other"


def test_section_structure_full_width_and_background_image() -> None:
    element = _element(
        "section",
        tag="section",
        classes=["elementor-element", "elementor-section", "elementor-section-full-width"],
        settings={"settings": {"structure": "20"}},
        styles={"background-image": "url('https://x.test/bg.jpg')"},
    )

    props = map_element(element).props

    assert props["structure"] == "20"
    assert props["width"] == "full"
    assert props["backgroundImage"] == {
        "source": {"src": "https://x.test/bg.jpg"},
        "position": "center center",
    }


def test_section_background_position_override() -> None:
    element = _element(
        "section",
        styles={
            "background-image": "url(https://x.test/bg.jpg)",
            "background-position": "top left",
        },
    )

    assert map_element(element).props["backgroundImage"]["position"] == "top left"


def test_column_width_from_setting_and_class() -> None:
    from_setting = map_element(_element("column", settings={"_column_size": 33}))
    from_class = map_element(_element("column", classes=["elementor-column", "elementor-col-66"]))
    nested = map_element(_element("column", settings={"settings": {"_column_size": {"size": 80}}}))
    missing = map_element(_element("column"))

    assert from_setting.props["width"] == "1/3"
    assert from_class.props["width"] == "2/3"
    assert nested.props["width"] == "full"
    assert "width" not in missing.props


def test_heading_tag_title_size_and_weight() -> None:
    element = _element(
        "heading",
        content='<h3 class="elementor-heading-title elementor-size-default">Hello</h3>',
        styles={"font-size": "1.5rem", "font-weight": "800"},
    )

    props = map_element(element).props

    assert props["tag"] == "h3"
    assert props["title"] == {"value": "<h3>Hello</h3>"}
    assert props["size"] == "2xl"
    assert props["extraBoldTitle"] is True


def test_heading_tag_prefers_element_tag_and_defaults_to_h2() -> None:
    assert map_element(_element("heading", tag="h1", content="<h3>x</h3>")).props["tag"] == "h1"
    assert map_element(_element("heading", tag="div", content="<h4>x</h4>")).props["tag"] == "h4"
    assert map_element(_element("heading")).props["tag"] == "h2"


def test_heading_weight_keyword_and_light_weight() -> None:
    bold = map_element(_element("heading", styles={"font-weight": "bold"}))
    light = map_element(_element("heading", styles={"font-weight": "300"}))

    assert bold.props["extraBoldTitle"] is True
    assert light.props["extraBoldTitle"] is False


def test_text_value_is_sanitized() -> None:
    element = _element(
        "text-editor",
        content='<p class="elementor-text" data-elementor-id="4">Body <em>copy</em></p>',
    )

    assert map_element(element).props["text"] == {"value": "<p>Body <em>copy</em></p>"}


def test_image_source_priority_alt_and_flags() -> None:
    element = _element(
        "image",
        content='<img class="attachment" src="https://x.test/a.png" alt="">',
        settings={"settings": {"image": {"url": "https://x.test/other.png"}, "alt_text": "Alt"}},
        classes=["elementor-widget-image", "is-rounded"],
        styles={"box-shadow": "0 0 4px #000"},
    )

    props = map_element(element).props

    assert props["imageSource"] == {"src": "https://x.test/a.png", "alt": "Alt"}
    assert props["isRounded"] is True
    assert props["hasShadow"] is True


def test_image_source_falls_back_to_settings_url_and_size() -> None:
    element = _element(
        "image",
        settings={"settings": {"image": {"url": "https://x.test/other.png"}, "image_size": "large"}},
    )

    props = map_element(element).props

    assert props["imageSource"] == {"src": "https://x.test/other.png", "alt": ""}
    assert props["size"] == "large"
    assert "isRounded" not in props


def test_button_reads_markup_and_classes() -> None:
    element = _element(
        "button",
        content='<a class="elementor-button" href="/signup" target="_blank"><span>Sign up</span></a>',
        classes=["elementor-widget-button", "elementor-button-outline", "elementor-size-xl"],
        styles={"background-color": "#0000ff"},
    )

    props = map_element(element).props

    assert props["text"] == "Sign up"
    assert props["href"] == "/signup"
    assert props["isTargetBlank"] is True
    assert props["type"] == "outline"
    assert props["buttonColor"] == {"value": "blue", "label": "Blue"}
    assert props["isBigButton"] is True


def test_button_variant_precedence() -> None:
    link = _element("button", classes=["elementor-button-link", "elementor-button-outline"])
    solid = _element("button", classes=["elementor-button-solid", "elementor-button-outline"])
    plain = _element("button")

    assert map_element(link).props["type"] == "link"
    assert map_element(solid).props["type"] == "solid"
    assert map_element(plain).props["type"] == "solid"


def test_video_streaming_from_embed_markup() -> None:
    element = _element(
        "video",
        content='<iframe src="https://www.youtube.com/embed/abc123?feature=oembed"></iframe>',
    )

    props = map_element(element).props

    assert props["type"] == "streaming"
    assert props["platform"] == "youtube"
    assert props["videoId"] == "abc123"
    assert "videoFile" not in props


def test_video_vimeo_and_settings_urls() -> None:
    vimeo = map_element(_element("video", content='<iframe src="https://player.vimeo.com/video/76979871"></iframe>'))
    from_settings = map_element(
        _element("video", settings={"settings": {"youtube_url": "https://www.youtube.com/watch?v=XYZ987"}})
    )

    assert (vimeo.props["platform"], vimeo.props["videoId"]) == ("vimeo", "76979871")
    assert (from_settings.props["platform"], from_settings.props["videoId"]) == ("youtube", "XYZ987")


def test_video_file_from_video_tag() -> None:
    props = map_element(_element("video", content='<video src="x.mp4"></video>')).props

    assert props["type"] == "file"
    assert props["videoFile"] == {"url": "x.mp4"}
    assert "platform" not in props


def test_unknown_type_passes_content_through() -> None:
    component = map_element(_element("icon-list", content="<ul><li>One</li></ul>"))

    assert component.name == "icon-list-block"
    assert component.label == "Icon List"
    assert component.category == "Other"
    assert component.kind is ComponentKind.GENERIC
    assert component.props["content"] == "<ul><li>One</li></ul>"


def test_empty_type_still_has_names() -> None:
    component = map_element(_element(""))

    assert component.name == "widget-block"
    assert component.label == "Widget"
    assert component.category == "Other"


def test_children_are_mapped_in_order() -> None:
    children = [_element(kind, id=f"c{index}") for index, kind in enumerate(["heading", "image", "spacer"])]
    element = _element("column", children=children)

    component = map_element(element)

    assert len(component.children) == len(element.children)
    assert [child.type for child in component.children] == ["heading", "image", "spacer"]


def test_subtree_mapping_matches_mapping_from_root() -> None:
    heading = _element("heading", content="<h2>Hi</h2>")
    column = _element("column", children=[heading], settings={"_column_size": 50})
    section = _element("section", children=[column])

    from_root = map_element(section).children[0]
    from_subtree = map_element(column)

    assert from_root.to_dict() == from_subtree.to_dict()


def test_section_collects_at_most_two_buttons() -> None:
    buttons = [
        _element(
            "button",
            id=f"b{index}",
            content=f'<a href="/b{index}">Button {index}</a>',
            styles={"background-color": "#ff0000"},
        )
        for index in range(3)
    ]
    section = _element("section", children=[_element("column", children=buttons)])

    component = map_element(section)

    assert component.repeater_items == {
        "buttons": [
            {"type": "solid", "text": "Button 0", "href": "/b0", "isTargetBlank": False, "buttonColor": "red"},
            {"type": "solid", "text": "Button 1", "href": "/b1", "isTargetBlank": False, "buttonColor": "red"},
        ]
    }
    assert "repeaterItems" in component.to_dict()


def test_section_without_buttons_has_no_repeater() -> None:
    assert map_element(_element("section")).repeater_items is None

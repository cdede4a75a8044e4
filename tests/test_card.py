import json

import pytest

from larkit.card.card import card
from larkit.card.elements import field, hr, markdown, text, url
from larkit.card.layout import div


def test_default_card_render():
    rendered = card().render()
    assert rendered == {
        "config": {"wide_screen_mode": True, "enable_forward": True, "update_multi": False},
        "header": {"title": text("").render()},
    }


def test_config_flags():
    config = card().no_forward().update_multi(True).render()["config"]
    assert config["enable_forward"] is False
    assert config["update_multi"] is True
    assert config["wide_screen_mode"] is True


def test_title_and_elements():
    body = div(field(text("整排内容")))
    rendered = card(body, hr()).title("卡片标题 Card Title").render()
    assert rendered["header"]["title"] == text("卡片标题 Card Title").render()
    assert rendered["elements"] == [body.render(), hr().render()]


def test_card_link():
    link = url().href("https://example.com/")
    assert card().link(link).render()["card_link"] == link.render()


@pytest.mark.parametrize(
    "method",
    [
        "blue",
        "wathet",
        "turquoise",
        "green",
        "yellow",
        "orange",
        "red",
        "carmine",
        "violet",
        "purple",
        "indigo",
        "grey",
    ],
)
def test_header_templates(method):
    block = card()
    assert getattr(block, method)() is block
    assert block.render()["header"]["template"] == method


def test_json_round_trip_and_str():
    block = card(div().text(text("Text Content")), markdown("**x**")).wathet().title("T")
    encoded = block.to_json()
    assert str(block) == encoded
    assert json.loads(encoded) == block.render()


def test_json_is_indented_with_two_spaces():
    lines = card().to_json().splitlines()
    assert lines[0] == "{"
    assert lines[1].startswith('  "config": {')


def test_json_escapes_html_and_keeps_unicode():
    block = card(markdown("<font color='green'>领先</font> & more"))
    encoded = block.to_json()
    assert "<" not in encoded and ">" not in encoded and "&" not in encoded
    assert "\\u003cfont" in encoded
    assert "领先" in encoded
    assert json.loads(encoded)["elements"][0]["content"] == "<font color='green'>领先</font> & more"
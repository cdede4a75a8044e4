import json

from larkit.card.elements import confirm, option, text, url
from larkit.card.interactive import (
    action,
    button,
    form,
    multi_select_menu,
    overflow,
    select_menu,
)


def test_action_renders_actions_without_layout():
    b = button(text("Go"))
    rendered = action(b).render()
    assert rendered == {"tag": "action", "actions": [b.render()]}


def test_action_empty_keeps_actions_list():
    assert action().render()["actions"] == []


def test_action_layouts():
    assert action().bisected_layout().render()["layout"] == "bisected"
    assert action().trisection_layout().render()["layout"] == "trisection"
    assert action().flow_layout().render()["layout"] == "flow"


def test_button_defaults():
    label = text("Confirm")
    rendered = button(label).render()
    assert rendered == {"tag": "button", "text": label.render(), "type": "default"}


def test_button_styles():
    assert button(text("a")).primary().render()["type"] == "primary"
    assert button(text("a")).danger().render()["type"] == "danger"
    assert button(text("a")).danger().default().render()["type"] == "default"


def test_button_full():
    link = url().href("https://example.com")
    rendered = (
        button(text("a"))
        .name("n1")
        .url("https://example.com/x")
        .multi_url(link)
        .value({"k": "v"})
        .confirm("Confirm", "Are you sure?")
        .render()
    )
    assert rendered["name"] == "n1"
    assert rendered["url"] == "https://example.com/x"
    assert rendered["multi_url"] == link.render()
    assert rendered["value"] == {"k": "v"}
    assert rendered["confirm"] == confirm("Confirm", "Are you sure?").render()


def test_button_empty_value_omitted():
    assert "value" not in button(text("a")).value({}).render()


def test_overflow():
    opts = [option("Option 1"), option("选项2")]
    rendered = overflow(*opts).value({"k": "v"}).render()
    assert rendered["tag"] == "overflow"
    assert rendered["options"] == [o.render() for o in opts]
    assert rendered["value"] == {"k": "v"}
    assert "confirm" not in rendered


def test_overflow_confirm_and_empty_options():
    rendered = overflow().confirm("t", "x").render()
    assert rendered["options"] == []
    assert rendered["confirm"] == confirm("t", "x").render()


def test_select_menu():
    opts = [option("Option 1"), option("选项2")]
    rendered = select_menu(*opts).placeholder("select").value({"k": "v"}).render()
    assert rendered["tag"] == "select_static"
    assert rendered["placeholder"] == text("select").render()
    assert rendered["options"] == [o.render() for o in opts]
    assert rendered["value"] == {"k": "v"}


def test_select_menu_person_and_initial():
    rendered = select_menu().select_person().initial_option("ou_1").render()
    assert rendered["tag"] == "select_person"
    assert rendered["initial_option"] == "ou_1"
    assert "options" not in rendered
    assert rendered["placeholder"] == text("").render()


def test_multi_select_menu():
    opts = [option("a"), option("b")]
    rendered = multi_select_menu("pick", *opts).placeholder("p").required(True).render()
    assert rendered["tag"] == "multi_select_static"
    assert rendered["name"] == "pick"
    assert rendered["options"] == [o.render() for o in opts]
    assert rendered["selected_value"] == []
    assert rendered["required"] is True
    assert rendered["disabled"] is False
    assert rendered["width"] == "fill"


def test_multi_select_rename_and_disable():
    rendered = multi_select_menu("").name("other").disabled(True).render()
    assert rendered["name"] == "other"
    assert rendered["disabled"] is True
    assert "name" not in multi_select_menu("").render()


def test_form():
    inner = button(text("Submit"))
    rendered = form("f1", inner).value({"a": 1}).render()
    assert rendered == {
        "tag": "form",
        "name": "f1",
        "elements": [inner.render()],
        "value": {"a": 1},
    }


def test_form_empty_keeps_name():
    assert form("").render() == {"tag": "form", "name": ""}


def test_render_is_json_serialisable():
    block = action(button(text("x")), overflow(option("o")), select_menu(option("s")))
    assert json.loads(json.dumps(block.render())) == block.render()
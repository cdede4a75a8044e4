import datetime as dt
import json

from larkit.card.elements import confirm, text
from larkit.card.pickers import (
    date_picker,
    datetime_picker,
    input_field,
    picker_datetime,
    time_picker,
)


def test_date_picker_minimal():
    assert date_picker().render() == {"tag": "date_picker"}


def test_date_picker_initial_date_matches_string_form():
    moment = dt.date(2021, 3, 4)
    assert (
        date_picker().initial_date(moment).render()
        == date_picker().initial_date_string(moment.isoformat()).render()
    )


def test_datetime_picker_initial():
    rendered = datetime_picker().initial_datetime_string("2021-03-04 05:06").render()
    assert rendered["tag"] == "picker_datetime"
    assert rendered["initial_datetime"] == "2021-03-04 05:06"


def test_datetime_picker_format_from_datetime():
    moment = dt.datetime(2021, 3, 4, 5, 6, 59)
    rendered = datetime_picker().initial_datetime(moment).render()
    assert rendered["initial_datetime"] == "2021-03-04 05:06"


def test_time_picker():
    rendered = time_picker().initial_time(dt.time(9, 30)).render()
    assert rendered["tag"] == "picker_time"
    assert rendered["initial_time"] == "09:30"


def test_picker_common_options():
    rendered = (
        date_picker().placeholder("choose").value({"k": "v"}).confirm("t", "x").render()
    )
    assert rendered["placeholder"] == text("choose").render()
    assert rendered["value"] == {"k": "v"}
    assert rendered["confirm"] == confirm("t", "x").render()


def test_picker_datetime():
    rendered = (
        picker_datetime("when")
        .placeholder("pick")
        .initial_datetime("2021-03-04 05:06")
        .value({"k": "v"})
        .render()
    )
    assert rendered == {
        "tag": "picker_datetime",
        "name": "when",
        "width": "fill",
        "placeholder": text("pick").render(),
        "initialDatetime": "2021-03-04 05:06",
        "value": {"k": "v"},
    }


def test_picker_datetime_rename_and_omissions():
    rendered = picker_datetime("a").name("").render()
    assert "name" not in rendered
    assert "initialDatetime" not in rendered
    assert rendered["placeholder"] == text("").render()


def test_input_field():
    rendered = input_field("comment").placeholder("type here").render()
    assert rendered == {
        "tag": "input",
        "name": "comment",
        "placeholder": text("type here").render(),
        "label_position": "left",
        "label": {"tag": "plain_text", "content": "Custom Input:"},
        "max_length": 120,
    }


def test_pickers_json_round_trip():
    block = time_picker().initial_time_string("10:00").placeholder("p")
    assert json.loads(json.dumps(block.render())) == block.render()
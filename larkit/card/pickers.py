"""Date and time pickers and text input card elements."""

from __future__ import annotations

import datetime as _dt
from typing import Any

from larkit.card.elements import ConfirmBlock, Element, TextBlock


class PickerBlock(Element):
    """Common part of the date, time and datetime pickers."""

    _tag = ""

    def __init__(self) -> None:
        self._initial_date = ""
        self._initial_time = ""
        self._initial_datetime = ""
        self._placeholder = ""
        self._value: dict[str, Any] | None = None
        self._confirm: ConfirmBlock | None = None

    def placeholder(self, s: str) -> PickerBlock:
        """Set the text shown while nothing is selected."""
        self._placeholder = s
        return self

    def value(self, m: dict[str, Any]) -> PickerBlock:
        """Set the data sent back when a value is picked."""
        self._value = m
        return self

    def confirm(self, title: str, text: str) -> PickerBlock:
        """Ask for confirmation after a value is picked."""
        self._confirm = ConfirmBlock(title, text)
        return self

    def render(self) -> dict[str, Any]:
        result: dict[str, Any] = {"tag": self._tag}
        if self._initial_date:
            result["initial_date"] = self._initial_date
        if self._initial_time:
            result["initial_time"] = self._initial_time
        if self._initial_datetime:
            result["initial_datetime"] = self._initial_datetime
        if self._placeholder:
            result["placeholder"] = TextBlock(self._placeholder).render()
        if self._value:
            result["value"] = dict(self._value)
        if self._confirm is not None:
            result["confirm"] = self._confirm.render()
        return result


class DatePickerBlock(PickerBlock):
    """A date picker."""

    _tag = "date_picker"

    def initial_date(self, moment: _dt.date) -> DatePickerBlock:
        """Set the initial date from a date or datetime."""
        return self.initial_date_string(moment.strftime("%Y-%m-%d"))

    def initial_date_string(self, date: str) -> DatePickerBlock:
        """Set the initial date as ``YYYY-MM-DD`` text."""
        self._initial_date = date
        return self


def date_picker() -> DatePickerBlock:
    """Create a date picker."""
    return DatePickerBlock()


class DatetimePickerBlock(PickerBlock):
    """A date and time picker."""

    _tag = "picker_datetime"

    def initial_datetime(self, moment: _dt.datetime) -> DatetimePickerBlock:
        """Set the initial date and time from a datetime."""
        return self.initial_datetime_string(moment.strftime("%Y-%m-%d %H:%M"))

    def initial_datetime_string(self, date: str) -> DatetimePickerBlock:
        """Set the initial date and time as ``YYYY-MM-DD HH:MM`` text."""
        self._initial_datetime = date
        return self


def datetime_picker() -> DatetimePickerBlock:
    """Create a date and time picker."""
    return DatetimePickerBlock()


class TimePickerBlock(PickerBlock):
    """A time picker."""

    _tag = "picker_time"

    def initial_time(self, moment: _dt.time | _dt.datetime) -> TimePickerBlock:
        """Set the initial time from a time or datetime."""
        return self.initial_time_string(moment.strftime("%H:%M"))

    def initial_time_string(self, date: str) -> TimePickerBlock:
        """Set the initial time as ``HH:MM`` text."""
        self._initial_time = date
        return self


def time_picker() -> TimePickerBlock:
    """Create a time picker."""
    return TimePickerBlock()


class PickerDatetimeBlock(Element):
    """A named, full-width date and time picker for forms."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._placeholder = ""
        self._initial_datetime = ""
        self._value: dict[str, Any] | None = None

    def value(self, v: dict[str, Any]) -> PickerDatetimeBlock:
        """Set the data sent back when a value is picked."""
        self._value = v
        return self

    def placeholder(self, p: str) -> PickerDatetimeBlock:
        """Set the text shown while nothing is selected."""
        self._placeholder = p
        return self

    def initial_datetime(self, d: str) -> PickerDatetimeBlock:
        """Set the value selected at first."""
        self._initial_datetime = d
        return self

    def name(self, n: str) -> PickerDatetimeBlock:
        """Set the picker's identifier."""
        self._name = n
        return self

    def render(self) -> dict[str, Any]:
        result: dict[str, Any] = {"tag": "picker_datetime"}
        if self._name:
            result["name"] = self._name
        result["width"] = "fill"
        result["placeholder"] = TextBlock(self._placeholder).render()
        if self._initial_datetime:
            result["initialDatetime"] = self._initial_datetime
        if self._value:
            result["value"] = dict(self._value)
        return result


def picker_datetime(name: str) -> PickerDatetimeBlock:
    """Create a named date and time picker."""
    return PickerDatetimeBlock(name)


class InputBlock(Element):
    """A single-line text input."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._placeholder = ""

    def placeholder(self, s: str) -> InputBlock:
        """Set the text shown while the input is empty."""
        self._placeholder = s
        return self

    def render(self) -> dict[str, Any]:
        return {
            "tag": "input",
            "name": self._name,
            "placeholder": TextBlock(self._placeholder).render(),
            "label_position": "left",
            "label": {"tag": "plain_text", "content": "Custom Input:"},
            "max_length": 120,
        }


def input_field(name: str) -> InputBlock:
    """Create a text input."""
    return InputBlock(name)
"""Interactive card elements: actions, buttons, menus and forms."""

from __future__ import annotations

from typing import Any

from larkit.card.elements import ConfirmBlock, Element, OptionBlock, TextBlock, URLBlock


def _render_all(elements: tuple[Element, ...] | list[Element]) -> list[Any]:
    return [element.render() for element in elements]


class ActionBlock(Element):
    """A row of interactive elements."""

    def __init__(self, actions: tuple[Element, ...]) -> None:
        self._actions = list(actions)
        self._layout = ""

    def bisected_layout(self) -> ActionBlock:
        """Lay the actions out in two equal columns."""
        self._layout = "bisected"
        return self

    def trisection_layout(self) -> ActionBlock:
        """Lay the actions out in three equal columns."""
        self._layout = "trisection"
        return self

    def flow_layout(self) -> ActionBlock:
        """Lay the actions out in an adaptive flow."""
        self._layout = "flow"
        return self

    def render(self) -> dict[str, Any]:
        result: dict[str, Any] = {"tag": "action", "actions": _render_all(self._actions)}
        if self._layout:
            result["layout"] = self._layout
        return result


def action(*args: Element) -> ActionBlock:
    """Create an action row from buttons, menus and pickers."""
    return ActionBlock(args)


class ButtonBlock(Element):
    """A clickable button."""

    def __init__(self, content: TextBlock) -> None:
        self._text = content
        self._name = ""
        self._url = ""
        self._multi_url: URLBlock | None = None
        self._type = "default"
        self._value: dict[str, Any] | None = None
        self._confirm: ConfirmBlock | None = None

    def name(self, n: str) -> ButtonBlock:
        """Set the button's identifier."""
        self._name = n
        return self

    def url(self, u: str) -> ButtonBlock:
        """Set the link the button opens."""
        self._url = u
        return self

    def multi_url(self, u: URLBlock) -> ButtonBlock:
        """Set per-platform links the button opens."""
        self._multi_url = u
        return self

    def value(self, v: dict[str, Any]) -> ButtonBlock:
        """Set the data sent back when the button is clicked."""
        self._value = v
        return self

    def confirm(self, title: str, text: str) -> ButtonBlock:
        """Ask for confirmation before the click takes effect."""
        self._confirm = ConfirmBlock(title, text)
        return self

    def default(self) -> ButtonBlock:
        """Use the secondary button style."""
        self._type = "default"
        return self

    def primary(self) -> ButtonBlock:
        """Use the primary button style."""
        self._type = "primary"
        return self

    def danger(self) -> ButtonBlock:
        """Use the warning button style."""
        self._type = "danger"
        return self

    def render(self) -> dict[str, Any]:
        result: dict[str, Any] = {"tag": "button", "text": self._text.render()}
        if self._name:
            result["name"] = self._name
        if self._url:
            result["url"] = self._url
        if self._multi_url is not None:
            result["multi_url"] = self._multi_url.render()
        if self._type:
            result["type"] = self._type
        if self._value:
            result["value"] = dict(self._value)
        if self._confirm is not None:
            result["confirm"] = self._confirm.render()
        return result


def button(text: TextBlock) -> ButtonBlock:
    """Create a button in the default style."""
    return ButtonBlock(text)


class OverflowBlock(Element):
    """A folded menu of options."""

    def __init__(self, options: tuple[OptionBlock, ...]) -> None:
        self._options = list(options)
        self._value: dict[str, Any] | None = None
        self._confirm: ConfirmBlock | None = None

    def value(self, v: dict[str, Any]) -> OverflowBlock:
        """Set the data sent back when an option is chosen."""
        self._value = v
        return self

    def confirm(self, title: str, text: str) -> OverflowBlock:
        """Ask for confirmation after an option is chosen."""
        self._confirm = ConfirmBlock(title, text)
        return self

    def render(self) -> dict[str, Any]:
        result: dict[str, Any] = {"tag": "overflow", "options": _render_all(self._options)}
        if self._value:
            result["value"] = dict(self._value)
        if self._confirm is not None:
            result["confirm"] = self._confirm.render()
        return result


def overflow(*args: OptionBlock) -> OverflowBlock:
    """Create a folded menu from options."""
    return OverflowBlock(args)


class SelectMenuBlock(Element):
    """A single-choice menu, of static options or of people."""

    def __init__(self, options: tuple[OptionBlock, ...]) -> None:
        self._tag = "select_static"
        self._placeholder = ""
        self._initial_option = ""
        self._options = list(options)
        self._value: dict[str, Any] | None = None
        self._confirm: ConfirmBlock | None = None

    def select_person(self) -> SelectMenuBlock:
        """Choose among people; option values are open ids."""
        self._tag = "select_person"
        return self

    def initial_option(self, o: str) -> SelectMenuBlock:
        """Set the value of the option selected at first."""
        self._initial_option = o
        return self

    def placeholder(self, p: str) -> SelectMenuBlock:
        """Set the text shown while nothing is selected."""
        self._placeholder = p
        return self

    def value(self, v: dict[str, Any]) -> SelectMenuBlock:
        """Set the data sent back when an option is chosen."""
        self._value = v
        return self

    def confirm(self, title: str, text: str) -> SelectMenuBlock:
        """Ask for confirmation after an option is chosen."""
        self._confirm = ConfirmBlock(title, text)
        return self

    def render(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "tag": self._tag,
            "placeholder": TextBlock(self._placeholder).render(),
        }
        if self._initial_option:
            result["initial_option"] = self._initial_option
        if self._options:
            result["options"] = _render_all(self._options)
        if self._value:
            result["value"] = dict(self._value)
        if self._confirm is not None:
            result["confirm"] = self._confirm.render()
        return result


def select_menu(*args: OptionBlock) -> SelectMenuBlock:
    """Create a static single-choice menu."""
    return SelectMenuBlock(args)


class MultiSelectMenuBlock(Element):
    """A static multiple-choice menu."""

    def __init__(self, name: str, options: tuple[OptionBlock, ...]) -> None:
        self._tag = "multi_select_static"
        self._name = name
        self._placeholder = ""
        self._options = list(options)
        self._required = False
        self._disabled = False

    def placeholder(self, p: str) -> MultiSelectMenuBlock:
        """Set the text shown while nothing is selected."""
        self._placeholder = p
        return self

    def required(self, r: bool) -> MultiSelectMenuBlock:
        """Set whether a choice is required."""
        self._required = r
        return self

    def disabled(self, d: bool) -> MultiSelectMenuBlock:
        """Set whether the menu is disabled."""
        self._disabled = d
        return self

    def name(self, n: str) -> MultiSelectMenuBlock:
        """Set the menu's identifier."""
        self._name = n
        return self

    def render(self) -> dict[str, Any]:
        result: dict[str, Any] = {"tag": self._tag}
        if self._name:
            result["name"] = self._name
        result["placeholder"] = TextBlock(self._placeholder).render()
        if self._options:
            result["options"] = _render_all(self._options)
        result["selected_value"] = []
        result["required"] = self._required
        result["disabled"] = self._disabled
        result["width"] = "fill"
        return result


def multi_select_menu(name: str, *args: OptionBlock) -> MultiSelectMenuBlock:
    """Create a static multiple-choice menu."""
    return MultiSelectMenuBlock(name, args)


class FormBlock(Element):
    """A form grouping input elements."""

    def __init__(self, name: str, elements: tuple[Element, ...]) -> None:
        self._name = name
        self._elements = list(elements)
        self._value: dict[str, Any] | None = None

    def value(self, v: dict[str, Any]) -> FormBlock:
        """Set the data sent back when the form is submitted."""
        self._value = v
        return self

    def render(self) -> dict[str, Any]:
        result: dict[str, Any] = {"tag": "form", "name": self._name}
        if self._elements:
            result["elements"] = _render_all(self._elements)
        if self._value:
            result["value"] = dict(self._value)
        return result


def form(name: str, *args: Element) -> FormBlock:
    """Create a form from its elements."""
    return FormBlock(name, args)
"""Basic card elements: links, texts, confirmations, rules, fields and options."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Element(ABC):
    """Anything that renders into a card's JSON tree."""

    @abstractmethod
    def render(self) -> Any:
        """Render the element into plain JSON-compatible data."""


def _render_hrefs(hrefs: dict[str, URLBlock]) -> dict[str, Any]:
    return {name: hrefs[name].render() for name in sorted(hrefs)}


class URLBlock(Element):
    """A link, optionally with per-platform targets."""

    def __init__(self) -> None:
        self._href = ""
        self._android = ""
        self._ios = ""
        self._pc = ""

    def href(self, s: str) -> URLBlock:
        """Set the default link."""
        self._href = s
        return self

    def multi_href(self, android: str, ios: str, pc: str) -> URLBlock:
        """Set per-platform links; the PC link becomes the default if none is set."""
        self._android = android
        self._ios = ios
        self._pc = pc
        if not self._href:
            self._href = self._pc
        return self

    def render(self) -> dict[str, Any]:
        pairs = (
            ("url", self._href),
            ("android_url", self._android),
            ("ios_url", self._ios),
            ("pc_url", self._pc),
        )
        return {key: value for key, value in pairs if value}


def url() -> URLBlock:
    """Create an empty link block."""
    return URLBlock()


class TextBlock(Element):
    """A text element, plain or in lark markdown."""

    def __init__(self, content: str) -> None:
        self._tag = "plain_text"
        self._content = content
        self._lines = 0
        self._hrefs: dict[str, URLBlock] = {}

    def lark_md(self) -> TextBlock:
        """Render the content as embedded markdown."""
        self._tag = "lark_md"
        return self

    def lines(self, count: int) -> TextBlock:
        """Limit the number of displayed lines."""
        self._lines = count
        return self

    def href(self, name: str, link: URLBlock) -> TextBlock:
        """Bind a ``[]($name)`` link placeholder to a URL block."""
        self._hrefs[name] = link
        return self

    def render(self) -> dict[str, Any]:
        result: dict[str, Any] = {"tag": self._tag, "content": self._content}
        if self._lines:
            result["lines"] = self._lines
        if self._hrefs:
            result["href"] = _render_hrefs(self._hrefs)
        return result


def text(s: str) -> TextBlock:
    """Create a plain text block."""
    return TextBlock(s)


class MarkdownBlock(Element):
    """A standalone markdown element."""

    def __init__(self, content: str) -> None:
        self._content = content
        self._text_align = ""
        self._hrefs: dict[str, URLBlock] = {}

    def align_center(self) -> MarkdownBlock:
        self._text_align = "center"
        return self

    def align_left(self) -> MarkdownBlock:
        self._text_align = "left"
        return self

    def align_right(self) -> MarkdownBlock:
        self._text_align = "right"
        return self

    def href(self, name: str, link: URLBlock) -> MarkdownBlock:
        """Bind a ``[]($name)`` link placeholder to a URL block."""
        self._hrefs[name] = link
        return self

    def render(self) -> dict[str, Any]:
        result: dict[str, Any] = {"tag": "markdown", "content": self._content}
        if self._text_align:
            result["text_align"] = self._text_align
        if self._hrefs:
            result["href"] = _render_hrefs(self._hrefs)
        return result


def markdown(s: str) -> MarkdownBlock:
    """Create a standalone markdown block."""
    return MarkdownBlock(s)


class ConfirmBlock(Element):
    """A confirmation dialog attached to an interactive element."""

    def __init__(self, title: str, content: str) -> None:
        self._title = title
        self._text = content

    def render(self) -> dict[str, Any]:
        return {
            "title": TextBlock(self._title).render(),
            "text": TextBlock(self._text).render(),
        }


def confirm(title: str, text: str) -> ConfirmBlock:
    """Create a confirmation dialog."""
    return ConfirmBlock(title, text)


class HrBlock(Element):
    """A horizontal rule."""

    def render(self) -> dict[str, Any]:
        return {"tag": "hr"}


def hr() -> HrBlock:
    """Create a horizontal rule."""
    return HrBlock()


class FieldBlock(Element):
    """A field inside a div, optionally laid out side by side."""

    def __init__(self, content: TextBlock) -> None:
        self._short = False
        self._text = content

    def short(self) -> FieldBlock:
        """Lay the field out side by side with its neighbours."""
        self._short = True
        return self

    def render(self) -> dict[str, Any]:
        return {"is_short": self._short, "text": self._text.render()}


def field(text: TextBlock) -> FieldBlock:
    """Create a field from a text block."""
    return FieldBlock(text)


class OptionBlock(Element):
    """An option of a select menu or overflow menu."""

    def __init__(self, value: str) -> None:
        self._value = value
        self._text = value
        self._url = ""
        self._multi_url: URLBlock | None = None

    def text(self, s: str) -> OptionBlock:
        """Set the displayed text."""
        self._text = s
        return self

    def url(self, u: str) -> OptionBlock:
        """Set the link the option leads to."""
        self._url = u
        return self

    def multi_url(self, u: URLBlock) -> OptionBlock:
        """Set per-platform links for the option."""
        self._multi_url = u
        return self

    def render(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self._text:
            result["text"] = TextBlock(self._text).render()
        result["value"] = self._value
        if self._url:
            result["url"] = self._url
        if self._multi_url is not None:
            result["multi_url"] = self._multi_url.render()
        return result


def option(value: str) -> OptionBlock:
    """Create an option whose text defaults to its value."""
    return OptionBlock(value)
"""The outermost card structure."""

from __future__ import annotations

import json
from typing import Any

from larkit.card.elements import Element, TextBlock, URLBlock

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def dump_indented(data: Any) -> str:
    """Serialise rendered card data with two-space indentation and HTML-safe escapes."""
    encoded = json.dumps(data, indent=2, ensure_ascii=False)
    # These characters only occur inside JSON strings, so escaping them is safe.
    for char, escaped in _HTML_ESCAPES.items():
        encoded = encoded.replace(char, escaped)
    return encoded


class CardBlock(Element):
    """A whole message card."""

    def __init__(self, elements: tuple[Element, ...]) -> None:
        self._elements = list(elements)
        self._disable_forward = False
        self._update_multi = False
        self._title = ""
        self._template = ""
        self._link: URLBlock | None = None

    def render(self) -> dict[str, Any]:
        header: dict[str, Any] = {"title": TextBlock(self._title).render()}
        if self._template:
            header["template"] = self._template
        result: dict[str, Any] = {
            "config": {
                "wide_screen_mode": True,
                "enable_forward": not self._disable_forward,
                "update_multi": self._update_multi,
            },
            "header": header,
        }
        if self._link is not None:
            result["card_link"] = self._link.render()
        if self._elements:
            result["elements"] = [element.render() for element in self._elements]
        return result

    def to_json(self) -> str:
        """Return the card as indented JSON text."""
        return dump_indented(self.render())

    def __str__(self) -> str:
        return self.to_json()

    def no_forward(self) -> CardBlock:
        """Forbid forwarding the card."""
        self._disable_forward = True
        return self

    def update_multi(self, update_multi: bool) -> CardBlock:
        """Set whether the card is updated for every recipient."""
        self._update_multi = update_multi
        return self

    def title(self, title: str) -> CardBlock:
        self._title = title
        return self

    def link(self, href: URLBlock) -> CardBlock:
        """Set the link the whole card leads to."""
        self._link = href
        return self

    def _with_template(self, template: str) -> CardBlock:
        self._template = template
        return self

    def blue(self) -> CardBlock:
        return self._with_template("blue")

    def wathet(self) -> CardBlock:
        return self._with_template("wathet")

    def turquoise(self) -> CardBlock:
        return self._with_template("turquoise")

    def green(self) -> CardBlock:
        return self._with_template("green")

    def yellow(self) -> CardBlock:
        return self._with_template("yellow")

    def orange(self) -> CardBlock:
        return self._with_template("orange")

    def red(self) -> CardBlock:
        return self._with_template("red")

    def carmine(self) -> CardBlock:
        return self._with_template("carmine")

    def violet(self) -> CardBlock:
        return self._with_template("violet")

    def purple(self) -> CardBlock:
        return self._with_template("purple")

    def indigo(self) -> CardBlock:
        return self._with_template("indigo")

    def grey(self) -> CardBlock:
        return self._with_template("grey")


def card(*args: Element) -> CardBlock:
    """Create a card from its elements."""
    return CardBlock(args)
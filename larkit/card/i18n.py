"""Cards whose title and content vary with the reader's locale."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from larkit.card.card import dump_indented
from larkit.card.elements import Element, URLBlock


class LocalizedBlock(Element):
    """The elements a card shows for one locale."""

    def __init__(self, locale: str, elements: tuple[Element, ...]) -> None:
        self.locale = locale
        self._elements = list(elements)

    def render(self) -> list[Any]:
        return [element.render() for element in self._elements]


def with_locale(locale: str, *args: Element) -> LocalizedBlock:
    """Group card elements under a locale."""
    return LocalizedBlock(locale, args)


@dataclass(frozen=True)
class LocalizedTextBlock:
    """A text in one locale."""

    locale: str
    text: str


def localized_text(locale: str, text: str) -> LocalizedTextBlock:
    """Create a text for one locale."""
    return LocalizedTextBlock(locale, text)


class TextBlock(Element):
    """A plain text with one variant per locale."""

    def __init__(self, texts: tuple[LocalizedTextBlock, ...]) -> None:
        self._texts = list(texts)

    def render(self) -> dict[str, Any]:
        variants = {item.locale: item.text for item in self._texts}
        return {
            "tag": "plain_text",
            "i18n": {locale: variants[locale] for locale in sorted(variants)},
        }


def text(*args: LocalizedTextBlock) -> TextBlock:
    """Create a localized plain text."""
    return TextBlock(args)


class CardBlock(Element):
    """A whole message card with localized content."""

    def __init__(self, blocks: tuple[LocalizedBlock, ...]) -> None:
        self._blocks = list(blocks)
        self._disable_forward = False
        self._update_multi = False
        self._template = ""
        self._link: URLBlock | None = None
        self._title: TextBlock | None = None

    def render(self) -> dict[str, Any]:
        if self._title is None:
            raise ValueError("card title is not set")
        localized = {block.locale: block.render() for block in self._blocks}
        header: dict[str, Any] = {"title": self._title.render()}
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
        if localized:
            result["i18n_elements"] = {
                locale: localized[locale] for locale in sorted(localized)
            }
        return result

    def to_json(self) -> str:
        """Return the card as indented JSON text."""
        return dump_indented(self.render())

    def __str__(self) -> str:
        return self.to_json()

    def title(self, *args: LocalizedTextBlock) -> CardBlock:
        """Set the title, one text per locale."""
        self._title = TextBlock(args)
        return self

    def no_forward(self) -> CardBlock:
        """Forbid forwarding the card."""
        self._disable_forward = True
        return self

    def update_multi(self, update_multi: bool) -> CardBlock:
        """Set whether the card is updated for every recipient."""
        self._update_multi = update_multi
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


def card(*args: LocalizedBlock) -> CardBlock:
    """Create a localized card from per-locale blocks."""
    return CardBlock(args)
"""Layout card elements: divs, images, notes and column sets."""

from __future__ import annotations

from typing import Any

from larkit.card.elements import Element, FieldBlock, TextBlock, URLBlock


def _render_all(elements: list[Element]) -> list[Any]:
    return [element.render() for element in elements]


class DivBlock(Element):
    """A content block made of fields, a text and an optional extra element."""

    def __init__(self, fields: tuple[FieldBlock, ...]) -> None:
        self._fields: list[Element] = list(fields)
        self._text: TextBlock | None = None
        self._extra: Element | None = None

    def text(self, t: TextBlock) -> DivBlock:
        """Set the single text shown by the block."""
        self._text = t
        return self

    def extra(self, e: Element) -> DivBlock:
        """Attach an element shown to the right of the content."""
        self._extra = e
        return self

    def render(self) -> dict[str, Any]:
        result: dict[str, Any] = {"tag": "div"}
        if self._text is not None:
            result["text"] = self._text.render()
        if self._fields:
            result["fields"] = _render_all(self._fields)
        if self._extra is not None:
            result["extra"] = self._extra.render()
        return result


def div(*args: FieldBlock) -> DivBlock:
    """Create a content block from fields."""
    return DivBlock(args)


class ImgBlock(Element):
    """An image."""

    def __init__(self, key: str) -> None:
        self._key = key
        self._alt = ""
        self._title: TextBlock | None = None
        self._width = 0
        self._compact = False
        self._mode = ""
        self._no_preview = False

    def alt(self, s: str) -> ImgBlock:
        """Set the text shown on hover."""
        self._alt = s
        return self

    def title(self, t: TextBlock) -> ImgBlock:
        """Set the image title."""
        self._title = t
        return self

    def title_string(self, t: str) -> ImgBlock:
        """Set the image title from plain text."""
        return self.title(TextBlock(t))

    def width(self, w: int) -> ImgBlock:
        """Set the maximum display width (278 to 580)."""
        self._width = w
        return self

    def compact(self) -> ImgBlock:
        """Show a compact image of at most 278px."""
        self._compact = True
        return self

    def fit_horizontal(self) -> ImgBlock:
        """Stretch the image horizontally."""
        self._mode = "fit_horizontal"
        return self

    def crop_center(self) -> ImgBlock:
        """Crop the image around its centre (the default)."""
        self._mode = "crop_center"
        return self

    def no_preview(self) -> ImgBlock:
        """Keep the flag that disables previews cleared, as the platform client does."""
        self._no_preview = False
        return self

    def render(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "tag": "img",
            "img_key": self._key,
            "alt": TextBlock(self._alt).render(),
        }
        if self._title is not None:
            result["title"] = self._title.render()
        if self._width:
            result["custom_width"] = self._width
        if self._compact:
            result["compact_width"] = True
        if self._mode:
            result["mode"] = self._mode
        if self._no_preview:
            result["preview"] = False
        return result


def img(key: str) -> ImgBlock:
    """Create an image block from an image key."""
    return ImgBlock(key)


class NoteBlock(Element):
    """A note made of small texts and images."""

    def __init__(self) -> None:
        self._elements: list[Element] = []

    def add_text(self, t: TextBlock) -> NoteBlock:
        """Append a text."""
        self._elements.append(t)
        return self

    def add_image(self, i: ImgBlock) -> NoteBlock:
        """Append an image."""
        self._elements.append(i)
        return self

    def render(self) -> dict[str, Any]:
        return {"tag": "note", "elements": _render_all(self._elements)}


def note() -> NoteBlock:
    """Create an empty note."""
    return NoteBlock()


class ColumnBlock(Element):
    """A column inside a column set."""

    def __init__(self, elements: tuple[Element, ...]) -> None:
        self._width = ""
        self._weight = 0
        self._vertical_align = ""
        self._elements = list(elements)

    def width(self, width: str) -> ColumnBlock:
        self._width = width
        return self

    def weight(self, weight: int) -> ColumnBlock:
        self._weight = weight
        return self

    def vertical_align(self, align: str) -> ColumnBlock:
        self._vertical_align = align
        return self

    def render(self) -> dict[str, Any]:
        result: dict[str, Any] = {"tag": "column"}
        if self._width:
            result["width"] = self._width
        if self._weight:
            result["weight"] = self._weight
        if self._vertical_align:
            result["vertical_align"] = self._vertical_align
        if self._elements:
            result["elements"] = _render_all(self._elements)
        return result


def column(*args: Element) -> ColumnBlock:
    """Create a column from its elements."""
    return ColumnBlock(args)


class ColumnSetActionBlock(Element):
    """The link a whole column set leads to."""

    def __init__(self, multi_url: URLBlock) -> None:
        self._multi_url = multi_url

    def render(self) -> dict[str, Any]:
        return {"multi_url": self._multi_url.render()}


def column_set_action(url: URLBlock) -> ColumnSetActionBlock:
    """Create a column set action from a link."""
    return ColumnSetActionBlock(url)


class ColumnSetBlock(Element):
    """A row of columns."""

    def __init__(self, columns: tuple[ColumnBlock, ...]) -> None:
        self._flex_mode = "none"
        self._background_style = ""
        self._horizontal_spacing = ""
        self._columns = list(columns)
        self._action: ColumnSetActionBlock | None = None

    def flex_mode(self, mode: str) -> ColumnSetBlock:
        self._flex_mode = mode
        return self

    def background_style(self, style: str) -> ColumnSetBlock:
        self._background_style = style
        return self

    def horizontal_spacing(self, spacing: str) -> ColumnSetBlock:
        self._horizontal_spacing = spacing
        return self

    def action(self, action: ColumnSetActionBlock) -> ColumnSetBlock:
        """Make the whole column set a link."""
        self._action = action
        return self

    def render(self) -> dict[str, Any]:
        result: dict[str, Any] = {"tag": "column_set", "flex_mode": self._flex_mode}
        if self._background_style:
            result["background_style"] = self._background_style
        if self._horizontal_spacing:
            result["horizontal_spacing"] = self._horizontal_spacing
        if self._columns:
            result["columns"] = [col.render() for col in self._columns]
        if self._action is not None:
            result["action"] = self._action.render()
        return result


def column_set(*args: ColumnBlock) -> ColumnSetBlock:
    """Create a column set from columns."""
    return ColumnSetBlock(args)
"""
Writing and verifying rich text.

``RichTextEditor`` types into the application's WYSIWYG editor. ``expect_rich_text``
checks an area of the page that was produced by that editor, for example

    <div>
      plain
      <b>bold</b>
      <oppia-noninteractive-math> ... </oppia-noninteractive-math>
    </div>

The caller supplies an ``instructions`` function which is handed a
``RichTextChecker`` and reads through the area in order:

    def instructions(checker):
        checker.read_plain_text("plain")
        checker.read_bold_text("bold")
        checker.read_widget("Math", "x^2")

    expect_rich_text(page.locator("#content")).to_match(instructions)

The same shape of function can be handed a ``RichTextEditor`` instead, which is
what ``to_rich_text`` relies on.
"""

from dataclasses import dataclass, replace
from typing import Any, Callable, Sequence

from playwright.sync_api import Locator

from .errors import check
from .extensions import get_noninteractive

RichTextInstructions = Callable[[Any], None]

WIDGET_TAG_PREFIX = "oppia-noninteractive-"


def widget_tag_name(widget_name: str) -> str:
    """Tag under which a non-interactive widget is rendered, e.g. oppia-noninteractive-math."""
    return WIDGET_TAG_PREFIX + widget_name.lower()


def _tag_name(element: Locator) -> str:
    return element.evaluate("el => el.tagName.toLowerCase()")


class RichTextEditor:
    """Editor for a form field holding a ``rich-text-editor``."""

    def __init__(self, elem: Locator):
        self.elem = elem

    @property
    def _iframe(self) -> Locator:
        return self.elem.locator("rich-text-editor").locator("iframe")

    @property
    def _content(self) -> Locator:
        return self.elem.locator("rich-text-editor").frame_locator("iframe").locator("body")

    def _append_content_text(self, text: str) -> None:
        self._content.press_sequentially(text)

    def _click_content_menu_button(self, class_name: str) -> None:
        self.elem.locator(".wysiwyg").locator(f".{class_name}").click()

    def _append_formatted_text(self, text: str, command: str) -> None:
        self._click_content_menu_button(command)
        self._append_content_text(text)
        self._click_content_menu_button(command)

    def _append_list(self, items: Sequence[str], command: str) -> None:
        self._append_content_text("\n")
        self._click_content_menu_button(command)
        for item in items:
            self._append_content_text(item + "\n")
        self._click_content_menu_button(command)

    def clear(self) -> None:
        """Erase the editing surface."""
        check(self._iframe.count() > 0, "rich-text-editor has no editing iframe")
        # The app's templating is not active inside the iframe, so the body is
        # emptied directly.
        self._content.evaluate("body => { body.innerHTML = ''; }")

    def set_plain_text(self, text: str) -> None:
        self.clear()
        self._append_content_text(text)

    def append_plain_text(self, text: str) -> None:
        self._append_content_text(text)

    def append_bold_text(self, text: str) -> None:
        self._append_formatted_text(text, "bold")

    def append_italic_text(self, text: str) -> None:
        self._append_formatted_text(text, "italic")

    def append_underline_text(self, text: str) -> None:
        self._append_formatted_text(text, "underline")

    def append_ordered_list(self, items: Sequence[str]) -> None:
        self._append_list(items, "insertOrderedList")

    def append_unordered_list(self, items: Sequence[str]) -> None:
        self._append_list(items, "insertUnorderedList")

    def append_horizontal_rule(self) -> None:
        self._click_content_menu_button("insertHorizontalRule")

    def add_widget(self, widget_name: str, *args: Any) -> None:
        """
        Insert a non-interactive widget and customize it.

        Any extra arguments are passed on to the widget's ``customize_widget``
        after the modal it should act on.
        """
        self._click_content_menu_button("custom-command-" + widget_name.lower())

        # The currently active modal is the last in the DOM
        modal = self.elem.page.locator(".modal-dialog").last
        get_noninteractive(widget_name).customize_widget(modal, *args)
        modal.locator(".protractor-test-close-widget-editor").click()
        # Closing the modal leaves focus outside the editing surface.
        self._iframe.click()
        print(f"Added widget: {widget_name}")


@dataclass(frozen=True)
class RichTextTranscript:
    """
    Snapshot of a rich-text area.

    ``elements`` are the top-level child elements other than ``<span>``s (plain
    text is sometimes wrapped in those and sometimes a bare text node), ``texts``
    their visible texts, and ``full_text`` the visible text of the whole area,
    which also contains the bare text nodes and the line breaks around widgets.
    """

    elements: tuple[Locator, ...]
    texts: tuple[str, ...]
    full_text: str

    @classmethod
    def capture(cls, elem: Locator) -> "RichTextTranscript":
        # Everything is read before checking starts so that all reads see the
        # same state of the page.
        elements = tuple(elem.locator("xpath=./*[not(self::span)]").all())
        texts = tuple(element.inner_text() for element in elements)
        return cls(elements, texts, elem.inner_text())


@dataclass(frozen=True)
class Cursor:
    """How far through a transcript a ``RichTextChecker`` has read."""

    element_index: int = 0
    text_offset: int = 0
    last_was_widget: bool = False


class RichTextChecker:
    """
    Reads through a ``RichTextTranscript`` in order, asserting as it goes.

    Plain text lives in text nodes, so it advances only the text offset. Every
    other read consumes one element as well.
    """

    def __init__(self, transcript: RichTextTranscript):
        check(
            len(transcript.elements) == len(transcript.texts),
            f"{len(transcript.elements)} elements but {len(transcript.texts)} texts",
        )
        self.transcript = transcript
        self.cursor = Cursor()

    def _current(self, cursor: Cursor) -> tuple[Locator, str]:
        index = cursor.element_index
        check(
            index < len(self.transcript.elements),
            f"Expected another element but all {len(self.transcript.elements)} have been read",
        )
        return self.transcript.elements[index], self.transcript.texts[index]

    def _read_plain_text(self, cursor: Cursor, text: str) -> Cursor:
        start = cursor.text_offset
        actual = self.transcript.full_text[start:start + len(text)]
        check(actual == text, f"Expected plain text {text!r} at offset {start}, found {actual!r}")
        return replace(cursor, text_offset=start + len(text), last_was_widget=False)

    def _read_formatted_text(self, cursor: Cursor, text: str, tag_name: str) -> Cursor:
        element, element_text = self._current(cursor)
        actual_tag = _tag_name(element)
        check(actual_tag == tag_name, f"Expected <{tag_name}> element, found <{actual_tag}>")
        inner_html = element.inner_html()
        check(inner_html == text, f"Expected <{tag_name}> to contain {text!r}, found {inner_html!r}")
        check(element_text == text, f"Expected <{tag_name}> text {text!r}, found {element_text!r}")
        return Cursor(
            element_index=cursor.element_index + 1,
            text_offset=cursor.text_offset + len(text),
            last_was_widget=False,
        )

    def _read_widget(self, cursor: Cursor, widget_name: str, args: tuple) -> Cursor:
        element, element_text = self._current(cursor)
        expected_tag = widget_tag_name(widget_name)
        actual_tag = _tag_name(element)
        check(actual_tag == expected_tag, f"Expected <{expected_tag}> element, found <{actual_tag}>")
        rendered = element.inner_text()
        check(rendered == element_text, f"Widget text changed from {element_text!r} to {rendered!r}")

        get_noninteractive(widget_name).expect_widget_details_to_match(element, *args)

        # Widgets are blocks and get a line break either side of them; between
        # two adjacent widgets there is only one.
        line_breaks = 1 if cursor.last_was_widget else 2
        return Cursor(
            element_index=cursor.element_index + 1,
            text_offset=cursor.text_offset + len(element_text) + line_breaks,
            last_was_widget=True,
        )

    def read_plain_text(self, text: str) -> None:
        self.cursor = self._read_plain_text(self.cursor, text)

    def read_bold_text(self, text: str) -> None:
        self.cursor = self._read_formatted_text(self.cursor, text, "b")

    def read_italic_text(self, text: str) -> None:
        self.cursor = self._read_formatted_text(self.cursor, text, "i")

    def read_underline_text(self, text: str) -> None:
        self.cursor = self._read_formatted_text(self.cursor, text, "u")

    def read_widget(self, widget_name: str, *args: Any) -> None:
        """Extra arguments are passed on to the widget's ``expect_widget_details_to_match``."""
        self.cursor = self._read_widget(self.cursor, widget_name, args)

    def expect_end(self) -> None:
        total = len(self.transcript.elements)
        check(
            self.cursor.element_index == total,
            f"Only {self.cursor.element_index} of {total} elements were read",
        )


class RichTextMatcher:
    def __init__(self, elem: Locator):
        self.elem = elem

    def to_match(self, instructions: RichTextInstructions) -> None:
        checker = RichTextChecker(RichTextTranscript.capture(self.elem))
        instructions(checker)
        checker.expect_end()

    def to_equal(self, text: str) -> None:
        self.to_match(lambda checker: checker.read_plain_text(text))


def expect_rich_text(elem: Locator) -> RichTextMatcher:
    """``elem`` should be the element immediately containing the rich text."""
    return RichTextMatcher(elem)


def to_rich_text(text: str) -> RichTextInstructions:
    """
    Turn a string without formatting into rich-text instructions.

    Handed a ``RichTextEditor``, the instructions write ``text`` as plain text;
    handed a ``RichTextChecker``, they verify the area consists of exactly that
    plain text.
    """

    def instructions(handler: Any) -> None:
        if hasattr(handler, "set_plain_text"):
            handler.set_plain_text(text)
        else:
            handler.read_plain_text(text)

    return instructions

"""Helpers for filling in and verifying form fields in end-to-end tests."""

from .errors import UnknownEditorError, UnknownWidgetError
from .extensions import (
    NoninteractiveWidget,
    register_noninteractive,
    register_object_editor,
    unregister_noninteractive,
    unregister_object_editor,
)
from .forms import (
    AutocompleteDropdownEditor,
    DictionaryEditor,
    FormType,
    ListEditor,
    RealEditor,
    UnicodeEditor,
    get_editor,
)
from .rich_text import (
    RichTextChecker,
    RichTextEditor,
    RichTextTranscript,
    expect_rich_text,
    to_rich_text,
)

__all__ = [
    "AutocompleteDropdownEditor",
    "DictionaryEditor",
    "FormType",
    "ListEditor",
    "NoninteractiveWidget",
    "RealEditor",
    "RichTextChecker",
    "RichTextEditor",
    "RichTextTranscript",
    "UnicodeEditor",
    "UnknownEditorError",
    "UnknownWidgetError",
    "expect_rich_text",
    "get_editor",
    "register_noninteractive",
    "register_object_editor",
    "to_rich_text",
    "unregister_noninteractive",
    "unregister_object_editor",
]

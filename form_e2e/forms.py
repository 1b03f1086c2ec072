"""
Editors for the application's form fields.

Each editor wraps the locator of the element containing one form field. List
and dictionary entries are edited through the editor for the entry's declared
type, resolved by ``get_editor``:

    editor = ListEditor(page.locator("#answer-choices"))
    editor.set_length(3)
    editor.edit_item(0, "Real").set_value(2.5)
    editor.add_item("RichText").set_plain_text("Another choice")
"""

from enum import Enum
from typing import Any, Optional, Sequence, Union

from playwright.sync_api import Locator

from .errors import UnknownEditorError, check
from .extensions import EditorFactory, get_object_editor
from .rich_text import RichTextEditor

DICTIONARY_ENTRIES = "property in propertySchemas()"
LIST_ITEMS = "item in localValue track by $index"


def repeater(elem: Locator, expression: str) -> Locator:
    """All rows rendered by an ng-repeat containing ``expression`` below ``elem``."""
    return elem.locator(f'[ng-repeat*="{expression}"], [data-ng-repeat*="{expression}"]')


class _ScalarEditor:
    def __init__(self, elem: Locator):
        self.elem = elem

    def set_value(self, value: Any) -> None:
        field = self.elem.locator("input")
        field.clear()
        field.press_sequentially(str(value))


class RealEditor(_ScalarEditor):
    pass


class UnicodeEditor(_ScalarEditor):
    pass


class DictionaryEditor:
    def __init__(self, elem: Locator):
        self.elem = elem

    def edit_entry(self, index: int, object_type: Union[str, "FormType"]) -> Any:
        """The caller must know the declared type of the entry's property."""
        entry = repeater(self.elem, DICTIONARY_ENTRIES).nth(index)
        return get_editor(object_type)(entry)


class ListEditor:
    def __init__(self, elem: Locator):
        self.elem = elem

    @property
    def _items(self) -> Locator:
        return repeater(self.elem, LIST_ITEMS)

    def get_length(self) -> int:
        return self._items.count()

    def add_item(self, object_type: Union[str, "FormType", None] = None) -> Optional[Any]:
        """
        Append an entry to the list.

        If ``object_type`` is given this returns an editor for the new entry,
        which must match the type of the list's elements. Otherwise the entry
        keeps its default value and nothing is returned.
        """
        if not object_type:
            self.elem.locator(".protractor-test-add-list-entry").click()
            print("Added list entry")
            return None

        # The new entry's index is the length before adding it.
        list_length = self.get_length()
        self.elem.locator(".protractor-test-add-list-entry").click()
        print(f"Added list entry {list_length}")
        return get_editor(object_type)(self._items.nth(list_length))

    def delete_item(self, index: int) -> None:
        self._items.nth(index).locator(".protractor-test-delete-list-entry").click()
        print(f"Deleted list entry {index}")

    def edit_item(self, index: int, object_type: Union[str, "FormType"]) -> Any:
        return get_editor(object_type)(self._items.nth(index))

    def set_length(self, desired_length: int) -> None:
        """Add default entries or delete entries from the end as necessary."""
        starting_length = self.get_length()
        for _ in range(starting_length, desired_length):
            self.add_item()
        # Deleting from the end keeps the indices of the remaining entries valid.
        for index in range(starting_length - 1, desired_length - 1, -1):
            self.delete_item(index)


class AutocompleteDropdownEditor:
    """
    Editor for a select2 dropdown.

    select2 renders its search box and options at the top level of the page
    rather than below the container, so only one dropdown may be open at once.
    """

    def __init__(self, elem: Locator):
        self.elem = elem

    @property
    def _drop(self) -> Locator:
        # The id is assigned when the dropdown is opened.
        return self.elem.page.locator("#select2-drop")

    def _open(self) -> None:
        self.elem.locator(".select2-container").click()

    def set_value(self, text: str) -> None:
        self._open()
        search = self._drop.locator(".select2-input")
        search.press_sequentially(text)
        search.press("Enter")

    def expect_options_to_be(self, expected_options: Sequence[str]) -> None:
        self._open()
        actual_options = self._drop.locator("li").all_inner_texts()
        try:
            check(
                actual_options == list(expected_options),
                f"Expected dropdown options {list(expected_options)}, found {actual_options}",
            )
        finally:
            # Re-close the dropdown.
            self._drop.locator(".select2-input").press("Enter")


class FormType(Enum):
    DICTIONARY = "Dictionary"
    LIST = "List"
    REAL = "Real"
    RICH_TEXT = "RichText"
    UNICODE = "Unicode"
    AUTOCOMPLETE_DROPDOWN = "AutocompleteDropdown"


FORM_EDITORS: dict[FormType, EditorFactory] = {
    FormType.DICTIONARY: DictionaryEditor,
    FormType.LIST: ListEditor,
    FormType.REAL: RealEditor,
    FormType.RICH_TEXT: RichTextEditor,
    FormType.UNICODE: UnicodeEditor,
    FormType.AUTOCOMPLETE_DROPDOWN: AutocompleteDropdownEditor,
}


def get_editor(form_name: Union[str, FormType]) -> EditorFactory:
    """
    Resolve the editor for a form or object type.

    Local form types take precedence over the object editors registered in
    ``form_e2e.extensions``.

    Raises:
        UnknownEditorError: if neither knows ``form_name``
    """
    if isinstance(form_name, FormType):
        return FORM_EDITORS[form_name]
    try:
        return FORM_EDITORS[FormType(form_name)]
    except ValueError:
        pass

    factory = get_object_editor(form_name)
    if factory is None:
        raise UnknownEditorError(form_name)
    return factory

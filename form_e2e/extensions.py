"""
Registries for the editors and widgets contributed by application extensions.

Object editors (e.g. an editor for a ``CoordTwoDim`` value) and non-interactive
rich-text widgets (e.g. ``Math`` or ``Image``) are defined alongside the
extensions that render them, not in this package. Test suites register them here
at import time so that the form editors can resolve them by name:

    register_object_editor("CoordTwoDim", CoordTwoDimEditor)
    register_noninteractive("Math", MathWidget())
"""

from typing import Any, Callable, Optional, Protocol

from playwright.sync_api import Locator

from .errors import UnknownWidgetError


# An editor factory takes the container locator and returns an editor object.
EditorFactory = Callable[[Locator], Any]


class NoninteractiveWidget(Protocol):
    """The test contract of a widget embedded in rich text."""

    def customize_widget(self, modal: Locator, *args: Any) -> None:
        """Fill in the widget's customization modal."""

    def expect_widget_details_to_match(self, element: Locator, *args: Any) -> None:
        """Verify a rendered widget element against the given parameters."""


OBJECT_EDITORS: dict[str, EditorFactory] = {}
NONINTERACTIVE_WIDGETS: dict[str, NoninteractiveWidget] = {}


def register_object_editor(name: str, factory: EditorFactory) -> None:
    """Make ``factory`` resolvable by ``get_editor(name)``."""
    OBJECT_EDITORS[name] = factory


def unregister_object_editor(name: str) -> None:
    OBJECT_EDITORS.pop(name, None)


def get_object_editor(name: str) -> Optional[EditorFactory]:
    return OBJECT_EDITORS.get(name)


def register_noninteractive(name: str, widget: NoninteractiveWidget) -> None:
    """Register the customizer/checker pair for a rich-text widget."""
    NONINTERACTIVE_WIDGETS[name] = widget


def unregister_noninteractive(name: str) -> None:
    NONINTERACTIVE_WIDGETS.pop(name, None)


def get_noninteractive(name: str) -> NoninteractiveWidget:
    """
    Look up a registered non-interactive widget.

    Raises:
        UnknownWidgetError: if nothing is registered under ``name``
    """
    try:
        return NONINTERACTIVE_WIDGETS[name]
    except KeyError:
        raise UnknownWidgetError(name) from None

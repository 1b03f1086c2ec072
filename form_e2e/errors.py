"""Errors raised when a form editor or widget name cannot be resolved."""


class UnknownEditorError(LookupError):
    """No local form editor or registered object editor has this name."""

    def __init__(self, name: str):
        super().__init__(f"Unknown form / object requested: {name}")
        self.name = name


class UnknownWidgetError(LookupError):
    """No non-interactive widget is registered under this name."""

    def __init__(self, name: str):
        super().__init__(f"Unknown non-interactive widget requested: {name}")
        self.name = name


def check(condition: bool, message: str) -> None:
    """Fail the calling test step with ``message`` unless ``condition`` holds."""
    if not condition:
        raise AssertionError(message)

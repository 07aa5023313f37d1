"""Error alert — dismissible validation error above the form."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Button, Static


class ErrorAlert(Vertical):
    DEFAULT_CSS = """
    ErrorAlert {
        height: auto;
        border: round $error;
        padding: 0 1;
        margin-bottom: 1;
    }
    ErrorAlert > #error-title {
        color: $error;
        text-style: bold;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.message = ''
        self.display = False

    def compose(self) -> ComposeResult:
        yield Static('Error', id='error-title')
        yield Static('', id='error-message')
        yield Button('Dismiss', id='dismiss-error', variant='default')

    def show_error(self, message: str) -> None:
        self.message = message
        self.display = bool(message)
        if message:
            self.query_one('#error-message', Static).update(message)

"""Info panel — explains the URL template and hosts the copy-to-clipboard control."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Static

from chromedriver_picker.l1_entities.download_target import CATALOG_URL, PLACEHOLDER_URL

INFO_TEXT = (
    "You're downloading directly from Google's official 'Chrome for Testing' storage.\n"
    'If you know your Chrome version (v) and platform (p), you can download by replacing the placeholders in:'
)

CATALOG_TEXT = (
    'View the full list of available Chrome-for-Testing versions here '
    '(not all specific versions are listed but you can download them by entering the version):'
)


class InfoPanel(Vertical):
    DEFAULT_CSS = """
    InfoPanel {
        height: auto;
        border: round $primary;
        padding: 0 1;
        margin-top: 1;
    }
    InfoPanel > #info-title {
        text-style: bold;
        color: $primary;
    }
    InfoPanel > Horizontal {
        height: auto;
    }
    InfoPanel #info-template {
        width: 1fr;
        background: $boost;
        padding: 0 1;
    }
    InfoPanel #copy-button {
        min-width: 10;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.border_title = 'Info'
        self.copied = False

    def compose(self) -> ComposeResult:
        yield Static('ChromeDriver for Testing Info', id='info-title')
        yield Static(INFO_TEXT, id='info-body')
        with Horizontal():
            yield Static(PLACEHOLDER_URL, id='info-template', markup=False)
            yield Button('Copy', id='copy-button', variant='default')
        yield Static(CATALOG_TEXT, id='info-catalog')
        yield Static(f'[link="{CATALOG_URL}"]{CATALOG_URL}[/link]', id='info-catalog-link')

    def set_copied(self, copied: bool) -> None:
        self.copied = copied
        self.query_one('#copy-button', Button).label = '✓ Copied' if copied else 'Copy'

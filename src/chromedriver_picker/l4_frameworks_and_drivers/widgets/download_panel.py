"""Download panel — the download control, visible only while the selection is Ready."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Button, Static

from chromedriver_picker.l1_entities.download_target import DownloadTarget


class DownloadPanel(Vertical):
    DEFAULT_CSS = """
    DownloadPanel {
        height: auto;
        margin-top: 1;
        align-horizontal: center;
    }
    DownloadPanel > #download-button {
        width: 100%;
    }
    DownloadPanel > #download-url {
        color: $text-muted;
        text-align: center;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.target: DownloadTarget | None = None
        self.display = False

    def compose(self) -> ComposeResult:
        yield Button('Direct Download', id='download-button', variant='primary')
        yield Static('', id='download-url')

    def show_target(self, target: DownloadTarget | None) -> None:
        self.target = target
        self.display = target is not None
        if target is None:
            return
        self.query_one('#download-button', Button).label = f'⤓ Direct Download ({target.filename})'
        self.query_one('#download-url', Static).update(target.url)

"""Help modal — key reference built from the app's bindings, plus the link format."""

from __future__ import annotations

from collections.abc import Iterable

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Markdown, Static

from chromedriver_picker.l1_entities.download_target import CATALOG_URL, PLACEHOLDER_URL
from chromedriver_picker.l1_entities.platform import Platform

# Keys handled by widgets rather than app bindings.
FORM_KEYS = [
    ('Enter', 'Download (from the version field)'),
    ('Tab', 'Next field'),
]


def help_markdown(bindings: Iterable[Binding]) -> str:
    rows = list(FORM_KEYS)
    rows.extend((b.key, b.description) for b in bindings if b.description)
    platforms = ', '.join(f'`{p.value}`' for p in Platform)
    lines = ['| Key | Action |', '|-----|--------|']
    lines.extend(f'| `{key}` | {action} |' for key, action in rows)
    lines += [
        '',
        '### Link format',
        f'`{PLACEHOLDER_URL}`',
        '',
        f'`v` is a version like `131.0.6778.140`; `p` is one of {platforms}.',
        'The download button appears once the version is well formed. '
        'Links are not checked against the catalog:',
        '',
        CATALOG_URL,
    ]
    return '\n'.join(lines)


class HelpModal(ModalScreen[None]):
    DEFAULT_CSS = """
    HelpModal {
        align: center middle;
    }
    HelpModal > Vertical {
        width: 70%;
        max-width: 96;
        height: auto;
        max-height: 90%;
        background: $surface;
        border: round $primary;
        border-title-style: bold;
        padding: 0 2;
    }
    HelpModal #help-body {
        height: auto;
    }
    HelpModal #help-hint {
        color: $text-muted;
        text-align: right;
    }
    """

    BINDINGS = [
        ('escape', 'dismiss', 'Close'),
        ('h', 'dismiss', 'Close'),
    ]

    def __init__(self, bindings: Iterable[Binding], **kwargs) -> None:
        super().__init__(**kwargs)
        self.body_md = help_markdown(bindings)

    def compose(self) -> ComposeResult:
        with Vertical() as box:
            box.border_title = 'chromedriver-picker help'
            yield Markdown(self.body_md, id='help-body')
            yield Static('Esc / h to close', id='help-hint')

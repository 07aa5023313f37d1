"""Tests for the help modal."""

from __future__ import annotations

import pytest
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Markdown, Static

from chromedriver_picker.l1_entities.download_target import CATALOG_URL, PLACEHOLDER_URL
from chromedriver_picker.l4_frameworks_and_drivers.app import PickerApp
from chromedriver_picker.l4_frameworks_and_drivers.widgets.help_modal import HelpModal, help_markdown


class TestHelpMarkdown:
    def test_rows_follow_bindings(self):
        md = help_markdown(PickerApp.BINDINGS)
        for binding in PickerApp.BINDINGS:
            assert f'| `{binding.key}` | {binding.description} |' in md

    def test_form_keys_listed_first(self):
        md = help_markdown([Binding('x', 'noop', 'Extra')])
        rows = [line for line in md.splitlines() if line.startswith('| `')]
        assert rows[0].startswith('| `Enter` |')
        assert rows[-1] == '| `x` | Extra |'

    def test_bindings_without_description_skipped(self):
        md = help_markdown([Binding('z', 'noop', '')])
        assert '`z`' not in md

    def test_link_format_section(self):
        md = help_markdown([])
        assert PLACEHOLDER_URL in md
        assert CATALOG_URL in md
        assert '`win64`, `win32`' in md


class HelpHost(App):
    def compose(self) -> ComposeResult:
        yield Static('host')


class TestHelpModal:
    @pytest.mark.asyncio
    async def test_escape_closes(self):
        app = HelpHost()
        async with app.run_test() as pilot:
            app.push_screen(HelpModal([Binding('q', 'quit', 'Quit')]))
            await pilot.pause()
            assert isinstance(app.screen, HelpModal)
            assert app.screen.query_one('#help-body', Markdown)
            await pilot.press('escape')
            await pilot.pause()
            assert not isinstance(app.screen, HelpModal)

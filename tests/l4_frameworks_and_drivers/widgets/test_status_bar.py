"""Tests for the status bar."""

from __future__ import annotations

import pytest
from textual.app import App, ComposeResult

from chromedriver_picker.l4_frameworks_and_drivers.widgets.status_bar import StatusBar


class BarHost(App[None]):
    def compose(self) -> ComposeResult:
        yield StatusBar(id='status-bar')


class TestStatusBarRender:
    @pytest.mark.asyncio
    async def test_invalid_by_default(self):
        app = BarHost()
        async with app.run_test():
            bar = app.query_one('#status-bar', StatusBar)
            assert '○ Invalid' in bar.render()

    @pytest.mark.asyncio
    async def test_ready_platform_detection(self):
        app = BarHost()
        async with app.run_test():
            bar = app.query_one('#status-bar', StatusBar)
            bar.ready = True
            bar.platform_label = 'Win32'
            bar.detection = 'found'
            text = bar.render()
            assert '● Ready' in text
            assert 'Win32' in text
            assert '✓ Detected' in text

    @pytest.mark.asyncio
    async def test_hints_right_aligned_when_room(self):
        app = BarHost()
        async with app.run_test(size=(120, 10)):
            bar = app.query_one('#status-bar', StatusBar)
            bar.keybinding_hints = r'\[q] quit'
            assert bar.render().endswith(r'\[q] quit')

    @pytest.mark.asyncio
    async def test_hints_dropped_when_narrow(self):
        app = BarHost()
        async with app.run_test(size=(20, 10)):
            bar = app.query_one('#status-bar', StatusBar)
            bar.keybinding_hints = r'\[Enter] download  \[c] copy  \[q] quit'
            assert 'quit' not in bar.render()

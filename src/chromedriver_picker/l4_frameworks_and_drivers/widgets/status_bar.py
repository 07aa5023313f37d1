"""Status bar — bottom bar showing selection state, detection progress, and keybinding hints."""

from __future__ import annotations

from rich.cells import cell_len
from textual.reactive import reactive
from textual.widgets import Static

_DETECTION_LABELS = {
    'detecting': '⟳ Detecting…',
    'found': '✓ Detected',
    'none': '○ No suggestion',
    'off': '○ Detection off',
}


class StatusBar(Static):
    """Bottom status bar with Ready/Invalid state, platform, detection state, and hints."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: auto;
        background: $surface;
        color: $text;
        padding: 0 1;
        overflow: hidden hidden;
    }
    """

    ready: reactive[bool] = reactive(False)
    platform_label: reactive[str] = reactive('')
    detection: reactive[str] = reactive('')
    keybinding_hints: reactive[str] = reactive('')

    def render(self) -> str:
        left_parts = ['● Ready' if self.ready else '○ Invalid']
        if self.platform_label:
            left_parts.append(self.platform_label)
        if self.detection:
            left_parts.append(_DETECTION_LABELS.get(self.detection, self.detection))
        left = ' │ '.join(left_parts)

        content_width = (self.size.width or 80) - 2
        hints = self.keybinding_hints
        if hints:
            hints_width = cell_len(hints.replace(r'\[', '['))
            gap = content_width - cell_len(left) - hints_width
            if gap >= 2:
                left = left + ' ' * gap + hints
        return left

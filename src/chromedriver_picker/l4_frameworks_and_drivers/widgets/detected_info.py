"""Detected info — shows the one-shot detection suggestion under the version input."""

from __future__ import annotations

from textual.widgets import Static

from chromedriver_picker.l1_entities.detection import DetectionResult


class DetectedInfo(Static):
    DEFAULT_CSS = """
    DetectedInfo {
        color: $text-muted;
        height: auto;
        margin-top: 1;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__('⟳ Detecting local browser…', **kwargs)
        self.result: DetectionResult | None = None

    def show_result(self, result: DetectionResult) -> None:
        self.result = result
        lines = []
        if result.version:
            lines.append(f'Detected version: [b]{result.version}[/b]')
        if result.bitness:
            lines.append(f'Detected arch: [b]{result.bitness}-bit[/b]')
        self.update('\n'.join(lines))
        self.display = not result.is_empty

"""Textual Message subclasses — contracts between workers/widgets and the App."""

from __future__ import annotations

from textual.message import Message

from chromedriver_picker.l1_entities.detection import DetectionResult


class DetectionFinished(Message):
    """Posted by the detection worker once the one-shot detection completes."""

    def __init__(self, result: DetectionResult) -> None:
        super().__init__()
        self.result = result


class AdSlotInitialized(Message):
    """Posted by an ad banner after its slot request reached the ad script queue."""

    def __init__(self, position: str) -> None:
        super().__init__()
        self.position = position

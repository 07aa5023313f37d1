"""Selection state entity — the live (version, platform) pair behind the form."""

from __future__ import annotations

from pydantic import BaseModel, Field

from chromedriver_picker.l1_entities.platform import Platform


class SelectionState(BaseModel):
    """Mutable form state. ``ready`` is the Ready/Invalid classification of the pair."""

    version: str = ''
    platform: Platform = Field(default_factory=Platform.default)
    ready: bool = False
    error: str = ''

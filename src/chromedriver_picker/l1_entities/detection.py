"""Detection entities — structured client hints and the one-shot suggestion."""

from __future__ import annotations

from pydantic import BaseModel, Field


class BrandVersion(BaseModel):
    brand: str
    version: str


class HighEntropyValues(BaseModel):
    """Structured identification data, shaped like navigator.userAgentData output."""

    full_version_list: list[BrandVersion] = Field(default_factory=list)
    bitness: str = ''


class DetectionResult(BaseModel):
    """Best-effort guess at the local browser. Either field may be absent."""

    version: str | None = None
    bitness: str | None = None

    model_config = {'frozen': True}

    @property
    def is_empty(self) -> bool:
        return not self.version and not self.bitness

    def describe(self) -> str:
        """One-line summary for toasts, e.g. 'Version: 131.0.6778.140 • Platform: 64-bit'."""
        parts = []
        if self.version:
            parts.append(f'Version: {self.version}')
        if self.bitness:
            parts.append(f'Platform: {self.bitness}-bit')
        return ' • '.join(parts)

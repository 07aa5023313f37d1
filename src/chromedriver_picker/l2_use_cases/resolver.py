"""Use case: maintain the (version, platform) selection and derive its download URL."""

from __future__ import annotations

from chromedriver_picker.l1_entities.detection import DetectionResult
from chromedriver_picker.l1_entities.download_target import DownloadTarget, derive_download_url
from chromedriver_picker.l1_entities.platform import Platform
from chromedriver_picker.l1_entities.selection import SelectionState
from chromedriver_picker.l1_entities.version import is_well_formed

__all__ = ['Resolver', 'derive_download_url']


class Resolver:
    """Owns one SelectionState. Malformed input is a state, never an exception."""

    def __init__(self, platform: Platform | None = None) -> None:
        self.state = SelectionState(platform=platform or Platform.default())

    @property
    def ready(self) -> bool:
        return self.state.ready

    @property
    def version(self) -> str:
        return self.state.version

    @property
    def platform(self) -> Platform:
        return self.state.platform

    @property
    def error(self) -> str:
        return self.state.error

    def set_version(self, raw: str) -> bool:
        """Store the trimmed text verbatim and return whether it is well-formed."""
        self.state.version = raw.strip()
        self.state.ready = is_well_formed(self.state.version)
        self.state.error = ''
        return self.state.ready

    def set_platform(self, value: Platform) -> bool:
        self.state.platform = value
        self.state.ready = is_well_formed(self.state.version)
        self.state.error = ''
        return self.state.ready

    @property
    def download_target(self) -> DownloadTarget | None:
        """The target for the current pair, or None while Invalid."""
        if not self.state.ready:
            return None
        return DownloadTarget(version=self.state.version, platform=self.state.platform)

    def apply_detected_info(self, result: DetectionResult) -> None:
        """Copy a detection suggestion into the live selection."""
        if result.version and is_well_formed(result.version):
            self.state.version = result.version
            self.state.ready = True
        if result.bitness:
            self.state.platform = Platform.from_bitness(result.bitness)
        self.state.error = ''

    def reject(self, message: str) -> None:
        """Record a user-visible error, e.g. when an Invalid form is submitted."""
        self.state.error = message

    def clear_error(self) -> None:
        self.state.error = ''

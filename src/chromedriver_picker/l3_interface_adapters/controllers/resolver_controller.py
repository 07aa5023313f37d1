"""ResolverController — orchestrates the resolver and detection for the TUI."""

from __future__ import annotations

import logging

from chromedriver_picker.l1_entities.config import AppConfig
from chromedriver_picker.l1_entities.detection import DetectionResult
from chromedriver_picker.l1_entities.download_target import PLACEHOLDER_URL, DownloadTarget
from chromedriver_picker.l1_entities.errors import CopyFailedError
from chromedriver_picker.l1_entities.platform import Platform
from chromedriver_picker.l2_use_cases.detect_environment_use_case import DetectEnvironmentUseCase
from chromedriver_picker.l2_use_cases.ports.browser_signals import BrowserSignals
from chromedriver_picker.l2_use_cases.ports.clipboard import Clipboard
from chromedriver_picker.l2_use_cases.resolver import Resolver

log = logging.getLogger('cdpicker.controller')

INVALID_VERSION_MESSAGE = 'Enter a version like 131.0.6778.140 (four numbers separated by dots).'


class ResolverController:
    """Central orchestrator bridging the resolver to the TUI.

    Owns the Resolver and the one-shot DetectionResult. The App (L4) forwards
    input events here and renders whatever state comes back.
    """

    def __init__(
        self,
        config: AppConfig,
        signals: BrowserSignals,
        clipboard: Clipboard,
    ) -> None:
        self._config = config
        self._clipboard = clipboard
        self._detect_uc = DetectEnvironmentUseCase(signals)

        self.resolver = Resolver(config.default_platform)
        self._detection: DetectionResult | None = None

    @property
    def detection(self) -> DetectionResult | None:
        return self._detection

    def on_version_input(self, raw: str) -> bool:
        return self.resolver.set_version(raw)

    def on_platform_selected(self, value: Platform | str) -> bool:
        return self.resolver.set_platform(Platform(value))

    def submit(self) -> DownloadTarget | None:
        """Return the target when Ready; otherwise record the validation error."""
        target = self.resolver.download_target
        if target is None:
            self.resolver.reject(INVALID_VERSION_MESSAGE)
        return target

    async def detect(self) -> DetectionResult:
        """Run detection once. Returns an empty result when detection is disabled."""
        if not self._config.detection.enabled:
            return DetectionResult()
        return await self._detect_uc.execute()

    def record_detection(self, result: DetectionResult) -> bool:
        """Store the first detection result. Later results are ignored; returns False for them."""
        if self._detection is not None:
            return False
        self._detection = result
        return True

    def apply_detected(self) -> DetectionResult | None:
        """Apply the stored suggestion to the selection. None when there is nothing to apply."""
        if self._detection is None or self._detection.is_empty:
            return None
        self.resolver.apply_detected_info(self._detection)
        return self._detection

    def clipboard_text(self) -> str:
        """The concrete URL when Ready, else the ${v}/${p} template the info panel shows.

        A half-typed version is never interpolated into a URL that would 404.
        """
        target = self.resolver.download_target
        return target.url if target is not None else PLACEHOLDER_URL

    def copy_url(self) -> tuple[bool, str]:
        """Copy the current URL (or the placeholder template) to the clipboard."""
        text = self.clipboard_text()
        try:
            self._clipboard.copy(text)
        except CopyFailedError as e:
            log.warning('Copy to clipboard failed: %s', e)
            return False, str(e)
        return True, ''

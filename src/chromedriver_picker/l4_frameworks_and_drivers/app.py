"""PickerApp — Textual form that resolves a chromedriver download link."""

from __future__ import annotations

import logging

from textual.app import App as TextualApp
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.widgets import Button, Input, RadioButton, RadioSet, Static

from chromedriver_picker.l1_entities.config import AppConfig
from chromedriver_picker.l1_entities.platform import Platform
from chromedriver_picker.l3_interface_adapters.controllers.resolver_controller import ResolverController
from chromedriver_picker.l4_frameworks_and_drivers.ad_script_queue import AdScriptQueue
from chromedriver_picker.l4_frameworks_and_drivers.messages import AdSlotInitialized, DetectionFinished
from chromedriver_picker.l4_frameworks_and_drivers.widgets.ad_banner import AdBanner
from chromedriver_picker.l4_frameworks_and_drivers.widgets.detected_info import DetectedInfo
from chromedriver_picker.l4_frameworks_and_drivers.widgets.download_panel import DownloadPanel
from chromedriver_picker.l4_frameworks_and_drivers.widgets.error_alert import ErrorAlert
from chromedriver_picker.l4_frameworks_and_drivers.widgets.help_modal import HelpModal
from chromedriver_picker.l4_frameworks_and_drivers.widgets.info_panel import InfoPanel
from chromedriver_picker.l4_frameworks_and_drivers.widgets.status_bar import StatusBar

log = logging.getLogger('cdpicker.app')

INTRO_TEXT = (
    'Enter your Google Chrome version and select your platform to download the ChromeDriver zip. '
    'This downloads directly from the official Chrome for Testing storage.'
)

COPIED_RESET_SECONDS = 2.0


class PickerApp(TextualApp):
    """Version input, platform choice, detection suggestion, and the derived download link."""

    CSS_PATH = 'app.tcss'

    BINDINGS = [
        Binding('q', 'quit_app', 'Quit'),
        Binding('d', 'download', 'Download', show=False),
        Binding('c', 'copy_url', 'Copy download URL', show=False),
        Binding('u', 'use_detected', 'Use detected info', show=False),
        Binding('h', 'show_help', 'Toggle help'),
    ]

    def __init__(
        self,
        config: AppConfig,
        controller: ResolverController | None = None,
        ad_queue: AdScriptQueue | None = None,
        initial_version: str = '',
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._config = config
        self._initial_version = initial_version

        if controller is not None:
            self._controller = controller
        else:  # pragma: no cover -- composition-root wiring; controller always injected in tests
            from chromedriver_picker.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: only wired when no controller injected (non-test path)
                DependencyContainer,
            )

            self._controller = DependencyContainer(config).controller
        self._ad_queue = ad_queue

        # Cleared on unmount; a detection finishing after that is dropped.
        self._alive = False

    def compose(self) -> ComposeResult:
        ads = self._config.ads
        yield Static('  chromedriver-picker | ChromeDriver downloader', id='header')
        with Horizontal(id='main-panels'):
            if ads.enabled:
                yield self._ad_banner('left', id='ad-left')
            with VerticalScroll(id='form-col'):
                yield ErrorAlert(id='error-alert')
                yield Static(INTRO_TEXT, id='intro')
                yield Static('Chrome version number', classes='field-label')
                yield Input(
                    value=self._initial_version,
                    placeholder='e.g. 131.0.6778.140',
                    id='version-input',
                )
                yield DetectedInfo(id='detected-info')
                yield Button('Use detected info', id='use-detected', variant='default')
                yield Static('Platform', classes='field-label')
                with RadioSet(id='platform-set'):
                    for p in Platform:
                        yield RadioButton(p.label, value=p == self._controller.resolver.platform)
                yield DownloadPanel(id='download-panel')
                yield InfoPanel(id='info-panel')
                if ads.enabled:
                    yield self._ad_banner('bottom', id='ad-bottom')
            if ads.enabled:
                yield self._ad_banner('right', id='ad-right')
        yield StatusBar(id='status-bar')

    def _ad_banner(self, position: str, **kwargs) -> AdBanner:
        ads = self._config.ads
        return AdBanner(
            position,
            client=ads.client,
            slot=ads.slot,
            init_delay=ads.init_delay,
            queue=self._ad_queue,
            **kwargs,
        )

    def on_mount(self) -> None:
        self._alive = True
        self.query_one('#use-detected', Button).display = False
        bar = self.query_one('#status-bar', StatusBar)
        bar.keybinding_hints = r'\[Enter] download  \[c] copy  \[u] use detected  \[h] help  \[q] quit'
        if self._initial_version:
            self._controller.on_version_input(self._initial_version)
        self._refresh_selection()
        self._run_detection_worker()

    def on_unmount(self) -> None:
        self._alive = False

    def _refresh_selection(self) -> None:
        resolver = self._controller.resolver
        self.query_one('#download-panel', DownloadPanel).show_target(resolver.download_target)
        self.query_one('#error-alert', ErrorAlert).show_error(resolver.error)
        bar = self.query_one('#status-bar', StatusBar)
        bar.ready = resolver.ready
        bar.platform_label = resolver.platform.label

    def _sync_form(self) -> None:
        """Push resolver state back into the input widgets."""
        resolver = self._controller.resolver
        version_input = self.query_one('#version-input', Input)
        if version_input.value != resolver.version:
            version_input.value = resolver.version
        buttons = list(self.query_one('#platform-set', RadioSet).query(RadioButton))
        buttons[list(Platform).index(resolver.platform)].value = True
        self._refresh_selection()

    # --- Detection ---

    def _run_detection_worker(self) -> None:
        bar = self.query_one('#status-bar', StatusBar)
        bar.detection = 'detecting' if self._config.detection.enabled else 'off'
        self.run_worker(self._detect_and_post, exclusive=True, group='detect')

    async def _detect_and_post(self) -> None:
        result = await self._controller.detect()
        if not self._alive:
            log.debug('View closed before detection finished; result discarded')
            return
        self.post_message(DetectionFinished(result))

    def on_detection_finished(self, message: DetectionFinished) -> None:
        if not self._alive or not self._controller.record_detection(message.result):
            return
        result = message.result
        self.query_one('#detected-info', DetectedInfo).show_result(result)
        self.query_one('#use-detected', Button).display = not result.is_empty
        bar = self.query_one('#status-bar', StatusBar)
        if self._config.detection.enabled:
            bar.detection = 'none' if result.is_empty else 'found'

    def on_ad_slot_initialized(self, message: AdSlotInitialized) -> None:
        log.debug('Ad slot ready: %s', message.position)

    # --- Input events ---

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == 'version-input':
            self._controller.on_version_input(event.value)
            self._refresh_selection()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == 'version-input':
            self.action_download()

    def on_radio_set_changed(self, event: RadioSet.Changed) -> None:
        self._controller.on_platform_selected(list(Platform)[event.index])
        self._refresh_selection()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if button_id == 'download-button':
            self.action_download()
        elif button_id == 'copy-button':
            self.action_copy_url()
        elif button_id == 'use-detected':
            self.action_use_detected()
        elif button_id == 'dismiss-error':
            self._controller.resolver.clear_error()
            self._refresh_selection()

    # --- Actions ---

    def action_download(self) -> None:
        target = self._controller.submit()
        self._refresh_selection()
        if target is None:
            return
        log.info('Opening %s', target.url)
        self.open_url(target.url)
        self.notify(f'Downloading {target.label}', title='Download started', timeout=3)

    def action_copy_url(self) -> None:
        ok, err = self._controller.copy_url()
        if not ok:
            self.notify('Could not copy text to clipboard', title='Copy failed', severity='error', timeout=5)
            return
        panel = self.query_one('#info-panel', InfoPanel)
        panel.set_copied(True)
        self.set_timer(COPIED_RESET_SECONDS, lambda: panel.set_copied(False))
        self.notify('URL has been copied to your clipboard', title='Copied to clipboard', timeout=3)

    def action_use_detected(self) -> None:
        result = self._controller.apply_detected()
        if result is None:
            self.notify('No detected info available', severity='warning', timeout=3)
            return
        self._sync_form()
        self.notify(result.describe(), title='Detected info applied', timeout=3)

    def action_show_help(self) -> None:
        if isinstance(self.screen, HelpModal):
            self.screen.dismiss()
            return
        self.push_screen(HelpModal(self.BINDINGS))

    def action_quit_app(self) -> None:
        self._alive = False
        self.exit()

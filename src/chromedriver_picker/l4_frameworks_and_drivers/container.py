"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from chromedriver_picker.l1_entities.config import AppConfig
from chromedriver_picker.l2_use_cases.ports.browser_signals import BrowserSignals
from chromedriver_picker.l2_use_cases.ports.clipboard import Clipboard
from chromedriver_picker.l3_interface_adapters.controllers.resolver_controller import ResolverController
from chromedriver_picker.l3_interface_adapters.gateways.local_browser_signals import LocalBrowserSignals
from chromedriver_picker.l3_interface_adapters.gateways.pyperclip_clipboard import PyperclipClipboard
from chromedriver_picker.l4_frameworks_and_drivers.ad_script_queue import AdScriptQueue, get_ad_queue
from chromedriver_picker.l4_frameworks_and_drivers.infra_config import InfraConfig


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(self, config: AppConfig, infra: InfraConfig | None = None) -> None:
        self.config = config

        _infra = infra or InfraConfig()
        self.signals: BrowserSignals = LocalBrowserSignals(
            binaries=_infra.browser.binaries,
            timeout=_infra.browser.timeout,
            user_agent=config.detection.user_agent,
        )
        self.clipboard: Clipboard = PyperclipClipboard()
        self.ad_queue: AdScriptQueue = get_ad_queue()

        self.controller = ResolverController(
            config=config,
            signals=self.signals,
            clipboard=self.clipboard,
        )

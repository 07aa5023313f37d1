"""Tests for the dependency container."""

from __future__ import annotations

from chromedriver_picker.l3_interface_adapters.controllers.resolver_controller import ResolverController
from chromedriver_picker.l3_interface_adapters.gateways.local_browser_signals import LocalBrowserSignals
from chromedriver_picker.l3_interface_adapters.gateways.pyperclip_clipboard import PyperclipClipboard
from chromedriver_picker.l4_frameworks_and_drivers.ad_script_queue import get_ad_queue
from chromedriver_picker.l4_frameworks_and_drivers.container import DependencyContainer
from chromedriver_picker.l4_frameworks_and_drivers.infra_config import InfraConfig, build_app_config


class TestDependencyContainer:
    def test_wires_concrete_gateways(self, default_config):
        container = DependencyContainer(default_config)
        assert isinstance(container.signals, LocalBrowserSignals)
        assert isinstance(container.clipboard, PyperclipClipboard)
        assert isinstance(container.controller, ResolverController)
        assert container.ad_queue is get_ad_queue()

    def test_user_agent_and_infra_reach_signals(self):
        config = build_app_config({'detection': {'user_agent': 'Chrome/1.2.3.4'}})
        infra = InfraConfig.model_validate({'browser': {'binaries': ['/opt/chrome'], 'timeout': 1.5}})
        container = DependencyContainer(config, infra=infra)
        assert container.signals.user_agent() == 'Chrome/1.2.3.4'
        assert container.signals._binaries == ['/opt/chrome']
        assert container.signals._timeout == 1.5

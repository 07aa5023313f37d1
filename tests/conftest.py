"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from chromedriver_picker.l1_entities.config import AppConfig
from chromedriver_picker.l1_entities.detection import BrandVersion, HighEntropyValues
from chromedriver_picker.l1_entities.errors import CopyFailedError
from chromedriver_picker.l3_interface_adapters.controllers.resolver_controller import ResolverController
from chromedriver_picker.l4_frameworks_and_drivers.ad_script_queue import AdScriptQueue
from chromedriver_picker.l4_frameworks_and_drivers.infra_config import build_app_config

CHROME_WIN64_UA = (
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
    '(KHTML, like Gecko) Chrome/131.0.6778.140 Safari/537.36'
)

# --- Protocol-conforming Fakes ---


class FakeBrowserSignals:
    """Fake BrowserSignals for L2/L3 tests."""

    def __init__(
        self,
        high: HighEntropyValues | None = None,
        user_agent: str = '',
        supported: bool = True,
        error: Exception | None = None,
    ) -> None:
        self._high = high
        self._user_agent = user_agent
        self._supported = supported
        self._error = error
        self.hint_calls: list[tuple[str, ...]] = []

    def supports_high_entropy(self) -> bool:
        return self._supported

    async def get_high_entropy_values(self, hints: Sequence[str]) -> HighEntropyValues:
        self.hint_calls.append(tuple(hints))
        if self._error is not None:
            raise self._error
        return self._high or HighEntropyValues()

    def user_agent(self) -> str:
        return self._user_agent


class FakeClipboard:
    """Fake clipboard — records copies, optionally fails."""

    def __init__(self, fail: bool = False) -> None:
        self._fail = fail
        self.copied: list[str] = []

    def copy(self, text: str) -> None:
        if self._fail:
            raise CopyFailedError('clipboard unavailable')
        self.copied.append(text)


def chrome_hints(version: str = '131.0.6778.140', bitness: str = '64') -> HighEntropyValues:
    return HighEntropyValues(
        full_version_list=[
            BrandVersion(brand='Not_A Brand', version='24.0.0.0'),
            BrandVersion(brand='Chromium', version=version),
            BrandVersion(brand='Google Chrome', version=version),
        ],
        bitness=bitness,
    )


# --- Standard Fixtures ---


@pytest.fixture
def default_config() -> AppConfig:
    return build_app_config({})


@pytest.fixture
def fake_signals() -> FakeBrowserSignals:
    return FakeBrowserSignals(high=chrome_hints())


@pytest.fixture
def fake_clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def ad_queue() -> AdScriptQueue:
    return AdScriptQueue()


@pytest.fixture
def controller(default_config, fake_signals, fake_clipboard) -> ResolverController:
    return ResolverController(config=default_config, signals=fake_signals, clipboard=fake_clipboard)


@pytest.fixture
def sample_config_yaml(tmp_path):
    content = """\
default_platform: win32
detection:
  enabled: false
  user_agent: "Mozilla/5.0 (Windows NT 10.0; WOW64) Chrome/120.0.0.1"
ads:
  enabled: false
browser:
  binaries: ["/opt/chrome/chrome"]
  timeout: 2.5
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p

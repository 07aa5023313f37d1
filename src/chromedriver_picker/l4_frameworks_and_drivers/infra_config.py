"""Infrastructure configs and domain defaults — lives in L4, not domain."""

from __future__ import annotations

import copy

from pydantic import BaseModel, Field

from chromedriver_picker.l1_entities.config import AppConfig
from chromedriver_picker.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

APP_CONFIG_DEFAULTS: dict = {
    'default_platform': 'win64',
    'detection': {
        'enabled': True,
        'user_agent': '',
    },
    'ads': {
        'enabled': True,
        'client': 'ca-pub-6126218905254433',
        'slot': '8875353828',
        'init_delay': 0.01,
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)


class BrowserProbeConfig(BaseModel):
    binaries: list[str] = Field(default_factory=list)  # empty → per-OS defaults
    timeout: float = 5.0


class LoggingConfig(BaseModel):
    directory: str | None = None  # None → platformdirs user log dir
    level: str = 'DEBUG'


class InfraConfig(BaseModel):
    """Groups gateway-specific settings outside the domain layer."""

    browser: BrowserProbeConfig = Field(default_factory=BrowserProbeConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

from pydantic import BaseModel

from chromedriver_picker.l1_entities.platform import Platform


class DetectionConfig(BaseModel):
    enabled: bool
    user_agent: str = ''


class AdsConfig(BaseModel):
    enabled: bool
    client: str
    slot: str
    init_delay: float


class AppConfig(BaseModel):
    default_platform: Platform
    detection: DetectionConfig
    ads: AdsConfig

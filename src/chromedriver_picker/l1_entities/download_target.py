"""Download target entity — derived from (version, platform), never stored."""

from __future__ import annotations

from pydantic import BaseModel

from chromedriver_picker.l1_entities.platform import Platform

URL_TEMPLATE = (
    'https://storage.googleapis.com/chrome-for-testing-public/{version}/{platform}/chromedriver-{platform}.zip'
)
PLACEHOLDER_URL = URL_TEMPLATE.format(version='${v}', platform='${p}')
CATALOG_URL = 'https://googlechromelabs.github.io/chrome-for-testing/'


def derive_download_url(version: str, platform: Platform | str) -> str:
    """Interpolate *version* and *platform* verbatim. Callers gate on a well-formed version."""
    tag = platform.value if isinstance(platform, Platform) else platform
    return URL_TEMPLATE.format(version=version, platform=tag)


class DownloadTarget(BaseModel):
    version: str
    platform: Platform

    model_config = {'frozen': True}

    @property
    def url(self) -> str:
        return derive_download_url(self.version, self.platform)

    @property
    def label(self) -> str:
        return f'{self.version}_{self.platform.value}'

    @property
    def filename(self) -> str:
        return f'{self.label}.zip'

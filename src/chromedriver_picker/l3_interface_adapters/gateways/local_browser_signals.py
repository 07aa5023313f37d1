"""Gateway: local browser probe — implements BrowserSignals port.

A terminal has no navigator.userAgentData, so the structured tier is built from
the installed browsers themselves: each candidate binary is asked for
``--version`` (the BLBeacon registry key on Windows) and the machine
architecture stands in for the bitness hint. The free-text identification
string is whatever the user configured.
"""

from __future__ import annotations

import asyncio
import logging
import platform
import re
import shutil
import sys
from collections.abc import Sequence

from chromedriver_picker.l1_entities.detection import BrandVersion, HighEntropyValues
from chromedriver_picker.l1_entities.errors import DetectionUnavailableError

log = logging.getLogger('cdpicker.browser')

DEFAULT_BINARIES: dict[str, list[str]] = {
    'linux': ['google-chrome', 'google-chrome-stable', 'chromium', 'chromium-browser'],
    'darwin': [
        '/Applications/Google Chrome.app/Contents/MacOS/Google Chrome',
        '/Applications/Chromium.app/Contents/MacOS/Chromium',
    ],
    'win32': [],
}

# (registry key under HKEY_CURRENT_USER, brand reported for it)
WINDOWS_BEACONS = [
    (r'Software\Google\Chrome\BLBeacon', 'Google Chrome'),
    (r'Software\Chromium\BLBeacon', 'Chromium'),
]

_VERSION_LINE = re.compile(r'^(?P<brand>.*?)\s+(?P<version>\d+(?:\.\d+)+)')
_64BIT_MACHINES = {'amd64', 'x86_64', 'x64', 'arm64', 'aarch64'}
_32BIT_MACHINES = {'x86', 'i386', 'i686', 'armv7l', 'arm'}


def default_binaries() -> list[str]:
    return list(DEFAULT_BINARIES.get(sys.platform, DEFAULT_BINARIES['linux']))


def parse_version_output(text: str) -> BrandVersion | None:
    """Parse ``Google Chrome 131.0.6778.140`` style output into a brand/version pair."""
    line = text.strip().splitlines()[0] if text.strip() else ''
    m = _VERSION_LINE.match(line)
    if not m:
        return None
    return BrandVersion(brand=m.group('brand').strip(), version=m.group('version'))


def machine_bitness(machine: str) -> str:
    key = machine.lower()
    if key in _64BIT_MACHINES:
        return '64'
    if key in _32BIT_MACHINES:
        return '32'
    return ''


class LocalBrowserSignals:
    """Probes installed Chrome/Chromium builds for their versions."""

    def __init__(
        self,
        binaries: Sequence[str] | None = None,
        timeout: float = 5.0,
        user_agent: str = '',
    ) -> None:
        self._binaries = list(binaries) if binaries else default_binaries()
        self._timeout = timeout
        self._user_agent = user_agent

    def supports_high_entropy(self) -> bool:
        if sys.platform == 'win32':
            return True
        return any(shutil.which(b) for b in self._binaries)

    async def get_high_entropy_values(self, hints: Sequence[str]) -> HighEntropyValues:
        brands: list[BrandVersion] = []
        if 'fullVersionList' in hints:
            brands = await self._probe_brands()
        bitness = machine_bitness(platform.machine()) if 'bitness' in hints else ''
        if not brands and not bitness:
            raise DetectionUnavailableError('No browser installation or architecture information found')
        return HighEntropyValues(full_version_list=brands, bitness=bitness)

    def user_agent(self) -> str:
        return self._user_agent

    async def _probe_brands(self) -> list[BrandVersion]:
        found: dict[str, BrandVersion] = {}
        if sys.platform == 'win32':
            for entry in _registry_brands():
                found.setdefault(entry.brand, entry)
        for binary in self._binaries:
            path = shutil.which(binary)
            if path is None:
                continue
            entry = await self._run_version(path)
            if entry is not None:
                found.setdefault(entry.brand, entry)
        return list(found.values())

    async def _run_version(self, path: str) -> BrandVersion | None:
        try:
            proc = await asyncio.create_subprocess_exec(
                path,
                '--version',
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.DEVNULL,
            )
        except OSError as e:
            log.debug('Cannot launch %s: %s', path, e)
            return None
        try:
            stdout, _ = await asyncio.wait_for(proc.communicate(), timeout=self._timeout)
        except TimeoutError:
            log.debug('%s --version timed out after %.1fs', path, self._timeout)
            return None
        finally:
            # Also reached on cancellation; the child must not outlive the probe.
            if proc.returncode is None:
                proc.kill()
                await proc.wait()
        entry = parse_version_output(stdout.decode('utf-8', errors='replace'))
        log.debug('%s --version -> %s', path, entry)
        return entry


def _registry_brands() -> list[BrandVersion]:
    import winreg  # noqa: PLC0415 -- deferred: Windows only

    brands: list[BrandVersion] = []
    for key_path, brand in WINDOWS_BEACONS:
        try:
            with winreg.OpenKey(winreg.HKEY_CURRENT_USER, key_path) as key:
                version, _ = winreg.QueryValueEx(key, 'version')
        except OSError:
            continue
        brands.append(BrandVersion(brand=brand, version=str(version)))
    return brands

"""L1 entity: download platform."""

from __future__ import annotations

import enum


class Platform(enum.Enum):
    WIN64 = 'win64'
    WIN32 = 'win32'

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def default(cls) -> Platform:
        return next(iter(cls))

    @classmethod
    def from_bitness(cls, bitness: str) -> Platform:
        """'64' maps to win64; any other bitness maps to win32."""
        return cls.WIN64 if bitness == '64' else cls.WIN32

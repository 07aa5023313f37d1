"""Tests for the Platform enum."""

from chromedriver_picker.l1_entities.platform import Platform


class TestPlatform:
    def test_closed_set(self):
        assert [p.value for p in Platform] == ['win64', 'win32']

    def test_default_is_first(self):
        assert Platform.default() is Platform.WIN64

    def test_labels(self):
        assert Platform.WIN64.label == 'Win64'
        assert Platform.WIN32.label == 'Win32'

    def test_from_bitness_64(self):
        assert Platform.from_bitness('64') is Platform.WIN64

    def test_from_bitness_anything_else_is_win32(self):
        assert Platform.from_bitness('32') is Platform.WIN32
        assert Platform.from_bitness('') is Platform.WIN32
        assert Platform.from_bitness('128') is Platform.WIN32

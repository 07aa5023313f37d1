"""Tests for the process-wide ad script queue."""

from __future__ import annotations

import pytest

from chromedriver_picker.l4_frameworks_and_drivers.ad_script_queue import (
    AdScriptQueue,
    AdSlotRequest,
    get_ad_queue,
)


class TestAdScriptQueue:
    def test_initialize_runs_once(self, ad_queue):
        assert ad_queue.initialize('ca-pub-1') is True
        assert ad_queue.initialize('ca-pub-1') is False
        assert ad_queue.initialized is True

    def test_push_before_initialize_raises(self, ad_queue):
        with pytest.raises(RuntimeError):
            ad_queue.push(AdSlotRequest(client='c', slot='s', position='left'))

    def test_push_records_requests(self, ad_queue):
        ad_queue.initialize('c')
        ad_queue.push(AdSlotRequest(client='c', slot='s', position='left'))
        ad_queue.push(AdSlotRequest(client='c', slot='s', position='bottom'))
        assert [r.position for r in ad_queue.requests] == ['left', 'bottom']

    def test_reset(self, ad_queue):
        ad_queue.initialize('c')
        ad_queue.push(AdSlotRequest(client='c', slot='s', position='left'))
        ad_queue.reset()
        assert ad_queue.initialized is False
        assert ad_queue.requests == ()


class TestGetAdQueue:
    def test_process_wide_instance(self):
        assert get_ad_queue() is get_ad_queue()
        assert isinstance(get_ad_queue(), AdScriptQueue)

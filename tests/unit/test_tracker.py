# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for the pending-call tracker: record/take, TTL sweep, background sweeper."""

from __future__ import annotations

import asyncio

import pytest

from commentguard.core.constants import ToolName
from commentguard.models.calls import PendingCall
from commentguard.tracker.pending import PendingCallTracker

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class _FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def _edit_call(path: str = "/src/app.py", new: str = "x = 1") -> PendingCall:
    return PendingCall(
        file_path=path,
        tool=ToolName.EDIT,
        session_id="ses-1",
        old_string="x = 0",
        new_string=new,
    )


@pytest.fixture
def clock() -> _FakeClock:
    return _FakeClock()


@pytest.fixture
def tracker(clock: _FakeClock) -> PendingCallTracker:
    return PendingCallTracker(ttl=60.0, sweep_interval=10.0, clock=clock)


# ---------------------------------------------------------------------------
# record / take
# ---------------------------------------------------------------------------


class TestRecordTake:
    def test_take_returns_recorded_call_once(self, tracker: PendingCallTracker) -> None:
        call = _edit_call()
        tracker.record("call-1", call)

        assert tracker.take("call-1") is call
        assert tracker.take("call-1") is None

    def test_take_unknown_call(self, tracker: PendingCallTracker) -> None:
        assert tracker.take("never-recorded") is None

    def test_record_stamps_timestamp(
        self, tracker: PendingCallTracker, clock: _FakeClock
    ) -> None:
        call = _edit_call()
        tracker.record("call-1", call)
        assert call.timestamp == clock.now

    def test_overwrite_last_write_wins(self, tracker: PendingCallTracker) -> None:
        first = _edit_call(new="first")
        second = _edit_call(new="second")
        tracker.record("call-1", first)
        tracker.record("call-1", second)

        assert len(tracker) == 1
        assert tracker.take("call-1") is second

    def test_entries_are_independent(self, tracker: PendingCallTracker) -> None:
        a, b = _edit_call("/a.py"), _edit_call("/b.py")
        tracker.record("a", a)
        tracker.record("b", b)

        assert tracker.take("b") is b
        assert "a" in tracker
        assert tracker.take("a") is a


# ---------------------------------------------------------------------------
# sweep
# ---------------------------------------------------------------------------


class TestSweep:
    def test_removes_entries_older_than_ttl(
        self, tracker: PendingCallTracker, clock: _FakeClock
    ) -> None:
        tracker.record("old", _edit_call())
        clock.now += 61

        assert tracker.sweep() == 1
        assert tracker.take("old") is None

    def test_keeps_fresh_entries(
        self, tracker: PendingCallTracker, clock: _FakeClock
    ) -> None:
        tracker.record("old", _edit_call())
        clock.now += 30
        tracker.record("fresh", _edit_call())
        clock.now += 31

        assert tracker.sweep() == 1
        assert "old" not in tracker
        assert "fresh" in tracker

    def test_entry_exactly_at_ttl_survives(
        self, tracker: PendingCallTracker, clock: _FakeClock
    ) -> None:
        tracker.record("edge", _edit_call())
        assert tracker.sweep(now=clock.now + 60) == 0
        assert "edge" in tracker

    def test_explicit_now(self, tracker: PendingCallTracker, clock: _FakeClock) -> None:
        tracker.record("c", _edit_call())
        assert tracker.sweep(now=clock.now + 120) == 1
        assert len(tracker) == 0

    def test_sweep_on_empty_table(self, tracker: PendingCallTracker) -> None:
        assert tracker.sweep() == 0


# ---------------------------------------------------------------------------
# Background sweeper
# ---------------------------------------------------------------------------


class TestBackgroundSweeper:
    async def test_start_and_stop(self, clock: _FakeClock) -> None:
        tracker = PendingCallTracker(ttl=60.0, sweep_interval=0.01, clock=clock)
        await tracker.start()
        assert tracker.running is True

        await tracker.stop()
        assert tracker.running is False

    async def test_start_is_idempotent(self, clock: _FakeClock) -> None:
        tracker = PendingCallTracker(ttl=60.0, sweep_interval=0.01, clock=clock)
        await tracker.start()
        task = tracker._task
        await tracker.start()
        assert tracker._task is task
        await tracker.stop()

    async def test_expires_abandoned_calls(self, clock: _FakeClock) -> None:
        tracker = PendingCallTracker(ttl=60.0, sweep_interval=0.01, clock=clock)
        tracker.record("abandoned", _edit_call())
        clock.now += 61

        await tracker.start()
        try:
            for _ in range(100):
                if "abandoned" not in tracker:
                    break
                await asyncio.sleep(0.01)
        finally:
            await tracker.stop()

        assert tracker.take("abandoned") is None

    async def test_stop_without_start(self, tracker: PendingCallTracker) -> None:
        await tracker.stop()
        assert tracker.running is False

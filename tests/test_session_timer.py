# tests/test_session_timer.py

from __future__ import annotations

import asyncio

import pytest

from exposure_track.session.timer import SessionTimer, TimerState, format_remaining

from .fakes import FakeClock


def test_remaining_is_derived_from_clock() -> None:
    clock = FakeClock()
    timer = SessionTimer(5, clock=clock)

    assert timer.total_seconds == 300
    assert timer.remaining_seconds == 300
    assert timer.state == TimerState.RUNNING

    clock.advance(61.7)
    assert timer.remaining_seconds == 239
    assert not timer.expired

    clock.advance(10_000)
    assert timer.remaining_seconds == 0
    assert timer.expired
    assert timer.state == TimerState.EXPIRED


def test_format_remaining() -> None:
    assert format_remaining(300) == "05:00"
    assert format_remaining(59) == "00:59"
    assert format_remaining(-3) == "00:00"


def test_stop_without_start_is_safe() -> None:
    timer = SessionTimer(1, clock=FakeClock())
    timer.stop()
    timer.stop()
    assert timer.remaining_seconds == 60


@pytest.mark.asyncio
async def test_timer_expires_after_duration_and_fires_once() -> None:
    clock = FakeClock()
    ticks: list[int] = []
    expired: list[bool] = []
    timer = SessionTimer(
        5,
        clock=clock,
        tick_seconds=0.01,
        on_tick=ticks.append,
        on_expire=lambda: expired.append(True),
    )

    assert timer.start() is True
    await asyncio.sleep(0.03)
    assert ticks and ticks[0] == 300
    assert not timer.expired

    clock.advance(5 * 60)
    await asyncio.wait_for(timer.wait(), timeout=1.0)

    assert timer.remaining_seconds == 0
    assert timer.expired
    assert expired == [True]
    assert ticks[-1] == 0
    assert not timer.is_ticking


@pytest.mark.asyncio
async def test_double_start_is_guarded() -> None:
    timer = SessionTimer(1, clock=FakeClock(), tick_seconds=0.01)

    assert timer.start() is True
    assert timer.start() is False

    timer.stop()
    await timer.wait()


@pytest.mark.asyncio
async def test_no_tick_after_stop() -> None:
    clock = FakeClock()
    ticks: list[int] = []
    timer = SessionTimer(1, clock=clock, tick_seconds=0.01, on_tick=ticks.append)

    timer.start()
    await asyncio.sleep(0.03)
    timer.stop()
    await timer.wait()
    count = len(ticks)

    clock.advance(30)
    await asyncio.sleep(0.05)

    assert len(ticks) == count
    assert not timer.is_ticking
    assert timer.start() is False
    assert timer.remaining_seconds == 30


@pytest.mark.asyncio
async def test_failing_tick_callback_keeps_timer_running() -> None:
    clock = FakeClock()
    calls = {"n": 0}

    def broken(_: int) -> None:
        calls["n"] += 1
        raise RuntimeError("render failed")

    timer = SessionTimer(1, clock=clock, tick_seconds=0.01, on_tick=broken)
    timer.start()
    await asyncio.sleep(0.05)

    assert calls["n"] >= 2
    assert timer.is_ticking

    timer.stop()
    await timer.wait()

"""Tests for the :mod:`EdgeSwitch.Time` polling utilities."""

from __future__ import annotations

import logging

import pytest

from EdgeSwitch.Switch import EdgeTrackingSwitch
from EdgeSwitch.Time import Frame, Sleep, poll, track


def test_sleep_converts_to_seconds():
    calls: list[float] = []
    Sleep(250, sleep_func=calls.append)
    assert pytest.approx(calls) == [0.25]


def test_sleep_validates_duration():
    with pytest.raises(ValueError):
        Sleep(-1)


def test_track_reports_each_edge_on_one_frame():
    frames = list(track([False, False, True, True, False, False]))

    assert [f.index for f in frames if f.turned_on] == [2]
    assert [f.index for f in frames if f.turned_off] == [4]
    assert frames[3] == Frame(index=3, value=True, turned_on=False, turned_off=False)


def test_track_continues_an_existing_switch():
    switch = EdgeTrackingSwitch()
    switch.set_on()

    frames = list(track([True, False], switch=switch))

    assert frames[0].turned_on is False
    assert frames[1].turned_off is True
    assert switch.is_currently_on() is False


def test_track_logs_edges(caplog):
    with caplog.at_level(logging.DEBUG, logger="EdgeSwitch.Time"):
        list(track([0, 1, 0]))

    assert "cycle 1: turned on" in caplog.text
    assert "cycle 2: turned off" in caplog.text


def test_poll_samples_source_with_interval():
    levels = iter([False, True, True, False])
    delays: list[float] = []

    frames = list(
        poll(lambda: next(levels), cycles=4, interval_ms=20, sleep_func=delays.append)
    )

    assert [(f.turned_on, f.turned_off) for f in frames] == [
        (False, False),
        (True, False),
        (False, False),
        (False, True),
    ]
    assert pytest.approx(delays) == [0.02, 0.02, 0.02]


def test_poll_without_interval_never_sleeps():
    delays: list[float] = []
    frames = list(poll(lambda: 1, cycles=3, sleep_func=delays.append))
    assert delays == []
    assert [f.value for f in frames] == [True, True, True]


@pytest.mark.parametrize(
    "kwargs,error,expected",
    [
        ({"cycles": 0}, ValueError, "cycles must be positive"),
        ({"cycles": 1, "interval_ms": -5}, ValueError, "interval_ms must be non-negative"),
    ],
)
def test_poll_validates_arguments(kwargs, error, expected):
    with pytest.raises(error, match=expected):
        list(poll(lambda: True, **kwargs))


def test_poll_requires_callable_source():
    with pytest.raises(TypeError, match="source must be callable"):
        list(poll(True, cycles=1))  # type: ignore[arg-type]

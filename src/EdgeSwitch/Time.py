"""Polling helpers that drive an :class:`EdgeTrackingSwitch` once per cycle."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from EdgeSwitch.Switch import EdgeTrackingSwitch

logger = logging.getLogger(__name__)


def Sleep(
    duration: int | float,
    *,
    sleep_func: Callable[[float], None] | None = None,
) -> None:
    """Block for ``duration`` milliseconds using ``sleep_func``.

    Parameters
    ----------
    duration:
        The requested delay in milliseconds.  Negative values are rejected.
    sleep_func:
        Injectable callable used to perform the actual wait.  Defaults to
        :func:`time.sleep`.
    """

    if duration < 0:
        raise ValueError("duration must be non-negative")

    sleeper = sleep_func or time.sleep
    sleeper(float(duration) / 1000.0)


@dataclass(frozen=True)
class Frame:
    """Outcome of a single observation cycle."""

    index: int
    value: bool
    turned_on: bool
    turned_off: bool


def _step(switch: EdgeTrackingSwitch, index: int, sample: object) -> Frame:
    value = bool(sample)
    switch.set(value)
    frame = Frame(
        index=index,
        value=value,
        turned_on=switch.consume_turned_on(),
        turned_off=switch.consume_turned_off(),
    )
    if frame.turned_on:
        logger.debug("cycle %d: turned on", index)
    elif frame.turned_off:
        logger.debug("cycle %d: turned off", index)
    return frame


def track(
    samples: Iterable[object],
    *,
    switch: EdgeTrackingSwitch | None = None,
) -> Iterator[Frame]:
    """Feed ``samples`` through ``switch`` and yield one :class:`Frame` each.

    Edges are consumed after every sample, so each transition is reported on
    exactly one frame.  A fresh switch is used when none is supplied.
    """

    target = switch if switch is not None else EdgeTrackingSwitch()
    for index, sample in enumerate(samples):
        yield _step(target, index, sample)


def poll(
    source: Callable[[], object],
    *,
    cycles: int,
    interval_ms: int | float = 0,
    switch: EdgeTrackingSwitch | None = None,
    sleep_func: Callable[[float], None] | None = None,
) -> Iterator[Frame]:
    """Sample ``source`` ``cycles`` times, ``interval_ms`` apart.

    Parameters
    ----------
    source:
        Zero-argument callable returning the observed level.
    cycles:
        Number of observations to take.  Must be positive.
    interval_ms:
        Delay between consecutive observations.  No delay follows the last
        one.
    switch:
        Switch to drive.  A fresh one is created when omitted.
    sleep_func:
        Forwarded to :func:`Sleep`.
    """

    if not callable(source):
        raise TypeError("source must be callable")
    if cycles <= 0:
        raise ValueError("cycles must be positive")
    if interval_ms < 0:
        raise ValueError("interval_ms must be non-negative")

    target = switch if switch is not None else EdgeTrackingSwitch()
    for index in range(cycles):
        if index and interval_ms:
            Sleep(interval_ms, sleep_func=sleep_func)
        yield _step(target, index, source())

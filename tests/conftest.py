"""Shared pytest fixtures and helpers."""

from collections.abc import Iterable

import pytest

from EdgeSwitch.Switch import EdgeTrackingSwitch


def drive(switch: EdgeTrackingSwitch, values: Iterable[bool]) -> EdgeTrackingSwitch:
    """Apply ``values`` to ``switch`` in order via :meth:`set`."""

    for value in values:
        switch.set(value)
    return switch


@pytest.fixture
def switch():
    """Return a fresh switch in its initial off state."""

    return EdgeTrackingSwitch()


@pytest.fixture
def sequence():
    """Return a helper that feeds a list of levels into a switch."""

    return drive

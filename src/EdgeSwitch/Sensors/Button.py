"""Helpers for working with digital push-button inputs."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Optional

from EdgeSwitch.Switch import EdgeTrackingSwitch

logger = logging.getLogger(__name__)


class Button:
    """In-memory representation of a digital push button.

    Each call to :meth:`poll` takes one raw reading and feeds it to an
    :class:`~EdgeSwitch.Switch.EdgeTrackingSwitch`, so callers can ask both
    whether the button is held and whether it was pressed on this cycle.
    """

    def __init__(
        self,
        pin: int,
        *,
        value_provider: Optional[Callable[[], object]] = None,
        active_low: bool = False,
        default_value: bool = False,
    ) -> None:
        if not isinstance(pin, int):
            raise TypeError("pin must be an integer")
        if pin < 0:
            raise ValueError("pin must be non-negative")

        if value_provider is not None and not callable(value_provider):
            raise TypeError("value_provider must be callable")

        self.pin = pin
        self.active_low = bool(active_low)
        self._value_provider = value_provider
        self._value = False
        self._switch = EdgeTrackingSwitch()
        self.set_value(default_value)

    @property
    def switch(self) -> EdgeTrackingSwitch:
        return self._switch

    def set_value(self, value: object) -> None:
        """Update the simulated raw level returned by :meth:`read_raw`."""

        self._value = bool(value)

    def read_raw(self) -> bool:
        """Return the raw pin level, before ``active_low`` is applied."""

        if self._value_provider is None:
            return self._value
        return bool(self._value_provider())

    def poll(self) -> bool:
        """Take one reading, update edge tracking and return the pressed state."""

        pressed = self.read_raw() != self.active_low
        self._switch.set(pressed)
        if self._switch.just_turned_on():
            logger.debug("button on pin %d pressed", self.pin)
        elif self._switch.just_turned_off():
            logger.debug("button on pin %d released", self.pin)
        return pressed

    def is_pressed(self) -> bool:
        """Return ``True`` while the button was held at the last poll."""

        return self._switch.is_currently_on()

    def was_pressed(self) -> bool:
        return self._switch.just_turned_on()

    def was_released(self) -> bool:
        return self._switch.just_turned_off()

    def consume_pressed(self) -> bool:
        """Return ``True`` once for each press observed by :meth:`poll`."""

        return self._switch.consume_turned_on()

    def consume_released(self) -> bool:
        """Return ``True`` once for each release observed by :meth:`poll`."""

        return self._switch.consume_turned_off()

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"Button(pin={self.pin}, pressed={self.is_pressed()})"

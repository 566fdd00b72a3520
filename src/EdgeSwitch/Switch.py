"""Binary switch primitive that remembers its most recent transition."""

from __future__ import annotations

import copy
from enum import Enum


class Edge(Enum):
    """Pending transition reported by :meth:`EdgeTrackingSwitch.pending_edge`."""

    NONE = "none"
    RISING = "rising"
    FALLING = "falling"


class EdgeTrackingSwitch:
    """On/off state plus a flag for the transition that produced it.

    The switch starts off with no pending edge.  Each call to :meth:`set_on`
    or :meth:`set_off` either records a new edge (the state actually changed)
    or flattens the flag for its own direction (the state was already there).
    Edges can be read two ways:

    * ``just_turned_on`` / ``just_turned_off`` peek at the flag and leave it
      in place until the next set call.
    * ``consume_turned_on`` / ``consume_turned_off`` clear the flag when they
      report it, so a polling loop reacts exactly once per transition.

    Example
    -------
    >>> button = EdgeTrackingSwitch()
    >>> for frame, pressed in enumerate([False, True, True, False]):
    ...     button.set(pressed)
    ...     if button.consume_turned_on():
    ...         print(f"frame {frame}: pressed")
    ...     if button.consume_turned_off():
    ...         print(f"frame {frame}: released")
    frame 1: pressed
    frame 3: released

    Instances are mutable values: they compare by content and :meth:`copy`
    returns a fully independent switch.  No locking is performed.
    """

    __slots__ = ("_state", "_rose", "_fell")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        self._state = False
        self._rose = False
        self._fell = False

    def set(self, value: bool) -> None:
        """Dispatch to :meth:`set_on` or :meth:`set_off` based on ``value``."""

        if value:
            self.set_on()
        else:
            self.set_off()

    def set_on(self) -> None:
        """Switch on, flagging a rising edge if the switch was off."""

        if not self._state:
            self._rose = True
            self._fell = False
        else:
            # already on: only the rise flag is flattened
            self._rose = False
        self._state = True

    def set_off(self) -> None:
        """Switch off, flagging a falling edge if the switch was on."""

        if self._state:
            self._fell = True
            self._rose = False
        else:
            self._fell = False
        self._state = False

    def is_currently_on(self) -> bool:
        return self._state

    def just_turned_on(self) -> bool:
        """Return ``True`` if the last set call moved the switch from off to on.

        The flag is left untouched.
        """

        return self._rose

    def just_turned_off(self) -> bool:
        """Return ``True`` if the last set call moved the switch from on to off.

        The flag is left untouched.
        """

        return self._fell

    def consume_turned_on(self) -> bool:
        """Report a pending rising edge once, clearing it.

        Consecutive calls without an intervening :meth:`set_on` return ``True``
        at most for the first call.
        """

        if self._rose:
            self._rose = False
            return True
        return False

    def consume_turned_off(self) -> bool:
        """Report a pending falling edge once, clearing it."""

        if self._fell:
            self._fell = False
            return True
        return False

    def pending_edge(self) -> Edge:
        """Summarise the pending flags without consuming them."""

        if self._rose:
            return Edge.RISING
        if self._fell:
            return Edge.FALLING
        return Edge.NONE

    def reset(self) -> None:
        """Return to the initial off state with no pending edge."""

        self._state = False
        self._rose = False
        self._fell = False

    def copy(self) -> "EdgeTrackingSwitch":
        """Return an independent switch with the same state and flags."""

        return copy.copy(self)

    def __copy__(self) -> "EdgeTrackingSwitch":
        clone = type(self).__new__(type(self))
        clone._state = self._state
        clone._rose = self._rose
        clone._fell = self._fell
        return clone

    def __deepcopy__(self, memo: dict) -> "EdgeTrackingSwitch":
        return self.__copy__()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EdgeTrackingSwitch):
            return NotImplemented
        return (self._state, self._rose, self._fell) == (
            other._state,
            other._rose,
            other._fell,
        )

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        edge = self.pending_edge()
        return (
            f"EdgeTrackingSwitch(state={'on' if self._state else 'off'}, "
            f"pending={edge.value})"
        )

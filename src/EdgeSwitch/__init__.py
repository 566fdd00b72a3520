"""Edge-tracking binary switch and the host-side helpers that drive it."""

from __future__ import annotations

__all__ = ["Edge", "EdgeTrackingSwitch", "Frame", "poll", "track"]
__version__ = "0.1.0"

from EdgeSwitch.Switch import Edge, EdgeTrackingSwitch
from EdgeSwitch.Time import Frame, poll, track

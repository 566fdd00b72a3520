"""Utility helpers for feeding switches from a serial-connected device."""

from __future__ import annotations

import logging
from typing import Optional

from EdgeSwitch.Switch import EdgeTrackingSwitch

try:
    import serial  # type: ignore[import]
except ModuleNotFoundError:  # pragma: no cover - exercised in real environments
    serial = None  # type: ignore[assignment]

logger = logging.getLogger(__name__)

_TRUE_LEVELS = {"1", "high", "on", "true"}
_FALSE_LEVELS = {"0", "low", "off", "false"}


def parse_level(text: str) -> bool:
    """Translate a textual logic level such as ``"HIGH"`` or ``"0"`` to a bool."""

    token = text.strip().lower()
    if token in _TRUE_LEVELS:
        return True
    if token in _FALSE_LEVELS:
        return False
    raise ValueError(f"Unrecognised logic level {text!r}")


class SerialInput:
    """Read one logic level per line from a serial port into a switch.

    The device on the other end is expected to print its observed level once
    per cycle (``1``/``0``, ``HIGH``/``LOW`` and so on).  Every :meth:`poll`
    consumes a single line and updates :attr:`switch` accordingly.
    """

    def __init__(
        self,
        baud_rate: int = 9600,
        port: Optional[str] = None,
        timeout: float = 1.0,
    ) -> None:
        """Initialise a serial input configuration.

        Parameters
        ----------
        baud_rate:
            Baud rate used when establishing the host serial connection.
        port:
            Optional identifier of the serial port.  If supplied the input
            immediately connects to it.
        timeout:
            Read timeout (in seconds).  A read that times out leaves the
            switch untouched.
        """

        if baud_rate <= 0:
            raise ValueError("baud_rate must be positive")
        if timeout < 0:
            raise ValueError("timeout must be non-negative")

        self.baud_rate = int(baud_rate)
        self.port = port
        self.timeout = timeout
        self.switch = EdgeTrackingSwitch()
        self._serial: Optional["serial.Serial"] = None

        if port is not None:
            self.connect(port)

    def connect(self, port: str) -> None:
        """Open a serial connection to ``port`` using the configured baud rate."""

        if serial is None:
            raise RuntimeError(
                "pyserial is required for SerialInput; install the 'pyserial' "
                "package to enable this functionality."
            )

        if self._serial is not None and self._serial.is_open:  # pragma: no cover - safety net
            self._serial.close()

        self.port = port
        self._serial = serial.Serial(port=port, baudrate=self.baud_rate, timeout=self.timeout)
        logger.info("connected to %s at %d baud", port, self.baud_rate)

    def close(self) -> None:
        """Terminate the current serial connection if one exists."""

        if self._serial is not None and self._serial.is_open:
            self._serial.close()
            logger.info("closed %s", self.port)

        self._serial = None

    def read_level(self) -> Optional[bool]:
        """Read the next line and parse it, or return ``None`` on timeout."""

        if self._serial is None:
            raise RuntimeError("No serial port configured. Call connect() with a valid port first.")

        raw = self._serial.readline()
        if not raw:
            return None

        return parse_level(raw.decode("utf-8", errors="replace"))

    def poll(self) -> bool:
        """Feed the next level into :attr:`switch` and return its current state."""

        level = self.read_level()
        if level is None:
            logger.debug("read from %s timed out", self.port)
        else:
            self.switch.set(level)
        return self.switch.is_currently_on()

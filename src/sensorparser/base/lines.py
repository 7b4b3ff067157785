"""Line classification for sensors tool output.

Output of the sensors tool is a sequence of blocks separated by blank
lines. Each block opens with a chip name, optionally followed by an
"Adapter:" line, then one "name: reading" line per sensor:

    coretemp-isa-0000
    Adapter: ISA adapter
    Package id 0:  +45.0°C  (high = +80.0°C, crit = +90.0°C)

Some chips print thresholds on an indented continuation line below the
reading they belong to. The classifier decides what each raw line is,
given the scan state; dialect parsers decide what to do with it.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from .device import Device, Sensor
from .thresholds import parse_value_with_limits
from .values import has_digit, parse_simple_value

ADAPTER_PREFIX = "Adapter:"


class LineKind(Enum):
    """What a single line of sensors output means to the scan."""

    BLANK = "blank"
    DEVICE = "device"
    ADAPTER = "adapter"
    SENSOR = "sensor"
    CONTINUATION = "continuation"
    IGNORED = "ignored"


class ScanState(BaseModel):
    """Mutable state of one in-progress scan over one input stream.

    Owned exclusively by a single parse call and discarded when the call
    returns. The pending sensor is the last sensor read by a dialect
    that buffers sensors for continuation lines; it joins the device's
    sensor list when the next sensor starts or the device closes.
    """

    device_name: Optional[str] = Field(
        default=None, description="Name of the open device, if any"
    )
    adapter: Optional[str] = Field(
        default=None, description="Adapter of the open device"
    )
    sensors: List[Sensor] = Field(
        default_factory=list, description="Sensors committed so far"
    )
    pending: Optional[Sensor] = Field(
        default=None, description="Sensor awaiting continuation lines"
    )

    @property
    def device_open(self) -> bool:
        """Whether a device block is currently being read."""
        return self.device_name is not None

    def open_device(self, name: str) -> None:
        """Start a new device block, discarding any previous scratch."""
        self.device_name = name
        self.adapter = None
        self.sensors = []
        self.pending = None

    def flush_pending(self) -> None:
        """Commit the pending sensor, if any, to the sensor list."""
        if self.pending is not None:
            self.sensors.append(self.pending)
            self.pending = None

    def close_device(self) -> Device | None:
        """Close the open device and reset to "no device open".

        Returns:
            The finished Device, or None when no named device was open

        """
        self.flush_pending()
        name = self.device_name
        device = None
        if name:
            device = Device(
                name=name,
                adapter=self.adapter or "",
                sensors=list(self.sensors),
            )
        self.device_name = None
        self.adapter = None
        self.sensors = []
        return device


def classify_line(
    line: str,
    state: ScanState,
    *,
    header_allows_colon: bool = True,
    continuations: bool = False,
) -> LineKind:
    """Decide what a raw line means given the current scan state.

    Args:
        line: Raw input line, trailing newline already removed
        state: State of the scan the line belongs to
        header_allows_colon: Whether a line containing ":" may open a
            device. Dialects that cannot rely on a chip name being
            printed set this to False so a stray sensor line is not
            taken for a device header.
        continuations: Whether indented lines may continue the pending
            sensor

    Returns:
        The kind of line

    """
    stripped = line.strip()
    if not stripped:
        return LineKind.BLANK

    if not state.device_open:
        if not header_allows_colon and ":" in stripped:
            return LineKind.IGNORED
        return LineKind.DEVICE

    if stripped.startswith(ADAPTER_PREFIX):
        return LineKind.ADAPTER

    if (
        continuations
        and state.pending is not None
        and line[:1].isspace()
    ):
        return LineKind.CONTINUATION

    return LineKind.SENSOR


def adapter_name(line: str) -> str:
    """Return the adapter name from an "Adapter: ..." line."""
    return line.strip()[len(ADAPTER_PREFIX):].strip()


def split_sensor_line(line: str) -> tuple[str, str] | None:
    """Split "name: reading" on the first colon.

    Returns None when the line has no colon or the name is empty.
    """
    name, separator, reading = line.strip().partition(":")
    name = name.strip()
    if not separator or not name:
        return None
    return name, reading.strip()


def parse_sensor_line(line: str) -> Sensor | None:
    """Parse a full sensor line, with or without inline thresholds.

    Readings without any digit ("N/A", "PCI adapter") are not sensors.
    A reading containing "(" is parsed together with its limits.

    Raises:
        ValueError: The reading's numeric run is malformed

    """
    parts = split_sensor_line(line)
    if parts is None:
        return None

    name, reading = parts
    if not has_digit(reading):
        return None

    if "(" in reading:
        return parse_value_with_limits(name, reading)
    return parse_simple_value(name, reading)

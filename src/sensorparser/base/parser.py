"""Parser base class driving the scan over sensors tool output.

Parser instances MUST NOT store scan state. Everything a scan needs
lives in a ScanState created per parse() call, so one parser can serve
any number of streams, including concurrently.
"""

import io
import logging
from abc import ABC, abstractmethod
from typing import IO, Any, ClassVar, Iterable, List, Union

from pydantic import BaseModel, ConfigDict, Field

from .device import Device, Sensor
from .lines import LineKind, ScanState, adapter_name, classify_line
from .result import Result
from .thresholds import augment_sensor_with_limit_line

Stream = Union[IO[str], IO[bytes], Iterable[str], Iterable[bytes]]


class SensorParser(BaseModel, ABC):
    """Base class for the sensors output dialects.

    A SensorParser reads a stream line by line and assembles a Result.
    The scan itself is a template method: parse() classifies each line
    and handles device, adapter and blank lines the same way for every
    dialect. Subclasses set the dialect policy through class variables
    and implement _parse_sensor() for sensor lines.

    Dialect policy:
    - header_allows_colon: a line with ":" may open a device
    - continuations: sensors are buffered so indented lines can add
      thresholds to them
    - keep_empty_devices: devices without sensors are kept

    Key characteristics:
    - Stateless: no data persists between parse() calls
    - Single pass: each line is seen once, nothing is retried
    - Soft misses: lines that are not sensors are logged and skipped
    - Fail fast: stream errors and errors raised by _parse_sensor()
      propagate and no partial Result is returned
    """

    model_config = ConfigDict(extra="forbid", frozen=False)

    dialect: ClassVar[str] = "generic"
    header_allows_colon: ClassVar[bool] = True
    continuations: ClassVar[bool] = False
    keep_empty_devices: ClassVar[bool] = False

    name: str = Field(
        default="sensors",
        min_length=1,
        description="Name used for this parser's logger",
    )

    def __init__(self, **data: Any) -> None:
        """Initialize parser with a logger specific to this instance."""
        super().__init__(**data)
        self._logger = logging.getLogger(
            f"{self.__class__.__module__}."
            f"{self.__class__.__name__}."
            f"{self.name}"
        )

    def parse(self, stream: Stream) -> Result:
        """Parse sensors output from a readable stream.

        Args:
            stream: Open text or binary stream, or any iterable of
                lines. The caller owns the stream; it is read to
                exhaustion but never closed here.

        Returns:
            Result holding every device found, in input order

        Raises:
            OSError: Reading from the stream failed
            ValueError: A sensor reading had a malformed number and the
                dialect does not tolerate it

        """
        state = ScanState()
        devices: List[Device] = []

        for raw_line in stream:
            line = self._decode(raw_line).rstrip("\r\n")
            kind = classify_line(
                line,
                state,
                header_allows_colon=self.header_allows_colon,
                continuations=self.continuations,
            )

            if kind is LineKind.BLANK:
                self._close_device(state, devices)
            elif kind is LineKind.DEVICE:
                state.open_device(line.strip())
            elif kind is LineKind.ADAPTER:
                state.adapter = adapter_name(line)
            elif kind is LineKind.CONTINUATION and state.pending is not None:
                state.pending = augment_sensor_with_limit_line(
                    state.pending, line
                )
            elif kind is LineKind.SENSOR:
                self._handle_sensor_line(state, line)
            else:
                self._logger.debug("Ignoring line %r", line)

        # End of input closes the open device like a blank line
        self._close_device(state, devices)

        return Result(devices=devices)

    def parse_text(self, text: str) -> Result:
        """Parse sensors output held in a string."""
        return self.parse(io.StringIO(text))

    def _handle_sensor_line(self, state: ScanState, line: str) -> None:
        """Parse a sensor line and add it to the open device."""
        state.flush_pending()
        sensor = self._parse_sensor(line)
        if sensor is None:
            self._logger.debug("Skipping non-sensor line %r", line)
            return

        if self.continuations:
            state.pending = sensor
        else:
            state.sensors.append(sensor)

    def _close_device(self, state: ScanState, devices: List[Device]) -> None:
        """Close the open device and keep it if the dialect wants it."""
        if not state.device_open:
            return

        device = state.close_device()
        if device is None:
            return
        if device.sensors or self.keep_empty_devices:
            devices.append(device)
        else:
            self._logger.debug(
                "Dropping device %s without sensors", device.name
            )

    @staticmethod
    def _decode(raw_line: Union[str, bytes]) -> str:
        if isinstance(raw_line, bytes):
            return raw_line.decode("utf-8", errors="replace")
        return raw_line

    @abstractmethod
    def _parse_sensor(self, line: str) -> Sensor | None:
        """Parse one sensor line.

        Args:
            line: Raw sensor line

        Returns:
            The parsed Sensor, or None when the line is not a sensor

        """

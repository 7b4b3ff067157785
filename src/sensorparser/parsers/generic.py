"""Generic parser handling every known sensors output shape."""

from typing import ClassVar

from pydantic import Field

from sensorparser.base import Sensor, SensorParser
from sensorparser.base.lines import parse_sensor_line


class GenericParser(SensorParser):
    """Parser for sensors output of unknown or unrecognized systems.

    GenericParser is the most defensive dialect. It accepts inline
    "(high = ..., crit = ...)" thresholds as well as thresholds printed
    on an indented line below the reading, and it refuses to treat a
    line containing ":" as a chip name so that output without chip
    headers is not misread.

    Devices that end up with no sensors are dropped. A malformed number
    in a reading raises ValueError.
    """

    dialect: ClassVar[str] = "generic"
    header_allows_colon: ClassVar[bool] = False
    continuations: ClassVar[bool] = True
    keep_empty_devices: ClassVar[bool] = False

    name: str = Field(default="generic", min_length=1)

    def _parse_sensor(self, line: str) -> Sensor | None:
        return parse_sensor_line(line)

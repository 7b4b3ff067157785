"""Parser for sensors output as printed on openEuler."""

from typing import ClassVar

from pydantic import Field

from sensorparser.base import Sensor, SensorParser
from sensorparser.base.lines import split_sensor_line
from sensorparser.base.values import extract_value


class OpenEulerParser(SensorParser):
    """Parser for openEuler's sensors output.

    openEuler builds print plain "name: value unit" readings. Only the
    numeric prefix of each reading is taken and thresholds are never
    populated; any text after the number, parenthesized limits
    included, is kept as the unit. Readings that fail to parse are
    skipped. Devices without sensors are dropped.
    """

    dialect: ClassVar[str] = "openeuler"
    header_allows_colon: ClassVar[bool] = True
    continuations: ClassVar[bool] = False
    keep_empty_devices: ClassVar[bool] = False

    name: str = Field(default="openeuler", min_length=1)

    def _parse_sensor(self, line: str) -> Sensor | None:
        parts = split_sensor_line(line)
        if parts is None:
            return None

        name, reading = parts
        try:
            extracted = extract_value(reading)
        except ValueError as error:
            self._logger.debug("Skipping sensor line %r: %s", line, error)
            return None
        if extracted is None:
            return None

        value, unit = extracted
        return Sensor(name=name, value=value, unit=unit)

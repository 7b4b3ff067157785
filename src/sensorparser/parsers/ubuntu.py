"""Parser for sensors output as printed on Ubuntu."""

from typing import ClassVar

from pydantic import Field

from sensorparser.base import Sensor, SensorParser
from sensorparser.base.lines import parse_sensor_line


class UbuntuParser(SensorParser):
    """Parser for Ubuntu's sensors output.

    Ubuntu builds print thresholds inline, so every sensor line is
    parsed on its own with no continuation handling. Readings that fail
    to parse are skipped rather than aborting the scan.

    Unlike the other dialects, a chip block with no sensors is still
    reported as a device.
    """

    dialect: ClassVar[str] = "ubuntu"
    header_allows_colon: ClassVar[bool] = True
    continuations: ClassVar[bool] = False
    keep_empty_devices: ClassVar[bool] = True

    name: str = Field(default="ubuntu", min_length=1)

    def _parse_sensor(self, line: str) -> Sensor | None:
        try:
            return parse_sensor_line(line)
        except ValueError as error:
            self._logger.debug("Skipping sensor line %r: %s", line, error)
            return None

"""Sensor and device records parsed from sensors tool output."""

from typing import List, Optional

from pydantic import Field

from .entity import Entity


class Sensor(Entity):
    """A single named reading reported by the sensors tool.

    A sensor carries the measured value, the unit printed after it and
    up to three alerting bounds. Typical readings:
    - Temperatures: "Package id 0:  +45.0°C  (high = +80.0°C, ...)"
    - Fan speeds: "fan1:  1200 RPM  (min = 0 RPM)"
    - Voltages: "in0:  +0.90 V"

    The unit is whatever text follows the number, so it may be empty
    (e.g. "-5.2") or carry a degree sign. Thresholds are independent of
    each other; any subset may be present.
    """

    value: float = Field(
        allow_inf_nan=False, description="Current reading"
    )
    unit: str = Field(default="", description="Unit text after the value")
    low: Optional[float] = Field(default=None, description="Low bound")
    high: Optional[float] = Field(default=None, description="High bound")
    critical: Optional[float] = Field(
        default=None, description="Critical bound"
    )

    def has_thresholds(self) -> bool:
        """Check whether any of low, high or critical is set."""
        return any(
            bound is not None for bound in (self.low, self.high, self.critical)
        )


class Device(Entity):
    """A hardware component reported as one block of sensor lines.

    The name is the chip line that opens the block, for example
    "coretemp-isa-0000" or "nvme-pci-0200". The adapter is the bus the
    chip sits on ("ISA adapter", "PCI adapter") and stays empty when the
    block has no Adapter line. Sensors keep the order they were printed.
    """

    adapter: str = Field(default="", description="Bus/interface type")
    sensors: List[Sensor] = Field(
        default_factory=list, description="Sensors in input order"
    )

    def get_sensor(self, name: str) -> Sensor | None:
        """Get the first sensor with the given name, or None."""
        for sensor in self.sensors:
            if sensor.name == name:
                return sensor
        return None

    def has_sensor(self, name: str) -> bool:
        """Check if a sensor with the given name exists on this device."""
        return any(sensor.name == name for sensor in self.sensors)

    def sensor_names(self) -> list[str]:
        """Return sensor names in input order."""
        return [sensor.name for sensor in self.sensors]

    def sensor_count(self) -> int:
        """Return the number of sensors on this device."""
        return len(self.sensors)

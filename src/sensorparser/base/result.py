"""Result class holding every device found in one parse."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .device import Device
from .entity import field_repr


class Result(BaseModel):
    """The outcome of parsing one sensors tool output.

    A Result is an ordered collection of devices, in the order their
    blocks appeared in the input. Devices without a name never make it
    into a Result. Results are immutable and compare structurally, so
    parsing the same text twice gives two equal Results.
    """

    model_config = ConfigDict(frozen=True)

    devices: List[Device] = Field(
        default_factory=list, description="Devices in input order"
    )

    def get_device(self, name: str) -> Device | None:
        """Get the first device with the given name, or None."""
        for device in self.devices:
            if device.name == name:
                return device
        return None

    def has_device(self, name: str) -> bool:
        """Check if a device with the given name exists in this result."""
        return any(device.name == name for device in self.devices)

    def device_names(self) -> list[str]:
        """Return a list of all device names in input order."""
        return [device.name for device in self.devices]

    def device_count(self) -> int:
        """Return the number of devices in this result."""
        return len(self.devices)

    def __repr__(self) -> str:
        """Return string representation showing all fields."""
        return field_repr(self)

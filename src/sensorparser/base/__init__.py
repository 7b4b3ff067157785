"""Base classes for the sensorparser package."""

from sensorparser.base.device import Device, Sensor
from sensorparser.base.entity import Entity
from sensorparser.base.lines import LineKind, ScanState, classify_line
from sensorparser.base.parser import SensorParser
from sensorparser.base.result import Result
from sensorparser.base.thresholds import (
    augment_sensor_with_limit_line,
    parse_limits,
    parse_value_with_limits,
)
from sensorparser.base.values import extract_value, parse_simple_value

__all__ = [
    "Device",
    "Entity",
    "LineKind",
    "Result",
    "ScanState",
    "Sensor",
    "SensorParser",
    "augment_sensor_with_limit_line",
    "classify_line",
    "extract_value",
    "parse_limits",
    "parse_simple_value",
    "parse_value_with_limits",
]

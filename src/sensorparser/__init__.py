"""Structured parsing of lm-sensors output."""

# Data model and parsing primitives
from .base import (
    Device,
    Entity,
    LineKind,
    Result,
    ScanState,
    Sensor,
    SensorParser,
    augment_sensor_with_limit_line,
    classify_line,
    extract_value,
    parse_limits,
    parse_simple_value,
    parse_value_with_limits,
)

# Dialects
from .parsers import (
    Dialect,
    GenericParser,
    OpenEulerParser,
    UbuntuParser,
    parse,
    select_dialect,
    select_parser,
)

__all__ = [
    "Device",
    "Dialect",
    "Entity",
    "GenericParser",
    "LineKind",
    "OpenEulerParser",
    "Result",
    "ScanState",
    "Sensor",
    "SensorParser",
    "UbuntuParser",
    "augment_sensor_with_limit_line",
    "classify_line",
    "extract_value",
    "parse",
    "parse_limits",
    "parse_simple_value",
    "parse_value_with_limits",
    "select_dialect",
    "select_parser",
]

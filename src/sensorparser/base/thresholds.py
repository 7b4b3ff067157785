"""Threshold parsing for low, high and critical sensor bounds.

The sensors tool prints alerting bounds as comma-separated
"key = value" clauses. They appear either in parentheses after the
reading:

    Package id 0:  +45.0°C  (high = +80.0°C, crit = +90.0°C)

or, for some chips, on an indented line of their own below it:

    Composite:    +38.9°C  (low  = -273.1°C, high = +84.8°C)
                           (crit = +84.8°C)

Clauses are matched by key prefix: "low" sets the low bound, "high" the
high bound and "crit" the critical bound. The first clause that yields a
value for a bound wins, so "crit hyst" after "crit" does not overwrite
the critical bound. Clauses that cannot be parsed leave their bound
unset and never affect their siblings.
"""

import logging
from typing import Dict

from .device import Sensor
from .values import extract_value, parse_simple_value

logger = logging.getLogger(__name__)

# Clause key prefix to Sensor field, checked in order
THRESHOLD_KEYS = (
    ("low", "low"),
    ("high", "high"),
    ("crit", "critical"),
)


def clause_value(clause: str) -> float | None:
    """Extract the numeric right-hand side of a "key = value" clause.

    Only the first whitespace-separated token after "=" is considered,
    and of that token only its numeric prefix, so "+80.0°C" and
    "+10.0 C" both give a value. Returns None when the clause has no
    "=" or its value cannot be parsed.
    """
    _, separator, right = clause.partition("=")
    if not separator:
        return None

    tokens = right.strip().split()
    if not tokens:
        return None

    try:
        # extract_value() drops the leading "+"
        extracted = extract_value(tokens[0])
    except ValueError:
        logger.debug("Ignoring unparsable threshold clause %r", clause)
        return None
    if extracted is None:
        return None
    return extracted[0]


def parse_limits(text: str) -> Dict[str, float]:
    """Parse comma-separated threshold clauses into Sensor field values.

    Args:
        text: Clause list such as "low = +10.0 C, high = +80.0 C"

    Returns:
        Mapping of Sensor field name ("low", "high", "critical") to
        value, holding only the bounds that parsed successfully

    """
    limits: Dict[str, float] = {}
    for clause in text.split(","):
        clause = clause.strip()
        for prefix, field_name in THRESHOLD_KEYS:
            if not clause.startswith(prefix):
                continue
            if field_name not in limits:
                value = clause_value(clause)
                if value is not None:
                    limits[field_name] = value
            break
    return limits


def parse_value_with_limits(name: str, text: str) -> Sensor | None:
    """Build a sensor from a reading followed by parenthesized limits.

    Args:
        name: Sensor name
        text: Reading such as "30.0 C (low = +10.0 C, crit = +90.0 C)"

    Returns:
        Sensor with thresholds populated, or None when the part before
        "(" has no numeric value

    Raises:
        ValueError: The reading's numeric run is malformed

    """
    reading, _, limits_text = text.partition("(")
    sensor = parse_simple_value(name, reading)
    if sensor is None:
        return None

    limits_text = limits_text.partition(")")[0]
    limits = parse_limits(limits_text)
    if not limits:
        return sensor
    return sensor.model_copy(update=limits)


def augment_sensor_with_limit_line(sensor: Sensor, line: str) -> Sensor:
    """Return a copy of the sensor with bounds from a continuation line.

    Name, value and unit are kept. Bounds already set on the sensor take
    precedence over ones on the continuation line. The line may still
    carry the parentheses the sensors tool prints around it.
    """
    limits = parse_limits(line.strip().strip("()"))
    update = {
        field_name: value
        for field_name, value in limits.items()
        if getattr(sensor, field_name) is None
    }
    if not update:
        return sensor
    return sensor.model_copy(update=update)

"""Numeric value and unit extraction for sensor readings."""

from .device import Sensor

# Characters that may make up the numeric run at the start of a reading
NUMERIC_CHARS = frozenset("+-.0123456789")


def numeric_run_length(text: str) -> int:
    """Return the length of the leading run of sign, dot and digit chars.

    No numeric grammar is enforced here: "+-1..2" is a run of six.
    """
    length = 0
    for char in text:
        if char not in NUMERIC_CHARS:
            break
        length += 1
    return length


def has_digit(text: str) -> bool:
    """Check if the text contains at least one ASCII digit."""
    return any("0" <= char <= "9" for char in text)


def extract_value(fragment: str) -> tuple[float, str] | None:
    """Split a reading such as "+49.0°C" into its value and unit.

    Args:
        fragment: Text following the sensor name's colon

    Returns:
        Tuple of (value, unit), or None when the fragment does not start
        with a numeric run. The unit is the trimmed remainder and may be
        empty.

    Raises:
        ValueError: The numeric run is present but is not a valid float,
            e.g. "12..3" or a lone "-".

    """
    fragment = fragment.strip()
    length = numeric_run_length(fragment)
    if length == 0:
        return None

    raw_value = fragment[:length]
    # Leading plus carries no meaning; minus is kept
    if raw_value.startswith("+"):
        raw_value = raw_value[1:]

    value = float(raw_value)
    return value, fragment[length:].strip()


def parse_simple_value(name: str, text: str) -> Sensor | None:
    """Build a sensor from a plain "value unit" reading.

    Returns None when the text has no numeric run. Malformed numeric
    runs raise ValueError from extract_value().
    """
    extracted = extract_value(text)
    if extracted is None:
        return None

    value, unit = extracted
    return Sensor(name=name, value=value, unit=unit)

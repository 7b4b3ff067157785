"""Tests for threshold clause parsing."""

import pytest

from sensorparser import (
    Sensor,
    augment_sensor_with_limit_line,
    parse_limits,
    parse_value_with_limits,
)
from sensorparser.base.thresholds import clause_value


class TestParseLimits:
    """Test the shared clause logic."""

    def test_all_bounds(self) -> None:
        """Test a clause list setting every bound."""
        limits = parse_limits("low = +10.0 C, high = +80.0 C, crit = +90.0 C")

        assert limits == {"low": 10.0, "high": 80.0, "critical": 90.0}

    def test_unit_glued_to_value(self) -> None:
        """Test values printed with the unit attached."""
        assert parse_limits("high = +80.0°C, crit = +90.0°C") == {
            "high": 80.0,
            "critical": 90.0,
        }

    def test_negative_bound(self) -> None:
        """Test that negative bounds keep their sign."""
        assert parse_limits("low  = -273.1°C") == {"low": -273.1}

    def test_unknown_clauses_are_ignored(self) -> None:
        """Test that clauses with other keys are skipped."""
        assert parse_limits("min = +0.00 V, max = +1.74 V") == {}
        assert parse_limits("hyst = +95.0°C, crit = +100.0°C") == {
            "critical": 100.0
        }

    def test_key_match_is_case_sensitive(self) -> None:
        """Test that upper-case keys do not match."""
        assert parse_limits("HIGH = +80.0 C") == {}

    def test_clause_without_equals_is_skipped(self) -> None:
        """Test that a clause lacking "=" is skipped silently."""
        assert parse_limits("high +80.0 C, crit = +90.0 C") == {
            "critical": 90.0
        }

    def test_bad_clause_does_not_affect_siblings(self) -> None:
        """Test that one unparsable bound leaves the others intact."""
        limits = parse_limits("low = 1..2 C, high = N/A, crit = +90.0 C")

        assert limits == {"critical": 90.0}

    def test_first_clause_wins(self) -> None:
        """Test that a later clause with the same prefix is ignored."""
        limits = parse_limits("crit = +100.0°C, crit hyst = +95.0°C")

        assert limits == {"critical": 100.0}

    def test_empty_text(self) -> None:
        """Test that an empty clause list yields no bounds."""
        assert parse_limits("") == {}

    @pytest.mark.parametrize(
        "clause, expected",
        [
            ("high = +80.0 C", 80.0),
            ("high = 80", 80.0),
            ("high =", None),
            ("high", None),
            ("high = °C", None),
        ],
    )
    def test_clause_value(self, clause, expected) -> None:
        """Test extraction of a clause's right-hand side."""
        assert clause_value(clause) == expected


class TestParseValueWithLimits:
    """Test readings with parenthesized limits."""

    def test_inline_limits(self) -> None:
        """Test a reading with every bound inline."""
        sensor = parse_value_with_limits(
            "temp1", "30.0 C (low = +10.0 C, high = +80.0 C, crit = +90.0 C)"
        )

        assert sensor == Sensor(
            name="temp1",
            value=30.0,
            unit="C",
            low=10.0,
            high=80.0,
            critical=90.0,
        )

    def test_text_after_closing_parenthesis_is_ignored(self) -> None:
        """Test that trailing annotations do not leak into bounds."""
        sensor = parse_value_with_limits(
            "temp1", "+27.8°C  (crit = +105.0°C)  sensor = thermistor"
        )

        assert sensor is not None
        assert sensor.unit == "°C"
        assert sensor.critical == 105.0

    def test_no_value_before_limits(self) -> None:
        """Test that a missing reading gives None."""
        assert parse_value_with_limits("fan1", "N/A (min = 0 RPM)") is None

    def test_malformed_value_raises(self) -> None:
        """Test that a malformed reading propagates ValueError."""
        with pytest.raises(ValueError):
            parse_value_with_limits("temp1", "12..3 C (high = +80.0 C)")


class TestAugmentSensorWithLimitLine:
    """Test continuation lines adding bounds to a known sensor."""

    def test_adds_bounds(self) -> None:
        """Test that bounds from the line are added."""
        sensor = Sensor(name="Composite", value=38.9, unit="°C", low=-273.1)

        augmented = augment_sensor_with_limit_line(
            sensor, "                       (crit = +84.8°C)"
        )

        assert augmented == Sensor(
            name="Composite",
            value=38.9,
            unit="°C",
            low=-273.1,
            critical=84.8,
        )
        # The original sensor is left untouched
        assert sensor.critical is None

    def test_existing_bounds_take_precedence(self) -> None:
        """Test that bounds already set are not overwritten."""
        sensor = Sensor(name="temp1", value=40.0, high=80.0)

        augmented = augment_sensor_with_limit_line(
            sensor, "  high = +70.0 C, crit = +95.0 C"
        )

        assert augmented.high == 80.0
        assert augmented.critical == 95.0

    def test_line_without_bounds(self) -> None:
        """Test that a line without usable clauses changes nothing."""
        sensor = Sensor(name="temp1", value=40.0, unit="C")

        assert augment_sensor_with_limit_line(sensor, "  sensor = diode") == sensor

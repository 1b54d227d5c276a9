"""Tests for the Duration value type."""

from datetime import datetime, timedelta
from decimal import Decimal

import pytest
from pydantic import ValidationError

from prettydur import Duration, IsNegativeError, parse, parse_std, pretty
from prettydur.units import HOUR, MICROSECOND, MILLISECOND, MINUTE, SECOND, YEAR


class TestConstruction:
    """Test the unit constructors."""

    def test_from_units(self):
        assert Duration.from_nanos(5).nanos == 5
        assert Duration.from_micros(5).nanos == 5 * MICROSECOND
        assert Duration.from_millis(5).nanos == 5 * MILLISECOND
        assert Duration.from_secs(5).nanos == 5 * SECOND

    def test_fractional_units_are_exact(self):
        assert Duration.from_secs(0.1).nanos == 100 * MILLISECOND
        assert Duration.from_secs("0.3").nanos == 300 * MILLISECOND
        assert Duration.from_millis(Decimal("1.5")).nanos == 1_500 * MICROSECOND
        assert Duration.from_micros(0.0015).nanos == 1

    def test_negative_rejected(self):
        with pytest.raises(IsNegativeError):
            Duration.from_secs(-1)
        with pytest.raises(ValidationError):
            Duration(nanos=-1)

    def test_negative_rejected_after_coercion(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Duration(nanos=-5.0)
        with pytest.raises(ValidationError, match="cannot be negative"):
            Duration.model_validate({"nanos": "-5"})
        assert Duration.model_validate({"nanos": "7"}).model_dump() == "7ns"

    def test_zero(self):
        assert Duration.zero().is_zero()
        assert not Duration.from_nanos(1).is_zero()

    def test_parse(self):
        assert parse("5") == Duration.from_millis(5)
        assert Duration.parse("5m 2 seconds") == Duration.from_secs(302)

    def test_immutable(self):
        d = Duration.from_secs(1)
        with pytest.raises(ValidationError):
            d.nanos = 5


class TestConversions:
    """Test conversion to and from timedelta and other units."""

    def test_std_round_trip(self):
        for ms in range(0, 10_000_000, 99_991):
            delta = timedelta(milliseconds=ms)
            d = Duration.from_std(delta)
            assert d.to_std() == delta
            assert Duration.from_std(d.to_std()) == d

    def test_to_std_truncates_sub_microseconds(self):
        assert Duration.from_nanos(1_999).to_std() == timedelta(microseconds=1)

    def test_to_std_saturates(self):
        assert Duration.from_nanos(2**128 - 1).to_std() == timedelta.max

    def test_from_negative_std(self):
        with pytest.raises(IsNegativeError):
            Duration.from_std(timedelta(seconds=-1))

    def test_parse_std_and_pretty(self):
        assert parse_std("1h 30m") == timedelta(hours=1, minutes=30)
        assert str(pretty(timedelta(minutes=6, seconds=3))) == "6m 3s"

    def test_as_conversions(self):
        d = Duration.from_nanos(MINUTE)
        s = d.to_std()
        assert d.as_secs() == int(s.total_seconds()) == 60
        assert d.as_millis() == 60_000
        assert d.as_micros() == s // timedelta(microseconds=1) == 60_000_000
        assert d.as_nanos() == 60_000_000_000

    def test_fractional_as_conversions(self):
        assert Duration.from_nanos(1_500).as_micros() == Decimal("1.5")
        assert Duration.from_nanos(1).as_secs() == Decimal("1E-9")


class TestArithmetic:
    """Test operators."""

    def test_add_and_subtract(self):
        a = Duration.from_secs(5)
        b = Duration.from_millis(500)
        assert a + b == Duration.from_millis(5_500)
        assert a - b == Duration.from_millis(4_500)
        assert a + timedelta(seconds=1) == Duration.from_secs(6)
        assert a - timedelta(seconds=1) == Duration.from_secs(4)

    def test_subtract_below_zero(self):
        with pytest.raises(ValueError):
            Duration.from_secs(1) - Duration.from_secs(2)

    def test_std_on_the_left(self):
        assert timedelta(seconds=1) + Duration.from_secs(2) == timedelta(seconds=3)
        assert timedelta(seconds=3) - Duration.from_secs(2) == timedelta(seconds=1)
        start = datetime(2024, 1, 1)
        assert start + Duration.parse("1d 1h") == datetime(2024, 1, 2, 1)
        assert start - Duration.parse("1d") == datetime(2023, 12, 31)

    def test_scalar_operators(self):
        d = Duration.from_nanos(10)
        assert d * 3 == Duration.from_nanos(30)
        assert 3 * d == Duration.from_nanos(30)
        assert d / 3 == Duration.from_nanos(3)
        assert d // 3 == Duration.from_nanos(3)
        assert d % 3 == Duration.from_nanos(1)

    def test_duration_ratio(self):
        assert Duration.parse("1h") // Duration.parse("25m") == 2
        assert Duration.parse("1h") % Duration.parse("25m") == Duration.parse("10m")

    def test_division_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            Duration.from_secs(1) / 0
        with pytest.raises(ZeroDivisionError):
            Duration.from_secs(1) // Duration.zero()

    def test_unsupported_operand(self):
        with pytest.raises(TypeError):
            Duration.from_secs(1) * 1.5
        with pytest.raises(TypeError):
            Duration.from_secs(1) + 1

    def test_sum(self):
        parts = [Duration.parse("1s")] * 3
        assert sum(parts, Duration.zero()) == Duration.parse("3s")


class TestComparison:
    """Test ordering, equality and hashing."""

    def test_ordering(self):
        small = Duration.parse("59s")
        big = Duration.parse("1m")
        assert small < big
        assert small <= big
        assert big > small
        assert big >= small
        assert sorted([big, small]) == [small, big]

    def test_equality(self):
        assert Duration.parse("1h1m1s") == Duration.parse("1 hour 1 minute 1 second")
        assert Duration.from_secs(1) != Duration.from_secs(2)
        assert Duration.from_secs(1) != 1_000_000_000

    def test_hashable(self):
        assert len({Duration.parse("60s"), Duration.parse("1m")}) == 1


class TestDisplay:
    """Test str, repr and format specs."""

    def test_str(self):
        assert str(Duration.parse("6m 3s")) == "6m 3s"
        assert str(Duration.from_nanos(YEAR + HOUR)) == "1yr 1h"

    def test_format_spec(self):
        d = Duration.parse("1.23456s")
        assert f"{d}" == "1.23s"
        assert f"{d:#}" == "1.23 seconds"
        assert f"{d:.4}" == "1.2345s"
        assert f"{d:#.1}" == "1.2 seconds"

    def test_invalid_format_spec(self):
        with pytest.raises(ValueError):
            format(Duration.zero(), "x")

    def test_repr(self):
        assert repr(Duration.from_nanos(5)) == "Duration(5ns)"

    def test_format_methods(self):
        d = Duration.parse("1.5m 4.2ms")
        assert d.format_human() == "1m 30s"
        assert d.format_human(spelled=True) == "1 minute 30 seconds"
        assert d.format_exact() == "1m 30.0042s"

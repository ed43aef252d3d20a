"""
Tests for filter_criteria/operators/dates.py and geo.py
"""

from datetime import datetime, timedelta, timezone

import pytest


class TestDateOperators:
    """Tests for DATE predicates."""

    def test_parse_date(self):
        """ISO strings with Z, aware and naive values are parsed as instants."""
        from filter_criteria.operators.dates import parse_date

        assert parse_date("2023-01-01T00:00:00Z") == datetime(2023, 1, 1, tzinfo=timezone.utc)
        assert parse_date("2023-01-01") == datetime(2023, 1, 1, tzinfo=timezone.utc)
        assert parse_date("not a date") is None
        assert parse_date(12345) is None

    @pytest.mark.parametrize("operator,match_value,expected", [
        ("AFTER", "2023-02-01T00:00:00Z", True),
        ("AFTER", "2023-03-01T00:00:00Z", False),
        ("AFTER-OR-EQUALS", "2023-03-01T00:00:00Z", True),
        ("BEFORE", "2023-04-01T00:00:00Z", True),
        ("BEFORE-OR-EQUALS", "2023-03-01T00:00:00Z", True),
        ("BETWEEN", ["2023-03-01T00:00:00Z", "2023-06-01T00:00:00Z"], True),
        ("BETWEEN", ["2023-03-02T00:00:00Z", "2023-06-01T00:00:00Z"], False),
    ])
    def test_operators(self, operator, match_value, expected):
        """Comparisons by parsed instant."""
        from filter_criteria.operators import dates

        assert dates.evaluate("2023-03-01T00:00:00Z", operator, match_value) is expected

    def test_between_single_bound_uses_now(self):
        """A single BETWEEN bound is paired with now."""
        from filter_criteria.operators import dates

        yesterday = (datetime.now(timezone.utc) - timedelta(days=1)).isoformat()
        last_week = (datetime.now(timezone.utc) - timedelta(days=7)).isoformat()
        tomorrow = (datetime.now(timezone.utc) + timedelta(days=1)).isoformat()

        assert dates.evaluate(yesterday, "BETWEEN", last_week)
        assert not dates.evaluate(tomorrow, "BETWEEN", last_week)

    def test_invalid_operands(self):
        """Unparseable operands are False."""
        from filter_criteria.operators import dates

        assert dates.evaluate("yesterday", "AFTER", "2023-01-01") is False
        assert dates.evaluate("2023-01-01", "BETWEEN", ["2023-01-01"]) is False


class TestGeoOperators:
    """Tests for GEO predicates."""

    NYC = {"lat": 40.7128, "lng": -74.006}
    LONDON = {"lat": 51.5074, "lng": -0.1278}

    def test_distance(self):
        """Haversine distance NYC-London is about 5570 km / 3461 mi."""
        from filter_criteria.core.types import GeoUnit
        from filter_criteria.operators.geo import calculate_distance, to_point

        km = calculate_distance(to_point(self.NYC), to_point(self.LONDON))
        mi = calculate_distance(to_point(self.NYC), to_point(self.LONDON), GeoUnit.MI)

        assert km == pytest.approx(5570, abs=10)
        assert mi == pytest.approx(3461, abs=10)

    def test_in_radius(self):
        """IN-RADIUS is distance <= radius; NOT-IN-RADIUS is its complement."""
        from filter_criteria.operators import geo

        near = {**self.LONDON, "radius": 6000}
        far = {**self.LONDON, "radius": 1000}

        assert geo.evaluate(self.NYC, "IN-RADIUS", near)
        assert not geo.evaluate(self.NYC, "IN-RADIUS", far)
        assert geo.evaluate(self.NYC, "NOT-IN-RADIUS", far)
        assert geo.evaluate(self.NYC, "IN-RADIUS", {**self.LONDON, "radius": 3500, "unit": "mi"})

    def test_missing_radius_is_exact_point(self):
        """Without a radius only the same point matches."""
        from filter_criteria.operators import geo

        assert geo.evaluate([40.7128, -74.006], "IN-RADIUS", self.NYC)
        assert not geo.evaluate([40.7129, -74.006], "IN-RADIUS", self.NYC)

    def test_invalid_operands(self):
        """Bad points, units and match values are False."""
        from filter_criteria.operators import geo

        assert geo.evaluate(self.NYC, "IN-RADIUS", [40.7, -74.0]) is False
        assert geo.evaluate({"lat": "x", "lng": 1}, "IN-RADIUS", self.NYC) is False
        assert geo.evaluate(self.NYC, "IN-RADIUS", {**self.NYC, "unit": "parsec"}) is False
        assert geo.evaluate(self.NYC, "NOT-IN-RADIUS", {**self.NYC, "unit": "parsec"}) is False

"""Tests for threshold range parsing and classification."""

import math

import pytest

from fstatcheck.core.status import Status
from fstatcheck.core.thresholds import Range, ThresholdError, Thresholds, classify, parse_range


class TestParseRange:
    """Tests for parse_range."""

    def test_bare_number(self):
        """A bare number is 0..number."""
        r = parse_range("10")
        assert r.start == 0
        assert r.end == 10
        assert r.invert is False

    def test_open_end(self):
        """'min:' has no upper bound."""
        r = parse_range("10:")
        assert r.start == 10
        assert math.isinf(r.end)

    def test_both_bounds(self):
        r = parse_range("10:20")
        assert (r.start, r.end) == (10, 20)

    def test_negative_infinity_start(self):
        """'~:' means no lower bound."""
        r = parse_range("~:10")
        assert r.start == float("-inf")
        assert r.end == 10

    def test_inverted(self):
        r = parse_range("@10:20")
        assert r.invert is True
        assert (r.start, r.end) == (10, 20)

    def test_decimals_and_negatives(self):
        r = parse_range("-5.5:2.5")
        assert (r.start, r.end) == (-5.5, 2.5)

    def test_keeps_original_text(self):
        """str() gives back the range as written."""
        assert str(parse_range("@~:10")) == "@~:10"
        assert str(parse_range(" 800 ")) == "800"

    @pytest.mark.parametrize("text", [
        "",
        "@",
        ":",
        "abc",
        "10:abc",
        "1:2:3",
        "10:~",
        "20:10",
        "inf",
        "nan:",
    ])
    def test_malformed(self, text):
        """Malformed ranges raise ThresholdError."""
        with pytest.raises(ThresholdError):
            parse_range(text)

    def test_none_is_rejected(self):
        with pytest.raises(ThresholdError):
            parse_range(None)


class TestRangeAlerts:
    """Tests for Range.alerts."""

    @pytest.mark.parametrize("text, value, expected", [
        ("10", 10, False),
        ("10", 11, True),
        ("10", 0, False),
        ("10", -1, True),
        ("10:", 9, True),
        ("10:", 10, False),
        ("10:", 100000, False),
        ("~:10", -1000, False),
        ("~:10", 11, True),
        ("10:20", 9, True),
        ("10:20", 15, False),
        ("10:20", 21, True),
        ("@10:20", 15, True),
        ("@10:20", 10, True),
        ("@10:20", 20, True),
        ("@10:20", 25, False),
        ("@10:20", 5, False),
        ("@10", 5, True),
        ("@10", 11, False),
    ])
    def test_alerts(self, text, value, expected):
        assert parse_range(text).alerts(value) is expected

    def test_contains_is_inclusive(self):
        r = Range(start=1, end=3)
        assert r.contains(1)
        assert r.contains(3)
        assert not r.contains(3.5)


class TestClassify:
    """Tests for classify."""

    @pytest.mark.parametrize("value, expected", [
        (0, Status.OK),
        (799, Status.OK),
        (800, Status.OK),
        (801, Status.WARNING),
        (900, Status.WARNING),
        (1000, Status.WARNING),
        (1001, Status.CRITICAL),
    ])
    def test_upper_bounds(self, value, expected):
        thresholds = Thresholds.parse("800", "1000")
        assert classify(value, thresholds) is expected

    def test_critical_takes_precedence(self):
        """When both ranges fire the result is CRITICAL."""
        thresholds = Thresholds.parse("10", "5")
        assert classify(20, thresholds) is Status.CRITICAL

    def test_inverted_warning(self):
        thresholds = Thresholds.parse("@10:20", "100")
        assert classify(15, thresholds) is Status.WARNING
        assert classify(25, thresholds) is Status.OK

    def test_lower_bound(self):
        """'min:' alerts when the count drops below min."""
        thresholds = Thresholds.parse("5:", "1:")
        assert classify(0, thresholds) is Status.CRITICAL
        assert classify(3, thresholds) is Status.WARNING
        assert classify(5, thresholds) is Status.OK

    def test_parse_validates_both(self):
        """Thresholds.parse fails fast on either bad range."""
        with pytest.raises(ThresholdError):
            Thresholds.parse("800", "bogus")
        with pytest.raises(ThresholdError):
            Thresholds.parse("bogus", "1000")

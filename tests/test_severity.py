"""
Unit tests for severity ordering.

Run with: python -m pytest tests/test_severity.py -v
"""

import itertools

import pytest

from advisor_stats.services.advisor.errors import UnknownStatusLabel
from advisor_stats.services.advisor.severity import Severity, parse_status, worst


class TestSeverity:
    """Tests for Severity enum."""

    def test_declaration_order_is_severity_order(self):
        assert [s.value for s in Severity] == ["not_available", "ok", "warning", "error"]
        assert Severity.NOT_AVAILABLE.rank < Severity.OK.rank < Severity.WARNING.rank < Severity.ERROR.rank

    def test_str_is_label(self):
        assert str(Severity.WARNING) == "warning"
        assert str(Severity.NOT_AVAILABLE) == "not_available"


class TestWorst:
    """Tests for worst()."""

    @pytest.mark.parametrize("a,b", list(itertools.product(Severity, repeat=2)))
    def test_commutative(self, a, b):
        assert worst(a, b) == worst(b, a)

    @pytest.mark.parametrize("a", list(Severity))
    def test_idempotent(self, a):
        assert worst(a, a) is a

    @pytest.mark.parametrize("a", list(Severity))
    def test_not_available_is_identity(self, a):
        assert worst(a, Severity.NOT_AVAILABLE) is a
        assert worst(Severity.NOT_AVAILABLE, a) is a

    def test_picks_more_severe(self):
        assert worst(Severity.OK, Severity.WARNING) is Severity.WARNING
        assert worst(Severity.ERROR, Severity.WARNING) is Severity.ERROR


class TestParseStatus:
    """Tests for parse_status()."""

    @pytest.mark.parametrize("label", ["not_available", "ok", "warning", "error"])
    def test_known_labels(self, label):
        assert parse_status(label).value == label

    @pytest.mark.parametrize("label", ["unknown_status", "OK", "", "critical"])
    def test_unknown_label_raises(self, label):
        with pytest.raises(UnknownStatusLabel) as exc_info:
            parse_status(label)
        assert exc_info.value.label == label

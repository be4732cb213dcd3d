"""
Tests for warning collection.
"""

import pytest

from chain_resolver import ResolutionWarning, WarningCollector


class TestWarningCollector:
    """Tests for WarningCollector."""

    def test_invalid_level(self):
        """Test warning level validation."""
        with pytest.raises(ValueError, match="Invalid warning level"):
            ResolutionWarning(level="DEBUG", message="nope")

    def test_add_and_filter(self):
        """Test adding and filtering warnings."""
        collector = WarningCollector()
        collector.add("INFO", "info")
        collector.add("WARNING", "warning")

        assert not collector.has_errors()
        assert len(collector.get_by_level("WARNING")) == 1

        collector.add("ERROR", "error")

        assert collector.has_errors()
        assert collector.get_summary() == {"INFO": 1, "WARNING": 1, "ERROR": 1}

    def test_get_all_returns_copy(self):
        """Test get_all does not expose internal state."""
        collector = WarningCollector()
        collector.add("INFO", "info")
        collector.get_all().clear()

        assert len(collector.get_all()) == 1

    def test_domain_warnings(self):
        """Test unknown-dependency and duplicate-request helpers."""
        collector = WarningCollector()
        collector.add_unknown_dependency_warning("app", "ghost")
        collector.add_duplicate_request_warning("x", 2)

        warnings = collector.get_all()
        assert "'ghost'" in warnings[0].message
        assert warnings[0].context == "app"
        assert "2 times" in warnings[1].message

    def test_clear(self):
        """Test clearing collected warnings."""
        collector = WarningCollector()
        collector.add("WARNING", "w")
        collector.clear()

        assert collector.get_all() == []

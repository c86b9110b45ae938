# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Tests for severity, trace mode and category parsing."""

import pytest

from multisink_logging import (
    Category,
    ConfigurationError,
    Severity,
    TraceMode,
    UnknownCategoryError,
)


class TestSeverity:
    """Tests for Severity."""

    def test_ordered_by_verbosity(self):
        """Test that ERROR < INFO < DEBUG."""
        assert Severity.ERROR < Severity.INFO < Severity.DEBUG

    def test_error_is_zero_value(self):
        """Test that ERROR is the zero value."""
        assert Severity.ERROR == 0

    @pytest.mark.parametrize("value", [Severity.INFO, 1, "INFO", "info", " Info "])
    def test_parse_accepts_member_value_and_name(self, value):
        """Test that members, values and names all parse."""
        assert Severity.parse(value) is Severity.INFO

    @pytest.mark.parametrize("value", [3, -1, "WARNING", "", None, True, 1.0])
    def test_parse_rejects_unknown(self, value):
        """Test that unknown levels raise ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Invalid log level"):
            Severity.parse(value)


class TestTraceMode:
    """Tests for TraceMode."""

    def test_parse_by_name(self):
        """Test parsing trace modes by name."""
        assert TraceMode.parse("single") is TraceMode.SINGLE
        assert TraceMode.parse("FULL") is TraceMode.FULL

    def test_parse_by_value(self):
        """Test parsing trace modes by integer value."""
        assert TraceMode.parse(0) is TraceMode.SINGLE
        assert TraceMode.parse(1) is TraceMode.FULL

    def test_parse_rejects_unknown(self):
        """Test that an unknown trace mode raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Invalid trace mode"):
            TraceMode.parse(2)

    def test_configuration_error_is_value_error(self):
        """Test that ConfigurationError can be caught as ValueError."""
        with pytest.raises(ValueError):
            TraceMode.parse("sometimes")


class TestCategory:
    """Tests for Category."""

    def test_four_categories(self):
        """Test the set of categories."""
        assert [c.value for c in Category] == ["log", "error", "fatal", "debug"]

    def test_parse_case_insensitive(self):
        """Test that category names parse case-insensitively."""
        assert Category.parse("Fatal") is Category.FATAL

    @pytest.mark.parametrize("value", ["warning", "", 1, None])
    def test_parse_rejects_unknown(self, value):
        """Test that unknown categories raise UnknownCategoryError."""
        with pytest.raises(UnknownCategoryError, match="Unknown sink category"):
            Category.parse(value)

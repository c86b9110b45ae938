# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Tests for sink configuration."""

import pytest

from multisink_logging import SinkConfig


class TestSinkConfig:
    """Tests for SinkConfig."""

    def test_defaults(self):
        config = SinkConfig("stdout")

        assert config.driver_name == "stdout"
        assert config.config == {}

    def test_get(self):
        """Test key lookup with a default."""
        config = SinkConfig("telegram", {"timeout": 3})

        assert config.get("timeout") == 3
        assert config.get("max_workers", 4) == 4

    def test_attribute_access(self):
        """Test that driver settings read as attributes."""
        config = SinkConfig("telegram", {"url": "http://x", "chat_ids": "1,2"})

        assert config.url == "http://x"
        assert config.chat_ids == "1,2"

    def test_missing_setting_reads_none(self):
        """Test that an absent setting reads as None."""
        assert SinkConfig("stdout").logger_name is None

    def test_private_attribute_raises(self):
        """Test that private names are not looked up in the settings."""
        config = SinkConfig("stdout", {"_secret": "x"})

        with pytest.raises(AttributeError):
            config._secret

    def test_configs_are_independent(self):
        """Test that the default settings dict is not shared."""
        first, second = SinkConfig("memory"), SinkConfig("memory")

        first.config["sink_id"] = "a"

        assert second.sink_id is None

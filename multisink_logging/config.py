# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Sink configuration model."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class SinkConfig:
    """Configuration for one sink driver.

    Attributes:
        driver_name: Name of the driver (e.g., "stdout", "memory", "telegram")
        config: Dictionary of driver-specific configuration values
    """
    driver_name: str
    config: dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a driver config value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return self.config.get(key, default)

    def __getattr__(self, name: str) -> Any:
        """Allow attribute-style access to driver config values.

        Missing keys read as None, so optional settings need no guards.
        """
        if name.startswith("_") or name in ("driver_name", "config"):
            raise AttributeError(name)
        return self.__dict__.get("config", {}).get(name)

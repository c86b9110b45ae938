# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""In-memory sink implementation for testing."""

from typing import Any

from .config import SinkConfig
from .sink import Sink


class MemorySink(Sink):
    """Sink that stores messages in memory without output.

    Useful for testing to verify logging behavior without cluttering test output.
    """

    def __init__(self, sink_id: str = "memory"):
        """Initialize memory sink.

        Args:
            sink_id: Identifier used for routing
        """
        self._sink_id = sink_id
        self.records: list[dict[str, Any]] = []

    @classmethod
    def from_config(cls, config: SinkConfig) -> "MemorySink":
        """Create a MemorySink from driver configuration.

        Args:
            config: SinkConfig with an optional sink_id

        Returns:
            Configured MemorySink instance
        """
        return cls(sink_id=config.sink_id or "memory")

    @property
    def sink_id(self) -> str:
        return self._sink_id

    def _store(self, category: str, message: bytes) -> None:
        self.records.append({"category": category, "message": message})

    def log(self, message: bytes) -> None:
        self._store("log", message)

    def error(self, message: bytes) -> None:
        self._store("error", message)

    def fatal(self, message: bytes) -> None:
        self._store("fatal", message)

    def debug(self, message: bytes) -> None:
        self._store("debug", message)

    def clear(self) -> None:
        """Clear all stored messages (useful for testing)."""
        self.records.clear()

    def get_messages(self, category: str | None = None) -> list[str]:
        """Get stored messages as text, optionally filtered by category.

        Args:
            category: Optional category to filter by (log, error, fatal, debug)

        Returns:
            Decoded message lines in arrival order
        """
        return [
            record["message"].decode("utf-8")
            for record in self.records
            if category is None or record["category"] == category
        ]

    def has_message(self, text: str, category: str | None = None) -> bool:
        """Check if a stored message contains text.

        Args:
            text: Text to search for (substring match)
            category: Optional category to filter by

        Returns:
            True if text is found, False otherwise
        """
        return any(text in message for message in self.get_messages(category))

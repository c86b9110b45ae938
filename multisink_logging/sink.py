# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Abstract sink interface."""

from abc import ABC, abstractmethod


class Sink(ABC):
    """Abstract base class for log sinks.

    A sink receives fully formatted message lines, one call per dispatch.
    Implementations must contain their own failures: nothing a sink raises
    is handled by the dispatcher. A sink may hand the message to a
    background worker and return immediately.
    """

    @property
    @abstractmethod
    def sink_id(self) -> str:
        """Stable identifier used for registration and routing."""
        pass

    @abstractmethod
    def log(self, message: bytes) -> None:
        """Receive an info-level message.

        Args:
            message: Formatted message line
        """
        pass

    @abstractmethod
    def error(self, message: bytes) -> None:
        """Receive an error-level message.

        Args:
            message: Formatted message line
        """
        pass

    @abstractmethod
    def fatal(self, message: bytes) -> None:
        """Receive a fatal message.

        Called right before the process terminates.

        Args:
            message: Formatted message line
        """
        pass

    @abstractmethod
    def debug(self, message: bytes) -> None:
        """Receive a debug-level message.

        Args:
            message: Formatted message line
        """
        pass

    def flush(self, timeout: float | None = None) -> None:
        """Wait for pending asynchronous deliveries.

        The default implementation does nothing; sinks that deliver in the
        background override it.

        Args:
            timeout: Maximum number of seconds to wait, or None to wait forever
        """
        pass

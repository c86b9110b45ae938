# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Exceptions raised by the logging façade."""


class LoggingError(Exception):
    """Base exception for multisink logging errors."""
    pass


class ConfigurationError(LoggingError, ValueError):
    """Raised when a setting or sink argument is invalid.

    The object being configured is left unchanged.
    """
    pass


class UnknownCategoryError(LoggingError, ValueError):
    """Raised when a sink is attached to a category that does not exist."""
    pass

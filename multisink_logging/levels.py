# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Severity levels, trace modes and dispatch categories."""

from enum import Enum, IntEnum

from .exceptions import ConfigurationError, UnknownCategoryError


class Severity(IntEnum):
    """Verbosity tiers used for gating, ordered by ascending verbosity.

    ERROR is always emitted. INFO and DEBUG are emitted only when the
    configured minimum level is at least as verbose.
    """

    ERROR = 0
    INFO = 1
    DEBUG = 2

    @classmethod
    def parse(cls, value: "Severity | int | str") -> "Severity":
        """Coerce an enum member, its value or its name into a Severity.

        Raises:
            ConfigurationError: If the value does not name a level
        """
        return _parse_enum(cls, value, "log level")


class TraceMode(IntEnum):
    """How many call-site frames end up in the message prefix."""

    SINGLE = 0  # immediate external caller only
    FULL = 1  # every external frame up to the boundary

    @classmethod
    def parse(cls, value: "TraceMode | int | str") -> "TraceMode":
        """Coerce an enum member, its value or its name into a TraceMode.

        Raises:
            ConfigurationError: If the value does not name a trace mode
        """
        return _parse_enum(cls, value, "trace mode")


class Category(str, Enum):
    """Named fan-out lists a sink can be attached to."""

    LOG = "log"
    ERROR = "error"
    FATAL = "fatal"
    DEBUG = "debug"

    @classmethod
    def parse(cls, value: "Category | str") -> "Category":
        """Coerce a category member or name.

        Raises:
            UnknownCategoryError: If the value is not one of the four categories
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise UnknownCategoryError(
            f"Unknown sink category: {value!r}. "
            f"Must be one of: {', '.join(c.value for c in cls)}"
        )


def _parse_enum(enum_cls, value, what: str):
    if isinstance(value, enum_cls):
        return value
    # bool is an int subclass; True/False are never meaningful here
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return enum_cls(value)
        except ValueError:
            pass
    elif isinstance(value, str):
        name = value.strip().upper()
        if name in enum_cls.__members__:
            return enum_cls[name]
    raise ConfigurationError(
        f"Invalid {what}: {value!r}. Must be one of {list(enum_cls.__members__)}"
    )

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Shared test fixtures for multisink_logging tests."""

import pytest

from multisink_logging import Logger, MemorySink, MessageBuilder, Severity

from support import FIXED_TIME, TEST_HOST, ExitRecorder


@pytest.fixture
def builder():
    """Provide a message builder with a pinned host and clock."""
    return MessageBuilder(hostname=TEST_HOST, clock=lambda: FIXED_TIME)


@pytest.fixture
def exit_recorder():
    return ExitRecorder()


@pytest.fixture
def memory_sink():
    return MemorySink()


@pytest.fixture
def logger(builder, exit_recorder, memory_sink):
    """Provide a DEBUG-level logger with a memory sink on every category."""
    logger = Logger(level=Severity.DEBUG, builder=builder, exit_func=exit_recorder)
    logger.register_sink(memory_sink)
    for category in ("log", "error", "fatal", "debug"):
        logger.attach(category, memory_sink.sink_id)
    return logger

#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Example usage of the multisink_logging module.

This script demonstrates level gating, trace modes and sink routing.
"""

from multisink_logging import (
    Logger,
    MemorySink,
    Severity,
    SinkConfig,
    TraceMode,
    create_logger,
    create_sink,
)


def load_config(logger):
    logger.debugf("Loading config from %s", "/etc/app.yaml")
    logger.log("Config loaded")


def main():
    """Demonstrate logging functionality."""

    print("=" * 60)
    print("Multisink Logging Examples")
    print("=" * 60)
    print()

    # Example 1: Console sink at INFO level
    print("Example 1: StdoutSink with INFO level")
    print("-" * 60)
    console = create_sink(SinkConfig("stdout"))
    logger = create_logger(level="INFO", sinks={console: ("log", "error", "debug")})

    logger.log("Service started on port", 8080)
    logger.errorf("Retry %d of %d failed", 2, 5)
    logger.debug("This debug message won't appear (below DEBUG level)")
    print()

    # Example 2: Full call chain
    print("Example 2: DEBUG level with FULL trace mode")
    print("-" * 60)
    logger.set_level(Severity.DEBUG)
    logger.set_trace_mode(TraceMode.FULL)
    load_config(logger)
    print()

    # Example 3: Memory sink for testing
    print("Example 3: MemorySink for testing")
    print("-" * 60)
    memory = MemorySink()
    test_logger = Logger(level=Severity.INFO)
    test_logger.register_sink(memory)
    test_logger.add_log_sinks(memory.sink_id)
    test_logger.add_error_sinks(memory.sink_id)

    test_logger.log("Test message 1")
    test_logger.error("Test error", 500)

    print(f"Total messages captured: {len(memory.records)}")
    print(f"Has 'Test message 1': {memory.has_message('Test message 1')}")
    print(f"Error messages: {len(memory.get_messages('error'))}")
    print()

    print("=" * 60)
    print("Examples completed!")
    print("=" * 60)


if __name__ == "__main__":
    main()

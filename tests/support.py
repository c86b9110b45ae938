# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Constants and helpers shared by the test modules."""

from datetime import datetime, timedelta, timezone

FIXED_TIME = datetime(2016, 11, 21, 14, 50, 23, tzinfo=timezone(timedelta(hours=3)))
FIXED_TIMESTAMP = "2016-11-21T14:50:23+03:00"
TEST_HOST = "testhost"


class ExitRecorder:
    """Stands in for process termination and remembers the status."""

    def __init__(self, events=None):
        self.statuses = []
        self.events = events if events is not None else []

    def __call__(self, status):
        self.statuses.append(status)
        self.events.append(("exit", status))

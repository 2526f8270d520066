"""Deterministic fakes shared by the tests."""

from datetime import datetime, timezone

FIXED_NOW = datetime(2024, 1, 1, 9, 30, tzinfo=timezone.utc)
FIXED_NOW_ISO = "2024-01-01T09:30:00.000Z"


def fixed_clock() -> datetime:
    return FIXED_NOW


class FailingStorage:
    """Storage whose reads and/or writes always fail."""

    def __init__(self, fail_get: bool = False, fail_set: bool = True):
        self.fail_get = fail_get
        self.fail_set = fail_set
        self.data: dict[str, str] = {}

    def get(self, key):
        if self.fail_get:
            raise OSError("disk unavailable")
        return self.data.get(key)

    def set(self, key, value):
        if self.fail_set:
            raise OSError("disk full")
        self.data[key] = value

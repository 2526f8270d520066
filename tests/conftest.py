"""Pytest configuration and fixtures for tasklist-mcp tests."""

import pytest
from fakes import fixed_clock

from tasklist_mcp import MemoryStorage, TaskStore


@pytest.fixture
def storage():
    """Empty in-memory storage."""
    return MemoryStorage()


@pytest.fixture
def store(storage):
    """An empty store over in-memory storage with a fixed clock."""
    return TaskStore(storage, clock=fixed_clock)


@pytest.fixture
def populated_store(storage):
    """A store holding three tasks, the oldest one completed."""
    s = TaskStore(storage, clock=fixed_clock)
    s.add_task("Buy milk", "2024-01-01")
    s.add_task("Walk dog", "2024-01-02")
    s.add_task("Write report", "2024-01-03")
    s.toggle_task(1)
    return s

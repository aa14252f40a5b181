"""Pytest configuration and fixtures for tm-bridge tests."""

import pytest
import structlog
from fakes import FakeCoreFactory, FakeCoreHandle, RecordingReporter

from tm_bridge.config import reset_settings
from tm_bridge.enums import StorageType


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Clear cached settings and structlog config around every test."""
    monkeypatch.delenv("TM_BRIDGE_CORE_FACTORY", raising=False)
    reset_settings()
    yield
    reset_settings()
    structlog.reset_defaults()


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def sample_stats():
    """Core response for two briefs, the current one sorting last by name."""
    return {
        "tags": [
            {
                "name": "beta",
                "isCurrent": False,
                "taskCount": 4,
                "completedTasks": 1,
                "statusBreakdown": {"pending": 3, "done": 1},
                "status": "draft",
                "briefId": "brief-beta",
            },
            {
                "name": "alpha",
                "isCurrent": True,
                "taskCount": 10,
                "completedTasks": 3,
                "statusBreakdown": {"pending": 5, "in-progress": 2, "done": 3},
                "subtaskCounts": {"totalSubtasks": 6, "subtasksByStatus": {"pending": 4, "done": 2}},
                "created": "2025-03-01T10:00:00Z",
                "description": "Launch plan",
                "status": "active",
                "briefId": "brief-alpha",
            },
        ],
        "currentTag": "alpha",
        "totalTags": 2,
    }


@pytest.fixture
def remote_factory(sample_stats):
    """Factory for a core resolved to API storage with two briefs."""
    return FakeCoreFactory(FakeCoreHandle(StorageType.API, sample_stats))


@pytest.fixture
def local_factory():
    """Factory for a core resolved to file storage."""
    return FakeCoreFactory(FakeCoreHandle(StorageType.FILE))

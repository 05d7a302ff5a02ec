"""
Test Fakes Module

Provides fake/stub implementations for testing.
These are minimal implementations that satisfy interfaces without real dependencies.
"""

from tests.fakes.fake_github import (
    FakeGitHubApi,
    RecordingProgressSink,
    make_artifact,
    make_run,
)

__all__ = [
    "FakeGitHubApi",
    "RecordingProgressSink",
    "make_artifact",
    "make_run",
]

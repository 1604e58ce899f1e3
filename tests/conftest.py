"""Pytest configuration"""

import pytest

from termboxer.telemetry import metrics


class RecordingContent:
    """Content double that records resize calls and returns fixed lines"""

    def __init__(self, lines=None):
        self.lines = list(lines or [])
        self.sizes: list[tuple[int, int]] = []

    def resize(self, width: int, height: int) -> None:
        self.sizes.append((width, height))

    def view(self) -> list[str]:
        return list(self.lines)


@pytest.fixture
def make_content():
    """Factory for RecordingContent"""
    return RecordingContent


@pytest.fixture(autouse=True)
def reset_metrics():
    """Reset metrics around every test"""
    metrics.reset()
    yield
    metrics.reset()

"""Global pytest fixtures for EXEMPLAR."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from exemplar.calculator import Calculator

## Adjust pylint to deal with fixtures
# pylint: disable=redefined-outer-name, unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()

# Folder -> mark applied to every test collected below it.
DEFAULT_MARKS = {
    TESTS_ROOT / "unit": "unit",
    TESTS_ROOT / "functional": "functional",
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the default folder mark (`unit`, `functional`) to each collected item."""
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        for root, marker_name in DEFAULT_MARKS.items():
            if root in path.parents and not any(
                marker.name == marker_name for marker in item.iter_markers()
            ):
                item.add_marker(getattr(pytest.mark, marker_name))


@dataclass
class PauseRecorder:
    """Stand-in for `exemplar.utils.pause.pause` that records instead of waiting.

    Honors a cancel event the same way the real helper does: a set event
    reports the pause as cancelled.
    """

    calls: list[tuple[float, threading.Event | None]] = field(default_factory=list)

    def __call__(self, seconds: float, cancel: threading.Event | None = None) -> bool:
        self.calls.append((seconds, cancel))
        return not (cancel is not None and cancel.is_set())

    @property
    def durations(self) -> list[float]:
        """Durations requested so far, in call order."""
        return [seconds for seconds, _ in self.calls]


@pytest.fixture
def calculator() -> Calculator:
    """A fresh calculator per test."""
    return Calculator()


@pytest.fixture
def recorded_pause(monkeypatch: pytest.MonkeyPatch) -> PauseRecorder:
    """Replace the wall-clock pause in both utility modules with a recorder."""
    recorder = PauseRecorder()
    monkeypatch.setattr("exemplar.calculator.pause", recorder)
    monkeypatch.setattr("exemplar.string_utils.pause", recorder)
    return recorder

"""
Pytest configuration for the student roster.

Provides fixtures for:
- Fresh and pre-populated rosters
- Settings cache isolation between tests
- Restoring root logging after tests that configure it
"""

from __future__ import annotations

import logging
from typing import Callable, Generator

import pytest

from student_roster.config import get_settings
from student_roster.domain.models import Student
from student_roster.roster import Roster


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """
    Drop cached settings so environment overrides apply per test.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_root_logging() -> Generator[None, None, None]:
    """
    Undo any `configure_logging` call made during a test.
    """
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def make_student() -> Callable[..., Student]:
    """
    Factory for students with sensible defaults.
    """

    def _make(name: str = "Alice", age: int = 20, major: str = "Computer Science") -> Student:
        return Student(name=name, age=age, major=major)

    return _make


@pytest.fixture
def roster() -> Roster:
    """
    An empty roster.
    """
    return Roster()


@pytest.fixture
def populated_roster(
    roster: Roster,
    make_student: Callable[..., Student],
    capsys: pytest.CaptureFixture[str],
) -> Roster:
    """
    Roster holding Alice, Bob and Charlie in that order, with the "added"
    lines already drained from captured output.
    """
    roster.add(make_student("Alice", 20, "Computer Science"))
    roster.add(make_student("Bob", 22, "Mathematics"))
    roster.add(make_student("Charlie", 21, "Physics"))
    capsys.readouterr()
    return roster

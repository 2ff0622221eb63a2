"""
Student Roster - an in-memory collection of student records.

The package provides:

- ``Student``: a name/age/major record
- ``Roster``: ordered add, remove-by-name and list operations with console output
- ``run_demo``: a fixed sequence exercising the roster end to end

Diagnostics are routed through standard logging and configured from
environment-driven settings.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from student_roster.config import Settings, get_settings
from student_roster.demo import run_demo
from student_roster.domain.models import Student
from student_roster.roster import Roster
from student_roster.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Roster
    "Student",
    "Roster",
    "run_demo",
    # Logging
    "configure_logging",
    "get_logger",
]

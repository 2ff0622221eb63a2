"""
Utilities package for the student roster.

Exports shared helpers for cross-cutting concerns such as logging.
Keep this package lightweight and free of roster-specific logic.
"""

from student_roster.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]

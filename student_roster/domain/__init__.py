"""
Domain package for the student roster.

Exports the core domain models used by the roster and the demo sequence.
Keep this package focused on data definitions.
"""

from student_roster.domain.models import Student

__all__ = [
    "Student",
]

"""
In-memory roster of student records.

The roster keeps students in insertion order, allows duplicate names, and
reports every operation on the console:

    from student_roster.domain import Student
    from student_roster.roster import Roster

    roster = Roster()
    roster.add(Student(name="Alice", age=20, major="Computer Science"))
    roster.remove("alice")   # True
    roster.remove("alice")   # False, "Student alice not found."
    roster.list_students()   # "No students found."
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

import typer

from student_roster.domain.models import Student
from student_roster.utils.logging import get_logger

log = get_logger(__name__)


def _same_name(left: str, right: str) -> bool:
    # Ordinal, character by character; no multi-character folds like "ß" -> "ss".
    return len(left) == len(right) and all(
        a == b or a.upper() == b.upper() or a.lower() == b.lower() for a, b in zip(left, right)
    )


class Roster:
    """
    Ordered, mutable collection of students.

    Removal is by name, case-insensitively, and deletes only the first match
    in insertion order. A missing name is reported and yields False; it is
    never raised.
    """

    def __init__(self) -> None:
        self._students: List[Student] = []

    def __len__(self) -> int:
        return len(self._students)

    def __iter__(self) -> Iterator[Student]:
        return iter(tuple(self._students))

    @property
    def students(self) -> Tuple[Student, ...]:
        """Snapshot of the current students in roster order."""
        return tuple(self._students)

    def add(self, student: Student) -> None:
        """Append a student to the end of the roster."""
        self._students.append(student)
        typer.echo(f"Student {student.name} added.")
        log.debug("Student added", extra={"student": student.name, "size": len(self)})

    def _find_index(self, name: str) -> Optional[int]:
        for index, student in enumerate(self._students):
            if _same_name(student.name, name):
                return index
        return None

    def remove(self, name: str) -> bool:
        """
        Remove the first student whose name matches ``name`` ignoring case.

        The console message echoes ``name`` as passed in, not the stored
        spelling.

        Returns
        -------
        bool
            True if a student was removed, False if none matched.
        """
        index = self._find_index(name)
        if index is None:
            typer.echo(f"Student {name} not found.")
            log.debug("Student not found", extra={"student": name, "size": len(self)})
            return False

        del self._students[index]
        typer.echo(f"Student {name} removed.")
        log.debug("Student removed", extra={"student": name, "size": len(self)})
        return True

    def list_students(self) -> None:
        """Print every student in roster order, or a notice when empty."""
        if not self._students:
            typer.echo("No students found.")
            return

        typer.echo("List of students:")
        for student in self._students:
            typer.echo(str(student))
        log.debug("Students listed", extra={"size": len(self)})


__all__ = ["Roster"]

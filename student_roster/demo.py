"""
Fixed demonstration sequence that exercises every roster operation once.
"""

from __future__ import annotations

from typing import Optional

import typer

from student_roster.domain.models import Student
from student_roster.roster import Roster
from student_roster.utils.logging import get_logger

log = get_logger(__name__)


def run_demo(roster: Optional[Roster] = None) -> None:
    """
    Add three students, list, remove one, list, try to remove an unknown
    student, add another and list again.

    Parameters
    ----------
    roster : Roster | None
        Roster to operate on. A fresh empty roster is used when omitted.
    """
    roster = roster if roster is not None else Roster()
    log.info("[DEMO START]")

    roster.add(Student(name="Alice", age=20, major="Computer Science"))
    roster.add(Student(name="Bob", age=22, major="Mathematics"))
    roster.add(Student(name="Charlie", age=21, major="Physics"))

    roster.list_students()

    roster.remove("Bob")

    roster.list_students()

    try:
        roster.remove("David")
    except Exception as exc:  # noqa: BLE001 - report and keep the sequence going
        log.exception("[DEMO] Unexpected failure removing student", extra={"student": "David"})
        typer.echo(f"An error occurred: {exc}")

    roster.add(Student(name="Eve", age=23, major="Biology"))

    roster.list_students()

    log.info("[DEMO COMPLETE]", extra={"size": len(roster)})


__all__ = ["run_demo"]

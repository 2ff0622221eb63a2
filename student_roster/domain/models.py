"""
Domain models for the student roster.

A student record is a plain name/age/major value. Nothing beyond pydantic's
type coercion is checked: empty names, empty majors and negative ages are all
accepted as given.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Student(BaseModel):
    """
    A single student held by a roster.
    """

    name: str = Field(..., description="Student name; the only lookup key.")
    age: int = Field(..., description="Age in years.")
    major: str = Field(..., description="Field of study.")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"Name: {self.name}, Age: {self.age}, Major: {self.major}"


__all__ = ["Student"]

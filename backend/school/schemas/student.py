"""
Pydantic schemas for Student
"""

from pydantic import BaseModel, Field


# Shared properties
class StudentBase(BaseModel):
    name: str = Field(..., min_length=1)
    surname: str | None = None
    age: int = 0
    faculty_id: int | None = None


class StudentCreate(StudentBase):
    """Create a student. A client-supplied id is accepted and ignored."""
    id: int | None = None


class StudentUpdate(StudentBase):
    """Replace every mutable field of an existing student"""
    id: int


class StudentRead(StudentBase):
    id: int

    model_config = {
        "from_attributes": True
    }

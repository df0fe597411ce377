"""
Pydantic schemas for Faculty
"""

from pydantic import BaseModel


class FacultyBase(BaseModel):
    name: str | None = None
    colour: str | None = None


class FacultyCreate(FacultyBase):
    id: int | None = None


class FacultyUpdate(FacultyBase):
    id: int


# Students are never embedded, use /faculty/{id}/students
class FacultyRead(FacultyBase):
    id: int

    model_config = {
        "from_attributes": True
    }

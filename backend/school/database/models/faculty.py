# school/database/models/faculty.py
from sqlalchemy import Column, Integer, String
from ..base import Base

class Faculty(Base):
    __tablename__ = "faculties"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=True)
    colour = Column(String, nullable=True)

    # No students relationship: a faculty's students are always queried
    # from students.faculty_id (see FacultyService.students_of_faculty)

    def __repr__(self) -> str:
        return f"<Faculty {self.id} {self.name} ({self.colour})>"

# school/services/faculty_service.py
import logging
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from ..database.models.faculty import Faculty
from ..database.models.student import Student
from ..schemas.faculty import FacultyCreate, FacultyUpdate
from .exceptions import NotFoundError

logger = logging.getLogger(__name__)


class FacultyService:
    """Query, filter and CRUD operations over Faculty records"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, faculty_id: int) -> Faculty:
        faculty = self.db.get(Faculty, faculty_id)
        if faculty is None:
            logger.error(f"There is no faculty with id = {faculty_id}")
            raise NotFoundError("Faculty", faculty_id)
        return faculty

    def list_all(self) -> List[Faculty]:
        return self.db.query(Faculty).order_by(Faculty.id).all()

    def filter_by_colour(self, colour: str) -> List[Faculty]:
        return (
            self.db.query(Faculty)
            .filter(func.lower(Faculty.colour).contains(colour.lower(), autoescape=True))
            .order_by(Faculty.id)
            .all()
        )

    def filter_by_name_exact(self, name: str) -> Optional[Faculty]:
        return (
            self.db.query(Faculty)
            .filter(func.lower(Faculty.name) == name.lower())
            .order_by(Faculty.id)
            .first()
        )

    def filter(self, colour: Optional[str] = None, name: Optional[str] = None) -> List[Faculty]:
        """Colour takes priority over name; no filter returns every faculty"""
        if colour is not None and colour.strip():
            return self.filter_by_colour(colour)

        if name is not None and name.strip():
            faculty = self.filter_by_name_exact(name)
            return [faculty] if faculty is not None else []

        return self.list_all()

    def create(self, data: FacultyCreate) -> Faculty:
        logger.info("Was invoked method for create faculty")
        faculty = Faculty(**data.model_dump(exclude={"id"}))
        self.db.add(faculty)
        self.db.commit()
        self.db.refresh(faculty)
        return faculty

    def update(self, data: FacultyUpdate) -> Faculty:
        faculty = self.db.get(Faculty, data.id)
        if faculty is None:
            logger.error(f"Cannot edit faculty - no faculty with ID {data.id}")
            raise NotFoundError("Faculty", data.id)

        logger.info(f"Was invoked method to update faculty {data.id}")
        faculty.name = data.name
        faculty.colour = data.colour
        self.db.commit()
        self.db.refresh(faculty)
        return faculty

    def delete(self, faculty_id: int) -> Faculty:
        """
        Delete a faculty and return the deleted record.
        Students referencing it are left untouched.
        """
        faculty = self.db.get(Faculty, faculty_id)
        if faculty is None:
            logger.error(f"Cannot delete faculty - no faculty with ID {faculty_id}")
            raise NotFoundError("Faculty", faculty_id)

        logger.info(f"Was invoked method to delete faculty with ID {faculty_id}")
        self.db.delete(faculty)
        self.db.commit()
        return faculty

    def students_of_faculty(self, faculty_id: int) -> List[Student]:
        """Students whose faculty_id equals faculty_id; empty for unknown faculties"""
        return (
            self.db.query(Student)
            .filter(Student.faculty_id == faculty_id)
            .order_by(Student.id)
            .all()
        )

    def longest_name(self) -> Optional[str]:
        faculty = (
            self.db.query(Faculty)
            .filter(Faculty.name.isnot(None))
            .order_by(func.length(Faculty.name).desc(), Faculty.id)
            .first()
        )
        return faculty.name if faculty else None

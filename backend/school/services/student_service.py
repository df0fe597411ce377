# school/services/student_service.py
import logging
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from ..database.models.student import Student
from ..database.models.faculty import Faculty
from ..schemas.student import StudentCreate, StudentUpdate
from .exceptions import NotFoundError, BadRequestError

logger = logging.getLogger(__name__)


class StudentService:
    """Query, filter and CRUD operations over Student records"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, student_id: int) -> Student:
        logger.debug(f"Looking for student with id {student_id}")
        student = self.db.get(Student, student_id)
        if student is None:
            logger.error(f"There is no student with id = {student_id}")
            raise NotFoundError("Student", student_id)
        return student

    def list_all(self) -> List[Student]:
        logger.warning("Someone is getting all students")
        return self.db.query(Student).order_by(Student.id).all()

    def filter_by_age(self, age: int) -> List[Student]:
        logger.info(f"Was invoked method to filter students by age {age}")
        return self.db.query(Student).filter(Student.age == age).order_by(Student.id).all()

    def filter_by_age_range(self, min_age: Optional[int], max_age: Optional[int]) -> List[Student]:
        """Students with min_age <= age <= max_age. Both bounds are required."""
        if min_age is None or max_age is None:
            raise BadRequestError("Both min and max age must be supplied")
        return (
            self.db.query(Student)
            .filter(Student.age.between(min_age, max_age))
            .order_by(Student.id)
            .all()
        )

    def filter_by_name_exact(self, name: str) -> Optional[Student]:
        """Case-insensitive exact match. The lowest id wins when names repeat."""
        return (
            self.db.query(Student)
            .filter(func.lower(Student.name) == name.lower())
            .order_by(Student.id)
            .first()
        )

    def filter_by_name_contains(self, part: str) -> List[Student]:
        return (
            self.db.query(Student)
            .filter(func.lower(Student.name).contains(part.lower(), autoescape=True))
            .order_by(Student.id)
            .all()
        )

    def filter(self, age: Optional[int] = None, name: Optional[str] = None,
               part: Optional[str] = None) -> List[Student]:
        """
        Apply exactly one filter: age, then exact name, then substring,
        falling back to every student. Filters are never combined.
        """
        if age is not None and age > 0:
            return self.filter_by_age(age)

        if name is not None and name.strip():
            student = self.filter_by_name_exact(name)
            return [student] if student is not None else []

        if part is not None and part.strip():
            return self.filter_by_name_contains(part)

        return self.list_all()

    def create(self, data: StudentCreate) -> Student:
        logger.info("Was invoked method for create student")
        self._check_faculty(data.faculty_id)

        # Client-supplied id is ignored, the store assigns one
        student = Student(**data.model_dump(exclude={"id"}))
        self.db.add(student)
        self.db.commit()
        self.db.refresh(student)
        return student

    def update(self, data: StudentUpdate) -> Student:
        logger.debug(f"Editing student with ID {data.id}")
        student = self.db.get(Student, data.id)
        if student is None:
            logger.error(f"Cannot edit student - no student with ID {data.id}")
            raise NotFoundError("Student", data.id)
        self._check_faculty(data.faculty_id)

        logger.info("Was invoked method to update student")
        for field, value in data.model_dump(exclude={"id"}).items():
            setattr(student, field, value)

        self.db.commit()
        self.db.refresh(student)
        return student

    def delete(self, student_id: int) -> Student:
        """Remove a student and return the removed record"""
        logger.info(f"Was invoked method to delete student with ID {student_id}")
        student = self.db.get(Student, student_id)
        if student is None:
            logger.error(f"Cannot delete student - no student with ID {student_id}")
            raise NotFoundError("Student", student_id)

        self.db.delete(student)
        self.db.commit()
        return student

    def faculty_of(self, student_id: int) -> Faculty:
        student = self.get_by_id(student_id)
        if student.faculty_id is None:
            raise NotFoundError("Faculty of student", student_id)

        faculty = self.db.get(Faculty, student.faculty_id)
        if faculty is None:
            # Faculty was deleted after the student was assigned to it
            logger.error(f"Student {student_id} references missing faculty {student.faculty_id}")
            raise NotFoundError("Faculty", student.faculty_id)
        return faculty

    def _check_faculty(self, faculty_id: Optional[int]) -> None:
        if faculty_id is not None and self.db.get(Faculty, faculty_id) is None:
            logger.error(f"Student cannot reference missing faculty {faculty_id}")
            raise NotFoundError("Faculty", faculty_id)

# school/services/statistics_service.py
from typing import List
from sqlalchemy import func
from sqlalchemy.orm import Session
from ..database.models.student import Student


class StatisticsService:
    """Read-only aggregates over all students, recomputed on every call"""

    def __init__(self, db: Session):
        self.db = db

    def total_count(self) -> int:
        """Every student, with or without a faculty"""
        return self.db.query(func.count(Student.id)).scalar()

    def count_by_faculty(self, faculty_id: int) -> int:
        return self.db.query(func.count(Student.id)).filter(
            Student.faculty_id == faculty_id
        ).scalar()

    def average_age(self) -> float:
        """Mean age of all students, 0.0 when there are none"""
        avg = self.db.query(func.avg(Student.age)).scalar()
        return float(avg) if avg is not None else 0.0

    def latest(self, n: int = 5) -> List[Student]:
        """The n most recently created students, newest first"""
        return self.db.query(Student).order_by(Student.id.desc()).limit(n).all()

    def names_starting_with_a(self) -> List[str]:
        names = self.db.query(Student.name).filter(
            Student.name.like("A%") | Student.name.like("a%")
        ).all()
        return sorted(name.upper() for (name,) in names)

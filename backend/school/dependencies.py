# school/dependencies.py
from pathlib import Path
from fastapi import Depends
from sqlalchemy.orm import Session
from .config import settings
from .database.session import get_db
from .services.student_service import StudentService
from .services.faculty_service import FacultyService
from .services.avatar_service import AvatarService
from .services.statistics_service import StatisticsService


def get_avatars_dir() -> Path:
    return settings.AVATARS_DIR


def get_student_service(db: Session = Depends(get_db)) -> StudentService:
    return StudentService(db)


def get_faculty_service(db: Session = Depends(get_db)) -> FacultyService:
    return FacultyService(db)


def get_avatar_service(
    db: Session = Depends(get_db),
    avatars_dir: Path = Depends(get_avatars_dir),
) -> AvatarService:
    return AvatarService(db, avatars_dir)


def get_statistics_service(db: Session = Depends(get_db)) -> StatisticsService:
    return StatisticsService(db)

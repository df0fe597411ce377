# school/database/models/avatar.py
from sqlalchemy import Column, Integer, String, ForeignKey, LargeBinary, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime
from ..base import Base

class Avatar(Base):
    __tablename__ = "avatars"

    id = Column(Integer, primary_key=True, index=True)
    # One avatar per student is kept by upsert, not by a unique constraint
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)

    file_path = Column(String, nullable=False)
    file_size = Column(Integer, nullable=False)
    media_type = Column(String, nullable=True)
    preview = Column(LargeBinary, nullable=False)  # full payload at upload time

    uploaded_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    student = relationship("Student", back_populates="avatars")

    def __repr__(self) -> str:
        return f"<Avatar {self.id} student={self.student_id} {self.file_path}>"

# school/database/models/student.py
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from ..base import Base

class Student(Base):
    __tablename__ = "students"
    # ids are never reused, so descending id is creation order
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    surname = Column(String, nullable=True)
    age = Column(Integer, nullable=False, default=0)
    # No database foreign key: existence is checked on write by StudentService,
    # and deleting a faculty leaves this dangling
    faculty_id = Column(Integer, nullable=True, index=True)

    # Relationships
    avatars = relationship("Avatar", back_populates="student", cascade="all, delete-orphan")

    def __repr__(self) -> str:
        return f"<Student {self.id} {self.name} {self.surname}>"

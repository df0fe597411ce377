# Import all models to ensure they're registered with Base
from .student import Student
from .faculty import Faculty
from .avatar import Avatar

__all__ = ["Student", "Faculty", "Avatar"]

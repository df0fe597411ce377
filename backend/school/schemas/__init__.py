from .student import StudentCreate, StudentUpdate, StudentRead
from .faculty import FacultyCreate, FacultyUpdate, FacultyRead
from .avatar import AvatarInfo

__all__ = [
    "StudentCreate", "StudentUpdate", "StudentRead",
    "FacultyCreate", "FacultyUpdate", "FacultyRead",
    "AvatarInfo",
]

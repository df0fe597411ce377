# school/services/exceptions.py
from typing import Optional


class SchoolError(Exception):
    """Base class for errors raised by the school services"""


class NotFoundError(SchoolError):
    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with id {entity_id} not found")


class BadRequestError(SchoolError):
    pass


class PayloadTooLargeError(SchoolError):
    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"The size of avatar is too large: {size} bytes (limit {limit})")


class AvatarStorageError(SchoolError):
    """Filesystem failure while writing or reading an avatar file"""

    def __init__(self, message: str, cause: Optional[OSError] = None):
        self.cause = cause
        super().__init__(message)

# school/services/avatar_service.py
import logging
from pathlib import Path
from typing import BinaryIO, List, Optional, Tuple
from sqlalchemy.orm import Session
from ..config import settings
from ..database.models.avatar import Avatar
from ..database.models.student import Student
from . import file_services
from .exceptions import NotFoundError, PayloadTooLargeError, AvatarStorageError

logger = logging.getLogger(__name__)


class AvatarService:
    """
    Stores a student's avatar as a file under avatars_dir plus an Avatar
    metadata record pointing at it.

    The file write and the record write are not atomic: a crash between
    them leaves an orphan file or a stale record. Two concurrent uploads
    for the same student race; the loser of the exclusive create gets
    AvatarStorageError and the record is last-writer-wins.
    """

    def __init__(self, db: Session, avatars_dir: Path, max_size: int = settings.MAX_AVATAR_SIZE):
        self.db = db
        self.avatars_dir = Path(avatars_dir)
        self.max_size = max_size

    def check_size(self, student_id: int, size: int) -> None:
        if size >= self.max_size:
            logger.error(f"Avatar for student {student_id} rejected: {size} bytes")
            raise PayloadTooLargeError(size, self.max_size)

    def upload(
        self,
        student_id: int,
        content: bytes,
        filename: str,
        declared_size: Optional[int],
        media_type: Optional[str],
    ) -> Avatar:
        """
        Write the avatar file and upsert its metadata record.

        Size is checked before anything is touched. Any previous file at
        the destination is deleted first so the upload replaces it.
        """
        size = declared_size if declared_size is not None else len(content)
        self.check_size(student_id, size)

        student = self.db.get(Student, student_id)
        if student is None:
            logger.error(f"Cannot upload avatar - no student with ID {student_id}")
            raise NotFoundError("Student", student_id)

        file_path = file_services.avatar_file_path(self.avatars_dir, student_id, filename)
        try:
            file_services.create_directories(file_path.parent)
            file_services.delete_if_exists(file_path)
            file_services.write_exclusive(file_path, content)
        except FileExistsError as e:
            logger.error(f"Concurrent avatar upload for student {student_id} at {file_path}")
            raise AvatarStorageError(f"Avatar file {file_path} was recreated during upload", e) from e
        except OSError as e:
            logger.error(f"Error writing avatar {file_path}: {e}")
            raise AvatarStorageError(f"Could not write avatar file {file_path}", e) from e

        # Check if an avatar already exists for this student
        avatar = self.db.query(Avatar).filter(
            Avatar.student_id == student_id
        ).order_by(Avatar.id).first()

        if not avatar:
            avatar = Avatar(student_id=student_id)
            self.db.add(avatar)

        avatar.student = student
        avatar.file_path = str(file_path)
        avatar.file_size = len(content)
        avatar.media_type = media_type
        avatar.preview = content

        self.db.commit()
        self.db.refresh(avatar)

        logger.info(f"Avatar for student {student_id} saved to {file_path} ({len(content)} bytes)")
        return avatar

    def find_by_student(self, student_id: int) -> Avatar:
        avatar = self.db.query(Avatar).filter(
            Avatar.student_id == student_id
        ).order_by(Avatar.id).first()

        if avatar is None:
            logger.error(f"There is no avatar for student {student_id}")
            raise NotFoundError("Avatar of student", student_id)
        return avatar

    def get_preview(self, student_id: int) -> Tuple[bytes, Optional[str]]:
        """Inline preview bytes and media type, without touching the filesystem"""
        avatar = self.find_by_student(student_id)
        return avatar.preview, avatar.media_type

    def open_file(self, student_id: int) -> Tuple[Avatar, BinaryIO]:
        """
        Open the stored avatar file for streaming. The caller closes the
        returned file.
        """
        avatar = self.find_by_student(student_id)
        try:
            f = file_services.open_read(Path(avatar.file_path))
        except OSError as e:
            logger.error(f"Avatar record for student {student_id} points to unreadable {avatar.file_path}: {e}")
            raise AvatarStorageError(f"Avatar file {avatar.file_path} is missing", e) from e
        return avatar, f

    def list_avatars(self, page: int, size: int) -> List[Avatar]:
        return (
            self.db.query(Avatar)
            .order_by(Avatar.id)
            .offset(page * size)
            .limit(size)
            .all()
        )

"""
Tests for AvatarService: upload, preview, streaming and listing
"""

import os

import pytest

from school.database.models.avatar import Avatar
from school.schemas.student import StudentCreate
from school.services import file_services
from school.services.avatar_service import AvatarService
from school.services.exceptions import AvatarStorageError, NotFoundError, PayloadTooLargeError
from school.services.student_service import StudentService

ONE_MB = 1024 * 1024


@pytest.fixture
def service(db, avatars_dir):
    return AvatarService(db, avatars_dir, max_size=ONE_MB)


@pytest.fixture
def harry(db):
    return StudentService(db).create(StudentCreate(name="Harry", surname="Potter", age=11))


def upload(service, student_id, content=b"\x89PNG owl", filename="owl.png", media_type="image/png", size=None):
    return service.upload(
        student_id=student_id,
        content=content,
        filename=filename,
        declared_size=len(content) if size is None else size,
        media_type=media_type,
    )


class TestUpload:

    def test_upload_writes_file_and_record(self, service, harry, avatars_dir):
        avatar = upload(service, harry.id)

        expected_path = avatars_dir / f"{harry.id}.png"
        assert avatar.file_path == str(expected_path)
        assert expected_path.read_bytes() == b"\x89PNG owl"
        assert avatar.file_size == len(b"\x89PNG owl")
        assert avatar.media_type == "image/png"
        assert avatar.preview == b"\x89PNG owl"

    def test_exactly_one_megabyte_is_rejected(self, db, service, harry, avatars_dir):
        with pytest.raises(PayloadTooLargeError):
            upload(service, harry.id, content=b"x", size=ONE_MB)

        # nothing touched
        assert not avatars_dir.exists()
        assert db.query(Avatar).count() == 0

    def test_just_under_one_megabyte_is_accepted(self, service, harry):
        content = b"x" * (ONE_MB - 1)

        avatar = upload(service, harry.id, content=content)

        assert avatar.file_size == ONE_MB - 1

    def test_size_falls_back_to_content_length(self, service, harry):
        with pytest.raises(PayloadTooLargeError):
            service.upload(harry.id, b"x" * ONE_MB, "big.png", None, "image/png")

    def test_size_checked_before_student_lookup(self, service):
        with pytest.raises(PayloadTooLargeError):
            upload(service, 404, content=b"x", size=ONE_MB + 1)

    def test_unknown_student(self, service, avatars_dir):
        with pytest.raises(NotFoundError):
            upload(service, 404)
        assert not avatars_dir.exists()

    def test_second_upload_replaces_first(self, db, service, harry, avatars_dir):
        upload(service, harry.id, content=b"first")
        upload(service, harry.id, content=b"second", media_type="image/x-png")

        avatars = db.query(Avatar).filter(Avatar.student_id == harry.id).all()
        assert len(avatars) == 1
        assert avatars[0].preview == b"second"
        assert avatars[0].media_type == "image/x-png"
        assert (avatars_dir / f"{harry.id}.png").read_bytes() == b"second"

    def test_filename_without_extension(self, service, harry, avatars_dir):
        avatar = upload(service, harry.id, filename="avatar")

        assert avatar.file_path == str(avatars_dir / str(harry.id))

    def test_extension_after_last_dot(self, service, harry, avatars_dir):
        avatar = upload(service, harry.id, filename="my.photo.jpeg")

        assert avatar.file_path == str(avatars_dir / f"{harry.id}.jpeg")

    @pytest.mark.parametrize("filename", ["x./escaped", "x.\\escaped", "../../etc.d/passwd"])
    def test_extension_with_path_separator_is_dropped(self, service, harry, avatars_dir, filename):
        avatar = upload(service, harry.id, filename=filename)

        assert avatar.file_path == str(avatars_dir / str(harry.id))
        assert (avatars_dir / str(harry.id)).is_file()

    def test_recreated_file_surfaces_storage_error(self, monkeypatch, db, service, harry, avatars_dir):
        upload(service, harry.id, content=b"first")
        # another writer recreates the file between delete and write
        monkeypatch.setattr(file_services, "delete_if_exists", lambda path: False)

        with pytest.raises(AvatarStorageError):
            upload(service, harry.id, content=b"second")

        assert (avatars_dir / f"{harry.id}.png").read_bytes() == b"first"
        assert db.query(Avatar).one().preview == b"first"


class TestRead:

    def test_preview(self, service, harry):
        upload(service, harry.id, content=b"preview bytes", media_type="image/gif")

        assert service.get_preview(harry.id) == (b"preview bytes", "image/gif")

    def test_preview_without_avatar(self, service, harry):
        with pytest.raises(NotFoundError):
            service.get_preview(harry.id)

    def test_open_file(self, service, harry):
        upload(service, harry.id, content=b"streamed")

        avatar, f = service.open_file(harry.id)

        assert b"".join(file_services.iter_chunks(f)) == b"streamed"
        assert f.closed
        assert avatar.file_size == len(b"streamed")

    def test_open_file_missing_on_disk(self, service, harry):
        avatar = upload(service, harry.id)
        os.remove(avatar.file_path)

        with pytest.raises(AvatarStorageError):
            service.open_file(harry.id)

    def test_open_file_without_avatar(self, service, harry):
        with pytest.raises(NotFoundError):
            service.open_file(harry.id)


def test_list_avatars_pages(db, service):
    students = StudentService(db)
    for name in ("Harry", "Ron", "Hermione"):
        student = students.create(StudentCreate(name=name, age=11))
        upload(service, student.id)

    assert [a.student_id for a in service.list_avatars(0, 2)] == [1, 2]
    assert [a.student_id for a in service.list_avatars(1, 2)] == [3]
    assert service.list_avatars(2, 2) == []


def test_student_delete_removes_avatar_record(db, service, harry):
    upload(service, harry.id)

    StudentService(db).delete(harry.id)

    assert db.query(Avatar).count() == 0

import os
from pathlib import Path
from typing import BinaryIO, Iterator

CHUNK_SIZE = 4096


def avatar_file_path(avatars_dir: Path, student_id: int, original_filename: str) -> Path:
    # "<student_id>.<ext>", or just "<student_id>" when the upload has no extension
    ext = get_extension(original_filename)
    file_name = f"{student_id}.{ext}" if ext else str(student_id)
    return Path(avatars_dir) / file_name


def get_extension(filename: str) -> str:
    """Substring after the last dot, empty when there is none"""
    if not filename or "." not in filename:
        return ""
    ext = filename.rsplit(".", 1)[1]
    # "x./escaped" must not turn into a subdirectory
    if "/" in ext or "\\" in ext:
        return ""
    return ext


def create_directories(dir_path: Path) -> None:
    os.makedirs(dir_path, exist_ok=True)


def delete_if_exists(file_path: Path) -> bool:
    try:
        os.remove(file_path)
        return True
    except FileNotFoundError:
        return False


def write_exclusive(file_path: Path, content: bytes) -> int:
    # "xb" raises FileExistsError if another writer recreated the file
    with open(file_path, "xb") as f:
        return f.write(content)


def open_read(file_path: Path) -> BinaryIO:
    return open(file_path, "rb")


def iter_chunks(f: BinaryIO) -> Iterator[bytes]:
    """Read an open file in chunks and close it when exhausted"""
    with f:
        for chunk in iter(lambda: f.read(CHUNK_SIZE), b""):
            yield chunk

from typing import List, Optional
from fastapi import APIRouter, Depends, File, UploadFile, Response
from fastapi.responses import StreamingResponse
from ..dependencies import get_student_service, get_avatar_service
from ..schemas.student import StudentCreate, StudentUpdate, StudentRead
from ..schemas.faculty import FacultyRead
from ..services.student_service import StudentService
from ..services.avatar_service import AvatarService
from ..services import file_services

router = APIRouter(prefix="/student", tags=["students"])

# Fixed paths are declared before "/{student_id}"


@router.get("", response_model=List[StudentRead])
def get_all_students(service: StudentService = Depends(get_student_service)):
    return service.list_all()


@router.get("/filterByAge", response_model=List[StudentRead])
def find_students_by_age_range(
    min: Optional[int] = None,
    max: Optional[int] = None,
    service: StudentService = Depends(get_student_service),
):
    return service.filter_by_age_range(min, max)


@router.get("/filter", response_model=List[StudentRead])
def find_students(
    age: Optional[int] = None,
    name: Optional[str] = None,
    part: Optional[str] = None,
    service: StudentService = Depends(get_student_service),
):
    return service.filter(age=age, name=name, part=part)


@router.post("", response_model=StudentRead, status_code=201)
def create_student(student: StudentCreate, service: StudentService = Depends(get_student_service)):
    return service.create(student)


@router.put("", response_model=StudentRead)
def edit_student(student: StudentUpdate, service: StudentService = Depends(get_student_service)):
    return service.update(student)


@router.get("/{student_id}", response_model=StudentRead)
def get_student_info(student_id: int, service: StudentService = Depends(get_student_service)):
    return service.get_by_id(student_id)


@router.delete("/{student_id}", response_model=StudentRead)
def delete_student(student_id: int, service: StudentService = Depends(get_student_service)):
    return service.delete(student_id)


@router.get("/{student_id}/faculty", response_model=FacultyRead)
def get_faculty_of_student(student_id: int, service: StudentService = Depends(get_student_service)):
    return service.faculty_of(student_id)


@router.post("/{student_id}/avatar")
def upload_avatar(
    student_id: int,
    avatar: UploadFile = File(...),
    service: AvatarService = Depends(get_avatar_service),
):
    """
    Upload a student's avatar (multipart field "avatar").
    Files of 1MB or more are rejected before the body is read.
    """
    if avatar.size is not None:
        service.check_size(student_id, avatar.size)
    content = avatar.file.read()
    saved = service.upload(
        student_id=student_id,
        content=content,
        filename=avatar.filename,
        declared_size=avatar.size,
        media_type=avatar.content_type,
    )
    return {"student_id": student_id, "file_size": saved.file_size, "media_type": saved.media_type}


@router.get("/{student_id}/avatar/preview")
def download_avatar_preview(student_id: int, service: AvatarService = Depends(get_avatar_service)):
    preview, media_type = service.get_preview(student_id)
    return Response(content=preview, media_type=media_type)


@router.get("/{student_id}/avatar")
def download_avatar(student_id: int, service: AvatarService = Depends(get_avatar_service)):
    avatar, f = service.open_file(student_id)
    return StreamingResponse(
        file_services.iter_chunks(f),
        media_type=avatar.media_type,
        headers={"Content-Length": str(avatar.file_size)},
    )

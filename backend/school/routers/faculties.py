from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException
from ..dependencies import get_faculty_service
from ..schemas.faculty import FacultyCreate, FacultyUpdate, FacultyRead
from ..schemas.student import StudentRead
from ..services.faculty_service import FacultyService

router = APIRouter(prefix="/faculty", tags=["faculties"])


@router.get("", response_model=List[FacultyRead])
def get_all_faculties(service: FacultyService = Depends(get_faculty_service)):
    return service.list_all()


@router.get("/filter", response_model=List[FacultyRead])
def find_faculties(
    colour: Optional[str] = None,
    name: Optional[str] = None,
    service: FacultyService = Depends(get_faculty_service),
):
    return service.filter(colour=colour, name=name)


@router.get("/longest-name")
def get_longest_faculty_name(service: FacultyService = Depends(get_faculty_service)):
    name = service.longest_name()
    if name is None:
        raise HTTPException(status_code=404, detail="No faculties found")
    return {"name": name}


@router.post("", response_model=FacultyRead, status_code=201)
def create_faculty(faculty: FacultyCreate, service: FacultyService = Depends(get_faculty_service)):
    return service.create(faculty)


@router.put("", response_model=FacultyRead)
def edit_faculty(faculty: FacultyUpdate, service: FacultyService = Depends(get_faculty_service)):
    return service.update(faculty)


@router.get("/{faculty_id}", response_model=FacultyRead)
def get_faculty_info(faculty_id: int, service: FacultyService = Depends(get_faculty_service)):
    return service.get_by_id(faculty_id)


@router.delete("/{faculty_id}", response_model=FacultyRead)
def delete_faculty(faculty_id: int, service: FacultyService = Depends(get_faculty_service)):
    return service.delete(faculty_id)


@router.get("/{faculty_id}/students", response_model=List[StudentRead])
def get_students_of_faculty(faculty_id: int, service: FacultyService = Depends(get_faculty_service)):
    return service.students_of_faculty(faculty_id)

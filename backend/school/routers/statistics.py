from typing import List
from fastapi import APIRouter, Depends, Query
from ..dependencies import get_statistics_service
from ..schemas.student import StudentRead
from ..services.statistics_service import StatisticsService

router = APIRouter(prefix="/stats", tags=["statistics"])


@router.get("/count")
def get_total_students(service: StatisticsService = Depends(get_statistics_service)):
    return {"count": service.total_count()}


@router.get("/count/faculty/{faculty_id}")
def get_student_count_by_faculty(faculty_id: int, service: StatisticsService = Depends(get_statistics_service)):
    return {"faculty_id": faculty_id, "count": service.count_by_faculty(faculty_id)}


@router.get("/average-age")
def get_average_student_age(service: StatisticsService = Depends(get_statistics_service)):
    return {"average_age": service.average_age()}


@router.get("/latest", response_model=List[StudentRead])
def get_latest_students(
    n: int = Query(5, ge=1),
    service: StatisticsService = Depends(get_statistics_service),
):
    return service.latest(n)


@router.get("/names-starting-with-a", response_model=List[str])
def get_names_starting_with_a(service: StatisticsService = Depends(get_statistics_service)):
    return service.names_starting_with_a()

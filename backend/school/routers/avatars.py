from typing import List
from fastapi import APIRouter, Depends, Query
from ..dependencies import get_avatar_service
from ..schemas.avatar import AvatarInfo
from ..services.avatar_service import AvatarService

router = APIRouter(prefix="/avatar", tags=["avatars"])


@router.get("", response_model=List[AvatarInfo])
def list_avatars(
    page: int = Query(0, ge=0),
    size: int = Query(10, ge=1, le=100),
    service: AvatarService = Depends(get_avatar_service),
):
    return service.list_avatars(page, size)

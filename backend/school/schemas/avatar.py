from datetime import datetime
from pydantic import BaseModel


class AvatarInfo(BaseModel):
    """Avatar metadata without the preview bytes"""
    id: int
    student_id: int
    file_path: str
    file_size: int
    media_type: str | None = None
    uploaded_at: datetime

    model_config = {
        "from_attributes": True
    }

# school/main.py
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from .database.base import Base
from .database.session import engine
from .config import settings

# Import all models to ensure they're registered with Base
from .database.models import Student, Faculty, Avatar  # noqa: F401

from .routers import students, faculties, avatars, statistics
from .services.exceptions import (
    NotFoundError,
    BadRequestError,
    PayloadTooLargeError,
    AvatarStorageError,
)

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create all database tables
    Base.metadata.create_all(bind=engine)
    logger.info(f"Database ready at {settings.DATABASE_URL}, avatars in {settings.AVATARS_DIR}")
    yield
    engine.dispose()


app = FastAPI(
    title="Hogwarts School",
    description="Students, faculties and student avatars",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(students.router)
app.include_router(faculties.router)
app.include_router(avatars.router)
app.include_router(statistics.router)


# Domain errors -> HTTP status
@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(BadRequestError)
async def bad_request_handler(request: Request, exc: BadRequestError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(PayloadTooLargeError)
async def payload_too_large_handler(request: Request, exc: PayloadTooLargeError):
    return JSONResponse(status_code=413, content={"detail": str(exc)})


@app.exception_handler(AvatarStorageError)
async def avatar_storage_handler(request: Request, exc: AvatarStorageError):
    logger.error(f"Avatar storage failure on {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"detail": str(exc)})


@app.get("/port")
def get_port():
    return f"Application running on port: {settings.SERVER_PORT}"


@app.get("/")
def root():
    return {
        "status": "ok",
        "service": "Hogwarts School API",
        "version": "1.0.0"
    }


@app.get("/health")
def health_check():
    return {
        "status": "healthy",
        "avatars_dir": str(settings.AVATARS_DIR),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("school.main:app", host="0.0.0.0", port=settings.SERVER_PORT)

#   cd backend
#   python -m uvicorn school.main:app --reload

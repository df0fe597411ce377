import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from school.database.base import Base
from school.database.session import get_db
from school.dependencies import get_avatars_dir
from school.main import app


@pytest.fixture
def db():
    """Fresh in-memory database per test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def avatars_dir(tmp_path):
    return tmp_path / "avatars"


@pytest.fixture
def client(db, avatars_dir):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_avatars_dir] = lambda: avatars_dir
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()

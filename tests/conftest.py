import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

# Keep the application engine off the on-disk database
os.environ["DATABASE_URL"] = "sqlite://"

import teamboard.models as models
from teamboard.database import Base, get_db
from teamboard.services import projects, users, workspaces

TEST_DATABASE_URL = "sqlite://"
engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(autouse=True)
def db_session() -> Session:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_session: Session):
    from teamboard.main import app

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def register_user(session: Session, email: str, name: str = "Test User", password: str = "secret123") -> models.User:
    return users.create_user(session, email=email, password=password, name=name)


def create_workspace(session: Session, owner: models.User, name: str = "Engineering") -> models.Workspace:
    return workspaces.create_workspace(session, name, "", owner)


def create_project(session: Session, workspace: models.Workspace, creator: models.User, name: str = "Backend"):
    return projects.create_project(session, name, "", workspace.id, creator)


@pytest.fixture
def owner(db_session: Session) -> models.User:
    return register_user(db_session, "alice@example.com", name="Alice Smith")


@pytest.fixture
def outsider(db_session: Session) -> models.User:
    return register_user(db_session, "bob@example.com", name="Bob Jones")


@pytest.fixture
def workspace(db_session: Session, owner: models.User) -> models.Workspace:
    return create_workspace(db_session, owner)


@pytest.fixture
def project(db_session: Session, workspace: models.Workspace, owner: models.User) -> models.Project:
    return create_project(db_session, workspace, owner)

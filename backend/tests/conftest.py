import os

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite://")

import pytest
from fastapi.testclient import TestClient #gives you a fake http client that can call your FastAPI routes without running a real server.
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from slotwise.api.deps import get_db
from slotwise.db.base import Base
from slotwise.engine import (
    AssignmentRecord,
    Roster,
    ScheduleMap,
    ScheduleWorkspace,
    Section,
    UnavailabilityConstraintSet,
    default_structure,
)
from slotwise.main import app

VII_A = Section("VII", "A")
VII_B = Section("VII", "B")
VIII_A = Section("VIII", "A")


@pytest.fixture()
def db_session_factory():
    engine = create_engine(
        "sqlite+pysqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture() #test client
def client(db_session_factory):
    def override_get_db():
        db = db_session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture()
def structure():
    return default_structure(["VII A", "VII B", "VIII A"])


@pytest.fixture()
def roster():
    return Roster(
        [
            AssignmentRecord("M1", "Teacher X", "Math", {VII_A: 2, VII_B: 3}),
            AssignmentRecord("S1", "Teacher X", "Science", {VII_A: 2}),
            AssignmentRecord("E1", "Teacher Y", "English", {VII_A: 4, VII_B: 4, VIII_A: 4}),
            AssignmentRecord("A1", "Teacher Z", "Art", {VIII_A: 2}),
        ]
    )


@pytest.fixture()
def workspace(structure, roster):
    return ScheduleWorkspace(structure, roster, ScheduleMap(), UnavailabilityConstraintSet())

import pytest
import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set env before importing app components
os.environ["APP_ENV"] = "testing"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from jobboard.database import Base, get_db
from jobboard.main import app
from jobboard.models import Company, Job
from jobboard.core.security import create_access_token
from fastapi.testclient import TestClient

# SQLite in-memory database configuration
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture(scope="function")
def engine():
    """A fresh in-memory database per test, with the schema created."""
    engine = create_engine(
        SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()

@pytest.fixture(scope="function")
def db_session(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()

@pytest.fixture(scope="function")
def companies(db_session):
    """Companies c1..c3; only c1 has jobs."""
    rows = [
        Company(handle=f"c{i}", name=f"C{i}", num_employees=i,
                description=f"Desc{i}", logo_url=f"http://c{i}.img")
        for i in (1, 2, 3)
    ]
    db_session.add_all(rows)
    db_session.commit()
    return rows

@pytest.fixture(scope="function")
def job_ids(db_session, companies):
    """Seed J1 (1, "0.1"), J2 (2, "0.2"), J3 (3, no equity); returns their ids in title order."""
    jobs = [
        Job(title="J1", salary=1, equity="0.1", company_handle="c1"),
        Job(title="J2", salary=2, equity="0.2", company_handle="c1"),
        Job(title="J3", salary=3, equity=None, company_handle="c1"),
    ]
    db_session.add_all(jobs)
    db_session.commit()
    return [job.id for job in jobs]

@pytest.fixture(scope="function")
def admin_token():
    return create_access_token(data={"sub": "admin", "is_admin": True})

@pytest.fixture(scope="function")
def user_token():
    return create_access_token(data={"sub": "u1", "is_admin": False})

@pytest.fixture(scope="function")
def admin_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}

@pytest.fixture(scope="function")
def user_headers(user_token):
    return {"Authorization": f"Bearer {user_token}"}

@pytest.fixture(scope="function")
def client(db_session):
    """Get a TestClient that uses the test database session via dependency override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()

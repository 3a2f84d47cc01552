import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from hr_portal.main import app
from hr_portal.db.base import Base
from hr_portal.db.seed import seed_demo_data
from hr_portal.db.session import build_engine, get_db


@pytest.fixture()
def db_session():
    """
    Fresh in-memory database per test, pre-loaded with the demo roster:
      1 ivan   employee frontend
      2 daler  manager  frontend
      3 alex   employee backend
      4 denis  manager  backend
    """
    engine = build_engine("sqlite+pysqlite:///:memory:")
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(
        bind=engine, autocommit=False, autoflush=False, expire_on_commit=False
    )

    session = TestingSessionLocal()
    seed_demo_data(session)
    session.commit()

    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture(autouse=True)
def override_get_db(db_session):
    # Same commit/rollback contract as hr_portal.db.session.get_db
    def _get_db_override():
        try:
            yield db_session
            db_session.commit()
        except Exception:
            db_session.rollback()
            raise

    app.dependency_overrides[get_db] = _get_db_override
    yield
    app.dependency_overrides.clear()


@pytest.fixture()
def client():
    return TestClient(app)

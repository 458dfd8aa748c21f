import os
import tempfile

# Settings are read at import time, so the environment must be ready first
TEST_SECRET = "test-secret-key-with-enough-length-for-hs256"
os.environ["SECRET_KEY"] = TEST_SECRET
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["UPLOAD_BACKEND"] = "local"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="jobportal-uploads-")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from jobportal.api.deps import get_uploader
from jobportal.core.exceptions import UploadFailure
from jobportal.core.security import PasswordHasher, SessionTokenCodec
from jobportal.db.base import Base
from jobportal.db.session import build_engine, get_db
from jobportal.main import app
from jobportal.repositories.accounts import SqlAlchemyAccountRepository


class FakeUploader:
    """Records uploads and hands out predictable URLs."""

    def __init__(self):
        self.uploads = []
        self.error = None

    def upload(self, data, *, filename=None, content_type=None):
        if self.error is not None:
            raise self.error
        self.uploads.append({"data": data, "filename": filename, "content_type": content_type})
        return f"https://blobs.test/{len(self.uploads)}/{filename or 'blob'}"


@pytest.fixture
def session_factory():
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    engine.dispose()


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    yield db
    db.close()


@pytest.fixture
def repo(db_session):
    return SqlAlchemyAccountRepository(db_session)


@pytest.fixture(scope="session")
def hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture
def codec():
    return SessionTokenCodec(TEST_SECRET)


@pytest.fixture
def uploader():
    return FakeUploader()


@pytest.fixture
def client(session_factory, uploader):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_uploader] = lambda: uploader
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def failing_uploader(uploader):
    uploader.error = UploadFailure()
    return uploader

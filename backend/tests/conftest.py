import sys
from pathlib import Path

import pytest

# Ensure the backend package root is on sys.path for direct pytest runs
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from db import init_db, make_engine, make_session_factory  # noqa: E402
from repositories import AuthorsRepository, BooksRepository  # noqa: E402
from services.book_service import BookService  # noqa: E402
from settings import Settings  # noqa: E402


@pytest.fixture
def test_settings(tmp_path, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'test.db'}")
    monkeypatch.setenv("FILE_UPLOAD_DIRECTORY", str(tmp_path / "uploads"))
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    return Settings()


@pytest.fixture
def session_factory(test_settings):
    engine = make_engine(test_settings.DATABASE_URL)
    init_db(engine)
    yield make_session_factory(engine)
    engine.dispose()


@pytest.fixture
def book_service(session_factory):
    return BookService(session_factory, BooksRepository(), AuthorsRepository())


@pytest.fixture
def client(test_settings):
    from fastapi.testclient import TestClient

    from api.main import create_app

    app = create_app(test_settings)
    with TestClient(app) as test_client:
        yield test_client

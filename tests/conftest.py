"""
Shared fixtures.

Settings are read from the environment when ``blog_api`` is first
imported, so the test credentials and upload directory are set here
before any application module is loaded.
"""
import dataclasses
import io
import os
import tempfile

os.environ["SECRET_KEY"] = "test-secret"
os.environ["ADMIN_USERNAME"] = "admin"
os.environ["ADMIN_PASSWORD"] = "test-password"
os.environ.pop("ADMIN_PASSWORD_HASH", None)
os.environ.pop("ADMIN_TOKEN", None)
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="blog-api-uploads-")

import pytest
from fastapi.testclient import TestClient

from blog_api.app.core.config import settings
from blog_api.app.core.store import init_store
from blog_api.app.main import create_app
from blog_api.app.services.upload_service import UploadService

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "test-password"
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


class FakeUpload:
    """Minimal stand-in for Starlette's UploadFile."""

    def __init__(self, filename, content, content_type="image/png"):
        self.filename = filename
        self.content_type = content_type
        self.file = io.BytesIO(content)


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def app_settings(upload_dir):
    return dataclasses.replace(settings, upload_dir=str(upload_dir))


@pytest.fixture
def app(app_settings):
    return create_app(app_settings)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def admin_headers(client):
    response = client.post("/api/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def store():
    return init_store()


@pytest.fixture
def uploads(upload_dir):
    return UploadService(upload_dir)

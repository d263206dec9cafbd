"""Shared fixtures for the Employee Register test suite.

The API runs in-process through FastAPI's TestClient against a temporary
SQLite file and image directory.  Paths are redirected before ``api.main``
is imported, because the static image mount is created at import time.
"""

import io
import sys
import tempfile
from pathlib import Path

import httpx
import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import api.database as _db_module  # noqa: E402
import api.images as _images_module  # noqa: E402

_TMP_DIR = Path(tempfile.mkdtemp(prefix="employee_register_"))
_db_module._DB_PATH = _TMP_DIR / "employees.db"
_images_module._IMAGES_PATH = _TMP_DIR / "images"
_db_module.init_db(_db_module._DB_PATH)

from fastapi.testclient import TestClient  # noqa: E402 (must follow path setup)

from api.main import app  # noqa: E402
from client.api_client import EmployeeAPI  # noqa: E402

BASE_URL = "http://testserver/api/employee/"
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


@pytest.fixture(scope="session")
def client():
    return TestClient(app)


@pytest.fixture
def fresh_db():
    """Empty the employees table so list assertions can be exact."""
    with _db_module.get_db() as con:
        con.execute("DELETE FROM employees")
    yield


@pytest.fixture
def images_path() -> Path:
    return _images_module.images_dir()


@pytest.fixture
def employee_api(client):
    """EmployeeAPI wired straight into the app (TestClient is an httpx.Client)."""
    return EmployeeAPI(BASE_URL, http=client)


@pytest.fixture
def broken_api():
    """EmployeeAPI whose every request fails at the network layer."""
    calls = []

    def handler(request: httpx.Request):
        calls.append(request)
        raise httpx.ConnectError("connection refused", request=request)

    api = EmployeeAPI(BASE_URL, http=httpx.Client(transport=httpx.MockTransport(handler)))
    api.calls = calls
    return api


@pytest.fixture
def png_upload():
    """File-like image shaped like Streamlit's UploadedFile (name + type + read)."""
    upload = io.BytesIO(PNG_BYTES)
    upload.name = "alice.png"
    upload.type = "image/png"
    return upload

import os
import tempfile

_TMP = tempfile.mkdtemp(prefix="shelf-api-tests-")

os.environ["ENV"] = "development"
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP, 'test.db')}"
os.environ["TASKS_FILE"] = os.path.join(_TMP, "tasks.json")
os.environ["FILE_BASE_PATH"] = _TMP
os.environ["LOG_DIR"] = ""
os.environ["PASSWORD_HASH_ITERATIONS"] = "1000"
os.environ["JWT_SECRET_KEY"] = "test-secret"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.api import deps  # noqa: E402
from app.common.rate_limit import limiter  # noqa: E402
from app.common.shaper import Environment  # noqa: E402
from app.infra.config import settings  # noqa: E402
from app.infra.db import Base, engine, init_schema  # noqa: E402
from app.main import create_app  # noqa: E402


@pytest.fixture(autouse=True)
def clean_state():
    Base.metadata.drop_all(bind=engine)
    init_schema()
    if os.path.exists(settings.TASKS_FILE):
        os.remove(settings.TASKS_FILE)
    deps._post_store_singleton.clear()
    limiter.reset()
    yield


def _client(environment):
    app = create_app(environment)

    @app.get("/boom")
    def boom():
        raise RuntimeError("database connection lost")

    return TestClient(app)


@pytest.fixture
def client():
    with _client(Environment.PRODUCTION) as c:
        yield c


@pytest.fixture
def dev_client():
    with _client(Environment.DEVELOPMENT) as c:
        yield c


def _register(client, user_name="alice", email="alice@example.com", password="s3cret-pass"):
    resp = client.post(
        "/api/auth/register",
        json={"user_name": user_name, "email": email, "password": password},
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


def _auth_headers(client, **kwargs):
    token = _register(client, **kwargs)["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def register_user():
    return _register


@pytest.fixture
def auth_headers():
    return _auth_headers

import os

import pytest
from fastapi.testclient import TestClient

# Keep the per-IP limits out of the way of the suite; every request comes from "testclient".
os.environ["RATE_LIMIT_CHART"] = "1000/minute"
os.environ["RATE_LIMIT_HEALTH"] = "1000/minute"

from fourpillars.main import app  # noqa: E402


@pytest.fixture()
def client():
    with TestClient(app) as c:
        yield c

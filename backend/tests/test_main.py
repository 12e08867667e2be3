import logging
import os
import sys
from fastapi import FastAPI
from fastapi.testclient import TestClient

# Ensure the app package is importable
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from pinscore.main import app, unhandled_exception_handler


def test_health_checks():
    client = TestClient(app)
    assert client.get("/healthz").json() == {"status": "ok"}
    assert client.get("/api/healthz").json() == {"status": "ok"}
    assert "Pinscore" in client.get("/api").json()["message"]


def test_app_mounts_bowling_router():
    client = TestClient(app)
    response = client.post("/api/v0/bowling/score", json={"rolls": [10, 5, 4]})
    assert response.status_code == 200
    assert response.json()["total"] == 28


def test_unhandled_exception_logs_traceback(caplog):
    app = FastAPI()
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.get("/boom")
    def boom():
        raise ValueError("boom")

    client = TestClient(app, raise_server_exceptions=False)
    with caplog.at_level(logging.ERROR):
        response = client.get("/boom")

    assert response.status_code == 500
    record = next((r for r in caplog.records if r.message == "Unhandled exception"), None)
    assert record is not None
    assert record.exc_info[0] is ValueError
    assert "ValueError: boom" in caplog.text

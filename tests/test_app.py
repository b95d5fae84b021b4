from __future__ import annotations

import importlib
import threading

import pytest

from campus_attendance.biometric.gate import StaticAuthenticator
from campus_attendance.container import build_container
from campus_attendance.main import create_app


@pytest.fixture
def container(tmp_path, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    settings = importlib.import_module("config.testing")
    monkeypatch.setattr(settings, "EXPORT_DIR", str(tmp_path))
    return build_container(
        settings,
        interface_source=lambda: ["lo", "en0"],
        authenticator=StaticAuthenticator(available=True, approve=True),
    )


@pytest.fixture
def client(container):
    app = create_app(container)
    return app.test_client()


def _register(client):
    return client.post(
        "/students/register",
        json={"name": "Asha Rao", "email": "asha@plaksha.edu.in", "student_id": "U2024001"},
    )


def test_register_and_account(client):
    resp = _register(client)
    assert resp.status_code == 201
    assert resp.get_json()["message"] == "Registration successful!"

    account = client.get("/students/me").get_json()["account"]
    assert account["student_id"] == "U2024001"


def test_register_rejects_bad_email(client):
    resp = client.post("/students/register", json={"name": "A", "email": "a@gmail.com", "student_id": "1"})

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Please use your university email address"


def test_mark_requires_registration(client):
    assert client.post("/attendance/mark").status_code == 400


def test_full_attendance_flow(client, container, tmp_path):
    _register(client)

    first = client.post("/attendance/mark").get_json()
    assert first["reason"] == "awaiting permission"
    assert client.get("/location").get_json()["prompt_pending"] is True

    client.post("/location/authorization", json={"state": "authorizedWhileInUse"})
    second = client.post("/attendance/mark").get_json()
    assert second["reason"] == "awaiting fix"

    client.post("/location/fix", json={"latitude": 15, "longitude": 15})
    assert client.post("/attendance/mark").get_json()["reason"] == "outside campus"

    client.post("/location/fix", json={"locations": [{"latitude": 20, "longitude": 20}, {"latitude": 5, "longitude": 5}]})
    done = client.post("/attendance/mark").get_json()
    assert done["success"] is True
    assert done["message"] == "Attendance marked successfully!"

    history = client.get("/attendance/history").get_json()["records"]
    assert [r["student_id"] for r in history] == ["U2024001"]
    assert (tmp_path / "Student Attendance.csv").read_text(encoding="utf-8").count("U2024001") == 1

    export = client.post("/attendance/export").get_json()
    assert export["file"].startswith("attendance_")
    assert (tmp_path / export["file"]).exists()

    location = client.get("/attendance/file-location").get_json()
    assert location["path"].endswith("Student Attendance.csv")


def test_denied_location_clears_fix(client):
    _register(client)
    client.post("/location/authorization", json={"state": "authorizedAlways"})
    client.post("/location/fix", json={"latitude": 5, "longitude": 5})

    status = client.post("/location/authorization", json={"state": "denied"}).get_json()

    assert status["fix"] is None
    assert status["updating"] is False
    assert client.post("/attendance/mark").get_json()["reason"] == "location denied"


def test_bad_location_payloads(client):
    assert client.post("/location/authorization", json={"state": "maybe"}).status_code == 400
    assert client.post("/location/fix", json={"latitude": "x"}).status_code == 400


def test_vpn_blocks_marking(tmp_path, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    settings = importlib.import_module("config.testing")
    monkeypatch.setattr(settings, "EXPORT_DIR", str(tmp_path))
    container = build_container(settings, interface_source=lambda: ["lo", "utun2"])
    client = create_app(container).test_client()
    _register(client)

    resp = client.post("/attendance/mark").get_json()

    assert resp["reason"] == "VPN active"
    assert resp["message"].startswith("Please disconnect from VPN")


def test_reminder_response_focuses_attendance(client):
    client.post("/tabs/history")

    ignored = client.post("/reminders/response", json={"identifier": "other"}).get_json()
    assert ignored == {"handled": False, "selected_tab": "history"}

    handled = client.post("/reminders/response", json={"identifier": "attendanceReminder"}).get_json()
    assert handled == {"handled": True, "selected_tab": "attendance"}

    nxt = client.get("/reminders/next").get_json()
    assert nxt["window"] == "10:00 AM - 12:00 PM"


@pytest.mark.parametrize(
    "payload",
    [
        {"name": None, "email": "a@x.edu.in", "student_id": None},
        {"name": "Asha", "email": None, "student_id": "1"},
        {"name": 42, "email": "a@x.edu.in", "student_id": ["1"]},
        ["not", "an", "object"],
    ],
)
def test_register_treats_null_and_non_string_fields_as_missing(client, container, payload):
    resp = client.post("/students/register", json=payload)

    assert resp.status_code == 400
    assert container.students_repo.list_all() == ()


def test_location_permission_requested_at_startup(container):
    assert container.location_service.prompt_requests == 1
    assert container.location_service.prompt_pending


class BlockingAuthenticator:
    def __init__(self):
        self.entered = threading.Event()
        self.release = threading.Event()

    def can_evaluate(self):
        return True

    async def evaluate(self, reason):
        self.entered.set()
        self.release.wait(5)
        return True


def test_overlapping_mark_attempt_is_rejected(tmp_path, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    settings = importlib.import_module("config.testing")
    monkeypatch.setattr(settings, "EXPORT_DIR", str(tmp_path))
    auth = BlockingAuthenticator()
    container = build_container(settings, interface_source=lambda: ["lo"], authenticator=auth)
    app = create_app(container)
    first_client, second_client = app.test_client(), app.test_client()
    _register(first_client)
    first_client.post("/location/authorization", json={"state": "authorizedAlways"})
    first_client.post("/location/fix", json={"latitude": 5, "longitude": 5})

    statuses = []
    worker = threading.Thread(target=lambda: statuses.append(first_client.post("/attendance/mark").status_code))
    worker.start()
    assert auth.entered.wait(5)

    busy = second_client.post("/attendance/mark")
    auth.release.set()
    worker.join(5)

    assert busy.status_code == 409
    assert busy.get_json()["message"] == "An attendance attempt is already in progress"
    assert statuses == [200]
    assert len(container.ledger.all_records()) == 1

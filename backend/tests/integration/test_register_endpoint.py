"""Integration tests for ``POST /api/v1/auth/register`` on the memory backend."""

from __future__ import annotations

import io

import pytest
from signup.core.config import TestingConfig
from signup.services._shared.errors import ProviderError

URL = "/api/v1/auth/register"


def _payload(**overrides):
    data = {
        "username": "alice",
        "email": "a@b.com",
        "password": "secret1",
        "dob": "1990-01-01",
        "gender": "Female",
    }
    data.update(overrides)
    return data


def test_register_without_image(client, backends) -> None:
    resp = client.post(URL, data=_payload(), content_type="multipart/form-data")

    assert resp.status_code == 201
    body = resp.get_json()["data"]
    assert body["step"] == "completed"
    assert body["image_uploaded"] is None
    assert body["notifications"] == [{"message": "User data saved.", "level": "info"}]

    user_id = body["user_id"]
    assert backends.identity.user_id_for("a@b.com") == user_id
    assert backends.documents.get("users", user_id) == {
        "username": "alice",
        "email": "a@b.com",
        "dob": "1990-01-01",
        "gender": "Female",
    }
    assert backends.blobs.paths() == []


def test_register_with_image(client, backends) -> None:
    data = _payload(image=(io.BytesIO(b"\xff\xd8jpeg-bytes"), "me.jpg", "image/jpeg"))

    resp = client.post(URL, data=data, content_type="multipart/form-data")

    assert resp.status_code == 201
    body = resp.get_json()["data"]
    assert body["image_uploaded"] is True
    assert [n["message"] for n in body["notifications"]] == ["User data saved.", "Image uploaded."]
    assert backends.blobs.get(f"images/{body['user_id']}.jpg") == b"\xff\xd8jpeg-bytes"


def test_register_accepts_urlencoded_and_json(client) -> None:
    resp = client.post(URL, data=_payload())
    assert resp.status_code == 201

    resp = client.post(URL, json=_payload(email="c@d.com"))
    assert resp.status_code == 201


def test_long_profile_fields_are_stored_as_typed(client, backends) -> None:
    username = "a" * 101
    dob = "born on the first of January nineteen ninety"
    gender = "x" * 40

    resp = client.post(URL, data=_payload(username=username, dob=dob, gender=gender))

    assert resp.status_code == 201
    user_id = resp.get_json()["data"]["user_id"]
    assert backends.documents.get("users", user_id)["username"] == username
    assert backends.documents.get("users", user_id)["dob"] == dob
    assert backends.documents.get("users", user_id)["gender"] == gender


def test_invalid_email_is_unprocessable(client, backends) -> None:
    resp = client.post(URL, data=_payload(email="bad-email"), content_type="multipart/form-data")

    assert resp.status_code == 422
    assert resp.mimetype == "application/problem+json"
    problem = resp.get_json()
    assert problem["detail"] == "Invalid email address"
    assert problem["code"] == "validation_error"
    assert problem["details"]["step"] == "validation_failed"
    assert backends.identity.user_id_for("bad-email") is None


def test_empty_password_is_unprocessable(client) -> None:
    resp = client.post(URL, data=_payload(password=""))

    assert resp.status_code == 422
    assert resp.get_json()["detail"] == "Password cannot be empty"


def test_duplicate_email_conflicts(client) -> None:
    assert client.post(URL, data=_payload(email="dup@b.com")).status_code == 201

    resp = client.post(URL, data=_payload(email="dup@b.com", username="other"))

    assert resp.status_code == 409
    problem = resp.get_json()
    assert problem["detail"].startswith("Email already registered")
    assert problem["code"] == "conflict"


def test_provider_failure_is_bad_gateway(client, backends, monkeypatch) -> None:
    def _down(email):
        raise ProviderError("A network error has occurred.")

    monkeypatch.setattr(backends.identity, "check_email_in_use", _down)

    resp = client.post(URL, data=_payload())

    assert resp.status_code == 502
    problem = resp.get_json()
    assert problem["detail"] == "A network error has occurred."
    assert problem["code"] == "provider_error"
    assert "user_id" not in problem["details"]


def test_profile_failure_reports_created_account(client, backends, monkeypatch) -> None:
    def _fail(collection, document_id, fields):
        raise ProviderError(None)

    monkeypatch.setattr(backends.documents, "write_document", _fail)

    resp = client.post(URL, data=_payload(image=(io.BytesIO(b"img"), "me.jpg")))

    assert resp.status_code == 502
    problem = resp.get_json()
    assert problem["detail"] == "Error saving user data."
    assert problem["details"]["user_id"] == backends.identity.user_id_for("a@b.com")
    assert backends.blobs.paths() == []


def test_non_image_part_is_rejected(client, backends) -> None:
    data = _payload(image=(io.BytesIO(b"%PDF-1.7"), "cv.pdf", "application/pdf"))

    resp = client.post(URL, data=data, content_type="multipart/form-data")

    assert resp.status_code == 415
    assert backends.identity.user_id_for("a@b.com") is None


def test_request_id_is_echoed(client) -> None:
    resp = client.post(URL, data=_payload(), headers={"X-Request-ID": "req-42"})
    assert resp.headers["X-Request-ID"] == "req-42"


def test_health(client) -> None:
    resp = client.get("/api/v1/health")

    assert resp.status_code == 200
    assert resp.get_json()["status"] == "ok"
    assert resp.get_json()["backend"] == "memory"


class DeniedStorageConfig(TestingConfig):
    STORAGE_ACCESS_GRANTED = False


class TestStoragePermissionDenied:
    """Denied storage access drops the image but still registers the user."""

    @pytest.fixture()
    def app_config(self):
        return DeniedStorageConfig

    def test_image_is_ignored(self, client, backends) -> None:
        data = _payload(image=(io.BytesIO(b"img"), "me.jpg", "image/jpeg"))

        resp = client.post(URL, data=data, content_type="multipart/form-data")

        assert resp.status_code == 201
        body = resp.get_json()["data"]
        assert body["image_uploaded"] is None
        assert [n["message"] for n in body["notifications"]] == [
            "Permission denied. Cannot access storage.",
            "User data saved.",
        ]
        assert backends.blobs.paths() == []

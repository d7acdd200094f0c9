"""Unit tests for the JSON response envelope (sv_modular.runtime.responses)."""

from __future__ import annotations

import pytest

from sv_modular.runtime import responses

pytestmark = pytest.mark.unit


class TestSuccess:
    def test_ok_default_message(self):
        assert responses.ok([1, 2]).body() == {
            "success": True, "status": 200, "message": "Success", "data": [1, 2],
        }

    def test_ok_custom_message(self):
        assert responses.ok({}, "Song deleted").message == "Song deleted"

    def test_created(self):
        body = responses.created({"id": "x"}).body()
        assert body["status"] == 201
        assert body["message"] == "Created successfully"


class TestFailures:
    @pytest.mark.parametrize(
        ("builder", "status"),
        [
            (responses.bad_request, 400),
            (responses.not_found, 404),
            (responses.server_error, 500),
            (responses.validation_error, 422),
        ],
    )
    def test_status_and_null_data(self, builder, status: int):
        assert builder("nope").body() == {
            "success": False, "status": status, "message": "nope", "data": None,
        }

    def test_error_included_when_given(self):
        body = responses.bad_request("Invalid JSON body", "Unexpected token").body()
        assert body["error"] == "Unexpected token"
        assert body["data"] is None

    def test_unauthorized_default(self):
        assert responses.unauthorized().body() == {
            "success": False, "status": 401, "message": "Unauthorized",
        }

    def test_forbidden_default(self):
        assert responses.forbidden().body() == {
            "success": False, "status": 403, "message": "Forbidden",
        }

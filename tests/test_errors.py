import sqlite3

from fastapi.exceptions import RequestValidationError
from fastapi.testclient import TestClient

from campus_api.app.core.errors import EntityNotFoundError, _describe_validation_error
from campus_api.app.main import create_app


def test_storage_failure_is_internal_error(repositories, user_headers):
    repositories["Articles"].find_all.side_effect = sqlite3.OperationalError("database is locked")
    client = TestClient(create_app(repositories), raise_server_exceptions=False)

    response = client.get("/api/articles/all", headers=user_headers)

    assert response.status_code == 500
    assert response.json() == {"type": "OperationalError", "message": "database is locked"}


def test_storage_failure_on_delete_is_not_retried(repositories, admin_headers):
    repository = repositories["Articles"]
    repository.find_by_id.return_value = object()
    repository.delete.side_effect = sqlite3.OperationalError("disk I/O error")
    client = TestClient(create_app(repositories), raise_server_exceptions=False)

    response = client.delete("/api/articles", params={"id": 1}, headers=admin_headers)

    assert response.status_code == 500
    repository.delete.assert_called_once_with(1)


def test_entity_not_found_message():
    assert str(EntityNotFoundError("HelpRequest", 7)) == "HelpRequest with id 7 not found"


def test_validation_message_drops_source_and_offset():
    exc = RequestValidationError(
        [
            {"type": "json_invalid", "loc": ("body", 1), "msg": "JSON decode error"},
            {"type": "missing", "loc": ("query", "stars"), "msg": "Field required"},
            {"type": "missing", "loc": ("body", "comments"), "msg": "Field required"},
        ]
    )
    assert _describe_validation_error(exc) == (
        "JSON decode error; stars: Field required; comments: Field required"
    )

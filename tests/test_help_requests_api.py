import pytest

from tests.samples import SAMPLES


def test_help_request_seven_not_found(client, repositories, user_headers):
    response = client.get("/api/helprequest", params={"id": 7}, headers=user_headers)

    assert response.status_code == 404
    assert response.json() == {"type": "EntityNotFoundError", "message": "HelpRequest with id 7 not found"}
    repositories["HelpRequest"].find_by_id.assert_called_once_with(7)


def test_admin_can_post_a_help_request(client, repositories, admin_headers):
    response = client.post("/api/helprequest/post", params=SAMPLES["HelpRequest"]["create"], headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {
        "id": 1,
        "requesterEmail": "cgaucho@ucsb.edu",
        "teamId": "s22-5pm-3",
        "tableOrBreakoutRoom": "7",
        "requestTime": "2022-04-20T17:35:00",
        "explanation": "Need help with Swagger-ui",
        "solved": False,
    }
    repositories["HelpRequest"].save.assert_called_once()


def test_ids_are_assigned_by_the_store(client, admin_headers):
    first = client.post("/api/helprequest/post", params=SAMPLES["HelpRequest"]["create"], headers=admin_headers)
    second = client.post("/api/helprequest/post", params=SAMPLES["HelpRequest"]["create"], headers=admin_headers)
    assert first.json()["id"] != second.json()["id"]


def test_unparsable_request_time_is_bad_request(client, repositories, admin_headers):
    params = {**SAMPLES["HelpRequest"]["create"], "requestTime": "yesterday"}

    response = client.post("/api/helprequest/post", params=params, headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["type"] == "RequestValidationError"
    assert "requestTime" in response.json()["message"]
    repositories["HelpRequest"].save.assert_not_called()


@pytest.mark.parametrize("request_time", ["2022-04-20", "1650475512"])
def test_request_time_without_time_of_day_is_bad_request(client, repositories, admin_headers, request_time):
    params = {**SAMPLES["HelpRequest"]["create"], "requestTime": request_time}

    response = client.post("/api/helprequest/post", params=params, headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["message"].startswith("requestTime:")
    repositories["HelpRequest"].save.assert_not_called()


def test_request_time_with_timezone_is_bad_request(client, admin_headers):
    params = {**SAMPLES["HelpRequest"]["create"], "requestTime": "2022-04-20T17:35:00+02:00"}

    response = client.post("/api/helprequest/post", params=params, headers=admin_headers)

    assert response.status_code == 400


def test_fractional_seconds_round_trip(client, admin_headers, user_headers):
    params = {**SAMPLES["HelpRequest"]["create"], "requestTime": "2022-04-20T17:35:12.123456"}

    created = client.post("/api/helprequest/post", params=params, headers=admin_headers).json()
    fetched = client.get("/api/helprequest", params={"id": created["id"]}, headers=user_headers).json()

    assert fetched["requestTime"] == "2022-04-20T17:35:12.123456"

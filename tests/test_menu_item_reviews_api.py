from datetime import datetime

from campus_api.app.schemas.menu_item_review import MenuItemReview


def _review(item_id, stars, comments, hour=0, review_id=None):
    return MenuItemReview(
        id=review_id,
        item_id=item_id,
        reviewer_email="andrewyu@ucsb.edu",
        stars=stars,
        date_reviewed=datetime(2023, 7, 29, hour, 0, 0),
        comments=comments,
    )


def test_logged_in_user_can_get_all_reviews(client, repositories, user_headers):
    repository = repositories["MenuItemReview"]
    for review in (_review(1, 1, "First"), _review(2, 2, "Second", 6), _review(3, 3, "Third", 12)):
        repository.save(review)
    repository.reset_mock()

    response = client.get("/api/menuitemreview/all", headers=user_headers)

    assert response.status_code == 200
    assert [r["comments"] for r in response.json()] == ["First", "Second", "Third"]
    assert response.json()[1]["dateReviewed"] == "2023-07-29T06:00:00"
    repository.find_all.assert_called_once_with()


def test_admin_can_post_a_review(client, repositories, admin_headers):
    response = client.post(
        "/api/menuitemreview/post",
        params={
            "itemId": 1,
            "reviewerEmail": "admin@ucsb.edu",
            "stars": 5,
            "dateReviewed": "2023-07-29T00:00:00",
            "comments": "Admin",
        },
        headers=admin_headers,
    )

    assert response.status_code == 200
    assert response.json() == {
        "id": 1,
        "itemId": 1,
        "reviewerEmail": "admin@ucsb.edu",
        "stars": 5,
        "dateReviewed": "2023-07-29T00:00:00",
        "comments": "Admin",
    }
    repositories["MenuItemReview"].save.assert_called_once()


def test_stars_outside_one_to_five_are_accepted(client, admin_headers):
    response = client.post(
        "/api/menuitemreview/post",
        params={
            "itemId": 1,
            "reviewerEmail": "admin@ucsb.edu",
            "stars": 9,
            "dateReviewed": "2023-07-29T00:00:00",
            "comments": "Generous",
        },
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["stars"] == 9


def test_update_replaces_first_with_second(client, repositories, admin_headers, user_headers):
    repository = repositories["MenuItemReview"]
    repository.save(_review(1, 1, "First"))
    repository.reset_mock()
    second = {
        "itemId": 2,
        "reviewerEmail": "andrewyu@ucsb.edu",
        "stars": 2,
        "dateReviewed": "2023-07-29T06:00:00",
        "comments": "Second",
    }

    response = client.put("/api/menuitemreview", params={"id": 1}, json=second, headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {"id": 1, **second}
    repository.find_by_id.assert_called_once_with(1)
    repository.save.assert_called_once_with(_review(2, 2, "Second", 6, review_id=1))

    response = client.get("/api/menuitemreview", params={"id": 1}, headers=user_headers)
    assert response.json()["comments"] == "Second"


def test_update_ignores_id_in_body(client, repositories, admin_headers):
    repositories["MenuItemReview"].save(_review(1, 1, "First"))
    body = {
        "id": 99,
        "itemId": 1,
        "reviewerEmail": "andrewyu@ucsb.edu",
        "stars": 4,
        "dateReviewed": "2023-07-29T00:00:00",
        "comments": "Edited",
    }

    response = client.put("/api/menuitemreview", params={"id": 1}, json=body, headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["id"] == 1
    assert repositories["MenuItemReview"].find_by_id(99) is None


def test_update_of_missing_review(client, repositories, admin_headers):
    body = {
        "itemId": 20,
        "reviewerEmail": "andrewyu@ucsb.edu",
        "stars": 1,
        "dateReviewed": "2023-07-29T00:00:00",
        "comments": "First",
    }

    response = client.put("/api/menuitemreview", params={"id": 1}, json=body, headers=admin_headers)

    assert response.status_code == 404
    assert response.json() == {"type": "EntityNotFoundError", "message": "MenuItemReview with id 1 not found"}
    repositories["MenuItemReview"].save.assert_not_called()


def test_update_with_incomplete_body_is_bad_request(client, repositories, admin_headers):
    repositories["MenuItemReview"].save(_review(1, 1, "First"))
    repositories["MenuItemReview"].reset_mock()

    response = client.put("/api/menuitemreview", params={"id": 1}, json={"stars": 3}, headers=admin_headers)

    assert response.status_code == 400
    repositories["MenuItemReview"].save.assert_not_called()


def test_admin_can_delete_a_review(client, repositories, admin_headers):
    repositories["MenuItemReview"].save(_review(1, 1, "First"))

    response = client.delete("/api/menuitemreview", params={"id": 1}, headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {"message": "MenuItemReview with id 1 deleted"}
    repositories["MenuItemReview"].delete.assert_called_once_with(1)

"""Likes, ratings and comments API tests."""

import pytest

UNKNOWN_ID = "0123456789abcdef01234567"


class TestLikes:
    def test_like_then_unlike(self, client, auth_headers, create_recipe):
        """Two consecutive toggles restore the original state."""
        recipe = create_recipe()
        url = f"/api/recipes/{recipe['id']}/like"

        first = client.post(url, headers=auth_headers)
        assert first.status_code == 200
        assert first.json()["message"] == "Recipe liked"
        assert first.json()["data"] == {"liked": True, "likesCount": 1}

        likes = client.get(f"/api/recipes/{recipe['id']}").json()["data"]["likes"]
        assert [like["user"] for like in likes] == [auth_headers.user_id]

        second = client.post(url, headers=auth_headers)
        assert second.status_code == 200
        assert second.json()["message"] == "Recipe unliked"
        assert second.json()["data"] == {"liked": False, "likesCount": 0}

    def test_likes_from_two_users(self, client, auth_headers, other_auth_headers, create_recipe):
        recipe = create_recipe()
        url = f"/api/recipes/{recipe['id']}/like"

        client.post(url, headers=auth_headers)
        response = client.post(url, headers=other_auth_headers)
        assert response.json()["data"] == {"liked": True, "likesCount": 2}

        response = client.post(url, headers=auth_headers)
        assert response.json()["data"] == {"liked": False, "likesCount": 1}

    def test_like_requires_auth(self, client, create_recipe):
        recipe = create_recipe()
        response = client.post(f"/api/recipes/{recipe['id']}/like")
        assert response.status_code == 401
        assert response.json()["message"] == "Authentication required"

        response = client.post(
            f"/api/recipes/{recipe['id']}/like", headers={"Authorization": "Bearer bogus"}
        )
        assert response.status_code == 401
        assert response.json()["message"] == "Authentication required"

    def test_like_missing_recipe(self, client, auth_headers):
        response = client.post(f"/api/recipes/{UNKNOWN_ID}/like", headers=auth_headers)
        assert response.status_code == 404
        assert response.json()["message"] == "Recipe not found"

    def test_like_invalid_id(self, client, auth_headers):
        response = client.post("/api/recipes/nope/like", headers=auth_headers)
        assert response.status_code == 400


class TestRatings:
    def test_average_of_two_ratings_then_removal(
        self, client, auth_headers, other_auth_headers, create_recipe
    ):
        """Ratings [4, 5] average 4.5; removing the 5 leaves 4.0 over one rating."""
        recipe = create_recipe()
        url = f"/api/recipes/{recipe['id']}/rating"

        response = client.post(url, headers=auth_headers, json={"rating": 4})
        assert response.status_code == 200
        assert response.json()["message"] == "Rating added successfully"
        assert response.json()["data"] == {"rating": 4, "averageRating": 4.0, "ratingsCount": 1}

        response = client.post(url, headers=other_auth_headers, json={"rating": 5})
        assert response.json()["data"] == {"rating": 5, "averageRating": 4.5, "ratingsCount": 2}

        response = client.request("DELETE", url, headers=other_auth_headers)
        assert response.status_code == 200
        assert response.json()["message"] == "Rating removed successfully"
        assert response.json()["data"] == {"averageRating": 4.0, "ratingsCount": 1}

        data = client.get(f"/api/recipes/{recipe['id']}").json()["data"]
        assert data["averageRating"] == 4.0
        assert data["ratingsCount"] == 1
        assert [r["user"] for r in data["ratings"]] == [auth_headers.user_id]

    def test_rating_updates_in_place(self, client, auth_headers, create_recipe):
        recipe = create_recipe()
        url = f"/api/recipes/{recipe['id']}/rating"

        client.post(url, headers=auth_headers, json={"rating": 2})
        response = client.post(url, headers=auth_headers, json={"rating": 5})
        assert response.json()["message"] == "Rating updated successfully"
        assert response.json()["data"] == {"rating": 5, "averageRating": 5.0, "ratingsCount": 1}

    def test_average_rounds_to_one_decimal(
        self, client, auth_headers, other_auth_headers, create_recipe
    ):
        recipe = create_recipe()
        url = f"/api/recipes/{recipe['id']}/rating"

        client.post(url, headers=auth_headers, json={"rating": 4})
        client.post(url, headers=other_auth_headers, json={"rating": 4})
        third = client.post(
            "/api/auth/register",
            json={"name": "Third", "email": "third@example.com", "password": "testpass123"},
        ).json()["data"]["token"]
        response = client.post(url, headers={"Authorization": f"Bearer {third}"}, json={"rating": 5})
        # 13 / 3 = 4.333...
        assert response.json()["data"]["averageRating"] == 4.3
        assert response.json()["data"]["ratingsCount"] == 3

    @pytest.mark.parametrize("rating", [6, -1, 10])
    def test_out_of_range(self, client, auth_headers, create_recipe, rating):
        recipe = create_recipe()
        response = client.post(
            f"/api/recipes/{recipe['id']}/rating", headers=auth_headers, json={"rating": rating}
        )
        assert response.status_code == 400
        assert response.json()["message"] == (
            "Rating must be between 1 and 5, or 0 to remove rating"
        )

    @pytest.mark.parametrize("body", [{}, {"rating": None}, {"rating": 3.5}, {"rating": "five"}])
    def test_missing_or_non_integer(self, client, auth_headers, create_recipe, body):
        recipe = create_recipe()
        response = client.post(
            f"/api/recipes/{recipe['id']}/rating", headers=auth_headers, json=body
        )
        assert response.status_code == 400

    def test_zero_without_prior_rating(self, client, auth_headers, create_recipe):
        recipe = create_recipe()
        response = client.post(
            f"/api/recipes/{recipe['id']}/rating", headers=auth_headers, json={"rating": 0}
        )
        assert response.status_code == 404
        assert response.json()["message"] == "No rating found to remove"

    def test_zero_removes_prior_rating(
        self, client, auth_headers, other_auth_headers, create_recipe
    ):
        recipe = create_recipe()
        url = f"/api/recipes/{recipe['id']}/rating"
        client.post(url, headers=auth_headers, json={"rating": 3})
        client.post(url, headers=other_auth_headers, json={"rating": 5})

        response = client.post(url, headers=other_auth_headers, json={"rating": 0})
        assert response.status_code == 200
        assert response.json()["message"] == "Rating removed successfully"
        assert response.json()["data"] == {"rating": 0, "averageRating": 3.0, "ratingsCount": 1}

    def test_zero_removes_last_rating(self, client, auth_headers, create_recipe):
        recipe = create_recipe()
        url = f"/api/recipes/{recipe['id']}/rating"
        client.post(url, headers=auth_headers, json={"rating": 3})

        response = client.post(url, headers=auth_headers, json={"rating": 0})
        assert response.json()["data"] == {"rating": 0, "averageRating": 0.0, "ratingsCount": 0}

    def test_delete_without_rating(self, client, auth_headers, create_recipe):
        recipe = create_recipe()
        response = client.request(
            "DELETE", f"/api/recipes/{recipe['id']}/rating", headers=auth_headers
        )
        assert response.status_code == 404
        assert response.json()["message"] == "No rating found to remove"

    def test_rating_requires_auth(self, client, create_recipe):
        recipe = create_recipe()
        response = client.post(f"/api/recipes/{recipe['id']}/rating", json={"rating": 4})
        assert response.status_code == 401

    def test_rating_missing_recipe(self, client, auth_headers):
        response = client.post(
            f"/api/recipes/{UNKNOWN_ID}/rating", headers=auth_headers, json={"rating": 4}
        )
        assert response.status_code == 404


class TestComments:
    def test_add_and_list_comments(self, client, auth_headers, other_auth_headers, create_recipe):
        recipe = create_recipe()
        url = f"/api/recipes/{recipe['id']}/comments"

        response = client.post(url, headers=auth_headers, json={"content": "  Delicious!  "})
        assert response.status_code == 201
        comment = response.json()["data"]
        assert comment["content"] == "Delicious!"
        assert comment["user"]["id"] == auth_headers.user_id
        assert comment["user"]["name"] == "Test User"
        assert len(comment["id"]) == 24

        client.post(url, headers=other_auth_headers, json={"content": "Too salty"})

        response = client.get(url)
        assert response.status_code == 200
        assert [c["content"] for c in response.json()["data"]] == ["Delicious!", "Too salty"]

        data = client.get(f"/api/recipes/{recipe['id']}").json()["data"]
        assert data["commentsCount"] == 2
        assert data["comments"][1]["user"]["name"] == "Other User"

    @pytest.mark.parametrize(
        ("content", "message"),
        [
            ("", "Comment content is required"),
            ("   ", "Comment content is required"),
            (None, "Comment content is required"),
            ("x" * 501, "Comment cannot be more than 500 characters"),
        ],
    )
    def test_invalid_comment(self, client, auth_headers, create_recipe, content, message):
        recipe = create_recipe()
        response = client.post(
            f"/api/recipes/{recipe['id']}/comments", headers=auth_headers, json={"content": content}
        )
        assert response.status_code == 400
        assert response.json()["message"] == message

    def test_comment_requires_auth(self, client, create_recipe):
        recipe = create_recipe()
        response = client.post(f"/api/recipes/{recipe['id']}/comments", json={"content": "Hi"})
        assert response.status_code == 401

    def test_comments_missing_recipe(self, client):
        assert client.get(f"/api/recipes/{UNKNOWN_ID}/comments").status_code == 404


def test_missing_bodies_use_action_messages(client, auth_headers, create_recipe):
    recipe = create_recipe()

    response = client.post(f"/api/recipes/{recipe['id']}/rating", headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "Rating must be between 1 and 5, or 0 to remove rating"

    response = client.post(f"/api/recipes/{recipe['id']}/comments", headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "Comment content is required"

"""End-to-end tests for the cat endpoints."""

import pytest
from fastapi.testclient import TestClient

from cats.interface.api.app import create_app
from tests.di import build_test_container
from tests.di.container import make_test_settings


@pytest.fixture
def client():
    """Create test client backed by one in-memory store for the whole app."""
    settings = make_test_settings()
    app_instance = create_app(
        settings, build_test_container(unmock={"persistence"}, settings=settings)
    )
    with TestClient(app_instance) as test_client:
        yield test_client


def _create_cat(client: TestClient, **overrides) -> dict:
    payload = {"name": "Tom", "age": 3, "breed": "Siamese", **overrides}
    response = client.post("/cats", json=payload)
    assert response.status_code == 201
    return response.json()["data"]


class TestCatEndpoints:
    """End-to-end tests for the cat API.

    Note: These tests focus on the HTTP contract.
    Business rules are covered by the unit tests.
    """

    def test_create_cat(self, client):
        """Should create a cat and return it with its id."""
        # Act
        response = client.post("/cats", json={"name": "Tom", "age": 3, "breed": "Siamese"})

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "success"
        assert body["message"] == "Cat created successfully"
        assert body["data"]["name"] == "Tom"
        assert body["data"]["age"] == 3
        assert body["data"]["breed"] == "Siamese"
        assert body["data"]["id"]

    def test_create_cat_short_name(self, client):
        """Should return 400 with the violated rule."""
        # Act
        response = client.post("/cats", json={"name": "T", "age": 3, "breed": "Siamese"})

        # Assert
        assert response.status_code == 400
        assert response.json() == {
            "status": "error",
            "message": "name must be at least 2 characters long",
        }

    def test_create_cat_negative_age(self, client):
        """Should return 400 for a negative age."""
        response = client.post("/cats", json={"name": "Tom", "age": -2, "breed": "Siamese"})

        assert response.status_code == 400
        assert response.json()["status"] == "error"

    def test_create_cat_infinite_age(self, client):
        """A non-finite age is rejected and never stored."""
        # Act
        response = client.post(
            "/cats",
            content='{"name": "Mia", "age": Infinity, "breed": "Tabby"}',
            headers={"Content-Type": "application/json"},
        )

        # Assert
        assert response.status_code == 400
        assert response.json() == {
            "status": "error",
            "message": "age must be a finite number, got inf",
        }
        assert client.get("/cats").json()["data"] == []

    def test_create_cat_missing_field(self, client):
        """A malformed body is rejected before reaching the use case."""
        response = client.post("/cats", json={"name": "Tom"})

        assert response.status_code == 422

    def test_list_cats(self, client):
        """Should list created cats in creation order."""
        # Arrange
        _create_cat(client, name="Tom")
        _create_cat(client, name="Felix")

        # Act
        response = client.get("/cats")

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "success"
        assert [c["name"] for c in body["data"]] == ["Tom", "Felix"]

    def test_list_cats_empty(self, client):
        """Should return an empty list when there are no cats."""
        response = client.get("/cats")

        assert response.status_code == 200
        assert response.json() == {"status": "success", "data": []}

    def test_get_cat(self, client):
        """Should return a cat by id."""
        # Arrange
        created = _create_cat(client)

        # Act
        response = client.get(f"/cats/{created['id']}")

        # Assert
        assert response.status_code == 200
        assert response.json() == {"status": "success", "data": created}

    def test_get_unknown_cat(self, client):
        """Should return 404 for an unknown id."""
        response = client.get("/cats/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {"status": "error", "message": "Cat not found"}

    def test_update_cat(self, client):
        """Should patch only the given fields."""
        # Arrange
        created = _create_cat(client, name="Tom", age=3)

        # Act
        response = client.patch(f"/cats/{created['id']}", json={"age": 4})

        # Assert
        assert response.status_code == 200
        assert response.json() == {"status": "success", "message": "Cat updated successfully"}
        fetched = client.get(f"/cats/{created['id']}").json()["data"]
        assert fetched["name"] == "Tom"
        assert fetched["age"] == 4

    def test_update_cat_invalid(self, client):
        """Should return 400 and keep the stored cat."""
        # Arrange
        created = _create_cat(client, name="Tom")

        # Act
        response = client.patch(f"/cats/{created['id']}", json={"name": "X"})

        # Assert
        assert response.status_code == 400
        assert client.get(f"/cats/{created['id']}").json()["data"]["name"] == "Tom"

    def test_update_unknown_cat(self, client):
        """Should return 404 for an unknown id."""
        response = client.patch("/cats/does-not-exist", json={"name": "Felix"})

        assert response.status_code == 404

    def test_delete_cat(self, client):
        """Should delete the cat so it can no longer be fetched."""
        # Arrange
        created = _create_cat(client)

        # Act
        response = client.delete(f"/cats/{created['id']}")

        # Assert
        assert response.status_code == 200
        assert response.json() == {"status": "success", "message": "Cat deleted successfully"}
        assert client.get(f"/cats/{created['id']}").status_code == 404

    def test_delete_unknown_cat(self, client):
        """Should return 404 and leave other cats alone."""
        # Arrange
        _create_cat(client)

        # Act
        response = client.delete("/cats/does-not-exist")

        # Assert
        assert response.status_code == 404
        assert len(client.get("/cats").json()["data"]) == 1

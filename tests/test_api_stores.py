"""
Tests for the stores API endpoints.

Tests FastAPI routes with a mocked Store Service.
Validates status codes, response bodies, and error mapping.
"""

from fastapi.testclient import TestClient

from projectstore.domain.stores.entities import Store
from projectstore.domain.stores.errors import (
    ModelNotFoundError,
    StoreDomainError,
    StoreNameCannotBeEmptyError,
    StoreNotFoundError,
)
from projectstore.main import app


class TestCreateStore:
    """Tests for POST /stores."""

    def test_given_correct_body_creates_store(self, client, store_service) -> None:
        """A named store is created and echoed with the service-assigned id."""
        store_service.create.return_value = Store(id=123, name="Boulangerie")

        response = client.post("/stores", json={"name": "Boulangerie"})

        assert response.status_code == 200
        assert response.text == '{"id":123,"name":"Boulangerie"}'
        store_service.create.assert_called_once_with("Boulangerie")

    def test_given_empty_name_does_not_create_store(self, client, store_service) -> None:
        """An empty name maps to 400 with the name error envelope."""
        store_service.create.side_effect = StoreNameCannotBeEmptyError()

        response = client.post("/stores", json={"name": ""})

        assert response.status_code == 400
        assert response.text == '{"msg":"name cannot be empty"}'
        store_service.create.assert_called_once_with("")

    def test_given_missing_name_treated_as_empty(self, client, store_service) -> None:
        """A body without a name reaches the service as None."""
        store_service.create.side_effect = StoreNameCannotBeEmptyError()

        response = client.post("/stores", json={})

        assert response.status_code == 400
        assert response.json() == {"msg": "name cannot be empty"}
        store_service.create.assert_called_once_with(None)

    def test_given_null_name_treated_as_empty(self, client, store_service) -> None:
        """A null name reaches the service and maps to the name error envelope."""
        store_service.create.side_effect = StoreNameCannotBeEmptyError()

        response = client.post("/stores", json={"name": None})

        assert response.status_code == 400
        assert response.text == '{"msg":"name cannot be empty"}'
        store_service.create.assert_called_once_with(None)


class TestGetStore:
    """Tests for GET /stores/{id}."""

    def test_given_existing_store_id_returns_store(self, client, store_service) -> None:
        """A known id returns the store at 200."""
        store_service.get_store.return_value = Store(id=12, name="boulangerie")

        response = client.get("/stores/12")

        assert response.status_code == 200
        assert response.text == '{"id":12,"name":"boulangerie"}'
        store_service.get_store.assert_called_once_with(12)

    def test_given_non_existing_store_id_returns_400(self, client, store_service) -> None:
        """An unknown id maps to 400 with the not-found envelope."""
        store_service.get_store.side_effect = ModelNotFoundError("Store", 13)

        response = client.get("/stores/13")

        assert response.status_code == 400
        assert response.text == '{"msg":"store not found"}'
        store_service.get_store.assert_called_once_with(13)

    def test_non_integer_id_rejected(self, client, store_service) -> None:
        """A non-integer path segment is rejected before the service is called."""
        response = client.get("/stores/abc")

        assert response.status_code == 422
        store_service.get_store.assert_not_called()


class TestDeleteStore:
    """Tests for DELETE /stores/{id}."""

    def test_given_existing_store_id_deletes_store(self, client, store_service) -> None:
        """A known id is deleted and answered with an empty 204."""
        store_service.delete_store_by_id.return_value = None

        response = client.delete("/stores/12")

        assert response.status_code == 204
        assert response.content == b""
        store_service.delete_store_by_id.assert_called_once_with(12)

    def test_given_non_existing_store_id_returns_400(self, client, store_service) -> None:
        """An unknown id maps to 400 with the not-found envelope."""
        store_service.delete_store_by_id.side_effect = StoreNotFoundError(13)

        response = client.delete("/stores/13")

        assert response.status_code == 400
        assert response.text == '{"msg":"store not found"}'
        store_service.delete_store_by_id.assert_called_once_with(13)


class TestUnmappedErrors:
    """Errors outside the mapping table never leak internals."""

    def test_unmapped_domain_error_returns_500(self, store_service) -> None:
        store_service.get_store.side_effect = StoreDomainError("boom")
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/stores/1")

        assert response.status_code == 500
        assert response.json() == {"msg": "internal server error"}

    def test_unexpected_error_returns_500(self, store_service) -> None:
        store_service.get_store.side_effect = RuntimeError("database is on fire")
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/stores/1")

        assert response.status_code == 500
        assert response.json() == {"msg": "internal server error"}
        assert "fire" not in response.text

"""Integration tests for Customer API endpoints.

Covers:
- CRUD operations via /api/v1/customers/.
- Field-shape errors (serializer) vs validator errors (service).
- Domain exception mapping (400, 404, 409).
"""

from __future__ import annotations

import pytest

from modules.customers.models import Customer
from modules.customers.repositories.memory_repository import get_customer_repository

pytestmark = pytest.mark.integration

VALID_CPF = "121.574.540-04"
VALID_CPF_2 = "005.413.050-69"

URL = "/api/v1/customers/"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_customer() -> Customer:
    """A stored Customer instance."""
    return get_customer_repository().save(
        Customer(name="João Silva", email="joao@example.com", cpf=VALID_CPF)
    )


def _payload(**overrides) -> dict:
    data = {"name": "Maria Souza", "email": "maria@example.com", "cpf": VALID_CPF_2}
    data.update(overrides)
    return data


# ===========================================================================
# LIST
# ===========================================================================


class TestCustomerList:
    def test_list_empty(self, api_client):
        response = api_client.get(URL)
        assert response.status_code == 200
        assert response.data["count"] == 0
        assert response.data["results"] == []

    def test_list_returns_customers(self, api_client, sample_customer):
        response = api_client.get(URL)
        assert response.status_code == 200
        assert len(response.data["results"]) == 1
        assert response.data["results"][0]["name"] == "João Silva"
        assert response.data["results"][0]["cpf"] == VALID_CPF


# ===========================================================================
# RETRIEVE
# ===========================================================================


class TestCustomerRetrieve:
    def test_retrieve_success(self, api_client, sample_customer):
        response = api_client.get(f"{URL}{sample_customer.id}/")
        assert response.status_code == 200
        assert response.data["id"] == sample_customer.id
        assert response.data["email"] == "joao@example.com"

    def test_retrieve_not_found(self, api_client):
        response = api_client.get(f"{URL}999/")
        assert response.status_code == 404

    def test_non_numeric_id_not_found(self, api_client):
        response = api_client.get(f"{URL}abc/")
        assert response.status_code == 404


# ===========================================================================
# CREATE
# ===========================================================================


class TestCustomerCreate:
    def test_create_success(self, api_client):
        response = api_client.post(URL, _payload(), format="json")
        assert response.status_code == 201
        assert response.data["id"] == 1
        assert response.data["name"] == "Maria Souza"
        assert get_customer_repository().count() == 1

    def test_create_assigns_next_id(self, api_client, sample_customer):
        response = api_client.post(URL, _payload(), format="json")
        assert response.status_code == 201
        assert response.data["id"] == sample_customer.id + 1

    def test_missing_fields_returns_400(self, api_client):
        response = api_client.post(URL, {"name": "Incomplete"}, format="json")
        assert response.status_code == 400
        assert "email" in response.data
        assert "cpf" in response.data

    def test_unpunctuated_cpf_rejected_by_shape_check(self, api_client):
        response = api_client.post(URL, _payload(cpf="00541305069"), format="json")
        assert response.status_code == 400
        assert "cpf" in response.data

    def test_invalid_checksum_returns_400(self, api_client):
        response = api_client.post(URL, _payload(cpf="123.456.789-01"), format="json")
        assert response.status_code == 400
        assert response.data == {"detail": "Invalid CPF.", "field": "cpf"}

    def test_invalid_email_returns_400(self, api_client):
        response = api_client.post(
            URL, _payload(email="usuario@@example.com"), format="json"
        )
        assert response.status_code == 400
        assert response.data["field"] == "email"

    def test_invalid_name_returns_400(self, api_client):
        response = api_client.post(URL, _payload(name="João123"), format="json")
        assert response.status_code == 400
        assert response.data["field"] == "name"

    def test_first_failing_field_reported(self, api_client):
        response = api_client.post(
            URL,
            _payload(cpf="000.000.000-00", email="no-at-sign", name="Maria!"),
            format="json",
        )
        assert response.status_code == 400
        assert response.data["field"] == "cpf"

    def test_empty_leading_domain_label_accepted(self, api_client):
        response = api_client.post(URL, _payload(email="usuario@.com"), format="json")
        assert response.status_code == 201

    def test_duplicate_cpf_returns_409(self, api_client, sample_customer):
        response = api_client.post(URL, _payload(cpf=VALID_CPF), format="json")
        assert response.status_code == 409
        assert get_customer_repository().count() == 1


# ===========================================================================
# UPDATE
# ===========================================================================


class TestCustomerUpdate:
    def test_put_update_success(self, api_client, sample_customer):
        payload = {"name": "João PUT", "email": "joao@example.com", "cpf": VALID_CPF}
        response = api_client.put(
            f"{URL}{sample_customer.id}/", payload, format="json"
        )
        assert response.status_code == 200
        assert response.data["name"] == "João PUT"
        assert get_customer_repository().get_by_id(sample_customer.id).name == "João PUT"

    def test_put_requires_every_field(self, api_client, sample_customer):
        response = api_client.put(
            f"{URL}{sample_customer.id}/", {"name": "Only Name"}, format="json"
        )
        assert response.status_code == 400

    def test_patch_update_success(self, api_client, sample_customer):
        response = api_client.patch(
            f"{URL}{sample_customer.id}/", {"name": "João Atualizado"}, format="json"
        )
        assert response.status_code == 200
        assert response.data["name"] == "João Atualizado"
        assert response.data["cpf"] == VALID_CPF

    def test_update_not_found(self, api_client):
        response = api_client.patch(f"{URL}999/", {"name": "Ghost"}, format="json")
        assert response.status_code == 404

    def test_update_invalid_name_returns_400(self, api_client, sample_customer):
        response = api_client.patch(
            f"{URL}{sample_customer.id}/", {"name": "João da Silva!"}, format="json"
        )
        assert response.status_code == 400
        assert response.data["field"] == "name"
        stored = get_customer_repository().get_by_id(sample_customer.id)
        assert stored.name == "João Silva"

    def test_update_cpf_taken_by_other_returns_409(self, api_client, sample_customer):
        other = api_client.post(URL, _payload(), format="json").data

        response = api_client.patch(
            f"{URL}{other['id']}/", {"cpf": VALID_CPF}, format="json"
        )
        assert response.status_code == 409


# ===========================================================================
# DESTROY
# ===========================================================================


class TestCustomerDestroy:
    def test_destroy_success(self, api_client, sample_customer):
        response = api_client.delete(f"{URL}{sample_customer.id}/")
        assert response.status_code == 204
        assert get_customer_repository().get_by_id(sample_customer.id) is None

    def test_destroy_not_found(self, api_client):
        response = api_client.delete(f"{URL}999/")
        assert response.status_code == 404

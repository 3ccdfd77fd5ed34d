import uuid
from unittest.mock import create_autospec

import pytest

from crud_example.core.dependencies import get_persons_service
from crud_example.exceptions.base import MissingRequestError
from crud_example.services.persons_service import PersonsService

pytestmark = pytest.mark.api

PERSONS_URL = "/api/v1/persons"


def _person_payload(**overrides) -> dict:
    payload = {
        "person_name": "Linus",
        "email": "linus@example.com",
        "date_of_birth": "1969-12-28",
        "gender": "Male",
        "country_id": None,
        "address": "Portland",
        "receive_news_letters": True,
    }
    payload.update(overrides)
    return payload


class TestListPersons:

    def test_default_sort_is_person_name_ascending(self, client, added_persons):
        resp = client.get(PERSONS_URL)

        assert resp.status_code == 200
        assert [p["person_name"] for p in resp.json()] == ["Mary", "Rahman", "Smith"]

    def test_search_then_sort(self, client, added_persons):
        """
        Behavior:
                - The list endpoint filters first, then sorts the filtered result.
        """
        resp = client.get(
            PERSONS_URL,
            params={"search_by": "gender", "search_string": "male", "sort_by": "person_name", "sort_order": "DESC"},
        )

        assert [p["person_name"] for p in resp.json()] == ["Smith", "Rahman"]

    def test_response_includes_country_and_age(self, client, added_persons):
        body = client.get(PERSONS_URL, params={"search_by": "person_name", "search_string": "mary"}).json()

        assert len(body) == 1
        assert body[0]["country"] == "UK"
        assert isinstance(body[0]["age"], int)

    def test_invalid_sort_order(self, client):
        resp = client.get(PERSONS_URL, params={"sort_order": "SIDEWAYS"})

        assert resp.status_code == 422
        assert resp.json()["fields"] == ["sort_order"]


class TestSinglePerson:

    def test_add_person(self, client, added_countries):
        payload = _person_payload(country_id=str(added_countries["USA"].country_id))

        resp = client.post(PERSONS_URL, json=payload)

        assert resp.status_code == 201
        body = resp.json()
        assert body["person_name"] == "Linus"
        assert body["country"] == "USA"
        assert uuid.UUID(body["person_id"])

    def test_add_person_invalid_email(self, client):
        resp = client.post(PERSONS_URL, json=_person_payload(email="linus-at-example"))

        assert resp.status_code == 422
        assert resp.json()["detail"] == "Email value should be a valid email"
        assert resp.json()["fields"] == ["email"]

    def test_add_person_unknown_gender(self, client):
        """
        Behavior:
                - A value FastAPI rejects before the service runs still comes back in the
                  {"detail", "code", "fields"} error shape.
        """
        # Act
        resp = client.post(PERSONS_URL, json=_person_payload(gender="male"))

        # Assert
        assert resp.status_code == 422
        body = resp.json()
        assert set(body) == {"detail", "code", "fields"}
        assert body["code"] == "invalid_input"
        assert body["fields"] == ["gender"]
        assert isinstance(body["detail"], str)

    def test_get_person(self, client, added_persons):
        target = added_persons[0]

        resp = client.get(f"{PERSONS_URL}/{target.person_id}")

        assert resp.status_code == 200
        assert resp.json()["person_name"] == target.person_name

    def test_get_person_unknown(self, client):
        assert client.get(f"{PERSONS_URL}/{uuid.uuid4()}").status_code == 404

    def test_update_person_path_id_wins(self, client, added_persons):
        """
        Behavior:
                - The id in the URL selects the person; a different id in the body is ignored.
        """
        # Arrange
        target = added_persons[0]
        payload = _person_payload(person_id=str(uuid.uuid4()), person_name="Renamed")

        # Act
        resp = client.put(f"{PERSONS_URL}/{target.person_id}", json=payload)

        # Assert
        assert resp.status_code == 200
        assert resp.json()["person_id"] == str(target.person_id)
        assert resp.json()["person_name"] == "Renamed"

    def test_update_person_unknown(self, client):
        resp = client.put(f"{PERSONS_URL}/{uuid.uuid4()}", json=_person_payload())

        assert resp.status_code == 404
        assert resp.json()["detail"] == "Given person id doesn't exist"

    def test_delete_person(self, client, persons_service, added_persons):
        target = added_persons[0]

        resp = client.delete(f"{PERSONS_URL}/{target.person_id}")

        assert resp.status_code == 204
        assert persons_service.get_person_by_person_id(target.person_id) is None

    def test_delete_person_unknown(self, client):
        assert client.delete(f"{PERSONS_URL}/{uuid.uuid4()}").status_code == 404


def test_missing_request_maps_to_400(app, client):
    """
    Behavior:
            - A MissingRequestError raised by the service becomes HTTP 400 with its payload.

    Importance:
            - The controller is tested in isolation: the service is an autospec'd mock
              injected through FastAPI's dependency_overrides.
    """
    # Arrange
    service_mock = create_autospec(PersonsService, instance=True)
    service_mock.delete_person.side_effect = MissingRequestError("Person ID can't be null", fields=["person_id"])
    app.dependency_overrides[get_persons_service] = lambda: service_mock
    person_id = uuid.uuid4()

    # Act
    resp = client.delete(f"{PERSONS_URL}/{person_id}")

    # Assert
    assert resp.status_code == 400
    assert resp.json()["code"] == "missing_request"
    service_mock.delete_person.assert_called_once_with(person_id)

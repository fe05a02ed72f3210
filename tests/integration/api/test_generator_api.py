"""
Integration tests for Generator API endpoints.
"""

from unittest import mock

import pytest
from django.db import DatabaseError
from django.urls import reverse
from rest_framework.test import APIRequestFactory

from api.v1.generator.views import GeneratorListView
from core.domain.exceptions import GeneratorPersistenceError
from generators.infrastructure.models import Generator as GeneratorModel

LIST_URL = "/api/v1/generators"

BASIC = {
    "name": "Basic",
    "charset": "ABCDEFGH0123456789",
    "chunks": 4,
    "chunk_length": 4,
}

DTO_KEYS = [
    "id",
    "name",
    "charset",
    "chunks",
    "chunk_length",
    "times_activated_max",
    "separator",
    "prefix",
    "suffix",
    "expires_in",
    "created_at",
    "created_by",
    "updated_at",
    "updated_by",
]


def detail_url(generator_id):
    return reverse("generators:generator-detail", kwargs={"generator_id": generator_id})


def error_of(response):
    body = response.json()
    assert body["success"] is False
    return body["error"]


@pytest.mark.django_db
@pytest.mark.integration
class TestGeneratorLifecycle:
    """End-to-end create, read and update."""

    def test_create_get_update(self, api_client, all_routes_enabled):
        """Test the full generator lifecycle through the API."""
        response = api_client.post(LIST_URL, BASIC, format="json")

        assert response.status_code == 200
        assert response["X-API-Route"] == "v1/generators"
        body = response.json()
        assert body["success"] is True
        assert body["message"] is None
        created = body["data"]
        assert list(created.keys()) == DTO_KEYS
        assert isinstance(created["id"], int)
        assert created["separator"] is None
        assert created["created_by"] == 0
        assert created["updated_at"] is None
        assert created["updated_by"] is None

        response = api_client.get(detail_url(created["id"]))

        assert response.status_code == 200
        assert response["X-API-Route"] == "v1/generators/{id}"
        assert response.json()["data"] == created

        response = api_client.put(
            detail_url(created["id"]), {"times_activated_max": 3}, format="json"
        )

        assert response.status_code == 200
        updated = response.json()["data"]
        assert updated["times_activated_max"] == 3
        assert updated["updated_at"] is not None
        assert updated["updated_by"] == 0
        unchanged = set(DTO_KEYS) - {"times_activated_max", "updated_at", "updated_by"}
        assert {key: updated[key] for key in unchanged} == {
            key: created[key] for key in unchanged
        }

    def test_list_generators(self, api_client, all_routes_enabled):
        """Test listing returns every generator in id order."""
        api_client.post(LIST_URL, BASIC, format="json")
        api_client.post(LIST_URL, {**BASIC, "name": "Second"}, format="json")

        response = api_client.get(LIST_URL)

        assert response.status_code == 200
        data = response.json()["data"]
        assert [item["name"] for item in data] == ["Basic", "Second"]
        assert data[0]["id"] < data[1]["id"]

    def test_authenticated_actor_recorded(
        self, api_client, all_routes_enabled, django_user_model
    ):
        """Test the authenticated user is recorded as creator and updater."""
        user = django_user_model.objects.create_user(username="manager", password="secret")
        api_client.force_authenticate(user=user)

        created = api_client.post(LIST_URL, BASIC, format="json").json()["data"]
        updated = api_client.put(
            detail_url(created["id"]), {"name": "Renamed"}, format="json"
        ).json()["data"]

        assert created["created_by"] == user.pk
        assert updated["updated_by"] == user.pk


@pytest.mark.django_db
@pytest.mark.integration
class TestRouteGate:
    """Tests for routes switched off in the settings."""

    @pytest.mark.parametrize(
        "method, url",
        [
            ("get", LIST_URL),
            ("post", LIST_URL),
            ("get", "/api/v1/generators/1"),
            ("put", "/api/v1/generators/1"),
        ],
    )
    def test_routes_disabled_without_settings(self, api_client, method, url):
        """Test every route is disabled when no settings are stored."""
        response = getattr(api_client, method)(url, BASIC, format="json")

        assert response.status_code == 403
        error = error_of(response)
        assert error["code"] == "ROUTE_DISABLED"
        assert error["message"] == "This route is disabled via the plugin settings."

    def test_only_enabled_routes_respond(self, api_client, enable_routes):
        """Test routes are gated individually."""
        enable_routes("008")

        assert api_client.post(LIST_URL, BASIC, format="json").status_code == 200
        assert api_client.get(LIST_URL).status_code == 403

    def test_disabled_route_creates_nothing(self, api_client, enable_routes):
        """Test a disabled create route never reaches the store."""
        enable_routes("006", "007", "009")

        api_client.post(LIST_URL, BASIC, format="json")

        assert GeneratorModel.objects.count() == 0


@pytest.mark.django_db
@pytest.mark.integration
class TestListGenerators:
    """Tests for GET /generators."""

    def test_empty_store_is_not_found(self, api_client, all_routes_enabled):
        """Test an empty store is never a 200 with an empty list."""
        response = api_client.get(LIST_URL)

        assert response.status_code == 404
        assert error_of(response)["message"] == "No Generators available"

    def test_read_failure(self, api_client, all_routes_enabled, db_generator):
        """Test a store failure while listing is a persistence error."""
        with mock.patch.object(
            GeneratorModel.objects, "order_by", side_effect=DatabaseError("boom")
        ):
            response = api_client.get(LIST_URL)

        assert response.status_code == 500
        assert error_of(response) == {
            "code": "GENERATOR_PERSISTENCE_ERROR",
            "message": "The Generators could not be retrieved.",
        }


@pytest.mark.django_db
@pytest.mark.integration
class TestGetGenerator:
    """Tests for GET /generators/{id}."""

    @pytest.mark.parametrize("generator_id", ["abc", "0", "-1", "1.5"])
    def test_invalid_id(self, api_client, all_routes_enabled, generator_id):
        """Test malformed ids are rejected."""
        response = api_client.get(f"{LIST_URL}/{generator_id}")

        assert response.status_code == 404
        error = error_of(response)
        assert error["code"] == "INVALID_GENERATOR_ID"
        assert error["message"] == "Generator ID is invalid."

    def test_not_found(self, api_client, all_routes_enabled):
        """Test a well-formed id that does not exist."""
        response = api_client.get(detail_url(999))

        assert response.status_code == 404
        error = error_of(response)
        assert error["code"] == "GENERATOR_NOT_FOUND"
        assert error["message"] == "Generator with ID: 999 could not be found."

    def test_read_failure(self, api_client, all_routes_enabled, db_generator):
        """Test a store failure while reading is a persistence error."""
        with mock.patch.object(GeneratorModel.objects, "get", side_effect=DatabaseError("boom")):
            response = api_client.get(detail_url(db_generator.id))

        assert response.status_code == 500
        assert error_of(response) == {
            "code": "GENERATOR_PERSISTENCE_ERROR",
            "message": "The Generator could not be retrieved.",
        }


@pytest.mark.django_db
@pytest.mark.integration
class TestCreateGenerator:
    """Tests for POST /generators."""

    @pytest.mark.parametrize(
        "payload, field, message",
        [
            ({}, "name", "The Generator name is missing from the request."),
            (
                {"name": "Basic"},
                "charset",
                "The Generator charset is missing from the request.",
            ),
            (
                {"name": "Basic", "charset": "ABC", "chunks": "abc", "chunk_length": 4},
                "chunks",
                "The Generator chunks is missing from the request.",
            ),
            (
                {"name": "Basic", "charset": "ABC", "chunks": 4},
                "chunk_length",
                "The Generator chunk length is missing from the request.",
            ),
            (
                {"name": "<b></b>", "charset": "ABC", "chunks": 4, "chunk_length": 4},
                "name",
                "The Generator name is missing from the request.",
            ),
            (
                {"name": "0", "charset": "0", "chunks": 4, "chunk_length": 4},
                "name",
                "The Generator name is missing from the request.",
            ),
            (
                {"name": "Basic", "charset": "0", "chunks": 4, "chunk_length": 4},
                "charset",
                "The Generator charset is missing from the request.",
            ),
        ],
    )
    def test_missing_field(self, api_client, all_routes_enabled, payload, field, message):
        """Test the first missing field is reported and nothing is stored."""
        response = api_client.post(LIST_URL, payload, format="json")

        assert response.status_code == 400
        error = error_of(response)
        assert error["code"] == "GENERATOR_VALIDATION_ERROR"
        assert error["message"] == message
        assert error["field"] == field
        assert GeneratorModel.objects.count() == 0

    def test_values_are_coerced(self, api_client, all_routes_enabled):
        """Test numbers are read as absolute integers and text is sanitized."""
        response = api_client.post(
            LIST_URL,
            {
                "name": " <b>Pro</b>  Keys ",
                "charset": "ABC",
                "chunks": "-3",
                "chunk_length": "8",
                "times_activated_max": "2",
                "expires_in": 365,
                "separator": "-",
                "prefix": "PRO-",
            },
            format="json",
        )

        data = response.json()["data"]
        assert data["name"] == "Pro Keys"
        assert data["chunks"] == 3
        assert data["chunk_length"] == 8
        assert data["times_activated_max"] == 2
        assert data["expires_in"] == 365
        assert data["separator"] == "-"
        assert data["prefix"] == "PRO-"
        assert data["suffix"] is None

    def test_form_encoded_body(self, api_client, all_routes_enabled):
        """Test multipart form bodies are accepted."""
        response = api_client.post(
            LIST_URL,
            {"name": "Basic", "charset": "ABC", "chunks": "4", "chunk_length": "4"},
        )

        assert response.status_code == 200
        assert response.json()["data"]["chunks"] == 4

    def test_query_parameters_merged(self, api_client, all_routes_enabled):
        """Test body values override query parameters."""
        response = api_client.post(
            f"{LIST_URL}?name=FromQuery&charset=QRS",
            {"name": "FromBody", "chunks": 2, "chunk_length": 2},
            format="json",
        )

        data = response.json()["data"]
        assert data["name"] == "FromBody"
        assert data["charset"] == "QRS"

    def test_malformed_json(self, api_client, all_routes_enabled):
        """Test an unreadable body is treated as empty."""
        response = api_client.post(LIST_URL, "{not json", content_type="application/json")

        assert response.status_code == 400
        assert error_of(response)["message"] == "The Generator name is missing from the request."

    def test_unsupported_content_type(self, api_client, all_routes_enabled):
        """Test a body of another content type is ignored, not rejected with 415."""
        response = api_client.post(
            f"{LIST_URL}?name=Plain&charset=ABC&chunks=2&chunk_length=3",
            "name=Ignored",
            content_type="text/plain",
        )

        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Plain"

    def test_unsupported_content_type_without_parameters(self, api_client, all_routes_enabled):
        """Test an unreadable body with no query parameters reports the first missing field."""
        response = api_client.post(LIST_URL, "name=Ignored", content_type="text/plain")

        assert response.status_code == 400
        assert error_of(response)["message"] == "The Generator name is missing from the request."

    def test_persistence_failure(self, memory_repository, static_settings_repository):
        """Test store failures are reported as server errors."""

        async def failing_insert(draft, actor):
            raise GeneratorPersistenceError("The Generator could not be added to the database.")

        memory_repository.insert = failing_insert
        view = GeneratorListView.as_view(
            generator_repository=memory_repository,
            settings_repository=static_settings_repository,
        )
        request = APIRequestFactory().post(LIST_URL, BASIC, format="json")

        response = view(request)

        assert response.status_code == 500
        assert response.data["error"] == {
            "code": "GENERATOR_PERSISTENCE_ERROR",
            "message": "The Generator could not be added to the database.",
        }


@pytest.mark.django_db
@pytest.mark.integration
class TestUpdateGenerator:
    """Tests for PUT /generators/{id}."""

    def test_invalid_id(self, api_client, all_routes_enabled):
        """Test a malformed id is reported as missing."""
        response = api_client.put(f"{LIST_URL}/abc", {"name": "X"}, format="json")

        assert response.status_code == 404
        assert error_of(response)["message"] == "The Generator ID is missing from the request."

    @pytest.mark.parametrize("body", ["", "not json", "[1, 2]", "{}", "null"])
    def test_missing_parameters(self, api_client, all_routes_enabled, db_generator, body):
        """Test bodies that are not a non-empty JSON object."""
        response = api_client.put(
            detail_url(db_generator.id), body, content_type="application/json"
        )

        assert response.status_code == 400
        assert error_of(response)["message"] == "No parameters were provided."

    def test_only_unknown_keys(self, api_client, all_routes_enabled, db_generator):
        """Test id and audit keys alone do not count as parameters."""
        response = api_client.put(
            detail_url(db_generator.id), {"id": 77, "created_by": 3}, format="json"
        )

        assert response.status_code == 400
        assert error_of(response)["message"] == "No parameters were provided."
        assert GeneratorModel.objects.get(id=db_generator.id).created_by == 7

    @pytest.mark.parametrize(
        "payload, field, message",
        [
            ({"name": ""}, "name", "Generator name is invalid."),
            ({"charset": "  "}, "charset", "Generator charset is invalid."),
            ({"chunks": "abc"}, "chunks", "Generator chunks must be an absolute integer."),
            (
                {"chunk_length": "x"},
                "chunk_length",
                "Generator chunk_length must be an absolute integer.",
            ),
        ],
    )
    def test_invalid_field(
        self, api_client, all_routes_enabled, db_generator, payload, field, message
    ):
        """Test invalid fields are rejected and the record is unchanged."""
        response = api_client.put(detail_url(db_generator.id), payload, format="json")

        assert response.status_code == 400
        error = error_of(response)
        assert error["message"] == message
        assert error["field"] == field
        stored = GeneratorModel.objects.get(id=db_generator.id)
        assert stored.name == "Basic"
        assert stored.updated_at is None

    def test_update_chunks(self, api_client, all_routes_enabled, db_generator):
        """Test a numeric update changes only that field and the audit fields."""
        response = api_client.put(detail_url(db_generator.id), {"chunks": "5"}, format="json")

        data = response.json()["data"]
        assert response.status_code == 200
        assert data["chunks"] == 5
        assert data["chunk_length"] == 4
        assert data["name"] == "Basic"

    def test_zero_chunks_accepted(self, api_client, all_routes_enabled, db_generator):
        """Test updates accept zero counts."""
        response = api_client.put(detail_url(db_generator.id), {"chunks": 0}, format="json")

        assert response.status_code == 200
        assert response.json()["data"]["chunks"] == 0

    def test_null_clears_expiry(self, api_client, all_routes_enabled, db_generator):
        """Test an explicit null clears expires_in."""
        url = detail_url(db_generator.id)
        api_client.put(url, {"expires_in": 30}, format="json")

        response = api_client.put(url, {"expires_in": None}, format="json")

        assert response.json()["data"]["expires_in"] is None

    def test_null_activation_cap_rejected(self, api_client, all_routes_enabled, db_generator):
        """Test times_activated_max cannot be cleared with null."""
        url = detail_url(db_generator.id)
        api_client.put(url, {"times_activated_max": 3}, format="json")

        response = api_client.put(url, {"times_activated_max": None}, format="json")

        assert response.status_code == 400
        error = error_of(response)
        assert error["field"] == "times_activated_max"
        assert error["message"] == "Generator times_activated_max must be an absolute integer."
        assert GeneratorModel.objects.get(id=db_generator.id).times_activated_max == 3

    def test_not_found(self, api_client, all_routes_enabled):
        """Test updating a generator that does not exist."""
        response = api_client.put(detail_url(999), {"name": "X"}, format="json")

        assert response.status_code == 404
        assert error_of(response)["code"] == "GENERATOR_NOT_FOUND"


@pytest.mark.django_db
@pytest.mark.integration
class TestLegacyErrorStatus:
    """Tests for API_LEGACY_ERROR_STATUS."""

    def test_all_failures_are_404(self, api_client, settings, enable_routes):
        """Test legacy mode reports every failure as 404."""
        settings.API_LEGACY_ERROR_STATUS = True
        enable_routes("008")

        validation = api_client.post(LIST_URL, {}, format="json")
        disabled = api_client.get(LIST_URL)

        assert validation.status_code == 404
        assert error_of(validation)["code"] == "GENERATOR_VALIDATION_ERROR"
        assert disabled.status_code == 404
        assert error_of(disabled)["code"] == "ROUTE_DISABLED"

    def test_read_failures_are_404(self, api_client, settings, all_routes_enabled, db_generator):
        """Test legacy mode reports store failures on reads as 404."""
        settings.API_LEGACY_ERROR_STATUS = True

        with mock.patch.object(
            GeneratorModel.objects, "order_by", side_effect=DatabaseError("boom")
        ):
            listed = api_client.get(LIST_URL)
        with mock.patch.object(GeneratorModel.objects, "get", side_effect=DatabaseError("boom")):
            fetched = api_client.get(detail_url(db_generator.id))

        assert listed.status_code == 404
        assert error_of(listed)["code"] == "GENERATOR_PERSISTENCE_ERROR"
        assert fetched.status_code == 404
        assert error_of(fetched)["code"] == "GENERATOR_PERSISTENCE_ERROR"

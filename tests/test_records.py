# =============================================================================
# tests/test_records.py - Record Endpoint Tests
# =============================================================================
# Tests for POST /drizzlego/data:
# - Valid bodies are inserted and echoed with 201
# - Malformed bodies get 400 with the decoder's message
# - Database failures get 500 with the database's message
#
# The fake datastore enforces a primary key on `id`.
# =============================================================================

from fastapi.testclient import TestClient

from app.main import create_app


# =============================================================================
# Successful Inserts
# =============================================================================

class TestCreateRecord:
    """Tests for the happy path."""

    def test_creates_and_echoes_record(self, client, fake_datastore):
        resp = client.post("/drizzlego/data", json={"id": "1", "name": "Ada"})

        assert resp.status_code == 201
        assert resp.json() == {"id": "1", "name": "Ada"}
        assert fake_datastore.rows == {"1": "Ada"}

    def test_uses_parameterized_insert(self, client, fake_datastore):
        client.post("/drizzlego/data", json={"id": "7", "name": "Grace"})

        statement, params = fake_datastore.statements[0]
        assert statement == "INSERT INTO tablea (id, name) VALUES ($1, $2)"
        assert params == ("7", "Grace")

    def test_configured_table(self, settings, fake_datastore, readiness):
        custom = settings.model_copy(update={"RECORD_TABLE": "people"})
        app = create_app(custom, datastore=fake_datastore, readiness=readiness)

        with TestClient(app) as test_client:
            test_client.post("/drizzlego/data", json={"id": "1", "name": "Ada"})

        assert fake_datastore.statements[0][0].startswith("INSERT INTO people ")

    def test_unknown_fields_ignored(self, client, fake_datastore):
        resp = client.post(
            "/drizzlego/data",
            json={"id": "2", "name": "Linus", "email": "linus@example.com"},
        )

        assert resp.status_code == 201
        assert resp.json() == {"id": "2", "name": "Linus"}

    def test_missing_fields_default_to_empty(self, client, fake_datastore):
        resp = client.post("/drizzlego/data", json={"name": "Nameless"})

        assert resp.status_code == 201
        assert resp.json() == {"id": "", "name": "Nameless"}
        assert fake_datastore.rows == {"": "Nameless"}

    def test_empty_object(self, client):
        resp = client.post("/drizzlego/data", json={})

        assert resp.status_code == 201
        assert resp.json() == {"id": "", "name": ""}

    def test_keys_match_case_insensitively(self, client, fake_datastore):
        resp = client.post("/drizzlego/data", json={"ID": "1", "Name": "Ada"})

        assert resp.status_code == 201
        assert resp.json() == {"id": "1", "name": "Ada"}
        assert fake_datastore.rows == {"1": "Ada"}

    def test_exact_case_key_wins(self, client, fake_datastore):
        resp = client.post(
            "/drizzlego/data",
            json={"ID": "upper", "id": "exact", "NAME": "Ada"},
        )

        assert resp.status_code == 201
        assert resp.json() == {"id": "exact", "name": "Ada"}

    def test_null_body_inserts_empty_record(self, client, fake_datastore):
        resp = client.post("/drizzlego/data", content=b"null")

        assert resp.status_code == 201
        assert resp.json() == {"id": "", "name": ""}
        assert fake_datastore.rows == {"": ""}

    def test_content_after_first_value_ignored(self, client, fake_datastore):
        resp = client.post(
            "/drizzlego/data",
            content=b' {"id": "4", "name": "Barbara"} trailing {"id": "5"}',
        )

        assert resp.status_code == 201
        assert resp.json() == {"id": "4", "name": "Barbara"}
        assert fake_datastore.rows == {"4": "Barbara"}

    def test_does_not_require_readiness(self, client, readiness):
        """Only the probe looks at the flag."""
        readiness.set_ready(False)

        resp = client.post("/drizzlego/data", json={"id": "3", "name": "Ken"})

        assert resp.status_code == 201


# =============================================================================
# Decode Failures
# =============================================================================

class TestDecodeErrors:
    """Tests for malformed request bodies."""

    def test_not_json(self, client, fake_datastore):
        resp = client.post(
            "/drizzlego/data",
            content=b"not json",
            headers={"content-type": "application/json"},
        )

        assert resp.status_code == 400
        assert resp.headers["content-type"].startswith("text/plain")
        assert "Expecting value" in resp.text
        assert fake_datastore.rows == {}
        assert fake_datastore.statements == []

    def test_empty_body(self, client, fake_datastore):
        resp = client.post("/drizzlego/data")

        assert resp.status_code == 400
        assert fake_datastore.rows == {}

    def test_json_string_instead_of_object(self, client, fake_datastore):
        resp = client.post("/drizzlego/data", json="not json")

        assert resp.status_code == 400
        assert fake_datastore.rows == {}

    def test_invalid_utf8(self, client, fake_datastore):
        resp = client.post("/drizzlego/data", content=b"\xff\xfe")

        assert resp.status_code == 400
        assert fake_datastore.rows == {}

    def test_number_for_string_field(self, client, fake_datastore):
        resp = client.post("/drizzlego/data", json={"id": 5, "name": "Ada"})

        assert resp.status_code == 400
        assert "id" in resp.text
        assert fake_datastore.rows == {}

    def test_generic_message_when_details_hidden(self, settings, fake_datastore, readiness):
        hidden = settings.model_copy(update={"EXPOSE_ERROR_DETAILS": False})
        app = create_app(hidden, datastore=fake_datastore, readiness=readiness)

        with TestClient(app) as test_client:
            resp = test_client.post("/drizzlego/data", content=b"{")

        assert resp.status_code == 400
        assert resp.text == "Bad Request"


# =============================================================================
# Insert Failures
# =============================================================================

class TestInsertErrors:
    """Tests for database-side failures."""

    def test_duplicate_id(self, client, fake_datastore):
        first = client.post("/drizzlego/data", json={"id": "1", "name": "Ada"})
        second = client.post("/drizzlego/data", json={"id": "1", "name": "Impostor"})

        assert first.status_code == 201
        assert second.status_code == 500
        assert "duplicate key" in second.text
        assert second.headers["content-type"].startswith("text/plain")
        assert fake_datastore.rows == {"1": "Ada"}

    def test_database_down(self, client, fake_datastore):
        fake_datastore.reachable = False

        resp = client.post("/drizzlego/data", json={"id": "9", "name": "Ada"})

        assert resp.status_code == 500
        assert resp.text == "connection refused"

    def test_generic_message_when_details_hidden(self, settings, fake_datastore, readiness):
        fake_datastore.rows["1"] = "Ada"
        hidden = settings.model_copy(update={"EXPOSE_ERROR_DETAILS": False})
        app = create_app(hidden, datastore=fake_datastore, readiness=readiness)

        with TestClient(app) as test_client:
            resp = test_client.post("/drizzlego/data", json={"id": "1", "name": "Ada"})

        assert resp.status_code == 500
        assert resp.text == "Internal Server Error"
        assert "duplicate" not in resp.text

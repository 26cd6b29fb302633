"""
Tests for the Flask REST API.
"""
import pytest
from unittest.mock import Mock

from research_memory.app import ResearchMemoryApp
from research_memory.config import ResearchMemoryConfig
from research_memory.exceptions import StoreUnavailableError
from research_memory.http_api import create_app
from research_memory.storage import InMemoryKeyValueStore, KeyValueStore, VectorIndex


def build_client(store, rate_limit_enabled=False, rate_limit="60 per minute"):
    config = ResearchMemoryConfig(rate_limit_enabled=rate_limit_enabled, rate_limit=rate_limit)
    memory_app = ResearchMemoryApp(config, store=store, vector_index=Mock(spec=VectorIndex))
    memory_app.initialize()
    app = create_app(memory_app)
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def client():
    return build_client(InMemoryKeyValueStore({"Deep Learning": "An introduction..."}))


class TestHttpApi:
    """Tests for the tool endpoints."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.get_json() == {"status": "ok", "store": True}

    def test_list_tools(self, client):
        response = client.get("/tools")

        names = {tool["name"] for tool in response.get_json()}
        assert "get-research-paper" in names
        assert "search-memory" in names

    def test_get_paper_fuzzy(self, client):
        response = client.post("/tools/get-research-paper", json={"arguments": {"title": "Deep Leaning"}})

        assert response.status_code == 200
        assert response.get_json() == {
            "text": "Found closest match 'Deep Learning' (distance: 1): An introduction..."
        }

    def test_no_match_is_not_an_error(self, client):
        response = client.post("/tools/get-research-paper", json={"arguments": {"title": "AIMLNLP"}})

        assert response.status_code == 200
        assert response.get_json()["text"] == "No research paper found matching 'AIMLNLP'"

    def test_non_string_summarization_is_stored_empty(self, client):
        response = client.post(
            "/tools/set-new-research-paper",
            json={"arguments": {"title": "Draft", "summarization": 42}},
        )

        assert response.status_code == 200
        assert response.get_json() == {"text": "Successful update of the knowledge base"}

    def test_unknown_tool(self, client):
        response = client.post("/tools/drop-database", json={"arguments": {}})

        assert response.status_code == 404

    def test_missing_title_is_bad_request(self, client):
        response = client.post("/tools/get-research-paper", json={"arguments": {}})

        assert response.status_code == 400

    def test_non_object_body_is_bad_request(self, client):
        response = client.post("/tools/get-research-paper", data="title", content_type="text/plain")

        assert response.status_code == 400

    def test_store_failure_is_service_unavailable(self):
        store = Mock(spec=KeyValueStore)
        store.get.side_effect = StoreUnavailableError("error retrieving key 'x': connection refused")
        client = build_client(store)

        response = client.post("/tools/get-research-paper", json={"arguments": {"title": "x"}})

        assert response.status_code == 503
        assert "connection refused" in response.get_json()["error"]

    def test_rate_limit(self):
        client = build_client(InMemoryKeyValueStore(), rate_limit_enabled=True, rate_limit="2 per minute")

        statuses = [client.get("/tools").status_code for _ in range(3)]

        assert statuses == [200, 200, 429]

"""
Integration tests for the FastAPI routes.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

import main
from config import config
from sqlviz import llm_client
from sqlviz.llm_client import GENERIC_SERVICE_MESSAGE


@pytest.fixture
def client():
    with TestClient(main.app) as c:
        yield c


class TestCatalogRoutes:

    def test_list_topics(self, client):
        resp = client.get("/api/topics")
        assert resp.status_code == 200
        topics = resp.json()["topics"]
        assert len(topics) == 14
        assert topics[0] == "SELECT"

    def test_get_topic(self, client):
        data = client.get("/api/topics/WHERE").json()
        assert data["examples"] == ["Filter with a string value", "Filter with a numeric value"]
        assert data["syntax"].startswith("SELECT")

    def test_unknown_topic(self, client):
        assert client.get("/api/topics/HAVING").status_code == 404


class TestPlaybackRoutes:

    def test_initial_state(self, client):
        data = client.get("/api/state").json()
        assert data["topic"] == "SELECT"
        assert data["example"] == 0
        assert data["revealed"] == []

    def test_select_where_numeric(self, client):
        data = client.post("/api/select", json={"topic": "WHERE", "example": 1}).json()
        assert data["title"] == "Filter with a numeric value"
        assert len(data["steps"]) == 2
        result = data["steps"][1]["tables"][0]
        assert [r["values"]["OrderID"] for r in result["rows"]] == [101, 104]
        assert all(r["highlight"] for r in result["rows"])
        assert data["revealed"] == []

    def test_select_errors(self, client):
        assert client.post("/api/select", json={"topic": "HAVING"}).status_code == 404
        assert client.post("/api/select", json={"topic": "WHERE", "example": 9}).status_code == 404

    def test_failed_select_leaves_state_unchanged(self, client):
        client.post("/api/select", json={"topic": "CTE"})
        before = client.get("/api/state").json()
        assert client.post("/api/select", json={"topic": "WHERE", "example": 9}).status_code == 404
        assert client.get("/api/state").json() == before

    def test_reveal_is_monotonic_and_resets(self, client):
        steps = client.post("/api/select", json={"topic": "CTE"}).json()["steps"]
        first, second = steps[0]["key"], steps[1]["key"]

        resp = client.post("/api/reveal", json={"entries": [{"key": first, "ratio": 0.5}]})
        assert resp.json()["revealed"] == [0]

        resp = client.post("/api/reveal", json={"entries": [
            {"key": first, "ratio": 0.0},
            {"key": second, "ratio": 0.1},
        ]})
        assert resp.json()["revealed"] == [0]

        client.post("/api/select", json={"topic": "CTE", "example": 0})
        assert client.get("/api/state").json()["revealed"] == []

    def test_reveal_rejects_bad_ratio(self, client):
        resp = client.post("/api/reveal", json={"entries": [{"key": "x", "ratio": 1.5}]})
        assert resp.status_code == 422


class TestExplainerRoute:

    def test_empty_query(self, client):
        with patch("sqlviz.explainer.call_llm") as mock_llm:
            data = client.post("/api/explainer", json={"query": "  "}).json()
        assert data == {"explanation": None, "error": "Please enter a SQL query."}
        mock_llm.assert_not_called()

    def test_formatted_explanation(self, client):
        with patch("sqlviz.explainer.call_llm", return_value="**Bold** text"):
            data = client.post("/api/explainer", json={"query": "SELECT 1;"}).json()
        assert data == {"explanation": "<p><strong>Bold</strong> text</p>", "error": None}

    def test_blocked_response_becomes_inline_error(self, client, monkeypatch):
        monkeypatch.setattr(config, "LLM_API_KEY", "test-key")
        llm = MagicMock()
        llm.chat.completions.create.return_value = SimpleNamespace(choices=[])
        llm_client.reset_client()
        try:
            with patch("sqlviz.llm_client.OpenAI", return_value=llm):
                resp = client.post("/api/explainer", json={"query": "SELECT 1;"})
        finally:
            llm_client.reset_client()
        assert resp.status_code == 200
        assert resp.json() == {
            "explanation": None,
            "error": f"An error occurred: {GENERIC_SERVICE_MESSAGE}",
        }


class TestPage:

    def test_index_renders_visualizer(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        assert "Interactive SQL Visualizer" in resp.text
        assert 'data-step-index="0"' in resp.text
        assert "threshold: 0.3" in resp.text

    def test_explainer_tab(self, client):
        resp = client.get("/", params={"tab": "explainer"})
        assert "Explain Your SQL with AI" in resp.text
        assert 'data-tab="explainer" role="tab"' in resp.text
        assert '<section id="visualizer" hidden>' in resp.text

"""Tests for the FastAPI endpoints with PokeAPI replaced by an offline fake."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from poke_team import web_server
from poke_team.analysis import TeamRecommendationService
from poke_team.clients import UpstreamUnavailableError
from poke_team.services import TeamBuilderService


@pytest.fixture
def client(monkeypatch, fake_pokeapi) -> TestClient:
    service = TeamBuilderService(
        recommender=TeamRecommendationService(pokeapi_client=fake_pokeapi, max_workers=2),
    )
    monkeypatch.setattr(web_server, "_pokeapi", fake_pokeapi)
    monkeypatch.setattr(web_server, "_service", service)
    return TestClient(web_server.app)


def test_root_serves_html(client) -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert "Poke-Team" in response.text


def test_analyze_team(client) -> None:
    response = client.post("/api/analyze_team", json={"pokemon": ["charizard", "9", "venusaur"]})

    assert response.status_code == 200
    result = response.json()["result"]
    assert result["weakness_report"]["critical_weaknesses"][0]["type"] == "electric"
    assert result["analysis"]["grade"] == "S"


def test_unknown_pokemon_is_404(client) -> None:
    response = client.post("/api/analyze_team", json={"pokemon": ["missingno"]})
    assert response.status_code == 404


def test_more_than_six_is_rejected(client) -> None:
    response = client.post("/api/analyze_team", json={"pokemon": ["6"] * 7})
    assert response.status_code == 422


def test_upstream_failure_is_502(client, monkeypatch, fake_pokeapi) -> None:
    def broken(name_or_id):
        raise UpstreamUnavailableError("PokeAPI timed out")

    monkeypatch.setattr(fake_pokeapi, "get_pokemon", broken)
    response = client.get("/api/pokemon/6")
    assert response.status_code == 502


def test_recommendations_for_empty_team(client) -> None:
    response = client.post("/api/recommendations", json={"pokemon": []})

    assert response.status_code == 200
    result = response.json()["result"]
    assert [rec["pokemon"]["name"] for rec in result] == ["charmander"]
    assert result[0]["score"] == 85


def test_pokemon_data_payload(client) -> None:
    response = client.get("/api/pokemon/6")

    assert response.status_code == 200
    result = response.json()["result"]
    assert result["name"] == "charizard"
    assert result["stat_total"] == 534
    assert set(result["type_colors"]) == {"fire", "flying"}


def test_type_matchup(client) -> None:
    response = client.get("/api/type_matchup", params={"attacker_type": "Fire", "defender_type": "grass"})
    assert response.json() == {"attacker_type": "fire", "defender_type": "grass", "multiplier": 2.0}


def test_type_profile(client) -> None:
    response = client.get("/api/type_profile", params=[("types", "water"), ("types", "ground")])
    assert response.json()["result"]["weaknesses"] == ["grass"]


def test_search(client) -> None:
    response = client.get("/api/search", params={"q": "char"})
    assert sorted(p["name"] for p in response.json()["result"]) == ["charizard", "charmander"]

"""Tests for the PokeAPI client using a fake requests session."""

from __future__ import annotations

import pytest
import requests

from poke_team.clients import NotFoundError, PokeAPIClient, UpstreamUnavailableError
from poke_team.config import Settings

BASE = "https://pokeapi.test/api/v2"


class FakeResponse:
    def __init__(self, status_code: int, payload=None) -> None:
        self.status_code = status_code
        self._payload = payload

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if self._payload is None:
            raise ValueError("no JSON")
        return self._payload


class FakeSession:
    def __init__(self, routes) -> None:
        self.routes = routes
        self.requested: list[str] = []

    def get(self, url, timeout=None, headers=None):
        self.requested.append(url)
        endpoint = url[len(BASE) + 1 :]
        route = self.routes.get(endpoint)
        if route is None:
            return FakeResponse(404)
        if isinstance(route, FakeResponse):
            return route
        return FakeResponse(200, route)


def _pokemon_payload(pokemon_id: int, name: str, types):
    return {
        "id": pokemon_id,
        "name": name,
        # Slots deliberately out of order.
        "types": [
            {"slot": index + 1, "type": {"name": type_name}}
            for index, type_name in reversed(list(enumerate(types)))
        ],
        "stats": [
            {"base_stat": 78, "stat": {"name": "hp"}},
            {"base_stat": 84, "stat": {"name": "attack"}},
            {"base_stat": 100, "stat": {"name": "speed"}},
        ],
        "abilities": [{"ability": {"name": "blaze"}}],
        "sprites": {"front_default": "front.png", "other": {}},
        "height": 17,
        "weight": 905,
    }


def _client(routes, **kwargs) -> tuple[PokeAPIClient, FakeSession]:
    session = FakeSession(routes)
    client = PokeAPIClient(
        session=session,
        settings=Settings(base_url=BASE),
        **kwargs,
    )
    return client, session


def test_parses_pokemon_payload() -> None:
    client, _ = _client({"pokemon/6": _pokemon_payload(6, "charizard", ["fire", "flying"])})
    pokemon = client.get_pokemon(6)

    assert pokemon.name == "charizard"
    assert pokemon.types == ["fire", "flying"]
    assert pokemon.stat("speed") == 100
    assert pokemon.stat("defense") == 0
    assert pokemon.abilities == ["blaze"]
    assert pokemon.image_url.endswith("/official-artwork/6.png")


def test_digit_strings_use_the_id_endpoint() -> None:
    client, session = _client({"pokemon/6": _pokemon_payload(6, "charizard", ["fire"])})
    client.get_pokemon(" 6 ")
    assert session.requested == [f"{BASE}/pokemon/6"]


def test_names_are_slugified() -> None:
    client, session = _client({"pokemon/mr-mime": _pokemon_payload(122, "mr-mime", ["psychic"])})
    assert client.get_pokemon("Mr. Mime").id == 122
    assert session.requested == [f"{BASE}/pokemon/mr-mime"]


def test_responses_are_cached_within_ttl() -> None:
    client, session = _client({"pokemon/6": _pokemon_payload(6, "charizard", ["fire"])})
    client.get_pokemon_by_id(6)
    client.get_pokemon_by_id(6)
    assert len(session.requested) == 1


def test_zero_ttl_disables_cache() -> None:
    client, session = _client(
        {"pokemon/6": _pokemon_payload(6, "charizard", ["fire"])}, cache_ttl=0
    )
    client.get_pokemon_by_id(6)
    client.get_pokemon_by_id(6)
    assert len(session.requested) == 2


def test_missing_resource_raises_not_found() -> None:
    client, _ = _client({})
    with pytest.raises(NotFoundError):
        client.get_pokemon("missingno")


def test_server_error_raises_upstream_unavailable() -> None:
    client, _ = _client({"pokemon/6": FakeResponse(500)})
    with pytest.raises(UpstreamUnavailableError):
        client.get_pokemon_by_id(6)


def test_invalid_json_raises_upstream_unavailable() -> None:
    client, _ = _client({"pokemon/6": FakeResponse(200, None)})
    with pytest.raises(UpstreamUnavailableError):
        client.get_pokemon_by_id(6)


def test_network_failure_raises_upstream_unavailable() -> None:
    class BrokenSession:
        def get(self, url, timeout=None, headers=None):
            raise requests.ConnectionError("offline")

    client = PokeAPIClient(session=BrokenSession(), settings=Settings(base_url=BASE))
    with pytest.raises(UpstreamUnavailableError):
        client.get_pokemon_by_id(6)


def test_search_prefers_exact_match() -> None:
    client, session = _client({"pokemon/pikachu": _pokemon_payload(25, "pikachu", ["electric"])})
    assert [p.name for p in client.search_pokemon("Pikachu")] == ["pikachu"]
    assert len(session.requested) == 1


def test_search_falls_back_to_substring_matches() -> None:
    names = ["bulbasaur", "ivysaur", "venusaur", "charmander"] + [f"saurmon{i}" for i in range(12)]
    routes = {
        "pokemon?limit=1000&offset=0": {
            "count": len(names),
            "results": [{"name": name, "url": f"{BASE}/pokemon/{name}/"} for name in names],
        }
    }
    for index, name in enumerate(names):
        routes[f"pokemon/{name}"] = _pokemon_payload(index + 1, name, ["grass"])
    client, _ = _client(routes)

    found = client.search_pokemon("saur")
    assert len(found) == 10
    assert [p.name for p in found[:3]] == ["bulbasaur", "ivysaur", "venusaur"]


def test_species_uses_english_flavor_text() -> None:
    client, _ = _client(
        {
            "pokemon-species/6": {
                "id": 6,
                "name": "charizard",
                "flavor_text_entries": [
                    {"flavor_text": "Crache du feu", "language": {"name": "fr"}},
                    {"flavor_text": "Spits fire that\nis hot\x0cenough.", "language": {"name": "en"}},
                ],
                "genera": [{"genus": "Flame Pokémon", "language": {"name": "en"}}],
            }
        }
    )
    species = client.get_pokemon_species(6)
    assert species.flavor_text == "Spits fire that is hot enough."
    assert species.genus == "Flame Pokémon"


def test_species_without_english_text() -> None:
    client, _ = _client({"pokemon-species/1": {"id": 1, "name": "bulbasaur"}})
    assert client.get_pokemon_species(1).flavor_text == "No description available."


def _move_payload(move_id: int, name: str, type_name: str, effect=None):
    payload = {
        "id": move_id,
        "name": name,
        "type": {"name": type_name},
        "damage_class": {"name": "physical"},
        "power": 75,
        "accuracy": 100,
        "pp": 15,
        "priority": 0,
        "effect_entries": [],
        "flavor_text_entries": [],
    }
    if effect:
        payload["effect_entries"] = [{"short_effect": effect, "language": {"name": "en"}}]
    return payload


def test_move_parsing_and_display_name() -> None:
    client, _ = _client(
        {"move/thunder-punch": _move_payload(9, "thunder-punch", "electric", "May paralyze.")}
    )
    move = client.get_move("Thunder Punch")

    assert move.display_name == "Thunder Punch"
    assert move.effect == "May paralyze."
    assert move.description == "No description available."


def test_move_without_effect_text() -> None:
    client, _ = _client({"move/1": _move_payload(1, "pound", "normal")})
    assert client.get_move(1).effect == "No effect description available."


def test_moves_by_type_filters_the_scanned_moves() -> None:
    names = ["pound", "ember", "thunder-punch", "flamethrower"]
    routes = {
        "move?limit=1000&offset=0": {
            "count": 4,
            "results": [{"name": name, "url": ""} for name in names],
        },
        "move/pound": _move_payload(1, "pound", "normal"),
        "move/ember": _move_payload(52, "ember", "fire"),
        "move/thunder-punch": _move_payload(9, "thunder-punch", "electric"),
        "move/flamethrower": _move_payload(53, "flamethrower", "fire"),
    }
    client, _ = _client(routes)
    assert [move.name for move in client.get_moves_by_type("Fire")] == ["ember", "flamethrower"]


def test_settings_from_env(monkeypatch) -> None:
    monkeypatch.setenv("POKEAPI_BASE_URL", "http://localhost:9000/api/v2/")
    monkeypatch.setenv("POKEAPI_CACHE_TTL", "5")
    monkeypatch.setenv("POKE_TEAM_MAX_WORKERS", "0")
    settings = Settings.from_env()

    assert settings.base_url == "http://localhost:9000/api/v2"
    assert settings.cache_ttl == 5
    assert settings.max_workers == 1


def test_settings_reject_non_integer(monkeypatch) -> None:
    monkeypatch.setenv("POKEAPI_TIMEOUT", "soon")
    with pytest.raises(ValueError):
        Settings.from_env()


def test_malformed_payload_raises_upstream_unavailable() -> None:
    # A 200 response missing the id and with a broken types entry.
    client, _ = _client({"pokemon/6": {"name": "charizard", "types": [{"slot": 1}]}})
    with pytest.raises(UpstreamUnavailableError) as excinfo:
        client.get_pokemon_by_id(6)
    assert isinstance(excinfo.value.__cause__, KeyError)

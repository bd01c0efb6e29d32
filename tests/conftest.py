"""Shared fixtures: a small offline Pokedex and a fake PokeAPI client."""

from __future__ import annotations

from typing import Dict, List

import pytest

from poke_team.clients import NotFoundError
from poke_team.models import Pokemon

STAT_ORDER = ("hp", "attack", "defense", "special-attack", "special-defense", "speed")

# id: (name, types, base stats in STAT_ORDER)
POKEDEX = {
    3: ("venusaur", ["grass", "poison"], (80, 82, 83, 100, 100, 80)),
    4: ("charmander", ["fire"], (39, 52, 43, 60, 50, 65)),
    6: ("charizard", ["fire", "flying"], (78, 84, 78, 109, 85, 100)),
    9: ("blastoise", ["water"], (79, 83, 100, 85, 105, 78)),
    25: ("pikachu", ["electric"], (35, 55, 40, 50, 50, 90)),
    65: ("alakazam", ["psychic"], (55, 50, 45, 135, 95, 120)),
    76: ("golem", ["rock", "ground"], (80, 120, 130, 55, 65, 45)),
    105: ("marowak", ["ground"], (60, 80, 110, 50, 80, 45)),
    113: ("chansey", ["normal"], (250, 5, 5, 35, 105, 50)),
    135: ("jolteon", ["electric"], (65, 65, 60, 110, 95, 130)),
    149: ("dragonite", ["dragon", "flying"], (91, 134, 95, 100, 100, 80)),
    242: ("blissey", ["normal"], (255, 10, 10, 75, 135, 55)),
    445: ("garchomp", ["dragon", "ground"], (108, 130, 95, 80, 85, 102)),
}


def build_pokemon(pokemon_id: int, name: str, types: List[str], stats) -> Pokemon:
    return Pokemon(
        id=pokemon_id,
        name=name,
        types=list(types),
        stats=dict(zip(STAT_ORDER, stats)),
    )


class FakePokeAPI:
    def __init__(self, catalog: Dict[int, Pokemon]) -> None:
        self.catalog = catalog
        self.calls: List[int] = []

    def get_pokemon_by_id(self, pokemon_id: int) -> Pokemon:
        self.calls.append(pokemon_id)
        if pokemon_id not in self.catalog:
            raise NotFoundError(f"pokemon/{pokemon_id}")
        return self.catalog[pokemon_id]

    def get_pokemon(self, name_or_id) -> Pokemon:
        if str(name_or_id).isdigit():
            return self.get_pokemon_by_id(int(name_or_id))
        for pokemon in self.catalog.values():
            if pokemon.name == str(name_or_id).lower():
                return pokemon
        raise NotFoundError(f"pokemon/{name_or_id}")

    def search_pokemon(self, query: str) -> List[Pokemon]:
        return [p for p in self.catalog.values() if query.lower() in p.name]


@pytest.fixture
def pokedex() -> Dict[int, Pokemon]:
    return {
        pokemon_id: build_pokemon(pokemon_id, name, types, stats)
        for pokemon_id, (name, types, stats) in POKEDEX.items()
    }


@pytest.fixture
def fake_pokeapi(pokedex) -> FakePokeAPI:
    return FakePokeAPI(pokedex)


@pytest.fixture
def make_pokemon():
    def _make(
        pokemon_id: int = 10000,
        name: str = "testmon",
        types=("normal",),
        hp: int = 80,
        attack: int = 80,
        defense: int = 80,
        special_attack: int = 80,
        special_defense: int = 80,
        speed: int = 80,
    ) -> Pokemon:
        return build_pokemon(
            pokemon_id,
            name,
            list(types),
            (hp, attack, defense, special_attack, special_defense, speed),
        )

    return _make

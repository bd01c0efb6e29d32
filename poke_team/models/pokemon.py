"""Snapshots of PokeAPI resources consumed by the team tools."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

STAT_NAMES = ("hp", "attack", "defense", "special-attack", "special-defense", "speed")

OFFICIAL_ARTWORK_URL = (
    "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon/"
    "other/official-artwork/{id}.png"
)


def pokemon_image_url(pokemon_id: int) -> str:
    return OFFICIAL_ARTWORK_URL.format(id=pokemon_id)


def _english(entries: List[Dict[str, Any]], key: str) -> Optional[str]:
    for entry in entries:
        if (entry.get("language") or {}).get("name") == "en" and entry.get(key):
            return entry[key]
    return None


@dataclass(slots=True)
class Pokemon:
    """Read-only view of a PokeAPI ``pokemon`` resource."""

    id: int
    name: str
    types: List[str] = field(default_factory=list)
    stats: Dict[str, int] = field(default_factory=dict)
    sprites: Dict[str, Optional[str]] = field(default_factory=dict)
    abilities: List[str] = field(default_factory=list)
    height: Optional[int] = None
    weight: Optional[int] = None
    base_experience: Optional[int] = None

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "Pokemon":
        slots = sorted(payload.get("types", []), key=lambda slot: slot.get("slot", 0))
        sprites = payload.get("sprites") or {}
        other = sprites.get("other") or {}
        return cls(
            id=int(payload["id"]),
            name=payload.get("name", ""),
            types=[slot["type"]["name"] for slot in slots],
            stats={
                entry["stat"]["name"]: entry["base_stat"]
                for entry in payload.get("stats", [])
            },
            sprites={
                "front_default": sprites.get("front_default"),
                "front_shiny": sprites.get("front_shiny"),
                "official_artwork": (other.get("official-artwork") or {}).get("front_default"),
                "dream_world": (other.get("dream_world") or {}).get("front_default"),
            },
            abilities=[
                entry["ability"]["name"] for entry in payload.get("abilities", [])
            ],
            height=payload.get("height"),
            weight=payload.get("weight"),
            base_experience=payload.get("base_experience"),
        )

    def stat(self, name: str) -> int:
        return self.stats.get(name, 0)

    @property
    def stat_total(self) -> int:
        return sum(self.stats.values())

    @property
    def offense(self) -> int:
        """Higher of the two attacking stats."""
        return max(self.stat("attack"), self.stat("special-attack"))

    @property
    def bulk(self) -> float:
        """Mean of HP, Defense and Special Defense."""
        return (self.stat("hp") + self.stat("defense") + self.stat("special-defense")) / 3

    @property
    def image_url(self) -> str:
        return self.sprites.get("official_artwork") or pokemon_image_url(self.id)


@dataclass(slots=True)
class PokemonSpecies:
    id: int
    name: str
    flavor_text: str = "No description available."
    genus: Optional[str] = None
    evolution_chain_url: Optional[str] = None

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "PokemonSpecies":
        text = _english(payload.get("flavor_text_entries", []), "flavor_text")
        return cls(
            id=int(payload["id"]),
            name=payload.get("name", ""),
            flavor_text=" ".join(text.split()) if text else "No description available.",
            genus=_english(payload.get("genera", []), "genus"),
            evolution_chain_url=(payload.get("evolution_chain") or {}).get("url"),
        )


@dataclass(slots=True)
class Move:
    """Subset of the PokeAPI ``move`` resource shown in move listings."""

    id: int
    name: str
    type: Optional[str] = None
    damage_class: Optional[str] = None
    power: Optional[int] = None
    accuracy: Optional[int] = None
    pp: Optional[int] = None
    priority: int = 0
    effect: str = "No effect description available."
    description: str = "No description available."

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "Move":
        effects = payload.get("effect_entries", [])
        effect = _english(effects, "short_effect") or _english(effects, "effect")
        flavor = _english(payload.get("flavor_text_entries", []), "flavor_text")
        return cls(
            id=int(payload["id"]),
            name=payload.get("name", ""),
            type=(payload.get("type") or {}).get("name"),
            damage_class=(payload.get("damage_class") or {}).get("name"),
            power=payload.get("power"),
            accuracy=payload.get("accuracy"),
            pp=payload.get("pp"),
            priority=payload.get("priority", 0),
            effect=effect or "No effect description available.",
            description=flavor.replace("\n", " ") if flavor else "No description available.",
        )

    @property
    def display_name(self) -> str:
        return format_move_name(self.name)


def format_move_name(name: str) -> str:
    """``thunder-punch`` -> ``Thunder Punch``."""

    return " ".join(word[:1].upper() + word[1:] for word in name.split("-"))


@dataclass(slots=True)
class NamedResource:
    name: str
    url: str


@dataclass(slots=True)
class ResourcePage:
    """One page of a PokeAPI list endpoint."""

    count: int
    results: List[NamedResource] = field(default_factory=list)
    next: Optional[str] = None
    previous: Optional[str] = None

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "ResourcePage":
        return cls(
            count=payload.get("count", 0),
            results=[
                NamedResource(name=item["name"], url=item["url"])
                for item in payload.get("results", [])
            ],
            next=payload.get("next"),
            previous=payload.get("previous"),
        )

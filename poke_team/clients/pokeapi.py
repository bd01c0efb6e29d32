"""Lightweight wrapper around PokeAPI for Pokemon, species and move data."""

from __future__ import annotations

import re
import time
from threading import Lock
from typing import Any, Dict, List, Optional, Union

import requests

from ..config import Settings
from ..models import Move, Pokemon, PokemonSpecies, ResourcePage

SEARCH_SCAN_LIMIT = 1000
SEARCH_RESULT_LIMIT = 10
MOVES_BY_TYPE_SCAN = 50


class PokeAPIClientError(RuntimeError):
    """Raised when the PokeAPI request fails."""


class NotFoundError(PokeAPIClientError):
    """The requested resource does not exist upstream (HTTP 404)."""


class UpstreamUnavailableError(PokeAPIClientError):
    """Network failure or a non-2xx response other than 404."""


class PokeAPIClient:
    """Small helper client with naive in-memory caching."""

    def __init__(
        self,
        *,
        session: Optional[requests.Session] = None,
        settings: Optional[Settings] = None,
        base_url: Optional[str] = None,
        cache_ttl: Optional[int] = None,
        timeout: Optional[int] = None,
        user_agent: Optional[str] = None,
    ) -> None:
        settings = settings or Settings.from_env()
        self.session = session or requests.Session()
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self.cache_ttl = settings.cache_ttl if cache_ttl is None else cache_ttl
        self.timeout = settings.timeout if timeout is None else timeout
        self.user_agent = user_agent or settings.user_agent
        self._cache: Dict[str, tuple[float, Any]] = {}
        self._cache_lock = Lock()

    # ------------------------------------------------------------------
    # Pokemon
    # ------------------------------------------------------------------
    def get_pokemon_by_id(self, pokemon_id: int) -> Pokemon:
        return self._parse(Pokemon, f"pokemon/{int(pokemon_id)}")

    def get_pokemon_by_name(self, name: str) -> Pokemon:
        return self._parse(Pokemon, f"pokemon/{self._slugify_name(name)}")

    def get_pokemon(self, name_or_id: Union[str, int]) -> Pokemon:
        if isinstance(name_or_id, int) or str(name_or_id).strip().isdigit():
            return self.get_pokemon_by_id(int(name_or_id))
        return self.get_pokemon_by_name(str(name_or_id))

    def get_pokemon_list(self, limit: int = 20, offset: int = 0) -> ResourcePage:
        return self._parse(ResourcePage, f"pokemon?limit={limit}&offset={offset}")

    def get_pokemon_species(self, pokemon_id: int) -> PokemonSpecies:
        return self._parse(PokemonSpecies, f"pokemon-species/{int(pokemon_id)}")

    def search_pokemon(self, query: str) -> List[Pokemon]:
        """Exact name match first, otherwise up to ten substring matches."""

        try:
            return [self.get_pokemon_by_name(query)]
        except NotFoundError:
            pass
        needle = query.strip().lower()
        page = self.get_pokemon_list(limit=SEARCH_SCAN_LIMIT)
        matches = [item.name for item in page.results if needle in item.name.lower()]
        return [self.get_pokemon_by_name(name) for name in matches[:SEARCH_RESULT_LIMIT]]

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------
    def get_move(self, name_or_id: Union[str, int]) -> Move:
        if isinstance(name_or_id, int):
            slug = str(name_or_id)
        else:
            slug = self._slugify_move(name_or_id)
        return self._parse(Move, f"move/{slug}")

    def get_move_list(self, limit: int = 20, offset: int = 0) -> ResourcePage:
        return self._parse(ResourcePage, f"move?limit={limit}&offset={offset}")

    def search_moves(self, query: str) -> List[Move]:
        try:
            return [self.get_move(query)]
        except NotFoundError:
            pass
        needle = query.strip().lower()
        page = self.get_move_list(limit=SEARCH_SCAN_LIMIT)
        matches = [item.name for item in page.results if needle in item.name.lower()]
        return [self.get_move(name) for name in matches[:SEARCH_RESULT_LIMIT]]

    def get_moves_by_type(self, type_name: str) -> List[Move]:
        """Moves of one type among the first entries of the move list."""

        wanted = self._slugify_type(type_name)
        page = self.get_move_list(limit=SEARCH_SCAN_LIMIT)
        moves = [self.get_move(item.name) for item in page.results[:MOVES_BY_TYPE_SCAN]]
        return [move for move in moves if move.type == wanted]

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _parse(self, model, endpoint: str):
        payload = self._get_json(endpoint)
        try:
            return model.from_api(payload)
        except (KeyError, TypeError, ValueError) as exc:
            raise UpstreamUnavailableError(f"Malformed payload from {endpoint}: {exc!r}") from exc

    def _get_json(self, endpoint: str) -> Dict[str, Any]:
        url = self._build_url(endpoint)
        now = time.time()
        with self._cache_lock:
            cached = self._cache.get(url)
        if cached and now - cached[0] < self.cache_ttl:
            return cached[1]

        try:
            response = self.session.get(
                url,
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
            )
        except requests.RequestException as exc:
            raise UpstreamUnavailableError(str(exc)) from exc

        if response.status_code == 404:
            raise NotFoundError(f"Not found: {endpoint}")
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            raise UpstreamUnavailableError(str(exc)) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise UpstreamUnavailableError(f"Invalid JSON from {url}") from exc
        with self._cache_lock:
            self._cache[url] = (now, payload)
        return payload

    def _build_url(self, endpoint: str) -> str:
        endpoint = endpoint.lstrip("/")
        return f"{self.base_url}/{endpoint}"

    @staticmethod
    def _slugify_name(name: str) -> str:
        slug = name.strip().lower()
        slug = re.sub(r"[\s\.]+", "-", slug)
        slug = slug.replace("'", "")
        slug = slug.replace(":", "")
        slug = slug.replace("%", "")
        slug = re.sub(r"[^a-z0-9\-]", "", slug)
        return slug

    @staticmethod
    def _slugify_type(type_name: str) -> str:
        return type_name.strip().lower().replace(" ", "-")

    @staticmethod
    def _slugify_move(move_name: str) -> str:
        return PokeAPIClient._slugify_name(move_name)

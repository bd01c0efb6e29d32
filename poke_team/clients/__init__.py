"""External data clients used by the team builder."""

from .pokeapi import (
    PokeAPIClient,
    PokeAPIClientError,
    NotFoundError,
    UpstreamUnavailableError,
)

__all__ = [
    "PokeAPIClient",
    "PokeAPIClientError",
    "NotFoundError",
    "UpstreamUnavailableError",
]

"""Exceptions raised while loading the Pokédex from PokéAPI.

``TransportError`` and ``ParseError`` describe what went wrong inside
the loader. Callers only ever see ``LoadError``: whatever the cause,
the presentation layer shows a single message and no partial data.
"""

from __future__ import annotations

from typing import Optional

LOAD_ERROR_MESSAGE = (
    "Could not reach the Pokémon server. Please try again later."
)


class CatalogError(Exception):
    """Base class for catalog loading failures."""


class TransportError(CatalogError):
    """A request failed at the network level or returned a non-2xx status."""

    def __init__(self, url: str, status_code: Optional[int] = None, detail: str = "") -> None:
        self.url = url
        self.status_code = status_code
        self.detail = detail
        if status_code is not None:
            message = f"GET {url} returned HTTP {status_code}"
        else:
            message = f"GET {url} failed"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class ParseError(CatalogError):
    """A response body did not have the expected shape."""


class LoadError(CatalogError):
    """The whole catalog load failed; carries the user-facing message."""

    def __init__(self, user_message: str = LOAD_ERROR_MESSAGE) -> None:
        self.user_message = user_message
        super().__init__(user_message)

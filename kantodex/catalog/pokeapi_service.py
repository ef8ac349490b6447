"""
PokéAPI integration for the Pokédex.  Loading happens in two stages:

* the listing endpoint (``/pokemon?limit=N``) returns lightweight
  ``{name, url}`` references;
* every reference's detail URL is then fetched concurrently and the
  listing reference plus detail body are mapped into a ``Pokemon``.

The load is all-or-nothing.  A failed request, a non-2xx status or a
body with an unexpected shape anywhere aborts the whole load with a
``LoadError``; no partial catalogue is ever returned and nothing is
retried.  ``build_pokemon()`` and ``parse_listing()`` are pure and can
be used on already-decoded JSON without any network access.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from .. import config
from .errors import CatalogError, LoadError, ParseError, TransportError
from .schemas import ListingReference, Pokemon


logger = logging.getLogger(__name__)

HEADERS = {
    "User-Agent": "kantodex/0.1 (+https://pokeapi.co)",
    "Accept": "application/json",
}


def new_client(timeout: Optional[float] = config.POKEAPI_TIMEOUT) -> httpx.AsyncClient:
    """Create the client used for a load.

    The connection pool has no upper bound so that every detail request
    of the fan-out can be in flight at the same time.  ``timeout`` is
    applied by httpx to each request phase; ``None`` (the default)
    leaves requests without a timeout.
    """
    return httpx.AsyncClient(
        headers=HEADERS,
        timeout=timeout,
        limits=httpx.Limits(max_connections=None, max_keepalive_connections=None),
        follow_redirects=True,
    )


async def _get_json(
    client: httpx.AsyncClient, url: str, params: Optional[Dict[str, Any]] = None
) -> Any:
    """GET ``url`` and return the decoded JSON body.

    Network errors and non-2xx responses become ``TransportError``; a
    body that is not JSON becomes ``ParseError``.
    """
    try:
        response = await client.get(url, params=params)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.error("Error fetching %s: %s", url, exc)
        raise TransportError(url, detail=str(exc)) from exc
    if not response.is_success:
        logger.warning(
            "PokéAPI request to %s returned status %s", url, response.status_code
        )
        raise TransportError(url, response.status_code)
    try:
        return response.json()
    except ValueError as exc:
        raise ParseError(f"{url} did not return a JSON body") from exc


def parse_listing(body: Any) -> List[ListingReference]:
    """Turn a listing body into references, keeping the listing order."""
    if not isinstance(body, dict) or not isinstance(body.get("results"), list):
        raise ParseError("listing body has no 'results' array")
    references: List[ListingReference] = []
    for position, item in enumerate(body["results"]):
        try:
            references.append(ListingReference.model_validate(item))
        except ValidationError as exc:
            raise ParseError(f"listing entry {position} is malformed: {exc}") from exc
    return references


def id_from_url(url: str) -> int:
    """Extract the numeric id from a detail URL.

    ``https://pokeapi.co/api/v2/pokemon/4/`` gives ``4``.
    """
    try:
        path = httpx.URL(url).path
    except httpx.InvalidURL as exc:
        raise ParseError(f"invalid detail url {url!r}") from exc
    segments = [part for part in path.split("/") if part]
    if not segments or not (segments[-1].isascii() and segments[-1].isdecimal()):
        raise ParseError(f"no numeric id in detail url {url!r}")
    pokemon_id = int(segments[-1])
    if pokemon_id <= 0:
        raise ParseError(f"non-positive id in detail url {url!r}")
    return pokemon_id


def _extract_types(detail: Dict[str, Any]) -> List[str]:
    slots = detail.get("types")
    if not isinstance(slots, list) or not slots:
        raise ParseError("detail body has no types")
    types: List[str] = []
    for slot in slots:
        type_info = slot.get("type") if isinstance(slot, dict) else None
        name = type_info.get("name") if isinstance(type_info, dict) else None
        if not isinstance(name, str) or not name:
            raise ParseError("detail body has a malformed type entry")
        types.append(name)
    return types


def _extract_image(detail: Dict[str, Any]) -> str:
    sprites = detail.get("sprites")
    if not isinstance(sprites, dict):
        raise ParseError("detail body has no sprites")
    other = sprites.get("other")
    artwork = other.get("official-artwork") if isinstance(other, dict) else None
    primary = artwork.get("front_default") if isinstance(artwork, dict) else None
    if isinstance(primary, str) and primary:
        return primary
    fallback = sprites.get("front_default")
    # Some forms have no sprite at all; the card then renders without one.
    return fallback if isinstance(fallback, str) else ""


def build_pokemon(reference: ListingReference, detail: Any) -> Pokemon:
    """Map a listing reference and its decoded detail body to a ``Pokemon``."""
    if not isinstance(detail, dict):
        raise ParseError(f"detail body for {reference.name!r} is not an object")
    try:
        return Pokemon(
            id=id_from_url(reference.url),
            name=reference.name,
            types=_extract_types(detail),
            image=_extract_image(detail),
        )
    except ValidationError as exc:
        raise ParseError(f"detail body for {reference.name!r} is invalid: {exc}") from exc


def _ensure_unique_ids(pokemon: List[Pokemon]) -> None:
    seen = set()
    for entry in pokemon:
        if entry.id in seen:
            raise ParseError(f"duplicate id {entry.id} in listing")
        seen.add(entry.id)


async def fetch_listing(
    client: httpx.AsyncClient, base_url: str, limit: int
) -> List[ListingReference]:
    body = await _get_json(client, f"{base_url}/pokemon", params={"limit": limit})
    return parse_listing(body)


async def fetch_details(
    client: httpx.AsyncClient, references: List[ListingReference]
) -> List[Any]:
    """Fetch every detail body concurrently and wait for all of them.

    Results come back in the order of ``references``.  If any request
    failed, the failure of the earliest reference in listing order is
    raised once every request has settled.
    """
    results = await asyncio.gather(
        *(_get_json(client, ref.url) for ref in references),
        return_exceptions=True,
    )
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return list(results)


async def load_pokemon(
    client: Optional[httpx.AsyncClient] = None,
    *,
    base_url: str = config.POKEAPI_BASE_URL,
    limit: int = config.POKEDEX_LIMIT,
) -> List[Pokemon]:
    """Load the whole Pokédex, in listing order.

    A client is created (and closed) when none is passed.  Any failure
    is logged and re-raised as a single ``LoadError``.
    """
    owns_client = client is None
    http = client if client is not None else new_client()
    try:
        references = await fetch_listing(http, base_url.rstrip("/"), limit)
        logger.info("PokéAPI listing returned %d references", len(references))
        details = await fetch_details(http, references)
        pokemon = [build_pokemon(ref, detail) for ref, detail in zip(references, details)]
        _ensure_unique_ids(pokemon)
    except CatalogError as exc:
        logger.error("Pokédex load failed: %s", exc)
        raise LoadError() from exc
    finally:
        if owns_client:
            await http.aclose()
    logger.info("Loaded %d Pokémon from %s", len(pokemon), base_url)
    return pokemon

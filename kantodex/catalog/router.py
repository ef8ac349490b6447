"""
Route definitions for the Pokédex API.

Endpoints under /api/pokedex:
- GET  /pokemon          : list Pokémon matching the text/type/invert filters
- GET  /pokemon/{id}     : get one Pokémon card
- GET  /types            : type options for the category selector
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, Query

from . import store
from .display import category_options, to_card
from .schemas import CategoryOption, FilteredPokemon, FilterState, PokemonCard

LOADING_MESSAGE = "The Pokédex is still loading."
DISABLED_MESSAGE = "The Pokédex load is disabled on this server."

router = APIRouter(prefix="/api/pokedex", tags=["pokedex"])


def _require_catalog() -> None:
    """Refuse to answer until a load has succeeded.

    A failed load surfaces its single user-facing message; there is no
    partial data to show in that case.
    """
    if store.is_load_disabled():
        raise HTTPException(status_code=503, detail=DISABLED_MESSAGE)
    if not store.is_loaded():
        raise HTTPException(status_code=503, detail=LOADING_MESSAGE)
    error = store.load_error()
    if error is not None:
        raise HTTPException(status_code=503, detail=error)


@router.get("/pokemon", response_model=FilteredPokemon)
def list_pokemon(
    q: str = Query(default="", description="Name or number"),
    category: str = Query(default="", alias="type", description="Only Pokémon of this type"),
    invert: bool = Query(default=False, description="Exclude matches instead"),
) -> FilteredPokemon:
    """
    Returns the visible Pokémon for the given filters.

    Empty ``q`` and ``type`` mean no constraint.  With ``invert`` set,
    each given criterion is negated separately: ``q=char&type=fire``
    returns Pokémon whose name/number does not contain "char" and that
    are not fire types.
    """
    _require_catalog()
    state = FilterState(search_text=q, selected_category=category, invert=invert)
    collection = store.list_pokemon()
    visible = store.apply_filters(collection, state)
    return FilteredPokemon(
        total=len(collection),
        count=len(visible),
        invert=invert,
        items=[to_card(p) for p in visible],
    )


@router.get("/pokemon/{pokemon_id}", response_model=PokemonCard)
def get_pokemon(pokemon_id: int) -> PokemonCard:
    _require_catalog()
    pokemon = store.get_pokemon(pokemon_id)
    if pokemon is None:
        raise HTTPException(status_code=404, detail="Pokémon not found")
    return to_card(pokemon)


@router.get("/types", response_model=List[CategoryOption])
def list_types() -> List[CategoryOption]:
    return category_options()

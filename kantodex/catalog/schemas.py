"""
Pydantic schema definitions for the Pokédex catalogue.

``Pokemon`` is the normalized record assembled by the loader from a
PokéAPI listing reference and its detail body. It is frozen: once the
catalogue is loaded nothing edits it. ``FilterState`` carries the
criteria chosen by the user, and ``PokemonCard``/``FilteredPokemon``
are the shapes returned to the front‑end.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ListingReference(BaseModel):
    """One entry of the PokéAPI listing: a name and its detail URL."""

    name: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)


class Pokemon(BaseModel):
    """A single catalogue entry.

    ``id`` comes from the detail URL of the listing reference, ``name``
    is the lowercase PokéAPI identifier and ``types`` keeps the order in
    which the API lists them. ``image`` points at the official artwork,
    or at the default sprite when no artwork exists.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., gt=0)
    name: str = Field(..., min_length=1)
    types: List[str] = Field(..., min_length=1)
    image: str = ""


class FilterState(BaseModel):
    """Criteria chosen by the user.

    Empty strings mean "no constraint". ``invert`` switches the engine
    to exclusion mode, where every active criterion is negated on its
    own before the results are combined.
    """

    search_text: str = ""
    selected_category: str = ""
    invert: bool = False


class PokemonCard(Pokemon):
    """A ``Pokemon`` with the display fields the card needs."""

    number: str
    display_name: str


class FilteredPokemon(BaseModel):
    """Result of ``GET /pokemon``.

    ``total`` is the size of the loaded catalogue and ``count`` the
    number of visible entries after filtering.
    """

    total: int
    count: int
    invert: bool
    items: List[PokemonCard]


class CategoryOption(BaseModel):
    value: str
    label: str


class CatalogStatus(BaseModel):
    status: str
    size: int = 0
    error: str = ""

"""
In-memory data store for the Pokédex.

The collection is filled once by the application lifespan after
``load_pokemon()`` succeeds, or the load error message is recorded
instead.  It is never edited afterwards: ``set_pokemon()`` swaps the
whole tuple in one assignment.  ``apply_filters()`` is the filter
engine; it is a pure function of a collection and a ``FilterState``.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .schemas import CatalogStatus, FilterState, Pokemon


_POKEMON: Tuple[Pokemon, ...] = ()
_BY_ID: Dict[int, Pokemon] = {}
_LOAD_ERROR: Optional[str] = None
_LOADED = False
_LOAD_DISABLED = False


def set_pokemon(entries: Iterable[Pokemon]) -> None:
    """Replace the collection with ``entries`` and mark the load as done."""
    global _POKEMON, _BY_ID, _LOAD_ERROR, _LOADED
    collection = tuple(entries)
    _BY_ID = {p.id: p for p in collection}
    _POKEMON = collection
    _LOAD_ERROR = None
    _LOADED = True


def set_load_error(message: str) -> None:
    """Record a failed load; the collection stays empty."""
    global _POKEMON, _BY_ID, _LOAD_ERROR, _LOADED
    _POKEMON = ()
    _BY_ID = {}
    _LOAD_ERROR = message
    _LOADED = True


def reset() -> None:
    """Forget any loaded data (used at shutdown and by tests)."""
    global _POKEMON, _BY_ID, _LOAD_ERROR, _LOADED, _LOAD_DISABLED
    _POKEMON = ()
    _BY_ID = {}
    _LOAD_ERROR = None
    _LOADED = False
    _LOAD_DISABLED = False


def set_load_disabled() -> None:
    """Record that no load will run; the collection stays empty."""
    global _LOAD_DISABLED
    _LOAD_DISABLED = True


def list_pokemon() -> Tuple[Pokemon, ...]:
    return _POKEMON


def get_pokemon(pokemon_id: int) -> Optional[Pokemon]:
    return _BY_ID.get(pokemon_id)


def load_error() -> Optional[str]:
    return _LOAD_ERROR


def is_loaded() -> bool:
    return _LOADED


def is_load_disabled() -> bool:
    return _LOAD_DISABLED and not _LOADED


def status() -> CatalogStatus:
    if is_load_disabled():
        return CatalogStatus(status="disabled")
    if not _LOADED:
        return CatalogStatus(status="loading")
    if _LOAD_ERROR is not None:
        return CatalogStatus(status="error", error=_LOAD_ERROR)
    return CatalogStatus(status="ready", size=len(_POKEMON))


def _matches_text(pokemon: Pokemon, text: str) -> bool:
    """Substring match on the lowercased name or the decimal id."""
    return text in pokemon.name.lower() or text in str(pokemon.id)


def _matches_category(pokemon: Pokemon, category: str) -> bool:
    return category in pokemon.types


def matches(pokemon: Pokemon, state: FilterState) -> bool:
    """Decide whether ``pokemon`` is visible under ``state``.

    Empty criteria are always satisfied.  In invert mode each active
    criterion is negated on its own and the two results are then
    combined, so a Pokémon is kept only when it matches neither active
    criterion.
    """
    text = state.search_text.lower()
    category = state.selected_category

    text_ok = True if text == "" else _matches_text(pokemon, text)
    category_ok = True if category == "" else _matches_category(pokemon, category)

    if state.invert:
        if text != "":
            text_ok = not text_ok
        if category != "":
            category_ok = not category_ok

    return text_ok and category_ok


def apply_filters(entities: Sequence[Pokemon], state: FilterState) -> List[Pokemon]:
    """Return the visible subset of ``entities`` in their original order."""
    return [p for p in entities if matches(p, state)]

"""Formatting helpers for Pokédex cards and the type selector."""

from __future__ import annotations

from typing import List

from .schemas import CategoryOption, Pokemon, PokemonCard

# Type names offered by the category selector, in PokéAPI order.
CATEGORY_VALUES = (
    "normal",
    "fire",
    "water",
    "electric",
    "grass",
    "ice",
    "fighting",
    "poison",
    "ground",
    "flying",
    "psychic",
    "bug",
    "rock",
    "ghost",
    "dragon",
    "dark",
    "steel",
    "fairy",
)


def format_dex_number(pokemon_id: int) -> str:
    """Zero-pad the id to three digits: ``4`` gives ``"#004"``.

    Longer ids are kept whole (``1000`` gives ``"#1000"``).
    """
    return f"#{pokemon_id:03d}"


def capitalize(value: str) -> str:
    """Upper-case the first character only; the rest is left as is."""
    return value[:1].upper() + value[1:]


def to_card(pokemon: Pokemon) -> PokemonCard:
    return PokemonCard(
        **pokemon.model_dump(),
        number=format_dex_number(pokemon.id),
        display_name=capitalize(pokemon.name),
    )


def category_options() -> List[CategoryOption]:
    return [CategoryOption(value=value, label=capitalize(value)) for value in CATEGORY_VALUES]

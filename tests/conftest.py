"""Shared fixtures for the Pokédex tests."""

from __future__ import annotations

import os

import pytest

os.environ.setdefault("POKEDEX_LOAD_ON_STARTUP", "0")

from kantodex.catalog import store  # noqa: E402
from kantodex.catalog.schemas import Pokemon  # noqa: E402


@pytest.fixture(autouse=True)
def reset_store():
    store.reset()
    yield
    store.reset()


@pytest.fixture
def sample_pokemon():
    return [
        Pokemon(id=1, name="bulbasaur", types=["grass", "poison"], image="bulbasaur.png"),
        Pokemon(id=4, name="charmander", types=["fire"], image="charmander.png"),
        Pokemon(id=5, name="charmeleon", types=["fire"], image="charmeleon.png"),
        Pokemon(id=7, name="squirtle", types=["water"], image="squirtle.png"),
        Pokemon(id=14, name="kakuna", types=["bug", "poison"], image="kakuna.png"),
        Pokemon(id=41, name="zubat", types=["poison", "flying"], image="zubat.png"),
    ]

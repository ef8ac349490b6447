"""Kantodex: an in-memory Pokédex browser backed by PokéAPI."""

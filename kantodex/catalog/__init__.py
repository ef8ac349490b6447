"""
Pokédex catalogue package.

The loader (``pokeapi_service``) fetches the PokéAPI listing and every
detail record once at startup, the store keeps the resulting
collection in memory, and the router exposes it filtered by free
text, type and an exclusion ("NOT") toggle.
"""

from .router import router as catalog_router  # noqa: F401

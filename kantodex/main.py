# kantodex/main.py
import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from . import config
from .catalog import catalog_router, store
from .catalog.errors import LoadError
from .catalog.pokeapi_service import load_pokemon
from .catalog.schemas import CatalogStatus


logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


async def load_catalog() -> None:
    """Run the loader once and record either the collection or the error."""
    try:
        pokemon = await load_pokemon()
    except LoadError as exc:
        store.set_load_error(exc.user_message)
        return
    store.set_pokemon(pokemon)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Requests are served while the load is still running.
    task = None
    if config.POKEDEX_LOAD_ON_STARTUP:
        task = asyncio.create_task(load_catalog())
    else:
        logger.info("Startup load disabled; the Pokédex stays empty")
        store.set_load_disabled()
    yield
    if task is not None:
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            logger.info("Pokédex load cancelled at shutdown")
    store.reset()


app = FastAPI(
    title="Kantodex",
    description=(
        "Pokédex browser: loads Pokémon from PokéAPI once and filters "
        "them by name, number and type, with an exclusion mode."
    ),
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(catalog_router)


# 🔹 Quick health check, also reports the catalogue load status
@app.get("/", response_model=CatalogStatus)
def health_check():
    return store.status()

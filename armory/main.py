"""Entry point. Loads game data, connects databases and wires routes.

Startup order matters: the content catalog, customization data and socket
bonus table are fully loaded and indexed before any route is registered, so
request handlers never observe a partially populated catalog.
"""
import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from armory.api.routes.character_routes import router as character_router, init_character_routes
from armory.domain.catalog import LookupTables
from armory.infrastructure.config import ArmoryConfig, load_config
from armory.infrastructure.database.connection import DatabaseRegistry
from armory.infrastructure.repositories.character_repository import SqlCharacterRepository
from armory.infrastructure.repositories.gamedata_repository import load_customization, load_game_data
from armory.infrastructure.repositories.world_repository import SqlWorldRepository

log = logging.getLogger("armory.startup")


def create_app(config: ArmoryConfig | None = None) -> FastAPI:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )

    log.info("Loading config...")
    config = config or load_config()

    log.info("Loading data files from %s...", config.data_dir)
    catalog = load_game_data(config.data_dir)
    definitions = load_customization(config.data_dir)

    log.info("Connecting to databases...")
    databases = DatabaseRegistry()
    world_repo = SqlWorldRepository(databases.connect_world(config.world_database_url))
    character_repos = {
        realm.name: SqlCharacterRepository(databases.connect_realm(realm.name, realm.database_url))
        for realm in config.realms
    }

    tables = LookupTables.build(catalog, world_repo.get_socket_bonuses())
    log.info("Lookup tables built: %s", tables.sizes())

    app = FastAPI(
        title="Armory",
        description="Read-only character profiles for game realms.",
        version="1.0.0",
    )
    app.add_middleware(GZipMiddleware, minimum_size=1024)

    _allowed = os.environ.get("ALLOWED_ORIGINS", "").strip()
    if _allowed:
        allow_origins = [o.strip() for o in _allowed.split(",") if o.strip()]
    else:
        allow_origins = ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    init_character_routes(character_repos, tables, definitions)
    app.include_router(character_router)

    @app.get("/health")
    def health():
        return {
            "status": "online",
            "realms": [realm.name for realm in config.realms],
            "catalog": catalog.sizes(),
            "customization_sets": len(definitions),
            "databases": databases.status(),
        }

    return app


if __name__ == "__main__":
    import uvicorn

    _config = load_config()
    uvicorn.run(
        "armory.main:create_app",
        factory=True,
        host=_config.host,
        port=_config.port,
    )

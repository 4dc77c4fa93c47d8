from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portal.api.routers import admin, auth, catalog, me, navigation, orders, tickets, vps
from portal.infrastructure.db.engine import create_schema, get_engine
from portal.infrastructure.db.seeds.seed_portal_defaults import seed_portal_defaults
from portal.shared.config import get_settings


logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


@asynccontextmanager
async def lifespan(_app: FastAPI):
    settings = get_settings()
    if settings.db_bootstrap and settings.postgres_dsn:
        engine = get_engine(settings.postgres_dsn)
        create_schema(engine)
        seed_portal_defaults(engine)
        logger.info("main: database bootstrapped")
    yield


def create_app() -> FastAPI:
    settings = get_settings()
    _configure_logging(settings.log_level)

    application = FastAPI(title="VPS Portal API", lifespan=lifespan)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials="*" not in settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    for module in (auth, me, catalog, orders, vps, tickets, navigation, admin):
        application.include_router(module.router)

    @application.get("/health")
    def health():
        return {"status": "ok"}

    return application


app = create_app()

from __future__ import annotations

import logging
from functools import lru_cache

from sqlalchemy import MetaData, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase


logger = logging.getLogger(__name__)

NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_N_name)s",
    "uq": "uq_%(table_name)s_%(column_0_N_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


@lru_cache(maxsize=4)
def get_engine(dsn: str) -> Engine:
    """Um engine por DSN; o pool e compartilhado entre requisicoes."""
    return create_engine(dsn, pool_pre_ping=True, pool_size=5, max_overflow=10)


def create_schema(engine: Engine) -> None:
    # Os modulos de modelos precisam estar importados para o metadata conhecer as tabelas.
    from portal.infrastructure.db.models import accounts, portal  # noqa: F401

    Base.metadata.create_all(engine)
    logger.info("engine: schema ready tables=%s", len(Base.metadata.tables))

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.engine import Connection, Engine


class SqlRepository:
    """Base dos repositorios SQL.

    Quando construido com `connection`, todas as operacoes usam essa conexao e
    participam da transacao aberta por quem a criou.
    """

    def __init__(self, engine: Engine, *, connection: Connection | None = None):
        self._engine = engine
        self._connection = connection

    @contextmanager
    def _read(self) -> Iterator[Connection]:
        if self._connection is not None:
            yield self._connection
            return
        with self._engine.connect() as conn:
            yield conn

    @contextmanager
    def _write(self) -> Iterator[Connection]:
        if self._connection is not None:
            yield self._connection
            return
        with self._engine.begin() as conn:
            yield conn


def owner_filter(column: str, owner_id: str | None) -> tuple[str, dict[str, str]]:
    if owner_id is None:
        return "", {}
    return f"AND {column} = :owner_id", {"owner_id": owner_id}

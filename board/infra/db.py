from __future__ import annotations

from pathlib import Path
from typing import Optional

from sqlalchemy import Engine, create_engine, make_url
from sqlalchemy.orm import Session, sessionmaker


engine: Optional[Engine] = None
SessionLocal: Optional[sessionmaker[Session]] = None


def init_engine(dsn: str) -> None:
    global engine
    if engine is None:
        url = make_url(dsn)
        # SQLite will not create missing parent directories
        if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
        engine = create_engine(url, echo=False)


def init_sessionmaker() -> None:
    global SessionLocal
    if SessionLocal is None:
        assert engine is not None, "Engine not initialized"
        SessionLocal = sessionmaker(engine, expire_on_commit=False)


def set_sqlite_pragmas() -> None:
    assert engine is not None
    if engine.url.get_backend_name() != "sqlite" or not engine.url.database:
        return
    with engine.begin() as conn:
        conn.exec_driver_sql("PRAGMA journal_mode=WAL;")


def dispose_engine() -> None:
    global engine, SessionLocal
    if engine is not None:
        engine.dispose()
    engine = None
    SessionLocal = None

from __future__ import annotations

import pytest

from board.core.i18n import I18N, Locale
from board.infra import db
from board.infra.migrate import migrate
from board.infra.store import MemoryPreferenceStore, SqlPreferenceStore


@pytest.fixture(autouse=True)
def store() -> MemoryPreferenceStore:
    """Fresh catalog and an empty in-memory preference store for every test."""
    I18N.load_locales()
    mem = MemoryPreferenceStore()
    I18N.configure(store=mem, default_locale=Locale.EN)
    return mem


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'data' / 'board.db'}"


@pytest.fixture
def sql_store(database_url):
    db.init_engine(database_url)
    db.init_sessionmaker()
    migrate()
    yield SqlPreferenceStore()
    db.dispose_engine()

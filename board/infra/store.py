"""Key-value stores backing persisted user preferences.

The localization layer only needs ``get``/``set`` by string key, so any object
with those two methods can stand in for the SQL-backed store.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from . import db
from .prefs_repo import PreferencesRepo

log = logging.getLogger(__name__)


class PreferenceStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryPreferenceStore:
    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class SqlPreferenceStore:
    """Preference store on top of the ``preferences`` table.

    Opens one short-lived session per call. Uses ``db.SessionLocal`` unless a
    session factory is passed explicitly.
    """

    def __init__(self, session_factory: Optional[sessionmaker[Session]] = None) -> None:
        self._factory = session_factory

    def _sessions(self) -> sessionmaker[Session]:
        factory = self._factory or db.SessionLocal
        assert factory is not None, "Sessionmaker not initialized"
        return factory

    def get(self, key: str) -> Optional[str]:
        try:
            with self._sessions()() as s:
                return PreferencesRepo(s).get(key)
        except SQLAlchemyError as e:
            log.error("Failed to read preference %s: %s", key, e)
            return None

    def set(self, key: str, value: str) -> None:
        with self._sessions()() as s:
            PreferencesRepo(s).set(key, value)
            s.commit()

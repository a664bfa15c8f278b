#!/usr/bin/env python3
from __future__ import annotations

from board.core.config import settings
from board.core.i18n import SELECTED_LOCALE_KEY
from board.infra import db
from board.infra.migrate import migrate
from board.infra.prefs_repo import PreferencesRepo


def main() -> None:
    db.init_engine(settings.DATABASE_URL)
    db.init_sessionmaker()
    migrate()
    with db.SessionLocal() as s:  # type: ignore
        repo = PreferencesRepo(s)
        if not repo.get(SELECTED_LOCALE_KEY):
            repo.set(SELECTED_LOCALE_KEY, settings.DEFAULT_LOCALE)
            print(f"Selected locale initialised to {settings.DEFAULT_LOCALE}")
        s.commit()


if __name__ == "__main__":
    main()

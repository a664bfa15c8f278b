from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from .models import Preference


class PreferencesRepo:
    def __init__(self, session: Session) -> None:
        self.s = session

    def get(self, key: str) -> Optional[str]:
        row = self.s.get(Preference, key)
        return row.value if row else None

    def set(self, key: str, value: str) -> None:
        row = self.s.get(Preference, key)
        if row is None:
            self.s.add(Preference(key=key, value=value))
        else:
            row.value = value
            row.updated_at = datetime.utcnow()

    def delete(self, key: str) -> bool:
        row = self.s.get(Preference, key)
        if row is None:
            return False
        self.s.delete(row)
        return True

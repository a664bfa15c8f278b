from __future__ import annotations

import logging

from . import db
from .models import Base

log = logging.getLogger(__name__)


def migrate() -> None:
    assert db.engine is not None, "Engine not initialized"
    with db.engine.begin() as conn:
        Base.metadata.create_all(conn)
    db.set_sqlite_pragmas()
    log.debug("Preference schema ready on %s", db.engine.url.render_as_string(hide_password=True))

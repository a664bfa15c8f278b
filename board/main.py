from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from .core.config import settings
from .core.errors import BoardError
from .core.i18n import I18N, Locale, t
from .core.logging_config import setup_logging, get_logger
from .features.document import translate_html
from .infra.db import init_engine, init_sessionmaker
from .infra.migrate import migrate
from .infra.store import SqlPreferenceStore

log = get_logger(__name__)


def init_app(database_url: Optional[str] = None) -> None:
    """Load the catalog and bind the persisted locale preference."""
    setup_logging(log_file=settings.LOG_FILE, debug=settings.LOG_DEBUG)
    I18N.load_locales()

    init_engine(database_url or settings.DATABASE_URL)
    init_sessionmaker()
    migrate()  # ensure preferences table exists
    I18N.configure(store=SqlPreferenceStore(), default_locale=settings.default_locale)


def build_parser() -> argparse.ArgumentParser:
    codes = [loc.value for loc in Locale]
    parser = argparse.ArgumentParser(prog="board", description="Dashboard localization tools")
    parser.add_argument("--database-url", default=None, help="override DATABASE_URL")
    sub = parser.add_subparsers(dest="command", required=True)

    p_translate = sub.add_parser("translate", help="fill tagged elements of an HTML file")
    p_translate.add_argument("file", type=Path)
    p_translate.add_argument("--locale", choices=codes)
    p_translate.add_argument("--output", "-o", type=Path, help="write here instead of stdout")

    p_locale = sub.add_parser("locale", help="show or change the selected locale")
    p_locale.add_argument("code", nargs="?", choices=codes)

    p_text = sub.add_parser("text", help="print the translation of a message key")
    p_text.add_argument("key")
    p_text.add_argument("--locale", choices=codes)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        init_app(args.database_url)

        if args.command == "translate":
            markup = args.file.read_text(encoding="utf-8")
            result = translate_html(markup, locale=args.locale)
            if args.output:
                args.output.write_text(result, encoding="utf-8")
                log.info("Wrote %s (%s)", args.output, args.locale or I18N.get_selected_locale())
            else:
                print(result)
        elif args.command == "locale":
            if args.code:
                I18N.set_selected_locale(args.code)
            print(I18N.get_selected_locale())
        elif args.command == "text":
            print(t(args.key, args.locale))
    except (BoardError, SQLAlchemyError, OSError) as e:
        log.error("%s failed: %s", args.command, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

from __future__ import annotations


class BoardError(Exception):
    """Base class for errors raised inside the board package."""


class UnknownLocaleError(BoardError, ValueError):
    def __init__(self, code: object) -> None:
        super().__init__(f"Unknown locale code: {code!r}")
        self.code = code


class CatalogLoadError(BoardError):
    def __init__(self, locale: str, reason: str) -> None:
        super().__init__(f"Failed to load locale {locale}: {reason}")
        self.locale = locale
        self.reason = reason


class AlarmFormatError(BoardError, ValueError):
    def __init__(self, text: str) -> None:
        super().__init__(f"Alarm message must look like 'mode|title|body': {text!r}")
        self.text = text

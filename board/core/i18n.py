from __future__ import annotations

import json
import logging
from enum import Enum
from importlib import resources
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Union

from ..infra.store import MemoryPreferenceStore, PreferenceStore
from .errors import CatalogLoadError, UnknownLocaleError


log = logging.getLogger(__name__)

SELECTED_LOCALE_KEY = "selected-locale"
LOCALES_PACKAGE = "board.locales"


class Locale(str, Enum):
    AR = "ar"
    EN = "en"
    RU = "ru"
    ID = "id"
    ZH_TW = "zh-tw"
    ZH_CN = "zh-cn"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: object) -> "Locale":
        """Turn a stored or user-supplied code into a Locale.

        Accepts any casing and ``_`` as separator (``zh_TW``). Raises
        UnknownLocaleError for anything outside the supported set.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            code = value.strip().lower().replace("_", "-")
            try:
                return cls(code)
            except ValueError:
                pass
        raise UnknownLocaleError(value)


LocaleLike = Union[Locale, str]


def _read_locale(locale: Locale) -> Dict[str, str]:
    resource = resources.files(LOCALES_PACKAGE).joinpath(f"{locale.value}.json")
    try:
        with resource.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, ValueError) as e:
        raise CatalogLoadError(locale.value, str(e)) from e
    if not isinstance(data, dict):
        raise CatalogLoadError(locale.value, "expected a JSON object")
    bad = sorted(k for k, v in data.items() if not isinstance(v, str))
    if bad:
        raise CatalogLoadError(locale.value, "non-string messages: " + ", ".join(bad))
    return data


class I18N:
    _messages: Dict[str, Dict[Locale, str]] = {}
    _store: PreferenceStore = MemoryPreferenceStore()
    _default_locale: Locale = Locale.EN

    @classmethod
    def load_locales(cls, locales: Iterable[Locale] = tuple(Locale)) -> None:
        # Load packaged locale files, one JSON object per locale
        catalog: Dict[str, Dict[Locale, str]] = {}
        for locale in locales:
            try:
                data = _read_locale(locale)
            except CatalogLoadError as e:
                log.warning("%s", e)
                continue
            for key, text in data.items():
                catalog.setdefault(key, {})[locale] = text
        cls._messages = catalog
        log.info("Loaded %d messages for %d locales", len(catalog), len(cls.available_locales()))

    @classmethod
    def use_catalog(cls, mapping: Mapping[str, Mapping[str, str]]) -> None:
        """Replace the catalog with ``{key: {locale_code: text}}``.

        Every entry must be a mapping; scalar entries are rejected.
        """
        catalog: Dict[str, Dict[Locale, str]] = {}
        for key, entry in mapping.items():
            if not isinstance(entry, Mapping):
                raise CatalogLoadError("*", f"entry {key!r} is not a locale mapping")
            parsed: Dict[Locale, str] = {}
            for code, text in entry.items():
                try:
                    locale = Locale.parse(code)
                except UnknownLocaleError as e:
                    raise CatalogLoadError(str(code), f"entry {key!r}: {e}") from e
                if not isinstance(text, str):
                    raise CatalogLoadError(locale.value, f"entry {key!r} is not a string")
                parsed[locale] = text
            catalog[key] = parsed
        cls._messages = catalog

    @classmethod
    def configure(
        cls,
        store: Optional[PreferenceStore] = None,
        default_locale: Optional[LocaleLike] = None,
    ) -> None:
        if store is not None:
            cls._store = store
        if default_locale is not None:
            cls._default_locale = Locale.parse(default_locale)

    @classmethod
    def available_locales(cls) -> List[Locale]:
        present = {loc for entry in cls._messages.values() for loc in entry}
        return [loc for loc in Locale if loc in present]

    @classmethod
    def keys(cls) -> List[str]:
        return list(cls._messages)

    @classmethod
    def entry(cls, key: str) -> Mapping[Locale, str]:
        return MappingProxyType(cls._messages.get(key, {}))

    @classmethod
    def get_selected_locale(cls, default_locale: Optional[LocaleLike] = None) -> Locale:
        fallback = cls._default_locale if default_locale is None else Locale.parse(default_locale)
        stored = cls._store.get(SELECTED_LOCALE_KEY)
        if not stored:
            return fallback
        try:
            return Locale.parse(stored)
        except UnknownLocaleError:
            log.warning("Stored locale %r is not supported, using %s", stored, fallback)
            return fallback

    @classmethod
    def set_selected_locale(cls, locale: LocaleLike) -> None:
        try:
            code = Locale.parse(locale)
        except UnknownLocaleError:
            log.warning("Refusing to select unknown locale %r", locale)
            return
        cls._store.set(SELECTED_LOCALE_KEY, code.value)
        log.debug("Selected locale set to %s", code)

    @classmethod
    def get_text(cls, key: str, locale: Optional[LocaleLike] = None) -> str:
        item = cls._messages.get(key)
        if not item:
            return ""
        current = cls._resolve(locale)
        text = item.get(current)
        if text:
            return text
        # fall back to the default locale, then to declaration order
        for candidate in (cls._default_locale, *item):
            text = item.get(candidate)
            if text:
                return text
        return ""

    @classmethod
    def _resolve(cls, locale: Optional[LocaleLike]) -> Locale:
        if locale is None:
            return cls.get_selected_locale()
        try:
            return Locale.parse(locale)
        except UnknownLocaleError:
            log.warning("Unknown locale %r requested, using the selected one", locale)
            return cls.get_selected_locale()


def t(key: str, locale: Optional[LocaleLike] = None) -> str:
    return I18N.get_text(key, locale)


def get_selected_locale(default_locale: Optional[LocaleLike] = None) -> Locale:
    return I18N.get_selected_locale(default_locale)


def set_selected_locale(locale: LocaleLike) -> None:
    I18N.set_selected_locale(locale)

"""Prayer alarm notifications built from catalog templates.

Catalog strings use positional ``$1``, ``$2`` placeholders. Alarm templates
additionally pack three fields into one string: ``mode|title|body``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Optional

from ...core.errors import AlarmFormatError
from ...core.i18n import LocaleLike, t

PLACEHOLDER_RE = re.compile(r"\$(\d+)")
ALARM_SEPARATOR = "|"

ALARM_KEYS = {
    "exact": "alarmExactPrayerTimeMessageTemplate",
    "almost": "alarmAlmostPrayerTimeMessageTemplate",
}


def fill_placeholders(template: str, *args: object) -> str:
    """Replace ``$1``..``$n`` with the positional arguments.

    Tokens without a matching argument are left untouched, and substituted
    values are never scanned again.
    """
    def _sub(m: re.Match) -> str:
        index = int(m.group(1))
        if 1 <= index <= len(args):
            return str(args[index - 1])
        return m.group(0)

    return PLACEHOLDER_RE.sub(_sub, template)


@dataclass(frozen=True)
class AlarmMessage:
    mode: str
    title: str
    body: str

    @classmethod
    def parse(cls, text: str) -> "AlarmMessage":
        parts = text.split(ALARM_SEPARATOR, 2)
        if len(parts) != 3 or not parts[0].strip():
            raise AlarmFormatError(text)
        mode, title, body = (p.strip() for p in parts)
        return cls(mode=mode, title=title, body=body)

    def format(self) -> str:
        return ALARM_SEPARATOR.join((self.mode, self.title, self.body))


def build_alarm(
    mode: str,
    prayer: str,
    location: str,
    locale: Optional[LocaleLike] = None,
) -> AlarmMessage:
    """Render the alarm for ``mode`` ("exact" or "almost") in the given locale."""
    key = ALARM_KEYS.get(mode)
    if key is None:
        raise ValueError(f"Unknown alarm mode: {mode!r}")
    alarm = AlarmMessage.parse(t(key, locale))
    return replace(
        alarm,
        title=fill_placeholders(alarm.title, prayer, location),
        body=fill_placeholders(alarm.body, prayer, location),
    )

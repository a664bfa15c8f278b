from __future__ import annotations

import pytest

from board.core.errors import AlarmFormatError
from board.core.i18n import set_selected_locale, t
from board.features.notifications import AlarmMessage, build_alarm, fill_placeholders


def test_fill_placeholders_positional():
    template = t("prayerTimeNextRemainingTextHM", "en")
    assert fill_placeholders(template, 2, 15) == "in 2 hour(s) and 15 minute(s)"


def test_fill_placeholders_leaves_unmatched_tokens():
    assert fill_placeholders("$1 and $2", "a") == "a and $2"
    assert fill_placeholders("no tokens", "a") == "no tokens"


def test_fill_placeholders_does_not_rescan_values():
    assert fill_placeholders("$1-$2", "$2", "b") == "$2-b"


def test_fill_placeholders_multi_digit():
    args = [str(i) for i in range(1, 12)]
    assert fill_placeholders("$11/$1", *args) == "11/1"


def test_parse_alarm_message():
    msg = AlarmMessage.parse("exact|It is time for Asr pray|In Jakarta")
    assert msg == AlarmMessage("exact", "It is time for Asr pray", "In Jakarta")
    assert msg.format() == "exact|It is time for Asr pray|In Jakarta"


@pytest.mark.parametrize("text", ["", "exact", "exact|title only", "|title|body"])
def test_parse_rejects_malformed(text):
    with pytest.raises(AlarmFormatError):
        AlarmMessage.parse(text)


def test_build_alarm_in_selected_locale():
    set_selected_locale("id")
    msg = build_alarm("almost", "Ashar", "Kota Bandung")
    assert msg.mode == "almost"
    assert msg.title == "10 menit lagi adalah waktu sholat Ashar"
    assert msg.body == "Untuk daerah Kota Bandung"


def test_build_alarm_strips_padding():
    msg = build_alarm("exact", "العصر", "القاهرة", locale="ar")
    assert msg.title == "انه وقت صلاة العصر"
    assert msg.body == "في القاهرة"


def test_build_alarm_values_with_pipes_stay_in_their_field():
    msg = build_alarm("exact", "Fajr", "A|B", locale="en")
    assert msg.body == "In A|B"


def test_build_alarm_unknown_mode():
    with pytest.raises(ValueError):
        build_alarm("late", "Fajr", "Jakarta")

from __future__ import annotations

from bs4 import BeautifulSoup

from board.core.i18n import set_selected_locale
from board.features.document import apply_to_document, translate_html

PAGE = """
<html><body>
  <h1 data-i18n="appDescription">placeholder</h1>
  <ul>
    <li><span data-i18n="prayerTimeFajr"></span> 04:31</li>
    <li><span data-i18n="prayerTimeIsha"><b>old</b> markup</span> 19:02</li>
  </ul>
  <button data-i18n="unknownKey">Keep me?</button>
  <p>untouched</p>
</body></html>
"""


def _texts(soup: BeautifulSoup) -> list[str]:
    return [el.get_text() for el in soup.find_all(attrs={"data-i18n": True})]


def test_apply_fills_tagged_elements():
    set_selected_locale("id")
    soup = BeautifulSoup(PAGE, "html.parser")
    apply_to_document(soup)
    assert _texts(soup) == ["Personal Dashboard untuk umat Islam", "Subuh", "Isya'", ""]
    assert soup.find("p").get_text() == "untouched"
    assert soup.find("b") is None


def test_apply_is_idempotent():
    set_selected_locale("ar")
    soup = BeautifulSoup(PAGE, "html.parser")
    apply_to_document(soup)
    first = str(soup)
    apply_to_document(soup)
    assert str(soup) == first


def test_apply_follows_locale_change():
    soup = BeautifulSoup(PAGE, "html.parser")
    apply_to_document(soup)
    assert _texts(soup)[1] == "Fajr"
    set_selected_locale("ru")
    apply_to_document(soup)
    assert _texts(soup)[1] == "Фаджр"


def test_custom_attribute_and_explicit_locale():
    markup = '<div><label data-msg="promptManualLocationCityTitle">x</label></div>'
    out = translate_html(markup, locale="zh-tw", attribute="data-msg")
    assert out == '<div><label data-msg="promptManualLocationCityTitle">城市</label></div>'


def test_translate_html_without_tags_is_unchanged():
    assert translate_html("<p>plain</p>") == "<p>plain</p>"

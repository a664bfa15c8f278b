from __future__ import annotations

import logging
from typing import Optional, Union

from bs4 import BeautifulSoup, Tag

from ...core.config import settings
from ...core.i18n import I18N, LocaleLike

log = logging.getLogger(__name__)


def apply_to_document(
    document: Union[BeautifulSoup, Tag],
    attribute: Optional[str] = None,
    locale: Optional[LocaleLike] = None,
) -> None:
    """Overwrite the text of every element tagged with the i18n attribute.

    The attribute value is the message key. Unknown keys blank the element.
    Re-applying leaves the document unchanged.
    """
    attr = attribute or settings.I18N_ATTRIBUTE
    elements = document.find_all(attrs={attr: True})
    for el in elements:
        key = el.get(attr)
        if isinstance(key, list):
            key = " ".join(key)
        el.string = I18N.get_text(key or "", locale)
    log.debug("Applied translations to %d elements", len(elements))


def translate_html(
    markup: str,
    locale: Optional[LocaleLike] = None,
    attribute: Optional[str] = None,
    parser: str = "html.parser",
) -> str:
    soup = BeautifulSoup(markup, parser)
    apply_to_document(soup, attribute=attribute, locale=locale)
    return str(soup)

from __future__ import annotations

from .apply import apply_to_document, translate_html

__all__ = ["apply_to_document", "translate_html"]

"""Plain-text extraction by markup-delimiter removal.

This is not an HTML parser. Server-side blocks (``<?php ... ?>``) and HTML
comments are dropped whole, an unterminated one running to the end of the
content. Anything else between ``<`` and ``>`` is then dropped, so text inside
``<script>``/``<style>`` bodies is still counted, and a stray ``<`` with no
closing ``>`` is left as-is.
"""

import re
from typing import ClassVar

from seo_audit.scoring.models import ExtractedText


class TextExtractor:
    """Derives plain text and word count from raw document content."""

    # "->" and "=>" inside code would end a generic tag match early.
    _PROCESSING_RE: ClassVar[re.Pattern[str]] = re.compile(r"<\?.*?(?:\?>|\Z)", re.DOTALL)
    _COMMENT_RE: ClassVar[re.Pattern[str]] = re.compile(r"<!--.*?(?:-->|\Z)", re.DOTALL)
    _TAG_RE: ClassVar[re.Pattern[str]] = re.compile(r"<[^>]*>")
    # Letters, optionally joined by inner apostrophes or hyphens ("don't", "e-mail").
    _WORD_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"[^\W\d_]+(?:['\-][^\W\d_]+)*"
    )

    def extract(self, content: str) -> ExtractedText:
        plain_text = self._PROCESSING_RE.sub(" ", content)
        plain_text = self._COMMENT_RE.sub(" ", plain_text)
        plain_text = self._TAG_RE.sub(" ", plain_text)
        return ExtractedText(
            plain_text=plain_text,
            word_count=len(self._WORD_RE.findall(plain_text)),
        )

# src/tiny_desk/scraper/text.py

"""String clean-up shared by the archive and concert extractors."""

from __future__ import annotations

import re

QUOTE_CHARS = "\"'"

# Whitespace plus the bullets the archive puts between display date and teaser.
# "â€¢" is how a UTF-8 bullet reads when the page is decoded as cp1252.
_LEADING_SEPARATORS = re.compile(r"^[\s•·|â€¢]+")


def strip_quotes(text: str) -> str:
    """Drop one leading and one trailing quote character, then trim.

    >>> strip_quotes('"Song Title"')
    'Song Title'
    """
    text = text.strip()
    if text and text[0] in QUOTE_CHARS:
        text = text[1:]
    if text and text[-1] in QUOTE_CHARS:
        text = text[:-1]
    return text.strip()


def remove_date_substring(full_text: str, date_text: str) -> str:
    """Remove the first occurrence of `date_text` and the separator after it.

    If `date_text` is empty or does not occur in `full_text`, the trimmed
    `full_text` is returned as is.
    """
    full_text = full_text.strip()
    if not date_text or date_text not in full_text:
        return full_text

    cleaned = full_text.replace(date_text, "", 1)
    return _LEADING_SEPARATORS.sub("", cleaned).strip()

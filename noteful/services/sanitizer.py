"""
Noteful API: Output Sanitization
==================================

What:  HTML-escapes free-text fields of records leaving the API.
How:   MarkupSafe's `escape` converts &, <, >, " and ' to entities, so a
       stored `<script>` comes back as `&lt;script&gt;`.
When:  On every response body: list, get-by-id, and the POST echo.

Stored values are never modified; escaping happens on the way out only.
"""

from typing import Any, Dict, Mapping, Optional, Sequence

from markupsafe import escape


def sanitize_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return str(escape(value))


def sanitize_record(record: Mapping[str, Any], text_fields: Sequence[str]) -> Dict[str, Any]:
    """Copy of `record` with each of `text_fields` escaped; other values untouched."""
    clean = dict(record)
    for field in text_fields:
        if field in clean:
            clean[field] = sanitize_text(clean[field])
    return clean

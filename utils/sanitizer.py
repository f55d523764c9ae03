"""
Input Sanitization Module

Cleans user-entered text (manual shopping items, categories, units) before
it is stored. Output escaping is left to the templates.
"""

import re

_CONTROL_CHARS = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]')
_WHITESPACE = re.compile(r'\s+')


def sanitize_text(text, max_length=200):
    """
    Normalize a single-line text value.

    Args:
        text: The text to clean (can be None)
        max_length: Maximum allowed length (default 200)

    Returns:
        Stripped string with control characters removed, internal whitespace
        collapsed and truncated to max_length
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    text = _CONTROL_CHARS.sub('', text)
    text = _WHITESPACE.sub(' ', text).strip()

    if len(text) > max_length:
        text = text[:max_length].rstrip()

    return text

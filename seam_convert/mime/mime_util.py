"""
MIME type helpers
"""

import re

CHARSET_PATTERN = re.compile(r"\Wcharset=([^\s;]+)", re.IGNORECASE)


def parse_charset(mime_type: str, default_charset: str) -> str:
    """Extract the charset parameter from a MIME type string

    Args:
        mime_type: Content type such as "application/json; charset=UTF-8"
        default_charset: Returned when no charset parameter is present

    Returns:
        str: Charset name with quotes and backslashes removed
    """
    if not mime_type:
        return default_charset

    match = CHARSET_PATTERN.search(mime_type)
    if match:
        return re.sub(r'["\\]', "", match.group(1))
    return default_charset

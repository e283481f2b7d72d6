from __future__ import annotations

"""
Line terminator handling

- Input: any text
- Output: the same text ending in exactly one added "\n" when it had none
- Text that already ends in "\n" is returned unchanged
"""

NEWLINE = "\n"


# This function makes sure the text ends with a newline.
def terminate_line(text: str) -> str:
    """Return ``text`` with a trailing newline appended if it is missing."""
    if text.endswith(NEWLINE):
        return text
    return text + NEWLINE

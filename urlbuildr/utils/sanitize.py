"""
Path sanitisation utilities.

Path-bound strings are stored without their surrounding slashes so
the renderer can join them with a single '/':
  - /accounts   →  accounts
  - /:userId/   →  :userId
  - //users//   →  /users/   (only one slash per end is removed)
"""

from typing import Any


def sanitize_path(value: Any) -> str:
    """
    Strip at most one trailing and one leading '/' from a path component.

    Non-string values are converted with str() first; None and the empty
    string both sanitise to "".
    """
    if value is None:
        return ""
    text = str(value)
    if text.endswith("/"):
        text = text[:-1]
    if text.startswith("/"):
        text = text[1:]
    return text

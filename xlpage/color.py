"""Normalize hex colors for fills and fonts

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

import re
import xlpage.error

#: Prefixed to RGB to make the ARGB value openpyxl expects
OPACITY = "00"

_LONG = re.compile(r"#?([0-9a-f]{6})", flags=re.IGNORECASE)

_SHORT = re.compile(r"#?([0-9a-f])([0-9a-f])([0-9a-f])", flags=re.IGNORECASE)


def argb(value, field, col):
    """Convert `value` to an ARGB string

    Args:
        value (str): see `rgb`
        field (str): see `rgb`
        col (int): see `rgb`
    Returns:
        str: eight hex digits, `OPACITY` followed by RGB
    """
    return OPACITY + rgb(value, field, col)


def rgb(value, field, col):
    """Validate and expand `value` to six hex digits

    ``#abc`` becomes ``aabbcc``. Case is preserved and the ``#`` is removed.

    Args:
        value (str): 3 or 6 hex digits, optionally prefixed by ``#``
        field (str): "background" or "foreground", for error messages
        col (int): column being formatted, for error messages
    Returns:
        str: six hex digits
    """
    if isinstance(value, str):
        if m := _LONG.fullmatch(value):
            return m.group(1)
        if m := _SHORT.fullmatch(value):
            return "".join(d + d for d in m.groups())
    raise xlpage.error.InvalidColor(
        "invalid {} color={} col={}; expect 3 or 6 hex digits", field, value, col
    )

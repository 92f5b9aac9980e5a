"""Exceptions raised while building or reading spreadsheets

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""


class Error(Exception):
    """Superclass for all exceptions in xlpage

    Messages are formatted with `pykern.pkdebug.pkdformat` so they
    carry the offending values.
    """

    def __init__(self, fmt, *args, **kwargs):
        from pykern.pkdebug import pkdformat

        super().__init__(pkdformat(fmt, *args, **kwargs) if args or kwargs else fmt)


class InvalidCellAssignment(Error):
    """Inner value of a styled cell could not be written"""

    pass


class InvalidColor(Error):
    """Color is not 3 or 6 hex digits"""

    pass


class MergeConflict(Error):
    """Span overlaps an existing merge or is not a valid range"""

    pass


class MissingSheet(Error):
    """Sheet name or index does not exist in the workbook"""

    pass

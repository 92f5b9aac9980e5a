"""Columns reserved by header cells spanning multiple rows

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from pykern.pkcollections import PKDict
from pykern.pkdebug import pkdc


class SkipLedger:
    """Per row record of columns covered by a span from an earlier row

    One instance belongs to one page's header layout. Rows and columns
    are 1-based.
    """

    def __init__(self):
        self._rows = PKDict()

    def consult(self, row):
        """Reserved columns for `row`

        Args:
            row (int): sheet row
        Returns:
            tuple: column numbers in ascending order
        """
        return tuple(sorted(self._rows.get(row, ())))

    def next_free(self, row, col):
        """First column at or after `col` which is not reserved

        Scans the reserved columns from `col` and stops at the first gap.

        Args:
            row (int): sheet row
            col (int): cursor
        Returns:
            int: `col` or the column just past the reserved run
        """
        r = self.consult(row)
        if col in r:
            for c in r[r.index(col) :]:
                if c != col:
                    break
                col += 1
        return col

    def reserve(self, row, cols):
        """Mark `cols` unavailable for placement in `row`

        Args:
            row (int): sheet row below the spanning cell
            cols (iterable): column numbers
        """
        s = self._rows.setdefault(row, set())
        for c in cols:
            s.add(int(c))
        pkdc("row={} reserved={}", row, sorted(s))

"""Lay out header rows with column and row spans

Header rows are declared as a list of rows, each a list of column
declarations (`PKDict` or dict)::

    label (str): text of the cell
    color (str): hex foreground, renders the label as bold rich text
    background_color (str): hex fill
    width (float): width of the sheet column
    col_span (int): number of columns covered
    row_span (int): number of rows covered

Each row starts at column 1. A declaration is placed at the next column
not covered by a row span from a row above, which is tracked in a
`xlpage.ledger.SkipLedger`.

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from openpyxl.utils import get_column_letter
from openpyxl.worksheet.cell_range import CellRange
from pykern.pkcollections import PKDict
from pykern.pkdebug import pkdc
import math
import xlpage.color
import xlpage.error
import xlpage.ledger
import xlpage.style

_COL_NUM_1 = 1


class Layout:
    """Places the header block of one page

    Args:
        worksheet (Worksheet): openpyxl sheet to write

    Attributes:
        ledger (SkipLedger): reservations for this page only
    """

    def __init__(self, worksheet):
        self.worksheet = worksheet
        self.ledger = xlpage.ledger.SkipLedger()

    def row(self, row_num, declarations):
        """Place one header row

        Args:
            row_num (int): 1-based sheet row
            declarations (list): column declarations in order
        Returns:
            list: (first_col, last_col) covered by each declaration
        """
        f = xlpage.style.header_font()
        xlpage.style.row(self.worksheet, row_num, f)
        rv = []
        c = _COL_NUM_1
        for d in declarations:
            p = self._place(row_num, c, PKDict(d), f)
            rv.append(p)
            c = p[1] + 1
        return rv

    def rows(self, first_row, declarations):
        """Place all header rows starting at `first_row`

        Args:
            first_row (int): 1-based sheet row
            declarations (list): list of header rows
        Returns:
            int: first row after the header block
        """
        r = first_row
        for d in declarations:
            self.row(r, d)
            r += 1
        return r

    def _merge(self, first_row, first_col, last_row, last_col):
        def _error(fmt, *args):
            return xlpage.error.MergeConflict(
                "merge row={} col={} to row={} col={} " + fmt,
                first_row,
                first_col,
                last_row,
                last_col,
                *args,
            )

        try:
            r = CellRange(
                min_col=first_col,
                min_row=first_row,
                max_col=last_col,
                max_row=last_row,
            )
        except ValueError as e:
            raise _error("error={}", e) from e
        for m in self.worksheet.merged_cells.ranges:
            if not r.isdisjoint(m):
                raise _error("overlaps existing merge={}", m.coord)
        try:
            self.worksheet.merge_cells(r.coord)
        except ValueError as e:
            raise _error("error={}", e) from e
        pkdc("merged={}", r.coord)

    def _place(self, row_num, col_num, decl, font):
        c = self.ledger.next_free(row_num, col_num)
        x = self.worksheet.cell(row=row_num, column=c)
        x.font = font
        x.alignment = xlpage.style.alignment()
        x.border = xlpage.style.BORDER
        if decl.get("background_color"):
            x.fill = xlpage.style.fill(
                xlpage.color.argb(decl.background_color, "background", c),
            )
        if decl.get("color"):
            x.value = xlpage.style.header_label(
                decl.get("label") or "",
                xlpage.color.argb(decl.color, "foreground", c),
            )
        elif "label" in decl:
            x.value = decl.label or ""
        if decl.get("width"):
            self.worksheet.column_dimensions[get_column_letter(c)].width = decl.width
        s = _span(decl.get("col_span"))
        n = _span(decl.get("row_span"))
        if s or n:
            self._merge(row_num, c, row_num + n, c + s)
        for i in range(1, n + 1):
            self.ledger.reserve(row_num + i, range(c, c + s + 1))
        pkdc(
            "row={} col={} last_col={} label={}", row_num, c, c + s, decl.get("label")
        )
        return (c, c + s)


def _span(value):
    return max(math.ceil(value or 0), 1) - 1

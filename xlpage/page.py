"""Build spreadsheets from page declarations

A page is a `PKDict` (or dict) with::

    name (str): sheet title, required
    title (str): written in bold to the first row [None]
    columns (list): header rows, see `xlpage.header`
    rows (list): data rows, each a list of values, see `xlpage.cell`
    default_number_format (str): for numbers in styled values without one [None]

The header block starts in the row after the title, or in the first
row when there is no title. Data rows follow the header block.

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from pykern.pkcollections import PKDict
from pykern.pkdebug import pkdc, pkdformat
import openpyxl
import xlpage.cell
import xlpage.header
import xlpage.style
import xlpage.workbook

_COL_NUM_1 = 1

_ROW_NUM_1 = 1


def build(xl, page):
    """Append a sheet for `page`

    Args:
        xl (openpyxl.Workbook): document
        page (dict): see module doc
    Returns:
        Worksheet: new sheet
    """
    p = _page(page)
    s = xl.create_sheet(title=p.name)
    r = _ROW_NUM_1
    if p.title:
        c = s.cell(row=r, column=_COL_NUM_1, value=p.title)
        c.font = xlpage.style.title_font()
        r += 1
    r = xlpage.header.Layout(s).rows(r, p.columns)
    f = xlpage.style.data_font()
    for x in p.rows:
        xlpage.style.row(s, r, f)
        for i, v in enumerate(x, _COL_NUM_1):
            c = s.cell(row=r, column=i)
            c.font = f
            c.alignment = xlpage.style.alignment()
            xlpage.cell.assign(c, v, p.default_number_format)
        r += 1
    pkdc("sheet={} last_row={}", p.name, r - 1)
    return s


def report(*pages):
    """Create a document with one sheet per page in order

    Args:
        pages (dict): see module doc
    Returns:
        io.BytesIO: xlsx positioned at the start
    """
    if not pages:
        raise AssertionError("at least one page is required")
    x = openpyxl.Workbook()
    x.remove(x.active)
    for p in pages:
        build(x, p)
    return xlpage.workbook.Workbook(x).to_stream()


def _page(page):
    rv = PKDict(page)
    if not rv.get("name"):
        raise AssertionError(pkdformat("name is required page={}", page))
    return rv.pksetdefault(
        columns=list,
        default_number_format=None,
        rows=list,
        title=None,
    )

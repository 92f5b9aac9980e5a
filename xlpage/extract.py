"""Read cells as plain values and project runs of cells into records

A stored cell is classified as exactly one of:

    `Blank`: no value
    `Plain`: str, number, bool or time
    `When`: date or datetime (None when the stored serial is out of range)
    `ErrorCode`: error such as ``#N/A``
    `Formula`: formula with the `Raw` result cached by the last calculation
    `Link`: hyperlink; only the visible text is read
    `Rich`: rich text; runs are joined with a space

Strings are trimmed and whitespace runs, including newlines and tabs,
become a single space.

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from openpyxl.cell.rich_text import CellRichText
from openpyxl.styles.numbers import is_date_format
from openpyxl.utils.datetime import from_excel
from pykern.pkcollections import PKDict
from pykern.pkdebug import pkdc, pkdformat
import datetime
import re

#: `values_by_schema` walks along a row (next column) or a column (next row)
READ_MODES = ("column", "row")

_SPACES = re.compile(r"\s+")


class Raw(PKDict):
    """Superclass of the stored cell shapes"""

    def scalar(self):
        return self.value


class Blank(Raw):
    def scalar(self):
        return None


class ErrorCode(Raw):
    pass


class Formula(Raw):
    def scalar(self):
        return self.result.scalar()


class Link(Raw):
    def scalar(self):
        return self.text


class Plain(Raw):
    pass


class Rich(Raw):
    def scalar(self):
        return " ".join(self.runs)


class When(Raw):
    def scalar(self):
        v = self.value
        try:
            if not isinstance(v, datetime.date):
                v = from_excel(v)
            if isinstance(v, datetime.datetime) and v.tzinfo is not None:
                v = v.astimezone(datetime.timezone.utc).replace(tzinfo=None)
            return v
        except (OverflowError, TypeError, ValueError) as e:
            pkdc("invalid date value={} error={}", v, e)
            return None


def classify(cell, cached=None):
    """Determine the shape of `cell`

    Args:
        cell (Cell): openpyxl cell, loaded with ``rich_text=True``
        cached (Cell): same cell loaded with ``data_only=True`` [None]
    Returns:
        Raw: shape of the cell
    """
    v = cell.value
    if cell.data_type == "f":
        return Formula(
            formula=v,
            result=Blank() if cached is None else _plain(cached),
        )
    if (h := getattr(cell, "hyperlink", None)) is not None:
        return Link(
            text=_text(v),
            target=h.target,
        )
    if isinstance(v, CellRichText):
        return Rich(runs=_runs(v))
    return _plain(cell)


def normalize(raw):
    """Convert `raw` to a plain value

    Args:
        raw (Raw): from `classify`
    Returns:
        object: str, number, bool, datetime, etc. or None
    """
    rv = raw.scalar()
    if isinstance(rv, str):
        return _SPACES.sub(" ", rv.strip())
    return rv


def value(worksheet, row, col, cached=None):
    """Read one cell

    Same as a `values_by_schema` field, but an empty string is None.

    Args:
        worksheet (Worksheet): openpyxl sheet
        row (int): 1-based row
        col (int): 1-based column
        cached (Worksheet): ``data_only`` twin of `worksheet` [None]
    Returns:
        object: normalized value
    """
    rv = normalize(_classify_at(worksheet, row, col, cached))
    return None if rv == "" else rv


def values_by_schema(worksheet, row, col, read_mode, schema, cached=None):
    """Read one cell per field starting at (`row`, `col`)

    Args:
        worksheet (Worksheet): openpyxl sheet
        row (int): 1-based row of the first field
        col (int): 1-based column of the first field
        read_mode (str): "row" reads across, "column" reads down
        schema (iterable): field names in cell order
        cached (Worksheet): ``data_only`` twin of `worksheet` [None]
    Returns:
        PKDict: field name to normalized value
    """
    if read_mode not in READ_MODES:
        raise AssertionError(
            pkdformat("read_mode={} must be one of {}", read_mode, READ_MODES),
        )
    rv = PKDict()
    for i, f in enumerate(schema):
        if read_mode == "row":
            rv[f] = normalize(_classify_at(worksheet, row, col + i, cached))
        else:
            rv[f] = normalize(_classify_at(worksheet, row + i, col, cached))
    return rv


def _classify_at(worksheet, row, col, cached):
    return classify(
        worksheet.cell(row=row, column=col),
        None if cached is None else cached.cell(row=row, column=col),
    )


def _plain(cell):
    v = cell.value
    if v is None:
        return Blank()
    d = is_date_format(cell.number_format)
    if cell.data_type == "e":
        # openpyxl loads date serials outside the calendar as #VALUE!
        return When(value=None) if d and v == "#VALUE!" else ErrorCode(value=v)
    if isinstance(v, datetime.date):
        return When(value=v)
    if d and isinstance(v, (float, int)) and not isinstance(v, bool):
        return When(value=v)
    if isinstance(v, CellRichText):
        return Rich(runs=_runs(v))
    return Plain(value=v)


def _runs(rich):
    return [x if isinstance(x, str) else x.text for x in rich]


def _text(value):
    if isinstance(value, CellRichText):
        return " ".join(_runs(value))
    return value

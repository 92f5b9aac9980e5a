"""Read and write spreadsheet documents

Documents are read into memory once and written once. Formula results
are only available for documents that were read, because they are the
values cached by the last calculation in the application which saved
the document.

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from openpyxl.utils import column_index_from_string
from pykern.pkdebug import pkdc, pkdlog
import base64
import io
import openpyxl
import pykern.pkio
import xlpage.cell
import xlpage.error
import xlpage.extract


class Workbook:
    """Spreadsheet document

    Args:
        xl (openpyxl.Workbook): document to wrap [new document]

    Attributes:
        xl (openpyxl.Workbook): formulas and rich text as stored
    """

    def __init__(self, xl=None):
        self.xl = openpyxl.Workbook() if xl is None else xl
        self._cached = None

    def read_base64(self, content):
        """Replace document with base64 encoded xlsx

        Args:
            content (str or bytes): base64
        Returns:
            Workbook: self
        """
        return self.read_bytes(base64.b64decode(content))

    def read_bytes(self, content):
        """Replace document with xlsx `content`

        Args:
            content (bytes): xlsx
        Returns:
            Workbook: self
        """
        self.xl = openpyxl.load_workbook(io.BytesIO(content), rich_text=True)
        self._cached = openpyxl.load_workbook(io.BytesIO(content), data_only=True)
        pkdc("sheets={}", self.xl.sheetnames)
        return self

    def read_file(self, *path):
        """Replace document with the xlsx in `path`

        Args:
            path (str or py.path): parts joined into one path
        Returns:
            Workbook: self
        """
        return self.read_bytes(pykern.pkio.read_binary(_path(path)))

    def read_stream(self, stream):
        """Replace document with xlsx read from `stream`

        Args:
            stream (object): binary file-like object
        Returns:
            Workbook: self
        """
        return self.read_bytes(stream.read())

    def sheet(self, index_or_name):
        """Accessors for a sheet

        Args:
            index_or_name (int or str): 0-based position or title
        Returns:
            Sheet: accessors
        """
        s = None
        if isinstance(index_or_name, str):
            if index_or_name in self.xl.sheetnames:
                s = self.xl[index_or_name]
        elif isinstance(index_or_name, int) and not isinstance(index_or_name, bool):
            if 0 <= index_or_name < len(self.xl.worksheets):
                s = self.xl.worksheets[index_or_name]
        if s is None:
            raise xlpage.error.MissingSheet(
                "sheet={} not found in sheets={}",
                index_or_name,
                self.xl.sheetnames,
            )
        return Sheet(
            s,
            cached=(
                self._cached[s.title]
                if self._cached is not None and s.title in self._cached.sheetnames
                else None
            ),
        )

    def to_base64(self):
        return base64.b64encode(self.to_stream().getvalue()).decode("ascii")

    def to_stream(self):
        """Serialize document

        Returns:
            io.BytesIO: xlsx positioned at the start
        """
        rv = io.BytesIO()
        self.xl.save(rv)
        rv.seek(0)
        return rv

    def write_file(self, *path):
        """Write document to `path`

        Args:
            path (str or py.path): parts joined into one path
        Returns:
            py.path: path written
        """
        p = _path(path)
        try:
            self.xl.save(str(p))
        except Exception:
            pkdlog("workbook save failed; path={}", p)
            raise
        return p


class Sheet:
    """Accessors for one worksheet

    Rows are 1-based. Columns are 1-based or letters ("B").

    Args:
        worksheet (Worksheet): openpyxl sheet
        cached (Worksheet): same sheet loaded with formula results [None]

    Attributes:
        xl (Worksheet): openpyxl sheet
    """

    def __init__(self, worksheet, cached=None):
        self.xl = worksheet
        self._cached = cached

    def set_column_values(self, row, col, values):
        """Write `values` down from (`row`, `col`)

        Args:
            row (int): first row
            col (int or str): column
            values (iterable): see `xlpage.cell`
        """
        r, c = _coords(row, col)
        for i, v in enumerate(values):
            xlpage.cell.assign(self.xl.cell(row=r + i, column=c), v)

    def set_row_values(self, row, col, values):
        """Write `values` across from (`row`, `col`)

        Args:
            row (int): row
            col (int or str): first column
            values (iterable): see `xlpage.cell`
        """
        r, c = _coords(row, col)
        for i, v in enumerate(values):
            xlpage.cell.assign(self.xl.cell(row=r, column=c + i), v)

    def set_values(self, row, col, values):
        """Write a block of `values` with its top left at (`row`, `col`)

        Args:
            row (int): first row
            col (int or str): first column
            values (iterable): rows of values
        """
        r, c = _coords(row, col)
        for i, x in enumerate(values):
            self.set_row_values(r + i, c, x)

    def value(self, row, col):
        """Normalized value of one cell, see `xlpage.extract.value`"""
        return xlpage.extract.value(self.xl, *_coords(row, col), cached=self._cached)

    def values_by_schema(self, row, col, read_mode, schema):
        """Record read from a run of cells, see `xlpage.extract.values_by_schema`"""
        return xlpage.extract.values_by_schema(
            self.xl,
            *_coords(row, col),
            read_mode,
            schema,
            cached=self._cached,
        )


def _coords(row, col):
    if isinstance(col, str) and not col.isdigit():
        return int(row), column_index_from_string(col.upper())
    return int(row), int(col)


def _path(parts):
    if not parts:
        raise AssertionError("path must have at least one part")
    return pykern.pkio.py_path(parts[0]).join(*(str(p) for p in parts[1:]))

"""Build and read spreadsheets from the command line

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

import pykern.pkcli
import pykern.pkio
import pykern.pkjson
import pykern.pkyaml
import xlpage.page
import xlpage.workbook

_YAML_EXT = (".yaml", ".yml")


def build(pages_path, xlsx_path):
    """Write a spreadsheet from page declarations

    Args:
        pages_path (str or py.path): YAML or JSON list of pages or dict with ``pages``
        xlsx_path (str or py.path): where to write
    Returns:
        str: path written
    """
    p = _pages(pages_path)
    rv = pykern.pkio.py_path(xlsx_path)
    pykern.pkio.write_binary(rv, xlpage.page.report(*p).getvalue())
    return str(rv)


def extract(xlsx_path, sheet, row, col, read_mode, *fields):
    """Read a record from a run of cells

    Args:
        xlsx_path (str or py.path): spreadsheet
        sheet (str): title or 0-based index
        row (str): 1-based row
        col (str): 1-based column or letter
        read_mode (str): "row" or "column"
        fields (str): names in cell order
    Returns:
        str: record as JSON
    """
    if not fields:
        pykern.pkcli.command_error("at least one field is required")
    return pykern.pkjson.dump_pretty(
        _sheet(xlsx_path, sheet).values_by_schema(row, col, read_mode, fields),
    )


def value(xlsx_path, sheet, row, col):
    """Read one normalized value

    Args:
        xlsx_path (str or py.path): spreadsheet
        sheet (str): title or 0-based index
        row (str): 1-based row
        col (str): 1-based column or letter
    Returns:
        str: value as JSON
    """
    return pykern.pkjson.dump_str(_sheet(xlsx_path, sheet).value(row, col))


def _pages(path):
    p = pykern.pkio.py_path(path)
    if p.ext.lower() in _YAML_EXT:
        rv = pykern.pkyaml.load_file(p)
    else:
        rv = pykern.pkjson.load_any(p)
    if isinstance(rv, dict):
        rv = rv.get("pages")
    if not rv:
        pykern.pkcli.command_error("no pages in path={}", p)
    return rv


def _sheet(xlsx_path, sheet):
    return xlpage.workbook.Workbook().read_file(xlsx_path).sheet(
        int(sheet) if sheet.isdigit() else sheet,
    )

"""Fonts, borders, fills and alignment shared by pages

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from openpyxl.cell.rich_text import CellRichText, TextBlock
from openpyxl.cell.text import InlineFont
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
import pykern.pkconfig

_THIN = Side(style="thin")

#: Every header cell is boxed
BORDER = Border(left=_THIN, right=_THIN, top=_THIN, bottom=_THIN)

_cfg = pykern.pkconfig.init(
    data_font_size=(8, int, "point size of data rows"),
    font_name=("Calibri", str, "font family of titles, headers and data rows"),
    header_font_size=(8, int, "point size of header rows"),
    title_font_size=(14, int, "point size of the page title"),
)


def alignment(vertical=None, horizontal=None, wrap_text=None):
    """Alignment with the page defaults: top and wrapped

    Args:
        vertical (str): top, center, bottom, justify, distributed [top]
        horizontal (str): left, center, right, etc. [None]
        wrap_text (bool): wrap words [True]
    Returns:
        Alignment: new object
    """
    return Alignment(
        vertical=vertical or "top",
        horizontal=horizontal,
        wrap_text=True if wrap_text is None else wrap_text,
    )


def data_font():
    return Font(name=_cfg.font_name, size=_cfg.data_font_size)


def fill(argb):
    """Solid fill

    Args:
        argb (str): from `xlpage.color.argb`
    Returns:
        PatternFill: new object
    """
    return PatternFill(fill_type="solid", fgColor=argb, bgColor=argb)


def header_font():
    return Font(name=_cfg.font_name, bold=True, size=_cfg.header_font_size)


def header_label(label, argb):
    """Header text rendered in a foreground color

    Args:
        label (str): text
        argb (str): from `xlpage.color.argb`
    Returns:
        CellRichText: single bold run
    """
    return CellRichText(
        TextBlock(
            InlineFont(color=argb, b=True, sz=_cfg.header_font_size),
            label,
        ),
    )


def row(worksheet, row_num, font):
    """Set the font and default alignment of a whole row

    Args:
        worksheet (Worksheet): sheet
        row_num (int): 1-based row
        font (Font): e.g. `header_font`
    """
    d = worksheet.row_dimensions[row_num]
    d.font = font
    d.alignment = alignment()


def title_font():
    return Font(name=_cfg.font_name, bold=True, size=_cfg.title_font_size)

"""Write caller values into cells

A cell value is parsed into exactly one of:

    `Empty`: None, clears the cell
    `Scalar`: str, number, bool, date, datetime, time or timedelta
    `Stamp`: a non-dict object with a numeric ``utc_timestamp`` (epoch seconds)
    `Styled`: a dict with a ``value`` key and optional presentation keys
        (``background_color``, ``color``, ``number_format``, ``v_align``,
        ``h_align``, ``wrap_text``)
    `Ignored`: anything else, which is not written

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from pykern.pkcollections import PKDict
from pykern.pkdebug import pkdc
import copy
import datetime
import decimal
import numbers
import xlpage.color
import xlpage.error
import xlpage.style

#: A `Styled` may contain one more `Styled`, but no deeper
MAX_STYLED_DEPTH = 1

# bool must be here, because it is a subclass of int; datetime is a date
_SCALARS = (
    bool,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    decimal.Decimal,
    float,
    int,
    str,
)

_STYLE_KEYS = (
    "background_color",
    "color",
    "h_align",
    "number_format",
    "v_align",
    "wrap_text",
)


class Input(PKDict):
    """Superclass of the accepted cell value shapes

    Attributes:
        raw (object): value as supplied by the caller
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.pksetdefault(raw=lambda: self.get("value"))

    def assign(self, cell, default_number_format=None):
        """Write self to `cell`

        Args:
            cell (Cell): openpyxl cell
            default_number_format (str): for numbers without ``number_format`` [None]
        """
        self._assign(cell, default_number_format, 0)

    def _assign(self, cell, default_number_format, depth):
        raise NotImplementedError(f"{self.__class__.__name__}._assign")


class Empty(Input):
    def _assign(self, cell, default_number_format, depth):
        cell.value = None


class Ignored(Input):
    """Shape not recognized; the cell is left as is"""

    def _assign(self, cell, default_number_format, depth):
        pkdc("ignored row={} col={} raw={}", cell.row, cell.column, self.raw)


class Scalar(Input):
    def is_number(self):
        return isinstance(
            self.value, (decimal.Decimal, float, int)
        ) and not isinstance(self.value, bool)

    def _assign(self, cell, default_number_format, depth):
        v = self.value
        if isinstance(v, datetime.datetime) and v.tzinfo is not None:
            # Excel has no timezones
            v = v.astimezone(datetime.timezone.utc).replace(tzinfo=None)
        cell.value = v


class Stamp(Input):
    def _assign(self, cell, default_number_format, depth):
        cell.value = datetime.datetime.fromtimestamp(
            self.utc_timestamp,
            tz=datetime.timezone.utc,
        ).replace(tzinfo=None)


class Styled(Input):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for k in _STYLE_KEYS:
            self.pksetdefault(k, None)
        self.value = parse(self.get("value"))

    def _assign(self, cell, default_number_format, depth):
        if depth > MAX_STYLED_DEPTH:
            raise xlpage.error.InvalidCellAssignment(
                "styled values nest at most depth={} raw={}",
                MAX_STYLED_DEPTH,
                self.raw,
            )
        if self.background_color:
            cell.fill = xlpage.style.fill(
                xlpage.color.argb(self.background_color, "background", cell.column),
            )
        if self.color:
            f = copy.copy(cell.font)
            f.color = xlpage.color.argb(self.color, "foreground", cell.column)
            cell.font = f
        cell.alignment = xlpage.style.alignment(
            self.v_align,
            self.h_align,
            self.wrap_text,
        )
        if isinstance(self.value, Scalar) and self.value.is_number():
            if f := self.number_format or default_number_format:
                cell.number_format = f
        try:
            self.value._assign(cell, default_number_format, depth + 1)
        except Exception as e:
            raise xlpage.error.InvalidCellAssignment(
                "invalid value={} for cell row={} col={}; error={}",
                self.value.get("raw"),
                cell.row,
                cell.column,
                e,
            ) from e


def assign(cell, raw, default_number_format=None):
    """Parse `raw` and write it to `cell`

    Args:
        cell (Cell): openpyxl cell
        raw (object): see module doc
        default_number_format (str): for numbers without ``number_format`` [None]
    Returns:
        Input: what `raw` was parsed as
    """
    rv = parse(raw)
    rv.assign(cell, default_number_format)
    return rv


def parse(raw):
    """Classify `raw` as one of the `Input` shapes

    Args:
        raw (object): see module doc
    Returns:
        Input: never None; unknown shapes are `Ignored`
    """
    if isinstance(raw, Input):
        return raw
    if raw is None:
        return Empty(raw=raw)
    if isinstance(raw, _SCALARS):
        return Scalar(raw=raw, value=raw)
    if isinstance(raw, dict) and "value" in raw:
        return Styled(
            raw=raw,
            value=parse(raw["value"]),
            **{k: raw.get(k) for k in _STYLE_KEYS},
        )
    if not isinstance(raw, dict):
        t = getattr(raw, "utc_timestamp", None)
        if isinstance(t, numbers.Real) and not isinstance(t, bool):
            return Stamp(raw=raw, utc_timestamp=t)
    return Ignored(raw=raw)

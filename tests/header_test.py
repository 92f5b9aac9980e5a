"""test xlpage.header

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""


def test_span_reserves_rows_below():
    from openpyxl import Workbook
    from pykern.pkcollections import PKDict
    from pykern.pkunit import pkeq
    from xlpage import header

    s = Workbook().active
    l = header.Layout(s)
    pkeq(
        [(1, 3), (4, 4)],
        l.row(
            2,
            [
                PKDict(label="Name", col_span=3, row_span=2),
                PKDict(label="Total"),
            ],
        ),
    )
    pkeq(["A2:C3"], sorted(m.coord for m in s.merged_cells.ranges))
    pkeq((1, 2, 3), l.ledger.consult(3))
    pkeq(
        [(4, 4), (5, 6)],
        l.row(3, [PKDict(label="First"), PKDict(label="Last", col_span=2)]),
    )
    pkeq("First", s.cell(row=3, column=4).value)
    pkeq("Last", s.cell(row=3, column=5).value)
    pkeq(["A2:C3", "E3:F3"], sorted(m.coord for m in s.merged_cells.ranges))


def test_cursor_monotonic():
    from openpyxl import Workbook
    from pykern.pkunit import pkeq, pkok
    from xlpage import header

    s = Workbook().active
    l = header.Layout(s)
    e = [
        [(1, 1), (2, 3), (4, 5), (6, 6)],
        [(2, 2), (3, 3), (6, 6)],
        [(2, 2), (3, 3), (4, 4), (5, 5)],
    ]
    for i, d in enumerate(
        (
            [
                {"label": "a", "row_span": 3},
                {"label": "b", "col_span": 2},
                {"label": "c", "row_span": 2, "col_span": 2},
                {"label": "d"},
            ],
            [{"label": "e"}, {"label": "f"}, {"label": "g"}],
            [{"label": "h"}, {"label": "i"}, {"label": "j"}, {"label": "k"}],
        ),
    ):
        a = l.row(i + 1, d)
        pkeq(e[i], a)
        for x, y in zip(a, a[1:]):
            pkok(x[0] <= x[1] < y[0], "overlap or decrease x={} y={}", x, y)
    pkeq(
        ["A1:A3", "B1:C1", "D1:E2"],
        sorted(m.coord for m in s.merged_cells.ranges),
    )
    pkeq(5, l.rows(4, [[{"label": "z"}]]))
    pkeq("z", s.cell(row=4, column=1).value)


def test_fractional_and_empty_spans():
    from openpyxl import Workbook
    from pykern.pkunit import pkeq
    from xlpage import header

    s = Workbook().active
    pkeq(
        [(1, 2), (3, 3), (4, 4), (5, 5)],
        header.Layout(s).row(
            1,
            [
                {"col_span": 1.2},
                {"col_span": 0},
                {"col_span": None, "row_span": 1},
                {"col_span": -3},
            ],
        ),
    )
    pkeq(["A1:B1"], sorted(m.coord for m in s.merged_cells.ranges))


def test_format():
    from openpyxl import Workbook
    from pykern.pkunit import pkeq
    from xlpage import header

    s = Workbook().active
    header.Layout(s).row(
        1,
        [
            {"label": "Plain", "width": 20, "background_color": "#0f0"},
            {"label": "Red", "color": "#F00"},
            {"label": None},
            {},
        ],
    )
    c = s.cell(row=1, column=1)
    pkeq("Plain", c.value)
    pkeq(True, c.font.b)
    pkeq(8, c.font.sz)
    pkeq("top", c.alignment.vertical)
    pkeq(True, c.alignment.wrap_text)
    pkeq("thin", c.border.left.style)
    pkeq("thin", c.border.bottom.style)
    pkeq("solid", c.fill.fill_type)
    pkeq("0000ff00", c.fill.fgColor.rgb)
    pkeq(20, s.column_dimensions["A"].width)
    v = s.cell(row=1, column=2).value
    pkeq("Red", v[0].text)
    pkeq("00FF0000", v[0].font.color.rgb)
    pkeq(True, v[0].font.b)
    pkeq(8, v[0].font.sz)
    pkeq("", s.cell(row=1, column=3).value)
    pkeq(None, s.cell(row=1, column=4).value)
    pkeq("thin", s.cell(row=1, column=4).border.top.style)


def test_invalid_color():
    from openpyxl import Workbook
    from pykern.pkunit import pkexcept
    from xlpage import header

    with pkexcept("InvalidColor.*background color=#12 col=2"):
        header.Layout(Workbook().active).row(
            1,
            [{"label": "a"}, {"label": "b", "background_color": "#12"}],
        )
    with pkexcept("InvalidColor.*foreground color=red col=1"):
        header.Layout(Workbook().active).row(1, [{"label": "a", "color": "red"}])


def test_merge_conflict():
    from openpyxl import Workbook
    from pykern.pkunit import pkexcept
    from xlpage import header

    s = Workbook().active
    s.merge_cells("C2:D2")
    with pkexcept("MergeConflict.*row=2 col=2 to row=2 col=3.*C2:D2"):
        header.Layout(s).row(2, [{"label": "a"}, {"label": "b", "col_span": 2}])

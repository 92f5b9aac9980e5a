"""test xlpage.page

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""


def test_report():
    from pykern.pkcollections import PKDict
    from pykern.pkunit import pkeq
    from xlpage import page, workbook
    import datetime

    r = workbook.Workbook().read_stream(
        page.report(
            PKDict(
                name="one",
                title="Inventory",
                default_number_format="0.00",
                columns=[
                    [
                        PKDict(label="Item", row_span=2, width=30),
                        PKDict(label="Stock", col_span=2, background_color="#ccc"),
                        PKDict(label="Due", row_span=2, color="#c00"),
                    ],
                    [PKDict(label="On hand"), PKDict(label="Ordered")],
                ],
                rows=[
                    [
                        "  Widget\n  large ",
                        PKDict(value=12, number_format="0"),
                        PKDict(value=3.5),
                        datetime.date(2024, 2, 3),
                    ],
                    ["Gadget", 4, None, None],
                ],
            ),
            PKDict(
                name="two",
                columns=[[PKDict(label="Only")]],
                rows=[[1]],
            ),
        ),
    )
    pkeq(["one", "two"], r.xl.sheetnames)
    s = r.sheet("one")
    pkeq("Inventory", s.value(1, 1))
    pkeq(14, s.xl["A1"].font.sz)
    pkeq(True, s.xl["A1"].font.b)
    pkeq(
        ["A2:A3", "B2:C2", "D2:D3"],
        sorted(m.coord for m in s.xl.merged_cells.ranges),
    )
    pkeq(
        dict(item="Item", stock="Stock", ordered=None, due="Due"),
        s.values_by_schema(2, 1, "row", ["item", "stock", "ordered", "due"]),
    )
    pkeq("On hand", s.value(3, "B"))
    pkeq("Ordered", s.value(3, "C"))
    pkeq(True, s.xl["B3"].font.b)
    pkeq(8, s.xl["B3"].font.sz)
    pkeq(30, s.xl.column_dimensions["A"].width)
    pkeq(
        dict(
            item="Widget large",
            on_hand=12,
            ordered=3.5,
            due=datetime.datetime(2024, 2, 3),
        ),
        s.values_by_schema(4, 1, "row", ["item", "on_hand", "ordered", "due"]),
    )
    pkeq("0", s.xl["B4"].number_format)
    pkeq("0.00", s.xl["C4"].number_format)
    pkeq("General", s.xl["B5"].number_format)
    pkeq(8, s.xl["A5"].font.sz)
    pkeq(False, bool(s.xl["A5"].font.b))
    pkeq("top", s.xl["A5"].alignment.vertical)
    pkeq(None, s.value(5, 3))
    s = r.sheet(1)
    pkeq("Only", s.value(1, 1))
    pkeq(1, s.value(2, 1))


def test_build_errors():
    from openpyxl import Workbook
    from pykern.pkunit import pkexcept
    from xlpage import error, page

    with pkexcept("at least one page"):
        page.report()
    with pkexcept("name is required"):
        page.report(dict(title="no name"))
    with pkexcept(error.MergeConflict):
        page.report(
            dict(
                name="bad",
                columns=[
                    [dict(label="a"), dict(label="b", row_span=2)],
                    [dict(label="c", col_span=2)],
                ],
            ),
        )
    with pkexcept("InvalidCellAssignment.*row=2 col=1"):
        page.build(
            Workbook(),
            dict(name="x", columns=[[dict(label="a")]], rows=[[{"value": "\x01"}]]),
        )

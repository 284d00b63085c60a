"""Catalog of the chart query parameters understood by the Image-Charts API.

Each entry becomes a fluent method on ``ImageCharts`` named after its query key,
e.g. ``ImageCharts().cht("p").chs("300x300")``. Values are opaque strings in the
API's own mini-language and are never validated client-side.
"""

from __future__ import annotations

from dataclasses import dataclass

DOCS = "https://documentation.image-charts.com"

ACCOUNT_ID_KEY = "icac"
SIGNATURE_KEY = "ichm"
ANIMATION_KEY = "chan"


@dataclass(frozen=True)
class ChartParameter:
    name: str
    key: str
    summary: str
    reference: str = ""


PARAMETERS: tuple[ChartParameter, ...] = (
    ChartParameter("cht", "cht", "Chart type (bvg, bvs, lc, ls, p, gv, ...)", f"{DOCS}/reference/chart-type/"),
    ChartParameter("chd", "chd", "Chart data", f"{DOCS}/reference/data-format/"),
    ChartParameter(
        "chds",
        "chds",
        "Data format with custom scaling",
        f"{DOCS}/reference/data-format/#text-format-with-custom-scaling",
    ),
    ChartParameter("choe", "choe", "QR code data encoding", f"{DOCS}/qr-codes/#data-encoding"),
    ChartParameter(
        "chld",
        "chld",
        "QR code error correction level and optional margin",
        f"{DOCS}/qr-codes/#error-correction-level-and-margin",
    ),
    ChartParameter("chxr", "chxr", "Axis data-range", f"{DOCS}/reference/chart-axis/#axis-range"),
    ChartParameter("chof", "chof", "Image output format (.png, .svg, .gif)", f"{DOCS}/reference/output-format/"),
    ChartParameter("chs", "chs", "Chart size (<width>x<height>)", f"{DOCS}/reference/chart-size/"),
    ChartParameter(
        "chdl", "chdl", "Text for each series, to display in the legend", f"{DOCS}/reference/legend-text-and-style/"
    ),
    ChartParameter("chdls", "chdls", "Chart legend text and style", f"{DOCS}/reference/legend-text-and-style/"),
    ChartParameter("chg", "chg", "Solid or dotted grid lines", f"{DOCS}/reference/grid-lines/"),
    ChartParameter("chco", "chco", "Series colors", f"{DOCS}/bar-charts/#examples"),
    ChartParameter("chtt", "chtt", "Chart title", f"{DOCS}/reference/chart-title/"),
    ChartParameter("chts", "chts", "Chart title colors and font size", f"{DOCS}/reference/chart-title/"),
    ChartParameter(
        "chxt",
        "chxt",
        "Display values on your axis lines or change which axes are shown",
        f"{DOCS}/reference/chart-axis/#visible-axes",
    ),
    ChartParameter(
        "chxl", "chxl", "Custom string axis labels on any axis", f"{DOCS}/reference/chart-axis/#custom-axis-labels"
    ),
    ChartParameter(
        "chxs",
        "chxs",
        "Font size, color for axis labels, both custom labels and default label values",
        f"{DOCS}/reference/chart-axis/#axis-label-styles",
    ),
    ChartParameter("chm", "chm", "Compound charts and line fills", f"{DOCS}/reference/compound-charts/"),
    ChartParameter("chls", "chls", "Line thickness and solid/dashed style", f"{DOCS}/line-charts/#line-styles"),
    ChartParameter(
        "chl", "chl", "Bar, pie slice, doughnut slice and polar slice chart labels", f"{DOCS}/reference/chart-label/"
    ),
    ChartParameter(
        "chlps",
        "chlps",
        "Position and style of labels on data",
        f"{DOCS}/reference/chart-label/#positionning-and-formatting",
    ),
    ChartParameter("chma", "chma", "Chart margins", f"{DOCS}/reference/chart-margin/"),
    ChartParameter(
        "chdlp",
        "chdlp",
        "Position of the legend and order of the legend entries",
        f"{DOCS}/reference/legend-text-and-style/",
    ),
    ChartParameter("chf", "chf", "Background fills", f"{DOCS}/reference/background-fill/"),
    ChartParameter("chbr", "chbr", "Bar corner radius", f"{DOCS}/bar-charts/#rounded-bar"),
    ChartParameter("chan", ANIMATION_KEY, "GIF animation configuration", f"{DOCS}/reference/animation/"),
    ChartParameter("chli", "chli", "Doughnut chart inside label", f"{DOCS}/pie-charts/#inside-label"),
    ChartParameter("icac", ACCOUNT_ID_KEY, "Image-Charts enterprise account id", f"{DOCS}/enterprise/"),
    ChartParameter(
        "ichm", SIGNATURE_KEY, "HMAC-SHA256 signature required to activate paid features", f"{DOCS}/enterprise/"
    ),
    ChartParameter(
        "icff", "icff", "Default font family for all text, from Google Fonts", f"{DOCS}/reference/chart-font/"
    ),
    ChartParameter("icfs", "icfs", "Default font style for all text", f"{DOCS}/reference/chart-font/"),
    ChartParameter("iclocale", "iclocale", "Localization (ISO 639-1)"),
    ChartParameter("icretina", "icretina", "Retina mode", f"{DOCS}/reference/retina/"),
    ChartParameter("icqrb", "icqrb", "Background color for QR codes", f"{DOCS}/qr-codes/#background-color"),
    ChartParameter("icqrf", "icqrf", "Foreground color for QR codes", f"{DOCS}/qr-codes/#foreground-color"),
)

"""Shared helpers for rendering command output."""

from __future__ import annotations

import math
import os
import re
import sys
from dataclasses import fields, is_dataclass
from datetime import datetime, timedelta
from typing import Any, Iterable, Mapping, Sequence

from prolific.config import get_application_url
from prolific.models import DEFAULT_CURRENCY

DARK_GREY = "#989898"
"""Colour used for section markers."""

APP_DATE_TIME_FORMAT = "%d-%m-%Y %H:%M"
"""The format for dates and times shown by the application."""

_PADDING = 1

_ANSI = re.compile(
    "[\u001b\u009b][[\\]()#;?]*(?:(?:(?:[a-zA-Z\\d]*(?:;[a-zA-Z\\d]*)*)?\u0007)"
    "|(?:(?:\\d{1,4}(?:;\\d{0,4})*)?[\\dA-PRZcf-ntqry=><~]))"
)

_CURRENCY_SYMBOLS = {
    "AUD": "A$",
    "BRL": "R$",
    "CAD": "CA$",
    "CNY": "CN¥",
    "EUR": "€",
    "GBP": "£",
    "HKD": "HK$",
    "ILS": "₪",
    "INR": "₹",
    "JPY": "¥",
    "KRW": "₩",
    "MXN": "MX$",
    "NZD": "NZ$",
    "PHP": "₱",
    "TWD": "NT$",
    "USD": "$",
    "VND": "₫",
    "XAF": "FCFA",
    "XCD": "EC$",
}


def _use_colour() -> bool:
    if "NO_COLOR" in os.environ:
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def _styled(text: str, code: str) -> str:
    if not _use_colour():
        return text
    return f"\x1b[{code}m{text}\x1b[0m"


def _hex_to_rgb(colour: str) -> str:
    value = colour.lstrip("#")
    red, green, blue = (int(value[i:i + 2], 16) for i in (0, 2, 4))
    return f"38;2;{red};{green};{blue}"


def render_section_marker() -> str:
    """Return a grey section marker surrounded by blank lines."""
    return f"\n{_styled('---', _hex_to_rgb(DARK_GREY))}\n\n"


def render_heading(heading: str) -> str:
    """Return the heading in bold."""
    return _styled(heading, "1")


def render_money(amount: float, currency_code: str) -> str:
    """Return an amount with its currency symbol, e.g. ``£10.00``."""
    code = (currency_code or DEFAULT_CURRENCY).upper()
    if len(code) != 3 or not code.isascii() or not code.isalpha():
        raise ValueError(f"currency: not a valid ISO code: {currency_code!r}")
    symbol = _CURRENCY_SYMBOLS.get(code, code)
    return f"{symbol}{amount:.2f}"


def render_record_counter(count: int, total: int) -> str:
    """Explain how many records are shown out of the whole collection."""
    word = "records" if count > 1 else "record"
    return f"Showing {count} {word} of {total}"


def render_application_link(entity: str, slug: str) -> str:
    """Return a section marker followed by a link into the web application."""
    return (
        render_section_marker()
        + f"View {entity} in the application: {get_application_url()}/{slug}"
    )


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return _ANSI.sub("", text)


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0 and math.copysign(1.0, value) < 0:
        return "-0"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def _format_offset(offset: timedelta) -> str:
    seconds = int(offset.total_seconds())
    sign = "-" if seconds < 0 else "+"
    seconds = abs(seconds)
    return f"{sign}{seconds // 3600:02d}{(seconds % 3600) // 60:02d}"


def _format_time(moment: datetime) -> str:
    text = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d} "
        f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    if moment.microsecond:
        text += "." + f"{moment.microsecond:06d}".rstrip("0")
    offset = moment.utcoffset() or timedelta(0)
    offset_text = _format_offset(offset)
    if not offset:
        zone = "UTC"
    else:
        name = moment.tzname()
        zone = offset_text if not name or name.startswith("UTC") else name
    return f"{text} {offset_text} {zone}"


def format_value(value: Any) -> str:
    """Format a value the way the default verb of the API tooling does."""
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, datetime):
        return _format_time(value)
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        items = sorted((format_value(k), format_value(v)) for k, v in value.items())
        return "map[" + " ".join(f"{k}:{v}" for k, v in items) + "]"
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(format_value(item) for item in value) + "]"
    if is_dataclass(value) and not isinstance(value, type):
        return "{" + " ".join(format_value(getattr(value, f.name)) for f in fields(value)) + "}"
    return str(value)


def _measure(lines: list[list[str]], widths: list[list[int]], start: int, end: int, column: int) -> None:
    row = start
    while row < end:
        if column >= len(lines[row]) - 1:
            row += 1
            continue
        first = row
        width = 0
        while row < end and column < len(lines[row]) - 1:
            width = max(width, len(lines[row][column]) + _PADDING)
            row += 1
        for index in range(first, row):
            widths[index].append(width)
        _measure(lines, widths, first, row, column + 1)


def align_columns(rows: Iterable[Sequence[Any]]) -> str:
    """Lay rows out in space-padded columns.

    Every cell of a row but the last belongs to a column; the last cell is
    written as it is. Columns are sized over runs of consecutive rows that
    have them, each cell padded to the widest cell plus one space.
    """
    lines = [[str(cell) for cell in row] for row in rows]
    widths: list[list[int]] = [[] for _ in lines]
    _measure(lines, widths, 0, len(lines), 0)
    out = []
    for cells, line_widths in zip(lines, widths):
        body = "".join(cell.ljust(width) for cell, width in zip(cells[:-1], line_widths))
        out.append(body + (cells[-1] if cells else "") + "\n")
    return "".join(out)
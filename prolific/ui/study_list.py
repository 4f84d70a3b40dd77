"""Ways of listing studies: interactive, as a table or as CSV."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, fields
from typing import Any, Optional, Protocol, TextIO

from prolific.ui.render import align_columns, format_value, render_heading
from prolific.ui.study_view import render_study

DEFAULT_LIST_FIELDS = "ID,Name,Status"
"""Fields shown when the user has not chosen any."""

_NO_FIELD = "<invalid reflect.Value>"
_ZERO_TIME = "0001-01-01 00:00:00 +0000 UTC"
_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_PROMPT = "Select a study (number, or text to search; empty to quit): "


def field_value(record: Any, name: str) -> str:
    """Return the formatted value of a record's field, named in PascalCase.

    ``ExternalStudyURL`` names the ``external_study_url`` attribute. A name
    that matches no field gives ``<invalid reflect.Value>``.
    """
    if not name[:1].isupper():
        return _NO_FIELD
    attribute = _WORD_BOUNDARY.sub("_", name).lower()
    types = {f.name: str(f.type) for f in fields(record)}
    if attribute not in types:
        return _NO_FIELD
    value = getattr(record, attribute)
    if value is None and "datetime" in types[attribute]:
        return _ZERO_TIME
    return format_value(value)


def _field_list(chosen: str) -> list[str]:
    return [name.strip(" ") for name in (chosen or DEFAULT_LIST_FIELDS).split(",")]


@dataclass
class ListUsedOptions:
    """The options the user chose for the list."""

    status: str = ""
    non_interactive: bool = False
    fields: str = ""
    project_id: str = ""


class _Strategy(Protocol):
    def render(self, client: Any, opts: ListUsedOptions, out: TextIO) -> None: ...


class ListRenderer:
    """Renders the study list with an exchangeable strategy."""

    def __init__(self, strategy: _Strategy) -> None:
        self.strategy = strategy

    def render(self, client: Any, opts: ListUsedOptions, out: TextIO) -> None:
        self.strategy.render(client, opts, out)


class InteractiveRenderer:
    """Lets the user search the studies and pick one to view in detail."""

    def __init__(self, stdin: Optional[TextIO] = None) -> None:
        self.stdin = stdin

    def render(self, client: Any, opts: ListUsedOptions, out: TextIO) -> None:
        studies = list(client.get_studies(opts.status, opts.project_id).results)
        stdin = self.stdin if self.stdin is not None else sys.stdin
        visible = studies
        while True:
            out.write(render_heading("My studies") + "\n\n")
            if not visible:
                out.write("No items.\n")
            for number, study in enumerate(visible, 1):
                out.write(f"{number:>3}. {study.title()}\n     {study.description()}\n")
            out.write("\n" + _PROMPT)
            line = stdin.readline()
            choice = line.strip()
            if not choice:
                return
            if choice.isdigit() and 1 <= int(choice) <= len(visible):
                out.write(render_study(visible[int(choice) - 1]) + "\n")
                return
            needle = choice.casefold()
            visible = [s for s in studies if needle in s.filter_value().casefold()]


class NonInteractiveRenderer:
    """Writes the studies as an aligned table."""

    def render(self, client: Any, opts: ListUsedOptions, out: TextIO) -> None:
        studies = client.get_studies(opts.status, opts.project_id)
        names = _field_list(opts.fields)
        rows = [names + [""]]
        rows.extend([field_value(study, name) for name in names] + [""] for study in studies.results)
        out.write(align_columns(rows))


class CsvRenderer:
    """Writes the studies as comma separated values."""

    def render(self, client: Any, opts: ListUsedOptions, out: TextIO) -> None:
        studies = client.get_studies(opts.status, opts.project_id)
        names = _field_list(opts.fields)
        out.write("".join(f"{name}," for name in names) + "\n")
        for study in studies.results:
            cells = (field_value(study, name) for name in names)
            out.write("".join(f'"{c}",' if "," in c else f"{c}," for c in cells) + "\n")
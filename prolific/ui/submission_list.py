"""Ways of listing the submissions of a study: as a table or as CSV."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, TextIO

from prolific.ui.render import align_columns, render_record_counter
from prolific.ui.study_list import field_value

DEFAULT_LIST_FIELDS = "ParticipantID,StartedAt,TimeTaken,StudyCode,Status"
"""Fields shown when the user has not chosen any."""


def _field_list(chosen: str) -> list[str]:
    return [name.strip(" ") for name in (chosen or DEFAULT_LIST_FIELDS).split(",")]


def _total(response: Any) -> int:
    meta = getattr(response, "meta", None)
    return meta.count if meta is not None else 0


@dataclass
class ListUsedOptions:
    """The options the user chose for the list."""

    study_id: str = ""
    status: str = ""
    csv: bool = False
    non_interactive: bool = False
    fields: str = ""
    limit: int = 0
    offset: int = 0


class _Strategy(Protocol):
    def render(self, client: Any, opts: ListUsedOptions, out: TextIO) -> None: ...


class ListRenderer:
    """Renders the submission list with an exchangeable strategy."""

    def __init__(self, strategy: _Strategy) -> None:
        self.strategy = strategy

    def render(self, client: Any, opts: ListUsedOptions, out: TextIO) -> None:
        self.strategy.render(client, opts, out)


class NonInteractiveRenderer:
    """Writes the submissions as an aligned table with a record counter."""

    def render(self, client: Any, opts: ListUsedOptions, out: TextIO) -> None:
        submissions = client.get_submissions(opts.study_id, opts.limit, opts.offset)
        names = _field_list(opts.fields)
        results = list(submissions.results)
        rows = [names + [""]]
        rows.extend([field_value(s, name) for name in names] + [""] for s in results)
        out.write(align_columns(rows))
        out.write(f"\n{render_record_counter(len(results), _total(submissions))}\n")


class CsvRenderer:
    """Writes the submissions as comma separated values."""

    def render(self, client: Any, opts: ListUsedOptions, out: TextIO) -> None:
        submissions = client.get_submissions(opts.study_id, opts.limit, opts.offset)
        names = _field_list(opts.fields)
        out.write("".join(f"{name}," for name in names) + "\n")
        for submission in submissions.results:
            cells = (field_value(submission, name) for name in names)
            out.write("".join(f'"{c}",' if "," in c else f"{c}," for c in cells) + "\n")
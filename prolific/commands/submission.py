"""The ``submission`` command and its sub-commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TextIO

import click

from prolific.ui.submission_list import (
    CsvRenderer,
    ListRenderer,
    ListUsedOptions,
    NonInteractiveRenderer,
)

DEFAULT_RECORD_LIMIT = 200
"""Number of records requested when the user does not choose a limit."""

DEFAULT_RECORD_OFFSET = 0
"""Number of records skipped when the user does not choose an offset."""

_LIST_FIELDS = (
    "ID", "ParticipantID", "StartedAt", "CompletedAt", "IsComplete", "TimeTaken",
    "Reward", "Status", "StudyCode", "StarAwarded", "BonusPayments", "IP",
)


def _examples(text: str) -> str:
    """Keep each paragraph of example text as it is written."""
    return "\n\n".join("\b\n" + paragraph for paragraph in text.strip().split("\n\n"))


@dataclass
class _ListOptions:
    args: list[str] = field(default_factory=list)
    non_interactive: bool = True
    fields: str = ""
    study: str = ""
    csv: bool = False
    limit: int = DEFAULT_RECORD_LIMIT
    offset: int = DEFAULT_RECORD_OFFSET


def new_list_command(client: Any, out: TextIO) -> click.Command:
    """Build the ``submission list`` command."""
    field_lines = "\n".join(f"- {name}" for name in _LIST_FIELDS)

    @click.command(
        "list",
        short_help="Provide details about your submissions, requires Study ID",
        help=(
            "List submissions for a given study\n\n"
            "A published study will have submissions taken by the Prolific Participants. "
            "This commands allows you to list those submissions."
        ),
        epilog=_examples(
            f"""
You can list all the submissions for a given study
$ prolific submission list -s 63c123af913a974f87e8e7fc

You can use the paging options to limit the submissions returned, for example 5
$ prolific submission list -s 63c123af913a974f87e8e7fc -l 5

You can also offset the results, for example skipping 5
$ prolific submission list -s 63c123af913a974f87e8e7fc -l 5 -o 5

You can render the results as a CSV format
$ prolific submission list -s 63c123af913a974f87e8e7fc -l 5 -c

You can specify the fields you want to render in either the standard or CSV view
$ prolific submission list -s 63c123af913a974f87e8e7fc -f ID,Status,TimeTaken

The fields you can use are
{field_lines}
"""
        ),
    )
    @click.option("-n", "--non-interactive", is_flag=True, default=True,
                  help="Render the list details straight to the terminal.")
    @click.option("-c", "--csv", is_flag=True, default=False,
                  help="Render the list details in a CSV format.")
    @click.option("-s", "--study", default="", help="The study we want submissions for.")
    @click.option("-f", "--fields", default="",
                  help="Comma separated list of fields you want to display in non-interactive/csv mode.")
    @click.option("-l", "--limit", type=int, default=DEFAULT_RECORD_LIMIT,
                  help="Limit the number of events returned.")
    @click.option("-o", "--offset", type=int, default=DEFAULT_RECORD_OFFSET,
                  help="The number of events to offset.")
    @click.argument("args", nargs=-1)
    def command(non_interactive: bool, csv: bool, study: str, fields: str,
                limit: int, offset: int, args: tuple[str, ...]) -> None:
        options = _ListOptions(
            args=list(args), non_interactive=non_interactive, fields=fields,
            study=study, csv=csv, limit=limit, offset=offset,
        )
        if not options.study:
            raise click.ClickException("please provide a study ID")

        strategy: Any = CsvRenderer() if options.csv else NonInteractiveRenderer()
        used = ListUsedOptions(
            study_id=options.study,
            csv=options.csv,
            non_interactive=options.non_interactive,
            fields=options.fields,
            limit=options.limit,
            offset=options.offset,
        )
        try:
            ListRenderer(strategy).render(client, used, out)
        except Exception as err:
            raise click.ClickException(f"error: {err}") from err

    return command


def new_submission_command(client: Any, out: TextIO) -> click.Group:
    """Build the ``submission`` command group."""
    group = click.Group(
        "submission",
        short_help="Manage and view your study submissions",
        help=(
            "Manage study submissions\n\n"
            "A published study will have submissions taken by the Prolific Participants. "
            "These commands allow you to manage those submissions."
        ),
    )
    group.add_command(new_list_command(client, out))
    return group
"""The ``workspace`` command and its sub-commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TextIO

import click

from prolific.commands.submission import DEFAULT_RECORD_LIMIT, DEFAULT_RECORD_OFFSET
from prolific.models import Workspace
from prolific.ui.render import align_columns, format_value, render_record_counter


def _examples(text: str) -> str:
    """Keep each paragraph of example text as it is written."""
    return "\n\n".join("\b\n" + paragraph for paragraph in text.strip().split("\n\n"))


@dataclass
class CreateOptions:
    """Options for creating a workspace."""

    args: list[str] = field(default_factory=list)
    title: str = ""
    naivety_distribution_rate: int = 0


@dataclass
class WorkspaceListOptions:
    """Options for listing workspaces."""

    args: list[str] = field(default_factory=list)
    limit: int = DEFAULT_RECORD_LIMIT
    offset: int = DEFAULT_RECORD_OFFSET


def create_workspace(client: Any, options: CreateOptions, out: TextIO) -> None:
    """Create a workspace and report its ID."""
    if not options.title:
        raise ValueError("title is required")

    workspace = Workspace(
        title=options.title,
        naivety_distribution_rate=float(options.naivety_distribution_rate),
    )
    record = client.create_workspace(workspace)
    out.write(f"Created workspace: {record.id}\n")


def render_workspaces(client: Any, options: WorkspaceListOptions, out: TextIO) -> None:
    """Write the workspaces as a table followed by a record counter."""
    workspaces = client.get_workspaces(options.limit, options.offset)
    results = list(workspaces.results)

    rows = [["ID", "Title", "Description"]]
    rows.extend(
        [workspace.id, workspace.title, format_value(workspace.description)]
        for workspace in results
    )
    out.write(align_columns(rows))

    meta = getattr(workspaces, "meta", None)
    total = meta.count if meta is not None else 0
    out.write(f"\n{render_record_counter(len(results), total)}\n")


def new_create_command(command_name: str, client: Any, out: TextIO) -> click.Command:
    """Build the command that creates a workspace under the given name."""

    @click.command(
        command_name,
        short_help="Create a workspace",
        help=(
            "Create a workspace on your account\n\n"
            "As a user, you can have many workspaces, maybe personally or for your "
            "organisation. This allows you to create a workspace. Each workspace can then "
            "have one or more projects to organise your studies."
        ),
        epilog=_examples(
            """
To create a workspace
$ prolific workspace create -t "Research into AI"

You can also configure if your studies should focus on speed, or participant
naivety. By specifying 0, your study will become available to all eligible
participants straight away. By specifying anything greater than 0, up to 1, you
are delaying your study for participants who are rather active on the Prolific
Platform. This can be overridden at the project level.
$ prolific workspace create -t "Research into AI" -n 0
"""
        ),
    )
    @click.option("-t", "--title", default="", help="The title of the workspace.")
    @click.option("-n", "--naivety", type=int, default=0,
                  help="The speed vs naivety value. 0 = speed, 1 = naive.")
    @click.argument("args", nargs=-1)
    def command(title: str, naivety: int, args: tuple[str, ...]) -> None:
        options = CreateOptions(args=list(args), title=title, naivety_distribution_rate=naivety)
        try:
            create_workspace(client, options, out)
        except Exception as err:
            raise click.ClickException(f"error: {err}") from err

    return command


def new_list_command(command_name: str, client: Any, out: TextIO) -> click.Command:
    """Build the command that lists workspaces under the given name."""

    @click.command(
        command_name,
        short_help="Provide details about your workspaces",
        help=(
            "List your workspaces\n\n"
            "As a user, you can have many workspaces, maybe personally or for your "
            "organisation. This allows you to list all of the workspaces your token has "
            "access to. Each workspace then has one or many projects to organise your studies."
        ),
        epilog=_examples(
            """
List your workspaces
$ prolific workspace list

Utilise the paging options to limit your workspaces, for example one workspace
$ prolific workspace list -l 1

Offset records in the result set, for example by 2
$ prolific workspace list -l 1 -o 2
"""
        ),
    )
    @click.option("-l", "--limit", type=int, default=DEFAULT_RECORD_LIMIT,
                  help="Limit the number of workspaces returned")
    @click.option("-o", "--offset", type=int, default=DEFAULT_RECORD_OFFSET,
                  help="The number of workspaces to offset")
    @click.argument("args", nargs=-1)
    def command(limit: int, offset: int, args: tuple[str, ...]) -> None:
        options = WorkspaceListOptions(args=list(args), limit=limit, offset=offset)
        try:
            render_workspaces(client, options, out)
        except Exception as err:
            raise click.ClickException(f"error: {err}") from err

    return command


def new_workspace_command(client: Any, out: TextIO) -> click.Group:
    """Build the ``workspace`` command group."""
    group = click.Group(
        "workspace",
        short_help="Manage and view your workspaces",
        help=(
            "Manage your Workspaces\n\n"
            "Workspaces are a new way for you to collaborate with your teammates and "
            "organise research on Prolific. Each workspace has its own set of projects, "
            "studies, team members and funds."
        ),
    )
    group.add_command(new_list_command("list", client, out))
    group.add_command(new_create_command("create", client, out))
    return group
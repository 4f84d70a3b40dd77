"""The ``whoami`` command, showing details of the account."""

from __future__ import annotations

from typing import Any, TextIO

import click

from prolific.ui.render import render_heading


def render_me(client: Any, out: TextIO) -> None:
    """Write information about the user account."""
    me = client.get_me()

    content = render_heading(f"{me.first_name} {me.last_name}") + "\n"
    content += f"ID:                {me.id}\n"
    content += f"Email:             {me.email}\n"

    out.write(content + "\n")


def new_me_command(client: Any, out: TextIO) -> click.Command:
    """Build the ``whoami`` command."""

    @click.command("whoami", short_help="View details about your account",
                   help="View details about your account")
    def command() -> None:
        try:
            render_me(client, out)
        except Exception as err:
            raise click.ClickException(f"error: {err}") from err

    return command
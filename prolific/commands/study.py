"""The ``study`` command and its sub-commands."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TextIO

import click
import yaml

from prolific.study import (
    STATUS_ALL,
    STUDY_LIST_STATUS,
    TRANSITION_LIST,
    TRANSITION_STUDY_PUBLISH,
    CreateStudy,
    UpdateStudy,
)
from prolific.ui.study_list import (
    CsvRenderer,
    InteractiveRenderer,
    ListRenderer,
    ListUsedOptions,
    NonInteractiveRenderer,
)
from prolific.ui.study_view import get_study_url, render_study

_SUPPORTED_TEMPLATES = ("json", "yaml", "yml")

_LIST_FIELDS = (
    "ID", "Name", "InternalName", "DateCreated", "TotalAvailablePlaces", "Reward",
    "CanAutoReview", "Desc", "EstimatedCompletionTime", "MaximumAllowedTime",
    "CompletionURL", "ExternalStudyURL", "PublishedAt", "StartedPublishingAt",
    "AwardPoints", "PresentmentCurrencyCode", "Status", "AverageRewardPerHour",
    "DeviceCompatibility", "PeripheralRequirements", "PlacesTaken",
    "EstimatedRewardPerHour", "Ref", "StudyType", "TotalCost", "PublishAt",
    "IsPilot", "IsUnderpaying",
)


def _examples(text: str) -> str:
    """Keep each paragraph of example text as it is written."""
    return "\n\n".join("\b\n" + paragraph for paragraph in text.strip().split("\n\n"))


def _fail(err: BaseException) -> click.ClickException:
    return click.ClickException(f"error: {err}")


@dataclass
class CreateOptions:
    """Options for creating a study."""

    args: list[str] = field(default_factory=list)
    template_path: str = ""
    publish: bool = False
    silent: bool = False


@dataclass
class TransitionOptions:
    """Options for transitioning a study."""

    args: list[str] = field(default_factory=list)
    action: str = ""
    silent: bool = False


def _read_template(path: str) -> dict[str, Any]:
    extension = Path(path).suffix.lower().lstrip(".")
    if extension not in _SUPPORTED_TEMPLATES:
        raise ValueError(f'Unsupported Config Type "{extension}"')
    try:
        with open(path, encoding="utf-8") as handle:
            data = json.load(handle) if extension == "json" else yaml.safe_load(handle)
    except FileNotFoundError:
        raise ValueError(f"open {path}: no such file or directory") from None
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"unable to map {path} to study model: not a mapping")
    return {str(key).lower(): value for key, value in data.items()}


def create_study(client: Any, options: CreateOptions, out: TextIO) -> None:
    """Create a study from a template file, optionally publishing it."""
    data = _read_template(options.template_path)
    try:
        template = CreateStudy.from_dict(data)
    except (TypeError, ValueError, AttributeError) as err:
        raise ValueError(
            f"unable to map {options.template_path} to study model: {err}"
        ) from err

    study = client.create_study(template)

    if options.publish:
        client.transition_study(study.id, TRANSITION_STUDY_PUBLISH)
        study = client.get_study(study.id)

    if not options.silent:
        out.write(render_study(study) + "\n")


def transition_study(client: Any, options: TransitionOptions, out: TextIO) -> None:
    """Move a study to a new status and show it unless silenced."""
    if not options.action:
        raise ValueError("you must provide an action to transition the study to")

    study_id = options.args[0]
    client.transition_study(study_id, options.action)

    if not options.silent:
        study = client.get_study(study_id)
        out.write(render_study(study) + "\n")


def new_create_command(client: Any, out: TextIO) -> click.Command:
    """Build the ``study create`` command."""

    @click.command(
        "create",
        short_help="Creation of studies",
        help="Create studies on the Prolific Platform",
        epilog=_examples(
            """
To create studies via the CLI, you define your study as a JSON/YAML file
$ prolific study create -t /path/to/study.json
$ prolific study create -t /path/to/study.yml

You can also create and publish a study at the same time
$ prolific study create -t /path/to/study.json -p

If you are using the CLI in other tooling, you may want to silence the returned
output of the study creation, so you can use the "-s" flag.
$ prolific study create -t /path/to/study.json -p -s
"""
        ),
    )
    @click.option("-t", "--template-path", default="",
                  help="Path to a YAML file containing your studies you want to create")
    @click.option("-p", "--publish", is_flag=True, default=False,
                  help="Publish the study once created.")
    @click.option("-s", "--silent", is_flag=True, default=False,
                  help="Silently create the study. It will not render the study once created.")
    @click.argument("args", nargs=-1)
    def command(template_path: str, publish: bool, silent: bool, args: tuple[str, ...]) -> None:
        options = CreateOptions(
            args=list(args), template_path=template_path, publish=publish, silent=silent
        )
        if not options.template_path:
            raise click.ClickException(
                "error: Can only create via a template YAML file at the moment"
            )
        try:
            create_study(client, options, out)
        except Exception as err:
            raise _fail(err) from err

    return command


def new_duplicate_command(client: Any, out: TextIO) -> click.Command:
    """Build the ``study duplicate`` command."""

    @click.command(
        "duplicate",
        short_help="Duplicate an existing study",
        help=(
            "Duplicate an existing study\n\n"
            "This may be useful if you have a templated study in the web application. If you "
            "are mainly using the CLI, you can define a JSON/YAML file to pass into the "
            '"study create" command'
        ),
        epilog=_examples(
            """
To duplicate a study, you need the ID
$ prolific study duplicate 64395e9c2332b8a59a65d51e
"""
        ),
    )
    @click.argument("args", nargs=-1, required=True)
    def command(args: tuple[str, ...]) -> None:
        try:
            study = client.duplicate_study(args[0])
        except Exception as err:
            raise _fail(err) from err
        out.write(f"{study.id}\n")

    return command


def new_increase_places_command(client: Any, out: TextIO) -> click.Command:
    """Build the ``study increase-places`` command."""

    @click.command(
        "increase-places",
        short_help="Increase the total available places on a study",
        help=(
            "Increase the places on your study.\n\n"
            "You can only increase places on your study, not decrease. This is helpful if "
            "you run a trial study with a smaller group of participants, and then want to "
            "expand to a wider audience."
        ),
        epilog=_examples(
            """
$ prolific study increase-places 64395e9c2332b8a59a65d51e -p 300
$ prolific study increase-places 64395e9c2332b8a59a65d51e --places 5000
"""
        ),
    )
    @click.option("-p", "--places", type=int, default=0,
                  help="The number of places you want to set on your study.")
    @click.argument("args", nargs=-1, required=True)
    def command(places: int, args: tuple[str, ...]) -> None:
        try:
            study = client.get_study(args[0])
        except Exception as err:
            raise _fail(err) from err

        if study.total_available_places > places:
            raise click.ClickException(
                f"study currently has {study.total_available_places} places, "
                f"and you cannot decrease the available places to {places}"
            )

        try:
            updated = client.update_study(study.id, UpdateStudy(total_available_places=places))
        except Exception as err:
            raise click.ClickException(str(err)) from err

        out.write(render_study(updated) + "\n")

    return command


def new_list_command(command_name: str, client: Any, out: TextIO) -> click.Command:
    """Build the command that lists studies under the given name."""
    field_lines = "\n".join(f"- {name}" for name in _LIST_FIELDS)

    @click.command(
        command_name,
        short_help="List all of your studies",
        help=(
            "List your studies\n\n"
            "This command allows you to understand what is happening with your studies "
            "on the Prolific Platform."
        ),
        epilog=_examples(
            f"""
You can list all your studies in an interactive manner. This is a searchable
interface. When you have found the study you want to look into in more detail,
select it.
$ prolific study list

You can provide a non-iterative experience
$ prolific study list -n

You can filter the studies by the project they are assigned to
$ prolific study list -p 6261321e223a605c7a4f7561

You can filter the studies by their status, for example your active studies
$ prolific study list -s active

You can render the results as a CSV format
$ prolific study list -c

You can specify the fields you want to render in either the non-iterative or CSV view
$ prolific study list -f ID,InternalName,TotalCost -c

The fields you can use are
{field_lines}
"""
        ),
    )
    @click.option("-s", "--status", default=STATUS_ALL,
                  help=f"The status you want to filter on: {', '.join(STUDY_LIST_STATUS)}.")
    @click.option("-n", "--non-interactive", is_flag=True, default=False,
                  help="Render the list details straight to the terminal.")
    @click.option("-c", "--csv", is_flag=True, default=False,
                  help="Render the list details in a CSV format.")
    @click.option("-f", "--fields", default="",
                  help="Comma separated list of fields you want to display in non-interactive/csv mode.")
    @click.option("-p", "--project", default="", help="Get studies for a given project ID.")
    @click.argument("args", nargs=-1)
    def command(status: str, non_interactive: bool, csv: bool, fields: str,
                project: str, args: tuple[str, ...]) -> None:
        if csv:
            strategy: Any = CsvRenderer()
        elif non_interactive:
            strategy = NonInteractiveRenderer()
        else:
            strategy = InteractiveRenderer()

        options = ListUsedOptions(
            status=status, non_interactive=non_interactive, fields=fields, project_id=project
        )
        try:
            ListRenderer(strategy).render(client, options, out)
        except Exception as err:
            raise _fail(err) from err

    return command


def new_transition_command(client: Any, out: TextIO) -> click.Command:
    """Build the ``study transition`` command."""

    @click.command(
        "transition",
        short_help="Transition the status of a study",
        help="You can pause, start, stop or publish a study",
    )
    @click.option("-a", "--action", default="",
                  help=f"Transition a study, it can be one of {', '.join(TRANSITION_LIST)}")
    @click.option("-s", "--silent", is_flag=True, default=False,
                  help="Silently transition the study. It will not render the study afterwards.")
    @click.argument("args", nargs=-1, required=True)
    def command(action: str, silent: bool, args: tuple[str, ...]) -> None:
        options = TransitionOptions(args=list(args), action=action, silent=silent)
        try:
            transition_study(client, options, out)
        except Exception as err:
            raise _fail(err) from err

    return command


def new_view_command(client: Any, out: TextIO) -> click.Command:
    """Build the ``study view`` command."""

    @click.command(
        "view",
        short_help="Provide details about your study, requires a Study ID",
        help="View study details",
        epilog=_examples(
            """
To get details about a study
$ prolific study view 64395e9c2332b8a59a65d51e
"""
        ),
    )
    @click.option("-W", "--web", is_flag=True, default=False,
                  help="Show the address of the study in the web application")
    @click.argument("args", nargs=-1, required=True)
    def command(web: bool, args: tuple[str, ...]) -> None:
        if web:
            out.write(get_study_url(args[0]) + "\n")
            return
        try:
            study = client.get_study(args[0])
        except Exception as err:
            raise _fail(err) from err
        out.write(render_study(study) + "\n")

    return command


def new_study_command(client: Any, out: TextIO) -> click.Group:
    """Build the ``study`` command group."""
    group = click.Group("study", short_help="Manage and view your studies",
                        help="Manage and view your studies")
    for sub in (
        new_list_command("list", client, out),
        new_view_command(client, out),
        new_create_command(client, out),
        new_duplicate_command(client, out),
        new_increase_places_command(client, out),
        new_transition_command(client, out),
    ):
        group.add_command(sub)
    return group
import io
from dataclasses import dataclass, field
from typing import Any, Optional

import click
import pytest

from prolific.commands.submission import DEFAULT_RECORD_LIMIT, DEFAULT_RECORD_OFFSET
from prolific.commands.workspace import (
    CreateOptions,
    WorkspaceListOptions,
    create_workspace,
    new_create_command,
    new_list_command,
    new_workspace_command,
    render_workspaces,
)
from prolific.models import Workspace


@dataclass
class _Meta:
    count: int = 0


@dataclass
class _ListResponse:
    results: list = field(default_factory=list)
    meta: _Meta = field(default_factory=_Meta)


@dataclass
class _Created:
    id: str = ""


class _Client:
    def __init__(self, created=None, listed=None, error: Optional[Exception] = None):
        self.created = created
        self.listed = listed
        self.error = error
        self.created_with: list[Any] = []
        self.list_calls: list[Any] = []

    def create_workspace(self, workspace):
        self.created_with.append(workspace)
        if self.error is not None:
            raise self.error
        return self.created

    def get_workspaces(self, limit, offset):
        self.list_calls.append((limit, offset))
        if self.error is not None:
            raise self.error
        return self.listed


def _listed():
    return _ListResponse(
        results=[
            Workspace(id="444", title="Office", description="The office workspace"),
            Workspace(id="555", title="Home", description="The home workspace"),
        ],
        meta=_Meta(count=10),
    )


def test_create_command_name_and_short_help():
    cmd = new_create_command("create", _Client(), io.StringIO())
    assert cmd.name == "create"
    assert cmd.short_help == "Create a workspace"


def test_create_command_errors_if_no_title():
    client = _Client(created=_Created(id="123123"))
    cmd = new_create_command("create", client, io.StringIO())
    with pytest.raises(click.ClickException) as info:
        cmd.main([], standalone_mode=False)
    assert info.value.message == "error: title is required"
    assert client.created_with == []


def test_create_command_creates_workspace():
    client = _Client(created=_Created(id="123123"))
    out = io.StringIO()
    cmd = new_create_command("create", client, out)
    cmd.main(["--title", "Titan"], standalone_mode=False)
    assert out.getvalue() == "Created workspace: 123123\n"
    assert client.created_with == [Workspace(title="Titan", naivety_distribution_rate=0.0)]


def test_create_command_passes_naivety():
    client = _Client(created=_Created(id="1"))
    cmd = new_create_command("create", client, io.StringIO())
    cmd.main(["-t", "Titan", "-n", "1"], standalone_mode=False)
    assert client.created_with[0].naivety_distribution_rate == 1.0


def test_create_command_handles_failure_to_create_workspace():
    client = _Client(error=RuntimeError("unable to create workspace"))
    cmd = new_create_command("create", client, io.StringIO())
    with pytest.raises(click.ClickException) as info:
        cmd.main(["--title", "Titan"], standalone_mode=False)
    assert info.value.message == "error: unable to create workspace"


def test_create_workspace_requires_title():
    with pytest.raises(ValueError, match="title is required"):
        create_workspace(_Client(), CreateOptions(), io.StringIO())


def test_list_command_name_and_short_help():
    cmd = new_list_command("workspaces", _Client(), io.StringIO())
    assert cmd.name == "workspaces"
    assert cmd.short_help == "Provide details about your workspaces"


def test_list_command_calls_api():
    client = _Client(listed=_listed())
    out = io.StringIO()
    cmd = new_list_command("workspaces", client, out)
    cmd.main([], standalone_mode=False)

    expected = """ID  Title  Description
444 Office The office workspace
555 Home   The home workspace

Showing 2 records of 10
"""
    assert out.getvalue() == expected
    assert client.list_calls == [(DEFAULT_RECORD_LIMIT, DEFAULT_RECORD_OFFSET)]


def test_list_command_passes_paging():
    client = _Client(listed=_listed())
    cmd = new_list_command("list", client, io.StringIO())
    cmd.main(["-l", "1", "-o", "2"], standalone_mode=False)
    assert client.list_calls == [(1, 2)]


def test_list_command_handles_errors():
    cmd = new_list_command("list", _Client(error=RuntimeError("I am titanium")), io.StringIO())
    with pytest.raises(click.ClickException) as info:
        cmd.main([], standalone_mode=False)
    assert info.value.message == "error: I am titanium"


def test_render_workspaces_with_no_results():
    client = _Client(listed=_ListResponse(results=[], meta=_Meta(count=0)))
    out = io.StringIO()
    render_workspaces(client, WorkspaceListOptions(), out)
    assert out.getvalue() == "ID  Title Description\n\nShowing 0 record of 0\n"


def test_workspace_command_group():
    cmd = new_workspace_command(_Client(), io.StringIO())
    assert cmd.name == "workspace"
    assert cmd.short_help == "Manage and view your workspaces"
    assert sorted(cmd.commands) == ["create", "list"]
# prolific

Building blocks for working with studies, submissions and workspaces on the
Prolific research platform: dataclasses for the API's records, plain-text
renderers for them, and `click` commands that join the two through an API
client you supply.

## Installation

Install the package with your usual Python package tool. It depends on
`click` and `pyyaml`; the test dependencies are in the `test` extra.

## Models

Records are dataclasses, built from decoded JSON with `from_dict`:

```python
from prolific.study import Study

study = Study.from_dict({
    "id": "11223344",
    "name": "Patterns of migratory birds",
    "status": "active",
    "study_type": "single",
    "total_available_places": 515,
})

study.title()              # "Patterns of migratory birds"
study.description()        # "active - single - 515 places available"
study.get_currency_code()  # presentment currency, else currency, else "GBP"
```

`prolific.study` also holds `CreateStudy` (built from a JSON/YAML study
template with `from_dict`, turned into a request body with `to_dict`),
`UpdateStudy`, `SubmissionsConfig`, and the status and transition constants
such as `STATUS_ACTIVE` and `TRANSITION_STUDY_PUBLISH`.

`prolific.models` holds the other records: `Filter`, `FilterRange`,
`FilterSet`, `Requirement`, `RequirementQuestion`, `RequirementAttribute`,
`Submission`, `SubmissionStrata`, `Workspace`, `Project`, `User`, `Secret`,
`Message`, `UnreadMessage`, `Hook`, `HookEvent`, `HookEventType`, `Campaign`,
`ParticipantGroup` and `ParticipantGroupMembership`.

`prolific.config` gives the service locations: `get_application_url()` and
`get_api_url()`.

## Rendering

```python
from prolific.ui.render import render_money, render_record_counter
from prolific.ui.study_view import render_study, get_study_url

render_money(10.0, "GBP")        # "£10.00"
render_money(80001.01, "USD")    # "$80001.01"
render_record_counter(2, 10)     # "Showing 2 records of 10"

print(render_study(study))
print(get_study_url(study.id))   # ".../researcher/studies/11223344"
```

Headings and section markers are styled with ANSI codes only when standard
output is a terminal and `NO_COLOR` is not set; `strip_ansi` removes such
codes. `align_columns` lays rows out in space-padded columns.

- `prolific.ui.filter_view.render_filter` — detail view of a `Filter`
- `prolific.ui.requirement_view.render_requirement` — detail view of a
  `Requirement`
- `prolific.ui.study_list` — `ListRenderer` with the strategies
  `NonInteractiveRenderer` (aligned table), `CsvRenderer` and
  `InteractiveRenderer` (a numbered list read from standard input: type a
  number to view a study, text to search, or nothing to quit)
- `prolific.ui.submission_list` — `ListRenderer` with
  `NonInteractiveRenderer` (table plus record counter) and `CsvRenderer`

List fields are chosen by name, comma separated, e.g. `"ID,Name,Status"`;
`field_value` maps a name such as `ExternalStudyURL` onto the record's
`external_study_url` attribute.

## Commands

The command factories return `click` commands bound to a client and an
output stream:

```python
import sys
from prolific.commands.study import new_study_command

study_group = new_study_command(client, sys.stdout)
study_group.main(["view", "11223344"], standalone_mode=False)
```

- `prolific.commands.study.new_study_command` — `list`, `view`, `create`,
  `duplicate`, `increase-places`, `transition`
- `prolific.commands.submission.new_submission_command` — `list`
- `prolific.commands.workspace.new_workspace_command` — `list`, `create`
- `prolific.commands.user.new_me_command` — `whoami`

The lower-level functions `create_study`, `transition_study`,
`create_workspace`, `render_workspaces` and `render_me` can be called
directly. `study view --web` writes the study's address in the web
application instead of fetching the study.

The client is any object with the calls the commands use: `get_study`,
`get_studies`, `create_study`, `update_study`, `transition_study`,
`duplicate_study`, `get_submissions`, `get_workspaces`, `create_workspace`
and `get_me`. List calls return an object with `results` and, for
submissions and workspaces, `meta.count`. Errors raised by the client
surface as `click.ClickException`s, most of them prefixed with `error:`.

## What this package does not do

- It has no API client: it does not speak HTTP or handle authentication.
  You provide the client object described above.
- It installs no executable command. The `click` groups have to be mounted
  in a program of your own.
- It does not open a web browser.
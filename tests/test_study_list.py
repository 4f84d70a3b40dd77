import io
from types import SimpleNamespace

import pytest

from prolific.study import STATUS_ACTIVE, Study
from prolific.ui.render import strip_ansi
from prolific.ui.study_list import (
    CsvRenderer,
    InteractiveRenderer,
    ListRenderer,
    ListUsedOptions,
    NonInteractiveRenderer,
    field_value,
)


class FakeClient:
    def __init__(self, studies=(), error=None):
        self.response = SimpleNamespace(results=list(studies), meta=SimpleNamespace(count=len(studies)))
        self.error = error
        self.calls = []

    def get_studies(self, status, project_id):
        self.calls.append((status, project_id))
        if self.error is not None:
            raise self.error
        return self.response


def _study(**overrides):
    values = dict(
        id="1234",
        name="My first, standard, sample",
        internal_name="Standard sample",
        desc="This is my first standard sample study on the Prolific system.",
        status=STATUS_ACTIVE,
        external_study_url="https://eggs-experriment.com?participant={{%PROLIFIC_PID%}}",
        total_available_places=10,
        estimated_completion_time=10,
        maximum_allowed_time=10,
        reward=400,
        device_compatibility=["desktop", "tablet", "mobile"],
    )
    values.update(overrides)
    return Study(**values)


def test_csv_renderer_renders_in_csv_format():
    client = FakeClient([_study()])
    out = io.StringIO()
    CsvRenderer().render(client, ListUsedOptions(status=STATUS_ACTIVE), out)
    assert out.getvalue() == 'ID,Name,Status,\n1234,"My first, standard, sample",active,\n'
    assert client.calls == [(STATUS_ACTIVE, "")]


def test_csv_renderer_raises_client_error():
    expected = RuntimeError("What in the blazes!!!")
    client = FakeClient(error=expected)
    with pytest.raises(RuntimeError) as raised:
        CsvRenderer().render(client, ListUsedOptions(status=STATUS_ACTIVE), io.StringIO())
    assert raised.value is expected


def test_csv_renderer_respects_field_order():
    out = io.StringIO()
    CsvRenderer().render(FakeClient([_study()]), ListUsedOptions(status=STATUS_ACTIVE, fields="ID,Status"), out)
    assert out.getvalue() == "ID,Status,\n1234,active,\n"


def test_csv_renderer_trims_field_names():
    out = io.StringIO()
    CsvRenderer().render(FakeClient([_study()]), ListUsedOptions(fields=" ID , Status"), out)
    assert out.getvalue() == "ID,Status,\n1234,active,\n"


def test_non_interactive_renderer_aligns_table():
    out = io.StringIO()
    NonInteractiveRenderer().render(FakeClient([_study()]), ListUsedOptions(), out)
    lines = out.getvalue().splitlines()
    assert lines[0].split() == ["ID", "Name", "Status"]
    assert lines[1].replace(" ", "") == "1234Myfirst,standard,sampleactive"
    assert lines[0].index("Name") == lines[1].index("My first")


def test_list_renderer_uses_strategy():
    out = io.StringIO()
    renderer = ListRenderer(CsvRenderer())
    renderer.render(FakeClient([_study()]), ListUsedOptions(fields="ID"), out)
    assert out.getvalue() == "ID,\n1234,\n"


def test_list_renderer_strategy_can_be_swapped():
    renderer = ListRenderer(CsvRenderer())
    renderer.strategy = NonInteractiveRenderer()
    out = io.StringIO()
    renderer.render(FakeClient([_study()]), ListUsedOptions(fields="ID"), out)
    assert out.getvalue().split() == ["ID", "1234"]


def test_field_value():
    study = _study()
    assert field_value(study, "ID") == "1234"
    assert field_value(study, "DeviceCompatibility") == "[desktop tablet mobile]"
    assert field_value(study, "Reward") == "400"
    assert field_value(study, "ExternalStudyURL") == study.external_study_url


def test_field_value_unknown_field():
    assert field_value(_study(), "Unknown") == "<invalid reflect.Value>"
    assert field_value(_study(), "id") == "<invalid reflect.Value>"


def test_interactive_renderer_shows_selected_study():
    out = io.StringIO()
    renderer = InteractiveRenderer(stdin=io.StringIO("2\n"))
    studies = [_study(id="1", name="Birds"), _study(id="2", name="Fish")]
    renderer.render(FakeClient(studies), ListUsedOptions(), out)
    text = strip_ansi(out.getvalue())
    assert "researcher/studies/2" in text
    assert "researcher/studies/1" not in text


def test_interactive_renderer_searches_before_selecting():
    out = io.StringIO()
    renderer = InteractiveRenderer(stdin=io.StringIO("fish\n1\n"))
    studies = [_study(id="1", name="Birds"), _study(id="2", name="Fish")]
    renderer.render(FakeClient(studies), ListUsedOptions(), out)
    assert "researcher/studies/2" in strip_ansi(out.getvalue())


def test_interactive_renderer_quits_on_empty_input():
    out = io.StringIO()
    InteractiveRenderer(stdin=io.StringIO("")).render(FakeClient([_study()]), ListUsedOptions(), out)
    assert "researcher/studies" not in out.getvalue()
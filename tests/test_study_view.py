from prolific.config import get_application_url
from prolific.models import Filter
from prolific.study import Study
from prolific.ui.render import strip_ansi
from prolific.ui.study_view import get_study_path, get_study_url, render_study


def _study(**overrides):
    values = dict(
        id="11223344",
        name="My first standard sample",
        internal_name="Standard sample",
        desc="This is my first standard sample study on the Prolific system.",
        external_study_url="https://eggs-experriment.com?participant=",
        total_available_places=10,
        estimated_completion_time=10,
        maximum_allowed_time=10,
        reward=400,
        device_compatibility=["desktop", "tablet", "mobile"],
    )
    values.update(overrides)
    return Study(**values)


def _squash(text):
    return strip_ansi(text).replace(" ", "")


def test_render_study_with_filters():
    study = _study(filters=[Filter(filter_id="handedness", selected_values=["left"])])
    expected = f"""My first standard sample
This is my first standard sample study on the Prolific system.

ID:                        11223344
Status:
Type:
Total cost:                £0.00
Reward:                    £4.00
Hourly rate:               £0.00
Estimated completion time: 10
Maximum allowed time:      10
Study URL:                 https://eggs-experriment.com?participant=
Places taken:              0
Available places:          10

---

Submissions configuration
Maxsubmissionsperparticipant: 0
Maxconcurrentsubmissions:     0

---

Filters

handedness
-left

---

View study in the application: {get_application_url()}/researcher/studies/11223344
"""
    assert _squash(render_study(study) + "\n") == _squash(expected)


def test_render_study_without_filters():
    study = _study(total_available_places=11)
    expected = f"""My first standard sample
This is my first standard sample study on the Prolific system.

ID:                        11223344
Status:
Type:
Total cost:                £0.00
Reward:                    £4.00
Hourly rate:               £0.00
Estimated completion time: 10
Maximum allowed time:      10
Study URL:                 https://eggs-experriment.com?participant=
Places taken:              0
Available places:          11

---

Submissions configuration
Maxsubmissionsperparticipant: 0
Maxconcurrentsubmissions:     0

---

Filters
Nofiltersaredefinedforthisstudy.

---

View study in the application: {get_application_url()}/researcher/studies/11223344
"""
    assert _squash(render_study(study) + "\n") == _squash(expected)


def test_render_study_uses_study_currency():
    actual = strip_ansi(render_study(_study(presentment_currency_code="USD")))
    assert "$4.00" in actual
    assert "£" not in actual


def test_study_path():
    assert get_study_path("11223344") == "researcher/studies/11223344"


def test_study_url_joins_application_url_and_path():
    url = get_study_url("11223344")
    assert url == get_application_url() + "/" + get_study_path("11223344")
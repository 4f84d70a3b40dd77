from datetime import datetime, timezone

import pytest

from prolific.models import (
    Filter,
    FilterRange,
    Requirement,
    RequirementQuestion,
    Submission,
    User,
    Workspace,
)

HEADING_CASES = [
    ("Query question", "Query title", "Query question"),
    ("", "Query title", "Query title"),
    ("", "", ""),
]


@pytest.mark.parametrize("question,title,expected", HEADING_CASES)
def test_requirement_filter_value(question, title, expected):
    requirement = Requirement(query=RequirementQuestion(question=question, title=title))
    assert requirement.filter_value() == expected


@pytest.mark.parametrize("question,title,expected", HEADING_CASES)
def test_requirement_title(question, title, expected):
    requirement = Requirement(query=RequirementQuestion(question=question, title=title))
    assert requirement.title() == expected


@pytest.mark.parametrize(
    "category,description,expected",
    [
        (
            "requirement category",
            "requirement description",
            "Category: requirement category. requirement description",
        ),
        ("requirement category", "", "Category: requirement category"),
    ],
)
def test_requirement_description(category, description, expected):
    requirement = Requirement(
        category=category, query=RequirementQuestion(description=description)
    )
    assert requirement.description() == expected


def test_requirement_title_trims_spaces():
    requirement = Requirement(query=RequirementQuestion(question="  Query question "))
    assert requirement.title() == "Query question"


def test_requirement_from_dict():
    requirement = Requirement.from_dict(
        {
            "id": "id",
            "_cls": "this is the cls",
            "category": "category",
            "subcategory": "sub-category",
            "query": {"id": "query-id", "title": "requirement title", "question": "query-quest"},
            "attributes": [{"label": "attribute-label"}],
        }
    )
    assert requirement.cls == "this is the cls"
    assert requirement.query.id == "query-id"
    assert requirement.title() == "query-quest"
    assert requirement.attributes == [requirement.attributes[0].__class__(label="attribute-label")]
    assert requirement.attributes[0].index == 0
    assert requirement.attributes[0].value is None


def test_filter_accessors():
    record = Filter(filter_title="filter title", filter_description="filter description")
    assert record.title() == "filter title"
    assert record.filter_value() == "filter title"
    assert record.description() == "filter description"


def test_filter_round_trip():
    record = Filter(
        id="id",
        filter_id="filter-id",
        filter_title="filter title",
        filter_description="filter description",
        question="filter question",
        type="filter type",
        data_type="filter data type",
        min=1,
        max=10,
        choices={"choice1": "Choice 1", "choice2": "Choice 2"},
        selected_values=["choice1"],
        selected_range=FilterRange(lower=1, upper=10),
    )
    data = record.to_dict()
    assert data["title"] == "filter title"
    assert data["selected_range"] == {"lower": 1, "upper": 10}
    assert Filter.from_dict(data) == record


def test_filter_to_dict_omits_empty_optional_fields():
    data = Filter(filter_id="handedness").to_dict()
    assert "min" not in data
    assert "max" not in data
    assert "choices" not in data
    assert "selected_values" not in data
    assert data["selected_range"] == {}
    assert data["filter_id"] == "handedness"


def test_submission_from_dict():
    submission = Submission.from_dict(
        {
            "id": "1122",
            "participant_id": "919",
            "status": "APPROVED",
            "started_at": "2022-07-24T08:04:00Z",
            "time_taken": 99,
            "strata": {"date of birth": "1990", "ethnicity (simplified)": "White", "sex": "Female"},
        }
    )
    assert submission.started_at == datetime(2022, 7, 24, 8, 4, tzinfo=timezone.utc)
    assert submission.completed_at is None
    assert submission.time_taken == 99
    assert submission.strata.ethnicity_simplified == "White"
    assert submission.bonus_payments == []


def test_submission_parses_nanosecond_timestamps():
    submission = Submission.from_dict({"started_at": "2022-07-24T08:04:00.123456789Z"})
    assert submission.started_at.microsecond == 123456


def test_submission_rejects_bad_timestamp():
    with pytest.raises(ValueError):
        Submission.from_dict({"started_at": "yesterday"})


def test_workspace_round_trip():
    workspace = Workspace(
        id="444",
        title="Office",
        description="The office workspace",
        users=[User(id="1", name="Ann", email="ann@example.com", roles=["admin"])],
        naivety_distribution_rate=0.5,
    )
    assert Workspace.from_dict(workspace.to_dict()) == workspace
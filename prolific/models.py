"""Records exchanged with the Prolific API."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Optional

DEFAULT_CURRENCY = "GBP"
"""Currency used when nothing else tells us which one to show."""

_FRACTION = re.compile(r"\.(\d+)")


def _value(data: Mapping[str, Any], key: str, default: Any = None) -> Any:
    """Return ``data[key]``, or ``default`` when it is missing or null."""
    found = data.get(key)
    return default if found is None else found


def _parse_time(value: Any) -> Optional[datetime]:
    """Parse an RFC 3339 timestamp; empty values give None."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    text = str(value).strip()
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    text = _FRACTION.sub(lambda m: "." + (m.group(1) + "000000")[:6], text, count=1)
    return datetime.fromisoformat(text)


@dataclass
class Campaign:
    id: str = ""
    name: str = ""
    sign_up_link: str = ""


@dataclass
class FilterRange:
    """Lower and upper bounds selected for a range filter."""

    lower: Any = None
    upper: Any = None


@dataclass
class Filter:
    """A filter that makes up part of a filter set or study."""

    id: str = ""
    filter_id: str = ""
    filter_title: str = ""
    filter_description: str = ""
    question: str = ""
    type: str = ""
    data_type: str = ""
    min: Any = None
    max: Any = None
    choices: dict[str, str] = field(default_factory=dict)
    selected_values: list[str] = field(default_factory=list)
    selected_range: FilterRange = field(default_factory=FilterRange)

    def filter_value(self) -> str:
        return self.filter_title

    def title(self) -> str:
        return self.filter_title

    def description(self) -> str:
        return self.filter_description

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Filter":
        selected_range = _value(data, "selected_range", {})
        return cls(
            id=_value(data, "id", ""),
            filter_id=_value(data, "filter_id", ""),
            filter_title=_value(data, "title", ""),
            filter_description=_value(data, "description", ""),
            question=_value(data, "question", ""),
            type=_value(data, "type", ""),
            data_type=_value(data, "data_type", ""),
            min=data.get("min"),
            max=data.get("max"),
            choices=dict(_value(data, "choices", {})),
            selected_values=list(_value(data, "selected_values", [])),
            selected_range=FilterRange(
                lower=selected_range.get("lower"),
                upper=selected_range.get("upper"),
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "id": self.id,
            "filter_id": self.filter_id,
            "title": self.filter_title,
            "description": self.filter_description,
            "question": self.question,
            "type": self.type,
            "data_type": self.data_type,
        }
        if self.min is not None:
            out["min"] = self.min
        if self.max is not None:
            out["max"] = self.max
        if self.choices:
            out["choices"] = dict(self.choices)
        if self.selected_values:
            out["selected_values"] = list(self.selected_values)
        out["selected_range"] = {
            key: bound
            for key, bound in (
                ("lower", self.selected_range.lower),
                ("upper", self.selected_range.upper),
            )
            if bound is not None
        }
        return out


@dataclass
class FilterSet:
    id: str = ""
    name: str = ""
    organisation_id: str = ""
    workspace_id: str = ""
    version: int = 0
    is_deleted: bool = False
    is_locked: bool = False
    eligible_participant_count: int = 0
    filters: list[Filter] = field(default_factory=list)


@dataclass
class Hook:
    """A subscription to an event."""

    id: str = ""
    event_type: str = ""
    target_url: str = ""
    is_enabled: bool = False
    workspace_id: str = ""


@dataclass
class HookEventType:
    """An event type that a subscription can be registered for."""

    event_type: str = ""
    description: str = ""


@dataclass
class HookEvent:
    """A notification sent to a subscription's target URL."""

    id: str = ""
    date_created: Optional[datetime] = None
    date_updated: Optional[datetime] = None
    event_type: str = ""
    resource_id: str = ""
    status: str = ""
    target_url: str = ""


@dataclass
class SubmissionStrata:
    date_of_birth: str = ""
    ethnicity_simplified: str = ""
    sex: str = ""


@dataclass
class Submission:
    """A participant's submission to a study."""

    id: str = ""
    participant_id: str = ""
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    is_complete: bool = False
    time_taken: int = 0
    reward: int = 0
    status: str = ""
    strata: SubmissionStrata = field(default_factory=SubmissionStrata)
    study_code: str = ""
    star_awarded: bool = False
    bonus_payments: list[Any] = field(default_factory=list)
    ip: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Submission":
        strata = _value(data, "strata", {})
        return cls(
            id=_value(data, "id", ""),
            participant_id=_value(data, "participant_id", ""),
            started_at=_parse_time(data.get("started_at")),
            completed_at=_parse_time(data.get("completed_at")),
            is_complete=bool(_value(data, "is_complete", False)),
            time_taken=_value(data, "time_taken", 0),
            reward=_value(data, "reward", 0),
            status=_value(data, "status", ""),
            strata=SubmissionStrata(
                date_of_birth=_value(strata, "date of birth", ""),
                ethnicity_simplified=_value(strata, "ethnicity (simplified)", ""),
                sex=_value(strata, "sex", ""),
            ),
            study_code=_value(data, "study_code", ""),
            star_awarded=bool(_value(data, "star_awarded", False)),
            bonus_payments=list(_value(data, "bonus_payments", [])),
            ip=_value(data, "ip", ""),
        )


@dataclass
class User:
    id: str = ""
    name: str = ""
    email: str = ""
    roles: list[str] = field(default_factory=list)


def _user_from_dict(data: Mapping[str, Any]) -> User:
    return User(
        id=_value(data, "id", ""),
        name=_value(data, "name", ""),
        email=_value(data, "email", ""),
        roles=list(_value(data, "roles", [])),
    )


def _user_to_dict(user: User) -> dict[str, Any]:
    return {"id": user.id, "name": user.name, "email": user.email, "roles": list(user.roles)}


@dataclass
class Workspace:
    id: str = ""
    title: str = ""
    description: str = ""
    users: list[User] = field(default_factory=list)
    naivety_distribution_rate: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Workspace":
        return cls(
            id=_value(data, "id", ""),
            title=_value(data, "title", ""),
            description=_value(data, "description", ""),
            users=[_user_from_dict(u) for u in _value(data, "users", [])],
            naivety_distribution_rate=float(_value(data, "naivety_distribution_rate", 0.0)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "users": [_user_to_dict(u) for u in self.users],
            "naivety_distribution_rate": self.naivety_distribution_rate,
        }


@dataclass
class Project:
    id: str = ""
    title: str = ""
    description: str = ""
    workspace: str = ""
    owner: str = ""
    users: list[User] = field(default_factory=list)
    naivety_distribution_rate: float = 0.0


@dataclass
class Secret:
    id: str = ""
    value: str = ""
    workspace_id: str = ""


@dataclass
class Message:
    datetime_created: Optional[datetime] = None
    body: str = ""
    sender_id: str = ""
    study_id: str = ""
    data: dict[str, Any] = field(default_factory=dict)


@dataclass
class UnreadMessage:
    datetime_created: Optional[datetime] = None
    body: str = ""
    sender: str = ""


@dataclass
class ParticipantGroup:
    id: str = ""
    name: str = ""
    project_id: str = ""


@dataclass
class ParticipantGroupMembership:
    participant_id: str = ""
    datetime_created: Optional[datetime] = None


@dataclass
class RequirementAttribute:
    label: str = ""
    name: str = ""
    value: Any = None
    index: int = 0


@dataclass
class RequirementQuestion:
    id: str = ""
    question: str = ""
    description: str = ""
    title: str = ""
    help_text: str = ""
    participant_help_text: str = ""
    researcher_help_text: str = ""
    is_new: bool = False


@dataclass
class Requirement:
    """An eligibility requirement."""

    id: str = ""
    type: str = ""
    attributes: list[RequirementAttribute] = field(default_factory=list)
    query: RequirementQuestion = field(default_factory=RequirementQuestion)
    cls: str = ""
    category: str = ""
    subcategory: Any = None
    order: int = 0
    recommended: bool = False
    details_display: str = ""
    requirement_type: str = ""

    def _heading(self) -> str:
        return (self.query.question or self.query.title).strip(" ")

    def filter_value(self) -> str:
        return self._heading()

    def title(self) -> str:
        return self._heading()

    def description(self) -> str:
        text = f"Category: {self.category}"
        if self.query.description:
            text += f". {self.query.description}"
        return text

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Requirement":
        query = _value(data, "query", {})
        return cls(
            id=_value(data, "id", ""),
            type=_value(data, "type", ""),
            attributes=[
                RequirementAttribute(
                    label=_value(a, "label", ""),
                    name=_value(a, "name", ""),
                    value=a.get("value"),
                    index=_value(a, "index", 0),
                )
                for a in _value(data, "attributes", [])
            ],
            query=RequirementQuestion(
                id=_value(query, "id", ""),
                question=_value(query, "question", ""),
                description=_value(query, "description", ""),
                title=_value(query, "title", ""),
                help_text=_value(query, "help_text", ""),
                participant_help_text=_value(query, "participant_help_text", ""),
                researcher_help_text=_value(query, "researcher_help_text", ""),
                is_new=bool(_value(query, "is_new", False)),
            ),
            cls=_value(data, "_cls", ""),
            category=_value(data, "category", ""),
            subcategory=data.get("subcategory"),
            order=_value(data, "order", 0),
            recommended=bool(_value(data, "recommended", False)),
            details_display=_value(data, "details_display", ""),
            requirement_type=_value(data, "requirement_type", ""),
        )
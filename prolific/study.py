"""Studies and the requests used to create and change them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Optional

from prolific.models import DEFAULT_CURRENCY, Filter, _parse_time, _value

STATUS_UNPUBLISHED = "unpublished"
STATUS_ACTIVE = "active"
STATUS_SCHEDULED = "scheduled"
STATUS_AWAITING_REVIEW = "awaiting review"
STATUS_COMPLETED = "completed"
STATUS_ALL = "all"
"""Not a real status: lists studies of every status."""

STUDY_STATUSES = (
    STATUS_UNPUBLISHED,
    STATUS_ACTIVE,
    STATUS_SCHEDULED,
    STATUS_AWAITING_REVIEW,
    STATUS_COMPLETED,
)
STUDY_LIST_STATUS = (STATUS_UNPUBLISHED, STATUS_ACTIVE, STATUS_COMPLETED, STATUS_ALL)

TRANSITION_STUDY_PUBLISH = "PUBLISH"
TRANSITION_STUDY_PAUSE = "PAUSE"
TRANSITION_STUDY_START = "START"
TRANSITION_STUDY_STOP = "STOP"

TRANSITION_LIST = (
    TRANSITION_STUDY_PUBLISH,
    TRANSITION_STUDY_START,
    TRANSITION_STUDY_PAUSE,
    TRANSITION_STUDY_STOP,
)


def _to_int(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, str):
        return int(value) if value.strip() else 0
    return int(value)


def _to_float(value: Any) -> float:
    if value is None:
        return 0.0
    if isinstance(value, str):
        return float(value) if value.strip() else 0.0
    return float(value)


def _to_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def _to_str_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [_to_str(item) for item in value]
    return [_to_str(value)]


@dataclass
class SubmissionsConfig:
    """Limits on how submissions are gathered."""

    max_submissions_per_participant: int = 0
    max_concurrent_submissions: int = 0

    @classmethod
    def _from_dict(cls, data: Mapping[str, Any]) -> "SubmissionsConfig":
        return cls(
            max_submissions_per_participant=_to_int(data.get("max_submissions_per_participant")),
            max_concurrent_submissions=_to_int(data.get("max_concurrent_submissions")),
        )

    def _to_dict(self) -> dict[str, int]:
        return {
            "max_submissions_per_participant": self.max_submissions_per_participant,
            "max_concurrent_submissions": self.max_concurrent_submissions,
        }


@dataclass
class Study:
    """A study as reported by the API."""

    id: str = ""
    name: str = ""
    internal_name: str = ""
    date_created: Optional[datetime] = None
    total_available_places: int = 0
    reward: float = 0.0
    can_auto_review: bool = False
    eligibility_requirements: list[dict[str, Any]] = field(default_factory=list)
    filters: list[Filter] = field(default_factory=list)
    desc: str = ""
    estimated_completion_time: int = 0
    maximum_allowed_time: int = 0
    completion_url: str = ""
    external_study_url: str = ""
    published_at: Any = None
    started_publishing_at: Any = None
    award_points: int = 0
    presentment_currency_code: str = ""
    currency_code: str = ""
    researcher: dict[str, Any] = field(default_factory=dict)
    status: str = ""
    average_reward_per_hour: float = 0.0
    device_compatibility: list[str] = field(default_factory=list)
    peripheral_requirements: list[Any] = field(default_factory=list)
    places_taken: int = 0
    estimated_reward_per_hour: float = 0.0
    ref: Any = None
    study_type: str = ""
    total_cost: float = 0.0
    publish_at: Any = None
    is_pilot: bool = False
    is_underpaying: Any = None
    submissions_config: SubmissionsConfig = field(default_factory=SubmissionsConfig)

    def filter_value(self) -> str:
        return self.name

    def title(self) -> str:
        return self.name

    def description(self) -> str:
        return f"{self.status} - {self.study_type} - {self.total_available_places} places available"

    def get_currency_code(self) -> str:
        """Return the currency to show amounts in, defaulting to GBP."""
        return self.presentment_currency_code or self.currency_code or DEFAULT_CURRENCY

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Study":
        return cls(
            id=_value(data, "id", ""),
            name=_value(data, "name", ""),
            internal_name=_value(data, "internal_name", ""),
            date_created=_parse_time(data.get("date_created")),
            total_available_places=_value(data, "total_available_places", 0),
            reward=float(_value(data, "reward", 0.0)),
            can_auto_review=bool(_value(data, "can_auto_review", False)),
            eligibility_requirements=list(_value(data, "eligibility_requirements", [])),
            filters=[Filter.from_dict(f) for f in _value(data, "filters", [])],
            desc=_value(data, "description", ""),
            estimated_completion_time=_value(data, "estimated_completion_time", 0),
            maximum_allowed_time=_value(data, "maximum_allowed_time", 0),
            completion_url=_value(data, "completion_url", ""),
            external_study_url=_value(data, "external_study_url", ""),
            published_at=data.get("published_at"),
            started_publishing_at=data.get("started_publishing_at"),
            award_points=_value(data, "award_points", 0),
            presentment_currency_code=_value(data, "presentment_currency_code", ""),
            currency_code=_value(data, "currency_code", ""),
            researcher=dict(_value(data, "researcher", {})),
            status=_value(data, "status", ""),
            average_reward_per_hour=float(_value(data, "average_reward_per_hour", 0.0)),
            device_compatibility=list(_value(data, "device_compatibility", [])),
            peripheral_requirements=list(_value(data, "peripheral_requirements", [])),
            places_taken=_value(data, "places_taken", 0),
            estimated_reward_per_hour=float(_value(data, "estimated_reward_per_hour", 0.0)),
            ref=data.get("_ref"),
            study_type=_value(data, "study_type", ""),
            total_cost=float(_value(data, "total_cost", 0.0)),
            publish_at=data.get("publish_at"),
            is_pilot=bool(_value(data, "is_pilot", False)),
            is_underpaying=data.get("is_underpaying"),
            submissions_config=SubmissionsConfig._from_dict(_value(data, "submissions_config", {})),
        )


def _eligibility_requirement(data: Mapping[str, Any]) -> dict[str, Any]:
    attributes = []
    for attribute in _value(data, "attributes", []):
        entry: dict[str, Any] = {"id": _to_str(attribute.get("id"))}
        if attribute.get("index") is not None:
            entry["index"] = attribute["index"]
        entry["value"] = attribute.get("value")
        attributes.append(entry)
    query = _value(data, "query", {})
    return {
        "attributes": attributes,
        "query": {"id": _to_str(query.get("id"))},
        "_cls": _to_str(data.get("_cls")),
    }


@dataclass
class CreateStudy:
    """The fields sent to the API to create a study."""

    name: str = ""
    internal_name: str = ""
    description: str = ""
    external_study_url: str = ""
    prolific_id_option: str = ""
    completion_code: str = ""
    completion_option: str = ""
    total_available_places: int = 0
    estimated_completion_time: int = 0
    maximum_allowed_time: int = 0
    reward: float = 0.0
    device_compatibility: list[str] = field(default_factory=list)
    peripheral_requirements: list[str] = field(default_factory=list)
    submissions_config: SubmissionsConfig = field(default_factory=SubmissionsConfig)
    eligibility_requirements: list[dict[str, Any]] = field(default_factory=list)
    filters: list[Filter] = field(default_factory=list)
    project: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CreateStudy":
        """Build a request from a template, accepting loosely typed values."""
        return cls(
            name=_to_str(data.get("name")),
            internal_name=_to_str(data.get("internal_name")),
            description=_to_str(data.get("description")),
            external_study_url=_to_str(data.get("external_study_url")),
            prolific_id_option=_to_str(data.get("prolific_id_option")),
            completion_code=_to_str(data.get("completion_code")),
            completion_option=_to_str(data.get("completion_option")),
            total_available_places=_to_int(data.get("total_available_places")),
            estimated_completion_time=_to_int(data.get("estimated_completion_time")),
            maximum_allowed_time=_to_int(data.get("maximum_allowed_time")),
            reward=_to_float(data.get("reward")),
            device_compatibility=_to_str_list(data.get("device_compatibility")),
            peripheral_requirements=_to_str_list(data.get("peripheral_requirements")),
            submissions_config=SubmissionsConfig._from_dict(_value(data, "submissions_config", {})),
            eligibility_requirements=[
                _eligibility_requirement(r) for r in _value(data, "eligibility_requirements", [])
            ],
            filters=[Filter.from_dict(f) for f in _value(data, "filters", [])],
            project=_to_str(data.get("project")),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "name": self.name,
            "internal_name": self.internal_name,
            "description": self.description,
            "external_study_url": self.external_study_url,
            "prolific_id_option": self.prolific_id_option,
            "completion_code": self.completion_code,
            "completion_option": self.completion_option,
            "total_available_places": self.total_available_places,
            "estimated_completion_time": self.estimated_completion_time,
            "maximum_allowed_time": self.maximum_allowed_time,
            "reward": self.reward,
            "device_compatibility": list(self.device_compatibility),
            "peripheral_requirements": list(self.peripheral_requirements),
            "submissions_config": self.submissions_config._to_dict(),
            "eligibility_requirements": [
                _eligibility_requirement(r) for r in self.eligibility_requirements
            ],
            "filters": [f.to_dict() for f in self.filters],
        }
        if self.project:
            out["project"] = self.project
        return out


@dataclass
class UpdateStudy:
    """The fields sent to the API to update a study."""

    total_available_places: int = 0

    def to_dict(self) -> dict[str, Any]:
        if not self.total_available_places:
            return {}
        return {"total_available_places": self.total_available_places}
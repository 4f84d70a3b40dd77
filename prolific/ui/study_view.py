"""Detailed view of a study."""

from __future__ import annotations

from prolific.config import get_application_url
from prolific.study import Study
from prolific.ui.render import (
    render_application_link,
    render_heading,
    render_money,
    render_section_marker,
)


def render_study(study: Study) -> str:
    """Return a detailed description of the study."""
    currency = study.get_currency_code()
    content = render_heading(study.name) + "\n"
    content += f"{study.desc}\n\n"
    content += f"ID:                        {study.id}\n"
    content += f"Status:                    {study.status}\n"
    content += f"Type:                      {study.study_type}\n"
    content += f"Total cost:                {render_money(study.total_cost / 100, currency)}\n"
    content += f"Reward:                    {render_money(study.reward / 100, currency)}\n"
    content += f"Hourly rate:               {render_money(study.average_reward_per_hour / 100, currency)}\n"
    content += f"Estimated completion time: {study.estimated_completion_time}\n"
    content += f"Maximum allowed time:      {study.maximum_allowed_time}\n"
    content += f"Study URL:                 {study.external_study_url}\n"
    content += f"Places taken:              {study.places_taken}\n"
    content += f"Available places:          {study.total_available_places}\n"

    content += render_section_marker()

    config = study.submissions_config
    content += render_heading("Submissions configuration") + "\n"
    content += f"Max submissions per participant: {config.max_submissions_per_participant}\n"
    content += f"Max concurrent submissions:      {config.max_concurrent_submissions}\n"

    content += render_section_marker()

    content += render_heading("Filters") + "\n"
    if study.filters:
        for record in study.filters:
            content += f"\n{record.filter_id}\n"
            content += "".join(f"- {value}\n" for value in record.selected_values)
    else:
        content += "No filters are defined for this study.\n"

    content += render_application_link("study", get_study_path(study.id))
    return content


def get_study_path(study_id: str) -> str:
    """Return the path of a study within the web application."""
    return f"researcher/studies/{study_id}"


def get_study_url(study_id: str) -> str:
    """Return the full URL of a study in the web application."""
    return f"{get_application_url()}/{get_study_path(study_id)}"
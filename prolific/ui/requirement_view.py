"""Detailed view of an eligibility requirement."""

from __future__ import annotations

from prolific.models import Requirement
from prolific.ui.render import format_value, render_heading, render_section_marker


def render_requirement(requirement: Requirement) -> str:
    """Return a detailed description of the requirement."""
    content = render_heading(requirement.title()) + "\n"
    content += f"ID:                 {requirement.id}\n"
    content += f"CLS (_cls):         {requirement.cls}\n"
    content += f"Category:           {requirement.category}\n"
    if requirement.subcategory is not None:
        content += f"Subcategory:        {format_value(requirement.subcategory)}\n"

    content += render_section_marker()

    query = requirement.query
    content += render_heading("Query") + "\n"
    content += f"ID:                 {query.id}\n"
    content += f"Question:           {query.question}\n"
    content += f"Title:              {query.title}\n"
    content += f"Description:        {query.description}\n"

    content += render_section_marker()

    content += render_heading("Attributes") + "\n"
    for attribute in requirement.attributes:
        content += f"Name:               {format_value(attribute.name)}\n"
        content += f"Label:              {format_value(attribute.label)}\n"
        content += f"Index:              {format_value(attribute.index)}\n"
        content += f"Value:              {format_value(attribute.value)}\n"
        content += "\n"

    return content + "\n"
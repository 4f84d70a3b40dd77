"""Detailed view of a filter."""

from __future__ import annotations

from prolific.models import Filter
from prolific.ui.render import format_value, render_heading


def render_filter(record: Filter) -> str:
    """Return a detailed description of the filter."""
    content = render_heading(record.title()) + "\n"
    content += f"ID:                {record.filter_id}\n"
    content += f"Filter ID:         {record.filter_id}\n"
    content += f"Title:             {record.title()}\n"
    content += f"Question:          {record.question}\n"
    content += f"Description:       {record.description()}\n"
    content += f"Type:              {record.type}\n"
    content += f"Data Type:         {record.data_type}\n"
    content += f"Min:               {format_value(record.min)}\n"
    content += f"Max:               {format_value(record.max)}\n"

    if record.choices:
        content += "Choices:\n"
        for key in sorted(record.choices):
            content += f"  {key}: {record.choices[key]}\n"

    return content + "\n"
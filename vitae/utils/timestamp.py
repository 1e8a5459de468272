"""Date formatting utilities for rendered résumé dates."""

import re
from datetime import date

# Labels are fixed to US English; the rendered month must not depend on the process locale
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

PRESENT_LABEL = "Present"

ISO_DATE_PATTERN = re.compile(r"^\s*(\d{4})-(\d{2})(?:-(\d{2}))?\s*$")


def format_date(date_string: str) -> str:
    """
    Format an ISO calendar date as abbreviated month and 4-digit year.

    Accepts "YYYY-MM-DD" and the month-only "YYYY-MM" form. Empty and
    unparseable input formats to an empty string instead of raising.

    Args:
        date_string: Stored date value

    Returns:
        Formatted date, or "" when there is nothing to show

    Examples:
        format_date("2023-03-15")
        # "Mar 2023"

        format_date("")
        # ""
    """
    if not date_string:
        return ""

    match = ISO_DATE_PATTERN.match(date_string)
    if match is None:
        return ""

    year, month, day = match.groups()
    try:
        parsed = date(int(year), int(month), int(day) if day else 1)
    except ValueError:
        return ""

    return f"{MONTH_ABBREVIATIONS[parsed.month - 1]} {parsed.year:04d}"


def format_date_range(start_date: str, end_date: str, current: bool = False) -> str:
    """
    Format a start/end pair as "Start - End".

    An in-progress entry shows "Present" as its end regardless of the stored
    end date. When neither side has anything to show the range is empty.

    Args:
        start_date: Stored start date
        end_date: Stored end date
        current: Whether the entry is still in progress

    Returns:
        Formatted range, e.g. "Mar 2023 - Present"
    """
    start = format_date(start_date)
    end = PRESENT_LABEL if current else format_date(end_date)

    if not start and not end:
        return ""
    return f"{start} - {end}"

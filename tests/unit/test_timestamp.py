"""Unit tests for résumé date formatting."""

import pytest

from vitae.utils.timestamp import PRESENT_LABEL, format_date, format_date_range


@pytest.mark.unit
@pytest.mark.parametrize(
    "date_string, expected",
    [
        ("2023-03-15", "Mar 2023"),
        ("2020-12-01", "Dec 2020"),
        ("2019-01-31", "Jan 2019"),
        ("2021-07", "Jul 2021"),
        ("", ""),
        ("not-a-date", ""),
        ("2023-13-01", ""),
        ("2023-02-30", ""),
        ("March 2023", ""),
    ],
)
def test_format_date(date_string, expected):
    """Test month/year formatting and the empty result for bad input."""
    assert format_date(date_string) == expected


@pytest.mark.unit
def test_format_date_none():
    """Test that a missing value formats to an empty string."""
    assert format_date(None) == ""


@pytest.mark.unit
def test_format_date_range_closed():
    """Test a range with both ends set."""
    assert format_date_range("2020-01-01", "2022-06-30") == "Jan 2020 - Jun 2022"


@pytest.mark.unit
def test_format_date_range_current_ignores_end():
    """Test that an in-progress range always ends in Present."""
    assert format_date_range("2023-03-15", "", current=True) == f"Mar 2023 - {PRESENT_LABEL}"
    assert format_date_range("2023-03-15", "2024-01-01", current=True) == "Mar 2023 - Present"


@pytest.mark.unit
def test_format_date_range_missing_start():
    """Test that a missing start keeps the end visible."""
    assert format_date_range("", "2022-06-30") == " - Jun 2022"


@pytest.mark.unit
def test_format_date_range_empty():
    """Test that a range with nothing to show is suppressed."""
    assert format_date_range("", "") == ""
    assert format_date_range("bogus", "") == ""

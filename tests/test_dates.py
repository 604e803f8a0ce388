import datetime

import numpy as np
import pytest

from table_columns import T
from table_columns.dates import format_date, parse_date
from table_columns.errors import InvalidArgument


def test_format_date_basic_pattern():
    assert format_date("2024-03-05", "YYYY-MM-DD") == "2024-03-05"


def test_format_date_twelve_hour_clock():
    assert format_date("2024-03-05 14:07:09", "DD/MM/YY hh:mm A") == "05/03/24 02:07 PM"


def test_format_date_names_and_ordinals():
    assert format_date(datetime.date(2024, 1, 1), "dddd, MMMM Do") == "Monday, January 1st"
    assert format_date("2024-03-03", "ddd D MMM d") == "Sun 3 Mar 0"


def test_format_date_bracket_literals():
    assert format_date("2024-08-01", "[Q]Q YYYY") == "Q3 2024"


def test_format_date_epoch_milliseconds():
    assert format_date(0, "YYYY-MM-DD HH:mm") == "1970-01-01 00:00"


def test_format_date_default_pattern_and_offsets():
    assert format_date("2024-03-05T10:20:30") == "2024-03-05T10:20:30+00:00"
    assert format_date("2024-03-05T10:20:30+05:30", "HH:mm Z ZZ") == "10:20 +05:30 +0530"


def test_format_date_midnight_in_k_tokens():
    assert format_date("2024-03-05 00:15", "k kk h") == "24 24 12"


@pytest.mark.parametrize(
    "value",
    ["not a date", "", "   ", None, True, np.True_, float("nan"), "now", "today", "Yesterday", " TOMORROW "],
)
def test_parse_date_rejects_invalid_values(value):
    with pytest.raises(InvalidArgument):
        parse_date(value)


def test_date_column_rejects_relative_words():
    render = T("Created", "x", None, {"format": "YYYY-MM-DD"})["customRender"]

    for text in ("now", "today"):
        with pytest.raises(InvalidArgument):
            render(text)

"""Tests for date_codec: localized/ISO conversion, validation, masking, month math."""
from datetime import date, datetime

import pytest

from date_codec import (
  InvalidDateFormat,
  add_months,
  apply_mask,
  as_calendar_date,
  format_date,
  from_iso,
  is_valid_localized,
  iso_to_localized,
  localized_to_iso,
  parse_localized,
  to_iso,
)


class TestParseLocalized:
  """DD/MM/YYYY parsing and rejection rules."""

  def test_parses_valid_date(self) -> None:
    assert parse_localized("10/01/2024") == date(2024, 1, 10)

  def test_strips_surrounding_whitespace(self) -> None:
    assert parse_localized(" 05/03/2024 ") == date(2024, 3, 5)

  def test_accepts_leap_day(self) -> None:
    assert parse_localized("29/02/2024") == date(2024, 2, 29)

  @pytest.mark.parametrize("text", [
    "31/02/2024",  # not a real date
    "29/02/2023",  # not a leap year
    "31/04/2024",  # April has 30 days
    "00/01/2024",
    "32/01/2024",
    "10/00/2024",
    "10/13/2024",
    "10/01/1899",
    "10/01/2101",
  ])
  def test_rejects_impossible_or_out_of_range(self, text: str) -> None:
    with pytest.raises(InvalidDateFormat):
      parse_localized(text)

  @pytest.mark.parametrize("text", ["", "2024-01-10", "1/1/2024", "10-01-2024", "10/01/24", "abc"])
  def test_rejects_malformed(self, text: str) -> None:
    with pytest.raises(InvalidDateFormat):
      parse_localized(text)

  def test_rejects_none(self) -> None:
    with pytest.raises(InvalidDateFormat):
      parse_localized(None)

  def test_invalid_date_format_is_value_error(self) -> None:
    with pytest.raises(ValueError):
      parse_localized("31/02/2024")

  def test_is_valid_localized(self) -> None:
    assert is_valid_localized("28/02/2023")
    assert not is_valid_localized("29/02/2023")
    assert not is_valid_localized("")

  @pytest.mark.parametrize("text", [
    "١٠/٠١/٢٠٢٤",  # Arabic-Indic digits
    "１０/０１/２０２４",  # full-width digits
  ])
  def test_rejects_non_ascii_digits(self, text: str) -> None:
    with pytest.raises(InvalidDateFormat):
      parse_localized(text)
    assert not is_valid_localized(text)


class TestFormatting:
  """Rendering and ISO conversion."""

  def test_format_zero_pads(self) -> None:
    assert format_date(date(2024, 3, 5)) == "05/03/2024"

  def test_to_iso_zero_pads(self) -> None:
    assert to_iso(date(2024, 3, 5)) == "2024-03-05"

  def test_from_iso(self) -> None:
    assert from_iso("2024-03-05") == date(2024, 3, 5)

  def test_from_iso_drops_time_component(self) -> None:
    """A late-evening timestamp keeps its calendar day."""
    assert from_iso("2024-03-05T23:30:00-03:00") == date(2024, 3, 5)

  @pytest.mark.parametrize("text", ["", "05/03/2024", "2024-02-30", "2024-3-5", "20240305"])
  def test_from_iso_rejects_bad_input(self, text: str) -> None:
    with pytest.raises(InvalidDateFormat):
      from_iso(text)

  @pytest.mark.parametrize("text", [
    "2024-03-05 00:00",
    "2024-03-05T10:15:30.123Z",
    "2024-03-05T10:15:30+0000",
  ])
  def test_from_iso_accepts_time_shapes(self, text: str) -> None:
    assert from_iso(text) == date(2024, 3, 5)

  @pytest.mark.parametrize("text", [
    "2024-03-05 not a time",
    "2024-03-05T",
    "２０２４-03-05",
    "2024-٠٣-05",
  ])
  def test_from_iso_rejects_other_suffixes_and_digits(self, text: str) -> None:
    with pytest.raises(InvalidDateFormat):
      from_iso(text)

  def test_localized_iso_helpers(self) -> None:
    assert localized_to_iso("31/12/2024") == "2024-12-31"
    assert iso_to_localized("2024-12-31") == "31/12/2024"

  @pytest.mark.parametrize("value", [
    date(1900, 1, 1),
    date(2024, 2, 29),
    date(2024, 12, 31),
    date(2100, 12, 31),
  ])
  def test_round_trips(self, value: date) -> None:
    assert from_iso(to_iso(value)) == value
    assert parse_localized(format_date(value)) == value


class TestApplyMask:
  """Progressive DD/MM/YYYY masking."""

  @pytest.mark.parametrize("typed, expected", [
    ("", ""),
    ("1", "1"),
    ("12", "12"),
    ("123", "12/3"),
    ("1203", "12/03"),
    ("12032", "12/03/2"),
    ("12032024", "12/03/2024"),
    ("120320245", "12/03/2024"),
    ("12/03/2024", "12/03/2024"),
    ("ab12c", "12"),
  ])
  def test_mask(self, typed: str, expected: str) -> None:
    assert apply_mask(typed) == expected

  def test_mask_never_raises_on_none(self) -> None:
    assert apply_mask(None) == ""

  def test_mask_is_deterministic(self) -> None:
    assert apply_mask("0101") == apply_mask("0101")

  def test_mask_drops_non_ascii_digits(self) -> None:
    assert apply_mask("١٢٠٣") == ""
    assert apply_mask("1٢03") == "10/3"


class TestCalendarArithmetic:
  """Month addition with end-of-month clamping."""

  def test_jan31_plus_one_month_leap_year(self) -> None:
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)

  def test_jan31_plus_one_month_common_year(self) -> None:
    assert add_months(date(2025, 1, 31), 1) == date(2025, 2, 28)

  def test_year_rollover(self) -> None:
    assert add_months(date(2024, 11, 15), 2) == date(2025, 1, 15)

  def test_twelve_months_from_leap_day(self) -> None:
    assert add_months(date(2024, 2, 29), 12) == date(2025, 2, 28)

  def test_datetime_input_returns_date(self) -> None:
    result = add_months(datetime(2024, 1, 10, 22, 0), 1)
    assert result == date(2024, 2, 10)
    assert not isinstance(result, datetime)

  def test_as_calendar_date(self) -> None:
    assert as_calendar_date(datetime(2024, 1, 10, 23, 59)) == date(2024, 1, 10)
    assert as_calendar_date(date(2024, 1, 10)) == date(2024, 1, 10)

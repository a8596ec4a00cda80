"""
Calendar date codec
v1.0.0

Converts dates between ISO (YYYY-MM-DD) and the localized display form
(DD/MM/YYYY), validates typed input and masks partial input as it is typed.

A "calendar date" is a datetime.date: no time of day, no timezone.
"""
import re
from datetime import date, datetime
from typing import Union

from dateutil.relativedelta import relativedelta

from config import MIN_YEAR, MAX_YEAR


# ASCII digits only
LOCALIZED_PATTERN = re.compile(r"^([0-9]{2})/([0-9]{2})/([0-9]{4})$")
ISO_PATTERN = re.compile(
  r"^([0-9]{4})-([0-9]{2})-([0-9]{2})"
  r"(?:[T ][0-9]{2}:[0-9]{2}(?::[0-9]{2}(?:\.[0-9]+)?)?(?:Z|[+-][0-9]{2}:?[0-9]{2})?)?$"
)
NON_DIGITS = re.compile(r"[^0-9]")


class InvalidDateFormat(ValueError):
  """Raised when text is not a real calendar date in the expected format"""

  def __init__(self, text, reason: str = "invalid date"):
    self.text = text
    self.reason = reason
    super().__init__(f"{reason}: {text!r}")


def parse_localized(text: str) -> date:
  """
  Parse a DD/MM/YYYY string into a date.

  Rejects:
  - anything not shaped like DD/MM/YYYY
  - day outside 1-31, month outside 1-12, year outside MIN_YEAR-MAX_YEAR
  - triples that are not a real date (31/02/2024)
  """
  if not text or not isinstance(text, str):
    raise InvalidDateFormat(text, "empty date")

  match = LOCALIZED_PATTERN.match(text.strip())
  if not match:
    raise InvalidDateFormat(text, "expected DD/MM/YYYY")

  day, month, year = (int(part) for part in match.groups())

  if day < 1 or day > 31:
    raise InvalidDateFormat(text, "day out of range")
  if month < 1 or month > 12:
    raise InvalidDateFormat(text, "month out of range")
  if year < MIN_YEAR or year > MAX_YEAR:
    raise InvalidDateFormat(text, "year out of range")

  return _build_date(text, year, month, day)


def is_valid_localized(text: str) -> bool:
  """Check a DD/MM/YYYY string without raising"""
  try:
    parse_localized(text)
  except InvalidDateFormat:
    return False
  return True


def format_date(value: date) -> str:
  """Render a date as DD/MM/YYYY"""
  return f"{value.day:02d}/{value.month:02d}/{value.year:04d}"


def to_iso(value: date) -> str:
  """Render a date as YYYY-MM-DD"""
  return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def from_iso(text: str) -> date:
  """
  Parse YYYY-MM-DD into a date.
  A trailing time component ("2024-01-10T00:00:00") is dropped, never
  shifted through a timezone.
  """
  if not text or not isinstance(text, str):
    raise InvalidDateFormat(text, "empty date")

  match = ISO_PATTERN.match(text.strip())
  if not match:
    raise InvalidDateFormat(text, "expected YYYY-MM-DD")

  year, month, day = (int(part) for part in match.groups())
  return _build_date(text, year, month, day)


def localized_to_iso(text: str) -> str:
  """DD/MM/YYYY -> YYYY-MM-DD"""
  return to_iso(parse_localized(text))


def iso_to_localized(text: str) -> str:
  """YYYY-MM-DD -> DD/MM/YYYY"""
  return format_date(from_iso(text))


def apply_mask(value: str) -> str:
  """
  Progressively insert "/" separators while digits are typed.

  "1"         -> "1"
  "1203"      -> "12/03"
  "12032024"  -> "12/03/2024"
  "12/03/20249" -> "12/03/2024" (extra digits dropped)
  """
  if not value:
    return ""

  digits = NON_DIGITS.sub("", str(value))

  if len(digits) <= 2:
    return digits
  elif len(digits) <= 4:
    return f"{digits[:2]}/{digits[2:]}"
  else:
    return f"{digits[:2]}/{digits[2:4]}/{digits[4:8]}"


# ============================================
# Calendar arithmetic
# ============================================

def as_calendar_date(value: Union[date, datetime]) -> date:
  """Strip the time of day from a datetime; dates pass through"""
  if isinstance(value, datetime):
    return value.date()
  return value


def add_months(value: date, months: int) -> date:
  """
  Add calendar months, clamping to the last day of the target month.
  31 Jan + 1 month -> 28/29 Feb; month 13 rolls into the next year.
  """
  return as_calendar_date(value) + relativedelta(months=months)


def _build_date(text: str, year: int, month: int, day: int) -> date:
  try:
    return date(year, month, day)
  except ValueError:
    raise InvalidDateFormat(text, "not a calendar date")

"""
Booster scheduling
v1.0.0

Suggests when the next dose of a vaccine is due, and turns typed booster
form input into a VaccinationEntry ready to send to the API.
"""
from datetime import date, datetime
from typing import Optional, Union

from date_codec import add_months, as_calendar_date, parse_localized, InvalidDateFormat
from policy import PolicyTable, get_policy
from schema import VaccinationEntry


class VaccinationEntryError(ValueError):
  """Raised when booster form input cannot become a vaccination entry"""


def suggest_due_date(
  applied_date: date,
  vaccine_type: str,
  policy: Optional[PolicyTable] = None
) -> date:
  """
  Suggest the booster due date for a dose applied on applied_date.

  Adds the vaccine's policy interval in calendar months. The day is clamped
  to the end of the target month (31 Aug + 6 months -> 28/29 Feb).

  The suggestion is advisory: callers may override it.
  """
  if policy is None:
    policy = get_policy()
  return add_months(applied_date, policy.interval_months(vaccine_type))


def create_booster_entry(
  vaccine_type: str,
  applied_text: str,
  today: Union[date, datetime],
  due_text: Optional[str] = None,
  policy: Optional[PolicyTable] = None
) -> VaccinationEntry:
  """
  Validate booster form input and build a VaccinationEntry.

  - vaccine_type must not be blank
  - applied_text (DD/MM/YYYY) must be a real date, not after today
  - due_text (DD/MM/YYYY) overrides the suggested due date when given
  """
  vaccine_type = (vaccine_type or "").strip()
  if not vaccine_type:
    raise VaccinationEntryError("Vaccine type is required")

  if not applied_text:
    raise VaccinationEntryError("Application date is required")

  try:
    applied_date = parse_localized(applied_text)
  except InvalidDateFormat as e:
    raise VaccinationEntryError(f"Invalid application date: {e}") from e

  if applied_date > as_calendar_date(today):
    raise VaccinationEntryError(
      f"Application date {applied_text} is in the future"
    )

  if due_text:
    try:
      due_date = parse_localized(due_text)
    except InvalidDateFormat as e:
      raise VaccinationEntryError(f"Invalid booster date: {e}") from e
  else:
    due_date = suggest_due_date(applied_date, vaccine_type, policy)

  return VaccinationEntry(
    vaccine_type=vaccine_type,
    applied_date=applied_date,
    due_date=due_date,
  )

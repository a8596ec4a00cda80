"""
Vaccination status for each record in an animal's history
v1.0.0

Statuses:
- Vaccinated: no booster required, or a later dose of the same vaccine
  was applied inside this record's coverage window
- Overdue: booster date has passed
- Upcoming: booster due within UPCOMING_WINDOW_DAYS (inclusive)
- Current: booster more than UPCOMING_WINDOW_DAYS away

Everything here is a pure function of its arguments. "today" is always
passed in by the caller.
"""
from bisect import bisect_right
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Tuple, Union

from config import UPCOMING_WINDOW_DAYS
from date_codec import as_calendar_date
from schema import VaccinationRecord, VaccinationStatus


def is_covered_by_later_dose(
  record: VaccinationRecord,
  history: Iterable[VaccinationRecord]
) -> bool:
  """
  True if another dose of the same vaccine type was applied in the
  coverage window (applied_date, due_date].

  The other record's own status does not matter, only its application date.
  """
  if record.due_date is None:
    return False

  for other in history:
    if other.record_id == record.record_id:
      continue
    if other.vaccine_type != record.vaccine_type:
      continue
    if record.applied_date < other.applied_date <= record.due_date:
      return True
  return False


def status_for_due_date(
  due_date: date,
  today: Union[date, datetime],
  window_days: int = UPCOMING_WINDOW_DAYS
) -> VaccinationStatus:
  """
  Compare a booster date with today, at calendar-day granularity.

  - due < today: Overdue
  - today <= due <= today + window: Upcoming
  - otherwise: Current
  """
  today = as_calendar_date(today)
  due_date = as_calendar_date(due_date)

  if due_date < today:
    return VaccinationStatus.OVERDUE
  elif due_date <= today + timedelta(days=window_days):
    return VaccinationStatus.UPCOMING
  else:
    return VaccinationStatus.CURRENT


def resolve_status(
  record: VaccinationRecord,
  history: Iterable[VaccinationRecord],
  today: Union[date, datetime]
) -> VaccinationStatus:
  """
  Status of one record given the full history of the same animal.

  Coverage is checked before the date comparison: a later dose of the same
  vaccine settles the booster even after the original due date has passed.
  A due_date before applied_date is not rejected; it is compared as-is.
  """
  if record.due_date is None:
    return VaccinationStatus.VACCINATED

  if is_covered_by_later_dose(record, history):
    return VaccinationStatus.VACCINATED

  return status_for_due_date(record.due_date, today)


class CoverageIndex:
  """
  Application dates of a history, sorted per vaccine type.

  Lets resolve_history answer each coverage check with a binary search
  instead of a scan of the whole history.
  """

  def __init__(self, history: Iterable[VaccinationRecord]):
    by_type: Dict[str, List[date]] = {}
    for record in history:
      by_type.setdefault(record.vaccine_type, []).append(record.applied_date)
    for dates in by_type.values():
      dates.sort()
    self._by_type = by_type

  def is_covered(self, record: VaccinationRecord) -> bool:
    if record.due_date is None:
      return False

    dates = self._by_type.get(record.vaccine_type)
    if not dates:
      return False

    # First dose of this type applied strictly after this record.
    # The record itself sits at applied_date, so it is never picked.
    index = bisect_right(dates, record.applied_date)
    return index < len(dates) and dates[index] <= record.due_date


def resolve_history(
  history: Iterable[VaccinationRecord],
  today: Union[date, datetime]
) -> Dict[object, VaccinationStatus]:
  """
  Resolve every record of one animal.
  Returns {record_id: status}, in history order.
  """
  records = list(history)
  index = CoverageIndex(records)

  statuses = {}
  for record in records:
    if record.due_date is None or index.is_covered(record):
      statuses[record.record_id] = VaccinationStatus.VACCINATED
    else:
      statuses[record.record_id] = status_for_due_date(record.due_date, today)
  return statuses


def summarize_statuses(statuses: Dict[object, VaccinationStatus]) -> Dict[str, int]:
  """Count records per status. Every status is present, zero if unused."""
  summary = {status.value: 0 for status in VaccinationStatus}
  for status in statuses.values():
    summary[status.value] += 1
  return summary


def needs_attention(
  history: Iterable[VaccinationRecord],
  today: Union[date, datetime]
) -> List[Tuple[VaccinationRecord, VaccinationStatus]]:
  """
  Overdue and upcoming records, soonest due date first.
  Overdue records come first since their due dates are earlier.
  """
  records = list(history)
  statuses = resolve_history(records, today)

  flagged = [
    (record, statuses[record.record_id])
    for record in records
    if statuses[record.record_id] in (VaccinationStatus.OVERDUE, VaccinationStatus.UPCOMING)
  ]
  return sorted(flagged, key=lambda item: item[0].due_date)


def get_status_icon(status: VaccinationStatus) -> str:
  """Get emoji icon for a status"""
  icons = {
    VaccinationStatus.VACCINATED: "✅",
    VaccinationStatus.OVERDUE: "❌",
    VaccinationStatus.UPCOMING: "🔜",
    VaccinationStatus.CURRENT: "🟢",
  }
  return icons.get(status, "❓")

"""
Booster policy table
v1.0.0

Maps a vaccine type to the number of months until its next dose.
The data lives in config.BOOSTER_INTERVALS; this module only does lookup.
"""
from typing import Dict, Optional

from config import BOOSTER_INTERVALS, DEFAULT_BOOSTER_MONTHS


def normalize_vaccine_type(vaccine_type: str) -> str:
  """Lowercase and trim a vaccine name for lookup"""
  return (vaccine_type or "").strip().lower()


class PolicyTable:
  """
  Case-insensitive vaccine type -> booster interval lookup.

  Unknown vaccine types are not an error: they get the default interval.
  """

  def __init__(self, intervals: Optional[Dict[str, int]] = None,
               default_months: int = DEFAULT_BOOSTER_MONTHS):
    if intervals is None:
      intervals = BOOSTER_INTERVALS
    self.default_months = default_months
    self._intervals = {
      normalize_vaccine_type(name): months for name, months in intervals.items()
    }

  def interval_months(self, vaccine_type: str) -> int:
    """Months until the booster for this vaccine type"""
    return self._intervals.get(normalize_vaccine_type(vaccine_type), self.default_months)

  def is_known(self, vaccine_type: str) -> bool:
    return normalize_vaccine_type(vaccine_type) in self._intervals

  def with_entry(self, vaccine_type: str, months: int) -> "PolicyTable":
    """Return a copy of this table with one entry added or replaced"""
    table = PolicyTable({}, self.default_months)
    table._intervals = dict(self._intervals)
    table._intervals[normalize_vaccine_type(vaccine_type)] = months
    return table


_default_policy: Optional[PolicyTable] = None

def get_policy() -> PolicyTable:
  """Get the default policy table built from config"""
  global _default_policy
  if _default_policy is None:
    _default_policy = PolicyTable()
  return _default_policy

"""
Vaccination Schema
v1.0.0

Records of vaccine doses applied to one animal, and the status values the
status resolver assigns to them.

Design Principles:
- Records are immutable once created; edits and deletes belong to the API
- Dates are calendar dates (datetime.date), never datetimes
- Vaccine types are free text: new vaccine names are always accepted
- The history is owned by the caller; the engine only reads it
"""
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

from date_codec import as_calendar_date, from_iso, to_iso


class VaccinationStatus(str, Enum):
  """Status of a single vaccination record"""
  VACCINATED = "Vaccinated"   # no booster required, or covered by a later dose
  OVERDUE = "Overdue"
  UPCOMING = "Upcoming"       # due within the upcoming window
  CURRENT = "Current"

  @property
  def label(self) -> str:
    """Localized badge text"""
    return _STATUS_LABELS[self]

  @property
  def badge_variant(self) -> str:
    return _STATUS_BADGES[self]


_STATUS_LABELS = {
  VaccinationStatus.VACCINATED: "Vacinado",
  VaccinationStatus.OVERDUE: "Atrasada",
  VaccinationStatus.UPCOMING: "Próxima",
  VaccinationStatus.CURRENT: "Em dia",
}

_STATUS_BADGES = {
  VaccinationStatus.VACCINATED: "default",
  VaccinationStatus.OVERDUE: "destructive",
  VaccinationStatus.UPCOMING: "secondary",
  VaccinationStatus.CURRENT: "default",
}


@dataclass(frozen=True)
class VaccinationRecord:
  """
  One applied dose.

  due_date is the booster date; None means single-dose protection.
  A due_date earlier than applied_date is tolerated as-is.
  """
  record_id: Any                  # Opaque, unique within one animal
  vaccine_type: str               # "V10 (Décupla)", "Giárdia", ...
  applied_date: date
  due_date: Optional[date] = None

  def __post_init__(self):
    # Frozen, so normalise through object.__setattr__
    object.__setattr__(self, 'applied_date', as_calendar_date(self.applied_date))
    if self.due_date is not None:
      object.__setattr__(self, 'due_date', as_calendar_date(self.due_date))

  @property
  def requires_booster(self) -> bool:
    return self.due_date is not None

  def to_dict(self) -> Dict:
    """Convert to API payload format"""
    result = {
      'id': self.record_id,
      'tipoVacina': self.vaccine_type,
      'dataVacina': to_iso(self.applied_date),
    }
    if self.due_date:
      result['revacina'] = to_iso(self.due_date)
    return result

  @classmethod
  def from_dict(cls, data: Dict) -> "VaccinationRecord":
    """
    Create a record from an API payload.
    Accepts the API's field names (tipoVacina, dataVacina, revacina) or the
    schema's own (vaccine_type, applied_date, due_date).
    """
    if not data:
      raise ValueError("Cannot create VaccinationRecord from empty data")
    if not isinstance(data, dict):
      raise ValueError(f"Vaccination record must be an object, got {type(data).__name__}")

    record_id = data.get('id', data.get('record_id'))
    vaccine_type = data.get('tipoVacina', data.get('vaccine_type'))
    applied = data.get('dataVacina', data.get('applied_date'))
    due = data.get('revacina', data.get('due_date'))

    if record_id is None:
      raise ValueError("Vaccination record has no id")
    if not vaccine_type:
      raise ValueError(f"Vaccination record {record_id} has no vaccine type")
    if not applied:
      raise ValueError(f"Vaccination record {record_id} has no application date")

    return cls(
      record_id=record_id,
      vaccine_type=vaccine_type,
      applied_date=_coerce_date(applied),
      due_date=_coerce_date(due) if due else None,
    )


@dataclass(frozen=True)
class VaccinationEntry:
  """
  A dose about to be recorded (no id yet).
  Built by the booster entry workflow and sent to the API.
  """
  vaccine_type: str
  applied_date: date
  due_date: Optional[date] = None

  def to_request(self) -> Dict:
    """Convert to the API's create/update payload"""
    payload = {
      'tipoVacina': self.vaccine_type,
      'dataVacina': to_iso(self.applied_date),
    }
    if self.due_date:
      payload['revacina'] = to_iso(self.due_date)
    return payload


@dataclass
class AnimalVaccinationHistory:
  """
  All vaccination records of one animal, in insertion order.

  No two records share a record_id; records may share a vaccine type.
  """
  animal_id: Any
  records: List[VaccinationRecord] = field(default_factory=list)

  def __post_init__(self):
    seen = set()
    for record in self.records:
      if record.record_id in seen:
        raise ValueError(f"Duplicate vaccination record id: {record.record_id}")
      seen.add(record.record_id)

  def __iter__(self) -> Iterator[VaccinationRecord]:
    return iter(self.records)

  def __len__(self) -> int:
    return len(self.records)

  def get(self, record_id) -> Optional[VaccinationRecord]:
    for record in self.records:
      if record.record_id == record_id:
        return record
    return None

  def add(self, record: VaccinationRecord):
    """Append a record; ids must stay unique"""
    if self.get(record.record_id) is not None:
      raise ValueError(f"Duplicate vaccination record id: {record.record_id}")
    self.records.append(record)

  def remove(self, record_id) -> VaccinationRecord:
    """Remove one record by id and return it. Other records are untouched."""
    record = self.get(record_id)
    if record is None:
      raise KeyError(record_id)
    self.records = [r for r in self.records if r.record_id != record_id]
    return record

  def of_type(self, vaccine_type: str) -> List[VaccinationRecord]:
    """Records of exactly this vaccine type, in insertion order"""
    return [r for r in self.records if r.vaccine_type == vaccine_type]

  def vaccine_types(self) -> List[str]:
    types = []
    for record in self.records:
      if record.vaccine_type not in types:
        types.append(record.vaccine_type)
    return types

  def to_dict(self) -> Dict:
    return {
      'animal_id': self.animal_id,
      'records': [r.to_dict() for r in self.records],
    }

  @classmethod
  def from_dict(cls, data: Dict) -> "AnimalVaccinationHistory":
    if not data:
      raise ValueError("Cannot create AnimalVaccinationHistory from empty data")
    return cls.from_records(data.get('animal_id'), data.get('records') or [])

  @classmethod
  def from_records(cls, animal_id, payloads: List[Dict]) -> "AnimalVaccinationHistory":
    """Build a history from a list of API vaccination payloads"""
    return cls(
      animal_id=animal_id,
      records=[VaccinationRecord.from_dict(p) for p in payloads],
    )


def _coerce_date(value) -> date:
  if isinstance(value, date):
    return as_calendar_date(value)
  return from_iso(value)

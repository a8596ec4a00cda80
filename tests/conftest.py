"""Shared fixtures for vaccine tracker tests."""
from datetime import date

import pytest

from schema import AnimalVaccinationHistory, VaccinationRecord


def make_record(record_id, vaccine_type="V10", applied=None, due=None) -> VaccinationRecord:
  """Build a record from ISO date strings."""
  return VaccinationRecord(
    record_id=record_id,
    vaccine_type=vaccine_type,
    applied_date=date.fromisoformat(applied) if applied else date(2024, 1, 10),
    due_date=date.fromisoformat(due) if due else None,
  )


@pytest.fixture
def v10_first() -> VaccinationRecord:
  return make_record(1, "V10", "2024-01-10", "2025-01-10")


@pytest.fixture
def v10_second() -> VaccinationRecord:
  return make_record(2, "V10", "2024-07-01", "2025-07-01")


@pytest.fixture
def v10_history(v10_first, v10_second) -> AnimalVaccinationHistory:
  return AnimalVaccinationHistory(animal_id=7, records=[v10_first, v10_second])


@pytest.fixture
def api_payloads() -> list:
  """Vaccinations as the API returns them."""
  return [
    {"id": 1, "tipoVacina": "V10 (Décupla)", "dataVacina": "2024-01-10", "revacina": "2025-01-10"},
    {"id": 2, "tipoVacina": "Antirrábica", "dataVacina": "2024-03-05"},
    {"id": 3, "tipoVacina": "Giárdia", "dataVacina": "2024-08-31", "revacina": "2025-02-28"},
  ]

"""
Schema Package
v1.0.0

Contains all data models for the Pet Vaccine Tracker.

Modules:
- vaccination_schema: Vaccination records, history and status values
- animal_schema: Animals with an explicit species tag
"""

from .vaccination_schema import (
  VaccinationRecord,
  VaccinationEntry,
  VaccinationStatus,
  AnimalVaccinationHistory,
)

from .animal_schema import (
  Animal,
  Species,
  Tutor,
)

__all__ = [
  # Vaccination schema
  'VaccinationRecord',
  'VaccinationEntry',
  'VaccinationStatus',
  'AnimalVaccinationHistory',

  # Animal schema
  'Animal',
  'Species',
  'Tutor',
]

"""
Animal Schema
v1.0.0

Pets as returned by the remote API.

The species is an explicit tag taken from the API's "tipoAnimal" field.
It is never guessed from which species-specific fields happen to be set:
an animal without a tag is Species.UNKNOWN.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .vaccination_schema import AnimalVaccinationHistory


class Species(str, Enum):
  """Species tag carried by every animal"""
  DOG = "Cachorro"
  CAT = "Gato"
  BIRD = "Ave"
  UNKNOWN = "Desconhecido"

  @classmethod
  def from_string(cls, value: Optional[str]) -> "Species":
    """Convert the API tag to Species, handling variations"""
    if not value:
      return cls.UNKNOWN

    value_lower = value.lower().strip()

    if value_lower in ["cachorro", "cao", "cão", "dog"]:
      return cls.DOG
    elif value_lower in ["gato", "cat"]:
      return cls.CAT
    elif value_lower in ["ave", "passaro", "pássaro", "bird"]:
      return cls.BIRD
    else:
      return cls.UNKNOWN


# Species-specific fields, by species. Used to pick which extra fields to
# keep from a payload, never to decide the species.
SPECIES_FIELDS = {
  Species.DOG: ["manso", "necessitaFocinheira"],
  Species.CAT: ["unhasCortadas", "gostaDeAgua", "tamanhoPelo"],
  Species.BIRD: ["asaCortada", "emGaiola", "exotico"],
  Species.UNKNOWN: [],
}


@dataclass
class Tutor:
  """Owner of an animal"""
  tutor_id: Any
  name: str = ""
  email: str = ""

  @classmethod
  def from_dict(cls, data: Dict) -> "Tutor":
    return cls(
      tutor_id=data.get('id'),
      name=data.get('nome', ''),
      email=data.get('email', ''),
    )


@dataclass
class Animal:
  """
  A pet and, when the API sends it, its vaccination history.
  """
  animal_id: Any
  name: str
  species: Species = Species.UNKNOWN
  breed: str = ""
  weight: Optional[float] = None
  sex: str = ""                  # "Macho", "Fêmea", "Não Informado"
  size: str = ""                 # "Pequeno", "Médio", "Grande", "Gigante"
  vaccination_flag: str = ""     # API summary: "Vacinado", "Não Vacinado", ...
  tutor: Optional[Tutor] = None
  traits: Dict[str, Any] = field(default_factory=dict)
  vaccinations: Optional[AnimalVaccinationHistory] = None

  @classmethod
  def from_dict(cls, data: Dict) -> "Animal":
    """Create Animal from an API payload"""
    if not data:
      raise ValueError("Cannot create Animal from empty data")
    if data.get('id') is None:
      raise ValueError("Animal payload has no id")

    species = Species.from_string(data.get('tipoAnimal'))
    traits = {
      name: data[name] for name in SPECIES_FIELDS[species] if name in data
    }

    vaccinations = None
    if isinstance(data.get('historicoVacinacao'), list):
      vaccinations = AnimalVaccinationHistory.from_records(
        data['id'], data['historicoVacinacao']
      )

    return cls(
      animal_id=data['id'],
      name=data.get('nome', ''),
      species=species,
      breed=data.get('raca', ''),
      weight=data.get('peso'),
      sex=data.get('sexo', ''),
      size=data.get('porte', ''),
      vaccination_flag=data.get('vacinado', ''),
      tutor=Tutor.from_dict(data['tutor']) if data.get('tutor') else None,
      traits=traits,
      vaccinations=vaccinations,
    )

  def display_name(self) -> str:
    return f"{self.name} - {self.species.value}"

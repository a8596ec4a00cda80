#!/usr/bin/env python3
"""
Pet Vaccine Tracker - Main Runner
v1.0.0

Shows each vaccination of a pet with its status (Vaccinated, Overdue,
Upcoming, Current), suggests booster dates, and adds or removes records
through the pet API. After any write the history is fetched again and
re-resolved.

Usage:
  python vaccines.py --list                          # List your pets
  python vaccines.py --animal 7                      # Vaccination table for pet 7
  python vaccines.py --file history.json             # Resolve an exported history offline
  python vaccines.py --suggest 31/08/2024 --type Giárdia
  python vaccines.py --add --animal 7 --type "V10 (Décupla)" --applied 10/01/2024
  python vaccines.py --delete-vaccine 12 --animal 7
  python vaccines.py --animal 7 --today 01/06/2024   # Resolve as of another day

The session token comes from --token or the MEUPET_TOKEN environment variable.
"""
import sys
import os
import json
import argparse
from datetime import date
from typing import Dict, Optional

from api_client import ApiError, ApiSession, PetApiClient
from date_codec import InvalidDateFormat, format_date, parse_localized
from policy import get_policy
from scheduling import VaccinationEntryError, create_booster_entry, suggest_due_date
from schema import AnimalVaccinationHistory, VaccinationStatus
from vaccination_status import get_status_icon, resolve_history, summarize_statuses


def get_client(token: Optional[str] = None) -> PetApiClient:
  """Build an API client with an explicit session (if a token is available)"""
  token = token or os.environ.get("MEUPET_TOKEN")
  session = ApiSession.from_token(token) if token else None
  return PetApiClient(session=session)


def show_history(history: AnimalVaccinationHistory, today: date,
                 title: str = "") -> Dict[object, VaccinationStatus]:
  """Print a vaccination table with statuses. Returns {record_id: status}."""
  print("\n" + "=" * 60)
  print(f"💉 VACCINATIONS{' - ' + title if title else ''}")
  print(f"   As of: {format_date(today)}")
  print("=" * 60)

  if not len(history):
    print("  No vaccinations recorded")
    return {}

  statuses = resolve_history(history, today)

  for record in history:
    status = statuses[record.record_id]
    due = format_date(record.due_date) if record.due_date else "Not set"
    print(f"  {get_status_icon(status)} [{record.record_id}] {record.vaccine_type}")
    print(f"      Applied: {format_date(record.applied_date)} | Next dose: {due} | {status.label}")

  summary = summarize_statuses(statuses)
  print("-" * 40)
  print("  " + " | ".join(f"{name}: {count}" for name, count in summary.items()))

  return statuses


def show_animal(client: PetApiClient, animal_id: int, today: date) -> Dict[object, VaccinationStatus]:
  """Fetch one animal's vaccinations and print them"""
  history = client.get_vaccinations(animal_id)
  return show_history(history, today, title=f"animal {animal_id}")


def show_animals(client: PetApiClient):
  """List the session user's animals"""
  animals = client.get_my_animals()

  print(f"\n🐾 YOUR PETS ({len(animals)})")
  print("-" * 40)
  if not animals:
    print("  No pets registered")
  for animal in animals:
    print(f"  [{animal.animal_id}] {animal.display_name()}")
  return animals


def load_history_file(path: str) -> AnimalVaccinationHistory:
  """
  Load an exported history. Accepts either a list of vaccination payloads
  or {"animal_id": ..., "records": [...]}.
  """
  with open(path, "r", encoding="utf-8") as f:
    data = json.load(f)

  if isinstance(data, list):
    return AnimalVaccinationHistory.from_records(None, data)
  if isinstance(data, dict):
    return AnimalVaccinationHistory.from_dict(data)
  raise ValueError(f"{path}: expected a list of vaccinations or an object, got {type(data).__name__}")


def show_suggestion(applied_text: str, vaccine_type: str) -> date:
  """Print the suggested booster date for a dose"""
  applied = parse_localized(applied_text)
  due = suggest_due_date(applied, vaccine_type)
  months = get_policy().interval_months(vaccine_type)

  print(f"💉 {vaccine_type}: applied {format_date(applied)}")
  print(f"   Booster every {months} months -> next dose {format_date(due)}")
  return due


def add_vaccination(client: PetApiClient, animal_id: int, vaccine_type: str,
                    applied_text: str, due_text: Optional[str], today: date):
  """Create a vaccination, then fetch and show the updated history"""
  entry = create_booster_entry(vaccine_type, applied_text, today, due_text)
  record = client.create_vaccination(animal_id, entry)
  show_animal(client, animal_id, today)
  return record


def delete_vaccination(client: PetApiClient, vaccine_id: int, animal_id: Optional[int], today: date):
  """Delete a vaccination, then fetch and show the updated history"""
  client.delete_vaccination(vaccine_id)
  if animal_id is not None:
    show_animal(client, animal_id, today)


def main(argv=None) -> int:
  parser = argparse.ArgumentParser(description="Pet Vaccine Tracker v1.0")
  parser.add_argument("--list", action="store_true", help="List your pets")
  parser.add_argument("--animal", type=int, help="Animal ID")
  parser.add_argument("--file", type=str, help="Resolve a JSON history export offline")
  parser.add_argument("--suggest", type=str, metavar="DD/MM/YYYY", help="Suggest a booster date")
  parser.add_argument("--add", action="store_true", help="Add a vaccination to --animal")
  parser.add_argument("--type", type=str, help="Vaccine type")
  parser.add_argument("--applied", type=str, metavar="DD/MM/YYYY", help="Application date")
  parser.add_argument("--due", type=str, metavar="DD/MM/YYYY", help="Booster date (overrides suggestion)")
  parser.add_argument("--delete-vaccine", type=int, help="Delete a vaccination by ID")
  parser.add_argument("--today", type=str, metavar="DD/MM/YYYY", help="Resolve as of this date")
  parser.add_argument("--token", type=str, help="API token (default: $MEUPET_TOKEN)")

  args = parser.parse_args(argv)

  try:
    today = parse_localized(args.today) if args.today else date.today()

    if args.suggest:
      if not args.type:
        parser.error("--suggest requires --type")
      show_suggestion(args.suggest, args.type)
    elif args.file:
      history = load_history_file(args.file)
      show_history(history, today, title=os.path.basename(args.file))
    elif args.add:
      if args.animal is None or not args.type or not args.applied:
        parser.error("--add requires --animal, --type and --applied")
      add_vaccination(get_client(args.token), args.animal, args.type,
                      args.applied, args.due, today)
    elif args.delete_vaccine is not None:
      delete_vaccination(get_client(args.token), args.delete_vaccine, args.animal, today)
    elif args.animal is not None:
      show_animal(get_client(args.token), args.animal, today)
    elif args.list:
      show_animals(get_client(args.token))
    else:
      parser.print_help()
  except (InvalidDateFormat, VaccinationEntryError) as e:
    print(f"❌ {e}")
    return 2
  except ApiError as e:
    print(f"❌ API error: {e}")
    return 1
  except (OSError, ValueError) as e:
    print(f"❌ Error: {e}")
    return 1

  return 0


if __name__ == "__main__":
  sys.exit(main())

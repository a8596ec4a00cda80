"""
Configuration for the pet vaccine tracker
"""
import os

# Remote pet API (override with environment variables)
API_BASE_URL = os.environ.get("MEUPET_API_URL", "http://localhost:8081")
API_TIMEOUT_SECONDS = float(os.environ.get("MEUPET_API_TIMEOUT", 30))

# Booster policy: months until the next dose, keyed by vaccine type.
# Lookup is case-insensitive; anything not listed uses the default.
BOOSTER_INTERVALS = {
  "Giárdia": 6,
  "Gripe Canina": 6,
}
DEFAULT_BOOSTER_MONTHS = 12

# A booster due within this many days (inclusive) shows as "Upcoming"
UPCOMING_WINDOW_DAYS = 30

# Accepted year range for typed-in dates
MIN_YEAR = 1900
MAX_YEAR = 2100

# Vaccine names offered by the booster entry form
COMMON_VACCINES = [
  "V8 (Óctupla)",
  "V10 (Décupla)",
  "V12 (Duodécupla)",
  "Antirrábica",
  "Giárdia",
  "Gripe Canina",
  "Leishmaniose",
  "Tríplice Felina",
  "Quíntupla Felina",
  "FeLV (Leucemia Felina)",
  "Outras",
]

# User agent for API requests
USER_AGENT = "pet-vaccine-tracker/1.0 (+python-requests)"

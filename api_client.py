"""
Client for the remote pet API
v1.0.0

Wraps the REST endpoints for login, animals and vaccinations.

The session (token + user id) is an explicit ApiSession value handed to
the client. Nothing is read from or written to global state.
"""
import base64
import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

from config import API_BASE_URL, API_TIMEOUT_SECONDS, USER_AGENT
from schema import Animal, AnimalVaccinationHistory, VaccinationEntry, VaccinationRecord


class ApiError(Exception):
  """Raised when the API rejects a request or cannot be reached"""

  def __init__(self, message: str, status_code: Optional[int] = None):
    self.status_code = status_code
    super().__init__(message)


@dataclass(frozen=True)
class ApiSession:
  """Authenticated session: bearer token and the user it belongs to"""
  token: str
  user_id: Optional[int] = None

  @classmethod
  def from_token(cls, token: str) -> "ApiSession":
    """
    Build a session from a JWT, reading the user id from its payload
    ("sub", "userId" or "id", first one present).
    """
    return cls(token=token, user_id=decode_user_id(token))

  def auth_headers(self) -> Dict[str, str]:
    return {"Authorization": f"Bearer {self.token}"}


def decode_user_id(token: str) -> Optional[int]:
  """Extract the user id from a JWT payload, or None if it has none"""
  try:
    payload_part = token.split(".")[1]
    # JWT segments are unpadded base64url
    padded = payload_part + "=" * (-len(payload_part) % 4)
    payload = json.loads(base64.urlsafe_b64decode(padded))
  except (IndexError, ValueError):
    print("  ⚠️ Could not decode token payload")
    return None

  if not isinstance(payload, dict):
    print("  ⚠️ Token payload is not an object")
    return None

  user_id = payload.get("sub") or payload.get("userId") or payload.get("id")
  if user_id is None:
    print("  ⚠️ No user id in token payload")
    return None

  try:
    return int(user_id)
  except (TypeError, ValueError):
    print(f"  ⚠️ Non-numeric user id in token: {user_id}")
    return None


class PetApiClient:
  """REST client for users, animals and vaccinations"""

  def __init__(self, base_url: str = API_BASE_URL, session: Optional[ApiSession] = None,
               timeout: float = API_TIMEOUT_SECONDS):
    self.base_url = base_url.rstrip("/")
    self.session = session
    self.timeout = timeout
    self.http = requests.Session()
    self.http.headers.update({
      "User-Agent": USER_AGENT,
      "Content-Type": "application/json",
    })

  # ============================================
  # Request plumbing
  # ============================================

  def _request(self, method: str, endpoint: str, payload: Optional[Dict] = None,
               authenticated: bool = True) -> requests.Response:
    """Send a request and raise ApiError on any failure"""
    headers = {}
    if authenticated:
      if self.session is None:
        raise ApiError("Not authenticated")
      headers.update(self.session.auth_headers())

    url = f"{self.base_url}{endpoint}"
    print(f"  🔍 {method} {url}")

    try:
      response = self.http.request(
        method,
        url,
        json=payload,
        headers=headers,
        timeout=self.timeout,
      )
    except requests.RequestException as e:
      print(f"  ❌ Error calling {url}: {e}")
      raise ApiError(f"Could not reach {url}: {e}") from e

    if not response.ok:
      message = response.text or f"HTTP {response.status_code}"
      print(f"  ❌ {method} {url} failed: {response.status_code}")
      raise ApiError(message, status_code=response.status_code)

    return response

  def _json(self, method: str, endpoint: str, payload: Optional[Dict] = None,
            authenticated: bool = True) -> Any:
    response = self._request(method, endpoint, payload, authenticated)
    try:
      return response.json()
    except ValueError as e:
      raise ApiError(f"Invalid JSON from {endpoint}", status_code=response.status_code) from e

  def _require_user_id(self) -> int:
    if self.session is None or self.session.user_id is None:
      raise ApiError("Not authenticated")
    return self.session.user_id

  # ============================================
  # Users
  # ============================================

  def login(self, email: str, senha: str) -> ApiSession:
    """Log in and attach the resulting session to this client"""
    data = self._json("POST", "/usuarios/login", {"email": email, "senha": senha},
                      authenticated=False)
    token = data.get("token") if isinstance(data, dict) else None
    if not token:
      raise ApiError("Login response has no token")

    self.session = ApiSession.from_token(token)
    print(f"  ✅ Logged in as user {self.session.user_id}")
    return self.session

  def register(self, nome: str, email: str, senha: str) -> Dict:
    """Create an account. Does not log in."""
    return self._json("POST", "/usuarios", {"nome": nome, "email": email, "senha": senha},
                      authenticated=False)

  # ============================================
  # Animals
  # ============================================

  def get_my_animals(self) -> List[Animal]:
    """Animals owned by the session user"""
    user_id = self._require_user_id()
    data = self._json("GET", f"/usuarios/{user_id}/animais")
    return [Animal.from_dict(item) for item in data]

  def get_animal(self, animal_id: int) -> Animal:
    return Animal.from_dict(self._json("GET", f"/animais/{animal_id}"))

  # ============================================
  # Vaccinations
  # ============================================

  def get_vaccinations(self, animal_id: int) -> AnimalVaccinationHistory:
    data = self._json("GET", f"/animais/{animal_id}/vacinas")
    return AnimalVaccinationHistory.from_records(animal_id, data)

  def create_vaccination(self, animal_id: int, entry: VaccinationEntry) -> VaccinationRecord:
    data = self._json("POST", f"/animais/{animal_id}/vacinas", entry.to_request())
    record = VaccinationRecord.from_dict(data)
    print(f"  ✅ Added {record.vaccine_type} to animal {animal_id}")
    return record

  def update_vaccination(self, vaccine_id: int, entry: VaccinationEntry) -> VaccinationRecord:
    data = self._json("PUT", f"/vacinas/{vaccine_id}", entry.to_request())
    return VaccinationRecord.from_dict(data)

  def delete_vaccination(self, vaccine_id: int):
    self._request("DELETE", f"/vacinas/{vaccine_id}")
    print(f"  🗑️ Deleted vaccination {vaccine_id}")

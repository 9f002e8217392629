"""Connection constants for the Fishbowl external subscription API.

The endpoint and headers are fixed; they are not read from the
environment.  The API is unauthenticated from the caller's side, so no
credentials live here.
"""

from __future__ import annotations

SUBSCRIPTION_CREATE_URL = "https://api.fishbowl.com/api/external/subscription/create"

DEFAULT_HEADERS: dict[str, str] = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

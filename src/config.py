# Data source + dashboard settings
# API_BASE_URL: https://api.spacexdata.com/v4   (override with SPACEX_API_URL)
# COLLECTIONS fetched by the loader:
#   launches   -> list of launch records (date_utc, upcoming, success, rocket, launchpad, payloads, ...)
#   rockets    -> id -> name
#   launchpads -> id -> name (falls back to full_name)
#   payloads   -> id -> payload record (orbit, mass_kg, ...)
#
# The dashboard always recomputes from the full in-memory launch set.

import os
from pathlib import Path

API_BASE_URL = os.getenv("SPACEX_API_URL", "https://api.spacexdata.com/v4").rstrip("/")
COLLECTIONS = ["launches", "rockets", "launchpads", "payloads"]
REQUEST_TIMEOUT = 60

CACHE_DIR = Path(os.getenv("SPACEX_CACHE_DIR", "data/cache"))
LOG_DIR = Path("logs")

PAGE_SIZE = 10
PLACEHOLDER = "-"

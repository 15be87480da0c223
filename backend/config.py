"""
config.py
---------
Central configuration for the Trip Planner suggestion service.
All secrets loaded from environment variables: never hard-coded.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the backend directory (if it exists) so env vars in that file
# are picked up by os.getenv() below.  Won't override vars already set in the shell.
_env_path = Path(__file__).parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path, override=False)

# ── Itinerary suggestion engine ───────────────────────────────────────────────
# Places closer than this to a cluster seed are suggested for the same day.
SUGGEST_CLUSTER_RADIUS_KM: float = float(os.getenv("SUGGEST_CLUSTER_RADIUS_KM", "5.0"))
# Average urban speed (walking + public transport) used for hop travel time.
SUGGEST_TRAVEL_SPEED_KMH: float = float(os.getenv("SUGGEST_TRAVEL_SPEED_KMH", "30.0"))
# Hop travel time when either end of the hop has no coordinates (hours).
SUGGEST_DEFAULT_TRAVEL_HOURS: float = float(os.getenv("SUGGEST_DEFAULT_TRAVEL_HOURS", "0.5"))

# ── Logging ───────────────────────────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
# Structured JSONL event logs (modules/observability/logger.py)
LOGS_DIR: str = os.getenv("LOGS_DIR", str(Path(__file__).parent / "logs"))

# ── HTTP API ──────────────────────────────────────────────────────────────────
API_CORS_ORIGINS: list[str] = [
    o.strip() for o in os.getenv("API_CORS_ORIGINS", "*").split(",") if o.strip()
]

# ── PostgreSQL ────────────────────────────────────────────────────────────────
# Schema defined in db/schema.sql
# Apply with: python scripts/run_migrations.py
POSTGRES_HOST: str     = os.getenv("POSTGRES_HOST",     "localhost")
POSTGRES_PORT: int     = int(os.getenv("POSTGRES_PORT", "5432"))
POSTGRES_DB: str       = os.getenv("POSTGRES_DB",       "tripplanner")
POSTGRES_USER: str     = os.getenv("POSTGRES_USER",     "tripplanner_user")
POSTGRES_PASSWORD: str = os.getenv("POSTGRES_PASSWORD", "tripplanner_pass")
POSTGRES_MIN_CONN: int = int(os.getenv("POSTGRES_MIN_CONN", "1"))
POSTGRES_MAX_CONN: int = int(os.getenv("POSTGRES_MAX_CONN", "10"))
POSTGRES_CONNECT_TIMEOUT: int = int(os.getenv("POSTGRES_CONNECT_TIMEOUT", "5"))  # seconds

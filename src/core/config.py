"""
Configuration constants and environment setup.
"""

import calendar
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# PATHS
# =============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.parent
DB_PATH = Path(os.environ.get("PLANNER_DB_PATH", PROJECT_ROOT / "data" / "db" / "yearly-planner.db"))

# =============================================================================
# PARSING
# =============================================================================

UNTITLED_EVENT = "Untitled Event"
ICS_EXTENSION = ".ics"

# Only events lasting longer than this many days are displayed
MIN_VISIBLE_DAYS = 1

# =============================================================================
# LAYOUT
# =============================================================================

# Python calendar weekday number of the first grid column (6 = Sunday)
FIRST_WEEKDAY = int(os.environ.get("PLANNER_FIRST_WEEKDAY", str(calendar.SUNDAY)))

# Vertical metrics, in rem
ROW_HEADER_HEIGHT = 1.5
EVENT_HEIGHT = 1.25
EVENT_GAP = 0.125
ROW_PADDING = 0.5

EVENT_COLORS = [
    "blue",
    "green",
    "purple",
    "orange",
    "pink",
    "teal",
    "indigo",
    "rose",
]

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

# =============================================================================
# SOURCES
# =============================================================================

MOCK_SOURCE_ID = "mock"
MOCK_SOURCE_NAME = "Example Data"
REMOTE_CALENDAR_NAME = "Remote Calendar"

FETCH_TIMEOUT_SECONDS = float(os.environ.get("FETCH_TIMEOUT_SECONDS", "15"))
FETCH_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)

# =============================================================================
# API CONFIGURATION
# =============================================================================

PLANNER_API_KEY = os.environ.get("PLANNER_API_KEY", "")
API_HOST = os.environ.get("API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("API_PORT", "8000"))
API_DEBUG = os.environ.get("API_DEBUG", "false").lower() == "true"
CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]
MAX_UPLOAD_SIZE_MB = int(os.environ.get("MAX_UPLOAD_SIZE_MB", "5"))
MAX_UPLOAD_SIZE_BYTES = MAX_UPLOAD_SIZE_MB * 1024 * 1024
API_VERSION = "1.0.0"

import os
from pathlib import Path

# Project root = the checkout containing recipe_ai/
PROJECT_ROOT = Path(__file__).resolve().parents[2]

DATA_DIR = Path(os.getenv("RECIPE_DATA_DIR", str(PROJECT_ROOT / "data")))
RECIPE_DB = Path(os.getenv("RECIPE_DB", str(DATA_DIR / "recipes.sqlite3")))

# --- Version / build metadata (override via systemd env) ---
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
GIT_SHA = os.getenv("GIT_SHA", "unknown")
BUILD_DATE = os.getenv("BUILD_DATE", "unknown")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# --- Generator ---
# Workflow webhook is tried first; Gemini is the fallback.
RECIPE_WEBHOOK_URL = os.getenv("RECIPE_WEBHOOK_URL", "")
RECIPE_WEBHOOK_TIMEOUT_S = float(os.getenv("RECIPE_WEBHOOK_TIMEOUT_S", "60"))

GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
GEMINI_BASE_URL = os.getenv("GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
GEMINI_TEMPERATURE = 0.7
GEMINI_MAX_OUTPUT_TOKENS = 1000

# --- Identity provider ---
SUPABASE_URL = os.getenv("SUPABASE_URL", "")
SUPABASE_ANON_KEY = os.getenv("SUPABASE_ANON_KEY", "")

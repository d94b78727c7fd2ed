import os
from pathlib import Path
from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parents[1]

# ────────────────────────────────────────────────────────────────
# 1 · ENV FILE LOADING
# ────────────────────────────────────────────────────────────────
env_loaded = load_dotenv(ROOT / ".env")
if not env_loaded:                          # fallback so repo works OOTB
    load_dotenv(ROOT / ".env.example")

# ────────────────────────────────────────────────────────────────
# 2 · OUTPUT FORMATTING
# ────────────────────────────────────────────────────────────────
PRECISION   = int(os.getenv("SLOTSTATS_PRECISION", 4))

# ────────────────────────────────────────────────────────────────
# 3 · INPUT
# ────────────────────────────────────────────────────────────────
CSV_COLUMN  = os.getenv("SLOTSTATS_CSV_COLUMN", "")

# ────────────────────────────────────────────────────────────────
# 4 · DIAGNOSTICS
# ────────────────────────────────────────────────────────────────
VERBOSE     = os.getenv("SLOTSTATS_VERBOSE", "0").lower() in ("1", "true", "yes")

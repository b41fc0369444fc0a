# config.py
import os
from pathlib import Path

# ---------- Paths ----------
INPUT_DIR = Path(os.getenv("OUTLINE_INPUT_DIR", "input"))
OUTPUT_DIR = Path(os.getenv("OUTLINE_OUTPUT_DIR", "output"))

# ---------- Limits ----------
MAX_PAGES = int(os.getenv("OUTLINE_MAX_PAGES", "50"))      # pages read per document
TITLE_PAGES = int(os.getenv("OUTLINE_TITLE_PAGES", "3"))   # pages scanned for the title

# ---------- Logging ----------
LOG_LEVEL = os.getenv("OUTLINE_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

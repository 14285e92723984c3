# =========================
# verbquiz/config.py
# =========================
from pathlib import Path

# Verb data ships inside the package
DATA_DIR = Path(__file__).resolve().parent / "data"
VERBS_FILE = DATA_DIR / "verbs.json"

# Window
WINDOW_TITLE = "Danish Verbs Practice"
WINDOW_SIZE = "640x800"
WINDOW_MIN_SIZE = (480, 600)

# Logging
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

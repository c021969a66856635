import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
MATCHES_DIR = PROJECT_ROOT / "matches"

SCHEMA_VERSION = 1

# Play order
SPORTS = ("tabletennis", "badminton", "squash", "tennis")
SPORT_LABELS = {
    "fr": {
        "tabletennis": "Ping-pong",
        "badminton": "Badminton",
        "squash": "Squash",
        "tennis": "Tennis",
    },
    "en": {
        "tabletennis": "Table tennis",
        "badminton": "Badminton",
        "squash": "Squash",
        "tennis": "Tennis",
    },
}
MAX_POINTS_PER_SET = 21

DEFAULT_PLAYER_A = "Joueur A"
DEFAULT_PLAYER_B = "Joueur B"
DEFAULT_LANGUAGE = "fr"

# OCR
OCR_LANG = os.environ.get("RACKETLON_OCR_LANG", "fra+eng")
OCR_MAX_SCORE = 35
OCR_MIN_WIDTH = 1200

REVIEW_AUTO_THRESHOLD = 0.85
REVIEW_MIN_THRESHOLD = 0.60

# Results kept by a MatchSession
HISTORY_LIMIT = 200

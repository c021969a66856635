"""
Lenient parser for a single sport score.

Accepts:
  "21-15"      -> SetScore(21, 15)
  " 21 - 15 "  -> SetScore(21, 15)

Everything else ("", "-", "abc", "21–", None) means the sport was not
played. Never raises: garbled manual or OCR input degrades to unplayed.
"""
from __future__ import annotations

import re
from typing import Any, Optional

from racketlon.models import SetScore

_SCORE_RE = re.compile(r"^\s*([0-9]{1,9})\s*-\s*([0-9]{1,9})\s*$")


def parse_score(raw: Any) -> Optional[SetScore]:
    if not isinstance(raw, str):
        return None
    if not raw.strip() or raw.strip() == "-":
        return None

    m = _SCORE_RE.match(raw)
    if not m:
        return None

    return SetScore(score_a=int(m.group(1)), score_b=int(m.group(2)))


def format_score(score: SetScore) -> str:
    return f"{score.score_a}-{score.score_b}"

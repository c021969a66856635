# racketlon/ocr_parser.py
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple

from racketlon.config import OCR_MAX_SCORE, SPORTS
from racketlon.ocr_contract import ScoresheetGuess


SCORE_RE = re.compile(r"(\d{1,2})\s*[-–—]\s*(\d{1,2})")

SPORT_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "tabletennis": ("tennis de table", "table tennis", "tenis de mesa", "ping", "pong", "table", "tt"),
    "badminton": ("badminton", "shuttle", "bad"),
    "squash": ("squash", "sq"),
    "tennis": ("tennis", "ten"),
}

# Window around a sport keyword where its score is looked up
WINDOW_BEFORE = 20
WINDOW_AFTER = 50

_NAME = r"[A-Za-zÀ-ÿ]+(?:[ \t]+[A-Za-zÀ-ÿ]+)?"
PLAYERS_RE = re.compile(
    rf"({_NAME})[ \t]+(?:vs?\.?|contre|[-–—])[ \t]+({_NAME})",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class ScoreCandidate:
    start: int
    end: int
    text: str


def _keyword_regex() -> re.Pattern:
    # Longest keywords first so "tennis de table" wins over "tennis"
    pairs = [(kw, sport) for sport, kws in SPORT_KEYWORDS.items() for kw in kws]
    pairs.sort(key=lambda p: len(p[0]), reverse=True)
    parts = []
    for kw, _ in pairs:
        escaped = re.escape(kw)
        parts.append(rf"{escaped}\b" if len(kw) <= 3 else escaped)
    return re.compile(r"\b(" + "|".join(parts) + ")", re.IGNORECASE)


_KEYWORD_RE = _keyword_regex()
_KEYWORD_SPORT = {kw: sport for sport, kws in SPORT_KEYWORDS.items() for kw in kws}


def find_score_candidates(text: str) -> List[ScoreCandidate]:
    """
    All "A-B" pairs with both values <= 35, in reading order.
    """
    out: List[ScoreCandidate] = []
    for m in SCORE_RE.finditer(text):
        a, b = int(m.group(1)), int(m.group(2))
        if a <= OCR_MAX_SCORE and b <= OCR_MAX_SCORE:
            out.append(ScoreCandidate(start=m.start(), end=m.end(), text=f"{a}-{b}"))
    return out


def _pick_near(
    candidates: List[ScoreCandidate],
    kw_start: int,
    kw_end: int,
    used: Set[int],
) -> Optional[ScoreCandidate]:
    lo = kw_start - WINDOW_BEFORE
    hi = kw_start + WINDOW_AFTER
    in_window = [c for c in candidates if c.start >= lo and c.end <= hi and c.start not in used]
    after = [c for c in in_window if c.start >= kw_end]
    if after:
        return after[0]
    if in_window:
        return in_window[-1]
    return None


def find_player_names(text: str) -> Tuple[Optional[str], Optional[str]]:
    m = PLAYERS_RE.search(text)
    if not m:
        return None, None
    return m.group(1).strip(), m.group(2).strip()


def parse_scoresheet_text(text: str) -> ScoresheetGuess:
    """
    Heuristic reading of OCR text from a racketlon scoresheet.

    Looks for:
    - "21-15" / "21 - 15" pairs
    - sport names (fr/en/es, a few abbreviations) next to a pair
    - "Name1 vs Name2" / "Name1 contre Name2"

    When no sport name is recognised but four or more pairs exist, they are
    assigned in play order with a lower confidence.
    """
    guess = ScoresheetGuess(raw_text=text)
    candidates = find_score_candidates(text)
    used: Set[int] = set()
    confidence = 0.0

    for m in _KEYWORD_RE.finditer(text):
        sport = _KEYWORD_SPORT.get(m.group(1).casefold())
        if sport is None:
            continue
        if guess.scores[sport] is not None:
            continue
        picked = _pick_near(candidates, m.start(), m.end(), used)
        if picked is None:
            continue
        guess.scores[sport] = picked.text
        used.add(picked.start)
        confidence += 0.25

    if all(v is None for v in guess.scores.values()) and len(candidates) >= len(SPORTS):
        for sport, cand in zip(SPORTS, candidates):
            guess.scores[sport] = cand.text
        confidence = 0.5
        guess.flags.append("ASSUMED_ORDER")

    guess.player_a, guess.player_b = find_player_names(text)

    found = len(guess.found_scores())
    if found > 0:
        confidence = max(confidence, found * 0.25)
    else:
        guess.flags.append("NO_SCORES_FOUND")
    if guess.player_a is None:
        guess.flags.append("NO_PLAYER_NAMES")

    guess.confidence = float(min(1.0, max(0.0, confidence)))
    return guess

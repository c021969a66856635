# racketlon/ocr_contract.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import json
from pathlib import Path

from racketlon.config import (
    DEFAULT_PLAYER_A,
    DEFAULT_PLAYER_B,
    REVIEW_AUTO_THRESHOLD,
    REVIEW_MIN_THRESHOLD,
    SPORTS,
)
from racketlon.models import MatchInput
from racketlon.score_parser import parse_score


HEAVY_FLAGS = {"ASSUMED_ORDER", "NO_SCORES_FOUND"}


@dataclass
class ScoresheetGuess:
    """
    Best-effort structured reading of a scoresheet photo.

    - scores: sport -> raw "A-B" string, or None when not found
    - confidence in [0,1]
    - flags are machine-readable hints for UI routing
    """
    raw_text: str = ""
    scores: Dict[str, Optional[str]] = field(default_factory=lambda: {s: None for s in SPORTS})
    player_a: Optional[str] = None
    player_b: Optional[str] = None
    confidence: float = 0.0
    flags: List[str] = field(default_factory=list)

    def found_scores(self) -> Dict[str, str]:
        return {s: v for s, v in self.scores.items() if v is not None}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "raw_text": self.raw_text,
            "scores": {s: self.scores.get(s) for s in SPORTS},
            "player_a": self.player_a,
            "player_b": self.player_b,
            "confidence": self.confidence,
            "flags": list(self.flags),
        }

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "ScoresheetGuess":
        raw_scores = d.get("scores", {}) or {}
        return ScoresheetGuess(
            raw_text=str(d.get("raw_text", "")),
            scores={s: (str(raw_scores[s]) if raw_scores.get(s) is not None else None) for s in SPORTS},
            player_a=(str(d["player_a"]) if d.get("player_a") else None),
            player_b=(str(d["player_b"]) if d.get("player_b") else None),
            confidence=float(d.get("confidence", 0.0)),
            flags=list(d.get("flags", [])),
        )


# =============================================================================
# Validation
# =============================================================================

def _is_finite_number(x: float) -> bool:
    return isinstance(x, (int, float)) and x == x and x not in (float("inf"), float("-inf"))


def validate_guess(g: ScoresheetGuess) -> List[str]:
    """
    Return list of problems (empty == valid).
    Score strings are not checked here: the engine treats malformed ones as
    not played.
    """
    problems: List[str] = []

    unknown = set(g.scores) - set(SPORTS)
    if unknown:
        problems.append(f"unknown sport(s): {sorted(unknown)}")

    for sport, raw in g.scores.items():
        if raw is not None and not isinstance(raw, str):
            problems.append(f"scores[{sport}] must be str or None")

    if not _is_finite_number(g.confidence):
        problems.append("confidence not finite number")
    elif g.confidence < 0 or g.confidence > 1:
        problems.append("confidence must be in [0,1]")

    if not isinstance(g.flags, list) or any(not isinstance(f, str) for f in g.flags):
        problems.append("flags must be list[str]")

    return problems


# =============================================================================
# Confidence routing helpers
# =============================================================================

def classify_review_bucket(confidence: float) -> str:
    """
    Bucket used for UI routing:
    - auto: >= 0.85
    - review: [0.60, 0.85)
    - block: < 0.60
    """
    if confidence >= REVIEW_AUTO_THRESHOLD:
        return "auto"
    if confidence >= REVIEW_MIN_THRESHOLD:
        return "review"
    return "block"


def needs_human_review(g: ScoresheetGuess) -> bool:
    """
    Review if:
    - a found score does not parse, OR
    - low confidence, OR
    - flags indicate problems
    """
    for raw in g.found_scores().values():
        if parse_score(raw) is None:
            return True
    if classify_review_bucket(g.confidence) != "auto":
        return True
    if any(f in HEAVY_FLAGS for f in g.flags):
        return True
    return False


# =============================================================================
# Conversion: Guess -> engine input
# =============================================================================

def to_match_input(
    g: ScoresheetGuess,
    *,
    player_a: str = DEFAULT_PLAYER_A,
    player_b: str = DEFAULT_PLAYER_B,
) -> MatchInput:
    """
    Names found on the sheet win over the given fallbacks.
    """
    return MatchInput(
        scores={s: g.scores.get(s) for s in SPORTS},
        player_a=g.player_a or player_a,
        player_b=g.player_b or player_b,
    )


# =============================================================================
# IO
# =============================================================================

def save_guess(path: Path, g: ScoresheetGuess) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(g.to_dict(), f, ensure_ascii=False, indent=2)


def load_guess(path: Path) -> ScoresheetGuess:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError("Scoresheet guess JSON must be an object")
    g = ScoresheetGuess.from_dict(data)
    problems = validate_guess(g)
    if problems:
        msg = "ScoresheetGuess validation failed:\n" + "\n".join(f"- {p}" for p in problems)
        raise ValueError(msg)
    return g

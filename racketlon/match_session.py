import logging
from collections import deque
from typing import Deque, Dict, List, Optional

from racketlon.config import DEFAULT_PLAYER_A, DEFAULT_PLAYER_B, HISTORY_LIMIT, MAX_POINTS_PER_SET, SPORTS
from racketlon.engine import analyze_input
from racketlon.exceptions import UnknownSportError
from racketlon.models import MatchInput, MatchResult
from racketlon.ocr_contract import ScoresheetGuess, validate_guess

logger = logging.getLogger(__name__)


class MatchSession:
    """
    Single interactive racketlon match.

    Responsibilities:
    - Hold the raw per-sport inputs and player names
    - Recompute the full analysis on every change
    - Apply an OCR guess (atomic)
    - Keep the last HISTORY_LIMIT results (oldest dropped first)
    """

    def __init__(self, player_a: Optional[str] = None, player_b: Optional[str] = None):
        self._input = MatchInput(
            scores={s: None for s in SPORTS},
            player_a=player_a or DEFAULT_PLAYER_A,
            player_b=player_b or DEFAULT_PLAYER_B,
        )
        self._history: Deque[MatchResult] = deque(maxlen=HISTORY_LIMIT)
        self._recompute()

    # ---------------------------------------------------------
    # Inputs
    # ---------------------------------------------------------

    def set_score(self, sport: str, raw: Optional[str]) -> MatchResult:
        self._check_sport(sport)
        self._input.scores[sport] = raw
        return self._recompute()

    def set_points(self, sport: str, score_a: int, score_b: int) -> MatchResult:
        """
        Numeric entry, capped at 21 per side like the score form.
        """
        self._check_sport(sport)
        a = min(max(int(score_a), 0), MAX_POINTS_PER_SET)
        b = min(max(int(score_b), 0), MAX_POINTS_PER_SET)
        self._input.scores[sport] = f"{a}-{b}"
        return self._recompute()

    def clear_score(self, sport: str) -> MatchResult:
        return self.set_score(sport, None)

    def set_players(self, player_a: Optional[str] = None, player_b: Optional[str] = None) -> MatchResult:
        if player_a is not None:
            self._input.player_a = player_a or DEFAULT_PLAYER_A
        if player_b is not None:
            self._input.player_b = player_b or DEFAULT_PLAYER_B
        return self._recompute()

    def apply_ocr_guess(self, guess: ScoresheetGuess) -> MatchResult:
        """
        Copy the scores and names found on a scoresheet.
        Atomic: an invalid guess raises ValueError and changes nothing.
        Sports the guess did not find keep their current value.
        """
        problems = validate_guess(guess)
        if problems:
            raise ValueError(f"invalid scoresheet guess: {problems}")

        scores: Dict[str, Optional[str]] = dict(self._input.scores)
        scores.update(guess.found_scores())

        self._input = MatchInput(
            scores=scores,
            player_a=guess.player_a or self._input.player_a,
            player_b=guess.player_b or self._input.player_b,
        )
        logger.info("Applied OCR guess (%d score(s))", len(guess.found_scores()))
        return self._recompute()

    # ---------------------------------------------------------
    # Core API
    # ---------------------------------------------------------

    def get_result(self) -> MatchResult:
        return self._history[-1]

    def get_history(self) -> List[MatchResult]:
        return list(self._history)

    def export_input(self) -> Dict:
        return self._input.to_dict()

    def load_input(self, match_input: MatchInput) -> MatchResult:
        self._input = MatchInput.from_dict(match_input.to_dict())
        return self._recompute()

    def reset(self):
        self._input = MatchInput(scores={s: None for s in SPORTS})
        self._history.clear()
        self._recompute()

    # ---------------------------------------------------------
    # Internals
    # ---------------------------------------------------------

    def _check_sport(self, sport: str):
        if sport not in SPORTS:
            raise UnknownSportError(f"Unknown sport: {sport}")

    def _recompute(self) -> MatchResult:
        result = analyze_input(self._input)
        self._history.append(result)
        logger.debug(
            "Recomputed: %d-%d, status=%s", result.total_a, result.total_b, result.status
        )
        return result

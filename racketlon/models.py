from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Optional, Tuple, Union

from racketlon.config import DEFAULT_LANGUAGE, DEFAULT_PLAYER_A, DEFAULT_PLAYER_B, SPORTS


Sport = Literal["tabletennis", "badminton", "squash", "tennis"]
Side = Literal["a", "b"]


@dataclass(frozen=True)
class SetScore:
    score_a: int
    score_b: int

    @property
    def margin(self) -> int:
        return self.score_a - self.score_b


@dataclass(frozen=True)
class SportBreakdown:
    sport: Sport
    played: bool
    score_a: Optional[int] = None
    score_b: Optional[int] = None
    margin: int = 0


@dataclass(frozen=True)
class AnalysisEntry:
    """
    One tagged analysis line.

    - type: presentation hint (leader, scenario, skip_tennis, ...)
    - code: message identifier, rendered by racketlon.messages
    - params: numbers, sport ids and player names behind the text
    """
    type: str
    code: str
    params: Dict[str, Any] = field(default_factory=dict)

    @property
    def message(self) -> str:
        return self.render(DEFAULT_LANGUAGE)

    def render(self, lang: str = DEFAULT_LANGUAGE) -> str:
        from racketlon.messages import render_entry

        return render_entry(self, lang)

    def to_dict(self, lang: str = DEFAULT_LANGUAGE) -> Dict[str, Any]:
        return {
            "type": self.type,
            "code": self.code,
            "params": dict(self.params),
            "message": self.render(lang),
        }


# --- STATUS VARIANTS ---

@dataclass(frozen=True)
class InProgress:
    next_sport: Sport
    final_sport: Sport
    status: str = field(default="in_progress", init=False)


@dataclass(frozen=True)
class Finished:
    winner: str
    winner_side: Side
    early: bool = False
    status: str = field(default="finished", init=False)


@dataclass(frozen=True)
class Gummiarm:
    status: str = field(default="gummiarm", init=False)


Outcome = Union[InProgress, Finished, Gummiarm]


@dataclass(frozen=True)
class MatchResult:
    player_a: str
    player_b: str
    sports: Tuple[SportBreakdown, ...]
    total_a: int
    total_b: int
    current_delta: int
    sports_played: int
    sports_remaining: int
    max_remaining_points: int
    outcome: Outcome
    analysis: Tuple[AnalysisEntry, ...] = ()

    @property
    def status(self) -> str:
        return self.outcome.status

    @property
    def winner(self) -> Optional[str]:
        if isinstance(self.outcome, Finished):
            return self.outcome.winner
        return None

    def sport(self, sport: Sport) -> SportBreakdown:
        for s in self.sports:
            if s.sport == sport:
                return s
        raise KeyError(sport)

    def to_dict(self, lang: str = DEFAULT_LANGUAGE) -> Dict[str, Any]:
        return {
            "player_a": self.player_a,
            "player_b": self.player_b,
            "sports": {
                s.sport: {
                    "played": s.played,
                    "score_a": s.score_a,
                    "score_b": s.score_b,
                    "margin": s.margin,
                }
                for s in self.sports
            },
            "total_a": self.total_a,
            "total_b": self.total_b,
            "current_delta": self.current_delta,
            "sports_played": self.sports_played,
            "sports_remaining": self.sports_remaining,
            "max_remaining_points": self.max_remaining_points,
            "status": self.status,
            "winner": self.winner,
            "analysis": [e.to_dict(lang) for e in self.analysis],
        }


@dataclass
class MatchInput:
    scores: Dict[str, Optional[str]] = field(default_factory=dict)
    player_a: str = DEFAULT_PLAYER_A
    player_b: str = DEFAULT_PLAYER_B

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player_a": self.player_a,
            "player_b": self.player_b,
            "scores": {s: self.scores.get(s) for s in SPORTS},
        }

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "MatchInput":
        raw_scores = d.get("scores", {}) or {}
        return MatchInput(
            scores={s: raw_scores.get(s) for s in SPORTS},
            player_a=str(d.get("player_a") or DEFAULT_PLAYER_A),
            player_b=str(d.get("player_b") or DEFAULT_PLAYER_B),
        )

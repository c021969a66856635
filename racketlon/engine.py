from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Optional, Tuple

from racketlon.config import DEFAULT_PLAYER_A, DEFAULT_PLAYER_B, MAX_POINTS_PER_SET, SPORTS
from racketlon.models import (
    AnalysisEntry,
    Finished,
    Gummiarm,
    InProgress,
    MatchInput,
    MatchResult,
    Outcome,
    SportBreakdown,
)
from racketlon.scenarios import generate_scenarios
from racketlon.score_parser import parse_score


@dataclass(frozen=True)
class MatchTotals:
    sports: Tuple[SportBreakdown, ...]
    total_a: int
    total_b: int
    sports_played: int

    @property
    def sports_remaining(self) -> int:
        return len(SPORTS) - self.sports_played

    @property
    def current_delta(self) -> int:
        return self.total_a - self.total_b

    @property
    def max_remaining_points(self) -> int:
        return self.sports_remaining * MAX_POINTS_PER_SET


# =========================================================
# PUBLIC API
# =========================================================

def analyze_match(
    scores: Mapping[str, Optional[str]],
    player_a: Optional[str] = None,
    player_b: Optional[str] = None,
) -> MatchResult:
    """
    Compute totals, status and tactical analysis from per-sport scores.

    scores: {"tabletennis": "21-15", "badminton": "18-21", ...}
    Missing or malformed scores count as not played. Pure function:
    no state is kept between calls and nothing is raised.
    """
    name_a = _display_name(player_a, DEFAULT_PLAYER_A)
    name_b = _display_name(player_b, DEFAULT_PLAYER_B)

    totals = aggregate(scores)
    outcome, analysis = classify(totals, name_a, name_b)

    return MatchResult(
        player_a=name_a,
        player_b=name_b,
        sports=totals.sports,
        total_a=totals.total_a,
        total_b=totals.total_b,
        current_delta=totals.current_delta,
        sports_played=totals.sports_played,
        sports_remaining=totals.sports_remaining,
        max_remaining_points=totals.max_remaining_points,
        outcome=outcome,
        analysis=tuple(analysis),
    )


def analyze_input(match_input: MatchInput) -> MatchResult:
    return analyze_match(match_input.scores, match_input.player_a, match_input.player_b)


# =========================================================
# AGGREGATION
# =========================================================

def aggregate(scores: Optional[Mapping[str, Optional[str]]]) -> MatchTotals:
    scores = scores or {}
    breakdown: List[SportBreakdown] = []
    total_a = 0
    total_b = 0
    played = 0

    for sport in SPORTS:
        parsed = parse_score(scores.get(sport))
        if parsed is None:
            breakdown.append(SportBreakdown(sport=sport, played=False))
            continue

        breakdown.append(
            SportBreakdown(
                sport=sport,
                played=True,
                score_a=parsed.score_a,
                score_b=parsed.score_b,
                margin=parsed.margin,
            )
        )
        total_a += parsed.score_a
        total_b += parsed.score_b
        played += 1

    return MatchTotals(
        sports=tuple(breakdown),
        total_a=total_a,
        total_b=total_b,
        sports_played=played,
    )


# =========================================================
# STATUS
# =========================================================

def classify(totals: MatchTotals, player_a: str, player_b: str) -> Tuple[Outcome, List[AnalysisEntry]]:
    delta = totals.current_delta

    if totals.sports_played == len(SPORTS):
        if delta == 0:
            return Gummiarm(), [
                AnalysisEntry(
                    "gummiarm",
                    "gummiarm",
                    {"total_a": totals.total_a, "total_b": totals.total_b},
                )
            ]

        finished = _finished(delta, player_a, player_b, early=False)
        return finished, [
            AnalysisEntry(
                "winner",
                "match_won",
                {
                    "winner": finished.winner,
                    "winner_total": max(totals.total_a, totals.total_b),
                    "loser_total": min(totals.total_a, totals.total_b),
                    "margin": abs(delta),
                },
            )
        ]

    if abs(delta) > totals.max_remaining_points:
        finished = _finished(delta, player_a, player_b, early=True)
        return finished, [
            AnalysisEntry(
                "winner",
                "match_won_early",
                {
                    "winner": finished.winner,
                    "margin": abs(delta),
                    "max_remaining": totals.max_remaining_points,
                },
            )
        ]

    unplayed = [s.sport for s in totals.sports if not s.played]
    outcome = InProgress(next_sport=unplayed[0], final_sport=unplayed[-1])
    analysis = generate_scenarios(
        delta=delta,
        total_a=totals.total_a,
        total_b=totals.total_b,
        sports_remaining=totals.sports_remaining,
        next_sport=outcome.next_sport,
        final_sport=outcome.final_sport,
        player_a=player_a,
        player_b=player_b,
    )
    return outcome, analysis


def _finished(delta: int, player_a: str, player_b: str, *, early: bool) -> Finished:
    if delta > 0:
        return Finished(winner=player_a, winner_side="a", early=early)
    return Finished(winner=player_b, winner_side="b", early=early)


def _display_name(name: Optional[str], default: str) -> str:
    if name is None or not str(name).strip():
        return default
    return str(name).strip()

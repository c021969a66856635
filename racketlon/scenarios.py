"""
Tactical scenarios for a match still in progress.

Every computation is written once from the point of view of one player
("own_delta" = that player's lead, negative when trailing) and run for
both sides. The cap is strict everywhere: reaching exactly the points left
in play only forces the gummiarm, never an outright win.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from racketlon.config import MAX_POINTS_PER_SET
from racketlon.models import AnalysisEntry, SetScore, Side, Sport


@dataclass(frozen=True)
class PlayerView:
    side: Side
    name: str
    own_delta: int


def player_views(delta: int, player_a: str, player_b: str) -> Tuple[PlayerView, PlayerView]:
    return (
        PlayerView(side="a", name=player_a, own_delta=delta),
        PlayerView(side="b", name=player_b, own_delta=-delta),
    )


def leader_first(a: PlayerView, b: PlayerView) -> Tuple[PlayerView, PlayerView]:
    # A first when tied
    if b.own_delta > a.own_delta:
        return b, a
    return a, b


def oriented_score(side: Side, winner_points: int, loser_points: int) -> SetScore:
    if side == "a":
        return SetScore(score_a=winner_points, score_b=loser_points)
    return SetScore(score_a=loser_points, score_b=winner_points)


def example_score_for_gain(side: Side, gain: int) -> Optional[SetScore]:
    """
    Best-case set for a net gain: 21-X with X = 21 - gain.
    None when X falls outside [0, 21].
    """
    if gain > MAX_POINTS_PER_SET:
        return None
    loser = MAX_POINTS_PER_SET - gain
    if loser < 0 or loser > MAX_POINTS_PER_SET:
        return None
    return oriented_score(side, MAX_POINTS_PER_SET, loser)


def _score_params(score: SetScore) -> dict:
    return {"score_a": score.score_a, "score_b": score.score_b}


# =========================================================
# ENTRY POINT
# =========================================================

def generate_scenarios(
    *,
    delta: int,
    total_a: int,
    total_b: int,
    sports_remaining: int,
    next_sport: Sport,
    final_sport: Sport,
    player_a: str,
    player_b: str,
) -> List[AnalysisEntry]:
    a, b = player_views(delta, player_a, player_b)
    entries = [_standing(a, b, total_a, total_b)]

    if sports_remaining <= 0:
        return entries

    if sports_remaining == 1:
        entries.extend(last_sport_scenarios(a, b, next_sport))
    elif sports_remaining == 2:
        entries.extend(before_final_scenarios(a, b, next_sport, final_sport))
    else:
        entries.extend(multi_sport_scenarios(a, b, next_sport, sports_remaining))

    return entries


def _standing(a: PlayerView, b: PlayerView, total_a: int, total_b: int) -> AnalysisEntry:
    if a.own_delta == 0:
        return AnalysisEntry("tied", "tied", {"total_a": total_a, "total_b": total_b})

    leader, _ = leader_first(a, b)
    totals = {"a": total_a, "b": total_b}
    return AnalysisEntry(
        "leader",
        "leader",
        {
            "leader": leader.name,
            "margin": leader.own_delta,
            "leader_total": totals[leader.side],
            "trailer_total": totals["b" if leader.side == "a" else "a"],
        },
    )


# =========================================================
# ONE SPORT LEFT
# =========================================================

def last_sport_scenarios(a: PlayerView, b: PlayerView, sport: Sport) -> List[AnalysisEntry]:
    cap = MAX_POINTS_PER_SET

    if a.own_delta == 0:
        return [
            AnalysisEntry("scenario", "final_winner_takes_all", {"sport": sport}),
            AnalysisEntry("gummiarm_scenario", "final_tie_gummiarm", {"sport": sport}),
        ]

    leader, trailer = leader_first(a, b)
    margin = leader.own_delta

    if margin > cap:
        shutout = oriented_score(trailer.side, cap, 0)
        return [
            AnalysisEntry(
                "clinched",
                "already_clinched",
                {"player": leader.name, "sport": sport, **_score_params(shutout)},
            )
        ]

    if margin == cap:
        return [
            AnalysisEntry(
                "scenario",
                "final_needs_shutout",
                {"player": trailer.name, "sport": sport, "winner_points": cap, "loser_points": 0},
            )
        ]

    return [
        AnalysisEntry(
            "scenario",
            "final_trailer_wins",
            {
                "player": trailer.name,
                "sport": sport,
                "winner_points": cap,
                "loser_points": cap - margin - 1,
            },
        ),
        AnalysisEntry(
            "scenario",
            "final_leader_holds",
            {
                "player": leader.name,
                "sport": sport,
                "winner_points": cap,
                "loser_points": cap - margin + 1,
                "max_losing_margin": margin - 1,
            },
        ),
        AnalysisEntry(
            "gummiarm_scenario",
            "final_gummiarm_at",
            {"sport": sport, "winner_points": cap, "loser_points": cap - margin},
        ),
    ]


# =========================================================
# TWO SPORTS LEFT
# =========================================================

def before_final_scenarios(
    a: PlayerView,
    b: PlayerView,
    sport: Sport,
    final_sport: Sport,
) -> List[AnalysisEntry]:
    entries = [AnalysisEntry("header", "analysis_header", {"sport": sport})]

    leader, trailer = leader_first(a, b)

    # Winning without the final sport: lead must exceed 21 afterwards.
    for p in (leader, trailer):
        gain = MAX_POINTS_PER_SET + 1 - p.own_delta
        score = example_score_for_gain(p.side, gain)
        if score is None:
            continue
        entries.append(
            AnalysisEntry(
                "skip_tennis",
                "skip_final",
                {
                    "player": p.name,
                    "sport": sport,
                    "final_sport": final_sport,
                    "gain": gain,
                    **_score_params(score),
                },
            )
        )

    margin = leader.own_delta
    if margin == 0:
        entries.append(
            AnalysisEntry(
                "tennis_setup",
                "final_advantage_open",
                {"sport": sport, "final_sport": final_sport},
            )
        )
        return entries

    entries.append(
        AnalysisEntry(
            "tennis_setup",
            "final_advantage_hold",
            {
                "player": leader.name,
                "sport": sport,
                "final_sport": final_sport,
                "max_losing_margin": margin - 1,
            },
        )
    )
    entries.append(
        AnalysisEntry(
            "tennis_setup",
            "final_advantage_flip",
            {
                "player": trailer.name,
                "sport": sport,
                "final_sport": final_sport,
                "gain": margin + 1,
            },
        )
    )
    return entries


# =========================================================
# THREE OR MORE SPORTS LEFT
# =========================================================

def multi_sport_scenarios(
    a: PlayerView,
    b: PlayerView,
    sport: Sport,
    sports_remaining: int,
) -> List[AnalysisEntry]:
    cap = MAX_POINTS_PER_SET
    points_after_next = (sports_remaining - 1) * cap

    entries = [
        AnalysisEntry(
            "info",
            "sports_remaining",
            {"remaining": sports_remaining, "max_points": points_after_next + cap},
        )
    ]

    gains = []
    for p in (a, b):
        gain = points_after_next - p.own_delta + 1
        gains.append(gain)
        if gain > cap:
            continue
        score = example_score_for_gain(p.side, gain)
        if score is None:
            continue
        entries.append(
            AnalysisEntry(
                "clinch_possible",
                "clinch_after_next",
                {"player": p.name, "sport": sport, "gain": gain, **_score_params(score)},
            )
        )

    if all(g > cap for g in gains):
        entries.append(AnalysisEntry("info", "no_clinch_after_next", {"sport": sport}))

    return entries

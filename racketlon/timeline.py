from typing import Mapping, Optional

from racketlon.config import SPORTS
from racketlon.engine import analyze_match
from racketlon.models import MatchResult
from racketlon.score_parser import parse_score


def build_match_timeline(
    scores: Mapping[str, Optional[str]],
    player_a: Optional[str] = None,
    player_b: Optional[str] = None,
) -> list[MatchResult]:
    """
    Replays a scoresheet sport by sport in play order.
    Returns one result after each played sport, stopping once the match
    is decided (finished or gummiarm).
    Does NOT mutate external state.
    """

    partial: dict[str, Optional[str]] = {}
    timeline: list[MatchResult] = []

    for sport in SPORTS:

        raw = scores.get(sport)
        if parse_score(raw) is None:
            continue

        partial[sport] = raw
        result = analyze_match(partial, player_a, player_b)
        timeline.append(result)

        if result.status != "in_progress":
            break

    return timeline

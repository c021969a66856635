"""
Text rendering for analysis entries.

The engine only produces (type, code, params); this module turns them into
human-readable lines. Params named "sport" / "final_sport" hold sport ids and
are replaced by the label of the requested language.
"""
from __future__ import annotations

from typing import Dict, Iterable, List

from racketlon.config import DEFAULT_LANGUAGE, SPORT_LABELS
from racketlon.models import AnalysisEntry, MatchResult


TEMPLATES: Dict[str, Dict[str, str]] = {
    "fr": {
        "leader": "{leader} mène de {margin} points ({leader_total}-{trailer_total})",
        "tied": "Égalité parfaite {total_a}-{total_b}",
        "match_won": "{winner} gagne {winner_total}-{loser_total} (+{margin} pts)",
        "match_won_early": (
            "{winner} a déjà gagné ! Avance de {margin} pts, "
            "seulement {max_remaining} pts restants possibles."
        ),
        "gummiarm": "Égalité parfaite {total_a}-{total_b} ! Direction le Gummiarm 🎾",
        "already_clinched": "{player} a déjà gagné ! Même un {score_a}-{score_b} au {sport} ne suffirait pas.",
        "final_needs_shutout": "{player} doit faire {winner_points}-{loser_points} au {sport} pour aller au Gummiarm",
        "final_trailer_wins": "🏆 {player} gagne si {sport} ≥ {winner_points}-{loser_points}",
        "final_leader_holds": "🏆 {player} gagne si {sport} ≤ {winner_points}-{loser_points} ou {player} gagne le set",
        "final_gummiarm_at": "⚡ Gummiarm si {sport} = {winner_points}-{loser_points}",
        "final_winner_takes_all": "Le gagnant du {sport} remporte le match !",
        "final_tie_gummiarm": "⚡ Gummiarm si égalité au {sport}",
        "analysis_header": "📊 Analyse {sport} :",
        "skip_final": "🏆 {player} gagne SANS {final_sport} si : {sport} en {score_a}-{score_b} ou mieux",
        "final_advantage_hold": (
            "🎾 {player} va au {final_sport} avec l'avantage si perd de "
            "{max_losing_margin} pts ou moins au {sport}"
        ),
        "final_advantage_flip": "🎾 {player} doit gagner +{gain} pts au {sport} pour avoir l'avantage au {final_sport}",
        "final_advantage_open": "🎾 Le gagnant du {sport} aura l'avantage au {final_sport}",
        "sports_remaining": "{remaining} sports restants ({max_points} pts max)",
        "clinch_after_next": "{player} peut gagner après {sport} avec un {score_a}-{score_b} ou mieux",
        "no_clinch_after_next": "Aucun ne peut gagner après {sport} seul, le match continue",
    },
    "en": {
        "leader": "{leader} leads by {margin} points ({leader_total}-{trailer_total})",
        "tied": "Dead level {total_a}-{total_b}",
        "match_won": "{winner} wins {winner_total}-{loser_total} (+{margin} pts)",
        "match_won_early": (
            "{winner} has already won! Leads by {margin} pts, "
            "only {max_remaining} pts left to play."
        ),
        "gummiarm": "Dead level {total_a}-{total_b}! Off to the Gummiarm 🎾",
        "already_clinched": "{player} has already won! Even {score_a}-{score_b} in {sport} would not be enough.",
        "final_needs_shutout": "{player} must win {sport} {winner_points}-{loser_points} to reach the Gummiarm",
        "final_trailer_wins": "🏆 {player} wins if {sport} ≥ {winner_points}-{loser_points}",
        "final_leader_holds": "🏆 {player} wins if {sport} ≤ {winner_points}-{loser_points} or {player} wins the set",
        "final_gummiarm_at": "⚡ Gummiarm if {sport} = {winner_points}-{loser_points}",
        "final_winner_takes_all": "Whoever wins {sport} wins the match!",
        "final_tie_gummiarm": "⚡ Gummiarm if {sport} ends level",
        "analysis_header": "📊 {sport} analysis:",
        "skip_final": "🏆 {player} wins WITHOUT {final_sport} with {sport} {score_a}-{score_b} or better",
        "final_advantage_hold": (
            "🎾 {player} goes into {final_sport} ahead if losing {sport} by "
            "{max_losing_margin} pts or fewer"
        ),
        "final_advantage_flip": "🎾 {player} must win {sport} by +{gain} pts to lead into {final_sport}",
        "final_advantage_open": "🎾 Whoever wins {sport} leads into {final_sport}",
        "sports_remaining": "{remaining} sports left ({max_points} pts max)",
        "clinch_after_next": "{player} can win after {sport} with {score_a}-{score_b} or better",
        "no_clinch_after_next": "Nobody can win after {sport} alone, the match goes on",
    },
}

_SPORT_PARAMS = ("sport", "final_sport")


def sport_label(sport: str, lang: str = DEFAULT_LANGUAGE) -> str:
    labels = SPORT_LABELS.get(lang, SPORT_LABELS[DEFAULT_LANGUAGE])
    return labels.get(sport, sport)


def render_entry(entry: AnalysisEntry, lang: str = DEFAULT_LANGUAGE) -> str:
    templates = TEMPLATES.get(lang, TEMPLATES[DEFAULT_LANGUAGE])
    template = templates.get(entry.code)
    if template is None:
        raise KeyError(f"No template for message code: {entry.code}")

    params = dict(entry.params)
    for key in _SPORT_PARAMS:
        if key in params:
            params[key] = sport_label(params[key], lang)

    return template.format(**params)


def render_analysis(entries: Iterable[AnalysisEntry], lang: str = DEFAULT_LANGUAGE) -> List[str]:
    return [render_entry(e, lang) for e in entries]


def render_summary(result: MatchResult, lang: str = DEFAULT_LANGUAGE) -> List[str]:
    """
    Lines shown above the detailed analysis: final status and total score.
    """
    lines: List[str] = []
    if lang == "en":
        if result.status == "finished" and result.winner:
            lines.append(f"🏆 {result.winner} wins the match!")
        elif result.status == "gummiarm":
            lines.append("⚡ GUMMIARM! One decisive point in tennis")
        lines.append(
            f"📊 Total score: {result.total_a} - {result.total_b} "
            f"({result.sports_played}/4 sports played)"
        )
    else:
        if result.status == "finished" and result.winner:
            lines.append(f"🏆 {result.winner} remporte le match !")
        elif result.status == "gummiarm":
            lines.append("⚡ GUMMIARM ! Un point décisif au tennis")
        lines.append(
            f"📊 Score total : {result.total_a} - {result.total_b} "
            f"({result.sports_played}/4 sports joués)"
        )
    return lines

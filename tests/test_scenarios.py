import pytest

from racketlon.engine import analyze_match
from racketlon.models import SetScore
from racketlon.scenarios import example_score_for_gain, last_sport_scenarios, player_views


# ---------------------------------------------------------
# Helpers
# ---------------------------------------------------------

def analyze(**scores):
    return analyze_match(scores, "A", "B")


def codes(result):
    return [e.code for e in result.analysis]


def entry(result, code):
    matches = [e for e in result.analysis if e.code == code]
    assert len(matches) == 1, f"expected one {code}, got {codes(result)}"
    return matches[0]


# ---------------------------------------------------------
# Example scores
# ---------------------------------------------------------

@pytest.mark.parametrize("side, gain, expected", [
    ("a", 10, SetScore(21, 11)),
    ("b", 10, SetScore(11, 21)),
    ("a", 21, SetScore(21, 0)),
    ("a", 0, SetScore(21, 21)),
    ("a", 22, None),
    ("b", -1, None),
])
def test_example_score_for_gain(side, gain, expected):
    assert example_score_for_gain(side, gain) == expected


# ---------------------------------------------------------
# One sport left
# ---------------------------------------------------------

def test_last_sport_a_leads_by_18():
    result = analyze(tabletennis="21-15", badminton="21-15", squash="21-15")

    assert result.total_a == 63
    assert result.total_b == 45
    assert result.current_delta == 18
    assert result.sports_remaining == 1
    assert result.status == "in_progress"
    assert [e.type for e in result.analysis] == ["leader", "scenario", "scenario", "gummiarm_scenario"]

    leader = entry(result, "leader")
    assert leader.params["leader"] == "A"
    assert leader.params["margin"] == 18

    trailer_wins = entry(result, "final_trailer_wins")
    assert trailer_wins.params["player"] == "B"
    assert trailer_wins.params["sport"] == "tennis"
    assert trailer_wins.params["loser_points"] == 2

    holds = entry(result, "final_leader_holds")
    assert holds.params["player"] == "A"
    assert holds.params["max_losing_margin"] == 17
    assert holds.params["loser_points"] == 4

    gummiarm = entry(result, "final_gummiarm_at")
    assert gummiarm.params["loser_points"] == 3


def test_last_sport_messages_fr():
    result = analyze(tabletennis="21-15", badminton="21-15", squash="21-15")

    messages = [e.message for e in result.analysis]

    assert messages[0] == "A mène de 18 points (63-45)"
    assert messages[1] == "🏆 B gagne si Tennis ≥ 21-2"
    assert messages[2] == "🏆 A gagne si Tennis ≤ 21-4 ou A gagne le set"
    assert messages[3] == "⚡ Gummiarm si Tennis = 21-3"


def test_last_sport_b_leads_is_mirrored():
    result = analyze(tabletennis="15-21", badminton="15-21", squash="15-21")

    assert entry(result, "leader").params["leader"] == "B"
    assert entry(result, "final_trailer_wins").params["player"] == "A"
    assert entry(result, "final_trailer_wins").params["loser_points"] == 2
    assert entry(result, "final_leader_holds").params["player"] == "B"
    assert entry(result, "final_gummiarm_at").params["loser_points"] == 3


@pytest.mark.parametrize("sheet, trailer", [
    ({"tabletennis": "21-0", "badminton": "10-10", "squash": "5-5"}, "B"),
    ({"tabletennis": "0-21", "badminton": "10-10", "squash": "5-5"}, "A"),
])
def test_last_sport_margin_of_21_needs_shutout(sheet, trailer):
    result = analyze_match(sheet, "A", "B")

    assert result.status == "in_progress"
    assert codes(result) == ["leader", "final_needs_shutout"]
    assert result.analysis[1].params["player"] == trailer


def test_last_sport_tied():
    result = analyze(tabletennis="21-19", badminton="19-21", squash="20-20")

    assert codes(result) == ["tied", "final_winner_takes_all", "final_tie_gummiarm"]
    assert [e.type for e in result.analysis] == ["tied", "scenario", "gummiarm_scenario"]


def test_last_sport_clinched_lead():
    a, b = player_views(25, "A", "B")

    entries = last_sport_scenarios(a, b, "tennis")

    assert [e.type for e in entries] == ["clinched"]
    assert entries[0].params["player"] == "A"
    assert entries[0].message == "A a déjà gagné ! Même un 0-21 au Tennis ne suffirait pas."


def test_last_sport_clinched_lead_for_b():
    a, b = player_views(-30, "A", "B")

    entries = last_sport_scenarios(a, b, "tennis")

    assert entries[0].params["player"] == "B"
    assert (entries[0].params["score_a"], entries[0].params["score_b"]) == (21, 0)


def test_last_sport_can_be_an_earlier_sport():
    result = analyze(tabletennis="21-15", badminton="21-15", tennis="21-15")

    assert entry(result, "final_trailer_wins").params["sport"] == "squash"


# ---------------------------------------------------------
# Two sports left
# ---------------------------------------------------------

def test_two_left_a_leads():
    result = analyze(tabletennis="21-15", badminton="21-15")

    assert result.current_delta == 12
    assert [e.type for e in result.analysis] == [
        "leader", "header", "skip_tennis", "tennis_setup", "tennis_setup",
    ]

    skip = entry(result, "skip_final")
    assert skip.params["player"] == "A"
    assert skip.params["sport"] == "squash"
    assert skip.params["final_sport"] == "tennis"
    assert skip.params["gain"] == 10
    assert (skip.params["score_a"], skip.params["score_b"]) == (21, 11)

    hold = entry(result, "final_advantage_hold")
    assert hold.params["player"] == "A"
    assert hold.params["max_losing_margin"] == 11

    flip = entry(result, "final_advantage_flip")
    assert flip.params["player"] == "B"
    assert flip.params["gain"] == 13


def test_two_left_b_leads():
    result = analyze(tabletennis="15-21", badminton="15-21")

    skip = entry(result, "skip_final")
    assert skip.params["player"] == "B"
    assert (skip.params["score_a"], skip.params["score_b"]) == (11, 21)
    assert skip.message == "🏆 B gagne SANS Tennis si : Squash en 11-21 ou mieux"

    assert entry(result, "final_advantage_hold").params["player"] == "B"
    assert entry(result, "final_advantage_flip").params["player"] == "A"


def test_two_left_tied_only_generic_setup():
    result = analyze(tabletennis="21-15", badminton="15-21")

    assert codes(result) == ["tied", "analysis_header", "final_advantage_open"]


def test_two_left_lead_of_one_needs_shutout_to_skip_final():
    result = analyze(tabletennis="21-20", badminton="10-10")

    skip = entry(result, "skip_final")
    assert skip.params["gain"] == 21
    assert (skip.params["score_a"], skip.params["score_b"]) == (21, 0)


def test_two_left_example_score_out_of_range_is_not_reported():
    result = analyze(tabletennis="21-0", badminton="12-10")

    assert result.current_delta == 23
    assert result.status == "in_progress"
    assert "skip_final" not in codes(result)
    assert "final_advantage_hold" in codes(result)


def test_two_left_final_sport_is_last_unplayed():
    result = analyze(tabletennis="21-15", tennis="21-15")

    skip = entry(result, "skip_final")
    assert skip.params["sport"] == "badminton"
    assert skip.params["final_sport"] == "squash"


# ---------------------------------------------------------
# Three or more sports left
# ---------------------------------------------------------

def test_three_left_cannot_be_decided_after_next_sport():
    result = analyze(tabletennis="21-0")

    assert result.current_delta == 21
    assert result.sports_remaining == 3
    assert codes(result) == ["leader", "sports_remaining", "no_clinch_after_next"]
    assert result.analysis[1].params == {"remaining": 3, "max_points": 63}
    assert result.analysis[2].params["sport"] == "badminton"
    assert result.analysis[2].message == "Aucun ne peut gagner après Badminton seul, le match continue"


def test_three_left_clinch_possible_for_a():
    result = analyze(tabletennis="30-5")

    clinch = entry(result, "clinch_after_next")
    assert clinch.type == "clinch_possible"
    assert clinch.params["player"] == "A"
    assert clinch.params["gain"] == 18
    assert (clinch.params["score_a"], clinch.params["score_b"]) == (21, 3)
    assert "no_clinch_after_next" not in codes(result)


def test_three_left_clinch_possible_for_b():
    result = analyze(tabletennis="5-30")

    clinch = entry(result, "clinch_after_next")
    assert clinch.params["player"] == "B"
    assert (clinch.params["score_a"], clinch.params["score_b"]) == (3, 21)


def test_three_left_unreachable_example_is_not_reported():
    result = analyze(tabletennis="45-0")

    assert result.status == "in_progress"
    assert codes(result) == ["leader", "sports_remaining"]


def test_four_left():
    result = analyze_match({})

    assert codes(result) == ["tied", "sports_remaining", "no_clinch_after_next"]
    assert result.analysis[1].params == {"remaining": 4, "max_points": 84}
    assert result.analysis[2].params["sport"] == "tabletennis"

from racketlon.ocr_contract import needs_human_review
from racketlon.ocr_parser import find_player_names, find_score_candidates, parse_scoresheet_text


FULL_SHEET = (
    "Dupont vs Martin\n"
    "Ping-pong 21-15\n"
    "Badminton 18-21\n"
    "Squash 21-19\n"
    "Tennis 15-21\n"
)


# ---------------------------------------------------------
# Sport keywords
# ---------------------------------------------------------

def test_full_sheet_with_sport_names():
    guess = parse_scoresheet_text(FULL_SHEET)

    assert guess.scores == {
        "tabletennis": "21-15",
        "badminton": "18-21",
        "squash": "21-19",
        "tennis": "15-21",
    }
    assert guess.player_a == "Dupont"
    assert guess.player_b == "Martin"
    assert guess.confidence == 1.0
    assert guess.flags == []
    assert guess.raw_text == FULL_SHEET


def test_tennis_de_table_is_not_tennis():
    guess = parse_scoresheet_text("Tennis de table 21-15\nTennis 12-21\n")

    assert guess.scores["tabletennis"] == "21-15"
    assert guess.scores["tennis"] == "12-21"


def test_partial_sheet_with_spaces_and_contre():
    guess = parse_scoresheet_text("Alice contre Bob\nSquash 21 - 17\n")

    assert guess.found_scores() == {"squash": "21-17"}
    assert guess.confidence == 0.25
    assert (guess.player_a, guess.player_b) == ("Alice", "Bob")


def test_non_ascii_text_before_keyword():
    # "İ" grows to two characters when lowercased
    guess = parse_scoresheet_text("İ" * 40 + " Squash 21-15\nnotes 30-2")

    assert guess.scores["squash"] == "21-15"


def test_uppercase_keywords():
    guess = parse_scoresheet_text("BADMINTON 18-21\nTENNIS 15-21\n")

    assert guess.found_scores() == {"badminton": "18-21", "tennis": "15-21"}


def test_unrealistic_scores_are_ignored():
    candidates = find_score_candidates("Squash 40-12 and 21-19")

    assert [c.text for c in candidates] == ["21-19"]


# ---------------------------------------------------------
# Fallback order
# ---------------------------------------------------------

def test_four_unlabelled_scores_assumed_in_play_order():
    guess = parse_scoresheet_text("Feuille de match\n21-15 18-21\n21-19 15-21\n")

    assert guess.scores == {
        "tabletennis": "21-15",
        "badminton": "18-21",
        "squash": "21-19",
        "tennis": "15-21",
    }
    assert "ASSUMED_ORDER" in guess.flags
    assert needs_human_review(guess) is True


def test_three_unlabelled_scores_are_not_assigned():
    guess = parse_scoresheet_text("21-15 18-21 21-19")

    assert guess.found_scores() == {}
    assert "NO_SCORES_FOUND" in guess.flags


# ---------------------------------------------------------
# Nothing found
# ---------------------------------------------------------

def test_no_text():
    guess = parse_scoresheet_text("")

    assert guess.confidence == 0.0
    assert guess.found_scores() == {}
    assert "NO_SCORES_FOUND" in guess.flags
    assert "NO_PLAYER_NAMES" in guess.flags


def test_hyphenated_word_is_not_a_player_pair():
    assert find_player_names("Ping-pong 21-15") == (None, None)

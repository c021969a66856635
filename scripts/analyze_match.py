# scripts/analyze_match.py
from __future__ import annotations

import argparse
import json
import logging
import sys

from racketlon.config import DEFAULT_LANGUAGE, SPORTS
from racketlon.engine import analyze_match
from racketlon.exceptions import MatchFileError
from racketlon.messages import render_analysis, render_summary
from racketlon.storage import load_match_input, resolve_match_path


def main():
    ap = argparse.ArgumentParser(description="Racketlon live scenarios")
    ap.add_argument("--input", type=str, default="", help="Match JSON file, bare names are read from matches/")
    for sport in SPORTS:
        ap.add_argument(f"--{sport}", type=str, default=None, help=f"{sport} score, e.g. 21-15")
    ap.add_argument("--player-a", type=str, default=None)
    ap.add_argument("--player-b", type=str, default=None)
    ap.add_argument("--lang", type=str, default=DEFAULT_LANGUAGE, choices=["fr", "en"])
    ap.add_argument("--json", action="store_true", help="Print the full result as JSON")
    ap.add_argument("--debug", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    scores = {}
    player_a, player_b = args.player_a, args.player_b

    if args.input:
        try:
            match_input = load_match_input(resolve_match_path(args.input))
        except (OSError, MatchFileError) as e:
            raise SystemExit(f"ERROR: {e}")
        scores.update(match_input.scores)
        player_a = player_a or match_input.player_a
        player_b = player_b or match_input.player_b

    for sport in SPORTS:
        value = getattr(args, sport)
        if value is not None:
            scores[sport] = value

    result = analyze_match(scores, player_a, player_b)

    if args.json:
        json.dump(result.to_dict(args.lang), sys.stdout, ensure_ascii=False, indent=2)
        print()
        return

    for line in render_summary(result, args.lang):
        print(line)
    for line in render_analysis(result.analysis, args.lang):
        print(f"  {line}")


if __name__ == "__main__":
    main()

# scripts/ocr_scoresheet.py
from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path

from racketlon.config import DEFAULT_LANGUAGE, OCR_LANG
from racketlon.exceptions import OcrExtractionError
from racketlon.match_session import MatchSession
from racketlon.messages import render_analysis, render_summary
from racketlon.ocr import ocr_scoresheet
from racketlon.ocr_contract import classify_review_bucket, needs_human_review, save_guess

logger = logging.getLogger("ocr_scoresheet")


def _progress(status: str, progress: float) -> None:
    logger.info("%s... %d%%", status, round(progress * 100))


def main():
    ap = argparse.ArgumentParser(description="Read a racketlon scoresheet photo")
    ap.add_argument("--image", type=str, required=True)
    ap.add_argument("--ocr-lang", type=str, default=OCR_LANG)
    ap.add_argument("--out", type=str, default="", help="Save the guess as JSON")
    ap.add_argument("--apply", action="store_true", help="Run the analysis on the guessed scores")
    ap.add_argument("--lang", type=str, default=DEFAULT_LANGUAGE, choices=["fr", "en"])
    ap.add_argument("--debug", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        guess = asyncio.run(ocr_scoresheet(args.image, lang=args.ocr_lang, on_progress=_progress))
    except OcrExtractionError as e:
        # Failed extraction is reported here and never reaches the engine
        raise SystemExit(f"ERROR: {e}")

    print(guess.raw_text or "(no text detected)")
    found = guess.found_scores()
    if found:
        print("\nScores:")
        for sport, score in found.items():
            print(f"  {sport}: {score}")
    if guess.player_a:
        print(f"\nPlayers: {guess.player_a} vs {guess.player_b}")
    print(
        f"\nConfidence: {guess.confidence:.2f} "
        f"({classify_review_bucket(guess.confidence)}"
        f"{', review needed' if needs_human_review(guess) else ''})"
    )

    if args.out:
        save_guess(Path(args.out), guess)
        print(f"Saved guess: {args.out}")

    if args.apply:
        session = MatchSession()
        result = session.apply_ocr_guess(guess)
        print()
        for line in render_summary(result, args.lang):
            print(line)
        for line in render_analysis(result.analysis, args.lang):
            print(f"  {line}")


if __name__ == "__main__":
    main()

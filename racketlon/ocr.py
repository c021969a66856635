# racketlon/ocr.py
from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Callable, Optional, Union

import cv2
import numpy as np
import pytesseract

from racketlon.config import OCR_LANG, OCR_MIN_WIDTH
from racketlon.exceptions import OcrExtractionError
from racketlon.ocr_contract import ScoresheetGuess
from racketlon.ocr_parser import parse_scoresheet_text

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, float], None]
ImageSource = Union[str, Path, np.ndarray]


def load_image(source: ImageSource) -> np.ndarray:
    if isinstance(source, np.ndarray):
        if source.size == 0:
            raise OcrExtractionError("Empty image array")
        return source

    img = cv2.imread(str(source), cv2.IMREAD_COLOR)
    if img is None:
        raise OcrExtractionError(f"Cannot read image: {source}")
    return img


def preprocess_image(img: np.ndarray, *, min_width: int = OCR_MIN_WIDTH) -> np.ndarray:
    """
    Scoresheet photo -> binary image for Tesseract:
    - grayscale
    - upscale small photos so digits are tall enough
    - light denoise, then Otsu threshold
    """
    if img.ndim == 3:
        gray = cv2.cvtColor(img, cv2.COLOR_BGR2GRAY)
    else:
        gray = img

    if gray.dtype != np.uint8:
        gray = np.clip(gray, 0, 255).astype(np.uint8)

    h, w = gray.shape[:2]
    if 0 < w < min_width:
        scale = min_width / float(w)
        gray = cv2.resize(gray, (min_width, int(round(h * scale))), interpolation=cv2.INTER_CUBIC)

    gray = cv2.GaussianBlur(gray, (3, 3), 0)
    _, binary = cv2.threshold(gray, 0, 255, cv2.THRESH_BINARY + cv2.THRESH_OTSU)
    return binary


def extract_text(img: np.ndarray, *, lang: str = OCR_LANG) -> str:
    try:
        return pytesseract.image_to_string(img, lang=lang, config="--psm 6")
    except pytesseract.TesseractNotFoundError as e:
        raise OcrExtractionError("Tesseract is not installed or not in PATH") from e
    except pytesseract.TesseractError as e:
        raise OcrExtractionError(f"Text extraction failed: {e}") from e


def read_scoresheet(
    source: ImageSource,
    *,
    lang: str = OCR_LANG,
    on_progress: Optional[ProgressCallback] = None,
) -> ScoresheetGuess:
    """
    Blocking pipeline: image -> text -> ScoresheetGuess.
    Raises OcrExtractionError; never returns a half-built guess.
    """
    def report(status: str, progress: float) -> None:
        if on_progress is not None:
            on_progress(status, progress)

    report("loading image", 0.0)
    img = load_image(source)

    report("preprocessing", 0.2)
    binary = preprocess_image(img)

    report("recognizing text", 0.4)
    text = extract_text(binary, lang=lang)
    logger.debug("OCR text (%d chars): %r", len(text), text[:200])

    report("parsing", 0.9)
    guess = parse_scoresheet_text(text)
    logger.info(
        "Scoresheet read: %d score(s), confidence=%.2f, flags=%s",
        len(guess.found_scores()),
        guess.confidence,
        guess.flags,
    )

    report("done", 1.0)
    return guess


async def ocr_scoresheet(
    source: ImageSource,
    *,
    lang: str = OCR_LANG,
    on_progress: Optional[ProgressCallback] = None,
) -> ScoresheetGuess:
    """
    Single-shot async extraction. Tesseract runs in a worker thread.
    """
    return await asyncio.to_thread(read_scoresheet, source, lang=lang, on_progress=on_progress)

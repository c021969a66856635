import json
import logging
from pathlib import Path

from racketlon.config import MATCHES_DIR, SCHEMA_VERSION
from racketlon.exceptions import MatchFileError
from racketlon.models import MatchInput

logger = logging.getLogger(__name__)


def resolve_match_path(name: str, matches_dir: Path = MATCHES_DIR) -> Path:
    """
    Existing paths are used as is; bare names live under matches/.
    """
    path = Path(name)
    if path.exists() or path.is_absolute() or len(path.parts) > 1:
        return path
    return matches_dir / path


def load_match_input(path: Path) -> MatchInput:
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise MatchFileError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise MatchFileError("Match file must contain a JSON object")

    if data.get("schema_version") != SCHEMA_VERSION:
        raise MatchFileError(f"Unsupported schema_version: {data.get('schema_version')}")

    if not isinstance(data.get("scores", {}), dict):
        raise MatchFileError("scores must be an object")

    return MatchInput.from_dict(data)


def save_match_input(path: Path, match_input: MatchInput):
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump({
            "schema_version": SCHEMA_VERSION,
            **match_input.to_dict(),
        }, f, ensure_ascii=False, indent=4)
    logger.debug("Saved match input to %s", path)

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple, Union

from .core.errors import CausesFileError, EmptyCausesError

DEFAULT_CAUSES: Tuple[str, ...] = (
    "cars", "illness", "height", "darkness", "fire", "water", "nature",
    "building", "electricity", "explosions", "food", "animals", "temperature",
    "weapons",
)


def load_causes(path: Union[str, Path]) -> List[str]:
    """
    Reads one death reason per line.

    Lines are stripped and blank lines dropped; an empty result is an error.
    """
    try:
        text = Path(path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise CausesFileError(f"failed to read the death reasons file '{path}': {exc}") from exc

    causes = [line.strip() for line in text.splitlines()]
    causes = [c for c in causes if c]
    if not causes:
        raise EmptyCausesError(f"death reasons file '{path}' is empty")
    return causes

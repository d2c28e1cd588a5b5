from __future__ import annotations

"""
Score ledger
Two ascending lists of the best results ever seen (scores and lines cleared),
stored as two lines of space separated integers.
"""

import logging
import os
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

NB_HIGHSCORES = 5
DEFAULT_SCORES_FILE = "scores.txt"


def _to_line(values: Sequence[int]) -> str:
    return " ".join(str(int(v)) for v in values)


def _from_line(line: str) -> List[int]:
    values = [int(token) for token in line.split()]
    if any(v < 0 for v in values):
        raise ValueError(f"negative record in {line!r}")
    return values


def load_highscores_and_lines(
    path: str = DEFAULT_SCORES_FILE, limit: int = NB_HIGHSCORES
) -> Optional[Tuple[List[int], List[int]]]:
    """Read (scores, lines) from `path`, or None if there is no usable record."""
    if not os.path.exists(path):
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
        if len(lines) < 2:
            logger.warning("ignoring truncated score file %s", path)
            return None
        return sorted(_from_line(lines[0]))[-limit:], sorted(_from_line(lines[1]))[-limit:]
    except (OSError, ValueError) as exc:
        logger.warning("could not read score file %s: %s", path, exc)
        return None


def save_highscores_and_lines(
    path: str, highscores: Sequence[int], lines: Sequence[int], limit: int = NB_HIGHSCORES
) -> bool:
    """Overwrite `path` with the top `limit` of both lists, ascending.

    Returns False if the file could not be written.
    """
    highscores = sorted(int(v) for v in highscores)[-limit:]
    lines = sorted(int(v) for v in lines)[-limit:]
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(f"{_to_line(highscores)}\n{_to_line(lines)}\n")
    except OSError as exc:
        logger.warning("could not save score file %s: %s", path, exc)
        return False
    return True


def update_records(values: List[int], value: int, limit: int = NB_HIGHSCORES) -> bool:
    """Insert `value` into the ascending list `values` if it earns a spot.

    Below `limit` entries the value is always added. A full list only changes
    when `value` beats its minimum, which it then replaces.
    """
    if len(values) < limit:
        values.append(value)
        values.sort()
        return True
    if values and value > values[0]:
        values[0] = value
        values.sort()
        return True
    return False


@dataclass
class LedgerResult:
    new_high_score: bool
    new_high_lines: bool
    saved: bool


class ScoreLedger:
    def __init__(self, path: str = DEFAULT_SCORES_FILE, limit: int = NB_HIGHSCORES) -> None:
        self.path = path
        self.limit = limit

    def load(self) -> Optional[Tuple[List[int], List[int]]]:
        return load_highscores_and_lines(self.path, self.limit)

    def save(self, highscores: Sequence[int], lines: Sequence[int]) -> bool:
        return save_highscores_and_lines(self.path, highscores, lines, self.limit)

    def record(self, score: int, lines: int) -> LedgerResult:
        """Merge a finished session into the ledger and write it back if it changed."""
        loaded = self.load()
        if loaded is None:
            saved = self.save([score], [lines])
            return LedgerResult(new_high_score=True, new_high_lines=True, saved=saved)

        highscores, lines_sent = loaded
        new_high_score = update_records(highscores, score, self.limit)
        new_high_lines = update_records(lines_sent, lines, self.limit)
        saved = True
        if new_high_score or new_high_lines:
            saved = self.save(highscores, lines_sent)
        return LedgerResult(new_high_score=new_high_score, new_high_lines=new_high_lines, saved=saved)

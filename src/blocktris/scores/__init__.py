"""Persisted top-5 records of scores and cleared lines."""

from .ledger import (
    LedgerResult,
    ScoreLedger,
    load_highscores_and_lines,
    save_highscores_and_lines,
    update_records,
)

__all__ = [
    "LedgerResult",
    "ScoreLedger",
    "load_highscores_and_lines",
    "save_highscores_and_lines",
    "update_records",
]

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    # Classic 40/100/300/1200 table, multiplied by the current level.
    line_clear_scores: tuple[int, int, int, int] = (40, 100, 300, 1200)
    placement_score: int = 0
    lines_per_level: int = 10
    gravity_intervals_ms: tuple[int, ...] = (1000, 850, 700, 600, 500, 400, 300, 250, 221, 190)
    gravity_step_ms: int = 10
    min_gravity_interval_ms: int = 100

    def score_for_lines(self, lines: int, level: int = 1) -> int:
        if lines <= 0:
            return 0
        if 1 <= lines <= 4:
            base = self.line_clear_scores[lines - 1]
        else:
            # Only reachable on custom boards with taller pieces
            base = self.line_clear_scores[-1] + (lines - 4) * 400
        return base * max(1, level)

    def level_for_lines(self, total_lines: int) -> int:
        return 1 + max(0, total_lines) // self.lines_per_level

    def gravity_interval_ms(self, level: int) -> int:
        """Milliseconds between gravity steps at `level` (1-based)."""
        level = max(1, level)
        table = self.gravity_intervals_ms
        if level <= len(table):
            interval = table[level - 1]
        else:
            interval = table[-1] - (level - len(table)) * self.gravity_step_ms
        return max(self.min_gravity_interval_ms, interval)

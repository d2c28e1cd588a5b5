from __future__ import annotations

from typing import Tuple

# Color index 1..7 -> RGB
PALETTE: Tuple[Tuple[int, int, int], ...] = (
    (255, 69, 69),
    (255, 220, 69),
    (237, 150, 37),
    (171, 99, 237),
    (77, 149, 239),
    (39, 218, 225),
    (45, 216, 47),
)


def color_for_value(v: int) -> Tuple[int, int, int]:
    # Falling piece cells are negative in the observation
    idx = abs(int(v))
    if 1 <= idx <= len(PALETTE):
        return PALETTE[idx - 1]
    return (200, 200, 200)

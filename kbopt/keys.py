"""Key positions on a split keyboard and the kinds of keyboard geometry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_COL_TO_FINGER = (0, 0, 1, 2, 3, 3, 6, 6, 7, 8, 9, 9)


class LayoutType(str, Enum):
    """Physical stagger of the keyboard."""

    ROWSTAG = "rowstag"
    ORTHO = "ortho"
    COLSTAG = "colstag"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class KeyInfo:
    """Where a key sits: hand, row (0-3), column and finger (0-9)."""

    hand: str
    row: int
    column: int
    finger: int


def key_info(row: int, col: int) -> KeyInfo:
    """Describe the key at a row and column; rows 0-2 hold 12 keys, row 3 the thumbs."""
    if not 0 <= col < len(_COL_TO_FINGER):
        raise ValueError(f"col exceeds max value: {col}")
    if not 0 <= row <= 3:
        raise ValueError(f"row exceeds max value: {row}")

    if row < 3:
        hand = "left" if col < 6 else "right"
        finger = _COL_TO_FINGER[col]
    else:
        hand = "left" if col < 3 else "right"
        finger = 4 if col < 3 else 5
    return KeyInfo(hand=hand, row=row, column=col, finger=finger)
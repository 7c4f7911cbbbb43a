"""Split keyboard layouts: loading, saving, pinning keys and measuring distances."""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from os import PathLike

from .distance import KeyDistance
from .keys import KeyInfo, LayoutType, key_info

KEY_COUNT = 42
_EXPECTED_KEYS = (12, 12, 12, 6)
_UNPINNED = frozenset(".-_")
_PINNED = frozenset("*xX")


class LayoutFormatError(ValueError):
    """A layout or pins file does not have the expected format."""


def _read_lines(filename: str | PathLike) -> list[str]:
    with open(filename, encoding="utf-8", newline="") as handle:
        text = handle.read()
    return [line.removesuffix("\r") for line in text.split("\n")]


def _byte_length(text: str) -> int:
    return len(text.encode("utf-8"))


def _rows(lines: list[str]):
    """Yield (row number, keys) for the four key rows, checking key counts."""
    for row, expected in enumerate(_EXPECTED_KEYS):
        if row >= len(lines):
            raise LayoutFormatError("invalid file format: not enough rows")
        keys = lines[row].split()
        if len(keys) != expected:
            raise LayoutFormatError(
                f"invalid file format: row {row + 1} has {len(keys)} keys, expected {expected}"
            )
        yield row, keys


def _key_label(rune: str | None) -> str:
    if rune is None:
        return "no"
    if rune == " ":
        return "spc"
    return rune


@dataclass
class SplitLayout:
    """A split keyboard: three rows of twelve keys and six thumb keys.

    ``runes`` holds 42 characters in reading order; ``None`` marks an empty key.
    """

    filename: str
    runes: list[str | None]
    rune_info: dict[str, KeyInfo]
    layout_type: LayoutType
    pinned: list[bool] = field(default_factory=lambda: [False] * KEY_COUNT)
    name: str = field(init=False)
    _distances: KeyDistance = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.filename = os.fspath(self.filename)
        self.layout_type = LayoutType(self.layout_type)
        self.runes = list(self.runes)
        self.pinned = list(self.pinned)
        if len(self.runes) != KEY_COUNT:
            raise ValueError(f"a layout has {KEY_COUNT} keys, got {len(self.runes)}")
        if len(self.pinned) != KEY_COUNT:
            raise ValueError(f"a layout has {KEY_COUNT} pins, got {len(self.pinned)}")
        self.name = os.path.splitext(os.path.basename(self.filename))[0]
        self._distances = KeyDistance(self.layout_type)

    def __str__(self) -> str:
        lines = []
        for row in range(3):
            labels = [_key_label(r) for r in self.runes[row * 12 : row * 12 + 12]]
            lines.append(" ".join(labels[:6]) + "  " + " ".join(labels[6:]) + "\n")
        thumbs = [_key_label(r) for r in self.runes[36:]]
        lines.append("      " + " ".join(thumbs[:3]) + "  " + " ".join(thumbs[3:]))
        return "".join(lines)

    def describe_runes(self) -> str:
        """One line per character on the layout with its hand, row, column and finger."""
        return "".join(
            f"Key: {rune}, Hand: {info.hand}, Row: {info.row}, "
            f"Column: {info.column}, Finger: {info.finger}\n"
            for rune, info in self.rune_info.items()
        )

    def save(self, filename: str | PathLike) -> None:
        """Write the layout in the same format that load_layout reads."""
        with open(filename, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(f"{self.layout_type.value.lower()}\n{self}")

    def load_pins(self, filename: str | PathLike) -> None:
        """Read which keys the optimiser may not move.

        Pinned keys are marked '*', 'x' or 'X'; free keys '.', '_' or '-'.
        """
        pinned: list[bool] = []
        for row, keys in _rows(_read_lines(filename)):
            for col, key in enumerate(keys):
                if _byte_length(key) != 1:
                    raise LayoutFormatError(
                        f"invalid file format: key '{key}' in row {row + 1} "
                        "must have 1 character only"
                    )
                if key in _UNPINNED:
                    pinned.append(False)
                elif key in _PINNED:
                    pinned.append(True)
                else:
                    raise LayoutFormatError(
                        f"invalid character '{key}' at position {col + 1} in row {row + 1}"
                    )
        self.pinned = pinned

    def get_distance(self, r1: str, r2: str) -> float:
        """Distance in key units between two characters on this layout."""
        for rune in (r1, r2):
            if rune not in self.rune_info:
                raise ValueError(f"unsupported character in this layout: {rune}")
        return self._distances.get_distance(self.rune_info[r1], self.rune_info[r2])

    def key_distance(self, key1: KeyInfo, key2: KeyInfo) -> float:
        """Distance in key units between two key positions of this layout's geometry."""
        return self._distances.get_distance(key1, key2)

    def clone(self) -> SplitLayout:
        """An independent copy of the layout."""
        duplicate = copy.copy(self)
        duplicate.runes = list(self.runes)
        duplicate.rune_info = dict(self.rune_info)
        duplicate.pinned = list(self.pinned)
        return duplicate


def load_layout(filename: str | PathLike) -> SplitLayout:
    """Load a layout file.

    The first line names the layout type (rowstag, ortho or colstag), followed
    by three lines of 12 keys and one line of 6 thumb keys. A key is a single
    character, 'no' for an empty position or 'spc' for the space bar.
    """
    lines = _read_lines(filename)
    if not lines or (len(lines) == 1 and lines[0] == ""):
        raise LayoutFormatError("invalid file format: missing layout type")

    type_text = lines[0].strip()
    try:
        layout_type = LayoutType(type_text.lower())
    except ValueError:
        choices = " ".join(t.value for t in (LayoutType.ROWSTAG, LayoutType.ORTHO, LayoutType.COLSTAG))
        raise LayoutFormatError(
            f"invalid layout type: {type_text}. Must be one of: [{choices}]"
        ) from None

    runes: list[str | None] = []
    rune_info: dict[str, KeyInfo] = {}
    for row, keys in _rows(lines[1:]):
        for col, key in enumerate(keys):
            lowered = key.lower()
            if lowered == "no":
                runes.append(None)
                continue
            if lowered == "spc":
                rune = " "
            elif _byte_length(key) != 1:
                raise LayoutFormatError(
                    f"invalid file format: key '{key}' in row {row + 1} "
                    "must have 1 character or be 'no' or 'spc'"
                )
            else:
                rune = key
            runes.append(rune)
            rune_info[rune] = key_info(row, col)

    return SplitLayout(os.fspath(filename), runes, rune_info, layout_type)
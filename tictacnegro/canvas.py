"""Character canvas that draws pieces as shapes on an 11x11 grid."""

from __future__ import annotations

from typing import List, Tuple

from .board import Size

ROWS = 11
COLUMNS = 11
_CELL = 3
_STRIDE = _CELL + 1
_GRID_LINES = (3, 7)

BLANK = " "
VERTICAL_LINE = chr(124)
HORIZONTAL_LINE = bytes([196]).decode("cp437")
PLAYER_ONE_GLYPH = bytes([254]).decode("cp437")
PLAYER_TWO_GLYPH = bytes([250]).decode("cp437")

# Offsets inside a 3x3 quadrant that each piece size fills.
_SHAPES = {
    Size.SMALL: frozenset({(1, 1)}),
    Size.MEDIUM: frozenset(
        (dr, dc) for dr in range(_CELL) for dc in range(_CELL) if dr + dc in (1, 3)
    ),
    Size.LARGE: frozenset(
        (dr, dc)
        for dr in range(_CELL)
        for dc in range(_CELL)
        if dr in (0, 2) or dc in (0, 2)
    ),
}


def quadrant_bounds(quadrant: int) -> Tuple[int, int]:
    """Top-left (row, column) of the 3x3 area for ``quadrant`` (0-8)."""
    if not 0 <= quadrant < _CELL * _CELL:
        raise ValueError(f"quadrant out of range: {quadrant}")
    row, column = divmod(quadrant, _CELL)
    return row * _STRIDE, column * _STRIDE


def _blank_cell(row: int, column: int) -> str:
    if row in _GRID_LINES:
        return HORIZONTAL_LINE
    if column in _GRID_LINES:
        return VERTICAL_LINE
    return BLANK


class Canvas:
    """The visible board: grid lines plus one drawn shape per quadrant."""

    def __init__(self, clear_before_draw: bool = False) -> None:
        self.clear_before_draw = clear_before_draw
        self._cells: List[List[str]] = [
            [_blank_cell(row, column) for column in range(COLUMNS)]
            for row in range(ROWS)
        ]

    def draw(self, quadrant: int, size: int, player: int) -> None:
        """Draw a piece of ``size`` for ``player`` in ``quadrant`` (0-8).

        Odd players draw with the solid glyph, even players with the dot.
        When the canvas clears before drawing, the quadrant is wiped first;
        otherwise the new shape is laid over what is already there.
        """
        top, left = quadrant_bounds(quadrant)
        shape = _SHAPES[Size(size)]
        glyph = PLAYER_ONE_GLYPH if int(player) % 2 else PLAYER_TWO_GLYPH
        if self.clear_before_draw:
            for dr in range(_CELL):
                for dc in range(_CELL):
                    row, column = top + dr, left + dc
                    if row not in _GRID_LINES and column not in _GRID_LINES:
                        self._cells[row][column] = BLANK
        for dr, dc in shape:
            self._cells[top + dr][left + dc] = glyph

    def glyph_at(self, row: int, column: int) -> str:
        """Character shown at ``row``, ``column`` (both 0-10)."""
        if not (0 <= row < ROWS and 0 <= column < COLUMNS):
            raise IndexError(f"cell out of range: ({row}, {column})")
        return self._cells[row][column]

    def render(self) -> str:
        """Text of the canvas, each character followed by a space."""
        lines = ("\n" + "".join(f"{char} " for char in row) for row in self._cells)
        return "\n" + "".join(lines)
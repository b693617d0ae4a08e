"""Logical 3x3 board where bigger pieces can cover smaller ones."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Tuple


class Player(IntEnum):
    """The two players; player ONE moves first."""

    ONE = 1
    TWO = 2

    def other(self) -> "Player":
        """Return the opponent."""
        return Player.TWO if self is Player.ONE else Player.ONE


class Size(IntEnum):
    """Piece sizes; a piece may only cover a strictly smaller one."""

    SMALL = 1
    MEDIUM = 2
    LARGE = 3


class InvalidMove(ValueError):
    """Raised when a placement breaks the rules."""


POSITION_INVALID = "POSICION INVALIDA"
SIZE_INVALID = "TAMANO INVALIDO"
NO_PIECES_LEFT = "YA NO TIENES PIEZAS DE ESE TAMANO"
TOO_SMALL = "Tu pieza no es lo suficientemente grande como para comerte a la que esta ahi"
OWN_PIECE = "No puedes colocar una pieza sobre tus propias piezas"

_SIDE = 3
_LINES = (
    *((r * _SIDE, r * _SIDE + 1, r * _SIDE + 2) for r in range(_SIDE)),
    *((c, c + _SIDE, c + 2 * _SIDE) for c in range(_SIDE)),
    (0, 4, 8),
    (2, 4, 6),
)
_OWNER_LETTER = {Player.ONE: "A", Player.TWO: "R"}


class Reserve:
    """Pieces a player still holds: two of each size to start with."""

    PER_SIZE = 2

    def __init__(self) -> None:
        self._counts = {size: self.PER_SIZE for size in Size}

    def remaining(self, size: int) -> int:
        """Number of pieces of ``size`` still available."""
        return self._counts[Size(size)]

    def take(self, size: int) -> Size:
        """Remove one piece of ``size``; raise InvalidMove if none is left."""
        try:
            piece = Size(size)
        except ValueError:
            raise InvalidMove(SIZE_INVALID) from None
        if self._counts[piece] <= 0:
            raise InvalidMove(NO_PIECES_LEFT)
        self._counts[piece] -= 1
        return piece

    def has_any(self) -> bool:
        """True while at least one piece of any size remains."""
        return any(count > 0 for count in self._counts.values())


class Board:
    """Owners and sizes of the pieces on top of each of the nine cells."""

    def __init__(self, forbid_own_cover: bool = False) -> None:
        self.forbid_own_cover = forbid_own_cover
        self._owners: list[Optional[Player]] = [None] * (_SIDE * _SIDE)
        self._sizes: list[Optional[Size]] = [None] * (_SIDE * _SIDE)

    @staticmethod
    def _index(position: int) -> int:
        if not 1 <= position <= _SIDE * _SIDE:
            raise InvalidMove(POSITION_INVALID)
        return position - 1

    def cell(self, position: int) -> Tuple[Optional[Player], Optional[Size]]:
        """Owner and size of the top piece at ``position`` (1-9)."""
        index = self._index(position)
        return self._owners[index], self._sizes[index]

    def place(self, player: Player, position: int, size: int, reserve: Reserve) -> None:
        """Put a piece of ``player`` on ``position``, taking it from ``reserve``."""
        index = self._index(position)
        try:
            piece = Size(size)
        except ValueError:
            raise InvalidMove(SIZE_INVALID) from None
        owner, current = self._owners[index], self._sizes[index]

        def check_cover() -> None:
            if current is not None and piece <= current:
                raise InvalidMove(TOO_SMALL)

        if self.forbid_own_cover:
            if owner == player:
                raise InvalidMove(OWN_PIECE)
            check_cover()
            if reserve.remaining(piece) <= 0:
                raise InvalidMove(NO_PIECES_LEFT)
        else:
            if reserve.remaining(piece) <= 0:
                raise InvalidMove(NO_PIECES_LEFT)
            check_cover()

        reserve.take(piece)
        self._owners[index] = Player(player)
        self._sizes[index] = piece

    def winner(self) -> Optional[Player]:
        """The player holding a full row, column or diagonal, if any."""
        for a, b, c in _LINES:
            owner = self._owners[a]
            if owner is not None and owner == self._owners[b] == self._owners[c]:
                return owner
        return None

    def is_full(self) -> bool:
        """True when every cell holds a piece."""
        return all(owner is not None for owner in self._owners)

    def has_valid_moves(self, player: Player, reserve: Reserve) -> bool:
        """Whether ``player`` can still place some piece from ``reserve``."""
        for owner, size in zip(self._owners, self._sizes):
            if owner is None:
                if reserve.has_any():
                    return True
            elif owner != player:
                if any(reserve.remaining(bigger) > 0 for bigger in Size if bigger > size):
                    return True
        return False

    def render(self) -> str:
        """Text view of the board, one bracketed cell per piece."""
        rows = []
        for start in range(0, _SIDE * _SIDE, _SIDE):
            cells = []
            for owner, size in zip(
                self._owners[start:start + _SIDE], self._sizes[start:start + _SIDE]
            ):
                if owner is None:
                    cells.append("[   ]")
                else:
                    cells.append(f"[{_OWNER_LETTER[owner]}{int(size)}]")
            rows.append("".join(cells) + "\n")
        return "\n---Tablero---\n" + "".join(rows) + "\n"
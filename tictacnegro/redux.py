"""Console game on the logical board: pick a cell and a size each turn."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, Sequence, TextIO

from .board import Board, InvalidMove, Player, Reserve
from .prompts import read_number

POSITION_PROMPT = "Ingresa tu posicion (1-9): "
SIZE_PROMPT = "Ingresa tu tamano (1=peque,2=med,3=grande): "
INVALID_MOVE = "MOVIMIENTO INVALIDO"
NO_WINNER = "NO HAY GANADORES"

_NAMES = {Player.ONE: "Azul", Player.TWO: "Rojo"}


def play(
    input_fn: Optional[Callable[[], str]] = None,
    output: Optional[TextIO] = None,
) -> Optional[Player]:
    """Play one game until someone wins or the board fills; return the winner."""
    out = sys.stdout if output is None else output
    board = Board(forbid_own_cover=False)
    reserves = {player: Reserve() for player in Player}
    turn = Player.ONE
    winner: Optional[Player] = None

    while winner is None and not board.is_full():
        out.write(board.render())
        out.write(f"Turno del jugador {_NAMES[turn]}\n")
        position = read_number(POSITION_PROMPT, input_fn, out)
        size = read_number(SIZE_PROMPT, input_fn, out)
        try:
            board.place(turn, position, size, reserves[turn])
        except InvalidMove as error:
            out.write(f"{error}\n{INVALID_MOVE}\n")
            continue
        winner = board.winner()
        if winner is None:
            turn = turn.other()

    out.write(board.render())
    if winner is not None:
        out.write(f"Jugador {_NAMES[winner]} gana\n")
    else:
        out.write(f"{NO_WINNER}\n")
    out.flush()
    return winner


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a single game on the console."""
    parser = argparse.ArgumentParser(
        description="Tic-tac-toe where bigger pieces can eat smaller ones."
    )
    parser.parse_args(argv)
    try:
        play()
    except (EOFError, KeyboardInterrupt):
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Full console game: pieces drawn on the canvas and ruled by the logical board."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, Sequence, TextIO

from .board import NO_PIECES_LEFT, OWN_PIECE, TOO_SMALL, Board, InvalidMove, Player, Reserve, Size
from .canvas import Canvas
from .prompts import read_number

SIZE_MENU = "\nEscoga el tamano de la pieza\n[1]Grande\n[2]mediano\n[3]chico\n"
OUT_OF_RANGE = "fuera de rango"
WRONG_OPTION = "Opcion incorrecta, escoja otra vez"
PLAY_AGAIN = "Quieres jugar otra? 0=si cualquier numero =No"
NO_WINNER = "NO HAY GANADORES"

_MENU_SIZES = {1: Size.LARGE, 2: Size.MEDIUM, 3: Size.SMALL}
_WINNER_NAMES = {Player.ONE: "Jugador 1", Player.TWO: "Jugador 2"}
_EXHAUSTED = {
    (Player.ONE, Size.LARGE): "Se te acabaron las piezas grandes jugador 1",
    (Player.TWO, Size.LARGE): "Se te acabaron las piezas grandes jugador 2",
    (Player.ONE, Size.MEDIUM): "Se te acabaron las piezas medianas jugador 1",
    (Player.TWO, Size.MEDIUM): "Se te acabaron las medianas jugador 2",
    (Player.ONE, Size.SMALL): "Se te acabaron las piezas chicas jugador 1",
    (Player.TWO, Size.SMALL): "Se te acabaron las chicas jugador 2",
}


def _ask_quadrant(player: Player, read, out: TextIO) -> int:
    out.write(f"Donde quieres poner tu pieza jugador {int(player)}?\n")
    while True:
        choice = read_number("", read, out)
        if 1 <= choice <= 9:
            return choice - 1
        out.write(f"\n{OUT_OF_RANGE}\n")


def _rejected_menu_choice(board: Board, player: Player, position: int, choice: int) -> str:
    """Message for a size choice outside the menu, checked in the game's order."""
    owner, current = board.cell(position)
    if owner == player:
        return f"{OWN_PIECE}\n"
    if owner is not None and 4 - choice <= current:
        return f"{TOO_SMALL}\n"
    return f"\n{WRONG_OPTION}\n"


def _try_move(
    board: Board,
    canvas: Canvas,
    reserve: Reserve,
    player: Player,
    quadrant: int,
    read,
    out: TextIO,
) -> bool:
    out.write(SIZE_MENU)
    choice = read_number("", read, out)
    position = quadrant + 1
    size = _MENU_SIZES.get(choice)
    if size is None:
        out.write(_rejected_menu_choice(board, player, position, choice))
        return False
    try:
        board.place(player, position, size, reserve)
    except InvalidMove as error:
        if str(error) == NO_PIECES_LEFT:
            out.write(f"{_EXHAUSTED[(player, size)]}\n")
        else:
            out.write(f"{error}\n")
        return False
    canvas.draw(quadrant, size, player)
    return True


def play_match(
    input_fn: Optional[Callable[[], str]] = None,
    output: Optional[TextIO] = None,
) -> Optional[Player]:
    """Play one match until a win, a full board or a stuck player; return the winner."""
    out = sys.stdout if output is None else output
    canvas = Canvas(clear_before_draw=True)
    board = Board(forbid_own_cover=True)
    reserves = {player: Reserve() for player in Player}
    player = Player.ONE
    winner: Optional[Player] = None
    out.write(canvas.render())

    while True:
        reserve = reserves[player]
        if board.is_full() or not board.has_valid_moves(player, reserve):
            break
        quadrant = _ask_quadrant(player, input_fn, out)
        if not _try_move(board, canvas, reserve, player, quadrant, input_fn, out):
            continue
        out.write(canvas.render())
        winner = board.winner()
        if winner is not None:
            break
        player = player.other()

    out.write("\n")
    if winner is not None:
        out.write(f"Jugador {_WINNER_NAMES[winner]} gana\n")
    else:
        out.write(f"{NO_WINNER}\n")
    out.flush()
    return winner


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play matches on the console until the players decline another."""
    parser = argparse.ArgumentParser(
        description="Tic-tac-toe with three piece sizes where bigger pieces eat smaller ones."
    )
    parser.parse_args(argv)
    out = sys.stdout
    try:
        while True:
            play_match(output=out)
            out.write(f"{PLAY_AGAIN}\n")
            if read_number("", output=out) != 0:
                break
    except (EOFError, KeyboardInterrupt):
        out.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Drawing-only game: twelve pieces are drawn on the canvas, no rules enforced."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, Sequence, TextIO

from .board import Player, Reserve, Size
from .canvas import Canvas
from .prompts import read_number

TURNS = 12
SIZE_MENU = "\nEscoga el tamano de la pieza\n[1]Grande\n[2]mediano\n[3]chico\n"
OUT_OF_RANGE = "fuera de rango"
WRONG_OPTION = "Opcion incorrecta, escoja otra vez"
PLAY_AGAIN = "Quieres jugar otra? 0=si cualquier numero =No"

_MENU_SIZES = {1: Size.LARGE, 2: Size.MEDIUM, 3: Size.SMALL}
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


def _try_draw(
    canvas: Canvas, reserve: Reserve, player: Player, quadrant: int, read, out: TextIO
) -> bool:
    out.write(SIZE_MENU)
    choice = read_number("", read, out)
    size = _MENU_SIZES.get(choice)
    if size is None:
        out.write(f"\n{WRONG_OPTION}\n")
        return False
    if reserve.remaining(size) <= 0:
        out.write(f"{_EXHAUSTED[(player, size)]}\n")
        return False
    reserve.take(size)
    canvas.draw(quadrant, size, player)
    return True


def play_match(
    input_fn: Optional[Callable[[], str]] = None,
    output: Optional[TextIO] = None,
) -> Canvas:
    """Play the twelve turns of one match and return the final canvas."""
    out = sys.stdout if output is None else output
    canvas = Canvas(clear_before_draw=False)
    reserves = {player: Reserve() for player in Player}
    for turn in range(1, TURNS + 1):
        player = Player.ONE if turn % 2 else Player.TWO
        while True:
            quadrant = _ask_quadrant(player, input_fn, out)
            if _try_draw(canvas, reserves[player], player, quadrant, input_fn, out):
                break
        out.write(canvas.render())
    out.flush()
    return canvas


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play matches on the console until the players decline another."""
    parser = argparse.ArgumentParser(
        description="Draw pieces of three sizes on a tic-tac-toe grid."
    )
    parser.parse_args(argv)
    out = sys.stdout
    try:
        while True:
            play_match(output=out)
            out.write(f"\n{PLAY_AGAIN}\n")
            if read_number("", output=out) != 0:
                break
    except (EOFError, KeyboardInterrupt):
        out.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
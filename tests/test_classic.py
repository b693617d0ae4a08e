import io

import pytest

from tictacnegro.canvas import PLAYER_ONE_GLYPH, PLAYER_TWO_GLYPH
from tictacnegro.classic import (
    OUT_OF_RANGE,
    PLAY_AGAIN,
    WRONG_OPTION,
    main,
    play_match,
)


def scripted(*lines):
    pending = iter(lines)

    def read():
        try:
            return next(pending)
        except StopIteration:
            raise EOFError from None

    return read


def full_match():
    # Menu sizes per turn: both players use large, medium and small twice each.
    menu = [1, 1, 1, 1, 2, 2, 2, 2, 3, 3, 3, 3]
    lines = []
    for turn, choice in enumerate(menu):
        lines += [str(turn % 9 + 1), str(choice)]
    return lines


def test_full_match_overlays_shapes():
    out = io.StringIO()
    canvas = play_match(scripted(*full_match()), out)
    # Turn 1 drew player one's large frame in quadrant 1; turn 10 a small one
    # for player two in its centre, leaving the frame in place.
    assert canvas.glyph_at(0, 0) == PLAYER_ONE_GLYPH
    assert canvas.glyph_at(1, 1) == PLAYER_TWO_GLYPH


def test_last_turn_belongs_to_second_player():
    canvas = play_match(scripted(*full_match()), io.StringIO())
    assert canvas.glyph_at(1, 9) == PLAYER_TWO_GLYPH


def test_board_rendered_after_every_turn():
    out = io.StringIO()
    canvas = play_match(scripted(*full_match()), out)
    assert out.getvalue().count(canvas.render()) >= 1
    assert out.getvalue().count("Donde quieres poner tu pieza jugador 2?") == 6


def test_third_large_piece_is_refused():
    out = io.StringIO()
    lines = ["1", "1", "2", "1", "3", "1", "4", "1", "5", "1"]
    with pytest.raises(EOFError):
        play_match(scripted(*lines), out)
    assert "Se te acabaron las piezas grandes jugador 1" in out.getvalue()


def test_wrong_menu_option_asks_again():
    out = io.StringIO()
    with pytest.raises(EOFError):
        play_match(scripted("1", "7", "1", "3"), out)
    text = out.getvalue()
    assert WRONG_OPTION in text
    assert "Donde quieres poner tu pieza jugador 2?" in text


def test_quadrant_out_of_range_is_reported():
    out = io.StringIO()
    with pytest.raises(EOFError):
        play_match(scripted("0", "5", "3"), out)
    assert OUT_OF_RANGE in out.getvalue()


def test_main_stops_when_declined(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", scripted(*full_match(), "1"))
    assert main([]) == 0
    assert capsys.readouterr().out.count(PLAY_AGAIN) == 1


def test_main_replays_on_zero(monkeypatch, capsys):
    monkeypatch.setattr(
        "builtins.input", scripted(*full_match(), "0", *full_match(), "5")
    )
    assert main([]) == 0
    assert capsys.readouterr().out.count(PLAY_AGAIN) == 2
import io

import pytest

from tictacnegro.prompts import INVALID_NUMBER, paint_blue, paint_red, read_number


def _feeder(lines):
    it = iter(lines)
    return lambda: next(it)


def test_reads_plain_integer():
    out = io.StringIO()
    assert read_number("pos: ", _feeder(["7"]), out) == 7
    assert out.getvalue() == "pos: "


def test_trailing_text_is_discarded():
    out = io.StringIO()
    assert read_number("", _feeder(["  12abc"]), out) == 12


def test_negative_number_is_accepted():
    assert read_number("", _feeder(["-3"]), io.StringIO()) == -3


def test_invalid_line_reports_and_reprompts():
    out = io.StringIO()
    assert read_number("n? ", _feeder(["abc", "5"]), out) == 5
    assert out.getvalue() == "n? " + INVALID_NUMBER + "\n" + "n? "


def test_blank_lines_are_skipped_silently():
    out = io.StringIO()
    assert read_number("n? ", _feeder(["", "   ", "4"]), out) == 4
    assert INVALID_NUMBER not in out.getvalue()


def test_eof_propagates():
    def closed():
        raise EOFError

    with pytest.raises(EOFError):
        read_number("", closed, io.StringIO())


def test_invalid_input_prints_source_message():
    out = io.StringIO()
    assert read_number("", _feeder(["x", "1"]), out) == 1
    assert out.getvalue() == "INGRESA UN NUMERO ENTERO CORRECTO\n"


def test_paint_red_wraps_char():
    assert paint_red("X") == "\033[1;31mX\033[0m"


def test_paint_blue_wraps_char():
    assert paint_blue("O") == "\033[1;34mO\033[0m"
import io

import pytest

from solong.output import put_char, put_endl, put_nbr, put_str


def test_put_char_string():
    out = io.StringIO()
    put_char("x", out)
    put_char("y", out)
    assert out.getvalue() == "xy"


def test_put_char_code():
    out = io.StringIO()
    put_char(ord("Q"), out)
    assert out.getvalue() == "Q"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str():
    out = io.StringIO()
    put_str("> current move : ", out)
    assert out.getvalue() == "> current move : "


def test_put_str_none_writes_nothing():
    out = io.StringIO()
    put_str(None, out)
    assert out.getvalue() == ""


def test_put_endl():
    out = io.StringIO()
    put_endl("GAME OVER !!", out)
    assert out.getvalue() == "GAME OVER !!\n"


def test_put_endl_none_writes_only_newline():
    out = io.StringIO()
    put_endl(None, out)
    assert out.getvalue() == "\n"


def test_put_nbr_min():
    out = io.StringIO()
    put_nbr(-2147483648, out)
    assert out.getvalue() == "-2147483648"


@pytest.mark.parametrize("n", [0, 7, 42, -5, 2147483647, -100])
def test_put_nbr_round_trip(n):
    out = io.StringIO()
    put_nbr(n, out)
    assert int(out.getvalue()) == n


def test_put_nbr_out_of_range():
    with pytest.raises(OverflowError):
        put_nbr(2**31, io.StringIO())


def test_default_stream_is_stdout(capsys):
    put_endl("You WON !!")
    assert capsys.readouterr().out == "You WON !!\n"
import io

import pytest

from drills.rot import RotDecoder


def test_joke():
    decoder = RotDecoder(io.BytesIO(b"Gb trg gb gur bgure fvqr!"), 13)
    assert decoder.read().decode("ascii") == "To get to the other side!"


def test_binary():
    data = bytes(range(256))
    decoder = RotDecoder(io.BytesIO(data), 13)
    buf = bytearray(256)
    assert decoder.readinto(buf) == 256
    for original, rotated in zip(data, buf):
        if original != rotated:
            assert chr(original).isascii() and chr(original).isalpha()
            assert chr(rotated).isascii() and chr(rotated).isalpha()


def test_readable():
    assert RotDecoder(io.BytesIO(b""), 13).readable() is True


def test_rot_zero_is_identity():
    data = bytes(range(256))
    assert RotDecoder(io.BytesIO(data), 0).read() == data


def test_rot13_twice_round_trips():
    data = b"Hello, World! 123 xyz"
    inner = RotDecoder(io.BytesIO(data), 13)
    assert RotDecoder(inner, 13).read() == data


def test_end_of_stream_returns_zero():
    decoder = RotDecoder(io.BytesIO(b""), 13)
    assert decoder.readinto(bytearray(8)) == 0


def test_text_wrapper():
    decoder = RotDecoder(io.BytesIO(b"Gb trg gb gur bgure fvqr!"), 13)
    text = io.TextIOWrapper(io.BufferedReader(decoder), encoding="ascii")
    assert text.read() == "To get to the other side!"


def test_invalid_rot_raises():
    with pytest.raises(ValueError):
        RotDecoder(io.BytesIO(b""), 256)
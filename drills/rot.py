"""A raw binary stream that applies a rotation cipher to ASCII letters."""

from __future__ import annotations

import io
import string
from typing import BinaryIO


def _rotation_table(rot: int) -> bytes:
    source = (string.ascii_uppercase + string.ascii_lowercase).encode("ascii")
    target = "".join(
        alphabet[(index + rot) % 26]
        for alphabet in (string.ascii_uppercase, string.ascii_lowercase)
        for index in range(26)
    ).encode("ascii")
    return bytes.maketrans(source, target)


class RotDecoder(io.RawIOBase):
    """Reads from a binary stream, rotating ASCII letters by `rot` places."""

    def __init__(self, stream: BinaryIO, rot: int) -> None:
        super().__init__()
        if not 0 <= rot <= 255:
            raise ValueError(f"rot must be between 0 and 255, got {rot}")
        self._stream = stream
        self._table = _rotation_table(rot)

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int | None:  # type: ignore[override]
        view = memoryview(buffer).cast("B")
        data = self._stream.read(len(view))
        if data is None:
            return None
        size = len(data)
        view[:size] = bytes(data).translate(self._table)
        return size
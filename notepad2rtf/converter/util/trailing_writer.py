from __future__ import annotations

from typing import BinaryIO


class TrailingTrimWriter:
    """
    Writable wrapper that holds back the last ``hold`` bytes written.

    ``finish`` discards the held bytes and writes a terminator in their
    place, so the tail of the output can be replaced without seeking the
    underlying sink.
    """

    def __init__(self, sink: BinaryIO, hold: int = 2):
        if hold < 0:
            raise ValueError("hold must not be negative")
        self._sink = sink
        self._hold = hold
        self._pending = bytearray()
        self._flushed = 0
        self._finished = False

    def write(self, data: bytes) -> int:
        if self._finished:
            raise ValueError("write after finish")
        self._pending.extend(data)
        overflow = len(self._pending) - self._hold
        if overflow > 0:
            self._sink.write(bytes(self._pending[:overflow]))
            self._flushed += overflow
            del self._pending[:overflow]
        return len(data)

    def finish(self, terminator: bytes = b"") -> int:
        """Drop the held bytes, write ``terminator`` and return the total output length."""
        if self._finished:
            raise ValueError("finish called twice")
        self._finished = True
        self._pending.clear()
        if terminator:
            self._sink.write(terminator)
            self._flushed += len(terminator)
        return self._flushed


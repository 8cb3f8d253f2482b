"""Read-only character window over text or raw bytes.

Bulk importers often hold a whole CSV line (or file buffer) and know where each
cell starts and stops. ``TextView`` lets them hand that cell to the parser
without slicing out a new string. Bytes-like sources are read as one character
per byte, so anything outside ASCII is simply rejected by the classifier.
"""

from __future__ import annotations

from collections.abc import Iterator

TextSource = str | bytes | bytearray | memoryview


class TextView:
    """A borrowed ``[start, stop)`` window over ``source``.

    ``start`` and ``stop`` follow slice semantics (negative values count from
    the end, out-of-range values are clamped). The source is never copied.
    """

    __slots__ = ("_source", "_is_text", "_start", "_stop")

    def __init__(self, source: TextSource, start: int = 0, stop: int | None = None):
        if isinstance(source, str):
            self._source: str | memoryview = source
            self._is_text = True
        elif isinstance(source, (bytes, bytearray, memoryview)):
            buffer = memoryview(source)
            if buffer.ndim != 1 or buffer.itemsize != 1:
                raise TypeError("TextView needs a one-dimensional buffer of single bytes")
            self._source = buffer.cast("B") if buffer.format != "B" else buffer
            self._is_text = False
        else:
            raise TypeError(f"TextView cannot read from {type(source).__name__}")
        self._start, self._stop, _ = slice(start, stop).indices(len(self._source))
        if self._stop < self._start:
            self._stop = self._start

    @classmethod
    def of(cls, text: "TextView | TextSource") -> "TextView":
        """Return ``text`` itself if it is already a view, else wrap it."""
        if isinstance(text, TextView):
            return text
        return cls(text)

    def __len__(self) -> int:
        return self._stop - self._start

    def __getitem__(self, index: int) -> str:
        length = len(self)
        if index < 0:
            index += length
        if not 0 <= index < length:
            raise IndexError("TextView index out of range")
        item = self._source[self._start + index]
        return item if self._is_text else chr(item)

    def __iter__(self) -> Iterator[str]:
        chars = map(self._source.__getitem__, range(self._start, self._stop))
        return chars if self._is_text else map(chr, chars)

    def __str__(self) -> str:
        return "".join(self)

    def __repr__(self) -> str:
        return f"TextView({str(self)!r})"

    def slice(self, start: int = 0, stop: int | None = None) -> "TextView":
        """Narrow this view further, relative to its own first character."""
        inner_start, inner_stop, _ = slice(start, stop).indices(len(self))
        return TextView(self._source, self._start + inner_start, self._start + max(inner_start, inner_stop))

"""Byte-buffer helpers working on bytearrays."""

from __future__ import annotations


def _require(buffer_len: int, n: int, what: str) -> None:
    if n < 0:
        raise ValueError("n must not be negative")
    if n > buffer_len:
        raise ValueError(f"{what} is shorter than {n} bytes")


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first n bytes of buffer to zero."""
    _require(len(buffer), n, "buffer")
    buffer[:n] = bytes(n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of nmemb * size bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("sizes must not be negative")
    return bytearray(nmemb * size)


def memchr(data: bytes | bytearray, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to c in the first n bytes, or None."""
    _require(len(data), n, "data")
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index == -1 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare n bytes; return the difference of the first unequal pair, or 0."""
    _require(len(a), n, "first buffer")
    _require(len(b), n, "second buffer")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy n bytes from src to the start of dest and return dest."""
    _require(len(dest), n, "destination")
    _require(len(src), n, "source")
    dest[:n] = src[:n]
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes inside buffer from offset src to offset dest; overlap is safe."""
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _require(len(buffer) - dest, n, "destination region")
    _require(len(buffer) - src, n, "source region")
    buffer[dest : dest + n] = buffer[src : src + n]
    return buffer


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buffer with the byte c and return buffer."""
    _require(len(buffer), n, "buffer")
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer
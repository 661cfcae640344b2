"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens
(``"UP"``, ``"ENTER"``, ``"CTRL_N"``, printable characters, ...).
"""

from __future__ import annotations

import codecs
import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_CONTROL_KEYS: dict[bytes, str] = {
    b"\x03": "CTRL_C",
    b"\x0e": "CTRL_N",
    b"\x12": "CTRL_R",
    b"\x15": "CTRL_U",
    b"\t": "TAB",
    b"\r": "ENTER",
    b"\n": "ENTER",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
}

_CSI_KEYS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"Z": "SHIFT_TAB",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_utf8_char(fd: int, first: bytes) -> str:
    """Finish decoding a multi-byte UTF-8 character that starts with ``first``."""
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    text = decoder.decode(first)
    while not text:
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            return decoder.decode(b"", final=True)
        text = decoder.decode(nxt)
    return text


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key token; return ``""`` when ``timeout_ms`` elapses first."""
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""
        ch = os.read(fd, 1)
        if not ch:
            return ""

    if ch in _CONTROL_KEYS:
        return _CONTROL_KEYS[ch]
    if ch != b"\x1b":
        return _read_utf8_char(fd, ch)

    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq != b"[":
        _PENDING_BYTES.append(seq)
        return "ESC"
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq in _CSI_KEYS:
        return _CSI_KEYS[seq]
    # Drain the rest of an unsupported CSI sequence (ends with a byte in @..~).
    while not (b"@" <= seq <= b"~"):
        seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if seq is None:
            break
    return "ESC"

# -*- coding: utf-8 -*-
import os


def to_bytes(s) -> bytes:
    """
    Convert a path-like value to the raw bytes the operating system sees.

    ``str`` is encoded like ``os.fsencode`` does (filesystem encoding with
    ``surrogateescape``), so names decoded from undecodable bytes map back
    exactly. ``bytearray`` and ``memoryview`` are copied.
    """
    if isinstance(s, (bytearray, memoryview)):
        return bytes(s)
    return os.fsencode(s)

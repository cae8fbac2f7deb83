# -*- coding: utf-8 -*-
"""
Shell-quoting of file names and other raw byte strings.

The input is returned as-is if it contains no troublesome characters,
single-quoted if it is printable ASCII without single quotes or backslashes,
and ANSI-C quoted (``$'...'``) otherwise, with control and high-bit bytes
written as three-digit octal escapes.
"""
import re
from enum import Enum
from typing import Callable, Iterable, Tuple, cast

from quotemeta.io.fsbytes import to_bytes

_bare_safe = re.compile(br'[+,\-./0-9:=@A-Z_a-z]')


class ByteClass(Enum):
    BARE_SAFE = 'bare-safe'
    CONTROL_OR_HIGH_BIT = 'control-or-high-bit'
    SPECIAL_ESCAPE = 'special-escape'
    NEEDS_SINGLE_QUOTE = 'needs-single-quote'


class QuotingStyle(Enum):
    NONE = 'none'
    SINGLE = 'single'
    ANSI_C = 'ansi-c'


def _classify(c: int) -> ByteClass:
    if c < 32 or c >= 127:
        return ByteClass.CONTROL_OR_HIGH_BIT
    if c in b"'\\":
        # a later byte may force C-quoting, where an unescaped backslash
        # would start an escape sequence
        return ByteClass.SPECIAL_ESCAPE
    if _bare_safe.match(bytes([c])):
        return ByteClass.BARE_SAFE
    return ByteClass.NEEDS_SINGLE_QUOTE


def _render(c: int, cls: ByteClass) -> str:
    if cls == ByteClass.CONTROL_OR_HIGH_BIT:
        return '\\%03o' % c
    if cls == ByteClass.SPECIAL_ESCAPE:
        return '\\' + chr(c)
    return chr(c)


_classes = tuple(_classify(c) for c in range(256))
_fragments = tuple(_render(c, cls) for c, cls in enumerate(_classes))


def classify(c: int) -> ByteClass:
    if not 0 <= c <= 255:
        raise ValueError('Byte value %r is not in range(256)' % (c,))
    return _classes[c]


def _decision(b: bytes) -> Tuple[bool, bool]:
    classes = {_classes[c] for c in b}
    c_quoted = bool(classes & {ByteClass.CONTROL_OR_HIGH_BIT,
                               ByteClass.SPECIAL_ESCAPE})
    single_quoted = ByteClass.NEEDS_SINGLE_QUOTE in classes
    return c_quoted, single_quoted


def _style(c_quoted: bool, single_quoted: bool) -> QuotingStyle:
    if c_quoted:
        return QuotingStyle.ANSI_C
    if single_quoted:
        return QuotingStyle.SINGLE
    return QuotingStyle.NONE


def quoting_style(s) -> QuotingStyle:
    """Return the quoting style ``quotemeta(s)`` uses, without rendering."""
    return _style(*_decision(to_bytes(s)))


def quotemeta(s) -> str:
    """Return a shell-escaped version of the path or byte string *s*.

    *s* may be a ``str``, ``bytes``, ``bytearray``, ``memoryview`` or any
    ``os.PathLike``. Strings are encoded like ``os.fsencode`` does, so
    surrogate-escaped file names map back to their original bytes.

    >>> quotemeta('/bin/cat')
    '/bin/cat'
    >>> quotemeta('Hello, world')
    "'Hello, world'"
    >>> quotemeta('\\U0001f980')
    "$'\\\\360\\\\237\\\\246\\\\200'"
    """
    b = to_bytes(s)
    c_quoted = single_quoted = False
    parts = []
    for c in b:
        cls = _classes[c]
        if cls in (ByteClass.CONTROL_OR_HIGH_BIT, ByteClass.SPECIAL_ESCAPE):
            c_quoted = True
        elif cls == ByteClass.NEEDS_SINGLE_QUOTE:
            single_quoted = True
        parts.append(_fragments[c])
    res = ''.join(parts)
    return {QuotingStyle.ANSI_C: "$'%s'",
            QuotingStyle.SINGLE: "'%s'",
            QuotingStyle.NONE: '%s'}[_style(c_quoted, single_quoted)] % res


def _join(lst: Iterable, *, quote, sep) -> str:
    return sep.join(map(cast(Callable[..., str], quote), lst))


def qjoin(lst: Iterable, sep=' ') -> str:
    return _join(lst, quote=quotemeta, sep=sep)

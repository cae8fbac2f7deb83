#!/usr/bin/env pytest
# -*- coding: utf-8 -*-
from pathlib import PurePosixPath

import pytest

from quotemeta.inspext.app import init_pytest_suite
from quotemeta.io.fsbytes import to_bytes

init_pytest_suite()


class _FsPath:

    def __init__(self, path):
        self._path = path

    def __fspath__(self):
        return self._path


def test_to_bytes():
    assert to_bytes('') == b''
    assert to_bytes('a b') == b'a b'
    assert to_bytes('£') == b'\xc2\xa3'
    assert to_bytes('\udca3') == b'\xa3'
    assert to_bytes(b'\xa3') == b'\xa3'
    assert to_bytes(bytearray(b'\x00\xff')) == b'\x00\xff'
    assert to_bytes(memoryview(b'abc')[1:]) == b'bc'
    assert to_bytes(PurePosixPath('/usr/bin')) == b'/usr/bin'
    assert to_bytes(_FsPath(b'\xa3')) == b'\xa3'
    assert to_bytes(_FsPath('x')) == b'x'


def test_to_bytes_type():
    assert type(to_bytes(bytearray(b'a'))) == bytes
    with pytest.raises(TypeError):
        to_bytes(1.5)
    with pytest.raises(TypeError):
        to_bytes(['a'])

#!/usr/bin/env pytest
# -*- coding: utf-8 -*-
import os

import pytest

from quotemeta.app.qcat import parse_args, run
from quotemeta.inspext.app import init_pytest_suite

init_pytest_suite()


def _run(argv):
    with pytest.raises(SystemExit) as e:
        run(parse_args(argv))
    return e.value.code


def test_paths(capsys):
    assert _run(['a', 'b c', "isn't"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "cat a\ncat 'b c'\ncat $'isn\\'t'\n"
    assert captured.err == ''


def test_undecodable_argument(capsys):
    assert _run([os.fsdecode(b'\xa3')]) == 0
    assert capsys.readouterr().out == "cat $'\\243'\n"


def test_no_paths(capsys):
    assert _run([]) == 0
    assert capsys.readouterr().out == ''


def test_label_and_verbose(capsys):
    assert _run(['--label', 'ls -l', '-v', 'x', 'y z']) == 0
    captured = capsys.readouterr()
    assert captured.out == "ls -l x\nls -l 'y z'\n"
    assert captured.err == "none: x\nsingle: 'y z'\n"

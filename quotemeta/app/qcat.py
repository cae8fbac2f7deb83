#!/usr/bin/env python3
# -*- coding: utf-8 -*-


def parse_args(argv=None):
    from argparse import ArgumentParser
    parser = ArgumentParser(
        description='Print a shell command for each path, quoted so that '
                    'the shell reconstructs the exact bytes.')
    parser.add_argument('paths', nargs='*')
    parser.add_argument('--label', default='cat',
                        help='Printed literally in front of each path')
    parser.add_argument('--verbose', '-v', action='count', default=0)

    return parser.parse_args(argv)


def run(args):
    import os
    import sys

    from quotemeta.io.string import print_err
    from quotemeta.shlext import quotemeta, quoting_style

    for path in args.paths:
        # undo the surrogateescape decoding of argv
        path = os.fsencode(path)
        quoted = quotemeta(path)
        if args.verbose >= 1:
            print_err('%s: %s' % (quoting_style(path).value, quoted))
        print('%s %s' % (args.label, quoted))
    sys.exit(0)


def main():
    run(parse_args())

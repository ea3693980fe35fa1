import argparse
import functools as ft
import re
import sys
import typing as tp

from . import Chain, Enumerate, Iterate, Zip
from .engines import View

parser = argparse.ArgumentParser(prog='iterviews', description='Walk the lines of text files through a view pipeline')
parser.add_argument('files', metavar='<FILE>', nargs='*', help='input files, stdin when omitted')
parser.add_argument('--grep', '-g', metavar='<REGEX>', default=None, help='keep lines matching REGEX')
parser.add_argument('--invert', '-v', action='store_true', default=False, help='keep lines not matching REGEX')
parser.add_argument('--upper', '-u', action='store_true', default=False, help='upper case every line')
parser.add_argument('--reverse', '-r', action='store_true', default=False, help='print the last line first')
parser.add_argument('--number', '-n', action='store_true', default=False, help='prefix lines with their position')
parser.add_argument('--zip', '-z', metavar='<FILE>', default=None, dest='zip_file',
        help='pair every line with the line of FILE at the same position')
parser.add_argument('--verbose', action='store_true', default=False, help='print the engines used to stderr')


def _read_lines(path : str) -> tp.List[str]:
    if path == '-':
        return sys.stdin.read().splitlines()
    with open(path) as f:
        return f.read().splitlines()


def _matches(pattern : tp.Pattern, invert : bool, line : str) -> bool:
    return (pattern.search(line) is None) == invert


def _describe(view : View) -> str:
    caps = []
    if view.bidirectional:
        caps.append('bidirectional')
    if view.countable:
        caps.append('countable')
    if view.mutable:
        caps.append('mutable')
    return f'{type(view).__name__} [{", ".join(caps) or "forward only"}]'


def build(args : argparse.Namespace, inputs : tp.Sequence[tp.List[str]]) -> View:
    view = Chain(inputs) if len(inputs) > 1 else Iterate(inputs[0])
    stages = [_describe(view)]

    if args.grep is not None:
        view = view.filter(ft.partial(_matches, re.compile(args.grep), args.invert))
        stages.append(_describe(view))
    if args.upper:
        view = view.map(str.upper)
        stages.append(_describe(view))
    if args.zip_file is not None:
        view = Zip(view, _read_lines(args.zip_file)).map(lambda pair: '\t'.join(pair))
        stages.append(_describe(view))
        if args.reverse:
            # zip walks each source back from its own end, pairs must be fixed first
            view = Iterate(list(view))
            stages.append(_describe(view))
    if args.reverse:
        view = view.reverse()
        stages.append(_describe(view))
    if args.number:
        view = view.enumerate().map(lambda item: f'{item.position}\t{item.value}')
        stages.append(_describe(view))

    if args.verbose:
        for stage in stages:
            print(stage, file=sys.stderr)
    return view


def main(argv : tp.Optional[tp.Sequence[str]] = None) -> int:
    args = parser.parse_args(argv)
    if args.invert and args.grep is None:
        parser.error('--invert requires --grep')

    inputs = [_read_lines(path) for path in (args.files or ['-'])]
    view = build(args, inputs)
    for line in view:
        print(line)
    return 0

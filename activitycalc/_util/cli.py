#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
parse is installed as an executable console_script with this package.

"""
from argparse import ArgumentParser
from functools import partial
import logging
import sys

from pandas import read_csv

from activitycalc.report import (
    ActivityKind, UnknownActivityReport, generate_report)
from activitycalc._types import WorkoutLog


VALID_KINDS = tuple(kind.label for kind in ActivityKind)


def build_parser():
    parser = ArgumentParser(description='summarize workouts')
    parser.add_argument('--verbose', '-v',
                        action='store_true',
                        help='log debugging output to stderr')
    commands = parser.add_subparsers(dest='command')
    commands.required = True

    single = commands.add_parser('single', help='report on one workout')
    single.add_argument('kind',
                        type=str,
                        help='one of: ' + ', '.join(VALID_KINDS))
    single.add_argument('--actions',
                        type=int,
                        default=0,
                        help='steps taken (running, walking)')
    single.add_argument('--duration',
                        type=float,
                        required=True,
                        metavar='hours')
    single.add_argument('--weight',
                        type=float,
                        required=True,
                        metavar='kg')
    single.add_argument('--height',
                        type=float,
                        default=None,
                        metavar='cm',
                        help='required for walking')
    single.add_argument('--pool-length',
                        type=int,
                        default=None,
                        metavar='metres',
                        help='required for swimming')
    single.add_argument('--pool-crossings',
                        type=int,
                        default=None,
                        metavar='count',
                        help='required for swimming')

    table = commands.add_parser('table', help='summarize a csv of workouts')
    table.add_argument('input',
                       type=str,
                       help='csv file, one workout per row')
    table.add_argument('--output',
                       type=str,
                       metavar='filename',
                       default=None,
                       help='optional; file to write to')
    return parser


def parse(argv=None):

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    if args.command == 'single':
        if args.kind == ActivityKind.WALKING.label and args.height is None:
            parser.error('--height is required for walking')
        if args.kind == ActivityKind.SWIMMING.label and None in (
                args.pool_length, args.pool_crossings):
            parser.error('--pool-length and --pool-crossings are required '
                         'for swimming')

        report = generate_report(args.actions, args.kind, args.duration,
                                 args.weight, args.height,
                                 args.pool_length, args.pool_crossings)
        print(report, end='' if report.endswith('\n') else '\n')
        return 1 if isinstance(report, UnknownActivityReport) else 0

    log = WorkoutLog(read_csv(args.input)).summaries()
    write = partial(log.to_csv, na_rep='NA', index=False, encoding='utf-8')
    if args.output is None:
        print(write(), end='')
    else:
        write(args.output)

    return 0


if __name__ == '__main__':
    sys.exit(parse())

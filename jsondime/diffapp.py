# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

import jsondime.log
from .args import (
    add_generic_args, add_diff_args, add_filename_args, ConfigBackedParser,
    )
from .diffing import diff, DiffConfig
from .patch_format import to_dicts
from .utils import read_json, write_json, setup_std_streams


_description = "Compute the JSON Patch transforming one json document into another."


def main_diff(args):
    """Main handler of diff CLI"""
    for fn in (args.source, args.target):
        if not os.path.exists(fn):
            print("Missing file {}".format(fn))
            return 1

    try:
        a = read_json(args.source)
        b = read_json(args.target)
    except ValueError as e:
        jsondime.log.error("Could not read json: %s", e)
        return 1

    config = DiffConfig(
        atomic_paths=getattr(args, 'atomic_paths', None),
        detect_moves=args.detect_moves,
        detect_copies=args.detect_copies,
    )
    d = to_dicts(diff(a, b, config=config))
    jsondime.log.info("%d patch operations from %s to %s", len(d), args.source, args.target)

    # Output as JSON to file, or print to stdout:
    write_json(d, args.out or sys.stdout, indent=args.indent)
    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the diff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog or 'jsondime-diff',
        )
    add_generic_args(parser)
    add_diff_args(parser)
    add_filename_args(parser, ["source", "target"])
    parser.add_argument(
        '--out',
        default=None,
        help="if supplied, the patch is written to this file. "
             "Otherwise it is printed to the terminal.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())

# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

import jsondime.log
from .args import ConfigBackedParser, add_generic_args, add_filename_args
from .errors import PatchError
from .log import PatchFormatError
from .patch_format import from_dicts
from .patching import patch
from .utils import read_json, write_json, setup_std_streams


_description = "Apply a JSON Patch from jsondime diff to a json document."


def main_patch(args):
    for fn in (args.document, args.patch):
        if not os.path.exists(fn):
            print("Missing file {}".format(fn))
            return 1

    try:
        before = read_json(args.document)
        records = read_json(args.patch)
    except ValueError as e:
        jsondime.log.error("Could not read json: %s", e)
        return 1

    try:
        after = patch(before, from_dicts(records))
    except PatchFormatError as e:
        jsondime.log.error("Invalid patch %s: %s", args.patch, e)
        return 1
    except PatchError as e:
        jsondime.log.error("Could not apply %s: %s", args.patch, e)
        return 1

    write_json(after, args.output or sys.stdout, indent=args.indent)
    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the patch command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog or 'jsondime-patch',
        add_help=True,
        )
    add_generic_args(parser)
    add_filename_args(parser, ["document", "patch"])
    parser.add_argument(
        '-o', '--output',
        default=None,
        help="if supplied, the patched document is written "
             "to this file. Otherwise it is printed to the "
             "terminal.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_patch(arguments)


if __name__ == "__main__":
    sys.exit(main())

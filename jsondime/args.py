# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging
import sys

from ._version import __version__
from .config import (
    get_defaults_for_argparse, build_config, entrypoint_configurables,
)
from .log import init_logging, set_jsondime_log_level


class ConfigBackedParser(argparse.ArgumentParser):

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        try:
            defs = get_defaults_for_argparse(entrypoint)
            self.set_defaults(**defs)
        except ValueError:
            pass
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # __call__ is not called if option not given:
        level = getattr(logging, default or 'INFO')
        init_logging(level=level)
        set_jsondime_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        level = getattr(logging, values)
        set_jsondime_log_level(level, True)


def modify_config_for_print(config):
    output = {}
    for k, v in config.items():
        if isinstance(v, dict) and v:
            output[k] = json.dumps(v, sort_keys=True)
        elif isinstance(v, dict):
            output[k] = '{}'
        else:
            output[k] = json.dumps(v)
    return output


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        print_config(parser.prog, file=sys.stderr)
        sys.exit(1)


def print_config(entrypoint, file=None):
    "Print the effective config of an entrypoint, one key per line."
    header = entrypoint_configurables[entrypoint].__name__
    config = modify_config_for_print(build_config(entrypoint, True))
    print('%s:' % header, file=file)
    for k in sorted(config):
        print('  %s: %s' % (k, config[k]), file=file)


def add_generic_args(parser):
    """Adds a set of arguments common to all jsondime commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="set the log level by name.",
        action=LogLevelAction,
    )
    parser.add_argument(
        '--indent',
        type=int,
        default=2,
        help="indentation of the json written to the output.",
    )


def add_diff_args(parser):
    """Adds a set of arguments for commands that perform diffs.
    """
    parser.add_argument(
        '--no-moves',
        dest='detect_moves',
        action="store_false",
        default=True,
        help="never emit move operations, only removals and additions.")
    parser.add_argument(
        '--no-copies',
        dest='detect_copies',
        action="store_false",
        default=True,
        help="never emit copy operations for values already in the document.")


filename_help = {
    "source":   "The source json document filename.",
    "target":   "The target json document filename.",
    "document": "The json document filename.",
    "patch":    "The json patch filename, output from jsondime diff.",
    }


def add_filename_args(parser, names):
    """Add the source, target, document and patch positional arguments.

    Helps getting consistent doc strings.
    """
    for name in names:
        parser.add_argument(name, help=filename_help[name])

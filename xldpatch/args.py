# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import codecs
import json
import logging
import sys

from ._version import __version__
from .config import (
    get_defaults_for_argparse, build_config, entrypoint_configurables,
)
from .log import LOG_LEVELS, init_logging, set_xldpatch_log_level
from .patch_format import DEFAULT_TEXT_ENCODING


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
        set_xldpatch_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        level = getattr(logging, values)
        set_xldpatch_log_level(level, True)


def modify_config_for_print(config):
    output = {}
    for k, v in config.items():
        if isinstance(v, dict):
            output[k] = modify_config_for_print(v)
            if not output[k]:
                output[k] = '{}'
        else:
            output[k] = json.dumps(v)
    return output


def print_config(entrypoint, out=None):
    """Print the config keys of an entrypoint and their effective values."""
    out = out or sys.stderr
    config = modify_config_for_print(build_config(entrypoint, True))
    print(entrypoint_configurables[entrypoint].__name__, file=out)
    for k, v in sorted(config.items()):
        print('  %s: %s' % (k, v), file=out)


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        print_config(parser.prog)
        sys.exit(1)


def add_generic_args(parser):
    """Adds a set of arguments common to all xldpatch commands.
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
        choices=LOG_LEVELS,
        help="set the log level by name.",
        action=LogLevelAction,
    )


def text_encoding(value):
    "Argparse type for codec names."
    try:
        codecs.lookup(value)
    except LookupError:
        raise argparse.ArgumentTypeError("unknown text encoding: %r" % value)
    return value


def add_text_args(parser):
    """Adds arguments for commands that may read or write text tables.
    """
    parser.add_argument(
        '--text-encoding',
        type=text_encoding,
        default=DEFAULT_TEXT_ENCODING,
        help="code page of the strings in text table subfiles.")


filename_help = {
    "archive": "The archive filename (.xld, or gzipped .xlz/.gz).",
    "base":    "The archive the patch is applied to. A missing file "
               "is treated as an empty archive.",
    "patch":   "The patch filename (.xlp, or gzipped .xlz/.gz).",
    "input":   "The patch to merge from.",
    "output":  "The patch to merge into. Its existing operations "
               "are kept after the merged ones.",
    "file":    "A raw data file.",
    }


def add_filename_args(parser, names):
    """Add positional filename arguments.

    Helps getting consistent doc strings.
    """
    for name in names:
        parser.add_argument(name, help=filename_help[name])


def add_prettyprint_args(parser):
    """Adds optional arguments for controlling pretty print behavior.
    """
    parser.add_argument(
        '--no-color',
        dest='use_color',
        action="store_false",
        default=True,
        help=("prevent use of ANSI color code escapes for text output")
    )
    parser.add_argument(
        '--max-bytes',
        type=int,
        default=32,
        help=("number of payload bytes to show per operation, -1 to show all")
    )


def prettyprint_config_from_args(arguments, **kwargs):
    from .prettyprint import PrettyPrintConfig
    return PrettyPrintConfig(
        use_color=getattr(arguments, 'use_color', True),
        max_bytes=getattr(arguments, 'max_bytes', 32),
        **kwargs
    )

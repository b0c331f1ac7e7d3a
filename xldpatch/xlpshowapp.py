# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

from .archive import load_archive
from .args import (
    add_generic_args, add_prettyprint_args, add_text_args,
    prettyprint_config_from_args, ConfigBackedParser,
)
from .container import load_patch
from .log import PatchFormatError, logger
from .prettyprint import pretty_print_archive, pretty_print_patch
from .utils import is_patch_path, setup_std_streams


_description = """Show the operations of XLD patch files in terminal.
Files without a patch extension (.xlp, .xlz, .gz) are shown
as archives, listing their subfiles.
"""


def main_show(args):

    files = args.files
    if not files:
        print("Missing filenames.")
        return 1
    for fn in files:
        if not os.path.exists(fn):
            print("Missing file {}".format(fn))
            return 1

    # This printer is to keep the unit tests passing,
    # some tests capture output with capsys which doesn't
    # pick up on sys.stdout.write()
    class Printer:
        def write(self, text):
            print(text, end="")

    config = prettyprint_config_from_args(
        args, out=Printer(), text_encoding=args.text_encoding)

    for fn in files:
        if len(files) > 1:
            # 'more' prints filenames with colons, should be good enough for us as well
            print(":"*14)
            print(fn)
            print(":"*14)
        try:
            if is_patch_path(fn):
                pretty_print_patch(load_patch(fn), config)
            else:
                pretty_print_archive(load_archive(fn), config)
        except (PatchFormatError, OSError) as e:
            logger.error("Cannot read %s: %s", fn, e)
            return 1

    return 0


def _build_arg_parser():
    """Creates an argument parser for the xlpshow command."""
    parser = ConfigBackedParser(
        prog='xlpshow',
        description=_description,
        add_help=True,
        )
    add_generic_args(parser)
    add_prettyprint_args(parser)
    add_text_args(parser)
    parser.add_argument("files", nargs="*", help="patch or archive filename(s)")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_show(arguments)


if __name__ == "__main__":
    sys.exit(main())

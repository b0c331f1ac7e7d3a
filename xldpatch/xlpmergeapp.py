# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

from .args import ConfigBackedParser
from .log import PatchFormatError, logger
from .merging import merge_patch_files
from .patch_format import PatchRangeError
from .utils import setup_std_streams

_description = ('Merge XLD patch files "input" into "output". If output '
                'exists, its operations are kept after those of the inputs, '
                'otherwise it is created.')


def main_merge(args):
    inputs = args.input
    output = args.output

    for fn in inputs:
        if not os.path.exists(fn):
            logger.error("Cannot find file '%s'", fn)
            return 1

    try:
        merge_patch_files(inputs, output)
    except (PatchFormatError, PatchRangeError, OSError) as e:
        logger.error("Merge failed: %s", e)
        return 1
    return 0


def _build_arg_parser():
    """Creates an argument parser for the xlpmerge command."""
    parser = ConfigBackedParser(
        prog='xlpmerge',
        description=_description,
        add_help=True,
        )
    from .args import add_generic_args, filename_help
    add_generic_args(parser)
    parser.add_argument('input', nargs='+', help=filename_help['input'])
    parser.add_argument('output', help=filename_help['output'])
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_merge(arguments)


if __name__ == "__main__":
    sys.exit(main())

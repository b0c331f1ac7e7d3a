# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import os
import sys

from .archive import load_archive, save_archive
from .args import ConfigBackedParser
from .container import load_patch
from .log import PatchFormatError, logger
from .patch_format import PatchRangeError, UnsupportedOperationError
from .patching import patch_archive, patch_data
from .utils import EXPLICIT_MISSING_FILE, is_missing_file, setup_std_streams


_description = ("Apply an XLD patch to an archive. Subfiles targeted "
                "beyond the end of the archive are created.")


def _apply_raw(patch, base_filename, output_filename, encoding):
    if is_missing_file(base_filename):
        before = b""
    else:
        with io.open(base_filename, "rb") as f:
            before = f.read()
    after = patch_data(before, patch, encoding=encoding)
    with io.open(output_filename, "wb") as f:
        f.write(after)
    logger.info("Patched file written to %s (%d bytes)", output_filename, len(after))


def _apply_archive(patch, base_filename, output_filename, encoding):
    if is_missing_file(base_filename):
        logger.debug("No archive at %s, starting from an empty one", base_filename)
        before = None
    else:
        before = load_archive(base_filename)
    after = patch_archive(before, patch, encoding=encoding)
    save_archive(after, output_filename)
    logger.info("Patched archive written to %s (%d subfiles)", output_filename, len(after))


def main_apply(args):
    patch_filename = args.patch
    base_filename = args.base
    output_filename = args.output or base_filename

    if not os.path.exists(patch_filename):
        print("Missing file {}".format(patch_filename))
        return 1
    if output_filename == EXPLICIT_MISSING_FILE:
        print("An output filename is needed when the base is {}".format(EXPLICIT_MISSING_FILE))
        return 1

    try:
        patch = load_patch(patch_filename)
        if args.raw:
            _apply_raw(patch, base_filename, output_filename, args.text_encoding)
        else:
            _apply_archive(patch, base_filename, output_filename, args.text_encoding)
    except (PatchFormatError, PatchRangeError, UnsupportedOperationError, OSError) as e:
        logger.error("Cannot apply %s: %s", patch_filename, e)
        return 1
    return 0


def _build_arg_parser():
    """Creates an argument parser for the xlpapply command."""
    parser = ConfigBackedParser(
        prog='xlpapply',
        description=_description,
        add_help=True,
        )
    from .args import add_generic_args, add_filename_args, add_text_args
    add_generic_args(parser)
    add_text_args(parser)
    add_filename_args(parser, ["patch", "base"])
    parser.add_argument(
        '-o', '--output',
        default=None,
        help="if supplied, the patched archive is written "
             "to this file. Otherwise the base archive "
             "is overwritten.")
    parser.add_argument(
        '--raw',
        action="store_true",
        default=False,
        help="treat base as a single raw file and apply every "
             "operation to it, ignoring their subfile indices.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_apply(arguments)


if __name__ == "__main__":
    sys.exit(main())

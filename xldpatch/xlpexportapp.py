# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

from .archive import load_archive
from .args import ConfigBackedParser
from .container import save_patch
from .log import PatchFormatError, logger
from .patch_format import PatchRangeError, op_comment
from .patching import patch_from_archive
from .utils import setup_std_streams, split_subfile_spec


_description = ("Export subfiles of an XLD archive as a patch replacing them. "
                "Select subfiles by appending their indices to the archive "
                "name, as in archive.xld:0,3,7.")


def main_export(args):
    archive_filename, indices = split_subfile_spec(args.archive)
    patch_filename = args.patch

    if not os.path.exists(archive_filename):
        print("Missing file {}".format(archive_filename))
        return 1

    try:
        archive = load_archive(archive_filename)
        patch = patch_from_archive(archive, indices)
        if args.comment:
            patch.insert(0, op_comment(args.comment))
        save_patch(patch, patch_filename)
    except (PatchFormatError, PatchRangeError, OSError) as e:
        logger.error("Cannot export %s: %s", args.archive, e)
        return 1
    logger.info("Exported %d subfiles of %s to %s",
                len(patch) - bool(args.comment), archive_filename, patch_filename)
    return 0


def _build_arg_parser():
    """Creates an argument parser for the xlpexport command."""
    parser = ConfigBackedParser(
        prog='xlpexport',
        description=_description,
        add_help=True,
        )
    from .args import add_generic_args, add_filename_args
    add_generic_args(parser)
    add_filename_args(parser, ["archive", "patch"])
    parser.add_argument(
        '--comment',
        default=None,
        help="start the patch with a comment operation holding this text.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_export(arguments)


if __name__ == "__main__":
    sys.exit(main())

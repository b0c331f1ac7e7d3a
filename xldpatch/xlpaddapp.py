# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import io
import os
import sys

from .args import ConfigBackedParser
from .container import load_patch, save_patch
from .log import PatchFormatError, logger
from .patch_format import (
    PatchOp, PatchEntry, PatchRangeError,
    op_comment, op_replace_bytes, op_replace_text,
)
from .utils import is_missing_file, setup_std_streams, split_subfile_spec


_description = ("Add an operation to an XLD patch, creating the patch if "
                "needed. The target subfile is appended to the patch name, "
                "as in patch.xlp:5.")


def text_edit(value):
    "Argparse type for INDEX=TEXT text edits."
    index, sep, text = value.partition("=")
    if not sep or not index.strip().isdigit():
        raise argparse.ArgumentTypeError("text edits are given as INDEX=TEXT, got %r" % value)
    return int(index), text


def build_entry(args, index):
    """Build the patch entry described by the command line arguments."""
    if args.comment is not None:
        return op_comment(args.comment, index=index or 0)
    if index is None:
        raise PatchRangeError("No target subfile given, use patch.xlp:INDEX.")
    if args.text:
        return op_replace_text(index, args.text, encoding=args.text_encoding)
    with io.open(args.file, "rb") as f:
        data = f.read()
    op = PatchOp.from_name(args.op_type)
    if op == PatchOp.REPLACE_BYTES:
        return op_replace_bytes(index, args.offset, data)
    return PatchEntry(op=op, index=index, data=data)


def main_add(args):
    patch_filename, indices = split_subfile_spec(args.patch)
    if indices is not None and len(indices) != 1:
        print("Give a single target subfile, got {}".format(indices))
        return 1
    index = indices[0] if indices else None

    sources = [args.file is not None, args.comment is not None, bool(args.text)]
    if sum(sources) != 1:
        print("Give exactly one of a data file, --comment or --text")
        return 1
    if args.file is not None and not os.path.exists(args.file):
        print("Missing file {}".format(args.file))
        return 1

    try:
        entry = build_entry(args, index)
        patch = [] if is_missing_file(patch_filename) else load_patch(patch_filename)
        patch.append(entry)
        save_patch(patch, patch_filename)
    except (PatchFormatError, PatchRangeError, UnicodeError, OSError) as e:
        logger.error("Cannot add to %s: %s", patch_filename, e)
        return 1
    logger.info("Added %s operation %d to %s",
                PatchOp.name(entry.op), len(patch) - 1, patch_filename)
    return 0


def _build_arg_parser():
    """Creates an argument parser for the xlpadd command."""
    parser = ConfigBackedParser(
        prog='xlpadd',
        description=_description,
        add_help=True,
        )
    from .args import add_generic_args, add_text_args, filename_help
    add_generic_args(parser)
    add_text_args(parser)
    parser.add_argument('file', nargs='?', default=None, help=filename_help['file'])
    parser.add_argument('patch', help=filename_help['patch'])
    parser.add_argument(
        '-t', '--type',
        dest='op_type',
        default='replace',
        choices=sorted(n for c, n in PatchOp.names.items() if c != PatchOp.COMMENT),
        help="type of the operation built from the data file.")
    parser.add_argument(
        '--offset',
        type=int,
        default=0,
        help="offset of the data for replace-bytes operations.")
    parser.add_argument(
        '--comment',
        default=None,
        help="add a comment operation with this text instead.")
    parser.add_argument(
        '--text',
        type=text_edit,
        action='append',
        default=[],
        help="add a replace-text operation setting string INDEX to TEXT "
             "(as INDEX=TEXT, may be repeated) instead.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_add(arguments)


if __name__ == "__main__":
    sys.exit(main())

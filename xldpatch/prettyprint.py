# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import sys

import colorama

from .log import PatchFormatError
from .patch_format import PatchOp, PatchRangeError, split_replace_bytes
from .texts import iter_text_edits


# Indentation offset in pretty-print
IND = "  "

# Bytes per line in hex dumps
HEXWIDTH = 16


ColoredConstants = namedtuple('ColoredConstants', (
    'KEEP',
    'REMOVE',
    'ADD',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        KEEP   = '{color}   '.format(color=''),
        REMOVE = '{color}-  '.format(color=colorama.Fore.RED),
        ADD    = '{color}+  '.format(color=colorama.Fore.GREEN),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        KEEP   = '   ',
        REMOVE = '-  ',
        ADD    = '+  ',
        INFO   = '## ',
        RESET  = '',
    )
}


# Operations whose payload ends up in the target subfile
_adding_ops = (
    PatchOp.REPLACE,
    PatchOp.APPEND,
    PatchOp.PREPEND,
)


class PrettyPrintConfig:
    def __init__(
            self,
            out=sys.stdout,
            use_color=True,
            max_bytes=32,
            text_encoding=None,
            ):
        self.out = out
        self.use_color = use_color
        self.max_bytes = max_bytes
        self.text_encoding = text_encoding

    @property
    def KEEP(self):
        return col_const[self.use_color].KEEP

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET


def hexdump_lines(data, max_bytes=-1, offset=0):
    """Format data as hex dump lines, truncated to max_bytes unless negative."""
    shown = data if max_bytes < 0 else data[:max_bytes]
    lines = []
    for i in range(0, len(shown), HEXWIDTH):
        chunk = shown[i:i + HEXWIDTH]
        hexpart = " ".join("%02x" % b for b in chunk)
        text = "".join(chr(b) if 32 <= b < 127 else "." for b in chunk)
        lines.append("%08x  %-*s  %s" % (offset + i, HEXWIDTH * 3 - 1, hexpart, text))
    if len(shown) < len(data):
        lines.append("... (%d more bytes)" % (len(data) - len(shown)))
    return lines


def pretty_print_payload(entry, prefix, config):
    """Print the payload of one entry, interpreted by its type."""
    op = entry.op
    data = entry.data
    out = config.out
    if op == PatchOp.COMMENT:
        for line in data.decode("utf-8", "replace").splitlines():
            out.write("%s%s%s\n" % (prefix + config.KEEP, line, config.RESET))
    elif op == PatchOp.REPLACE_TEXT:
        kwargs = {}
        if config.text_encoding:
            kwargs["encoding"] = config.text_encoding
        try:
            edits = list(iter_text_edits(data, **kwargs))
        except (PatchFormatError, PatchRangeError) as e:
            out.write("%s%s%s\n" % (prefix + config.REMOVE, e, config.RESET))
            return
        for index, text in edits:
            out.write("%s[%d] %r%s\n" % (prefix + config.ADD, index, text, config.RESET))
    elif op == PatchOp.REPLACE_BYTES:
        try:
            offset, overlay = split_replace_bytes(data)
        except PatchFormatError as e:
            out.write("%s%s%s\n" % (prefix + config.REMOVE, e, config.RESET))
            return
        for line in hexdump_lines(overlay, config.max_bytes, offset):
            out.write("%s%s%s\n" % (prefix + config.ADD, line, config.RESET))
    elif data:
        marker = config.ADD if op in _adding_ops else config.KEEP
        for line in hexdump_lines(data, config.max_bytes):
            out.write("%s%s%s\n" % (prefix + marker, line, config.RESET))


def describe_entry(entry):
    "One line summary of an entry."
    name = PatchOp.name(entry.op)
    if entry.op == PatchOp.COMMENT:
        return "%s (%d bytes)" % (name, len(entry.data))
    if entry.op == PatchOp.REPLACE_BYTES and len(entry.data) >= 4:
        offset, overlay = split_replace_bytes(entry.data)
        return "%s subfile %d at offset %d (%d bytes)" % (
            name, entry.index, offset, len(overlay))
    return "%s subfile %d (%d bytes)" % (name, entry.index, len(entry.data))


def pretty_print_patch(patch, config=None, prefix=""):
    """Pretty-print a patch, one block per operation."""
    if config is None:
        config = PrettyPrintConfig()
    out = config.out
    for n, entry in enumerate(patch):
        out.write("%s%s%d: %s%s\n" % (
            prefix, config.INFO, n, describe_entry(entry), config.RESET))
        pretty_print_payload(entry, prefix + IND, config)


def pretty_print_archive(archive, config=None, prefix=""):
    """Pretty-print the subfile table of an archive."""
    if config is None:
        config = PrettyPrintConfig()
    out = config.out
    for index, length in archive.subfiles():
        out.write("%s%s%d: %d bytes%s\n" % (
            prefix, config.INFO, index, length, config.RESET))

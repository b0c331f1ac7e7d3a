# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Indexed text tables stored inside subfiles.

A text table is serialized as a uint16 entry count, that many uint16
entry byte lengths, and then the entries themselves. Every entry is
terminated by (at least) one null byte which is not part of the text.

The replace-text patch operation carries an edit script with a similar
shape: a uint16 edit count, that many uint16 edit lengths, and for each
edit a uint16 string index followed by `length - 2` bytes of text.
"""

import struct

from .log import PatchFormatError, logger
from .patch_format import DEFAULT_TEXT_ENCODING, PatchRangeError


_u16 = struct.Struct("<H")


def _read_u16(data, offset, what):
    if offset + 2 > len(data):
        raise PatchFormatError(
            "Truncated {}: expected 2 bytes at offset {}, {} available.".format(
                what, offset, max(len(data) - offset, 0)))
    return _u16.unpack_from(data, offset)[0]


def _read_lengths(data, what):
    count = _read_u16(data, 0, what)
    lengths = [_read_u16(data, 2 + 2 * i, what) for i in range(count)]
    return lengths, 2 + 2 * count


def _decode(raw, encoding, what):
    try:
        return raw.decode(encoding).rstrip("\0")
    except UnicodeDecodeError as e:
        raise PatchFormatError("{} is not valid {}: {}".format(what, encoding, e))


def parse_text_table(data, encoding=DEFAULT_TEXT_ENCODING):
    """Parse a serialized text table into a list of strings.

    Empty data is an empty table.
    """
    if not data:
        return []
    lengths, pos = _read_lengths(data, "text table")
    texts = []
    for length in lengths:
        if pos + length > len(data):
            raise PatchFormatError(
                "Truncated text table: entry {} needs {} bytes at offset {}.".format(
                    len(texts), length, pos))
        texts.append(_decode(bytes(data[pos:pos + length]), encoding,
                             "Text table entry {}".format(len(texts))))
        pos += length
    return texts


def serialize_text_table(texts, encoding=DEFAULT_TEXT_ENCODING):
    """Serialize a list of strings as a text table."""
    if len(texts) > 0xFFFF:
        raise PatchRangeError("A text table holds at most 65535 entries.")
    entries = [text.encode(encoding) + b"\0" for text in texts]
    for i, entry in enumerate(entries):
        if len(entry) > 0xFFFF:
            raise PatchRangeError("Text table entry {} is too long.".format(i))
    header = [_u16.pack(len(entries))]
    header.extend(_u16.pack(len(entry)) for entry in entries)
    return b"".join(header + entries)


def iter_text_edits(script, encoding=DEFAULT_TEXT_ENCODING):
    """Yield the (index, text) pairs of a replace-text edit script."""
    lengths, pos = _read_lengths(script, "text edit script")
    for n, length in enumerate(lengths):
        if length < 2:
            raise PatchRangeError(
                "Text edit {} has length {}, which cannot hold its 2 byte index.".format(
                    n, length))
        index = _read_u16(script, pos, "text edit script")
        end = pos + length
        if end > len(script):
            raise PatchFormatError(
                "Truncated text edit script: edit {} needs {} bytes at offset {}.".format(
                    n, length, pos))
        yield index, _decode(bytes(script[pos + 2:end]), encoding,
                             "Text edit {}".format(n))
        pos = end


def make_text_edits(edits, encoding=DEFAULT_TEXT_ENCODING):
    """Build a replace-text edit script.

    edits is a mapping of string index to text, or a sequence
    of (index, text) pairs applied in the given order.
    """
    if isinstance(edits, dict):
        edits = sorted(edits.items())
    else:
        edits = list(edits)
    if len(edits) > 0xFFFF:
        raise PatchRangeError("An edit script holds at most 65535 edits.")
    bodies = []
    for index, text in edits:
        if not 0 <= index <= 0xFFFF:
            raise PatchRangeError("Text index {} outside of range [0, 65535].".format(index))
        body = _u16.pack(index) + text.encode(encoding)
        if len(body) > 0xFFFF:
            raise PatchRangeError("Text edit for index {} is too long.".format(index))
        bodies.append(body)
    header = [_u16.pack(len(bodies))]
    header.extend(_u16.pack(len(body)) for body in bodies)
    return b"".join(header + bodies)


def patch_texts(texts, script, encoding=DEFAULT_TEXT_ENCODING):
    """Apply an edit script to a list of strings, returning a new list."""
    newtexts = list(texts)
    for index, text in iter_text_edits(script, encoding):
        if index >= len(newtexts):
            logger.debug("Growing text table from %d to %d entries",
                         len(newtexts), index + 1)
            newtexts.extend([""] * (index + 1 - len(newtexts)))
        newtexts[index] = text
    return newtexts


def patch_text_table(data, script, encoding=DEFAULT_TEXT_ENCODING):
    """Apply an edit script to a serialized text table."""
    texts = parse_text_table(data, encoding)
    return serialize_text_table(patch_texts(texts, script, encoding), encoding)

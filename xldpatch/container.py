# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Reading and writing patch files.

A patch file borrows the signature of the archive format, followed by
a uint16 operation count, one int32 length per operation (payload
length + 3) and then the operations. Each operation is a uint8 type,
an int16 target index and its payload.
"""

import io
import struct

from .archive import SIGNATURE
from .log import PatchFormatError, logger
from .patch_format import PatchEntry, validate_patch
from .utils import open_stream, read_exactly


__all__ = ["read_patch", "write_patch", "load_patch", "save_patch",
           "patch_from_bytes", "patch_to_bytes"]


_op_header = struct.Struct("<Bh")


def read_patch(stream):
    """Read a patch (list of PatchEntry) from a binary stream."""
    signature = stream.read(len(SIGNATURE))
    if signature != SIGNATURE:
        raise PatchFormatError("Invalid patch signature: {!r}.".format(signature))
    count, = struct.unpack("<H", read_exactly(stream, 2, PatchFormatError))
    lengths = struct.unpack("<%di" % count, read_exactly(stream, 4 * count, PatchFormatError))
    patch = []
    for i, length in enumerate(lengths):
        if length < _op_header.size:
            raise PatchFormatError(
                "Operation {} has length {}, less than its {} byte header.".format(
                    i, length, _op_header.size))
        op, index = _op_header.unpack(read_exactly(stream, _op_header.size, PatchFormatError))
        data = read_exactly(stream, length - _op_header.size, PatchFormatError)
        patch.append(PatchEntry(op=op, index=index, data=data))
    logger.debug("Read patch with %d operations", len(patch))
    return patch


def write_patch(patch, stream):
    """Write a patch to a binary stream.

    The patch is validated first, so nothing is written for a patch
    whose values do not fit the format.
    """
    validate_patch(patch)
    stream.write(SIGNATURE)
    stream.write(struct.pack("<H", len(patch)))
    stream.write(struct.pack(
        "<%di" % len(patch), *[len(e["data"]) + _op_header.size for e in patch]))
    for e in patch:
        stream.write(_op_header.pack(e["op"], e["index"]))
        stream.write(e["data"])
    stream.flush()


def patch_from_bytes(data):
    return read_patch(io.BytesIO(data))


def patch_to_bytes(patch):
    buffer = io.BytesIO()
    write_patch(patch, buffer)
    return buffer.getvalue()


def load_patch(path):
    """Load a patch from path, gunzipping .xlz/.gz files."""
    with open_stream(path, "rb") as f:
        return read_patch(f)


def save_patch(patch, path):
    """Save a patch to path, gzipping for .xlz/.gz files."""
    with open_stream(path, "wb") as f:
        write_patch(patch, f)
    logger.debug("Saved patch with %d operations to %s", len(patch), path)

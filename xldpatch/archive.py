# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Reading and writing XLD archives.

An XLD archive is the 6 byte signature, a uint16 subfile count, one uint32
length per subfile and then the subfile contents back to back. Subfiles are
addressed by their position in the archive.
"""

import struct

from .log import logger
from .patch_format import ArchiveFormatError, PatchRangeError
from .utils import open_stream, read_exactly


SIGNATURE = b"XLD0I\0"


class Archive(list):
    """An ordered list of subfile contents (bytes), indexed from 0."""

    def subfiles(self):
        "Yield (index, length) for every subfile."
        for i, data in enumerate(self):
            yield i, len(data)

    def read(self, index):
        if not 0 <= index < len(self):
            raise PatchRangeError(
                "Subfile {} not in archive with {} subfiles.".format(index, len(self)))
        return self[index]

    def copy(self):
        return Archive(self)


def read_archive(stream):
    """Read an XLD archive from a binary stream."""
    signature = stream.read(len(SIGNATURE))
    if signature != SIGNATURE:
        raise ArchiveFormatError("Invalid archive signature: {!r}.".format(signature))
    count, = struct.unpack("<H", read_exactly(stream, 2, ArchiveFormatError))
    lengths = struct.unpack("<%dI" % count, read_exactly(stream, 4 * count, ArchiveFormatError))
    archive = Archive()
    for length in lengths:
        archive.append(read_exactly(stream, length, ArchiveFormatError))
    logger.debug("Read archive with %d subfiles", len(archive))
    return archive


def write_archive(archive, stream):
    """Write an archive (any sequence of bytes) to a binary stream."""
    if len(archive) > 0xFFFF:
        raise PatchRangeError(
            "An archive holds at most 65535 subfiles, got {}.".format(len(archive)))
    lengths = [len(data) for data in archive]
    if any(length > 0xFFFFFFFF for length in lengths):
        raise PatchRangeError("Subfile too large for an XLD archive.")
    stream.write(SIGNATURE)
    stream.write(struct.pack("<H", len(lengths)))
    stream.write(struct.pack("<%dI" % len(lengths), *lengths))
    for data in archive:
        stream.write(data)
    stream.flush()


def load_archive(path):
    """Load an archive from path, gunzipping .xlz/.gz files."""
    with open_stream(path, "rb") as f:
        return read_archive(f)


def save_archive(archive, path):
    """Save an archive to path, gzipping for .xlz/.gz files."""
    with open_stream(path, "wb") as f:
        write_archive(archive, f)

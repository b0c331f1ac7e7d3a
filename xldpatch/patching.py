# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .archive import Archive
from .log import logger
from .patch_format import (
    PatchOp, PatchRangeError, UnsupportedOperationError,
    DEFAULT_TEXT_ENCODING, op_replace, split_replace_bytes,
)
from .texts import patch_text_table


__all__ = ["patch_bytes", "patch_data", "patch_archive", "patch_from_archive"]


def patch_replace_bytes(data, payload):
    "Overwrite data at the offset given in payload, zero-extending data if needed."
    offset, overlay = split_replace_bytes(payload)
    if offset < 0:
        raise PatchRangeError("Replace-bytes offset must not be negative, got {}.".format(offset))
    end = offset + len(overlay)
    newdata = bytearray(data)
    if len(newdata) < end:
        newdata.extend(bytes(end - len(newdata)))
    newdata[offset:end] = overlay
    return bytes(newdata)


def patch_bytes(data, entry, encoding=DEFAULT_TEXT_ENCODING):
    """Produce a patched version of the bytes data with one patch entry.

    data is the current content of the targeted subfile, empty if the
    subfile did not exist before. The input is never modified.
    """
    op = entry.op
    payload = entry.data
    if op == PatchOp.REPLACE:
        return bytes(payload)
    elif op == PatchOp.REPLACE_TEXT:
        return patch_text_table(data, payload, encoding)
    elif op == PatchOp.APPEND:
        return bytes(data) + payload
    elif op == PatchOp.PREPEND:
        return bytes(payload) + data
    elif op == PatchOp.REPLACE_BYTES:
        return patch_replace_bytes(data, payload)
    elif op == PatchOp.COMMENT:
        logger.info("%s", payload.decode("utf-8", "replace"))
        return data
    elif op == PatchOp.IGNORE:
        return data
    else:
        raise UnsupportedOperationError(op)


def patch_data(data, patch, encoding=DEFAULT_TEXT_ENCODING):
    """Apply all entries of a patch to a single buffer, ignoring their indices."""
    for entry in patch:
        data = patch_bytes(data, entry, encoding)
    return data


def patch_archive(archive, patch, encoding=DEFAULT_TEXT_ENCODING):
    """Produce a patched copy of archive.

    archive may be None, which is treated as an archive without subfiles.
    Subfiles are created empty for every missing index up to the target of
    an entry. Comment entries never create subfiles.
    """
    newarchive = Archive(archive or [])
    for n, entry in enumerate(patch):
        # Comment indices are not subfile targets, so they never grow the archive
        if entry.op == PatchOp.COMMENT:
            patch_bytes(b"", entry, encoding)
            continue
        index = entry.index
        if index < 0:
            raise PatchRangeError(
                "Operation {} targets negative subfile index {}.".format(n, index))
        if index >= len(newarchive):
            logger.debug("Growing archive from %d to %d subfiles",
                         len(newarchive), index + 1)
            newarchive.extend([b""] * (index + 1 - len(newarchive)))
        logger.debug("Applying %s to subfile %d", PatchOp.name(entry.op), index)
        newarchive[index] = patch_bytes(newarchive[index], entry, encoding)
    return newarchive


def patch_from_archive(archive, indices=None):
    """Build a patch replacing the selected subfiles with their current content.

    All subfiles are selected when indices is None.
    """
    if not isinstance(archive, Archive):
        archive = Archive(archive)
    if indices is None:
        indices = range(len(archive))
    return [op_replace(i, archive.read(i)) for i in indices]

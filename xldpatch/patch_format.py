# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import struct

from .log import PatchFormatError


# Code page used for text table entries unless configured otherwise
DEFAULT_TEXT_ENCODING = "cp437"

INT16_RANGE = (-0x8000, 0x7FFF)
INT32_RANGE = (-0x80000000, 0x7FFFFFFF)


class ArchiveFormatError(PatchFormatError):
    pass


class PatchRangeError(ValueError):
    pass


class UnsupportedOperationError(NotImplementedError):
    """Raised when applying an operation with an unknown type code.

    Unknown codes survive loading and saving, only application refuses them.
    """
    def __init__(self, op):
        super(UnsupportedOperationError, self).__init__(
            "Unsupported patch operation type {}.".format(op))
        self.op = op


class PatchEntry(dict):
    """One operation of a patch file.

    Minimal class providing attribute access to the entry keys
    `op` (type code), `index` (target subfile) and `data` (payload).
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        self[name] = value


class PatchOp:
    "Collection of valid values for the type field in patch entries."
    REPLACE = 0
    REPLACE_TEXT = 1
    APPEND = 2
    PREPEND = 3
    REPLACE_BYTES = 4
    COMMENT = 254
    IGNORE = 255

    names = {
        REPLACE: "replace",
        REPLACE_TEXT: "replace-text",
        APPEND: "append",
        PREPEND: "prepend",
        REPLACE_BYTES: "replace-bytes",
        COMMENT: "comment",
        IGNORE: "ignore",
    }

    @classmethod
    def name(cls, op):
        return cls.names.get(op, "unknown({})".format(op))

    @classmethod
    def from_name(cls, name):
        for code, n in cls.names.items():
            if n == name:
                return code
        raise ValueError("Unknown patch operation name: {!r}".format(name))


def _check_range(value, bounds, what):
    lo, hi = bounds
    if not lo <= value <= hi:
        raise PatchRangeError(
            "{} {} outside of range [{}, {}].".format(what, value, lo, hi))


def op_replace(index, data):
    "Create a patch entry replacing subfile index with data."
    return PatchEntry(op=PatchOp.REPLACE, index=index, data=bytes(data))

def op_replace_text(index, edits, encoding=DEFAULT_TEXT_ENCODING):
    """Create a patch entry editing the text table in subfile index.

    edits is either a ready edit script (bytes) or a mapping/sequence
    of (string index, text) pairs.
    """
    if not isinstance(edits, (bytes, bytearray)):
        from .texts import make_text_edits
        edits = make_text_edits(edits, encoding=encoding)
    return PatchEntry(op=PatchOp.REPLACE_TEXT, index=index, data=bytes(edits))

def op_append(index, data):
    "Create a patch entry adding data after the content of subfile index."
    return PatchEntry(op=PatchOp.APPEND, index=index, data=bytes(data))

def op_prepend(index, data):
    "Create a patch entry adding data before the content of subfile index."
    return PatchEntry(op=PatchOp.PREPEND, index=index, data=bytes(data))

def op_replace_bytes(index, offset, overlay):
    "Create a patch entry overwriting bytes at offset in subfile index."
    _check_range(offset, (0, INT32_RANGE[1]), "Offset")
    data = struct.pack("<i", offset) + bytes(overlay)
    return PatchEntry(op=PatchOp.REPLACE_BYTES, index=index, data=data)

def op_comment(text, index=0):
    "Create a patch entry carrying a comment, reported when applied."
    return PatchEntry(op=PatchOp.COMMENT, index=index, data=text.encode("utf-8"))

def op_ignore(index=0, data=b""):
    "Create a patch entry that does nothing."
    return PatchEntry(op=PatchOp.IGNORE, index=index, data=bytes(data))


def disable(entry):
    """Return a copy of entry turned into a no-op, keeping its payload."""
    return PatchEntry(op=PatchOp.IGNORE, index=entry.index, data=entry.data)


def split_replace_bytes(data):
    """Split a replace-bytes payload into (offset, overlay)."""
    if len(data) < 4:
        raise PatchFormatError(
            "Replace-bytes payload needs a 4 byte offset, got {} bytes.".format(len(data)))
    offset, = struct.unpack_from("<i", data, 0)
    return offset, bytes(data[4:])


def is_valid_patch(patch):
    """Checks wheter a patch (list of patch entries) is well formed.

    Returns a boolean indicating the well-formedness of the patch.
    """
    try:
        validate_patch(patch)
    except (PatchFormatError, PatchRangeError):
        return False
    return True


def validate_patch(patch):
    """Check wheter a patch (list of patch entries) is well formed.

    Raises a PatchFormatError if not well formed, or a PatchRangeError
    if a value does not fit its wire field.
    """
    if not isinstance(patch, list):
        raise PatchFormatError("Patch must be a list.")
    if len(patch) > 0xFFFF:
        raise PatchRangeError(
            "A patch holds at most 65535 operations, got {}.".format(len(patch)))
    for e in patch:
        validate_patch_entry(e)


def validate_patch_entry(e):
    """Check that e is a well formed patch entry.

    Unknown type codes are allowed, they are only refused when applied.
    """
    if not isinstance(e, dict):
        raise PatchFormatError("Patch entry must be a dict, got {}.".format(type(e).__name__))
    for key in ("op", "index", "data"):
        if key not in e:
            raise PatchFormatError("Patch entry is missing the {!r} key.".format(key))
    if not isinstance(e["op"], int):
        raise PatchFormatError("Patch entry type must be an integer.")
    if not isinstance(e["index"], int):
        raise PatchFormatError("Patch entry index must be an integer.")
    if not isinstance(e["data"], (bytes, bytearray)):
        raise PatchFormatError("Patch entry data must be bytes.")
    _check_range(e["op"], (0, 0xFF), "Type")
    _check_range(e["index"], INT16_RANGE, "Index")
    _check_range(len(e["data"]) + 3, (3, INT32_RANGE[1]), "Operation length")


def to_patchentry_dicts(patch):
    """Convert the dict objects of a patch to PatchEntry objects."""
    return [PatchEntry(op=e["op"], index=e["index"], data=bytes(e["data"])) for e in patch]

# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import struct

from xldpatch.container import patch_from_bytes, patch_to_bytes
from xldpatch.patch_format import is_valid_patch


SIGNATURE = b"XLD0I\0"


def xld_bytes(subfiles):
    "Encode an archive by hand, independently of xldpatch.archive."
    out = [SIGNATURE, struct.pack("<H", len(subfiles))]
    out.extend(struct.pack("<I", len(s)) for s in subfiles)
    out.extend(subfiles)
    return b"".join(out)


def xlp_bytes(ops):
    "Encode a patch from (type, index, payload) triples by hand."
    out = [SIGNATURE, struct.pack("<H", len(ops))]
    out.extend(struct.pack("<i", len(payload) + 3) for _, _, payload in ops)
    for op, index, payload in ops:
        out.append(struct.pack("<Bh", op, index))
        out.append(payload)
    return b"".join(out)


def text_table_bytes(entries):
    "Encode a text table from raw entry bytes (terminators included)."
    out = [struct.pack("<H", len(entries))]
    out.extend(struct.pack("<H", len(e)) for e in entries)
    out.extend(entries)
    return b"".join(out)


def check_roundtrip(patch):
    "Check that a patch survives serialization unchanged."
    assert is_valid_patch(patch)
    assert patch_from_bytes(patch_to_bytes(patch)) == patch

# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import gzip
import io
import struct

import pytest

from xldpatch.container import (
    load_patch, save_patch, read_patch, write_patch,
    patch_from_bytes, patch_to_bytes,
)
from xldpatch.log import PatchFormatError
from xldpatch.patch_format import (
    PatchEntry, PatchRangeError, op_append, op_comment, op_replace,
)

from .utils import check_roundtrip, xlp_bytes


def test_roundtrip(sample_patch):
    check_roundtrip([])
    check_roundtrip(sample_patch)
    check_roundtrip([PatchEntry(op=200, index=-5, data=b"\x00" * 300)])


def test_layout():
    data = patch_to_bytes([op_append(5, b"ab"), op_replace(-2, b"")])
    expected = (
        b"XLD0I\0" + struct.pack("<H", 2) +
        struct.pack("<ii", 5, 3) +
        b"\x02" + struct.pack("<h", 5) + b"ab" +
        b"\x00" + struct.pack("<h", -2)
    )
    assert data == expected


def test_read_hand_encoded():
    data = xlp_bytes([(4, 1, b"\x02\x00\x00\x00zz"), (254, 0, b"note")])
    patch = patch_from_bytes(data)
    assert patch == [
        {"op": 4, "index": 1, "data": b"\x02\x00\x00\x00zz"},
        {"op": 254, "index": 0, "data": b"note"},
    ]
    assert all(isinstance(e, PatchEntry) for e in patch)


def test_unknown_type_roundtrips():
    data = xlp_bytes([(200, 3, b"?")])
    assert patch_to_bytes(patch_from_bytes(data)) == data


def test_bad_signature():
    data = xlp_bytes([(0, 0, b"x")])
    with pytest.raises(PatchFormatError):
        patch_from_bytes(b"XLD0X\0" + data[6:])
    with pytest.raises(PatchFormatError):
        patch_from_bytes(b"")


@pytest.mark.parametrize("cut", [7, 9, 12, 14, 16])
def test_truncated(cut):
    data = xlp_bytes([(0, 0, b"abcd")])
    assert len(data) == 19
    with pytest.raises(PatchFormatError):
        patch_from_bytes(data[:cut])


def test_length_below_header():
    data = b"XLD0I\0" + struct.pack("<Hi", 1, 2) + b"\x00\x00\x00"
    with pytest.raises(PatchFormatError):
        patch_from_bytes(data)


def test_trailing_bytes_are_not_read():
    data = xlp_bytes([(2, 0, b"a")])
    stream = io.BytesIO(data + b"rest")
    assert read_patch(stream) == [op_append(0, b"a")]
    assert stream.read() == b"rest"


def test_write_validates_first():
    stream = io.BytesIO()
    with pytest.raises(PatchRangeError):
        write_patch([op_replace(0, b""), op_replace(40000, b"")], stream)
    assert stream.getvalue() == b""


def test_save_load_plain(tmpdir, sample_patch):
    fn = str(tmpdir.join('mod.xlp'))
    save_patch(sample_patch, fn)
    with open(fn, 'rb') as f:
        assert f.read(6) == b"XLD0I\0"
    assert load_patch(fn) == sample_patch


@pytest.mark.parametrize("name", ["mod.xlz", "mod.gz", "MOD.XLZ"])
def test_save_load_compressed(tmpdir, sample_patch, name):
    fn = str(tmpdir.join(name))
    save_patch(sample_patch, fn)
    with open(fn, 'rb') as f:
        raw = f.read()
    assert raw[:2] == b"\x1f\x8b"
    assert gzip.decompress(raw) == patch_to_bytes(sample_patch)
    assert load_patch(fn) == sample_patch


def test_failed_save_keeps_existing_file(tmpdir):
    fn = tmpdir.join('mod.xlp')
    save_patch([op_comment("keep me")], str(fn))
    before = fn.read_binary()
    with pytest.raises(PatchRangeError):
        save_patch([op_replace(-40000, b"")], str(fn))
    assert fn.read_binary() == before


def test_truncated_compressed_file(tmpdir, sample_patch):
    fn = tmpdir.join('mod.xlz')
    fn.write_binary(gzip.compress(patch_to_bytes(sample_patch))[:-12])
    with pytest.raises((OSError, PatchFormatError)):
        load_patch(str(fn))

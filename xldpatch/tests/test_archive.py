# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io

import pytest

from xldpatch.archive import (
    Archive, read_archive, write_archive, load_archive, save_archive,
)
from xldpatch.log import PatchFormatError
from xldpatch.patch_format import ArchiveFormatError, PatchRangeError

from .utils import xld_bytes


def test_read_archive(subfiles):
    archive = read_archive(io.BytesIO(xld_bytes(subfiles)))
    assert archive == subfiles
    assert list(archive.subfiles()) == [(0, 5), (1, 0), (2, 4)]
    assert archive.read(2) == b"\x00\x01\x02\x03"


def test_write_archive(subfiles):
    stream = io.BytesIO()
    write_archive(subfiles, stream)
    assert stream.getvalue() == xld_bytes(subfiles)


def test_empty_archive():
    stream = io.BytesIO()
    write_archive(Archive(), stream)
    assert stream.getvalue() == b"XLD0I\0\x00\x00"
    assert read_archive(io.BytesIO(stream.getvalue())) == []


def test_read_out_of_range(subfiles):
    archive = Archive(subfiles)
    with pytest.raises(PatchRangeError):
        archive.read(3)
    with pytest.raises(PatchRangeError):
        archive.read(-1)


def test_copy_is_independent(subfiles):
    archive = Archive(subfiles)
    other = archive.copy()
    other.append(b"more")
    assert isinstance(other, Archive)
    assert len(archive) == 3


def test_bad_signature(subfiles):
    data = xld_bytes(subfiles)
    with pytest.raises(ArchiveFormatError):
        read_archive(io.BytesIO(b"XLD1I\0" + data[6:]))


def test_truncated(subfiles):
    data = xld_bytes(subfiles)
    with pytest.raises(PatchFormatError):
        read_archive(io.BytesIO(data[:-1]))
    with pytest.raises(ArchiveFormatError):
        read_archive(io.BytesIO(data[:10]))


@pytest.mark.parametrize("name", ["OUT.XLD", "OUT.XLZ", "out.gz"])
def test_save_load(tmpdir, subfiles, name):
    fn = str(tmpdir.join(name))
    save_archive(Archive(subfiles), fn)
    assert load_archive(fn) == subfiles


def test_load_hand_written(archive_file, subfiles):
    assert load_archive(archive_file) == subfiles

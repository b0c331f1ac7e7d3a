# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging

from pytest import fixture, skip

from xldpatch.log import logger
from xldpatch.patch_format import (
    op_append, op_comment, op_prepend, op_replace, op_replace_bytes,
    op_replace_text,
)

from .utils import xld_bytes, xlp_bytes


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture(autouse=True)
def reset_log_level():
    """Apps set the package log level, restore it after each test."""
    level = logger.level
    root_level = logging.getLogger().level
    yield
    logger.setLevel(level)
    logging.getLogger().setLevel(root_level)


@fixture
def subfiles():
    return [b"first", b"", b"\x00\x01\x02\x03"]


@fixture
def archive_file(tmpdir, subfiles):
    """An XLD archive with three subfiles, written by hand."""
    fn = tmpdir.join('BASE0.XLD')
    fn.write_binary(xld_bytes(subfiles))
    return str(fn)


@fixture
def sample_patch():
    return [
        op_comment("sample patch"),
        op_replace(0, b"FIRST"),
        op_append(1, b"tail"),
        op_prepend(2, b"head"),
        op_replace_bytes(2, 6, b"\xff\xff"),
        op_replace_text(4, {1: "hello"}),
    ]


@fixture
def patch_file(tmpdir):
    """A patch with an append to subfile 0 and a replace of subfile 4."""
    fn = tmpdir.join('mod.xlp')
    fn.write_binary(xlp_bytes([(2, 0, b"+more"), (0, 4, b"new")]))
    return str(fn)

# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import codecs
import gzip
import io
import locale
import os
import re
import sys
from contextlib import contextmanager

if os.name == 'nt':
    EXPLICIT_MISSING_FILE = 'nul'
else:
    EXPLICIT_MISSING_FILE = '/dev/null'

# Extensions of files wrapped in a gzip stream
COMPRESSED_EXTENSIONS = ('.xlz', '.gz')

# Extensions recognized as patch files (as opposed to archives or raw data)
PATCH_EXTENSIONS = ('.xlp',) + COMPRESSED_EXTENSIONS


def is_compressed_path(path):
    return os.path.splitext(str(path))[1].lower() in COMPRESSED_EXTENSIONS


def is_patch_path(path):
    return os.path.splitext(str(path))[1].lower() in PATCH_EXTENSIONS


def is_missing_file(path):
    "Whether path is the null file or does not exist."
    return path == EXPLICIT_MISSING_FILE or not os.path.exists(path)


@contextmanager
def open_stream(path, mode):
    """Open a binary file, transparently (de)compressing .xlz/.gz files.

    Writing goes through an in-memory buffer that is only flushed to
    disk when the block completes without error, so an existing file
    is left untouched on failure.
    """
    if 'b' not in mode:
        raise ValueError("open_stream only supports binary modes, got %r" % mode)
    compressed = is_compressed_path(path)
    if 'r' in mode:
        with io.open(path, 'rb') as raw:
            if compressed:
                with gzip.GzipFile(fileobj=raw, mode='rb') as gz:
                    try:
                        yield gz
                    except EOFError as e:
                        raise OSError("Truncated compressed file %s: %s" % (path, e))
            else:
                yield raw
    else:
        buffer = io.BytesIO()
        yield buffer
        data = buffer.getvalue()
        if compressed:
            data = gzip.compress(data)
        with io.open(path, 'wb') as raw:
            raw.write(data)


def read_exactly(stream, size, error_class):
    """Read size bytes from stream or raise error_class if it ends early."""
    data = stream.read(size)
    if len(data) != size:
        raise error_class(
            "Unexpected end of stream: expected %d bytes, got %d." % (size, len(data)))
    return data


r_subfile_spec = re.compile(r"^(.*):([-+]?\d+(?:,[-+]?\d+)*)$")

def split_subfile_spec(path):
    """Split 'archive.xld:1,2,5' into ('archive.xld', [1, 2, 5]).

    Returns (path, None) when no subfile list is given.
    """
    m = r_subfile_spec.match(path)
    if m is None:
        return path, None
    return m.group(1), [int(s) for s in m.group(2).split(',')]


def _setup_std_stream_encoding():
    """Setup encoding on stdout/err

    Ensures sys.stdout/err have error-escaping encoders,
    rather than raising errors.
    """
    if os.getenv('PYTHONIOENCODING'):
        # setting PYTHONIOENCODING overrides anything we would do here
        return
    _default_encoding = locale.getpreferredencoding() or 'UTF-8'
    for name in ('stdout', 'stderr'):
        stream = getattr(sys, name)
        raw_stream = getattr(sys, '__%s__' % name)
        if stream is not raw_stream:
            # don't wrap captured or redirected output
            continue
        enc = getattr(stream, 'encoding', None) or _default_encoding
        errors = getattr(stream, 'errors', None) or 'strict'
        if errors == 'strict' or errors.startswith('surrogate'):
            bin_stream = stream.buffer
            new_stream = codecs.getwriter(enc)(bin_stream, errors='backslashreplace')
            setattr(sys, name, new_stream)


def setup_std_streams():
    """Setup sys.stdout/err

    - Ensures sys.stdout/err have error-escaping encoders,
      rather than raising errors.
    - enables colorama for ANSI escapes on Windows
    """

    _setup_std_stream_encoding()
    # must enable colorama after setting up encoding,
    # or encoding will undo colorama setup
    if sys.platform.startswith('win'):
        import colorama
        colorama.init()

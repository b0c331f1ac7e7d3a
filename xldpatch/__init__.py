# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .archive import Archive, load_archive, save_archive
from .container import load_patch, save_patch
from .patching import patch_archive, patch_bytes
from .merging import merge_patches


__all__ = [
    "__version__",
    "Archive", "load_archive", "save_archive",
    "load_patch", "save_patch",
    "patch_archive", "patch_bytes",
    "merge_patches",
    ]

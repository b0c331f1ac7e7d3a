# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .container import load_patch, save_patch
from .log import logger
from .patch_format import to_patchentry_dicts
from .utils import is_missing_file


__all__ = ["merge_patches", "merge_patch_files"]


def merge_patches(*patches):
    """Concatenate the operations of patches, in the order given.

    Nothing is deduplicated or reordered: when the result is applied,
    later operations act on the output of earlier ones targeting the
    same subfile.
    """
    merged = []
    for patch in patches:
        merged.extend(to_patchentry_dicts(patch))
    return merged


def merge_patch_files(inputs, output):
    """Merge the patch files inputs into output.

    If output already exists, its operations are kept after those of
    the inputs. Returns the merged patch.
    """
    patches = [load_patch(fn) for fn in inputs]
    if not is_missing_file(output):
        patches.append(load_patch(output))
    else:
        logger.debug("No existing patch at %s, creating it", output)
    merged = merge_patches(*patches)
    save_patch(merged, output)
    logger.info("Merged %d operations into %s", len(merged), output)
    return merged

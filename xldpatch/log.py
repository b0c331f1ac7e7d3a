# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging


# Names accepted by --log-level and the Global.log_level config trait
LOG_LEVELS = ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL')

LOG_FORMAT = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'


class PatchFormatError(ValueError):
    """A patch or archive stream is not structurally well formed."""


def init_logging(level=logging.INFO):
    """Sets up logging for xldpatch entry points.

    Call this in all entry points (if __name__ == "__main__").
    Sets the log level for all xldpatch loggers to `level`,
    unless `level` is given as `None`.
    """
    logging.basicConfig(format=LOG_FORMAT, level=level)
    logging.captureWarnings(True)


def set_xldpatch_log_level(level, set_main=True):
    """Set a log level for xldpatch loggers"""
    logger.setLevel(level)
    if set_main:
        logging.getLogger().setLevel(level)


logger = logging.getLogger('xldpatch')

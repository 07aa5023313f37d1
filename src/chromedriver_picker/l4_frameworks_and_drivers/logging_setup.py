"""File-based debug logging setup."""

from __future__ import annotations

import logging
import os
from pathlib import Path


def setup_file_logging(log_dir: Path, level: str = 'DEBUG') -> Path:
    """Configure file-based logging for the ``cdpicker`` logger tree into *log_dir*.

    Safe to call repeatedly: a handler for the same file is attached only once.
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / 'cdpicker_debug.log'
    root = logging.getLogger('cdpicker')
    root.setLevel(level.upper())
    target = os.path.abspath(log_path)
    if not any(isinstance(h, logging.FileHandler) and h.baseFilename == target for h in root.handlers):
        handler = logging.FileHandler(log_path, encoding='utf-8')
        handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s %(message)s'))
        root.addHandler(handler)
    logging.getLogger('cdpicker.app').info('Debug logging started → %s', log_path)
    return log_path

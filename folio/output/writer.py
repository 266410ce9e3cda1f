"""OutputWriter: writes emitted artifacts to disk."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from folio.config.models import OutputConfig

logger = logging.getLogger(__name__)


_INVALID_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')


def _sanitize_filename(filename: str) -> str:
    """Make an output filename safe to join onto base_dir.

    Drops any directory part and replaces only characters no common
    filesystem accepts. Dots, parentheses, `+` and non-ASCII letters survive.
    """
    name = Path(filename.replace("\\", "/")).name
    name = _INVALID_CHARS.sub("_", name)
    if name in ("", ".", ".."):
        name = "_unnamed"
    return name


class OutputWriter:
    """Writes artifact bytes under `config.base_dir`.

    Handles filename sanitization, directory creation, the overwrite guard,
    and dry-run mode.
    """

    def __init__(self, config: OutputConfig) -> None:
        self.config = config
        self.base_dir = Path(config.base_dir)

    def destination(self, filename: str) -> Path:
        return self.base_dir / _sanitize_filename(filename)

    def write(self, data: bytes, filename: str, *, dry_run: bool = False) -> Path:
        """Write one artifact. Returns the Path of the written (or would-be) file."""
        dest = self.destination(filename)

        if dry_run:
            logger.debug("dry-run: would write %s", dest)
            return dest

        if dest.exists() and not self.config.overwrite:
            raise FileExistsError(f"{dest} already exists and output.overwrite is false")

        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_bytes(data)
        logger.info("wrote %s (%d bytes)", dest, len(data))
        return dest

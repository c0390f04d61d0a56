"""Filesystem output for generated artifacts.

Writes are plain overwrites: no merge, no backup, no confirmation prompt.
They are not atomic either, so an interrupted write can leave a truncated
file behind.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from artisan.utils import print_success


class FileWriteError(OSError):
    """Raised when a directory or file cannot be written."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


class FileWriter:
    """Creates directories and writes generated content to disk.

    Every successful :meth:`write` prints one confirmation line unless the
    writer was created with ``quiet=True``.
    """

    def __init__(self, *, quiet: bool = False, encoding: str = "utf-8") -> None:
        self.quiet = quiet
        self.encoding = encoding

    async def ensure_dir(self, path: str | Path) -> Path:
        """Create *path* and any missing parents; no-op when it exists."""
        dir_path = Path(path)
        try:
            await asyncio.to_thread(dir_path.mkdir, parents=True, exist_ok=True)
        except (OSError, UnicodeError) as exc:
            raise FileWriteError(dir_path, getattr(exc, "strerror", None) or str(exc)) from exc
        return dir_path

    async def write(self, path: str | Path, content: str, *, label: str = "File") -> Path:
        """Write *content* to *path*, replacing any existing file.

        Args:
            path: Destination file.  Its directory must already exist.
            content: Text to write.  It is encoded before the file is opened,
                so an unencodable text leaves any existing file untouched.
            label: Human name of what was written, used in the confirmation
                line (``"Controller created successfully: ..."``).
        """
        out = Path(path)
        try:
            data = content.encode(self.encoding)
        except UnicodeError as exc:
            raise FileWriteError(out, str(exc)) from exc
        try:
            await asyncio.to_thread(out.write_bytes, data)
        except OSError as exc:
            raise FileWriteError(out, exc.strerror or str(exc)) from exc
        if not self.quiet:
            print_success(f"{label} created successfully: {out}")
        return out

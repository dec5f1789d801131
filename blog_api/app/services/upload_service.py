"""
Service for cover image uploads.

Images are written to a dedicated storage directory under a filename
made of the upload time in milliseconds and the original file name,
and are referenced from posts as ``/uploads/<filename>``.  The same
directory is served read-only by the application under ``/uploads``.

Only the declared content type is checked (it must start with
``image/``); files are neither scanned nor re-encoded.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import BinaryIO, Optional, Protocol

from blog_api.app.core.errors import PayloadTooLarge, ValidationError

logger = logging.getLogger(__name__)

URL_PREFIX = "/uploads/"
MAX_IMAGE_BYTES = 5 * 1024 * 1024
CHUNK_SIZE = 64 * 1024


class Upload(Protocol):
    """The parts of an uploaded file the service relies on.

    Satisfied by Starlette's ``UploadFile``.
    """

    filename: Optional[str]
    content_type: Optional[str]
    file: BinaryIO


class UploadService:
    """Stores and removes cover images in ``upload_dir``."""

    def __init__(self, upload_dir: str | Path, max_bytes: int = MAX_IMAGE_BYTES) -> None:
        self.upload_dir = Path(upload_dir)
        self.max_bytes = max_bytes

    def save_image(self, upload: Upload) -> str:
        """Validate and store an uploaded image.

        Raises ``ValidationError`` for non-image content types and
        ``PayloadTooLarge`` once more than ``max_bytes`` have been read;
        in the latter case the partially written file is removed.

        Returns the ``/uploads/<filename>`` reference of the stored file.
        """
        content_type = upload.content_type or ""
        if not content_type.startswith("image/"):
            logger.warning("Rejected upload %r with content type %r", upload.filename, content_type)
            raise ValidationError("Only image files are allowed!")

        self.upload_dir.mkdir(parents=True, exist_ok=True)
        target = self._reserve_path(upload.filename)
        written = 0
        try:
            # The reserved file already exists; reopen it for writing.
            with open(target, "wb") as fh:
                while chunk := upload.file.read(CHUNK_SIZE):
                    written += len(chunk)
                    if written > self.max_bytes:
                        raise PayloadTooLarge("File too large")
                    fh.write(chunk)
        except Exception:
            target.unlink(missing_ok=True)
            raise
        logger.info("Stored upload %s (%d bytes)", target.name, written)
        return URL_PREFIX + target.name

    def _reserve_path(self, original_name: Optional[str]) -> Path:
        """Create an empty file with a fresh ``<millis>-<name>`` filename."""
        # Keep only the base name so a client cannot write outside upload_dir.
        name = Path(original_name or "").name.strip() or "image"
        stamp = int(time.time() * 1000)
        while True:
            candidate = self.upload_dir / f"{stamp}-{name}"
            try:
                with open(candidate, "xb"):
                    return candidate
            except FileExistsError:
                stamp += 1

    def path_for(self, reference: str) -> Optional[Path]:
        """Map an ``/uploads/...`` reference to its path on disk."""
        if not reference:
            return None
        name = Path(reference).name
        if not name:
            return None
        return self.upload_dir / name

    def delete(self, reference: Optional[str]) -> bool:
        """Remove the file behind ``reference``.

        Returns ``True`` if a file was deleted, ``False`` if there was
        nothing to remove.
        """
        path = self.path_for(reference) if reference else None
        if path is None or not path.is_file():
            return False
        path.unlink()
        logger.info("Deleted upload %s", path.name)
        return True

"""
Temporary storage for uploaded bond files.

Uploads are streamed to disk under the uploads directory for the duration of
a single request and removed once parsing has finished or failed.
"""

import logging
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Any
import aiofiles
import aiofiles.os
from ..exceptions import FileTooLargeError
from ..models.bond_result import UploadedFile

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


@dataclass
class StagedUpload:
    """An upload written to temporary storage."""
    path: Path
    original_filename: str
    size: int


class UploadStore:
    """Stages uploads on disk and releases them after use."""

    def __init__(self, upload_dir: Path = Path("uploads"), max_upload_bytes: int = 10 * 1024 * 1024):
        """
        Initialize the upload store.

        Args:
            upload_dir: Directory for staged uploads
            max_upload_bytes: Maximum accepted size of a single upload
        """
        self.upload_dir = upload_dir
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        self.max_upload_bytes = max_upload_bytes

    async def save(self, upload: Any) -> StagedUpload:
        """
        Stream an upload to a new temporary file.

        Args:
            upload: Object with a ``filename`` and an async ``read(size)``,
                such as FastAPI's UploadFile

        Returns:
            StagedUpload describing the written file

        Raises:
            FileTooLargeError: if the upload exceeds max_upload_bytes
        """
        filename = upload.filename
        path = self.upload_dir / uuid.uuid4().hex
        size = 0

        try:
            async with aiofiles.open(path, "wb") as f:
                while True:
                    chunk = await upload.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    size += len(chunk)
                    if size > self.max_upload_bytes:
                        raise FileTooLargeError(filename, self.max_upload_bytes)
                    await f.write(chunk)
        except BaseException:
            await self._remove(path)
            raise

        logger.debug(f"Staged {filename} at {path} ({size} bytes)")
        return StagedUpload(path=path, original_filename=filename, size=size)

    async def read(self, staged: StagedUpload) -> UploadedFile:
        """Load a staged upload back into memory."""
        async with aiofiles.open(staged.path, "rb") as f:
            content = await f.read()
        return UploadedFile(filename=staged.original_filename, content=content)

    async def release(self, staged: StagedUpload) -> None:
        """Delete a staged upload. Cleanup failures are logged, not raised."""
        try:
            await self._remove(staged.path)
        except OSError as e:
            logger.error(f"Error cleaning up {staged.path}: {e}")

    async def _remove(self, path: Path) -> None:
        if await aiofiles.os.path.exists(path):
            await aiofiles.os.remove(path)
            logger.debug(f"Removed staged upload {path}")

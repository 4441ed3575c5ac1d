"""
Request orchestration for checking a user's bonds against a draw.

Both files are validated before either is read, parsed concurrently, and
every staged upload is released whether the check succeeds or fails.
"""

import asyncio
import logging
from typing import Any, Iterable, List, Optional
from ..exceptions import MissingInputError
from ..matching.bond_matcher import compute_matches
from ..models.bond_result import MatchResult, UploadedFile
from ..parsers.file_parser import BondFileParser, FileKindDetector
from ..storage.upload_store import StagedUpload, UploadStore

logger = logging.getLogger(__name__)


class BondChecker:
    """Checks user bond lists against draw lists."""

    def __init__(self, upload_store: Optional[UploadStore] = None, parser: Optional[BondFileParser] = None):
        # Only check_uploads needs a store; in-memory checks work without one
        self.upload_store = upload_store
        self.parser = parser or BondFileParser()

    def validate(self, user_filename: Optional[str], draw_filename: Optional[str]) -> None:
        """
        Fail fast on missing files or unsupported extensions.

        Raises:
            MissingInputError: if either filename is missing
            UnsupportedFormatError: if either extension is not recognized
        """
        if not user_filename or not draw_filename:
            raise MissingInputError()

        FileKindDetector.detect(user_filename)
        FileKindDetector.detect(draw_filename)

    async def _parse(self, file: UploadedFile) -> List[str]:
        return await asyncio.to_thread(self.parser.parse_file, file)

    async def check_files(self, user_file: Optional[UploadedFile], draw_file: Optional[UploadedFile]) -> MatchResult:
        """
        Check in-memory files.

        Args:
            user_file: The user's bond list
            draw_file: The draw result list

        Returns:
            MatchResult for the two files
        """
        self.validate(
            user_file.filename if user_file else None,
            draw_file.filename if draw_file else None,
        )
        logger.info(
            f"Checking {user_file.filename} ({user_file.size} bytes) "
            f"against {draw_file.filename} ({draw_file.size} bytes)"
        )

        user_tokens, draw_tokens = await asyncio.gather(
            self._parse(user_file),
            self._parse(draw_file),
        )
        return compute_matches(user_tokens, draw_tokens)

    async def check_uploads(self, user_upload: Optional[Any], draw_upload: Optional[Any]) -> MatchResult:
        """
        Check two uploads, staging them in the upload store while parsing.

        Args:
            user_upload: Upload of the user's bond list (e.g. UploadFile)
            draw_upload: Upload of the draw result list

        Returns:
            MatchResult for the two uploads
        """
        if self.upload_store is None:
            raise RuntimeError("An upload store is required to check uploads")

        user_filename = getattr(user_upload, "filename", None)
        draw_filename = getattr(draw_upload, "filename", None)
        staged: List[StagedUpload] = []
        logger.info(f"Received user file {user_filename or 'None'}, draw file {draw_filename or 'None'}")

        try:
            self.validate(user_filename, draw_filename)

            for upload in (user_upload, draw_upload):
                staged.append(await self.upload_store.save(upload))

            user_file, draw_file = await asyncio.gather(
                *(self.upload_store.read(item) for item in staged)
            )
            return await self.check_files(user_file, draw_file)

        finally:
            for item in staged:
                await self.upload_store.release(item)

    def check_numbers(self, user_tokens: Iterable[object], draw_tokens: Iterable[object]) -> MatchResult:
        """Check raw bond number tokens directly, without any files."""
        return compute_matches(user_tokens, draw_tokens)

"""
Format dispatch for bond list files.

The file kind is derived once from the (case-insensitive) extension of the
original filename, then the matching parser produces raw tokens.
"""

import logging
from pathlib import PurePath
from typing import Dict, List
from ..exceptions import ParseFailureError, UnsupportedFormatError
from ..models.bond_result import FileKind, UploadedFile
from .pdf_parser import PDFParser
from .spreadsheet_parser import SpreadsheetParser
from .text_parser import TextParser

logger = logging.getLogger(__name__)


class FileKindDetector:
    """Detects the kind of a bond list file from its name."""

    EXTENSIONS: Dict[str, FileKind] = {
        ".xlsx": FileKind.SPREADSHEET,
        ".xls": FileKind.SPREADSHEET,
        ".txt": FileKind.DELIMITED_TEXT,
        ".pdf": FileKind.PDF,
    }

    @staticmethod
    def extension_of(filename: str) -> str:
        return PurePath(filename).suffix.lower()

    @classmethod
    def detect(cls, filename: str) -> FileKind:
        """
        Detect the file kind without touching the file.

        Args:
            filename: Original filename of the upload

        Returns:
            FileKind for the extension

        Raises:
            UnsupportedFormatError: if the extension is not recognized
        """
        extension = cls.extension_of(filename)
        kind = cls.EXTENSIONS.get(extension)
        if kind is None:
            raise UnsupportedFormatError(extension, filename)
        return kind


class BondFileParser:
    """Parser for user and draw bond list files."""

    def __init__(self):
        self.detector = FileKindDetector()
        self.pdf_parser = PDFParser()
        self.spreadsheet_parser = SpreadsheetParser()
        self.text_parser = TextParser()

    def parse(self, content: bytes, filename: str) -> List[str]:
        """
        Parse file content into raw tokens.

        Args:
            content: Raw file bytes
            filename: Original filename, used to pick the format

        Returns:
            Raw token strings, not yet normalized

        Raises:
            UnsupportedFormatError: if the extension is not recognized
            ParseFailureError: if the format reader fails
        """
        kind = self.detector.detect(filename)
        logger.info(f"Parsing {filename} as {kind.value} ({len(content)} bytes)")

        try:
            if kind == FileKind.SPREADSHEET:
                tokens = self.spreadsheet_parser.parse(
                    content, self.detector.extension_of(filename)
                )
            elif kind == FileKind.DELIMITED_TEXT:
                tokens = self.text_parser.parse(content)
            else:
                tokens = self.pdf_parser.parse(content)
        except Exception as e:
            raise ParseFailureError(filename, e) from e

        logger.info(f"Extracted {len(tokens)} tokens from {filename}")
        return tokens

    def parse_file(self, file: UploadedFile) -> List[str]:
        return self.parse(file.content, file.filename)


_default_parser = BondFileParser()


def detect_file_kind(filename: str) -> FileKind:
    """Return the FileKind for a filename, raising UnsupportedFormatError."""
    return FileKindDetector.detect(filename)


def parse_bond_file(file: UploadedFile) -> List[str]:
    """Parse an uploaded bond list file into raw tokens."""
    return _default_parser.parse_file(file)

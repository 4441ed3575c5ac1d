"""File parsing utilities for bond lists and draw results."""

from .file_parser import BondFileParser, FileKindDetector, detect_file_kind, parse_bond_file
from .pdf_parser import PDFParser
from .spreadsheet_parser import SpreadsheetParser
from .text_parser import TextParser

__all__ = [
    "BondFileParser",
    "FileKindDetector",
    "PDFParser",
    "SpreadsheetParser",
    "TextParser",
    "detect_file_kind",
    "parse_bond_file",
]

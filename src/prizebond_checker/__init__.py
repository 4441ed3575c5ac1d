"""
Prize Bond Checker

This package checks a user's prize bond numbers against an official draw
result list. Both lists may be uploaded as plain text, spreadsheet or PDF
files; the bond numbers present in both are returned.
"""

__version__ = "1.0.0"

from .matching.bond_matcher import compute_matches
from .models.bond_result import BondMatch, FileKind, MatchResult, UploadedFile
from .parsers.file_parser import BondFileParser, parse_bond_file
from .server.api_server import BondCheckerServer
from .service.bond_checker import BondChecker

__all__ = [
    "BondChecker",
    "BondCheckerServer",
    "BondFileParser",
    "BondMatch",
    "FileKind",
    "MatchResult",
    "UploadedFile",
    "compute_matches",
    "parse_bond_file",
]

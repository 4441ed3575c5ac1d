"""Data models for the Prize Bond Checker."""

from .bond_result import (
    PRIZE_LABEL,
    BondMatch,
    ErrorResponse,
    FileKind,
    MatchResult,
    NumberCheckRequest,
    UploadedFile,
)

__all__ = [
    "PRIZE_LABEL",
    "BondMatch",
    "ErrorResponse",
    "FileKind",
    "MatchResult",
    "NumberCheckRequest",
    "UploadedFile",
]

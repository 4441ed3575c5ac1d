"""
Data models for prize bond checking.

Uploaded files are classified into one of three input kinds:
1. Spreadsheet (.xlsx / .xls) - First worksheet, read as a flat grid
2. Delimited text (.txt) - Numbers separated by whitespace, commas or newlines
3. PDF (.pdf) - Unstructured text scanned for digit runs
"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


PRIZE_LABEL = "Matched"


class FileKind(str, Enum):
    """Kinds of bond list files."""
    SPREADSHEET = "spreadsheet"
    DELIMITED_TEXT = "delimited_text"
    PDF = "pdf"


class UploadedFile(BaseModel):
    """Raw content of an uploaded file together with its original name."""
    filename: str = Field(..., description="Original filename, used for the extension")
    content: bytes = Field(..., description="File bytes")

    @property
    def size(self) -> int:
        return len(self.content)


class BondMatch(BaseModel):
    """A user bond number that appears in the draw list."""
    model_config = ConfigDict(populate_by_name=True)

    bond_number: str = Field(..., alias="bondNumber", description="6-digit bond number")
    prize: str = Field(PRIZE_LABEL, description="Prize label")


class MatchResult(BaseModel):
    """Matches found for one user list against one draw list."""
    model_config = ConfigDict(populate_by_name=True)

    matches: List[BondMatch] = Field(
        default_factory=list, description="Matches in user list order, duplicates kept"
    )
    total_user_bonds: int = Field(
        0, alias="totalUserBonds", description="Valid bond numbers found in the user list"
    )

    @property
    def match_count(self) -> int:
        return len(self.matches)


class NumberCheckRequest(BaseModel):
    """Request model for checking raw bond numbers without uploading files."""
    model_config = ConfigDict(populate_by_name=True)

    user_numbers: List[str] = Field(
        ..., alias="userNumbers", description="Bond numbers owned by the user"
    )
    draw_numbers: List[str] = Field(
        ..., alias="drawNumbers", description="Winning bond numbers of the draw"
    )


class ErrorResponse(BaseModel):
    """Error payload returned by the API."""
    error: str = Field(..., description="Human readable error message")
    details: Optional[str] = Field(None, description="Exception detail (debug mode only)")

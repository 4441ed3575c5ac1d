"""
Spreadsheet parser for bond lists.

Only the first worksheet is read. There is no header row: every cell is a
potential bond number, so the grid is flattened row by row.
"""

import io
import logging
from typing import List
import pandas as pd

logger = logging.getLogger(__name__)

# pandas engine per spreadsheet extension
EXCEL_ENGINES = {
    ".xlsx": "openpyxl",
    ".xls": "xlrd",
}


class SpreadsheetParser:
    """Reads the cells of the first worksheet as tokens."""

    def read_sheet(self, content: bytes, extension: str) -> pd.DataFrame:
        """Load the first worksheet as a headerless grid of strings."""
        engine = EXCEL_ENGINES.get(extension.lower())
        return pd.read_excel(
            io.BytesIO(content),
            sheet_name=0,
            header=None,
            dtype=str,
            keep_default_na=False,
            engine=engine,
        )

    def parse(self, content: bytes, extension: str = ".xlsx") -> List[str]:
        """
        Parse a spreadsheet into cell tokens.

        Args:
            content: Raw workbook bytes
            extension: File extension, selects the reader engine

        Returns:
            Stripped cell strings in row-major order, empty cells included
        """
        sheet = self.read_sheet(content, extension)
        logger.debug(f"Read sheet with {sheet.shape[0]} rows and {sheet.shape[1]} columns")

        return [
            "" if pd.isna(cell) else str(cell).strip()
            for cell in sheet.to_numpy().ravel()
        ]

"""
PDF parser for prize draw result documents.

Draw results are published as PDFs whose layout varies from draw to draw
(multi-column tables, headers, page footers). No structure is interpreted:
the text of every page is extracted and scanned for digit runs, and the
bond number filter is applied later during normalization.
"""

import io
import logging
import re
from typing import List
import pdfplumber

logger = logging.getLogger(__name__)


class PDFParser:
    """Extracts candidate bond numbers from PDF files."""

    def __init__(self, min_digits: int = 4, max_digits: int = 10):
        # Runs of digits not touching another digit
        self.number_pattern = re.compile(
            rf'(?<!\d)\d{{{min_digits},{max_digits}}}(?!\d)', re.ASCII
        )

    def extract_text(self, content: bytes) -> str:
        """
        Extract the text of all pages in document order.

        Args:
            content: Raw PDF bytes

        Returns:
            Page texts joined by newlines
        """
        with pdfplumber.open(io.BytesIO(content)) as pdf:
            page_count = len(pdf.pages)
            pages = []
            for page_num, page in enumerate(pdf.pages):
                pages.append(page.extract_text() or "")

                if page_num % 50 == 0:  # Log progress every 50 pages
                    logger.debug(f"Extracted {page_num + 1}/{page_count} pages")

        return "\n".join(pages)

    def find_numbers(self, text: str) -> List[str]:
        """Return every digit run of the accepted length found in text."""
        return [match.strip() for match in self.number_pattern.findall(text)]

    def parse(self, content: bytes) -> List[str]:
        """
        Parse a PDF and return the raw number tokens it contains.

        Args:
            content: Raw PDF bytes

        Returns:
            Digit runs in document order
        """
        text = self.extract_text(content)
        numbers = self.find_numbers(text)
        logger.info(f"Found {len(numbers)} candidate numbers in PDF")
        return numbers

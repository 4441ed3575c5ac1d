"""Parser for plain text bond lists."""

import re
from typing import List

# Any run of whitespace, commas or line breaks is a single delimiter
DELIMITER_PATTERN = re.compile(r'[\n\r\s,]+')


def decode_text(content: bytes) -> str:
    """Decode file bytes as UTF-8, dropping a leading BOM."""
    return content.decode("utf-8-sig", errors="replace")


class TextParser:
    """Splits delimited text files into tokens."""

    def parse(self, content: bytes) -> List[str]:
        text = decode_text(content)
        pieces = (piece.strip() for piece in DELIMITER_PATTERN.split(text))
        return [piece for piece in pieces if piece]

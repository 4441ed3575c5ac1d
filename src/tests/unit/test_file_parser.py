"""Unit tests for file kind detection and format dispatch."""

import io
import pytest
import pandas as pd
from openpyxl import Workbook
from unittest.mock import MagicMock, patch

from prizebond_checker.exceptions import ParseFailureError, UnsupportedFormatError
from prizebond_checker.models.bond_result import FileKind, UploadedFile
from prizebond_checker.parsers.file_parser import (
    BondFileParser, FileKindDetector, detect_file_kind, parse_bond_file
)
from prizebond_checker.parsers.spreadsheet_parser import SpreadsheetParser
from prizebond_checker.parsers.text_parser import TextParser


def make_workbook(first_sheet_rows, second_sheet_rows=()):
    wb = Workbook()
    ws = wb.active
    for row in first_sheet_rows:
        ws.append(row)
    other = wb.create_sheet("Other")
    for row in second_sheet_rows:
        other.append(row)
    buffer = io.BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


class TestFileKindDetector:
    """Test extension based format detection."""

    @pytest.mark.parametrize("filename, kind", [
        ("bonds.xlsx", FileKind.SPREADSHEET),
        ("bonds.xls", FileKind.SPREADSHEET),
        ("BONDS.XLSX", FileKind.SPREADSHEET),
        ("bonds.txt", FileKind.DELIMITED_TEXT),
        ("draw.Pdf", FileKind.PDF),
        ("draw.2024.pdf", FileKind.PDF),
    ])
    def test_detect_supported(self, filename, kind):
        assert FileKindDetector.detect(filename) == kind

    @pytest.mark.parametrize("filename, extension", [
        ("bonds.docx", ".docx"),
        ("bonds.csv", ".csv"),
        ("bonds", ""),
    ])
    def test_detect_unsupported(self, filename, extension):
        with pytest.raises(UnsupportedFormatError) as exc_info:
            detect_file_kind(filename)

        assert exc_info.value.extension == extension
        assert exc_info.value.filename == filename


class TestTextParser:
    """Test plain text bond lists."""

    def test_mixed_delimiters(self):
        content = b"111111, 222222\n333333\r\n\r\n444444,,555555\t666666 "

        tokens = TextParser().parse(content)

        assert tokens == ["111111", "222222", "333333", "444444", "555555", "666666"]

    def test_keeps_non_numeric_tokens(self):
        """Filtering of non bond tokens happens during normalization."""
        tokens = TextParser().parse(b"Bond: BD123456X\nfoo")

        assert tokens == ["Bond:", "BD123456X", "foo"]

    def test_utf8_bom_is_dropped(self):
        tokens = TextParser().parse(b"\xef\xbb\xbf012345\n")

        assert tokens == ["012345"]

    def test_empty_file(self):
        assert TextParser().parse(b"  \n\n , ") == []


class TestSpreadsheetParser:
    """Test spreadsheet bond lists."""

    def test_first_sheet_row_major(self):
        content = make_workbook(
            [[123456, "  654321 ", None, "abc"], ["000123"]],
            [[999999]],
        )

        tokens = SpreadsheetParser().parse(content, ".xlsx")

        assert [t for t in tokens if t] == ["123456", "654321", "abc", "000123"]
        assert "999999" not in tokens
        assert all(t == t.strip() for t in tokens)

    def test_empty_cells_become_empty_strings(self):
        content = make_workbook([[111111, None, 222222]])

        tokens = SpreadsheetParser().parse(content, ".xlsx")

        assert tokens == ["111111", "", "222222"]

    @patch('prizebond_checker.parsers.spreadsheet_parser.pd.read_excel')
    def test_xls_uses_xlrd_engine(self, mock_read_excel):
        mock_read_excel.return_value = pd.DataFrame([["111111", "222222"]])

        tokens = SpreadsheetParser().parse(b"xls-bytes", ".XLS")

        assert tokens == ["111111", "222222"]
        kwargs = mock_read_excel.call_args.kwargs
        assert kwargs["engine"] == "xlrd"
        assert kwargs["sheet_name"] == 0
        assert kwargs["header"] is None


class TestBondFileParser:
    """Test dispatch from filename to parser."""

    @pytest.fixture
    def parser(self):
        return BondFileParser()

    def test_dispatch_text(self, parser):
        tokens = parser.parse(b"111111\n222222", "mine.TXT")

        assert tokens == ["111111", "222222"]

    def test_dispatch_spreadsheet(self, parser):
        content = make_workbook([[111111], [222222]])

        tokens = parse_bond_file(UploadedFile(filename="mine.xlsx", content=content))

        assert tokens == ["111111", "222222"]

    def test_dispatch_pdf(self, parser):
        parser.pdf_parser = MagicMock()
        parser.pdf_parser.parse.return_value = ["111111"]

        tokens = parser.parse(b"%PDF", "draw.pdf")

        assert tokens == ["111111"]
        parser.pdf_parser.parse.assert_called_once_with(b"%PDF")

    def test_unsupported_format_reads_nothing(self, parser):
        parser.text_parser = MagicMock()
        parser.pdf_parser = MagicMock()
        parser.spreadsheet_parser = MagicMock()

        with pytest.raises(UnsupportedFormatError):
            parser.parse(b"111111", "bonds.docx")

        parser.text_parser.parse.assert_not_called()
        parser.pdf_parser.parse.assert_not_called()
        parser.spreadsheet_parser.parse.assert_not_called()

    def test_reader_failure_is_wrapped(self, parser):
        with pytest.raises(ParseFailureError) as exc_info:
            parser.parse(b"this is not a workbook", "bonds.xlsx")

        assert exc_info.value.filename == "bonds.xlsx"
        assert exc_info.value.__cause__ is exc_info.value.cause

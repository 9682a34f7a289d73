"""CSV format backend."""

import csv
import io
import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Optional, Union

from importexport.backends.registry import BackendServices
from importexport.core.exceptions import ValidationError, SerializationError
from importexport.domain.models import (
    AttributeDescriptor,
    AttributeInput,
    InputType,
    Template,
)
from importexport.domain.views import Cell, ImportData, ParseDiagnostic

if TYPE_CHECKING:
    from importexport.services.template_data_service import TemplateDataService

UTF8 = "UTF-8"

# Separator names as stored in the format data -> delimiter character
AVAILABLE_SEPARATORS = {
    "Tabulator": "\t",
    "Semicolon": ";",
    "Colon": ":",
    "Dot": ".",
    "Comma": ",",
}

QUOTE_CHAR = '"'

# Written by csv.writer and cut off again; rows are returned unterminated
_LINE_TERMINATOR = "\r\n"

_UTF8_CHARSET = re.compile(r"\s*(?:utf-8|utf8)\s*", re.IGNORECASE)

PARSE_ERROR = "CSV_PARSE_ERROR"
CHARSET_ERROR = "CHARSET_DECODE_ERROR"


class _RecordLines:
    """Line iterator for csv.reader that remembers the raw text of the current record."""

    def __init__(self, text: str):
        self._lines = io.StringIO(text, newline="")
        self.consumed: list[str] = []

    def __iter__(self) -> "_RecordLines":
        return self

    def __next__(self) -> str:
        line = next(self._lines)
        self.consumed.append(line)
        return line

    def take(self) -> str:
        record = "".join(self.consumed)
        self.consumed.clear()
        return record


def has_loose_quote(record: str, delimiter: str) -> bool:
    """
    True if a quote appears anywhere but at the very start of a field.

    Covers quotes inside unquoted values and whitespace before an opening
    quote. Doubled quotes inside a quoted field are escapes, not loose.
    """
    quoted = False
    at_field_start = True
    i = 0
    while i < len(record):
        ch = record[i]
        if quoted:
            if ch == QUOTE_CHAR:
                if record[i + 1 : i + 2] == QUOTE_CHAR:
                    i += 2
                    continue
                quoted = False
        elif ch == QUOTE_CHAR:
            if not at_field_start:
                return True
            quoted = True
            at_field_start = False
        else:
            at_field_start = ch in (delimiter, "\r", "\n")
        i += 1
    return False


def normalize_charset(charset: Optional[str]) -> str:
    """
    Canonicalize a configured charset.

    Any spelling of utf-8/utf8 (case and surrounding whitespace ignored)
    becomes ``UTF-8``. Other values are returned untouched.
    """
    charset = charset or ""
    if _UTF8_CHARSET.fullmatch(charset):
        return UTF8
    if not charset:
        raise ValidationError("No valid charset configured")
    return charset


@dataclass(frozen=True)
class CsvFormatConfig:
    """Typed view of the CSV keys in a template's format data."""

    separator: str
    charset: str = UTF8
    include_column_headers: bool = False

    @classmethod
    def from_format_data(cls, format_data: Mapping[str, str]) -> "CsvFormatConfig":
        """Build the config from stored key/value pairs."""
        charset = normalize_charset(format_data.get("Charset"))

        separator_name = format_data.get("ColumnSeparator") or ""
        separator = AVAILABLE_SEPARATORS.get(separator_name)
        if not separator:
            raise ValidationError(f"No valid separator configured: '{separator_name}'")

        return cls(
            separator=separator,
            charset=charset,
            include_column_headers=format_data.get("IncludeColumnHeaders") == "1",
        )

    def to_format_data(self) -> dict[str, str]:
        """Render the config as key/value pairs for storage."""
        return {
            "ColumnSeparator": self.separator_name,
            "Charset": self.charset,
            "IncludeColumnHeaders": "1" if self.include_column_headers else "0",
        }

    @property
    def separator_name(self) -> str:
        for name, character in AVAILABLE_SEPARATORS.items():
            if character == self.separator:
                return name
        raise ValidationError(f"Unsupported separator: {self.separator!r}")

    @property
    def is_utf8(self) -> bool:
        return self.charset == UTF8


class CsvFormatBackend:
    """
    Format backend for delimiter separated text.

    Double quote is both quote and escape character. Every field is quoted
    on output. Loose quotes are rejected on input; a broken line is
    reported as a diagnostic and parsing goes on with the next line.

    Text input gives text cells. Byte input is decoded when the charset is
    UTF-8 and otherwise passed through byte for byte, so cells come back as
    ``bytes``. Export under such a charset always yields ``bytes``.
    """

    def __init__(self, format_data: "TemplateDataService", logger: Optional[logging.Logger] = None):
        self._format_data = format_data
        self._logger = logger or logging.getLogger(__name__)

    @classmethod
    def from_services(cls, services: BackendServices) -> "CsvFormatBackend":
        """Factory used by the BackendRegistry."""
        return cls(format_data=services.format_data, logger=services.logger)

    def attributes_get(self, template: Template) -> list[AttributeDescriptor]:
        """Configuration surface: separator, charset, header flag."""
        return [
            AttributeDescriptor(
                key="ColumnSeparator",
                name="Column Separator",
                input=AttributeInput(
                    type=InputType.SELECTION,
                    options={
                        "Tabulator": "Tabulator (TAB)",
                        "Semicolon": "Semicolon (;)",
                        "Colon": "Colon (:)",
                        "Dot": "Dot (.)",
                        "Comma": "Comma (,)",
                    },
                    required=True,
                    translation=True,
                    possible_none=True,
                ),
            ),
            AttributeDescriptor(
                key="Charset",
                name="Charset",
                input=AttributeInput(
                    type=InputType.TEXT,
                    default_value=UTF8,
                    required=True,
                    translation=False,
                    size=20,
                    max_length=20,
                ),
            ),
            AttributeDescriptor(
                key="IncludeColumnHeaders",
                name="Include Column Headers",
                input=AttributeInput(
                    type=InputType.SELECTION,
                    options={"0": "No", "1": "Yes"},
                    translation=True,
                    possible_none=False,
                ),
            ),
        ]

    def mapping_format_attributes_get(self, template: Template) -> list[AttributeDescriptor]:
        """Per-column mapping: the column position, filled from a counter."""
        return [
            AttributeDescriptor(
                key="Column",
                name="Column",
                input=AttributeInput(
                    type=InputType.DTL,
                    data="Counter",
                    required=False,
                ),
            ),
        ]

    def import_data_get(
        self,
        template_id: int,
        source_content: Optional[Union[str, bytes]],
    ) -> ImportData:
        """
        Parse content into rows, one row per CSV record.

        A header line is returned like any other row.
        """
        result = ImportData()
        if source_content is None:
            return result
        if not isinstance(source_content, (str, bytes)):
            self._logger.error("SourceContent must be text or bytes")
            raise ValidationError("SourceContent must be text or bytes")

        config = self.load_config(template_id)

        passthrough = False
        if isinstance(source_content, bytes):
            text, passthrough = self._decode(template_id, source_content, config, result)
        else:
            text = source_content
        if not text:
            return result

        lines = _RecordLines(text)
        reader = csv.reader(
            lines,
            delimiter=config.separator,
            quotechar=QUOTE_CHAR,
            doublequote=True,
            skipinitialspace=False,
            strict=True,
        )
        while True:
            try:
                cells = next(reader)
            except StopIteration:
                break
            except csv.Error as exc:
                lines.take()
                self._parse_error(result, template_id, reader.line_num, str(exc))
                continue

            if has_loose_quote(lines.take(), config.separator):
                self._parse_error(result, template_id, reader.line_num, "Loose quote in field")
                continue

            # A blank line is one empty cell, not an empty row
            row: list[Cell] = cells or [""]
            if passthrough:
                row = [cell.encode("latin-1") for cell in row]
            result.rows.append(row)

        return result

    def export_data_save(self, template_id: int, row: Sequence[Cell]) -> Union[str, bytes]:
        """Serialize one row with every field quoted and no line terminator."""
        if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
            self._logger.error("ExportDataRow must be a sequence of cells")
            raise ValidationError("ExportDataRow must be a sequence of cells")

        config = self.load_config(template_id)
        passthrough = not config.is_utf8
        cells = [self._cell_to_text(cell, config) for cell in row]

        buffer = io.StringIO()
        writer = csv.writer(
            buffer,
            delimiter=config.separator,
            quotechar=QUOTE_CHAR,
            doublequote=True,
            quoting=csv.QUOTE_ALL,
            lineterminator=_LINE_TERMINATOR,
        )
        try:
            writer.writerow(cells)
        except csv.Error as exc:
            self._logger.error("Can't combine the export data to a string! (%s)", exc)
            raise SerializationError("Can't combine the export data to a string!") from exc

        line = buffer.getvalue()[: -len(_LINE_TERMINATOR)]
        if not passthrough:
            return line
        try:
            return line.encode("latin-1")
        except UnicodeEncodeError as exc:
            self._logger.error("Export row does not fit the %s charset (%s)", config.charset, exc)
            raise SerializationError("Can't combine the export data to a string!") from exc

    def load_config(self, template_id: int) -> CsvFormatConfig:
        """Read and validate the template's CSV configuration."""
        format_data = self._format_data.get_all(template_id)
        if not format_data:
            self._logger.error("No format data found for the template id %s", template_id)
            raise ValidationError(f"No format data found for the template id {template_id}")
        try:
            return CsvFormatConfig.from_format_data(format_data)
        except ValidationError as exc:
            self._logger.error("%s for the template id %s", exc.message, template_id)
            raise

    def _parse_error(
        self, result: ImportData, template_id: int, line: int, message: str
    ) -> None:
        result.diagnostics.append(ParseDiagnostic(line=line, code=PARSE_ERROR, message=message))
        self._logger.error(
            "ImportError at line %d, ErrorCode: %s '%s' (template %s)",
            line,
            PARSE_ERROR,
            message,
            template_id,
        )

    def _decode(
        self,
        template_id: int,
        content: bytes,
        config: CsvFormatConfig,
        result: ImportData,
    ) -> tuple[str, bool]:
        if not config.is_utf8:
            # latin-1 maps every byte to one code point, so cells re-encode losslessly
            return content.decode("latin-1"), True

        try:
            return content.decode("utf-8"), False
        except UnicodeDecodeError as exc:
            line = content.count(b"\n", 0, exc.start) + 1
            result.diagnostics.append(
                ParseDiagnostic(
                    line=line,
                    code=CHARSET_ERROR,
                    message=f"Invalid UTF-8 byte sequence: {exc.reason}",
                )
            )
            self._logger.warning(
                "Invalid UTF-8 in import content at line %d (template %s)", line, template_id
            )
            return content.decode("utf-8", errors="replace"), False

    @staticmethod
    def _cell_to_text(cell: object, config: CsvFormatConfig) -> str:
        if cell is None:
            return ""
        if isinstance(cell, str):
            return cell
        if isinstance(cell, bytes):
            if not config.is_utf8:
                return cell.decode("latin-1")
            try:
                return cell.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise SerializationError(f"Cell is not valid UTF-8: {exc.reason}") from exc
        if isinstance(cell, (int, float, Decimal)):
            return str(cell)
        raise SerializationError(f"Can't serialize cell of type {type(cell).__name__}")

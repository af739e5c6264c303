"""Minimal CSV tokenizer and serializer.

Handles quoted fields with embedded commas, doubled quotes and newlines.
Parsing is best-effort and never raises: an unterminated quote simply
consumes the rest of the input into the current field.
"""

from typing import Iterable, Mapping

_NEEDS_QUOTING = (",", '"', "\n", "\r")


def escape_field(field: str) -> str:
    """Quote a field if it contains a comma, quote or line break."""
    if any(ch in field for ch in _NEEDS_QUOTING):
        return '"' + field.replace('"', '""') + '"'
    return field


def format_value(value: str | int | float | None) -> str:
    """Serialize a single cell value.

    None becomes an empty cell, strings are escaped and numbers use plain
    decimal text (integral floats drop the trailing ".0").
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return escape_field(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def encode_rows(headers: Iterable[str], rows: Iterable[Iterable]) -> str:
    """Serialize a header row and data rows to CSV text.

    Rows are joined with newlines, without a trailing newline.
    """
    lines = [",".join(escape_field(h) for h in headers)]
    for row in rows:
        lines.append(",".join(format_value(v) for v in row))
    return "\n".join(lines)


def parse_rows(text: str) -> list[list[str]]:
    """Tokenize CSV text into rows of fields.

    Carriage returns outside quotes are dropped, so CRLF input parses the
    same as LF input.
    """
    rows: list[list[str]] = []
    row: list[str] = []
    field: list[str] = []
    in_quotes = False
    i = 0
    length = len(text)

    while i < length:
        ch = text[i]
        if in_quotes:
            if ch == '"':
                if i + 1 < length and text[i + 1] == '"':
                    field.append('"')
                    i += 1
                else:
                    in_quotes = False
            else:
                field.append(ch)
        elif ch == '"':
            in_quotes = True
        elif ch == ",":
            row.append("".join(field))
            field = []
        elif ch == "\n":
            row.append("".join(field))
            rows.append(row)
            row = []
            field = []
        elif ch != "\r":
            field.append(ch)
        i += 1

    # Flush a trailing row without a final newline
    if field or row:
        row.append("".join(field))
        rows.append(row)

    return rows


def _is_blank(row: list[str]) -> bool:
    return not row or (len(row) == 1 and row[0] == "")


def decode_records(text: str) -> list[dict[str, str]]:
    """Parse CSV text into one header-name -> value mapping per data row.

    The first row is the header. Blank lines are skipped. Short rows are
    padded with empty strings.
    """
    rows = parse_rows(text)
    if len(rows) < 2:
        return []

    header_indices = {
        name.lstrip("\ufeff").strip(): idx for idx, name in enumerate(rows[0])
    }

    records = []
    for values in rows[1:]:
        if _is_blank(values):
            continue
        records.append(
            {
                name: values[idx] if idx < len(values) else ""
                for name, idx in header_indices.items()
            }
        )
    return records


def get_field(record: Mapping[str, str], name: str) -> str:
    """Look up a column by header name; missing columns read as empty."""
    return record.get(name, "")

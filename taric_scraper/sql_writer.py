from __future__ import annotations

from typing import Iterable

from .types import DescriptionRecord


def escape_sql_text(text: str) -> str:
    return text.replace("'", "''")


def format_record(record: DescriptionRecord) -> str:
    return f"({record.index}, '{record.language}', '{escape_sql_text(record.text)}')"


def format_descriptions(records: Iterable[DescriptionRecord]) -> str:
    """
    Render records as the body of a SQL VALUES list:

        (1, 'EN', 'Live animals'),
        (2, 'EN', 'Meat and edible offal');

    Returns an empty string when there are no records.
    """
    lines = [format_record(r) for r in records]
    if not lines:
        return ""
    return ",\n".join(lines) + ";"


def write_statements(statements: str, out_path: str) -> None:
    with open(out_path, "w", encoding="utf-8") as fh:
        fh.write(statements)
        if statements and not statements.endswith("\n"):
            fh.write("\n")

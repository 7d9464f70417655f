"""
CSV bulk import for monsters.

Expected header (any column order, extra columns ignored):

    name,attack,defense,hp,speed,image_url

Every row goes through the same validation as POST /api/monsters.
One bad row rejects the whole file.
"""

from __future__ import annotations

import csv
import io
import logging
from typing import List

from .rules import CSV_COLUMNS, RuleError
from .serializers import MonsterSerializer

logger = logging.getLogger(__name__)


def _clean_row(row: dict) -> dict:
    out = {}
    for key in CSV_COLUMNS:
        value = row.get(key)
        out[key] = value.strip() if isinstance(value, str) else value
    return out


def parse_monster_csv(upload) -> List[dict]:
    """
    Reads an uploaded CSV file and returns validated monster data,
    ready for MonsterRepository.bulk_insert.
    """
    raw = upload.read()
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise RuleError(code="BAD_CSV", message="Incomplete data, check your file.") from exc

    reader = csv.DictReader(io.StringIO(raw), skipinitialspace=True)
    if reader.fieldnames:
        reader.fieldnames = [name.strip() for name in reader.fieldnames]

    rows = []
    for row in reader:
        line_no = reader.line_num
        # lines with nothing but whitespace
        if not any((v or "").strip() for v in row.values() if isinstance(v, str)):
            continue

        serializer = MonsterSerializer(data=_clean_row(row))
        if not serializer.is_valid():
            logger.info("csv import rejected at line %d: %s", line_no, serializer.errors)
            raise RuleError(
                code="BAD_CSV",
                message="Incomplete data, check your file.",
                details={"line": line_no, "errors": serializer.errors},
            )
        rows.append(serializer.validated_data)

    if not rows:
        raise RuleError(code="EMPTY_CSV", message="No valid monsters found in the CSV file")

    return rows

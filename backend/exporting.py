# Record export - pretty JSON download of the currently filtered list
from __future__ import annotations

import json
from typing import List

from models import MedicalRecord

EXPORT_FILENAME = "medical-records.json"


def export_records_json(records_to_export: List[MedicalRecord]) -> str:
    """
    Serialize records as indented JSON (camelCase keys, same shape the API returns).
    Raises ValueError when there is nothing to export.
    """
    if not records_to_export:
        raise ValueError("There are no records to export.")
    return json.dumps([r.to_dict() for r in records_to_export], indent=2, ensure_ascii=False)

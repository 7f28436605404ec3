# Business logic - record filtering, facets and edits over the in-memory store
from __future__ import annotations

from datetime import date
from typing import Dict, List, Literal, Optional, get_args
from uuid import uuid4

from matching import fuzzy_matches
from models import CATEGORIES, SEARCHABLE_FIELDS, MedicalRecord, records

SortOrder = Literal["desc", "asc"]
SORT_ORDERS = get_args(SortOrder)


class RecordValidationError(ValueError):
    """Raised when a record is missing required fields or has an unknown category"""


def get_record(record_id: str) -> Optional[MedicalRecord]:
    """Get record by ID"""
    for record in records:
        if record.id == record_id:
            return record
    return None


def record_matches_query(record: MedicalRecord, query: str) -> bool:
    """A record matches when the query fuzzy-matches ANY searchable field."""
    return any(fuzzy_matches(query, getattr(record, name) or "") for name in SEARCHABLE_FIELDS)


def filter_records(
    query: str = "",
    doctor: str = "",
    hospital: str = "",
    category: str = "",
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    sort_order: SortOrder = "desc",
) -> List[MedicalRecord]:
    """
    Apply dropdown filters, fuzzy text search and an inclusive date range,
    then sort by date. Empty filter values and None dates are no-ops.
    """
    if sort_order not in SORT_ORDERS:
        raise ValueError(f"sort_order must be one of {SORT_ORDERS}, got {sort_order!r}")

    filtered: List[MedicalRecord] = []
    for record in records:
        # Dropdown filters
        if doctor and record.doctorName != doctor:
            continue
        if hospital and record.hospital != hospital:
            continue
        if category and record.category != category:
            continue
        record_date = date.fromisoformat(record.date)
        if start_date and record_date < start_date:
            continue
        if end_date and record_date > end_date:
            continue
        if not record_matches_query(record, query):
            continue
        filtered.append(record)

    # sorted() is stable, so equal dates keep store order
    return sorted(filtered, key=lambda r: r.date, reverse=(sort_order == "desc"))


def get_facets() -> Dict[str, List[str]]:
    """Unique doctors, hospitals and categories present in the store, sorted"""
    return {
        "doctors": sorted({r.doctorName for r in records}),
        "hospitals": sorted({r.hospital for r in records if r.hospital}),
        "categories": sorted({r.category for r in records}),
    }


def validate_record(record: MedicalRecord) -> None:
    """Doctor's name, diagnosis and treatment are required; category must be known."""
    missing = [
        label
        for label, value in (
            ("doctorName", record.doctorName),
            ("diagnosis", record.diagnosis),
            ("treatment", record.treatment),
        )
        if not value or not value.strip()
    ]
    if missing:
        raise RecordValidationError(f"Missing required fields: {', '.join(missing)}")
    if record.category not in CATEGORIES:
        raise RecordValidationError(f"Unknown category: {record.category}")


def save_record(record: MedicalRecord) -> MedicalRecord:
    """Replace the record with the same id, or add it to the front of the list."""
    validate_record(record)
    for index, existing in enumerate(records):
        if existing.id == record.id:
            records[index] = record
            return record
    records.insert(0, record)
    return record


def create_record(
    doctor_name: str,
    diagnosis: str,
    treatment: str,
    hospital: str = "",
    symptoms: Optional[List[str]] = None,
    notes: str = "",
    category: str = CATEGORIES[0],
) -> MedicalRecord:
    """New record with a fresh id, dated today."""
    record = MedicalRecord(
        id=uuid4().hex,
        date=date.today().isoformat(),
        doctorName=doctor_name,
        hospital=hospital,
        diagnosis=diagnosis,
        symptoms=list(symptoms or []),
        treatment=treatment,
        notes=notes,
        category=category,
    )
    return save_record(record)


def update_record(
    record_id: str,
    doctor_name: str,
    diagnosis: str,
    treatment: str,
    hospital: str = "",
    symptoms: Optional[List[str]] = None,
    notes: str = "",
    category: str = CATEGORIES[0],
) -> Optional[MedicalRecord]:
    """Edit an existing record. The id and original date are kept."""
    existing = get_record(record_id)
    if not existing:
        return None
    updated = MedicalRecord(
        id=existing.id,
        date=existing.date,
        doctorName=doctor_name,
        hospital=hospital,
        diagnosis=diagnosis,
        symptoms=list(symptoms or []),
        treatment=treatment,
        notes=notes,
        category=category,
    )
    return save_record(updated)


def delete_record(record_id: str) -> bool:
    """Remove a record. Returns False when nothing had that id."""
    record = get_record(record_id)
    if not record:
        return False
    records.remove(record)
    return True

# Health insights - demo analysis used when no hosted AI service is configured
from __future__ import annotations

from typing import Dict, List

from models import MedicalRecord


def get_demo_analysis() -> Dict:
    """Canned analysis of the seeded demo records (always available)."""
    return {
        "healthInsights": [
            {
                "insight": "Recurring respiratory issues requiring attention",
                "evidence": ["Acute Bronchitis (March 2024)", "Persistent cough symptoms"],
            },
            {
                "insight": "Excellent preventive healthcare maintenance",
                "evidence": ["Annual check-up (January 2024)", "Flu vaccine administered", "All results normal"],
            },
            {
                "insight": "Proper injury management with full recovery",
                "evidence": ["Ankle sprain (October 2023)", "R.I.C.E. protocol followed", "No complications reported"],
            },
        ],
        "drugInteractions": [
            {
                "drugs": ["Amoxicillin", "Ibuprofen"],
                "interaction": "Potential increased risk of gastrointestinal bleeding when taken together. Consider spacing administration.",
                "sourceRecords": ["Acute Bronchitis treatment", "Ankle sprain pain management"],
            }
        ],
        "uniqueMedications": ["Amoxicillin", "Ibuprofen", "Flu Vaccine"],
    }


def analyze_records(records_to_analyze: List[MedicalRecord]) -> Dict:
    """Analysis payload for the given records. Raises ValueError for an empty list."""
    if not records_to_analyze:
        raise ValueError("There are no records to analyze.")
    analysis = get_demo_analysis()
    analysis["source"] = "demo"
    analysis["recordCount"] = len(records_to_analyze)
    return analysis

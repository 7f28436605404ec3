# In-memory data models for personal medical records
from typing import Dict, List
from dataclasses import dataclass, field, asdict

CATEGORIES: List[str] = ["Consultation", "Procedure", "Prescription", "Check-up", "Imaging", "Follow-up"]
DEFAULT_CATEGORY = CATEGORIES[0]

# Fields the free-text search looks at (OR across fields)
SEARCHABLE_FIELDS = ("diagnosis", "doctorName", "hospital")

# In-memory storage
records: List['MedicalRecord'] = []

@dataclass
class MedicalRecord:
    """A single visit / encounter in the patient's history"""
    id: str
    date: str  # YYYY-MM-DD
    doctorName: str
    diagnosis: str
    treatment: str
    hospital: str = ""
    symptoms: List[str] = field(default_factory=list)
    notes: str = ""
    category: str = DEFAULT_CATEGORY

    def to_dict(self) -> Dict:
        return asdict(self)

def parse_symptoms(text: str) -> List[str]:
    """Comma-separated symptoms -> trimmed list without blanks"""
    return [s.strip() for s in text.split(",") if s.strip()]

@dataclass
class PatientInfo:
    """The record owner's profile card"""
    name: str
    dob: str  # YYYY-MM-DD
    bloodType: str
    allergies: str
    emergencyContact: str

    def to_dict(self) -> Dict:
        return asdict(self)

# Single-patient viewer: one static profile
patient_info = PatientInfo(
    name="Johnathan Doe",
    dob="1985-01-01",
    bloodType="O+",
    allergies="Penicillin",
    emergencyContact="Jane Doe (Spouse) - (555) 123-4567",
)

"""
Shared pytest fixtures for medical records tests.
"""
import pytest
from fastapi.testclient import TestClient

from main import app
from models import MedicalRecord, records
from seed import seed_data


@pytest.fixture
def client():
    """FastAPI TestClient."""
    return TestClient(app)


@pytest.fixture
def seeded_data():
    """
    Reset to seed data: rec1 (Emily Carter, 2024-03-15), rec2 (Benjamin Lee,
    2024-01-05), rec3 (Sophia Rodriguez, 2023-10-22), newest first.
    """
    seed_data()
    yield
    seed_data()


@pytest.fixture
def tricky_names_dataset():
    """
    Seed data plus records whose fields exercise the tokenizer:
    apostrophes, hyphens, periods and an empty hospital.
    """
    seed_data()
    records.append(MedicalRecord(
        id="rec_obrien",
        date="2022-06-01",
        doctorName="Liam O'Brien",
        hospital="St. Mary's Hospital",
        diagnosis="Type-2 Diabetes",
        symptoms=["Thirst"],
        treatment="Metformin 500mg daily.",
        notes="",
        category="Follow-up",
    ))
    records.append(MedicalRecord(
        id="rec_nohospital",
        date="2022-02-14",
        doctorName="Ava Nguyen",
        hospital="",
        diagnosis="Seasonal Allergies",
        symptoms=["Sneezing"],
        treatment="Cetirizine 10mg as needed.",
        notes="Telehealth visit.",
        category="Prescription",
    ))
    yield
    seed_data()

# Seed data - demo medical history loaded into the in-memory store
from models import MedicalRecord, records

def seed_data():
    """Initialize the demo records, newest first"""
    # Clear existing data
    records.clear()

    rec1 = MedicalRecord(
        id="rec1",
        date="2024-03-15",
        doctorName="Emily Carter",
        hospital="City General Hospital",
        diagnosis="Acute Bronchitis",
        symptoms=["Persistent Cough", "Chest Congestion", "Fatigue"],
        treatment="Prescribed Amoxicillin 500mg, 2 times a day for 7 days. Recommended rest and hydration.",
        notes="Patient advised to follow up if symptoms do not improve in one week. Smoking cessation strongly encouraged.",
        category="Consultation",
    )

    rec2 = MedicalRecord(
        id="rec2",
        date="2024-01-05",
        doctorName="Benjamin Lee",
        hospital="Downtown Medical Clinic",
        diagnosis="Annual Check-up",
        symptoms=["None"],
        treatment="Standard blood panel ordered. All results are within normal ranges. Flu vaccine administered.",
        notes="Patient is in good health. Advised to continue regular exercise and balanced diet. Next check-up scheduled for January 2025.",
        category="Check-up",
    )

    rec3 = MedicalRecord(
        id="rec3",
        date="2023-10-22",
        doctorName="Sophia Rodriguez",
        hospital="OrthoCare Specialists",
        diagnosis="Minor Ankle Sprain",
        symptoms=["Ankle pain", "Swelling", "Limited mobility"],
        treatment="R.I.C.E. (Rest, Ice, Compression, Elevation) protocol. Prescribed Ibuprofen for pain management.",
        notes="X-ray confirmed no fracture. Patient to wear an ankle brace for 2-3 weeks.",
        category="Consultation",
    )

    records.extend(sorted([rec1, rec2, rec3], key=lambda r: r.date, reverse=True))

    print("Seed data initialized:")
    print(f"  - {len(records)} medical records: {[r.id for r in records]}")
    for r in records:
        print(f"  - {r.date} {r.doctorName} @ {r.hospital}: {r.diagnosis} [{r.category}]")

if __name__ == "__main__":
    seed_data()

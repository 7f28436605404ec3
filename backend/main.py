# Backend main entry point - personal medical records API
import os
from dotenv import load_dotenv
load_dotenv()  # Load .env so DEMO_MODE=true works for local reviewers
from fastapi import Depends, FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware
from datetime import date
from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Union
from models import CATEGORIES, DEFAULT_CATEGORY, MedicalRecord, parse_symptoms, patient_info
from logic import (
    SortOrder,
    RecordValidationError,
    create_record,
    delete_record,
    filter_records,
    get_facets,
    get_record,
    update_record,
)
from matching import fuzzy_matches
from seed import seed_data

# Initialize seed data
seed_data()

app = FastAPI(title="Medical Records API")


def _is_demo_mode() -> bool:
    """True only when DEMO_MODE env var is explicitly 'true' (case-insensitive)."""
    return os.environ.get("DEMO_MODE", "").lower() == "true"

# Configure CORS - allow local dev and deployed frontend
_allowed_origins = [
    "http://localhost:5173",
    "http://localhost:5174",
]
# Add deployed frontend URL from env if set
_frontend_url = os.environ.get("FRONTEND_URL", "")
if _frontend_url:
    _allowed_origins.append(_frontend_url)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Request/Response models
class RecordResponse(BaseModel):
    id: str
    date: str
    doctorName: str
    hospital: str
    diagnosis: str
    symptoms: List[str]
    treatment: str
    notes: str
    category: str

class RecordInput(BaseModel):
    doctorName: str
    hospital: str = ""
    diagnosis: str
    symptoms: List[str] = Field(default_factory=list)  # also accepts "a, b, c"
    treatment: str
    notes: str = ""
    category: str = DEFAULT_CATEGORY

    @field_validator("symptoms", mode="before")
    @classmethod
    def split_symptom_text(cls, value: Union[str, List[str]]):
        if isinstance(value, str):
            return parse_symptoms(value)
        return value

class RecordFilter(BaseModel):
    q: str = ""
    doctor: str = ""
    hospital: str = ""
    category: str = ""
    startDate: Optional[date] = None
    endDate: Optional[date] = None
    sort: SortOrder = "desc"

class FacetsResponse(BaseModel):
    doctors: List[str]
    hospitals: List[str]
    categories: List[str]

class PatientResponse(BaseModel):
    name: str
    dob: str
    bloodType: str
    allergies: str
    emergencyContact: str


def _to_response(record: MedicalRecord) -> RecordResponse:
    return RecordResponse(**record.to_dict())


def _filtered(f: RecordFilter) -> List[MedicalRecord]:
    return filter_records(
        query=f.q,
        doctor=f.doctor,
        hospital=f.hospital,
        category=f.category,
        start_date=f.startDate,
        end_date=f.endDate,
        sort_order=f.sort,
    )


def record_filter(
    q: str = "",
    doctor: str = "",
    hospital: str = "",
    category: str = "",
    startDate: Optional[date] = None,
    endDate: Optional[date] = None,
    sort: SortOrder = "desc",
) -> RecordFilter:
    return RecordFilter(
        q=q, doctor=doctor, hospital=hospital, category=category,
        startDate=startDate, endDate=endDate, sort=sort,
    )

@app.get("/")
def read_root():
    return {"message": "Personal Medical Records API"}

@app.get("/health")
def health_check():
    return {"status": "healthy"}


@app.get("/patient", response_model=PatientResponse)
def read_patient():
    """Profile card of the patient whose records these are"""
    return PatientResponse(**patient_info.to_dict())


@app.get("/records", response_model=List[RecordResponse])
def list_records(f: RecordFilter = Depends(record_filter)):
    """List records matching the filters. q is a typo-tolerant search over diagnosis, doctor and hospital."""
    return [_to_response(r) for r in _filtered(f)]


@app.get("/records/facets", response_model=FacetsResponse)
def list_facets():
    """Dropdown values: doctors, hospitals and categories currently in use"""
    return FacetsResponse(**get_facets())


@app.get("/records/categories")
def list_categories():
    """All categories a record may be filed under"""
    return {"categories": CATEGORIES}


@app.get("/records/export")
def export_records(f: RecordFilter = Depends(record_filter)):
    """Download the filtered records as medical-records.json"""
    from exporting import EXPORT_FILENAME, export_records_json
    try:
        body = export_records_json(_filtered(f))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return Response(
        content=body,
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )


@app.post("/records/analysis")
def analyze_filtered_records(f: RecordFilter):
    """Health insights, drug interactions and medications for the filtered records."""
    from insights import analyze_records
    try:
        return analyze_records(_filtered(f))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.get("/records/{record_id}", response_model=RecordResponse)
def read_record(record_id: str):
    record = get_record(record_id)
    if not record:
        raise HTTPException(status_code=404, detail="Record not found")
    return _to_response(record)


@app.post("/records", response_model=RecordResponse, status_code=201)
def add_record(body: RecordInput):
    """Add a new record dated today"""
    try:
        record = create_record(
            doctor_name=body.doctorName,
            diagnosis=body.diagnosis,
            treatment=body.treatment,
            hospital=body.hospital,
            symptoms=body.symptoms,
            notes=body.notes,
            category=body.category,
        )
    except RecordValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _to_response(record)


@app.put("/records/{record_id}", response_model=RecordResponse)
def edit_record(record_id: str, body: RecordInput):
    """Edit a record; id and date stay as they were"""
    try:
        record = update_record(
            record_id,
            doctor_name=body.doctorName,
            diagnosis=body.diagnosis,
            treatment=body.treatment,
            hospital=body.hospital,
            symptoms=body.symptoms,
            notes=body.notes,
            category=body.category,
        )
    except RecordValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not record:
        raise HTTPException(status_code=404, detail="Record not found")
    return _to_response(record)


@app.delete("/records/{record_id}", status_code=204)
def remove_record(record_id: str):
    if not delete_record(record_id):
        raise HTTPException(status_code=404, detail="Record not found")
    return Response(status_code=204)


@app.get("/search/match")
def search_match(query: str = "", field: Optional[str] = None):
    """Debug endpoint: run the fuzzy matcher on a single query/field pair"""
    return {"query": query, "field": field or "", "match": fuzzy_matches(query, field)}


@app.get("/demo/status")
def demo_status():
    """Returns whether demo mode is enabled. Only for frontend visibility gate."""
    return {"demoMode": _is_demo_mode()}


@app.post("/demo/reset")
def demo_reset():
    """
    Reset the record store to the demo dataset. Only available when DEMO_MODE=true.
    """
    if not _is_demo_mode():
        raise HTTPException(status_code=404, detail="Demo reset not available")
    seed_data()
    return {"status": "ok"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)

from .db import SessionLocal, engine
from .models import Base, HealthcareProvider

STARTER_PROVIDERS = [
    dict(
        name="Dr. Maria Alvarez",
        specialty="Cardiology",
        address="550 1st Ave",
        city="New York",
        state="NY",
        zip_code="10016",
        phone="212-555-0142",
        latitude=40.7420,
        longitude=-73.9740,
        rating=4.8,
        accepted_insurance=["Aetna", "Blue Cross Blue Shield", "Medicare"],
        languages=["English", "Spanish"],
        telemedicine_available=True,
        verified=True,
    ),
    dict(
        name="Dr. James Chen",
        specialty="Family Medicine",
        address="170 William St",
        city="New York",
        state="NY",
        zip_code="10038",
        phone="212-555-0178",
        latitude=40.7099,
        longitude=-74.0060,
        rating=4.6,
        accepted_insurance=["Cigna", "UnitedHealthcare", "Medicaid"],
        languages=["English", "Mandarin"],
        telemedicine_available=True,
        verified=True,
    ),
    dict(
        name="Dr. Priya Raman",
        specialty="Dermatology",
        address="5 Journal Square Plaza",
        city="Jersey City",
        state="NJ",
        zip_code="07306",
        phone="201-555-0119",
        latitude=40.7326,
        longitude=-74.0631,
        rating=4.7,
        accepted_insurance=["Aetna", "Horizon"],
        languages=["English", "Tamil"],
        telemedicine_available=False,
        verified=True,
    ),
    dict(
        name="Dr. Samuel Okafor",
        specialty="Pediatric Cardiology",
        address="3959 Broadway",
        city="New York",
        state="NY",
        zip_code="10032",
        phone="212-555-0190",
        latitude=40.8404,
        longitude=-73.9420,
        rating=4.9,
        accepted_insurance=["Blue Cross Blue Shield", "Medicaid"],
        languages=["English"],
        telemedicine_available=False,
        verified=True,
    ),
    dict(
        name="Dr. Elena Rossi",
        specialty="Internal Medicine",
        address="8700 Beverly Blvd",
        city="Los Angeles",
        state="CA",
        zip_code="90048",
        phone="310-555-0133",
        latitude=34.0752,
        longitude=-118.3806,
        rating=4.5,
        accepted_insurance=["Kaiser", "Aetna"],
        languages=["English", "Italian"],
        telemedicine_available=True,
        verified=False,
    ),
]


def run():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if db.query(HealthcareProvider).count() == 0:
            db.add_all(HealthcareProvider(**p) for p in STARTER_PROVIDERS)
            db.commit()
    finally:
        db.close()


if __name__ == "__main__":
    run()

"""Seed demo companies and jobs, then print an admin token for manual testing."""
from jobboard.database import SessionLocal, init_db
from jobboard.models import Company, Job
from jobboard.core.security import create_access_token

COMPANIES = [
    {"handle": "anderson-arias", "name": "Anderson, Arias and Morrow", "num_employees": 245,
     "description": "Somebody program how I.", "logo_url": "/logos/logo3.png"},
    {"handle": "bauer-gallagher", "name": "Bauer-Gallagher", "num_employees": 862,
     "description": "Difficult ready trip question produce produce someone.", "logo_url": None},
]

JOBS = [
    {"title": "Conservator, furniture", "salary": 110000, "equity": "0", "company_handle": "anderson-arias"},
    {"title": "Information officer", "salary": 200000, "equity": None, "company_handle": "anderson-arias"},
    {"title": "Consulting civil engineer", "salary": 60000, "equity": "0.05", "company_handle": "bauer-gallagher"},
]

def seed():
    init_db()
    db = SessionLocal()
    try:
        for data in COMPANIES:
            if db.get(Company, data["handle"]) is None:
                db.add(Company(**data))
                print(f"Created company: {data['handle']}")
        db.flush()

        for data in JOBS:
            exists = db.query(Job).filter(
                Job.title == data["title"],
                Job.company_handle == data["company_handle"]
            ).first()
            if not exists:
                db.add(Job(**data))
                print(f"Created job: {data['title']}")
        db.commit()
    finally:
        db.close()

    token = create_access_token({"sub": "admin", "is_admin": True})
    print(f"Admin bearer token: {token}")

if __name__ == "__main__":
    seed()

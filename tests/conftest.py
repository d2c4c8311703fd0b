import datetime
import os

# Must be set before config/database are imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["COOKIE_SECURE"] = "0"

import pytest
from fastapi.testclient import TestClient

from database import Base, SessionLocal, engine
from main import app
from models.fee_models import MonthlyFee
from models.masters import ClassFee
from models.students import Admission, Student
from models.system import SchoolSetting
from models.users import User
from security import hash_password
from seed import seed_superadmin

SUPERADMIN_EMAIL = "super@school.test"
SUPERADMIN_PASSWORD = "secret123"


@pytest.fixture(autouse=True)
def reset_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def superadmin(db):
    user, _ = seed_superadmin(db, "Super Admin", SUPERADMIN_EMAIL, SUPERADMIN_PASSWORD)
    return user


def make_user(db, email, role, password="password1", name="Staff User"):
    user = User(name=name, email=email, password=hash_password(password), role=role)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def login(client, email, password):
    res = client.post("/api/auth/login", json={"email": email, "password": password})
    assert res.status_code == 200, res.text
    return res


@pytest.fixture
def admin_client(client, superadmin):
    login(client, SUPERADMIN_EMAIL, SUPERADMIN_PASSWORD)
    return client


@pytest.fixture
def school_settings(db):
    setting = SchoolSetting(
        school_id="green-valley",
        school_name="Green Valley School",
        slogan="Grow with us",
        transport_fee_below3=200.0,
        transport_fee_between3and5=350.0,
        transport_fee_between5and10=None,
        transport_fee_above10=600.0,
    )
    setting.classes = [
        ClassFee(name="Class 1", tuition_fee=600.0, admission_fee=400.0),
        ClassFee(name="Class 5", tuition_fee=800.0, admission_fee=600.0),
        ClassFee(name="Class 8", tuition_fee=500.0, admission_fee=300.0),
    ]
    db.add(setting)
    db.commit()
    db.refresh(setting)
    return setting


def make_admitted_student(db, admission_date, class_enrolled="Class 1", transport_type="None", email=None):
    """Student + admission without any ledger rows."""
    student = Student(
        student_name="Asha Verma",
        date_of_birth=datetime.date(2015, 3, 2),
        gender="Female",
        phone="9876543210",
        address="12 Lake Road",
        email=email,
    )
    student.admission = Admission(
        admission_date=admission_date,
        class_enrolled=class_enrolled,
        section="A",
        academic_year="2025-2026",
        transport_type=transport_type,
    )
    db.add(student)
    db.commit()
    db.refresh(student)
    return student


def admission_payload(**overrides):
    payload = {
        "student_name": "Rohan Das",
        "date_of_birth": "2016-08-21",
        "gender": "Male",
        "phone": "9123456780",
        "address": "4 Station Road",
        "city": "Patna",
        "state": "Bihar",
        "email": "rohan.parent@example.com",
        "father_name": "Suresh Das",
        "admission_date": "2025-06-15",
        "class_enrolled": "Class 1",
        "section": "B",
        "academic_year": "2025-2026",
        "transport_type": "None",
    }
    payload.update(overrides)
    return payload


def fee_row(total, status="PENDING", paid=0.0):
    """Unsaved MonthlyFee for pure payment/summary checks."""
    return MonthlyFee(
        student_id=1,
        month=6,
        year=2025,
        tuition_fee=total,
        admission_fee=0.0,
        transport_fee=0.0,
        total_amount=total,
        paid_amount=paid,
        due_date=datetime.date(2025, 6, 1),
        status=status,
    )

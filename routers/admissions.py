"""
Admissions Router - new student + admission + fee ledger in one transaction
"""
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from database import get_db
from models.students import Admission, Student
from schemas.fees import MonthlyFeeOut
from schemas.students import AdmissionCreate, AdmissionOut, StudentOut
from services.exceptions import (
    ClassNotFound,
    DuplicateLedgerEntry,
    InvalidDate,
    SettingsNotConfigured,
    UnknownTransportTier,
)
from services.fee_ledger import parse_date
from services.fee_schedule import get_school_settings, normalize_transport_tier
from services.ledger_store import build_ledger_for_admission, persist_fee_ledger

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admissions", tags=["Admissions"])


def _full_address(data: AdmissionCreate) -> str:
    parts = [data.address]
    if data.city:
        parts.append(data.city)
    if data.state:
        parts.append(data.state)
    return ", ".join(parts)


@router.get("")
def list_admissions(db: Session = Depends(get_db)):
    admissions = db.query(Admission).options(
        joinedload(Admission.student)
    ).order_by(Admission.admission_date.desc(), Admission.id.desc()).all()

    return {
        "success": True,
        "data": [
            {
                **AdmissionOut.model_validate(a).model_dump(),
                "student_name": a.student.student_name if a.student else "-",
            }
            for a in admissions
        ],
    }


@router.post("", status_code=201)
def create_admission(data: AdmissionCreate, db: Session = Depends(get_db)):
    # 1. Validate everything before touching the database
    try:
        date_of_birth = parse_date(data.date_of_birth)
        admission_date = parse_date(data.admission_date)
    except InvalidDate:
        raise HTTPException(status_code=400, detail="Invalid date format.")

    try:
        transport_type = normalize_transport_tier(data.transport_type)
        setting = get_school_settings(db)
    except (UnknownTransportTier, SettingsNotConfigured) as e:
        raise HTTPException(status_code=400, detail=str(e))

    student = Student(
        student_name=data.student_name,
        date_of_birth=date_of_birth,
        gender=data.gender,
        email=data.email or None,
        phone=data.phone,
        address=_full_address(data),
        father_name=data.father_name,
        mother_name=data.mother_name,
        aadhaar_number=data.aadhaar_number,
        student_photo_base64=data.student_photo_base64,
        reg_no=data.reg_no,
        is_active=True,
    )
    admission = Admission(
        admission_date=admission_date,
        class_enrolled=data.class_enrolled,
        section=data.section,
        academic_year=data.academic_year,
        remarks=data.remarks,
        transport_type=transport_type,
    )

    try:
        records = build_ledger_for_admission(setting, admission)
    except ClassNotFound as e:
        raise HTTPException(status_code=400, detail=str(e))

    # 2. Student, admission and ledger are written together or not at all
    try:
        student.admission = admission
        db.add(student)
        db.flush()
        fees = persist_fee_ledger(db, student.id, records)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if "email" in str(e.orig).lower():
            raise HTTPException(status_code=409, detail="A student with this email already exists.")
        logger.warning("[admissions] constraint violation for %s: %s", data.student_name, e.orig)
        raise HTTPException(status_code=409, detail="Admission conflicts with an existing record.")
    except DuplicateLedgerEntry as e:
        db.rollback()
        raise HTTPException(status_code=409, detail=str(e))
    except SQLAlchemyError:
        db.rollback()
        logger.exception("[admissions] failed to create admission for %s", data.student_name)
        raise HTTPException(status_code=500, detail="Failed to create admission.")

    db.refresh(student)
    logger.info(
        "Admitted student %s to %s with %d fee months", student.id, admission.class_enrolled, len(fees)
    )
    return {
        "success": True,
        "data": {
            "student": StudentOut.model_validate(student),
            "admission": AdmissionOut.model_validate(student.admission),
            "monthly_fees": [MonthlyFeeOut.model_validate(f) for f in fees],
        },
    }

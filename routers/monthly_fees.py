"""
Monthly Fees Router - ledger listing, bulk generation and payment updates
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from database import get_db
from models.fee_models import MonthlyFee
from models.students import Student
from schemas.fees import LedgerGenerateRequest, MonthlyFeeOut, MonthlyFeeWithStudent, PaymentUpdate
from schemas.students import StudentBrief
from services.exceptions import (
    ClassNotFound,
    DuplicateLedgerEntry,
    InvalidPayment,
    SettingsNotConfigured,
    UnknownTransportTier,
)
from services.fee_schedule import get_school_settings
from services.ledger_store import (
    apply_payment,
    build_ledger_for_admission,
    persist_fee_ledger,
    summarize_fees,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/monthly-fees", tags=["Monthly Fees"])


def _fee_query(db: Session):
    return db.query(MonthlyFee).options(
        joinedload(MonthlyFee.student).joinedload(Student.admission)
    )


# =====================
# LIST / DETAIL
# =====================

@router.get("")
def list_monthly_fees(
    student_id: Optional[int] = None,
    year: Optional[int] = None,
    db: Session = Depends(get_db),
):
    query = _fee_query(db)
    if student_id is not None:
        query = query.filter(MonthlyFee.student_id == student_id)
        if year is not None:
            query = query.filter(MonthlyFee.year == year)

    fees = query.order_by(MonthlyFee.year, MonthlyFee.month, MonthlyFee.student_id).all()
    return {"success": True, "data": [MonthlyFeeWithStudent.model_validate(f) for f in fees]}


@router.get("/summary/{student_id}")
def student_fee_summary(student_id: int, db: Session = Depends(get_db)):
    student = db.query(Student).options(
        joinedload(Student.admission)
    ).filter(Student.id == student_id).first()
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")

    fees = db.query(MonthlyFee).filter(
        MonthlyFee.student_id == student_id
    ).order_by(MonthlyFee.year, MonthlyFee.month).all()

    return {
        "success": True,
        "data": {
            "student": StudentBrief.model_validate(student),
            "monthly_fees": [MonthlyFeeOut.model_validate(f) for f in fees],
            **summarize_fees(fees),
        },
    }


@router.get("/{fee_id}")
def get_monthly_fee(fee_id: int, db: Session = Depends(get_db)):
    fee = _fee_query(db).filter(MonthlyFee.id == fee_id).first()
    if not fee:
        raise HTTPException(status_code=404, detail="Monthly fee not found")
    return {"success": True, "data": MonthlyFeeWithStudent.model_validate(fee)}


# =====================
# BULK GENERATION
# =====================

@router.post("", status_code=201)
def generate_monthly_fees(req: LedgerGenerateRequest, db: Session = Depends(get_db)):
    """Generate the financial-year ledger for an already admitted student."""
    student = db.query(Student).options(
        joinedload(Student.admission)
    ).filter(Student.id == req.student_id).first()
    if not student or not student.admission:
        raise HTTPException(status_code=404, detail="Student or admission not found")

    if req.academic_year:
        logger.debug(
            "Ignoring academic_year=%s for student %s; financial year comes from admission date",
            req.academic_year, student.id,
        )

    try:
        setting = get_school_settings(db)
        records = build_ledger_for_admission(setting, student.admission)
    except (SettingsNotConfigured, ClassNotFound) as e:
        raise HTTPException(status_code=404, detail=str(e))
    except UnknownTransportTier as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        fees = persist_fee_ledger(db, student.id, records, skip_existing=req.skip_existing)
        db.commit()
    except DuplicateLedgerEntry as e:
        db.rollback()
        raise HTTPException(status_code=409, detail=str(e))
    except SQLAlchemyError:
        db.rollback()
        logger.exception("[monthly-fees] bulk generation failed for student %s", student.id)
        raise HTTPException(status_code=500, detail="Failed to create monthly fees")

    return {
        "success": True,
        "data": {
            "count": len(fees),
            "records": [MonthlyFeeOut.model_validate(f) for f in fees],
        },
    }


# =====================
# PAYMENT UPDATE
# =====================

@router.put("/{fee_id}")
def update_monthly_fee(fee_id: int, data: PaymentUpdate, db: Session = Depends(get_db)):
    fee = db.query(MonthlyFee).filter(MonthlyFee.id == fee_id).first()
    if not fee:
        raise HTTPException(status_code=404, detail="Record not found")

    try:
        apply_payment(fee, paid_amount=data.paid_amount, status=data.status, paid_date=data.paid_date)
        db.commit()
    except InvalidPayment as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))
    except SQLAlchemyError:
        db.rollback()
        logger.exception("[monthly-fees] payment update failed for fee %s", fee_id)
        raise HTTPException(status_code=500, detail="Failed to update monthly fee")

    fee = _fee_query(db).filter(MonthlyFee.id == fee_id).first()
    return {"success": True, "data": MonthlyFeeWithStudent.model_validate(fee)}

"""
Fee Management Router - thin layer over MonthlyFee for ad-hoc fee entries
"""
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from database import get_db
from models.fee_models import MonthlyFee
from models.students import Student
from schemas.fees import AdhocFeeCreate, MonthlyFeeOut, MonthlyFeeWithStudent
from services.exceptions import InvalidDate
from services.fee_ledger import parse_date
from services.ledger_store import upsert_adhoc_fee

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/fee-management", tags=["Fee Management"])


@router.get("")
def list_fees(db: Session = Depends(get_db)):
    fees = db.query(MonthlyFee).options(
        joinedload(MonthlyFee.student).joinedload(Student.admission)
    ).order_by(MonthlyFee.due_date.desc(), MonthlyFee.id.desc()).all()
    return {"success": True, "data": [MonthlyFeeWithStudent.model_validate(f) for f in fees]}


@router.post("", status_code=201)
def create_fee(data: AdhocFeeCreate, db: Session = Depends(get_db)):
    """Create (or reset) the fee record for the month of due_date."""
    try:
        due_date = parse_date(data.due_date)
    except InvalidDate:
        raise HTTPException(status_code=400, detail="Invalid due_date")

    student = db.query(Student).filter(Student.id == data.student_id).first()
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")

    try:
        fee = upsert_adhoc_fee(db, student.id, data.amount, due_date)
        db.commit()
        db.refresh(fee)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("[fee-management] failed to save fee for student %s", data.student_id)
        raise HTTPException(status_code=500, detail="Failed to create fee record")

    return {"success": True, "data": MonthlyFeeOut.model_validate(fee)}

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database import get_db
from models.expenses import Expense
from schemas.expenses import ExpenseCreate, ExpenseOut
from services.exceptions import InvalidDate
from services.fee_ledger import parse_date

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/expenses", tags=["Expenses"])


@router.get("")
def list_expenses(db: Session = Depends(get_db)):
    expenses = db.query(Expense).order_by(Expense.expense_date.desc(), Expense.id.desc()).all()
    return {"success": True, "data": [ExpenseOut.model_validate(e) for e in expenses]}


@router.get("/summary")
def expense_summary(db: Session = Depends(get_db)):
    """Totals per category for the dashboard chart."""
    rows = db.query(
        Expense.category, func.sum(Expense.amount)
    ).group_by(Expense.category).order_by(Expense.category).all()

    by_category = {category: float(amount or 0.0) for category, amount in rows}

    return {
        "success": True,
        "data": {
            "total": sum(by_category.values()),
            "by_category": [{"category": k, "amount": v} for k, v in by_category.items()],
        },
    }


@router.post("", status_code=201)
def create_expense(data: ExpenseCreate, db: Session = Depends(get_db)):
    try:
        expense_date = parse_date(data.expense_date)
    except InvalidDate:
        raise HTTPException(status_code=400, detail="Invalid date format for expense_date.")

    expense = Expense(
        title=data.title or data.category,
        description=data.description,
        category=data.category,
        amount=data.amount,
        expense_date=expense_date,
    )
    try:
        db.add(expense)
        db.commit()
        db.refresh(expense)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("[expenses] failed to create expense %s", data.category)
        raise HTTPException(status_code=500, detail="Failed to create expense.")

    return {"success": True, "data": ExpenseOut.model_validate(expense)}

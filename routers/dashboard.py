from fastapi import APIRouter, Depends
from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from database import get_db
from models.expenses import Expense
from models.fee_models import MonthlyFee
from models.students import Student
from models.system import SchoolSetting
from models.users import User
from permissions import menu_for_role
from routers.auth import get_current_user
from services.fee_schedule import transport_fees_payload
from services.ledger_store import summarize_fees

router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"])


@router.get("/school-data")
def school_data(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """Header/sidebar data: who is logged in, which school, and the menu for the role."""
    setting = db.query(SchoolSetting).options(
        joinedload(SchoolSetting.classes)
    ).order_by(SchoolSetting.id).first()

    data = {
        "user_name": user.name,
        "user_role": user.role,
        "menu": menu_for_role(user.role),
        "school_name": None,
        "slogan": None,
        "logo_base64": None,
        "school_id": None,
        "classes": [],
        "transport_fees": {"below3": 0, "between3and5": 0, "between5and10": 0, "above10": 0},
    }
    if setting:
        data.update({
            "school_name": setting.school_name,
            "slogan": setting.slogan,
            "logo_base64": setting.logo_base64,
            "school_id": setting.school_id,
            "classes": [
                {
                    "id": c.id,
                    "name": c.name,
                    "tuition_fee": c.tuition_fee,
                    "admission_fee": c.admission_fee,
                }
                for c in setting.classes
            ],
            "transport_fees": transport_fees_payload(setting),
        })
    return data


@router.get("/stats")
def dashboard_stats(db: Session = Depends(get_db)):
    # 1. Basic Counts
    total_students = db.query(Student).filter(Student.is_active == True).count()

    # 2. Fee position across every ledger row
    fees = db.query(MonthlyFee).all()
    fee_totals = summarize_fees(fees)

    # 3. Expenses
    total_expenses = db.query(func.sum(Expense.amount)).scalar() or 0.0

    return {
        "success": True,
        "data": {
            "total_students": total_students,
            "fees": fee_totals,
            "total_expenses": float(total_expenses),
        },
    }

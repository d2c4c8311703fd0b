from pydantic import BaseModel, Field
from datetime import date
from typing import Optional

from schemas.students import StudentBrief


class MonthlyFeeOut(BaseModel):
    id: int
    student_id: int
    month: int
    year: int
    tuition_fee: float
    admission_fee: float
    transport_fee: float
    total_amount: float
    paid_amount: float
    due_date: date
    paid_date: Optional[date] = None
    status: str

    class Config:
        from_attributes = True


class MonthlyFeeWithStudent(MonthlyFeeOut):
    student: Optional[StudentBrief] = None


# Bulk generation for an admitted student
class LedgerGenerateRequest(BaseModel):
    student_id: int
    academic_year: Optional[str] = None  # accepted, the financial year comes from the admission date
    skip_existing: bool = False


class PaymentUpdate(BaseModel):
    paid_amount: Optional[float] = None
    status: Optional[str] = None
    paid_date: Optional[date] = None


class AdhocFeeCreate(BaseModel):
    student_id: int
    amount: float = Field(..., gt=0)
    due_date: str
    remarks: Optional[str] = None

from pydantic import BaseModel, Field
from datetime import date
from typing import Optional


class ExpenseCreate(BaseModel):
    title: Optional[str] = None  # falls back to category
    description: Optional[str] = None
    category: str = Field(..., min_length=1)
    amount: float = Field(..., gt=0)
    expense_date: str = Field(..., min_length=1)


class ExpenseOut(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    category: str
    amount: float
    expense_date: date

    class Config:
        from_attributes = True

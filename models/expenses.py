from sqlalchemy import Column, Integer, String, Float, Date, DateTime
from sqlalchemy.sql import func
from database import Base


class Expense(Base):
    __tablename__ = "expenses"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    description = Column(String(500), nullable=True)
    category = Column(String(100), nullable=False)  # Salary, Utilities, Maintenance...
    amount = Column(Float, default=0.0)
    expense_date = Column(Date, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
